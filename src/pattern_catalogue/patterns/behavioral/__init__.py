"""Behavioural patterns - Chain of Responsibility, Command, Interpreter, Iterator,
Mediator, Memento, MVC, Null Object, Observer, State, Strategy, Template Method, Visitor."""
