"""A tiny statement language built from assignment and print commands."""
from abc import ABC, abstractmethod
from typing import List

from pattern_catalogue.patterns.behavioral.interpreter.expressions import Context, Expression


class Command(ABC):
    @abstractmethod
    def execute(self, context: Context) -> None:
        pass


class AssignCommand(Command):
    def __init__(self, name: str, expression: Expression):
        self.name = name
        self.expression = expression

    def execute(self, context: Context) -> None:
        print(f"Executing: {self.name} = {self.expression}")
        context.set_variable(self.name, self.expression.interpret(context))


class PrintCommand(Command):
    def __init__(self, expression: Expression):
        self.expression = expression

    def execute(self, context: Context) -> None:
        print(f"Executing: print {self.expression}")
        print(f"Output: {self.expression.interpret(context)}")


class Program:
    """Runs its commands in order against one context."""

    def __init__(self):
        self.commands: List[Command] = []

    def add(self, command: Command) -> "Program":
        self.commands.append(command)
        return self

    def run(self, context: Context) -> None:
        print("Running program:")
        for command in self.commands:
            command.execute(context)
