"""Memento pattern - capture and restore state without exposing it."""
from .editor import EditorMemento, TextEditor, UndoRedoManager
from .game import Game, GameMemento
from .originator import Caretaker, Memento, Originator

__all__ = [
    "Caretaker",
    "EditorMemento",
    "Game",
    "GameMemento",
    "Memento",
    "Originator",
    "TextEditor",
    "UndoRedoManager",
]
