"""Memento demo - stack caretaker, editor undo/redo, game checkpoints."""
import sys

from pattern_catalogue.domain.base.exceptions import EmptyHistoryError
from pattern_catalogue.patterns.behavioral.memento.editor import TextEditor, UndoRedoManager
from pattern_catalogue.patterns.behavioral.memento.game import Game
from pattern_catalogue.patterns.behavioral.memento.originator import Caretaker, Originator


def run_originator() -> None:
    caretaker = Caretaker()
    originator = Originator()
    originator.set_state("state1")
    caretaker.push(originator.create_memento())
    originator.set_state("state2")
    caretaker.push(originator.create_memento())
    originator.set_memento(caretaker.pop())
    originator.set_memento(caretaker.pop())
    try:
        originator.set_memento(caretaker.pop())
    except EmptyHistoryError as e:
        print(f"Caretaker: {e}")


def run_editor() -> None:
    print("\n=== Memento Pattern Demo - Text Editor with Undo/Redo ===\n")
    editor = TextEditor()
    history = UndoRedoManager()

    print("=== Initial State ===")
    editor.show_status()
    history.save_state(editor.create_memento())

    print("=== Making Changes ===")
    editor.set_content("Hello World")
    history.save_state(editor.create_memento())
    editor.append_text("!")
    history.save_state(editor.create_memento())
    editor.set_filename("greeting.txt")
    history.save_state(editor.create_memento())
    editor.append_text(" How are you?")
    history.save_state(editor.create_memento())

    editor.show_status()
    history.show_history()

    print("=== Testing Undo Operations ===")
    for _ in range(2):
        memento = history.undo()
        if memento is not None:
            editor.restore(memento)
            editor.show_status()
    history.show_history()

    print("=== Testing Redo Operations ===")
    memento = history.redo()
    if memento is not None:
        editor.restore(memento)
        editor.show_status()

    print("=== Making New Change After Undo ===")
    editor.append_text(" [MODIFIED]")
    history.save_state(editor.create_memento())
    history.show_history()


def run_game() -> None:
    print("\n=== Game Save/Load Example ===")
    game = Game()

    print("Initial game state:")
    checkpoint = game.save()

    game.level = 2
    game.score = 1500
    game.x = 10
    game.y = 5
    print("\nAfter playing:")
    game.save()

    game.lives -= 1
    print("\nPlayer died! Restoring checkpoint:")
    game.restore(checkpoint)


def main() -> int:
    run_originator()
    run_editor()
    run_game()
    return 0


if __name__ == "__main__":
    sys.exit(main())
