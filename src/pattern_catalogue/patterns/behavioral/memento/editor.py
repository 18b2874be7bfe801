"""Text editor originator with a linear undo/redo history."""
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from pattern_catalogue.infrastructure.logging.logger import get_logger

DEFAULT_FILENAME = "untitled.txt"


class EditorMemento(BaseModel):
    model_config = ConfigDict(frozen=True)

    content: str
    cursor_position: int
    filename: str
    timestamp: datetime = Field(default_factory=datetime.now)


class TextEditor:
    def __init__(self):
        self._logger = get_logger(__name__)
        self.content = ""
        self.cursor_position = 0
        self.filename = DEFAULT_FILENAME

    def set_content(self, content: str) -> None:
        self.content = content
        self.cursor_position = len(content)
        print(f'Content set to: "{content}"')

    def append_text(self, text: str) -> None:
        self.content += text
        self.cursor_position += len(text)
        print(f'Appended: "{text}" -> Content: "{self.content}"')

    def set_filename(self, filename: str) -> None:
        self.filename = filename
        print(f"Filename changed to: {filename}")

    def set_cursor_position(self, position: int) -> bool:
        if 0 <= position <= len(self.content):
            self.cursor_position = position
            print(f"Cursor moved to position {position}")
            return True
        print(f"Invalid cursor position: {position}")
        return False

    def show_status(self) -> None:
        print("Editor Status:")
        print(f"  File: {self.filename}")
        print(f'  Content: "{self.content}"')
        print(f"  Length: {len(self.content)} characters")
        print(f"  Cursor at: {self.cursor_position}")
        print("---")

    def create_memento(self) -> EditorMemento:
        print("Creating memento (saving state)")
        return EditorMemento(
            content=self.content,
            cursor_position=self.cursor_position,
            filename=self.filename,
        )

    def restore(self, memento: EditorMemento) -> None:
        print("Restoring from memento")
        self._logger.debug(f"Restoring snapshot taken at {memento.timestamp.isoformat()}")
        self.content = memento.content
        self.cursor_position = memento.cursor_position
        self.filename = memento.filename
        print("State restored!")


class UndoRedoManager:
    """
    Linear history with a cursor.

    Saving while the cursor is behind the newest entry discards the redo branch.
    Undo and redo return None and print a diagnostic when they cannot move.
    """

    def __init__(self):
        self._states: List[EditorMemento] = []
        self._current = -1

    @property
    def current_index(self) -> int:
        return self._current

    def __len__(self) -> int:
        return len(self._states)

    def save_state(self, memento: EditorMemento) -> None:
        del self._states[self._current + 1:]
        self._states.append(memento)
        self._current = len(self._states) - 1
        print(f"State saved (total states: {len(self._states)})")

    def can_undo(self) -> bool:
        return self._current > 0

    def can_redo(self) -> bool:
        return self._current < len(self._states) - 1

    def undo(self) -> Optional[EditorMemento]:
        if not self.can_undo():
            print("Cannot undo: No previous states")
            return None
        self._current -= 1
        print(f"Undo: Going back to state {self._current}")
        return self._states[self._current]

    def redo(self) -> Optional[EditorMemento]:
        if not self.can_redo():
            print("Cannot redo: No forward states")
            return None
        self._current += 1
        print(f"Redo: Going forward to state {self._current}")
        return self._states[self._current]

    def show_history(self) -> None:
        print("Undo/Redo History:")
        for index, state in enumerate(self._states):
            marker = " <-- CURRENT" if index == self._current else ""
            print(f'  {index}: "{state.content}" (cursor: {state.cursor_position}){marker}')
        print("---")
