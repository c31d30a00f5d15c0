"""Cursor and editor state values."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .document import Document


@dataclass(frozen=True, slots=True)
class CursorPosition:
    """Desired column ``x`` on line ``y``.

    ``x`` may run past the end of line ``y``; it is the column the caret
    wants to be in, kept across vertical moves through shorter lines.
    """

    x: int = 0
    y: int = 0


@dataclass(frozen=True, slots=True)
class EditorState:
    """Document plus cursor. Never mutated; every edit yields a new value."""

    document: Document = field(default_factory=Document)
    cursor: CursorPosition = field(default_factory=CursorPosition)

    @classmethod
    def empty(cls) -> "EditorState":
        return cls()

    @classmethod
    def from_text(
        cls, text: str, *, cursor: Optional[CursorPosition] = None
    ) -> "EditorState":
        return cls(document=Document(text), cursor=cursor or CursorPosition())

    @property
    def text(self) -> str:
        return self.document.text

    def with_cursor(self, cursor: CursorPosition) -> "EditorState":
        return EditorState(document=self.document, cursor=cursor)
