"""Conversion between linear offsets and (column, line) cursors."""

from __future__ import annotations

from .document import LINE_SEPARATOR, Document
from .state import CursorPosition, EditorState
from .validation import ensure_state


def clamp(low: int, value: int, high: int) -> int:
    return max(low, min(high, value))


def effective_column(cursor: CursorPosition, document: Document) -> int:
    """Desired column clamped to the length of the cursor's line."""

    return min(cursor.x, len(document.get_line(cursor.y)))


def to_linear_offset(state: EditorState) -> int:
    """Number of characters preceding the cursor's effective position.

    This is the only place a sticky column is turned into a concrete
    location; everything else works on the offset returned here. Raises
    ``StateValidationError`` when the cursor does not fit the document.
    """

    ensure_state(state)
    lines = state.document.lines
    y = state.cursor.y
    preceding = sum(len(line) + 1 for line in lines[:y])
    return preceding + min(state.cursor.x, len(lines[y]))


def to_cursor_position(offset: int, document: Document) -> CursorPosition:
    """Cursor for ``offset``; the result never carries a sticky overshoot."""

    offset = clamp(0, offset, len(document))
    pieces = document.text[:offset].split(LINE_SEPARATOR)
    return CursorPosition(x=len(pieces[-1]), y=len(pieces) - 1)


__all__ = [
    "clamp",
    "effective_column",
    "to_cursor_position",
    "to_linear_offset",
]
