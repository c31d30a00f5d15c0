"""Validation helpers shared across buffer services."""

from __future__ import annotations

from .state import CursorPosition, EditorState


class StateValidationError(RuntimeError):
    """Raised when a caller hands the engine a structurally invalid state."""

    def __init__(self, message: str, *, cursor: CursorPosition | None = None) -> None:
        super().__init__(message)
        self.cursor = cursor


def ensure_state(state: EditorState) -> EditorState:
    cursor = state.cursor
    if cursor.y < 0 or cursor.y >= state.document.line_count:
        raise StateValidationError("Line index out of range", cursor=cursor)
    if cursor.x < 0:
        raise StateValidationError("Column cannot be negative", cursor=cursor)
    return state
