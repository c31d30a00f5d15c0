"""Document, cursor and position primitives."""

from .document import LINE_SEPARATOR, Document
from .positions import (
    clamp,
    effective_column,
    to_cursor_position,
    to_linear_offset,
)
from .state import CursorPosition, EditorState
from .validation import StateValidationError, ensure_state
from .words import CharClass, Direction, classify_char, scan_word_unit

__all__ = [
    "LINE_SEPARATOR",
    "Document",
    "CursorPosition",
    "EditorState",
    "StateValidationError",
    "ensure_state",
    "clamp",
    "effective_column",
    "to_cursor_position",
    "to_linear_offset",
    "CharClass",
    "Direction",
    "classify_char",
    "scan_word_unit",
]
