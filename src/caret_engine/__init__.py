"""UI-agnostic plain-text editing core."""

from .actions import apply
from .buffer import (
    CursorPosition,
    Document,
    EditorState,
    to_cursor_position,
    to_linear_offset,
)
from .session import EditorSession

__all__ = [
    "adapters",
    "actions",
    "buffer",
    "keymaps",
    "runtime",
    "session",
    "apply",
    "to_cursor_position",
    "to_linear_offset",
    "CursorPosition",
    "Document",
    "EditorState",
    "EditorSession",
]

__version__ = "0.1.0"
