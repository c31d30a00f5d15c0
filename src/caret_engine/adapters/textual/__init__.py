"""Textual host adapter for caret_engine sessions."""

from .controller import (
    EditorMirror,
    TextualEditorAdapter,
    TextualUIHooks,
    render_with_caret,
)

__all__ = [
    "EditorMirror",
    "TextualEditorAdapter",
    "TextualUIHooks",
    "render_with_caret",
]
