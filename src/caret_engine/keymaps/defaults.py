"""Built-in bindings matching a conventional plain-text editor."""

from __future__ import annotations

from caret_engine.actions import (
    Backspace,
    Delete,
    Direction,
    End,
    Home,
    Insert,
    MoveHorizontal,
    MoveVertical,
    Newline,
)

from .models import KeyBinding
from .registry import KeymapRegistry

CTRL = ("ctrl",)

DEFAULT_BINDINGS: tuple[KeyBinding, ...] = (
    KeyBinding("edit.newline", "enter", Newline(), description="Split line"),
    KeyBinding("edit.tab", "tab", Insert("\t"), description="Insert a tab"),
    KeyBinding("edit.backspace", "backspace", Backspace()),
    KeyBinding(
        "edit.backspace_word",
        "backspace",
        Backspace(word=True),
        modifiers=CTRL,
        description="Delete the word before the caret",
    ),
    KeyBinding("edit.delete", "delete", Delete()),
    KeyBinding(
        "edit.delete_word",
        "delete",
        Delete(word=True),
        modifiers=CTRL,
        description="Delete the word after the caret",
    ),
    KeyBinding("move.left", "left", MoveHorizontal(Direction.BACKWARD)),
    KeyBinding("move.right", "right", MoveHorizontal(Direction.FORWARD)),
    KeyBinding(
        "move.word_left",
        "left",
        MoveHorizontal(Direction.BACKWARD, word=True),
        modifiers=CTRL,
    ),
    KeyBinding(
        "move.word_right",
        "right",
        MoveHorizontal(Direction.FORWARD, word=True),
        modifiers=CTRL,
    ),
    KeyBinding("move.up", "up", MoveVertical(-1)),
    KeyBinding("move.down", "down", MoveVertical(1)),
    KeyBinding("move.home", "home", Home(), description="Smart line start"),
    KeyBinding("move.text_start", "home", Home(of_text=True), modifiers=CTRL),
    KeyBinding("move.end", "end", End()),
    KeyBinding("move.text_end", "end", End(of_text=True), modifiers=CTRL),
)


def load_default_keymaps(registry: KeymapRegistry) -> KeymapRegistry:
    for binding in DEFAULT_BINDINGS:
        registry.register_binding(binding, replace=True)
    return registry


__all__ = ["DEFAULT_BINDINGS", "load_default_keymaps"]
