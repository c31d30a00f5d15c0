"""Editing actions and the engine that applies them."""

from .engine import apply
from .models import (
    Action,
    Backspace,
    Delete,
    Direction,
    End,
    Home,
    Insert,
    MoveHorizontal,
    MoveVertical,
    Newline,
    SetCaret,
)

__all__ = [
    "apply",
    "Action",
    "Backspace",
    "Delete",
    "Direction",
    "End",
    "Home",
    "Insert",
    "MoveHorizontal",
    "MoveVertical",
    "Newline",
    "SetCaret",
]
