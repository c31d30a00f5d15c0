"""Dataclasses describing the closed set of editing actions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from caret_engine.buffer.words import Direction


@dataclass(frozen=True, slots=True)
class Insert:
    """Insert ``text`` at the caret. Paste payloads arrive here too."""

    text: str


@dataclass(frozen=True, slots=True)
class Backspace:
    word: bool = False


@dataclass(frozen=True, slots=True)
class Delete:
    word: bool = False


@dataclass(frozen=True, slots=True)
class Newline:
    pass


@dataclass(frozen=True, slots=True)
class MoveHorizontal:
    direction: Direction
    word: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.direction, Direction):
            object.__setattr__(self, "direction", Direction(self.direction))


@dataclass(frozen=True, slots=True)
class MoveVertical:
    by: int


@dataclass(frozen=True, slots=True)
class Home:
    of_text: bool = False


@dataclass(frozen=True, slots=True)
class End:
    of_text: bool = False


@dataclass(frozen=True, slots=True)
class SetCaret:
    """Place the caret at a linear offset computed by a host hit-test."""

    offset: int


Action = Union[
    Insert,
    Backspace,
    Delete,
    Newline,
    MoveHorizontal,
    MoveVertical,
    Home,
    End,
    SetCaret,
]


__all__ = [
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
