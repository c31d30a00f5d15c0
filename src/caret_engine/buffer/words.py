"""Word-unit scanning shared by word-wise motion and deletion.

A word unit is measured on the run of characters leading away from a point:
``text[offset:]`` when scanning forward, ``text[:offset]`` reversed when
scanning backward. The first rule that applies decides the unit:

1. two or more whitespace characters: the whole whitespace run;
2. an optional single space, then word characters: space plus word run;
3. an optional single space, then non-word characters: space plus the
   non-word run (whitespace is non-word here, so a lone space lands here);
4. nothing left: zero.
"""

from __future__ import annotations

import enum
from typing import AbstractSet, Sequence

SINGLE_SPACE = " "


class Direction(enum.Enum):
    FORWARD = "forward"
    BACKWARD = "backward"

    @property
    def sign(self) -> int:
        return 1 if self is Direction.FORWARD else -1


class CharClass(enum.Enum):
    WORD = "word"
    SPACE = "space"
    OTHER = "other"


def is_word_char(ch: str) -> bool:
    return ch.isalnum() or ch == "_"


def classify_char(ch: str) -> CharClass:
    if is_word_char(ch):
        return CharClass.WORD
    if ch.isspace():
        return CharClass.SPACE
    return CharClass.OTHER


NON_WORD = frozenset({CharClass.SPACE, CharClass.OTHER})


def _run_length(
    classes: Sequence[CharClass], start: int, wanted: AbstractSet[CharClass]
) -> int:
    end = start
    while end < len(classes) and classes[end] in wanted:
        end += 1
    return end - start


def measure_unit(run: str) -> int:
    """Length of the word unit at the head of ``run``."""

    classes = [classify_char(ch) for ch in run]
    if not classes:
        return 0
    if classes[:2] == [CharClass.SPACE, CharClass.SPACE]:
        return _run_length(classes, 0, {CharClass.SPACE})

    lead = 1 if run[0] == SINGLE_SPACE and len(run) > 1 else 0
    if classes[lead] is CharClass.WORD:
        return lead + _run_length(classes, lead, {CharClass.WORD})
    return lead + _run_length(classes, lead, NON_WORD)


def scan_run(text: str, offset: int, direction: Direction) -> str:
    """Characters leading away from ``offset``, nearest first."""

    if direction is Direction.FORWARD:
        return text[offset:]
    return text[:offset][::-1]


def scan_word_unit(text: str, offset: int, direction: Direction) -> int:
    return measure_unit(scan_run(text, offset, direction))


__all__ = [
    "CharClass",
    "Direction",
    "classify_char",
    "is_word_char",
    "measure_unit",
    "scan_run",
    "scan_word_unit",
]
