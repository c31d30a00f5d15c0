from __future__ import annotations

import pytest

from caret_engine.buffer import words
from caret_engine.buffer.words import (
    CharClass,
    Direction,
    classify_char,
    measure_unit,
    scan_word_unit,
)


@pytest.mark.parametrize(
    ("run", "expected"),
    [
        ("", 0),
        ("foo  bar", 3),
        ("  bar", 2),
        (" \nbar", 2),
        ("\n\nx", 2),
        (" bar baz", 4),
        ("foo_bar9 x", 8),
        (" .,x", 3),
        ("..  x", 4),
        (" ", 1),
        (" x", 2),
        (".", 1),
        ("\tfoo", 1),
        ("é1 z", 2),
    ],
)
def test_measure_unit_precedence(run: str, expected: int) -> None:
    assert measure_unit(run) == expected


def test_scan_forward_reads_text_after_offset() -> None:
    assert scan_word_unit("foo bar", 3, Direction.FORWARD) == 4
    assert scan_word_unit("foo bar", 7, Direction.FORWARD) == 0


def test_scan_backward_reads_reversed_prefix() -> None:
    assert scan_word_unit("foo bar", 7, Direction.BACKWARD) == 3
    assert scan_word_unit("foo bar", 4, Direction.BACKWARD) == 4
    assert scan_word_unit("foo  ", 5, Direction.BACKWARD) == 2
    assert scan_word_unit("foo", 0, Direction.BACKWARD) == 0


def test_classify_char() -> None:
    assert classify_char("a") is CharClass.WORD
    assert classify_char("7") is CharClass.WORD
    assert classify_char("_") is CharClass.WORD
    assert classify_char(" ") is CharClass.SPACE
    assert classify_char("\n") is CharClass.SPACE
    assert classify_char("-") is CharClass.OTHER


def test_direction_sign() -> None:
    assert Direction.FORWARD.sign == 1
    assert Direction.BACKWARD.sign == -1


def test_measure_unit_follows_character_classes(monkeypatch: pytest.MonkeyPatch) -> None:
    def hyphen_is_word(ch: str) -> CharClass:
        if ch == "-":
            return CharClass.WORD
        return classify_char(ch)

    monkeypatch.setattr(words, "classify_char", hyphen_is_word)

    assert measure_unit("foo-bar baz") == 7
    assert measure_unit(" -x.") == 3
