from __future__ import annotations

from typing import List

import pytest

from caret_engine.actions import Backspace, Insert, MoveVertical, Newline
from caret_engine.buffer import CursorPosition, StateValidationError
from caret_engine.session import EditorSession, StateChange


def test_dispatch_replaces_state_and_notifies() -> None:
    session = EditorSession()
    changes: List[StateChange] = []
    session.subscribe(changes.append)
    before = session.state

    after = session.dispatch(Insert("hi"))

    assert session.state is after
    assert session.version == 1
    assert len(changes) == 1
    assert changes[0].previous is before
    assert changes[0].current is after
    assert changes[0].action == Insert("hi")
    assert before.text == ""


def test_noop_dispatch_is_not_published() -> None:
    session = EditorSession.from_text("abc")
    changes: List[StateChange] = []
    session.subscribe(changes.append)
    before = session.state

    result = session.dispatch(Backspace())

    assert result is before
    assert session.version == 0
    assert changes == []


def test_unsubscribe_stops_notifications() -> None:
    session = EditorSession()
    changes: List[StateChange] = []
    unsubscribe = session.subscribe(changes.append)

    session.dispatch(Insert("a"))
    unsubscribe()
    session.dispatch(Insert("b"))

    assert len(changes) == 1
    assert session.text == "ab"


def test_dispatch_many_runs_in_order() -> None:
    session = EditorSession(name="scratch")

    state = session.dispatch_many([Insert("hi"), Newline(), Insert("there")])

    assert state.text == "hi\nthere"
    assert session.cursor == CursorPosition(5, 1)
    assert session.version == 3


def test_snapshot_reports_effective_offset() -> None:
    session = EditorSession.from_text("ab\nc", cursor=CursorPosition(2, 0))

    session.dispatch(MoveVertical(1))
    view = session.snapshot()

    assert view.text == "ab\nc"
    assert view.cursor == CursorPosition(2, 1)
    assert view.offset == 4
    assert view.version == 1


def test_session_rejects_invalid_initial_state() -> None:
    with pytest.raises(StateValidationError):
        EditorSession.from_text("abc", cursor=CursorPosition(-1, 0))

    with pytest.raises(StateValidationError):
        EditorSession.from_text("abc", cursor=CursorPosition(0, 3))
