"""Single-writer session holding the authoritative editor state."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional

from caret_engine.actions import Action, apply
from caret_engine.buffer import (
    CursorPosition,
    EditorState,
    ensure_state,
    to_linear_offset,
)
from caret_engine.runtime import telemetry


@dataclass(frozen=True, slots=True)
class StateChange:
    previous: EditorState
    current: EditorState
    action: Action


@dataclass(frozen=True, slots=True)
class SessionView:
    """Host-friendly snapshot of the current state."""

    version: int
    text: str
    cursor: CursorPosition
    offset: int


Subscriber = Callable[[StateChange], None]


class EditorSession:
    """Applies actions one at a time and publishes each resulting state.

    The current state is only ever replaced, never mutated, so a subscriber
    holding on to ``previous`` keeps a valid value.
    """

    def __init__(
        self, state: Optional[EditorState] = None, *, name: str = "default"
    ) -> None:
        self.name = name
        self._state = ensure_state(state or EditorState.empty())
        self._version = 0
        self._subscribers: List[Subscriber] = []

    @classmethod
    def from_text(
        cls,
        text: str,
        *,
        cursor: Optional[CursorPosition] = None,
        name: str = "default",
    ) -> "EditorSession":
        return cls(EditorState.from_text(text, cursor=cursor), name=name)

    @property
    def state(self) -> EditorState:
        return self._state

    @property
    def text(self) -> str:
        return self._state.text

    @property
    def cursor(self) -> CursorPosition:
        return self._state.cursor

    @property
    def offset(self) -> int:
        return to_linear_offset(self._state)

    @property
    def version(self) -> int:
        return self._version

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register ``callback``; the returned callable unsubscribes it."""

        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def dispatch(self, action: Action) -> EditorState:
        previous = self._state
        with telemetry.span(
            f"session::{type(action).__name__}",
            component="session",
            metadata={"session": self.name, "version": self._version},
        ):
            current = apply(previous, action)

        if current is previous:
            telemetry.record_event(
                "session.noop",
                level="debug",
                data={"session": self.name, "action": action},
            )
            return current

        self._state = current
        self._version += 1
        change = StateChange(previous=previous, current=current, action=action)
        for callback in list(self._subscribers):
            callback(change)
        return current

    def dispatch_many(self, actions: Iterable[Action]) -> EditorState:
        for action in actions:
            self.dispatch(action)
        return self._state

    def snapshot(self) -> SessionView:
        return SessionView(
            version=self._version,
            text=self._state.text,
            cursor=self._state.cursor,
            offset=self.offset,
        )


__all__ = ["EditorSession", "SessionView", "StateChange", "Subscriber"]
