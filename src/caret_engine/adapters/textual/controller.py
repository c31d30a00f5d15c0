"""Minimal Textual adapter that wires an EditorSession into UI callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional

from caret_engine.actions import Action, SetCaret
from caret_engine.buffer import (
    CursorPosition,
    EditorState,
    effective_column,
    to_linear_offset,
)
from caret_engine.keymaps import KeymapResolver, KeyStroke
from caret_engine.session import EditorSession, StateChange

DEFAULT_CARET = "|"


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


def render_with_caret(state: EditorState, caret: str = DEFAULT_CARET) -> str:
    """Document text with ``caret`` inserted at the effective cursor offset."""

    offset = to_linear_offset(state)
    return state.text[:offset] + caret + state.text[offset:]


@dataclass(frozen=True, slots=True)
class EditorMirror:
    """What the host needs to paint one frame."""

    text: str
    cursor: CursorPosition
    offset: int
    rendered: str


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_buffer: Callable[[EditorMirror], None]
    update_status: Callable[[str], None] = _noop
    # Optional realtime log callback a host may use to surface debug lines
    log: Callable[[str], None] = _noop


class TextualEditorAdapter:
    """Bridges host key/paste/pointer input to an ``EditorSession``."""

    def __init__(
        self,
        session: EditorSession,
        hooks: TextualUIHooks,
        *,
        resolver: Optional[KeymapResolver] = None,
        caret: str = DEFAULT_CARET,
    ) -> None:
        self.session = session
        self.hooks = hooks
        self.resolver = resolver or KeymapResolver()
        self.caret = caret
        self._unsubscribe = session.subscribe(self._on_change)
        self._refresh_buffer()

    def close(self) -> None:
        self._unsubscribe()

    def handle_textual_key(
        self,
        key: str,
        *,
        text: Optional[str] = None,
        modifiers: Iterable[str] = (),
    ) -> Optional[Action]:
        """Decode a Textual key and dispatch the resulting action, if any."""

        parsed = KeyStroke.parse(key, text=text)
        stroke = KeyStroke(
            parsed.key, parsed.modifiers + tuple(modifiers), parsed.text
        )
        action = self.resolver.resolve(stroke)
        self._log_state("key ->", token=stroke.token, action=action)
        if action is not None:
            self._dispatch(action)
        return action

    def handle_paste(self, payload: str) -> Action:
        action = self.resolver.resolve_paste(payload)
        self._log_state("paste ->", length=len(payload))
        self._dispatch(action)
        return action

    def set_caret(self, offset: int) -> Action:
        """Place the caret from an offset the host computed by hit-testing."""

        action = SetCaret(offset)
        self._dispatch(action)
        return action

    def mirror(self) -> EditorMirror:
        state = self.session.state
        return EditorMirror(
            text=state.text,
            cursor=state.cursor,
            offset=to_linear_offset(state),
            rendered=render_with_caret(state, self.caret),
        )

    def _dispatch(self, action: Action) -> None:
        self.session.dispatch(action)
        self.hooks.update_status(self._status_line())

    def _on_change(self, change: StateChange) -> None:
        self._log_state("state <-", action=change.action)
        self._refresh_buffer()

    def _refresh_buffer(self) -> None:
        self.hooks.update_buffer(self.mirror())

    def _status_line(self) -> str:
        state = self.session.state
        column = effective_column(state.cursor, state.document)
        return f"Ln {state.cursor.y + 1}, Col {column + 1}"

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        return {
            "session": self.session.name,
            "version": self.session.version,
            "cursor": self.session.cursor,
            "offset": self.session.offset,
        }


__all__ = [
    "DEFAULT_CARET",
    "EditorMirror",
    "TextualEditorAdapter",
    "TextualUIHooks",
    "render_with_caret",
]
