"""State-transition function mapping (state, action) to the next state."""

from __future__ import annotations

from typing import Callable, Dict, Type

from caret_engine.buffer.document import LINE_SEPARATOR
from caret_engine.buffer.positions import (
    clamp,
    effective_column,
    to_cursor_position,
    to_linear_offset,
)
from caret_engine.buffer.state import CursorPosition, EditorState
from caret_engine.buffer.validation import ensure_state
from caret_engine.buffer.words import Direction, scan_word_unit

from .models import (
    Action,
    Backspace,
    Delete,
    End,
    Home,
    Insert,
    MoveHorizontal,
    MoveVertical,
    Newline,
    SetCaret,
)

CARRIAGE_RETURN = "\r"

Handler = Callable[..., EditorState]


def _step(text: str, offset: int, direction: Direction, word: bool) -> int:
    if not word:
        return 1
    return scan_word_unit(text, offset, direction)


def _insert(state: EditorState, action: Insert, offset: int) -> EditorState:
    text = action.text.replace(CARRIAGE_RETURN, "")
    document = state.document.splice(offset, offset, text)
    return EditorState(
        document=document,
        cursor=to_cursor_position(offset + len(text), document),
    )


def _backspace(state: EditorState, action: Backspace, offset: int) -> EditorState:
    if offset == 0:
        return state
    length = min(_step(state.text, offset, Direction.BACKWARD, action.word), offset)
    return EditorState(
        document=state.document.splice(offset - length, offset),
        cursor=to_cursor_position(offset - length, state.document),
    )


def _delete(state: EditorState, action: Delete, offset: int) -> EditorState:
    # Forward deletion leaves the cursor value as it was.
    if offset == len(state.document):
        return state
    length = _step(state.text, offset, Direction.FORWARD, action.word)
    return EditorState(
        document=state.document.splice(offset, offset + length),
        cursor=state.cursor,
    )


def _newline(state: EditorState, action: Newline, offset: int) -> EditorState:
    del action
    return EditorState(
        document=state.document.splice(offset, offset, LINE_SEPARATOR),
        cursor=CursorPosition(x=0, y=state.cursor.y + 1),
    )


def _move_horizontal(
    state: EditorState, action: MoveHorizontal, offset: int
) -> EditorState:
    length = _step(state.text, offset, action.direction, action.word)
    target = clamp(0, offset + action.direction.sign * length, len(state.document))
    return state.with_cursor(to_cursor_position(target, state.document))


def _move_vertical(
    state: EditorState, action: MoveVertical, offset: int
) -> EditorState:
    del offset
    y = clamp(0, state.cursor.y + action.by, state.document.line_count - 1)
    return state.with_cursor(CursorPosition(x=state.cursor.x, y=y))


def _indent_width(line: str) -> int:
    stripped = line.lstrip()
    return len(line) - len(stripped) if stripped else 0


def _home(state: EditorState, action: Home, offset: int) -> EditorState:
    del offset
    if action.of_text:
        return state.with_cursor(CursorPosition(0, 0))
    y = state.cursor.y
    indent = _indent_width(state.document.get_line(y))
    current = effective_column(state.cursor, state.document)
    x = 0 if current == indent else indent
    return state.with_cursor(CursorPosition(x=x, y=y))


def _end(state: EditorState, action: End, offset: int) -> EditorState:
    del offset
    if action.of_text:
        end = to_cursor_position(len(state.document), state.document)
        return state.with_cursor(end)
    y = state.cursor.y
    return state.with_cursor(CursorPosition(x=len(state.document.get_line(y)), y=y))


def _set_caret(state: EditorState, action: SetCaret, offset: int) -> EditorState:
    del offset
    return state.with_cursor(to_cursor_position(action.offset, state.document))


_HANDLERS: Dict[Type[object], Handler] = {
    Insert: _insert,
    Backspace: _backspace,
    Delete: _delete,
    Newline: _newline,
    MoveHorizontal: _move_horizontal,
    MoveVertical: _move_vertical,
    Home: _home,
    End: _end,
    SetCaret: _set_caret,
}


def apply(state: EditorState, action: Action) -> EditorState:
    """Return the state that results from applying ``action`` to ``state``.

    Edge no-ops (backspace at offset 0, delete at the end of the document)
    return ``state`` itself. Raises ``StateValidationError`` for a state whose
    cursor does not fit its document and ``TypeError`` for unknown actions.
    """

    handler = _HANDLERS.get(type(action))
    if handler is None:
        raise TypeError(f"Unsupported action {action!r}")
    ensure_state(state)
    return handler(state, action, to_linear_offset(state))


__all__ = ["apply"]
