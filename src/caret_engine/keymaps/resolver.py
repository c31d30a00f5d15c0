"""Resolve key strokes and paste payloads into editing actions."""

from __future__ import annotations

from typing import Optional

from caret_engine.actions import Action, Insert

from .defaults import load_default_keymaps
from .models import KeyStroke
from .registry import KeymapRegistry


class KeymapResolver:
    """Turns host key strokes into actions using a ``KeymapRegistry``.

    Lookup order: the exact token, then the token with ``shift`` dropped
    (shift has no meaning without selections), then plain character entry.
    Ctrl chords that are not bound resolve to ``None`` so the host can keep
    them for its own shortcuts.
    """

    def __init__(self, registry: Optional[KeymapRegistry] = None) -> None:
        self.registry = registry or load_default_keymaps(KeymapRegistry())

    def resolve(self, stroke: KeyStroke) -> Optional[Action]:
        binding = self.registry.lookup(stroke.token)
        if binding is None and "shift" in stroke.modifiers:
            binding = self.registry.lookup(stroke.without("shift").token)
        if binding is not None:
            return binding.action

        if "ctrl" in stroke.modifiers:
            return None
        text = stroke.text
        if text is not None and len(text) == 1 and text.isprintable():
            return Insert(text)
        return None

    def resolve_token(self, token: str, *, text: str | None = None) -> Optional[Action]:
        return self.resolve(KeyStroke.parse(token, text=text))

    def resolve_paste(self, payload: str) -> Action:
        return Insert(payload)


__all__ = ["KeymapResolver"]
