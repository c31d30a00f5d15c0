"""Dataclasses describing key strokes and their bound actions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from caret_engine.actions import Action

KNOWN_MODIFIERS = frozenset({"ctrl", "alt", "shift", "meta"})


def _normalize_modifiers(modifiers: Iterable[str]) -> tuple[str, ...]:
    values = tuple(m.strip().lower() for m in modifiers if m.strip())
    return tuple(sorted(dict.fromkeys(values)))


def _join_token(key: str, modifiers: tuple[str, ...]) -> str:
    if modifiers:
        return "+".join(modifiers + (key,))
    return key


@dataclass(frozen=True, slots=True)
class KeyStroke:
    """Single normalized key press as reported by a host."""

    key: str
    modifiers: tuple[str, ...] = ()
    text: str | None = None

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("key cannot be empty")
        object.__setattr__(self, "key", self.key.lower())
        object.__setattr__(self, "modifiers", _normalize_modifiers(self.modifiers))

    @classmethod
    def parse(cls, token: str, *, text: str | None = None) -> "KeyStroke":
        """Split a host token such as ``"ctrl+left"`` into key and modifiers."""

        parts = token.split("+")
        modifiers = []
        while len(parts) > 1 and parts[0].strip().lower() in KNOWN_MODIFIERS:
            modifiers.append(parts.pop(0))
        return cls(key="+".join(parts), modifiers=tuple(modifiers), text=text)

    @property
    def token(self) -> str:
        return _join_token(self.key, self.modifiers)

    def without(self, modifier: str) -> "KeyStroke":
        remaining = tuple(m for m in self.modifiers if m != modifier)
        return KeyStroke(self.key, remaining, self.text)


@dataclass(frozen=True, slots=True)
class KeyBinding:
    """Associates one key token with the action it produces."""

    id: str
    key: str
    action: Action
    modifiers: tuple[str, ...] = ()
    description: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("binding id cannot be empty")
        if not self.key:
            raise ValueError("binding key cannot be empty")
        object.__setattr__(self, "key", self.key.lower())
        object.__setattr__(self, "modifiers", _normalize_modifiers(self.modifiers))

    @property
    def token(self) -> str:
        return _join_token(self.key, self.modifiers)


__all__ = ["KNOWN_MODIFIERS", "KeyBinding", "KeyStroke"]
