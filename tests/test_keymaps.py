from __future__ import annotations

import pytest

from caret_engine.actions import (
    Backspace,
    Direction,
    End,
    Home,
    Insert,
    MoveHorizontal,
    MoveVertical,
    Newline,
)
from caret_engine.keymaps import (
    DEFAULT_BINDINGS,
    KeyBinding,
    KeymapConflictError,
    KeymapRegistry,
    KeymapResolver,
    KeyStroke,
    RegistryStats,
    load_default_keymaps,
)


def test_keystroke_normalizes_modifiers() -> None:
    stroke = KeyStroke("Left", ("SHIFT", "ctrl", "ctrl"))

    assert stroke.key == "left"
    assert stroke.modifiers == ("ctrl", "shift")
    assert stroke.token == "ctrl+shift+left"


def test_keystroke_parse_splits_host_tokens() -> None:
    assert KeyStroke.parse("ctrl+home") == KeyStroke("home", ("ctrl",))
    assert KeyStroke.parse("enter").modifiers == ()
    assert KeyStroke.parse("+").key == "+"


def test_keystroke_rejects_empty_key() -> None:
    with pytest.raises(ValueError):
        KeyStroke("")


def test_registry_rejects_token_conflicts() -> None:
    registry = KeymapRegistry()
    registry.register_binding(KeyBinding("first", "f2", Newline()))

    with pytest.raises(KeymapConflictError) as excinfo:
        registry.register_binding(KeyBinding("second", "f2", Insert("x")))

    assert excinfo.value.existing.id == "first"


def test_registry_replace_and_unregister() -> None:
    registry = KeymapRegistry()
    registry.register_binding(KeyBinding("first", "f2", Newline()))
    registry.register_binding(KeyBinding("second", "f2", Insert("x")), replace=True)

    binding = registry.lookup("f2")
    assert binding is not None and binding.id == "second"
    with pytest.raises(KeyError):
        registry.get_binding("first")

    removed = registry.unregister_binding("second")
    assert removed is not None
    assert registry.lookup("f2") is None
    assert registry.unregister_binding("second") is None


def test_default_keymaps_register_every_binding() -> None:
    registry = load_default_keymaps(KeymapRegistry())

    stats = registry.stats()

    assert stats.binding_count == len(DEFAULT_BINDINGS)
    assert "ctrl+backspace" in stats.tokens
    assert "enter" in stats.tokens


@pytest.mark.parametrize(
    ("token", "text", "expected"),
    [
        ("enter", "\r", Newline()),
        ("tab", "\t", Insert("\t")),
        ("ctrl+backspace", None, Backspace(word=True)),
        ("left", None, MoveHorizontal(Direction.BACKWARD)),
        ("ctrl+right", None, MoveHorizontal(Direction.FORWARD, word=True)),
        ("shift+right", None, MoveHorizontal(Direction.FORWARD)),
        ("down", None, MoveVertical(1)),
        ("home", None, Home()),
        ("ctrl+end", None, End(of_text=True)),
        ("a", "a", Insert("a")),
        ("space", " ", Insert(" ")),
    ],
)
def test_resolver_decodes_default_keys(
    token: str, text: str | None, expected: object
) -> None:
    resolver = KeymapResolver()

    assert resolver.resolve_token(token, text=text) == expected


def test_resolver_ignores_unbound_ctrl_chords_and_keys() -> None:
    resolver = KeymapResolver()

    assert resolver.resolve_token("ctrl+a", text="a") is None
    assert resolver.resolve_token("f5") is None


def test_resolver_paste_is_plain_insert() -> None:
    assert KeymapResolver().resolve_paste("a\r\nb") == Insert("a\r\nb")


def test_registry_stats_follow_registration() -> None:
    registry = KeymapRegistry()
    registry.register_binding(KeyBinding("newline", "enter", Newline()))
    registry.register_binding(KeyBinding("tab", "tab", Insert("\t")))

    registry.unregister_binding("newline")

    assert registry.stats() == RegistryStats(binding_count=1, tokens=("tab",))
