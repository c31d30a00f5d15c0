"""Keymap registry storing key bindings by token."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

from caret_engine.runtime.telemetry import span

from .models import KeyBinding


@dataclass(slots=True)
class RegistryStats:
    """Lightweight snapshot describing registry state."""

    binding_count: int
    tokens: tuple[str, ...]


class KeymapConflictError(RuntimeError):
    """Raised when a new binding claims a token that is already bound."""

    def __init__(self, binding: KeyBinding, existing: KeyBinding) -> None:
        super().__init__(
            f"Binding '{binding.id}' conflicts with '{existing.id}' on '{binding.token}'"
        )
        self.binding = binding
        self.existing = existing


class KeymapRegistry:
    """Owns key bindings, indexed by id and by key token."""

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._bindings: Dict[str, KeyBinding] = {}
        self._token_index: Dict[str, str] = {}
        self._logger_name = logger_name

    def get_binding(self, binding_id: str) -> KeyBinding:
        try:
            return self._bindings[binding_id]
        except KeyError as exc:
            raise KeyError(f"Binding '{binding_id}' is not registered") from exc

    def lookup(self, token: str) -> Optional[KeyBinding]:
        binding_id = self._token_index.get(token)
        if binding_id is None:
            return None
        return self._bindings[binding_id]

    def register_binding(
        self, binding: KeyBinding, *, replace: bool = False
    ) -> KeyBinding:
        with span(
            "keymaps::register_binding",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"binding_id": binding.id, "token": binding.token},
        ) as handle:
            existing = self.lookup(binding.token)
            if existing is not None and existing.id != binding.id and not replace:
                handle.add_metadata("conflict", existing.id)
                raise KeymapConflictError(binding, existing)
            if binding.id in self._bindings and not replace:
                raise ValueError(f"Binding id '{binding.id}' already registered")

            if existing is not None:
                self._drop(existing)
            previous = self._bindings.get(binding.id)
            if previous is not None:
                self._drop(previous)

            self._bindings[binding.id] = binding
            self._token_index[binding.token] = binding.id
            return binding

    def unregister_binding(self, binding_id: str) -> Optional[KeyBinding]:
        binding = self._bindings.get(binding_id)
        if binding is None:
            return None
        self._drop(binding)
        return binding

    def stats(self) -> RegistryStats:
        return RegistryStats(
            binding_count=len(self._bindings),
            tokens=tuple(sorted(self._token_index)),
        )

    def _drop(self, binding: KeyBinding) -> None:
        self._bindings.pop(binding.id, None)
        if self._token_index.get(binding.token) == binding.id:
            self._token_index.pop(binding.token, None)


__all__ = ["KeymapConflictError", "KeymapRegistry", "RegistryStats"]
