"""Key bindings that decode host key strokes into editing actions."""

from .models import KeyBinding, KeyStroke
from .registry import KeymapConflictError, KeymapRegistry, RegistryStats
from .defaults import DEFAULT_BINDINGS, load_default_keymaps
from .resolver import KeymapResolver

__all__ = [
    "KeyBinding",
    "KeyStroke",
    "KeymapRegistry",
    "KeymapConflictError",
    "RegistryStats",
    "KeymapResolver",
    "DEFAULT_BINDINGS",
    "load_default_keymaps",
]
