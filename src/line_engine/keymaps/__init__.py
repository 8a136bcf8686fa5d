"""Abstract key events and the declarative keymap registry."""

from .models import ActionRef, Binding, KeyEvent, KeyKind
from .registry import KeymapConflictError, KeymapRegistry, RegistryStats

__all__ = [
    "ActionRef",
    "Binding",
    "KeyEvent",
    "KeyKind",
    "KeymapRegistry",
    "KeymapConflictError",
    "RegistryStats",
]
