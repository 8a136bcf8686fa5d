"""Key dispatch: event bus, default keymap, and the dispatcher itself."""

from .base import DispatchContext, DispatchResult, EventBus
from .defaults import DEFAULT_ACTIONS, DEFAULT_BINDINGS, load_default_keymaps
from .dispatcher import KeyDispatcher

__all__ = [
    "DispatchContext",
    "DispatchResult",
    "EventBus",
    "KeyDispatcher",
    "DEFAULT_ACTIONS",
    "DEFAULT_BINDINGS",
    "load_default_keymaps",
]
