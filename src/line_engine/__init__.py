"""Bounded line-editing engine with cursor, viewport, and key dispatch."""

__all__ = [
    "actions",
    "adapters",
    "buffer",
    "config",
    "dispatch",
    "keymaps",
    "persistence",
    "render",
    "runtime",
    "viewport",
]

__version__ = "0.1.0"
