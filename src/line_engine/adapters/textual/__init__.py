"""Textual host: key translation, rendering hooks, and the runnable app."""

from .controller import (
    TEXTUAL_KEYS,
    TextualEditorAdapter,
    TextualUIHooks,
    key_event_from_textual,
)

__all__ = [
    "TEXTUAL_KEYS",
    "TextualEditorAdapter",
    "TextualUIHooks",
    "key_event_from_textual",
]
