"""Built-in keymap binding every key kind to its editing action."""

from __future__ import annotations

from typing import Iterable

from line_engine.keymaps import ActionRef, Binding, KeyKind, KeymapRegistry

from . import handlers

DEFAULT_ACTIONS: tuple[ActionRef, ...] = (
    ActionRef(
        id="edit.type_character",
        handler=handlers.type_character,
        description="Insert the typed character at the cursor",
    ),
    ActionRef(
        id="edit.newline",
        handler=handlers.newline,
        description="Open an empty line below the cursor",
    ),
    ActionRef(
        id="edit.delete_forward",
        handler=handlers.delete_forward,
        description="Delete the character under the cursor",
    ),
    ActionRef(
        id="edit.backspace",
        handler=handlers.backspace,
        description="Delete before the cursor or step back a line",
    ),
    ActionRef(id="cursor.up", handler=handlers.move_up, description="Move up"),
    ActionRef(id="cursor.down", handler=handlers.move_down, description="Move down"),
    ActionRef(id="cursor.left", handler=handlers.move_left, description="Move left"),
    ActionRef(
        id="cursor.right", handler=handlers.move_right, description="Move right"
    ),
    ActionRef(
        id="cursor.home", handler=handlers.move_home, description="Start of line"
    ),
    ActionRef(id="cursor.end", handler=handlers.move_end, description="End of line"),
    ActionRef(
        id="cursor.page_up", handler=handlers.page_up, description="Scroll a page up"
    ),
    ActionRef(
        id="cursor.page_down",
        handler=handlers.page_down,
        description="Scroll a page down",
    ),
    ActionRef(
        id="document.save",
        handler=handlers.save,
        description="Write the document to its path",
    ),
)

DEFAULT_BINDINGS: tuple[Binding, ...] = (
    Binding(
        id="key.character",
        kind=KeyKind.CHARACTER,
        action_id="edit.type_character",
    ),
    Binding(id="key.enter", kind=KeyKind.ENTER, action_id="edit.newline"),
    Binding(id="key.delete", kind=KeyKind.DELETE, action_id="edit.delete_forward"),
    Binding(id="key.backspace", kind=KeyKind.BACKSPACE, action_id="edit.backspace"),
    Binding(id="key.up", kind=KeyKind.UP, action_id="cursor.up"),
    Binding(id="key.down", kind=KeyKind.DOWN, action_id="cursor.down"),
    Binding(id="key.left", kind=KeyKind.LEFT, action_id="cursor.left"),
    Binding(id="key.right", kind=KeyKind.RIGHT, action_id="cursor.right"),
    Binding(id="key.home", kind=KeyKind.HOME, action_id="cursor.home"),
    Binding(id="key.end", kind=KeyKind.END, action_id="cursor.end"),
    Binding(id="key.page_up", kind=KeyKind.PAGE_UP, action_id="cursor.page_up"),
    Binding(id="key.page_down", kind=KeyKind.PAGE_DOWN, action_id="cursor.page_down"),
    Binding(id="key.save", kind=KeyKind.SAVE, action_id="document.save"),
)


def load_default_keymaps(
    registry: KeymapRegistry,
    *,
    actions: Iterable[ActionRef] = DEFAULT_ACTIONS,
    bindings: Iterable[Binding] = DEFAULT_BINDINGS,
    replace: bool = False,
) -> None:
    """Register the built-in actions and bindings on ``registry``."""

    for action in actions:
        registry.register_action(action, replace=replace)
    for binding in bindings:
        registry.register_binding(binding, replace=replace)


__all__ = ["DEFAULT_ACTIONS", "DEFAULT_BINDINGS", "load_default_keymaps"]
