"""Edit operations and cursor movements over an ``EditorState``."""

from .edit import backspace, clear_all, delete_forward, newline, type_character
from .motion import (
    move_down,
    move_end,
    move_home,
    move_left,
    move_right,
    move_up,
    page_down,
    page_up,
)

__all__ = [
    "type_character",
    "newline",
    "delete_forward",
    "backspace",
    "clear_all",
    "move_up",
    "move_down",
    "move_left",
    "move_right",
    "move_home",
    "move_end",
    "page_up",
    "page_down",
]
