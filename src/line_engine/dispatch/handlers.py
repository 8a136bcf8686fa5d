"""Key handlers bridging key events to edit operations and movements."""

from __future__ import annotations

from typing import Callable

from line_engine.actions import edit, motion
from line_engine.buffer import EditorState
from line_engine.keymaps import KeyEvent

from .base import DispatchContext, DispatchResult

Handler = Callable[[DispatchContext, KeyEvent], DispatchResult]


def _edit_result(context: DispatchContext, changed: bool, label: str) -> DispatchResult:
    if not changed:
        return DispatchResult(consumed=True, status="noop", message=label)
    context.bus.emit("buffer.changed", context.state.cursor.position)
    return DispatchResult(consumed=True, message=label)


def type_character(context: DispatchContext, event: KeyEvent) -> DispatchResult:
    if event.char is None:
        return DispatchResult(consumed=False, status="noop")
    changed = edit.type_character(context.state, event.char)
    return _edit_result(context, changed, "insert")


def newline(context: DispatchContext, event: KeyEvent) -> DispatchResult:
    del event
    return _edit_result(context, edit.newline(context.state), "newline")


def delete_forward(context: DispatchContext, event: KeyEvent) -> DispatchResult:
    del event
    return _edit_result(context, edit.delete_forward(context.state), "delete")


def backspace(context: DispatchContext, event: KeyEvent) -> DispatchResult:
    del event
    return _edit_result(context, edit.backspace(context.state), "backspace")


def _motion(move: Callable[[EditorState], None], label: str) -> Handler:
    def handler(context: DispatchContext, event: KeyEvent) -> DispatchResult:
        del event
        move(context.state)
        return DispatchResult(consumed=True, message=label)

    handler.__name__ = f"move_{label}"
    return handler


move_up = _motion(motion.move_up, "up")
move_down = _motion(motion.move_down, "down")
move_left = _motion(motion.move_left, "left")
move_right = _motion(motion.move_right, "right")
move_home = _motion(motion.move_home, "home")
move_end = _motion(motion.move_end, "end")
page_up = _motion(motion.page_up, "page_up")
page_down = _motion(motion.page_down, "page_down")


def save(context: DispatchContext, event: KeyEvent) -> DispatchResult:
    del event
    state = context.state
    if not state.path:
        return DispatchResult(consumed=True, status="noop", message="no_document")
    if context.saver(state):
        context.bus.emit("document.saved", state.path)
        return DispatchResult(consumed=True, status="saved", message=state.path)
    context.bus.emit("document.save_failed", state.path)
    return DispatchResult(consumed=True, status="save_failed", message=state.path)


__all__ = [
    "Handler",
    "type_character",
    "newline",
    "delete_forward",
    "backspace",
    "move_up",
    "move_down",
    "move_left",
    "move_right",
    "move_home",
    "move_end",
    "page_up",
    "page_down",
    "save",
]
