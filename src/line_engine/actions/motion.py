"""Cursor-only movements."""

from __future__ import annotations

from line_engine.buffer import EditorState


def _vertical(state: EditorState, delta: int) -> None:
    cursor = state.cursor
    cursor.row += delta
    cursor.col = cursor.sticky_col
    state.clamp()


def move_up(state: EditorState) -> None:
    _vertical(state, -1)


def move_down(state: EditorState) -> None:
    _vertical(state, 1)


def move_left(state: EditorState) -> None:
    cursor = state.cursor
    cursor.col -= 1
    if cursor.col < 0 and cursor.row > 0:
        cursor.row -= 1
        cursor.col = state.buffer.line_length(cursor.row)
    state.clamp()
    cursor.remember_column()


def move_right(state: EditorState) -> None:
    # Past the end of the last row this clamps back onto column 0 of that row.
    cursor = state.cursor
    cursor.col += 1
    if cursor.col > state.buffer.line_length(cursor.row):
        cursor.row += 1
        cursor.col = 0
    state.clamp()
    cursor.remember_column()


def move_home(state: EditorState) -> None:
    state.cursor.col = 0
    state.cursor.sticky_col = 0
    state.clamp()


def move_end(state: EditorState) -> None:
    cursor = state.cursor
    cursor.col = state.buffer.line_length(cursor.row)
    cursor.sticky_col = state.limits.sticky_end
    state.clamp()


def page_step(state: EditorState) -> int:
    return max(1, state.view_height - state.limits.page_margin)


def page_up(state: EditorState) -> None:
    viewport = state.viewport
    cursor = state.cursor
    viewport.top_row -= page_step(state)
    # Lands one row below the new window; the viewport recompute scrolls to it.
    cursor.row = viewport.top_row + viewport.view_height
    cursor.col = cursor.sticky_col
    state.clamp()


def page_down(state: EditorState) -> None:
    viewport = state.viewport
    cursor = state.cursor
    viewport.top_row += page_step(state)
    cursor.row = viewport.top_row
    cursor.col = cursor.sticky_col
    state.clamp()


__all__ = [
    "move_up",
    "move_down",
    "move_left",
    "move_right",
    "move_home",
    "move_end",
    "page_step",
    "page_up",
    "page_down",
]
