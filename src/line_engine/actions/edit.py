"""Edit operations that mutate buffer and cursor together.

Every function expects a valid cursor on entry, clamps on exit, and returns
``True`` only when the buffer content changed. Capacity overflows are silent
no-ops that leave ``dirty`` untouched.
"""

from __future__ import annotations

from line_engine.buffer import EditorState


def type_character(state: EditorState, byte: int) -> bool:
    cursor = state.cursor
    changed = state.buffer.insert_character(cursor.row, cursor.col, byte)
    if changed:
        cursor.col += 1
        state.dirty = True
    state.clamp()
    cursor.remember_column()
    return changed


def newline(state: EditorState) -> bool:
    """Insert an empty row below the cursor and move onto it.

    Text after the cursor stays where it is; nothing is split.
    """

    cursor = state.cursor
    changed = state.buffer.insert_blank_line_after(cursor.row)
    if changed:
        cursor.move_to(cursor.row + 1, 0)
        state.dirty = True
    state.clamp()
    cursor.remember_column()
    return changed


def delete_forward(state: EditorState) -> bool:
    cursor = state.cursor
    changed = False
    if cursor.col < state.buffer.line_length(cursor.row):
        changed = state.buffer.remove_characters(cursor.row, cursor.col, 1)
        state.dirty = state.dirty or changed
    state.clamp()
    cursor.remember_column()
    return changed


def remove_current_line(state: EditorState) -> bool:
    """Drop the cursor's row and park the cursor at the end of the row above.

    Refused whenever the cursor sits on row 0, even if other rows exist.
    """

    cursor = state.cursor
    if cursor.row == 0:
        return False
    if not state.buffer.remove_line(cursor.row):
        return False
    cursor.row -= 1
    cursor.col = state.buffer.line_length(cursor.row)
    state.dirty = True
    return True


def backspace(state: EditorState) -> bool:
    cursor = state.cursor
    changed = False
    if cursor.col == 0:
        if state.buffer.line_length(cursor.row) == 0:
            changed = remove_current_line(state)
        else:
            # No merge: the cursor only relocates. On row 0 this lands on the
            # end of the same line.
            cursor.row -= 1
            state.clamp()
            cursor.col = state.buffer.line_length(cursor.row)
    else:
        changed = state.buffer.remove_characters(cursor.row, cursor.col - 1, 1)
        if changed:
            cursor.col -= 1
            state.dirty = True
    state.clamp()
    cursor.remember_column()
    return changed


def clear_all(state: EditorState) -> None:
    state.clear_all()


__all__ = [
    "type_character",
    "newline",
    "delete_forward",
    "backspace",
    "remove_current_line",
    "clear_all",
]
