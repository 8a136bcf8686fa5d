from __future__ import annotations

import pytest

from line_engine.actions import motion
from line_engine.buffer import EditorState
from line_engine.viewport import Viewport


def make_tall_state(lines: int = 50, *, height: int = 11) -> EditorState:
    state = EditorState.from_rows([f"row {i:04d}" for i in range(lines)])
    state.resize(40, height)
    state.recompute_viewport()
    return state


def test_sticky_column_survives_shorter_line() -> None:
    state = EditorState.from_rows(["hello", "hi", "hey there"], cursor=(0, 5))

    motion.move_down(state)
    assert state.cursor.position == (1, 2)
    assert state.cursor.sticky_col == 5

    motion.move_down(state)
    assert state.cursor.position == (2, 5)


def test_up_at_first_row_keeps_row_and_uses_sticky() -> None:
    state = EditorState.from_rows(["abcdef"], cursor=(0, 4))
    state.cursor.col = 1

    motion.move_up(state)

    assert state.cursor.position == (0, 4)


def test_left_wraps_to_end_of_previous_row() -> None:
    state = EditorState.from_rows(["abc", "de"], cursor=(1, 0))

    motion.move_left(state)

    assert state.cursor.position == (0, 3)
    assert state.cursor.sticky_col == 3


def test_left_at_origin_stays_put() -> None:
    state = EditorState.from_rows(["abc"], cursor=(0, 0))

    motion.move_left(state)

    assert state.cursor.position == (0, 0)


def test_right_wraps_to_start_of_next_row() -> None:
    state = EditorState.from_rows(["abc", "de"], cursor=(0, 3))

    motion.move_right(state)

    assert state.cursor.position == (1, 0)
    assert state.cursor.sticky_col == 0


def test_right_past_end_of_last_row_lands_on_its_start() -> None:
    state = EditorState.from_rows(["abc"], cursor=(0, 3))

    motion.move_right(state)

    assert state.cursor.position == (0, 0)


def test_end_sticks_to_line_end_across_rows() -> None:
    state = EditorState.from_rows(["ab", "abcdef", "a"], cursor=(0, 0))

    motion.move_end(state)
    assert state.cursor.position == (0, 2)
    assert state.cursor.sticky_col == state.limits.sticky_end

    motion.move_down(state)
    assert state.cursor.position == (1, 6)
    motion.move_down(state)
    assert state.cursor.position == (2, 1)


def test_home_resets_sticky_column() -> None:
    state = EditorState.from_rows(["abcdef", "abcdef"], cursor=(0, 4))

    motion.move_home(state)
    motion.move_down(state)

    assert state.cursor.position == (1, 0)


def test_page_down_moves_cursor_to_new_top() -> None:
    state = make_tall_state()

    motion.page_down(state)
    state.recompute_viewport()

    assert state.viewport.top_row == 7
    assert state.cursor.row == 7


def test_page_up_moves_cursor_below_new_window() -> None:
    state = make_tall_state()
    motion.page_down(state)
    state.recompute_viewport()
    motion.page_down(state)
    state.recompute_viewport()

    motion.page_up(state)
    state.recompute_viewport()

    assert state.viewport.top_row == 8
    assert state.cursor.row == 17
    assert state.viewport.contains(17)


def test_page_up_near_top_clamps_to_first_rows() -> None:
    state = make_tall_state()
    state.cursor.row = 3

    motion.page_up(state)
    state.recompute_viewport()

    assert state.viewport.top_row == 0
    assert state.cursor.row == 3


def test_page_down_past_end_clamps_to_last_row() -> None:
    state = make_tall_state(lines=12)

    for _ in range(4):
        motion.page_down(state)
        state.recompute_viewport()

    assert state.cursor.row == 11
    assert state.viewport.contains(11)


def test_paging_uses_sticky_column() -> None:
    state = make_tall_state()
    state.cursor.sticky_col = 5

    motion.page_down(state)

    assert state.cursor.position == (7, 5)
    assert state.cursor.sticky_col == 5


def test_viewport_keeps_top_when_buffer_fits() -> None:
    viewport = Viewport(top_row=0, view_height=10)

    drawn = viewport.recompute(cursor_row=4, line_count=5)

    assert viewport.top_row == 0
    assert drawn == 5


def test_viewport_scrolls_down_to_cursor() -> None:
    viewport = Viewport(top_row=0, view_height=5)

    drawn = viewport.recompute(cursor_row=12, line_count=20)

    assert viewport.top_row == 8
    assert drawn == 5


def test_viewport_scrolls_up_to_cursor() -> None:
    viewport = Viewport(top_row=10, view_height=5)

    viewport.recompute(cursor_row=3, line_count=20)

    assert viewport.top_row == 3


def test_viewport_negative_top_is_reset() -> None:
    viewport = Viewport(top_row=-6, view_height=5)

    viewport.recompute(cursor_row=0, line_count=20)

    assert viewport.top_row == 0


def test_viewport_reports_partial_last_page() -> None:
    viewport = Viewport(top_row=18, view_height=5)

    drawn = viewport.recompute(cursor_row=19, line_count=20)

    assert viewport.top_row == 18
    assert drawn == 2


@pytest.mark.parametrize("view_height", [1, 3, 7])
def test_viewport_always_contains_cursor(view_height: int) -> None:
    line_count = 15
    for start_top in range(-5, line_count + 5, 3):
        for row in range(line_count):
            viewport = Viewport(top_row=start_top, view_height=view_height)
            viewport.recompute(cursor_row=row, line_count=line_count)
            assert viewport.top_row >= 0
            assert viewport.top_row <= row <= viewport.top_row + view_height - 1
