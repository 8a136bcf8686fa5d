from __future__ import annotations

import random
from typing import Callable, List

import pytest

from line_engine.actions import edit, motion
from line_engine.buffer import EditorState, check_invariants
from line_engine.config import EditorLimits


def make_state(rows: List[str], cursor: tuple[int, int], **kwargs) -> EditorState:
    return EditorState.from_rows(rows, cursor=cursor, **kwargs)


def test_type_character_inserts_and_advances() -> None:
    state = make_state(["ac"], (0, 1))

    assert edit.type_character(state, ord("b")) is True

    assert state.lines() == ("abc",)
    assert state.cursor.position == (0, 2)
    assert state.cursor.sticky_col == 2
    assert state.dirty is True


def test_type_character_on_full_line_is_capacity_noop() -> None:
    limits = EditorLimits(max_line_length=3)
    state = make_state(["abc"], (0, 1), limits=limits)

    assert edit.type_character(state, ord("x")) is False

    assert state.lines() == ("abc",)
    assert state.cursor.position == (0, 1)
    assert state.dirty is False


def test_newline_does_not_split_text() -> None:
    state = make_state(["abc"], (0, 3))

    edit.newline(state)

    assert state.lines() == ("abc", "")
    assert state.cursor.position == (1, 0)
    assert state.dirty is True


def test_newline_mid_line_leaves_tail_in_place() -> None:
    state = make_state(["abcdef", "z"], (0, 2))

    edit.newline(state)

    assert state.lines() == ("abcdef", "", "z")
    assert state.cursor.position == (1, 0)


def test_newline_when_buffer_full_is_noop() -> None:
    limits = EditorLimits(max_line_count=2)
    state = make_state(["a", "b"], (0, 1), limits=limits)

    assert edit.newline(state) is False

    assert state.lines() == ("a", "b")
    assert state.cursor.position == (0, 1)
    assert state.dirty is False


def test_delete_forward_removes_under_cursor() -> None:
    state = make_state(["abc"], (0, 1))

    assert edit.delete_forward(state) is True

    assert state.lines() == ("ac",)
    assert state.cursor.position == (0, 1)
    assert state.dirty is True


def test_delete_forward_at_end_of_line_is_noop() -> None:
    state = make_state(["abc"], (0, 3))

    assert edit.delete_forward(state) is False

    assert state.lines() == ("abc",)
    assert state.cursor.position == (0, 3)
    assert state.dirty is False


def test_delete_forward_does_not_join_lines() -> None:
    state = make_state(["abc", "def"], (0, 3))

    edit.delete_forward(state)

    assert state.lines() == ("abc", "def")


def test_backspace_removes_previous_character() -> None:
    state = make_state(["abc"], (0, 2))

    assert edit.backspace(state) is True

    assert state.lines() == ("ac",)
    assert state.cursor.position == (0, 1)
    assert state.cursor.sticky_col == 1


def test_backspace_on_empty_line_removes_it() -> None:
    state = make_state(["abc", ""], (1, 0))

    assert edit.backspace(state) is True

    assert state.lines() == ("abc",)
    assert state.cursor.position == (0, 3)
    assert state.dirty is True


def test_backspace_at_line_start_only_relocates_cursor() -> None:
    state = make_state(["abc", "def"], (1, 0))

    assert edit.backspace(state) is False

    assert state.lines() == ("abc", "def")
    assert state.cursor.position == (0, 3)
    assert state.dirty is False


def test_backspace_at_row_zero_jumps_to_end_of_line() -> None:
    state = make_state(["abc"], (0, 0))

    edit.backspace(state)

    assert state.lines() == ("abc",)
    assert state.cursor.position == (0, 3)


def test_backspace_refuses_to_remove_empty_row_zero() -> None:
    state = make_state(["", "abc"], (0, 0))

    assert edit.backspace(state) is False

    assert state.lines() == ("", "abc")
    assert state.cursor.position == (0, 0)


def test_remove_current_line_refused_on_row_zero() -> None:
    state = make_state(["", "", "x"], (0, 0))

    assert edit.remove_current_line(state) is False
    assert state.buffer.line_count == 3


def test_clear_all_marks_dirty() -> None:
    state = make_state(["abc", "def"], (1, 1))

    edit.clear_all(state)

    assert state.lines() == ("",)
    assert state.cursor.position == (0, 0)
    assert state.dirty is True


OPERATIONS: List[Callable[[EditorState], object]] = [
    lambda s: edit.type_character(s, ord("x")),
    lambda s: edit.type_character(s, ord("\t")),
    edit.newline,
    edit.delete_forward,
    edit.backspace,
    motion.move_up,
    motion.move_down,
    motion.move_left,
    motion.move_right,
    motion.move_home,
    motion.move_end,
    motion.page_up,
    motion.page_down,
]


@pytest.mark.parametrize("seed", range(8))
def test_random_operation_sequences_preserve_invariants(seed: int) -> None:
    rng = random.Random(seed)
    limits = EditorLimits(max_line_length=6, max_line_count=5)
    state = EditorState.empty(limits=limits)
    state.resize(20, 4)

    for _ in range(400):
        rng.choice(OPERATIONS)(state)
        state.recompute_viewport()
        check_invariants(state)
        assert 1 <= state.buffer.line_count <= limits.max_line_count
        assert state.viewport.top_row >= 0
