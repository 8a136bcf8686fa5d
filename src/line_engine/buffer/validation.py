"""Validation helpers shared across buffer services."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from line_engine.config import EditorLimits

from .buffer import Buffer
from .snapshot import BufferValidationError, Position

if TYPE_CHECKING:
    from .state import EditorState


def ensure_capacity(rows: Sequence[str], limits: EditorLimits) -> None:
    if len(rows) > limits.max_line_count:
        raise BufferValidationError(
            f"{len(rows)} rows exceed max_line_count={limits.max_line_count}"
        )
    for index, row in enumerate(rows):
        try:
            row.encode("latin-1")
        except UnicodeEncodeError as exc:
            raise BufferValidationError(
                f"row {index} has a character outside the single-byte range"
            ) from exc
        if len(row) > limits.max_line_length:
            raise BufferValidationError(
                f"row {index} exceeds max_line_length={limits.max_line_length}"
            )


def ensure_cursor(buffer: Buffer, cursor: Position) -> Position:
    row, col = cursor
    if row < 0 or row >= buffer.line_count:
        raise BufferValidationError("Row out of range", cursor=cursor)
    if col < 0 or col > buffer.line_length(row):
        raise BufferValidationError("Column out of range", cursor=cursor)
    return cursor


def check_invariants(state: "EditorState") -> None:
    """Raise if ``state`` violates any positional or capacity invariant."""

    buffer = state.buffer
    if not 1 <= buffer.line_count <= buffer.limits.max_line_count:
        raise BufferValidationError(f"line_count {buffer.line_count} out of range")
    for index, line in enumerate(buffer):
        if line.length > buffer.limits.max_line_length:
            raise BufferValidationError(f"row {index} exceeds capacity")
    ensure_cursor(buffer, state.cursor.position)


__all__ = ["ensure_capacity", "ensure_cursor", "check_invariants"]
