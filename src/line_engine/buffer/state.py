"""Cursor and aggregate editor state."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence, Tuple

from line_engine.config import DEFAULT_LIMITS, EditorLimits
from line_engine.viewport import Viewport

from .buffer import Buffer
from .validation import ensure_capacity, ensure_cursor

Position = Tuple[int, int]  # (row, column)


@dataclass(slots=True)
class Cursor:
    """Position into the buffer plus the column vertical moves aim for."""

    row: int = 0
    col: int = 0
    sticky_col: int = 0

    @property
    def position(self) -> Position:
        return (self.row, self.col)

    def move_to(self, row: int, col: int) -> None:
        self.row = row
        self.col = col

    def remember_column(self) -> None:
        self.sticky_col = self.col

    def clamp(self, buffer: Buffer) -> None:
        self.row = max(0, min(self.row, buffer.line_count - 1))
        self.col = max(0, min(self.col, buffer.line_length(self.row)))


@dataclass(slots=True)
class EditorState:
    """Everything one editing session owns.

    ``path`` identifies the document for persistence only; the editing
    operations never touch it.
    """

    buffer: Buffer = field(default_factory=Buffer)
    cursor: Cursor = field(default_factory=Cursor)
    viewport: Viewport = field(default_factory=Viewport)
    dirty: bool = False
    path: Optional[str] = None
    screen_width: int = 80
    screen_height: int = 24

    def __post_init__(self) -> None:
        self.resize(self.screen_width, self.screen_height)

    @classmethod
    def empty(
        cls, *, path: Optional[str] = None, limits: EditorLimits = DEFAULT_LIMITS
    ) -> "EditorState":
        return cls(buffer=Buffer(limits=limits), path=path)

    @classmethod
    def from_rows(
        cls,
        rows: Sequence[str],
        *,
        cursor: Position = (0, 0),
        limits: EditorLimits = DEFAULT_LIMITS,
        path: Optional[str] = None,
    ) -> "EditorState":
        """Build a state from text rows, rejecting out-of-range input."""

        ensure_capacity(rows, limits)
        buffer = Buffer.from_strings(rows, limits=limits)
        row, col = ensure_cursor(buffer, cursor)
        return cls(
            buffer=buffer,
            cursor=Cursor(row=row, col=col, sticky_col=col),
            path=path,
        )

    @property
    def limits(self) -> EditorLimits:
        return self.buffer.limits

    @property
    def view_height(self) -> int:
        return self.viewport.view_height

    def clamp(self) -> None:
        self.cursor.clamp(self.buffer)

    def clear_all(self) -> None:
        self.buffer.clear()
        self.cursor = Cursor()
        self.viewport.top_row = 0
        self.dirty = True

    def resize(self, width: int, height: int) -> None:
        self.screen_width = max(1, width)
        self.screen_height = max(1, height)
        rows = self.screen_height - self.limits.status_line_rows
        self.viewport.view_height = max(1, rows)

    def recompute_viewport(self) -> int:
        return self.viewport.recompute(self.cursor.row, self.buffer.line_count)

    def lines(self) -> tuple[str, ...]:
        return self.buffer.text_rows()


__all__ = ["Cursor", "EditorState", "Position"]
