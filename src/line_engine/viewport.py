"""Vertical scrolling window over the buffer."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Viewport:
    """Tracks the first rendered row for a window of ``view_height`` rows.

    ``top_row`` may go out of range between recomputations (paging shifts it
    blindly); :meth:`recompute` always brings it back.
    """

    top_row: int = 0
    view_height: int = 1

    def recompute(self, cursor_row: int, line_count: int) -> int:
        """Scroll so ``cursor_row`` is visible and return the rows to draw.

        Upward correction runs before downward correction so a cursor that
        jumped above the previous window is handled first.
        """

        visible = min(self.view_height, line_count)
        top = min(self.top_row, cursor_row)
        top = max(top, cursor_row - visible + 1)
        top = max(top, 0)
        self.top_row = top
        return min(visible, line_count - top)

    def visible_range(self, line_count: int) -> range:
        end = min(self.top_row + self.view_height, line_count)
        return range(self.top_row, max(end, self.top_row))

    def contains(self, row: int) -> bool:
        return self.top_row <= row <= self.top_row + self.view_height - 1


__all__ = ["Viewport"]
