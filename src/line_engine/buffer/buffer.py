"""Bounded, row-addressed line storage."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, Sequence

from line_engine.config import DEFAULT_LIMITS, EditorLimits
from line_engine.runtime import telemetry

from .line import Line

logger = telemetry.get_logger("line_engine.buffer")


class Buffer:
    """Ordered sequence of :class:`Line` objects with fixed capacities.

    The buffer always holds at least one line. Operations that would exceed
    ``max_line_count`` or a line's ``max_line_length`` are silent no-ops that
    return ``False``.
    """

    def __init__(
        self,
        lines: Optional[Iterable[bytes]] = None,
        *,
        limits: EditorLimits = DEFAULT_LIMITS,
    ) -> None:
        self.limits = limits
        self._lines: List[Line] = [
            Line.from_bytes(raw, capacity=limits.max_line_length)
            for raw in (lines or ())
        ]
        if not self._lines:
            self._lines.append(self._blank())
        if len(self._lines) > limits.max_line_count:
            raise ValueError(
                f"{len(self._lines)} lines exceed capacity {limits.max_line_count}"
            )

    @classmethod
    def from_strings(
        cls, rows: Sequence[str], *, limits: EditorLimits = DEFAULT_LIMITS
    ) -> "Buffer":
        return cls((row.encode("latin-1") for row in rows), limits=limits)

    def _blank(self) -> Line:
        return Line(capacity=self.limits.max_line_length)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[Line]:
        return iter(self._lines)

    def __getitem__(self, row: int) -> Line:
        return self._lines[row]

    def line_length(self, row: int) -> int:
        return self._lines[row].length

    def insert_character(self, row: int, pos: int, byte: int) -> bool:
        line = self._lines[row]
        if not line.insert(pos, byte):
            logger.debug("capacity::line_full row=%d length=%d", row, line.length)
            return False
        return True

    def remove_characters(self, row: int, start: int, count: int) -> bool:
        return self._lines[row].remove(start, count)

    def insert_blank_line_after(self, row: int) -> bool:
        if len(self._lines) >= self.limits.max_line_count:
            logger.debug("capacity::buffer_full line_count=%d", len(self._lines))
            return False
        self._lines.insert(row + 1, self._blank())
        return True

    def remove_line(self, row: int) -> bool:
        if len(self._lines) <= 1:
            return False
        del self._lines[row]
        return True

    def clear(self) -> None:
        self._lines = [self._blank()]

    def rows(self) -> tuple[bytes, ...]:
        return tuple(line.to_bytes() for line in self._lines)

    def text_rows(self) -> tuple[str, ...]:
        return tuple(line.text for line in self._lines)


__all__ = ["Buffer"]
