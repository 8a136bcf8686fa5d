"""Boundary types handed to render hosts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol, Tuple

Position = Tuple[int, int]


@dataclass(frozen=True, slots=True)
class VisibleLine:
    """One buffer row inside the viewport."""

    index: int
    data: bytes

    @property
    def number(self) -> int:
        return self.index + 1


@dataclass(frozen=True, slots=True)
class RenderSnapshot:
    """Read-only picture of the editor a renderer draws from."""

    lines: Tuple[VisibleLine, ...]
    cursor: Position
    screen_cursor: Position
    top_row: int
    view_height: int
    line_count: int
    dirty: bool
    document_name: Optional[str]
    width: int
    height: int


class Renderer(Protocol):
    """Protocol describing how render hosts consume snapshots."""

    def window_size(self) -> Tuple[int, int]:
        """Return the current ``(width, height)`` of the drawing surface."""
        ...

    def draw(self, snapshot: RenderSnapshot) -> None:
        """Paint the snapshot, clearing rows the snapshot leaves empty."""
        ...


class BufferValidationError(RuntimeError):
    """Raised when a state is built from out-of-bounds rows or cursor info."""

    def __init__(self, message: str, *, cursor: Position | None = None) -> None:
        super().__init__(message)
        self.cursor = cursor


__all__ = [
    "BufferValidationError",
    "RenderSnapshot",
    "Renderer",
    "VisibleLine",
]
