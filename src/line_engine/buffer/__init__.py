"""Bounded text storage, cursor state, and render snapshots."""

from .buffer import Buffer
from .line import Line
from .snapshot import BufferValidationError, RenderSnapshot, Renderer, VisibleLine
from .state import Cursor, EditorState, Position
from .validation import check_invariants, ensure_capacity, ensure_cursor

__all__ = [
    "Buffer",
    "Line",
    "Cursor",
    "EditorState",
    "Position",
    "RenderSnapshot",
    "Renderer",
    "VisibleLine",
    "BufferValidationError",
    "check_invariants",
    "ensure_capacity",
    "ensure_cursor",
]
