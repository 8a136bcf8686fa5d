"""Text layout for render hosts.

Turns an ``EditorState`` into a :class:`RenderSnapshot` and a snapshot into
plain screen rows: a right-aligned line number gutter, tab expansion, and a
status row carrying the dirty marker and document name.
"""

from __future__ import annotations

from typing import List

from line_engine.buffer import EditorState, RenderSnapshot, VisibleLine
from line_engine.config import DEFAULT_LIMITS, EditorLimits

NUMBER_WIDTH = 5


def build_snapshot(state: EditorState) -> RenderSnapshot:
    """Capture the visible rows and cursor placement of ``state``.

    Assumes the viewport was recomputed after the last edit.
    """

    buffer = state.buffer
    limits = state.limits
    viewport = state.viewport
    rows = viewport.visible_range(buffer.line_count)
    lines = tuple(VisibleLine(index=i, data=buffer[i].to_bytes()) for i in rows)

    row, col = state.cursor.position
    line = buffer[row]
    screen_x = col + limits.gutter_width + (limits.tab_width - 1) * line.count_tabs(col)
    screen_x = min(screen_x, state.screen_width - 1)
    screen_y = row - viewport.top_row

    return RenderSnapshot(
        lines=lines,
        cursor=(row, col),
        screen_cursor=(screen_x, screen_y),
        top_row=viewport.top_row,
        view_height=viewport.view_height,
        line_count=buffer.line_count,
        dirty=state.dirty,
        document_name=state.path,
        width=state.screen_width,
        height=state.screen_height,
    )


def expand_tabs(data: bytes, tab_width: int) -> str:
    return data.decode("latin-1").replace("\t", " " * tab_width)


def format_line(line: VisibleLine, width: int, *, tab_width: int) -> str:
    number = f"{line.number:>{NUMBER_WIDTH}}"[-NUMBER_WIDTH:]
    text = f"{number} {expand_tabs(line.data, tab_width)}"
    return text[:width]


def layout_rows(
    snapshot: RenderSnapshot, *, limits: EditorLimits = DEFAULT_LIMITS
) -> List[str]:
    """Return exactly ``view_height`` rows; rows past the buffer are blank."""

    rows = [
        format_line(line, snapshot.width, tab_width=limits.tab_width)
        for line in snapshot.lines
    ]
    rows.extend("" for _ in range(snapshot.view_height - len(rows)))
    return rows[: snapshot.view_height]


def status_line(snapshot: RenderSnapshot) -> str:
    marker = "*" if snapshot.dirty else " "
    label = f"{marker}{snapshot.document_name or ''}"
    return label[-snapshot.width :].rjust(snapshot.width)


__all__ = [
    "build_snapshot",
    "expand_tabs",
    "format_line",
    "layout_rows",
    "status_line",
]
