"""Reading documents into an editor state and writing them back."""

from __future__ import annotations

from typing import Optional

from line_engine.actions.edit import newline, type_character
from line_engine.buffer import Cursor, EditorState
from line_engine.runtime import telemetry

logger = telemetry.get_logger("line_engine.persistence")

NEWLINE = 0x0A


def replay_bytes(state: EditorState, data: bytes) -> None:
    """Feed raw bytes through the edit operations as if they were typed."""

    for byte in data:
        if byte == NEWLINE:
            newline(state)
        else:
            type_character(state, byte)


def load_document(state: EditorState, path: str) -> bool:
    """Hydrate ``state`` from ``path``.

    A missing or unreadable document leaves a single empty line marked dirty,
    so the first save creates it. Returns ``True`` when the file was read.
    """

    state.path = path
    with telemetry.span(
        "persistence::load", component="persistence", metadata={"path": path}
    ) as handle:
        try:
            with open(path, "rb") as f:
                data = f.read()
        except OSError as exc:
            handle.add_metadata("status", "unavailable")
            logger.info("document unavailable, starting new: %s (%s)", path, exc)
            state.clear_all()
            return False

        state.clear_all()
        replay_bytes(state, data)
        state.cursor = Cursor()
        state.viewport.top_row = 0
        state.dirty = False
        handle.add_metadata("lines", state.buffer.line_count)
        return True


def serialize(state: EditorState) -> bytes:
    return b"\n".join(state.buffer.rows())


def save_document(state: EditorState, path: Optional[str] = None) -> bool:
    """Write every line joined by ``\\n`` with no trailing separator.

    ``dirty`` is cleared only when the write succeeds.
    """

    target = path or state.path
    if not target:
        logger.debug("save skipped: no document name")
        return False

    with telemetry.span(
        "persistence::save", component="persistence", metadata={"path": target}
    ) as handle:
        try:
            with open(target, "wb") as f:
                f.write(serialize(state))
        except OSError as exc:
            handle.add_metadata("status", "write_failed")
            logger.warning("could not write %s: %s", target, exc)
            return False

    state.dirty = False
    telemetry.record_event(
        "document.saved",
        level="debug",
        data={"path": target, "lines": state.buffer.line_count},
    )
    return True


__all__ = ["load_document", "save_document", "serialize", "replay_bytes"]
