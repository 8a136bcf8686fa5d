"""Shared types passed between the dispatcher and its actions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Optional

from line_engine.buffer import EditorState
from line_engine.persistence import save_document


@dataclass(slots=True)
class DispatchResult:
    """Result returned from ``KeyDispatcher.handle_key``."""

    consumed: bool
    status: str = "ok"
    message: Optional[str] = None


class EventBus:
    """Minimal event bus letting hosts observe engine signals."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in self._subscribers.get(event, []):
            callback(payload)


@dataclass(slots=True)
class DispatchContext:
    """Services every action can access."""

    state: EditorState
    bus: EventBus = field(default_factory=EventBus)
    saver: Callable[[EditorState], bool] = save_document
    extras: Dict[str, object] = field(default_factory=dict)


__all__ = ["DispatchContext", "DispatchResult", "EventBus"]
