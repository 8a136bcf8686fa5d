"""Key dispatcher routing abstract key events into the edit engine."""

from __future__ import annotations

from typing import Optional

from line_engine.buffer import EditorState, RenderSnapshot
from line_engine.keymaps import KeyEvent, KeymapRegistry
from line_engine.render import build_snapshot
from line_engine.runtime import telemetry

from .base import DispatchContext, DispatchResult, EventBus
from .defaults import load_default_keymaps


class KeyDispatcher:
    """Owns the keymap, dispatches one key event at a time, keeps invariants.

    Each call to :meth:`handle_key` runs to completion, clamps the cursor and
    recomputes the viewport before returning, so a renderer can draw straight
    from :meth:`snapshot`.
    """

    def __init__(
        self,
        context: DispatchContext,
        *,
        keymap_registry: KeymapRegistry | None = None,
        load_defaults: bool = True,
    ) -> None:
        self.context = context
        self.logger = telemetry.get_logger("line_engine.dispatch")
        self.keymap_registry = keymap_registry or KeymapRegistry(
            logger_name="line_engine.keymaps"
        )
        if load_defaults and keymap_registry is None:
            load_default_keymaps(self.keymap_registry)
        self.context.extras.setdefault("keymap_registry", self.keymap_registry)
        self.context.extras.setdefault("dispatcher", self)
        self.context.state.recompute_viewport()

    @classmethod
    def for_state(
        cls, state: Optional[EditorState] = None, *, bus: Optional[EventBus] = None
    ) -> "KeyDispatcher":
        context = DispatchContext(state=state or EditorState.empty())
        if bus is not None:
            context.bus = bus
        return cls(context)

    @property
    def state(self) -> EditorState:
        return self.context.state

    @property
    def bus(self) -> EventBus:
        return self.context.bus

    def handle_key(self, event: KeyEvent) -> DispatchResult:
        action = self.keymap_registry.action_for(event.kind)
        if action is None:
            self.logger.debug("unbound key %s dropped", event.kind.value)
            return DispatchResult(consumed=False, status="unbound")

        with telemetry.span(
            name=f"dispatch::{action.telemetry_name}",
            component="dispatch",
            metadata={"key": event.token, "row": self.state.cursor.row},
        ) as handle:
            outcome = action(self.context, event)
            self.state.clamp()
            self.state.recompute_viewport()
            result = (
                outcome
                if isinstance(outcome, DispatchResult)
                else DispatchResult(consumed=True)
            )
            handle.add_metadata("status", result.status)
        return result

    def resize(self, width: int, height: int) -> None:
        self.state.resize(width, height)
        self.state.recompute_viewport()

    def snapshot(self) -> RenderSnapshot:
        return build_snapshot(self.state)


__all__ = ["KeyDispatcher"]
