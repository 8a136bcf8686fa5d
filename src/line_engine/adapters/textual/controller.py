"""Textual-facing controller that feeds key events into the dispatcher."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional

from line_engine.buffer import RenderSnapshot
from line_engine.dispatch import DispatchResult, KeyDispatcher
from line_engine.keymaps import KeyEvent, KeyKind


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


TEXTUAL_KEYS: Dict[str, KeyKind] = {
    "enter": KeyKind.ENTER,
    "return": KeyKind.ENTER,
    "backspace": KeyKind.BACKSPACE,
    "ctrl+h": KeyKind.BACKSPACE,
    "delete": KeyKind.DELETE,
    "left": KeyKind.LEFT,
    "right": KeyKind.RIGHT,
    "up": KeyKind.UP,
    "down": KeyKind.DOWN,
    "home": KeyKind.HOME,
    "end": KeyKind.END,
    "pageup": KeyKind.PAGE_UP,
    "pagedown": KeyKind.PAGE_DOWN,
    "ctrl+s": KeyKind.SAVE,
}


def key_event_from_textual(
    key: str, character: Optional[str] = None
) -> Optional[KeyEvent]:
    """Map a Textual key name to an abstract key event, or ``None`` to drop it."""

    kind = TEXTUAL_KEYS.get(key)
    if kind is not None:
        return KeyEvent.special(kind)
    if key == "tab":
        return KeyEvent.character("\t")
    if character is None or len(character) != 1:
        return None
    code = ord(character)
    if code > 0xFF or not (character.isprintable() or character == "\t"):
        return None
    return KeyEvent.character(code)


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_screen: Callable[[RenderSnapshot], None]
    update_status: Callable[[str], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    # Optional realtime log callback a host may use to surface debug lines
    log: Callable[[str], None] = _noop


class TextualEditorAdapter:
    """Bridges the dispatcher + bus events to a Textual-friendly surface."""

    def __init__(self, dispatcher: KeyDispatcher, hooks: TextualUIHooks) -> None:
        self.dispatcher = dispatcher
        self.hooks = hooks
        self._subscribe_events()
        self._refresh_screen()

    def handle_textual_key(
        self, key: str, *, character: Optional[str] = None
    ) -> Optional[DispatchResult]:
        """Translate a Textual key and dispatch it; unknown keys are dropped."""

        event = key_event_from_textual(key, character)
        if event is None:
            self._log_state("drop ->", key=key)
            return None
        self._log_state("key ->", key=event.token)
        result = self.dispatcher.handle_key(event)
        self._after_result(result)
        self._log_state(
            "result <-",
            consumed=result.consumed,
            status=result.status,
            message=result.message,
        )
        return result

    def resize(self, width: int, height: int) -> None:
        self.dispatcher.resize(width, height)
        self._refresh_screen()

    def _after_result(self, result: DispatchResult) -> None:
        if result.status in {"saved", "save_failed"}:
            self.hooks.update_status(f"{result.status}:{result.message}")
        self._refresh_screen()

    def _subscribe_events(self) -> None:
        bus = self.dispatcher.bus
        for event in ("document.saved", "document.save_failed", "buffer.changed"):
            bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )

    def _handle_event(self, name: str, payload: object | None) -> None:
        self._log_state("event ->", event=name, payload=payload)
        self.hooks.handle_event(name, payload)

    def _refresh_screen(self) -> None:
        self.hooks.update_screen(self.dispatcher.snapshot())

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        state = self.dispatcher.state
        return {
            "cursor": state.cursor.position,
            "top_row": state.viewport.top_row,
            "lines": state.buffer.line_count,
            "dirty": state.dirty,
        }


__all__ = [
    "TextualEditorAdapter",
    "TextualUIHooks",
    "TEXTUAL_KEYS",
    "key_event_from_textual",
]
