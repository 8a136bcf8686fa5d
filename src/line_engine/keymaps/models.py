"""Key events, action references, and bindings."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, Mapping, Optional


class KeyKind(str, enum.Enum):
    """Closed set of abstract keys the dispatcher understands."""

    ENTER = "enter"
    BACKSPACE = "backspace"
    DELETE = "delete"
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    HOME = "home"
    END = "end"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    SAVE = "save"
    CHARACTER = "character"


@dataclass(frozen=True, slots=True)
class KeyEvent:
    """One abstract key press; ``char`` is a byte and only set for characters."""

    kind: KeyKind
    char: Optional[int] = None

    def __post_init__(self) -> None:
        if self.kind is KeyKind.CHARACTER:
            if self.char is None:
                raise ValueError("character events require a byte")
            if not 0 <= self.char <= 0xFF:
                raise ValueError(f"character {self.char!r} is not a single byte")
        elif self.char is not None:
            raise ValueError(f"{self.kind.value} events carry no character")

    @classmethod
    def character(cls, value: str | int) -> "KeyEvent":
        if isinstance(value, str):
            if len(value) != 1:
                raise ValueError("expected exactly one character")
            value = ord(value)
        return cls(KeyKind.CHARACTER, value)

    @classmethod
    def special(cls, kind: KeyKind | str) -> "KeyEvent":
        return cls(KeyKind(kind))

    @property
    def token(self) -> str:
        if self.kind is KeyKind.CHARACTER and self.char is not None:
            return chr(self.char)
        return self.kind.value


@dataclass(frozen=True, slots=True)
class ActionRef:
    """Callable metadata used during binding execution."""

    id: str
    handler: Callable[..., object]
    telemetry_name: str | None = None
    description: str = ""
    metadata: Mapping[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("ActionRef id cannot be empty")
        if not callable(self.handler):
            raise TypeError("handler must be callable")
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))
        if self.telemetry_name is None:
            object.__setattr__(self, "telemetry_name", self.id)

    def __call__(self, *args: object, **kwargs: object) -> object:
        return self.handler(*args, **kwargs)


@dataclass(frozen=True, slots=True)
class Binding:
    """Associates one key kind with an action."""

    id: str
    kind: KeyKind
    action_id: str
    description: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("binding id cannot be empty")
        if not self.action_id:
            raise ValueError("binding action_id cannot be empty")
        object.__setattr__(self, "kind", KeyKind(self.kind))


__all__ = [
    "KeyKind",
    "KeyEvent",
    "ActionRef",
    "Binding",
]
