"""Capacities and layout constants fixed at configuration time."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

ENV_PREFIX = "LINE_ENGINE_"


@dataclass(frozen=True, slots=True)
class EditorLimits:
    """Storage bounds and screen layout constants for one editor state."""

    max_line_length: int = 1000
    max_line_count: int = 10000
    tab_width: int = 4
    page_margin: int = 3
    gutter_width: int = 6
    status_line_rows: int = 1

    def __post_init__(self) -> None:
        if self.max_line_length < 1:
            raise ValueError("max_line_length must be positive")
        if self.max_line_count < 1:
            raise ValueError("max_line_count must be positive")
        if self.tab_width < 1:
            raise ValueError("tab_width must be positive")
        if self.page_margin < 0:
            raise ValueError("page_margin cannot be negative")

    @property
    def sticky_end(self) -> int:
        """Sticky column value meaning "always clamp to the end of the line"."""

        return self.max_line_length

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EditorLimits":
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            max_line_length=_env_int(env, "MAX_LINE_LENGTH", defaults.max_line_length),
            max_line_count=_env_int(env, "MAX_LINE_COUNT", defaults.max_line_count),
            tab_width=_env_int(env, "TAB_WIDTH", defaults.tab_width),
            page_margin=_env_int(env, "PAGE_MARGIN", defaults.page_margin, minimum=0),
        )


def _env_int(
    env: Mapping[str, str], key: str, fallback: int, *, minimum: int = 1
) -> int:
    value = env.get(f"{ENV_PREFIX}{key}")
    if value is None:
        return fallback
    try:
        parsed = int(value)
    except ValueError:
        return fallback
    return parsed if parsed >= minimum else fallback


DEFAULT_LIMITS = EditorLimits()

__all__ = ["EditorLimits", "DEFAULT_LIMITS", "ENV_PREFIX"]
