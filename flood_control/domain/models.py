from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import timedelta

from .errors import ConfigError


@dataclass(frozen=True, slots=True)
class FloodConfig:
    window_sec: float   # trailing interval considered
    max_checks: int     # allowed checks per window, inclusive

    def __post_init__(self) -> None:
        if isinstance(self.max_checks, bool) or not isinstance(self.max_checks, int):
            raise ConfigError(f"max_checks must be int, got {self.max_checks!r}")
        if self.max_checks < 0:
            raise ConfigError(f"max_checks must be >= 0, got {self.max_checks}")
        if isinstance(self.window_sec, bool) or not isinstance(self.window_sec, (int, float)):
            raise ConfigError(f"window_sec must be a number, got {self.window_sec!r}")
        # NaN compares false both ways and would disable eviction
        if math.isnan(self.window_sec):
            raise ConfigError("window_sec must not be NaN")
        if self.window_sec < 0:
            raise ConfigError(f"window_sec must be >= 0, got {self.window_sec}")

    @classmethod
    def from_timedelta(cls, window: timedelta, max_checks: int) -> "FloodConfig":
        return cls(window_sec=window.total_seconds(), max_checks=max_checks)
