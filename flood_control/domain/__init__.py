from __future__ import annotations

from .context import CheckContext
from .errors import CheckAbortedError, ConfigError, FloodControlError
from .models import FloodConfig

__all__ = [
    "CheckContext",
    "FloodConfig",
    "CheckAbortedError",
    "ConfigError",
    "FloodControlError",
]
