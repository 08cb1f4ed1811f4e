from __future__ import annotations

from .domain.context import CheckContext
from .domain.errors import CheckAbortedError, ConfigError, FloodControlError
from .domain.models import FloodConfig
from .infrastructure.rate_gate import RateGate

__all__ = [
    "CheckAbortedError",
    "CheckContext",
    "ConfigError",
    "FloodConfig",
    "FloodControlError",
    "RateGate",
]
