from __future__ import annotations

from .rate_gate import RateGate

__all__ = ["RateGate"]
