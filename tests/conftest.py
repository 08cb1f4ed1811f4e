from __future__ import annotations

import pytest

from flood_control import FloodConfig, RateGate


class FakeClock:
    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def gate(clock: FakeClock) -> RateGate:
    return RateGate(FloodConfig(window_sec=10, max_checks=5), clock=clock)
