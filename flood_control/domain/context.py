from __future__ import annotations

import threading
import time
from typing import Callable

from .errors import CheckAbortedError


class CheckContext:
    """
    Cancellation/deadline carrier for a single flood check.

    `deadline` is an absolute value on `clock` (monotonic seconds by default).
    """

    def __init__(self, *, deadline: float | None = None, clock: Callable[[], float] = time.monotonic) -> None:
        self._deadline = deadline
        self._clock = clock
        self._cancelled = threading.Event()

    @classmethod
    def with_timeout(cls, seconds: float, *, clock: Callable[[], float] = time.monotonic) -> "CheckContext":
        return cls(deadline=clock() + seconds, clock=clock)

    @property
    def deadline(self) -> float | None:
        return self._deadline

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    @property
    def expired(self) -> bool:
        return self._deadline is not None and self._clock() >= self._deadline

    def cancel(self) -> None:
        self._cancelled.set()

    def raise_if_done(self) -> None:
        if self.cancelled:
            raise CheckAbortedError("cancelled")
        if self.expired:
            raise CheckAbortedError("deadline exceeded")
