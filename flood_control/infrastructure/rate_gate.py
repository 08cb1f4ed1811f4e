from __future__ import annotations

import logging
import threading
import time
from collections import deque
from typing import Callable, Deque, Dict, Optional

from flood_control.domain.context import CheckContext
from flood_control.domain.errors import CheckAbortedError
from flood_control.domain.models import FloodConfig


class RateGate:
    """
    Per-user sliding-window flood control.

    Every check is recorded, rejected ones included, so a user who keeps
    hammering stays rejected until the window drains. Entries are never
    removed from the mapping; an empty history is a valid state.
    """

    def __init__(self, config: FloodConfig, *, clock: Callable[[], float] = time.monotonic) -> None:
        self._config = config
        self._clock = clock
        self._history: Dict[int, Deque[float]] = {}
        self._lock = threading.Lock()
        self._logger = logging.getLogger("flood_control.gate")

    @property
    def config(self) -> FloodConfig:
        return self._config

    def check(self, user_id: int, ctx: Optional[CheckContext] = None) -> bool:
        if ctx is not None:
            try:
                ctx.raise_if_done()
            except CheckAbortedError as exc:
                self._logger.warning("check aborted: user_id=%s reason=%s", user_id, exc.reason)
                raise

        with self._lock:
            now = self._clock()
            q = self._history.get(user_id)
            if q is None:
                q = self._history[user_id] = deque()

            # ascending order: stop at the first fresh timestamp
            window = self._config.window_sec
            while q and now - q[0] > window:
                q.popleft()

            q.append(now)
            count = len(q)

        admitted = count <= self._config.max_checks
        if not admitted:
            self._logger.debug(
                "check rejected: user_id=%s count=%s max=%s", user_id, count, self._config.max_checks
            )
        return admitted

    def recorded(self, user_id: int) -> int:
        with self._lock:
            q = self._history.get(user_id)
            return len(q) if q is not None else 0

    def tracked_users(self) -> int:
        with self._lock:
            return len(self._history)
