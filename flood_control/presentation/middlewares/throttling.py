from __future__ import annotations

import logging
from aiogram import BaseMiddleware
from aiogram.types import Message
from typing import Callable, Awaitable, Dict, Any

from flood_control.constants import MSG_TOO_MANY_REQUESTS
from flood_control.di import FloodControlPort


class ThrottlingMiddleware(BaseMiddleware):
    """
    Drops messages from users over the flood limit.

    The notice is sent once per rejection streak; the streak ends on the
    next admitted message. CheckAbortedError is not handled here.
    """

    def __init__(self, *, gate: FloodControlPort, notify: bool = True) -> None:
        self._gate = gate
        self._notify = notify
        self._notified: set[int] = set()
        self._logger = logging.getLogger("flood_control.throttling")

    @property
    def gate(self) -> FloodControlPort:
        return self._gate

    @property
    def notify(self) -> bool:
        return self._notify

    async def __call__(
        self,
        handler: Callable[[Message, Dict[str, Any]], Awaitable[Any]],
        event: Message,
        data: Dict[str, Any],
    ) -> Any:
        if not event.from_user:
            return await handler(event, data)

        user_id = event.from_user.id
        if self._gate.check(user_id):
            self._notified.discard(user_id)
            return await handler(event, data)

        self._logger.info("throttled: user_id=%s", user_id)
        if self._notify and user_id not in self._notified:
            self._notified.add(user_id)
            await event.answer(MSG_TOO_MANY_REQUESTS)
        return None
