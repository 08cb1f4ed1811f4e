from __future__ import annotations

import logging
from aiogram import BaseMiddleware
from aiogram.types import TelegramObject
from typing import Callable, Awaitable, Dict, Any


class LoggingMiddleware(BaseMiddleware):
    def __init__(self) -> None:
        self._logger = logging.getLogger("flood_control.tg")

    async def __call__(
        self,
        handler: Callable[[TelegramObject, Dict[str, Any]], Awaitable[Any]],
        event: TelegramObject,
        data: Dict[str, Any],
    ) -> Any:
        from_user = getattr(event, "from_user", None)
        self._logger.debug("event: %s user_id=%s", type(event).__name__, getattr(from_user, "id", None))
        return await handler(event, data)
