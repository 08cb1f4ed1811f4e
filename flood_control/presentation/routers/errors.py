from __future__ import annotations

import logging

from aiogram import Router
from aiogram.types import ErrorEvent

from flood_control.constants import MSG_INTERNAL_ERROR

router = Router()
_logger = logging.getLogger("flood_control.errors")


@router.error()
async def error_handler(event: ErrorEvent) -> None:
    _logger.error("update failed: %r", event.exception)
    # User-safe fallback
    if event.update.message:
        await event.update.message.answer(MSG_INTERNAL_ERROR)
