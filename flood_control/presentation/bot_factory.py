from __future__ import annotations

from aiogram import Bot, Dispatcher

from flood_control.di import Container, DIError
from flood_control.presentation.routers.common import router as common_router
from flood_control.presentation.routers.errors import router as errors_router
from flood_control.presentation.middlewares.throttling import ThrottlingMiddleware
from flood_control.presentation.middlewares.logging import LoggingMiddleware


def build_dispatcher_and_bot(container: Container) -> tuple[Bot, Dispatcher]:
    settings = container.settings
    if settings.bot_token is None:
        raise DIError("BOT_TOKEN is required to build the bot")

    bot = Bot(token=settings.bot_token)
    dp = Dispatcher()

    # Middlewares
    dp.message.middleware(LoggingMiddleware())
    dp.message.middleware(
        ThrottlingMiddleware(gate=container.get("flood_gate"), notify=settings.notify_on_throttle)
    )

    # Routers
    dp.include_router(common_router)
    dp.include_router(errors_router)

    return bot, dp
