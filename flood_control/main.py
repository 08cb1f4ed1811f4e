from __future__ import annotations

import asyncio
import contextlib
import logging
import signal
from types import FrameType
from typing import Callable

import uvloop

from .config import get_settings
from .di import Container, FloodControlPort, build_graph
from .logging_setup import setup_logging


def _install_signal_handlers(loop: asyncio.AbstractEventLoop, stop: Callable[[], None]) -> None:
    logger = logging.getLogger("flood_control.signals")

    def _handler(signum: int, _frame: FrameType | None) -> None:
        logger.info("signal received: %s", signum)
        stop()

    for s in (signal.SIGINT, signal.SIGTERM):
        try:
            loop.add_signal_handler(s, stop)
        except NotImplementedError:
            # Fallback for platforms where add_signal_handler is not supported
            signal.signal(s, _handler)


async def run_demo(
    gate: FloodControlPort,
    *,
    user_id: int,
    checks: int,
    interval_sec: float,
) -> list[bool]:
    """Burst of checks for one user, one per `interval_sec`."""
    logger = logging.getLogger("flood_control.demo")
    results: list[bool] = []
    for i in range(checks):
        ok = gate.check(user_id)
        results.append(ok)
        if ok:
            logger.info("check %s: request passed flood control check", i + 1)
        else:
            logger.info("check %s: request failed flood control check", i + 1)
        await asyncio.sleep(interval_sec)
    return results


async def _run_polling(container: Container) -> None:
    from flood_control.presentation.bot_factory import build_dispatcher_and_bot

    bot, dp = build_dispatcher_and_bot(container)
    try:
        await dp.start_polling(bot, handle_signals=False)
    finally:
        await bot.session.close()


async def amain() -> None:
    settings = get_settings()
    setup_logging(level=settings.log_level)

    logger = logging.getLogger("flood_control.main")
    container = Container.build(settings)
    build_graph(container)

    if settings.bot_token is None:
        logger.info("BOT_TOKEN not set; running demo burst")
        await run_demo(
            container.get("flood_gate"),
            user_id=settings.demo_user_id,
            checks=settings.demo_checks,
            interval_sec=settings.demo_interval_sec,
        )
        return

    loop = asyncio.get_running_loop()
    stop_event = asyncio.Event()
    _install_signal_handlers(loop, stop_event.set)

    polling_task = asyncio.create_task(_run_polling(container), name="polling")
    stop_task = asyncio.create_task(stop_event.wait(), name="stop_event")

    done, _ = await asyncio.wait({polling_task, stop_task}, return_when=asyncio.FIRST_COMPLETED)

    if stop_task in done and not polling_task.done():
        logger.info("stop requested; cancelling polling")
        polling_task.cancel()
    else:
        stop_task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await stop_task

    try:
        await polling_task
    except asyncio.CancelledError:
        logger.info("polling cancelled")


def main() -> None:
    uvloop.run(amain())


if __name__ == "__main__":
    main()
