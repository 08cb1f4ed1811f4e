from __future__ import annotations

from aiogram import Router
from aiogram.filters import Command, CommandStart
from aiogram.types import Message

from flood_control.constants import MSG_PONG, MSG_START

router = Router()


@router.message(CommandStart())
async def start(message: Message) -> None:
    await message.answer(MSG_START)


@router.message(Command("ping"))
async def ping(message: Message) -> None:
    await message.answer(MSG_PONG)
