from __future__ import annotations

import asyncio
import logging

from aiogram import Bot, Dispatcher
from aiogram.client.default import DefaultBotProperties
from aiogram.enums import ParseMode
from aiogram.types import BotCommand

from .bot.handlers import router, settings


async def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    bot = Bot(token=settings.bot_token, default=DefaultBotProperties(parse_mode=ParseMode.HTML))
    dp = Dispatcher()
    dp.include_router(router)

    logging.info("LinkGuard bot started, %d trusted domains", len(settings.trusted_domains))
    await bot.set_my_commands(
        [
            BotCommand(command="start", description="Старт и возможности"),
            BotCommand(command="help", description="Список команд"),
            BotCommand(command="check", description="Проверка ссылки"),
            BotCommand(command="scope", description="Какие ссылки проверять"),
            BotCommand(command="view", description="Подробность ответа"),
            BotCommand(command="settings", description="Настройки"),
        ]
    )
    await dp.start_polling(bot)


if __name__ == "__main__":
    asyncio.run(main())
