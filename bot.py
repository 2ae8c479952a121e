#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Komparisi - Telegram bot turning KTP photos into deed-style identity paragraphs
"""

import asyncio
import logging
import os
import sys
import traceback
import uuid

from aiogram import Bot, Dispatcher
from aiogram.client.default import DefaultBotProperties
from aiogram.filters import CommandStart
from aiogram.fsm.context import FSMContext
from aiogram.fsm.storage.memory import MemoryStorage
from aiogram.types import ErrorEvent, Message

from komparisi.config import settings
from komparisi.handlers.tracing_log_middleware import TracingLogMiddleware
from komparisi.i18n import t
from komparisi.register_handlers import register_handlers as register_ktp_handlers
from komparisi.utils.async_ocr import close_http_session
from komparisi.utils.logger_config import configure_logging

logger = logging.getLogger(__name__)


def create_bot_and_dispatcher():
    storage = MemoryStorage()
    bot = Bot(token=settings.TELEGRAM_BOT_TOKEN, default=DefaultBotProperties(parse_mode="HTML"))
    dp = Dispatcher(storage=storage)
    dp.message.middleware(TracingLogMiddleware())
    dp.callback_query.middleware(TracingLogMiddleware())
    return bot, dp


async def cmd_start(message: Message, state: FSMContext):
    await state.clear()
    await message.answer(
        t("welcome", lang=settings.BOT_LANGUAGE, max_files=settings.MAX_FILES),
        parse_mode="HTML",
    )


async def global_error_handler(event: ErrorEvent):
    """Log unhandled errors and tell the user instead of crashing the bot."""
    error_id = f"error_{uuid.uuid4().hex[:8]}"
    exception = event.exception

    logger.error(f"[{error_id}] Unhandled error: {exception}")
    logger.error(
        f"[{error_id}] Traceback:\n"
        + "".join(traceback.format_exception(type(exception), exception, exception.__traceback__))
    )

    update = event.update
    target = update.message or (update.callback_query.message if update.callback_query else None)
    if target is not None:
        try:
            await target.answer(t("errors.unexpected", lang=settings.BOT_LANGUAGE))
        except Exception as e:
            logger.error(f"[{error_id}] Could not send error message: {e}")

    return True


def register_handlers(dp):
    """Registers all handlers with the dispatcher."""
    dp.errors.register(global_error_handler)
    dp.message.register(cmd_start, CommandStart())
    register_ktp_handlers(dp)
    dp.shutdown.register(close_http_session)
    logger.info("Handlers registered")


def _check_settings() -> bool:
    """Check that the required tokens are configured."""
    if not settings.TELEGRAM_BOT_TOKEN:
        logger.error("TELEGRAM_BOT_TOKEN is not set")
        return False
    if not (settings.OPENAI_OCR_KEY or settings.OPENAI_API_KEY):
        logger.error("OPENAI_OCR_KEY / OPENAI_API_KEY is not set")
        return False
    return True


if __name__ == "__main__":
    configure_logging(environment=os.getenv("ENV", "development"), log_dir="logs")

    if not _check_settings():
        sys.exit(1)

    bot, dp = create_bot_and_dispatcher()
    register_handlers(dp)

    logger.info("Starting bot...")
    asyncio.run(dp.start_polling(bot, allowed_updates=dp.resolve_used_update_types()))
