import logging

from aiogram.types import InlineKeyboardButton, InlineKeyboardMarkup

from komparisi.i18n import t

logger = logging.getLogger(__name__)

CB_PROCESS = "ktp:process"
CB_RESET = "ktp:reset"


def kb_queue(lang: str = "id") -> InlineKeyboardMarkup:
    """
    Keyboard shown under the queue status: process the batch or clear it.

    Args:
        lang: Language code for the button labels

    Returns:
        InlineKeyboardMarkup with GASKEN and Reset buttons
    """
    logger.debug(f"Creating queue keyboard with lang={lang}")

    return InlineKeyboardMarkup(
        inline_keyboard=[
            [
                InlineKeyboardButton(text=t("buttons.process", lang=lang), callback_data=CB_PROCESS),
                InlineKeyboardButton(text=t("buttons.reset", lang=lang), callback_data=CB_RESET),
            ]
        ]
    )
