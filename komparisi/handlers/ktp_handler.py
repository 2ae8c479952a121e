"""
KTP handlers for the Komparisi bot.

Images are queued per user in FSM data; GASKEN (or /proses) extracts the
whole queue concurrently and answers with one paragraph per KTP.
"""

import asyncio
import logging
from typing import Any, Dict, List

from aiogram import Bot, F, Router
from aiogram.exceptions import TelegramBadRequest
from aiogram.filters import Command
from aiogram.fsm.context import FSMContext
from aiogram.types import CallbackQuery, Message

from komparisi.batch import BatchLimitError, check_batch_size, narrate_images
from komparisi.config import settings
from komparisi.fsm.states import KtpStates
from komparisi.i18n import t
from komparisi.keyboards import CB_PROCESS, CB_RESET, kb_queue
from komparisi.models import UploadedImage
from komparisi.utils.async_ocr import ExtractionError
from komparisi.utils.md import clean_html

logger = logging.getLogger(__name__)

router = Router()

QUEUE_KEY = "queue"


async def get_queue(state: FSMContext) -> List[Dict[str, Any]]:
    data = await state.get_data()
    return list(data.get(QUEUE_KEY, []))


async def clear_queue(state: FSMContext) -> None:
    await state.update_data(**{QUEUE_KEY: []})
    await state.set_state(None)


async def queue_image(message: Message, state: FSMContext, entry: Dict[str, Any]) -> None:
    """Append one image reference to the user's queue, respecting MAX_FILES."""
    lang = settings.BOT_LANGUAGE
    queue = await get_queue(state)

    try:
        check_batch_size(len(queue), 1)
    except BatchLimitError as e:
        await message.answer(
            t("errors.too_many_files", lang=lang, max_files=e.max_files, count=e.current)
        )
        return

    queue.append(entry)
    await state.update_data(**{QUEUE_KEY: queue})
    await state.set_state(KtpStates.collecting)
    await message.answer(
        t("status.queued", lang=lang, count=len(queue), max_files=settings.MAX_FILES),
        reply_markup=kb_queue(lang),
    )


@router.message(F.photo)
async def handle_photo(message: Message, state: FSMContext):
    # Largest size is the last one
    photo = message.photo[-1]
    await queue_image(
        message,
        state,
        {
            "file_id": photo.file_id,
            "file_name": f"ktp-{message.message_id}.jpg",
            "mime_type": "image/jpeg",
        },
    )


@router.message(F.document)
async def handle_document(message: Message, state: FSMContext):
    document = message.document
    mime_type = document.mime_type or ""
    if not mime_type.startswith("image/"):
        await message.answer(t("errors.not_an_image", lang=settings.BOT_LANGUAGE))
        return

    await queue_image(
        message,
        state,
        {
            "file_id": document.file_id,
            "file_name": document.file_name or f"ktp-{message.message_id}",
            "mime_type": mime_type,
        },
    )


class QueueDownloadError(Exception):
    """A queued Telegram file could not be downloaded."""

    def __init__(self, file_name: str):
        self.file_name = file_name
        super().__init__(f"Could not download {file_name}")


async def download_queue(bot: Bot, queue: List[Dict[str, Any]]) -> List[UploadedImage]:
    """Download every queued Telegram file into an UploadedImage."""
    images = []
    for entry in queue:
        try:
            file = await bot.get_file(entry["file_id"])
            buffer = await bot.download_file(file.file_path)
        except TelegramBadRequest as e:
            logger.error(f"Error downloading {entry['file_name']}: {e}")
            raise QueueDownloadError(entry["file_name"]) from e
        images.append(
            UploadedImage(
                file_name=entry["file_name"],
                mime_type=entry["mime_type"],
                data=buffer.getvalue(),
            )
        )
    return images


async def send_paragraph(message: Message, paragraph: str) -> None:
    """Send one paragraph as HTML, falling back to plain text if Telegram rejects it."""
    try:
        await message.answer(paragraph, parse_mode="HTML")
    except TelegramBadRequest as e:
        logger.error(f"Error sending HTML paragraph: {e}")
        try:
            await message.answer(clean_html(paragraph), parse_mode=None)
        except TelegramBadRequest as plain_error:
            logger.error(f"Error sending plain paragraph: {plain_error}")
            await message.answer(t("errors.send_failed", lang=settings.BOT_LANGUAGE))


async def process_queue(bot: Bot, message: Message, state: FSMContext) -> None:
    """
    Extract and narrate every queued image.

    The queue is cleared after a successful run and kept on failure so the
    user can press GASKEN again.
    """
    lang = settings.BOT_LANGUAGE
    queue = await get_queue(state)
    if not queue:
        await message.answer(t("errors.no_images", lang=lang))
        return

    await state.set_state(KtpStates.processing)
    status_msg = await message.answer(t("status.processing", lang=lang))

    try:
        images = await download_queue(bot, queue)
    except QueueDownloadError as e:
        await status_msg.edit_text(t("errors.download_failed", lang=lang, file_name=e.file_name))
        await state.set_state(KtpStates.collecting)
        return

    try:
        paragraphs = await narrate_images(images, html=True)
    except asyncio.TimeoutError:
        logger.error(f"KTP extraction timed out for {len(images)} image(s)")
        await status_msg.edit_text(t("errors.timeout", lang=lang))
        await state.set_state(KtpStates.collecting)
        return
    except ExtractionError as e:
        logger.error(f"KTP extraction failed: {e} ({getattr(e, 'friendly_message', '')})")
        await status_msg.edit_text(t("errors.extraction_failed", lang=lang))
        await state.set_state(KtpStates.collecting)
        return

    for paragraph in paragraphs:
        await send_paragraph(message, paragraph)

    await status_msg.edit_text(t("status.done", lang=lang, count=len(paragraphs)))
    await clear_queue(state)


@router.message(Command("proses"))
async def cmd_process(message: Message, state: FSMContext):
    await process_queue(message.bot, message, state)


@router.callback_query(F.data == CB_PROCESS)
async def cb_process(callback: CallbackQuery, state: FSMContext):
    await callback.answer()
    await process_queue(callback.bot, callback.message, state)


@router.message(Command("reset"))
async def cmd_reset(message: Message, state: FSMContext):
    await clear_queue(state)
    await message.answer(t("status.reset", lang=settings.BOT_LANGUAGE))


@router.callback_query(F.data == CB_RESET)
async def cb_reset(callback: CallbackQuery, state: FSMContext):
    await callback.answer()
    await clear_queue(state)
    await callback.message.answer(t("status.reset", lang=settings.BOT_LANGUAGE))
