"""
Batch driver: extract and narrate several KTP images at once.

Extractions run concurrently; results are collected positionally so the
n-th paragraph always belongs to the n-th image.
"""

import asyncio
import logging
import time
import uuid
from typing import Awaitable, Callable, List, Sequence

from komparisi.config import settings
from komparisi.formatters.narrative import format_batch
from komparisi.models import KtpData, UploadedImage
from komparisi.utils.async_ocr import async_ocr

logger = logging.getLogger(__name__)

Extractor = Callable[..., Awaitable[KtpData]]


class BatchLimitError(ValueError):
    """Adding the images would exceed MAX_FILES."""

    def __init__(self, current: int, incoming: int, max_files: int):
        self.current = current
        self.incoming = incoming
        self.max_files = max_files
        super().__init__(
            f"Total files must not exceed {max_files} (current {current}, adding {incoming})"
        )


class EmptyBatchError(ValueError):
    """No images were queued."""


def check_batch_size(current: int, incoming: int, max_files: int = None) -> None:
    """
    Raise BatchLimitError when current + incoming images exceed the limit.
    """
    max_files = max_files if max_files is not None else settings.MAX_FILES
    if current + incoming > max_files:
        raise BatchLimitError(current, incoming, max_files)


async def extract_images(
    images: Sequence[UploadedImage], extract: Extractor = async_ocr
) -> List[KtpData]:
    """
    Run one extraction per image concurrently, keeping input order.

    Raises:
        EmptyBatchError: If images is empty
        ExtractionError / asyncio.TimeoutError: First failure of any image
    """
    if not images:
        raise EmptyBatchError("No images to process")

    batch_id = uuid.uuid4().hex[:8]
    start_time = time.time()
    logger.info(f"[batch_{batch_id}] Extracting {len(images)} KTP image(s)")

    tasks = [
        asyncio.ensure_future(
            extract(image.data, mime_type=image.mime_type, req_id=f"batch_{batch_id}_{idx}")
        )
        for idx, image in enumerate(images, 1)
    ]
    try:
        results = await asyncio.gather(*tasks)
    except Exception:
        # The first failure fails the batch, the rest are cancelled and awaited
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise

    logger.info(f"[batch_{batch_id}] Extraction finished in {time.time() - start_time:.2f}s")
    return list(results)


async def narrate_images(
    images: Sequence[UploadedImage], html: bool = True, extract: Extractor = async_ocr
) -> List[str]:
    """
    Extract every image and render one komparisi paragraph per image.

    Args:
        images: Queued KTP images
        html: Telegram HTML output (True) or plain copy text (False)
        extract: Extraction collaborator, async_ocr by default

    Returns:
        Paragraphs in the same order as images
    """
    records = await extract_images(images, extract=extract)
    return format_batch(records, html=html)
