"""
Image preprocessing utilities for KTP extraction.
"""

import io
import logging
from typing import Union

from PIL import Image, UnidentifiedImageError
from PIL.Image import Resampling

logger = logging.getLogger(__name__)

# Pillow format name -> MIME type accepted by the vision API
FORMAT_MIME_TYPES = {
    "JPEG": "image/jpeg",
    "PNG": "image/png",
    "WEBP": "image/webp",
    "GIF": "image/gif",
}


def detect_mime_type(image_bytes: bytes, default: str = "image/jpeg") -> str:
    """
    Detect the MIME type of an image from its content.

    Args:
        image_bytes: Raw image bytes
        default: Returned when the format is unknown or unreadable

    Returns:
        MIME type string
    """
    try:
        with Image.open(io.BytesIO(image_bytes)) as img:
            return FORMAT_MIME_TYPES.get(img.format, default)
    except (UnidentifiedImageError, OSError):
        return default


def resize_image(image_bytes: bytes, max_size: int = 1600, quality: int = 90) -> bytes:
    """
    Resize an image if it exceeds the maximum size.

    Args:
        image_bytes: Raw image bytes
        max_size: Maximum dimension size in pixels
        quality: JPEG quality (0-100)

    Returns:
        Optimized image bytes
    """
    try:
        img: Image.Image = Image.open(io.BytesIO(image_bytes))

        # If image is already small enough, return as is
        if max(img.size) <= max_size and len(image_bytes) <= 1.5 * 1024 * 1024:
            return image_bytes

        if max(img.size) > max_size:
            ratio = max_size / max(img.size)
            new_size = (int(img.size[0] * ratio), int(img.size[1] * ratio))
            img = img.resize(new_size, Resampling.LANCZOS)

        output = io.BytesIO()
        if img.mode == "RGBA" and "transparency" in img.info:
            img.save(output, format="PNG", optimize=True)
        else:
            if img.mode != "RGB":
                img = img.convert("RGB")
            img.save(output, format="JPEG", quality=quality, optimize=True)

        result = output.getvalue()

        # Keep the original if re-encoding did not help
        if len(result) >= len(image_bytes):
            return image_bytes

        return result
    except (UnidentifiedImageError, OSError, ValueError) as e:
        logger.warning(f"Image resize skipped: {e}")
        return image_bytes


def prepare_for_ocr(
    image_path_or_bytes: Union[str, bytes], use_preprocessing: bool = True
) -> bytes:
    """
    Prepare a KTP image for extraction.

    Args:
        image_path_or_bytes: Image path or bytes
        use_preprocessing: Whether to downscale large images

    Returns:
        Processed image bytes
    """
    if isinstance(image_path_or_bytes, str):
        with open(image_path_or_bytes, "rb") as f:
            image_bytes = f.read()
    else:
        image_bytes = image_path_or_bytes

    if not use_preprocessing:
        return image_bytes

    return resize_image(image_bytes)
