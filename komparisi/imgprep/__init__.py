"""
Image preparation for KTP extraction.
"""

from .prepare import detect_mime_type, prepare_for_ocr, resize_image

__all__ = ["detect_mime_type", "prepare_for_ocr", "resize_image"]
