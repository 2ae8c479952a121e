import html
import logging
import re

logger = logging.getLogger(__name__)

_TAG = re.compile(r"<[^>]+>")


def escape_html(text: str) -> str:
    """
    Escape special characters for Telegram's HTML parse_mode.

    Args:
        text: Source text

    Returns:
        str: Escaped text, safe to embed in an HTML message
    """
    if text is None:
        return ""
    if not isinstance(text, str):
        text = str(text)
    return html.escape(text, quote=False)


def clean_html(text: str) -> str:
    """
    Strip HTML tags and unescape entities without touching the content.
    Used when Telegram rejects an HTML message.

    Args:
        text: Text with HTML tags

    Returns:
        str: Plain text
    """
    if text is None:
        return ""
    return html.unescape(_TAG.sub("", text))
