"""
Small text helpers shared by the narrative formatter.
"""

import re

_WORD_START = re.compile(r"\b\w")

CITIZEN_CODE = "WNI"
CITIZEN_LONG_FORM = "Warga Negara Indonesia"


def title_case(text: str) -> str:
    """
    Lower-case the text, then capitalize the first character of every word.

    "sarjana hukum" -> "Sarjana Hukum", "KOTA JAKARTA-PUSAT" -> "Kota Jakarta-Pusat"
    """
    if not text:
        return ""
    return _WORD_START.sub(lambda m: m.group().upper(), text.lower())


def pad_number(value: str, width: int = 3) -> str:
    """Left-pad an RT/RW number with zeros: "5" -> "005"."""
    return (value or "").strip().rjust(width, "0")


def expand_citizenship(value: str) -> str:
    """Expand the WNI code; any other citizenship is passed through unmodified."""
    if (value or "").strip().upper() == CITIZEN_CODE:
        return CITIZEN_LONG_FORM
    return value or ""
