import logging
import re

from komparisi.formatters.numbers import spell_number

logger = logging.getLogger(__name__)

MONTHS = [
    "",
    "Januari",
    "Februari",
    "Maret",
    "April",
    "Mei",
    "Juni",
    "Juli",
    "Agustus",
    "September",
    "Oktober",
    "November",
    "Desember",
]

# Years from 2000 on are read with the word "tahun" in front
YEAR_PREFIX_FROM = 2000

DATE_PATTERN = re.compile(r"^(\d+)-(\d+)-(\d+)$")


def spell_date(date_str: str) -> str:
    """
    Spell a DD-MM-YYYY date in Indonesian words.

    "17-08-1945" -> "tujuh belas Agustus seribu sembilan ratus empat puluh lima"
    "01-01-2000" -> "satu Januari tahun dua ribu"

    Returns an empty string when the date cannot be read; the caller keeps
    the rest of the sentence.
    """
    if not date_str:
        return ""

    match = DATE_PATTERN.match(date_str.strip())
    if not match:
        logger.debug(f"Unreadable birth date: {date_str!r}")
        return ""

    try:
        day, month, year = (int(part) for part in match.groups())
    except ValueError:
        # Beyond the interpreter's integer string conversion limit
        logger.debug(f"Birth date too long to read: {date_str[:32]!r}...")
        return ""
    if not 1 <= month <= 12 or not 1 <= day <= 31:
        logger.debug(f"Birth date out of range: {date_str!r}")
        return ""

    year_words = spell_number(year)
    if year >= YEAR_PREFIX_FROM:
        year_words = f"tahun {year_words}"

    return f"{spell_number(day)} {MONTHS[month]} {year_words}"
