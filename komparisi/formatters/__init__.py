"""
Deterministic Indonesian text formatting for KTP records.
"""

from komparisi.formatters.dates import spell_date
from komparisi.formatters.narrative import (
    INCOMPLETE_DATA_MESSAGE,
    format_batch,
    format_paragraph,
    select_salutation,
)
from komparisi.formatters.numbers import spell_number
from komparisi.formatters.text import title_case

__all__ = [
    "INCOMPLETE_DATA_MESSAGE",
    "format_batch",
    "format_paragraph",
    "select_salutation",
    "spell_date",
    "spell_number",
    "title_case",
]
