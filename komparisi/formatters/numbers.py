"""
Spelling of non-negative integers as Indonesian words (terbilang).

    >>> spell_number(2024)
    'dua ribu dua puluh empat'
"""

UNITS = ["", "satu", "dua", "tiga", "empat", "lima", "enam", "tujuh", "delapan", "sembilan"]
TEENS = [
    "sepuluh",
    "sebelas",
    "dua belas",
    "tiga belas",
    "empat belas",
    "lima belas",
    "enam belas",
    "tujuh belas",
    "delapan belas",
    "sembilan belas",
]
TENS = [
    "",
    "",
    "dua puluh",
    "tiga puluh",
    "empat puluh",
    "lima puluh",
    "enam puluh",
    "tujuh puluh",
    "delapan puluh",
    "sembilan puluh",
]

# Scale words above ribu, largest first. Counts are always spelled in full
# ("satu juta"); only ribu and ratus have the contracted se- form.
SCALES = [
    (10**12, "triliun"),
    (10**9, "miliar"),
    (10**6, "juta"),
]


def _spell_below_hundred(num: int) -> str:
    if num < 10:
        return UNITS[num]
    if num < 20:
        return TEENS[num - 10]
    tens, unit = divmod(num, 10)
    return TENS[tens] + (" " + UNITS[unit] if unit else "")


def spell_number(num: int) -> str:
    """
    Spell a non-negative integer in Indonesian.

    Args:
        num: Integer >= 0

    Returns:
        Words separated by single spaces, e.g. 1945 -> "seribu sembilan ratus empat puluh lima"

    Raises:
        ValueError: If num is negative or not an integer
    """
    if isinstance(num, bool) or not isinstance(num, int):
        raise ValueError(f"Expected a non-negative integer, got {num!r}")
    if num < 0:
        raise ValueError(f"Expected a non-negative integer, got {num}")
    if num == 0:
        return "nol"

    words = []
    for scale, name in SCALES:
        count, num = divmod(num, scale)
        if count:
            words.append(f"{spell_number(count)} {name}")

    thousands, num = divmod(num, 1000)
    if thousands:
        words.append("seribu" if thousands == 1 else f"{spell_number(thousands)} ribu")

    hundreds, num = divmod(num, 100)
    if hundreds:
        words.append("seratus" if hundreds == 1 else f"{UNITS[hundreds]} ratus")

    if num:
        words.append(_spell_below_hundred(num))

    return " ".join(words).strip()
