"""
Composition of the komparisi sentence: the legal-style Indonesian paragraph
that introduces a KTP holder in a deed.

    <b>Tuan Haji BUDI SANTOSO, Sarjana Hukum</b>, dilahirkan di Jakarta,
    tanggal 17-08-1945 (tujuh belas Agustus seribu sembilan ratus empat puluh
    lima), Pegawai Swasta, bertempat tinggal di ..., Warga Negara Indonesia.

The formatter is a pure function of KtpData: it never raises and holds no
state, so records of a batch can be formatted in any order.
"""

import logging
import re
from typing import Iterable, List

from komparisi.formatters.dates import spell_date
from komparisi.formatters.text import expand_citizenship, pad_number, title_case
from komparisi.models import KtpData
from komparisi.utils.md import escape_html

logger = logging.getLogger(__name__)

INCOMPLETE_DATA_MESSAGE = (
    "Data tidak lengkap dari salah satu KTP. Pratinjau gambar mungkin tidak jelas."
)

SALUTATION_MALE = "Tuan"
SALUTATION_UNMARRIED = "Nona"
SALUTATION_MARRIED = "Nyonya"

UNMARRIED_STATUS = "BELUM KAWIN"

HAJI_PATTERN = re.compile("haji", re.IGNORECASE)
HAJJAH = "Hajjah"


# Classification. Matching stays substring based: the extractor returns
# variants such as "LAKI-LAKI", "Laki laki" or "PEREMPUAN (P)".


def is_male(gender: str) -> bool:
    return "LAKI" in (gender or "").upper()


def is_female(gender: str) -> bool:
    return "PEREMPUAN" in (gender or "").upper()


def is_unmarried(marital_status: str) -> bool:
    return (marital_status or "").strip().upper() == UNMARRIED_STATUS


def select_salutation(gender: str, marital_status: str) -> str:
    """
    Choose Tuan / Nona / Nyonya.

    Male wins regardless of marital status; every other holder is Nona when
    unmarried and Nyonya otherwise (married, divorced, unknown status).
    """
    if is_male(gender):
        return SALUTATION_MALE
    if is_unmarried(marital_status):
        return SALUTATION_UNMARRIED
    return SALUTATION_MARRIED


def normalize_prefix_title(prefix: str, gender: str) -> str:
    """Trim the expanded front title and use Hajjah instead of Haji for women."""
    prefix = (prefix or "").strip()
    if is_female(gender) and HAJI_PATTERN.search(prefix):
        prefix = HAJI_PATTERN.sub(HAJJAH, prefix)
    return prefix


def build_name_block(name: str, prefix: str = "", suffix: str = "") -> str:
    """
    Assemble "[Prefix ]NAME[, Suffix]" with empty titles left out entirely.
    """
    block = ""
    if prefix:
        block += f"{title_case(prefix)} "
    block += (name or "").strip().upper()
    suffix = (suffix or "").strip()
    if suffix:
        block += f", {title_case(suffix)}"
    return block


def build_address(data: KtpData, escape=None) -> str:
    """Fixed-order residence clause: city, street, RT, RW, kelurahan, kecamatan."""
    esc = escape or (lambda value: value)
    return (
        f"bertempat tinggal di {esc(title_case(data.kota))}, {esc(data.alamat)}, "
        f"Rukun Tetangga {esc(pad_number(data.rt))}, Rukun Warga {esc(pad_number(data.rw))}, "
        f"Kelurahan {esc(title_case(data.kel_desa))}, "
        f"Kecamatan {esc(title_case(data.kecamatan))}"
    )


def format_paragraph(data: KtpData, html: bool = True) -> str:
    """
    Render one KTP record as a komparisi paragraph.

    Args:
        data: Extracted KTP fields
        html: Wrap the salutation and name in <b> and escape field values
            for Telegram HTML; False gives the plain copy-text version

    Returns:
        str: The paragraph, or INCOMPLETE_DATA_MESSAGE when the NIK is missing
    """
    if not (data.nik or "").strip():
        logger.info("KTP record without NIK, returning incomplete-data message")
        return INCOMPLETE_DATA_MESSAGE

    esc = escape_html if html else (lambda value: value)

    salutation = select_salutation(data.jenis_kelamin, data.status_perkawinan)
    prefix = normalize_prefix_title(data.gelar_depan_expanded, data.jenis_kelamin)
    name_block = f"{salutation} {build_name_block(data.nama, prefix, data.gelar_belakang_expanded)}"
    if html:
        name_block = f"<b>{esc(name_block)}</b>"

    # An unreadable date still renders "()": the raw date stays visible
    date_words = spell_date(data.tanggal_lahir)

    return (
        f"{name_block}, dilahirkan di {esc(title_case(data.tempat_lahir))}, "
        f"tanggal {esc(data.tanggal_lahir)} ({date_words}), "
        f"{esc(title_case(data.pekerjaan))}, {build_address(data, esc)}, "
        f"pemegang Kartu Tanda Penduduk dengan Nomor Induk Kependudukan {esc(data.nik)}, "
        f"{esc(expand_citizenship(data.kewarganegaraan))}."
    )


def format_batch(records: Iterable[KtpData], html: bool = True) -> List[str]:
    """Format every record of a batch; output order follows input order."""
    return [format_paragraph(record, html=html) for record in records]
