from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


def _text_field(camel: str = None) -> Any:
    """Plain-text KTP field accepting both snake_case and the schema's camelCase key."""
    if camel is None:
        return Field(default="")
    return Field(default="", validation_alias=AliasChoices(camel, _snake(camel)))


def _snake(camel: str) -> str:
    return "".join("_" + c.lower() if c.isupper() else c for c in camel)


class KtpData(BaseModel):
    """Structured fields read from one KTP (Kartu Tanda Penduduk) image.

    Every value is untrusted free text from a probabilistic extractor: any
    field may be empty or inconsistently cased. Missing values become "".
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    nik: str = _text_field()
    nama: str = _text_field()
    gelar_depan_expanded: str = _text_field("gelarDepanExpanded")
    gelar_belakang_expanded: str = _text_field("gelarBelakangExpanded")
    tempat_lahir: str = _text_field("tempatLahir")
    tanggal_lahir: str = _text_field("tanggalLahir")
    jenis_kelamin: str = _text_field("jenisKelamin")
    alamat: str = _text_field()
    rt: str = _text_field()
    rw: str = _text_field()
    kel_desa: str = _text_field("kelDesa")
    kecamatan: str = _text_field()
    kota: str = _text_field()
    status_perkawinan: str = _text_field("statusPerkawinan")
    pekerjaan: str = _text_field()
    kewarganegaraan: str = _text_field()

    @field_validator("*", mode="before")
    def coerce_text(cls, v):
        """Extractors return null or numbers for some fields; keep everything as text."""
        if v is None:
            return ""
        if isinstance(v, (int, float)):
            return str(v)
        return v


class UploadedImage(BaseModel):
    """One queued KTP image of a batch."""

    file_name: str
    mime_type: str = "image/jpeg"
    data: bytes
