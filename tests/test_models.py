"""Tests for komparisi/models.py"""

import pytest
from pydantic import ValidationError

from komparisi.models import KtpData, UploadedImage


class TestKtpData:
    """Test KtpData model"""

    def test_camel_case_keys_from_extraction_schema(self):
        data = KtpData.model_validate(
            {
                "nik": "3171012345670001",
                "nama": "BUDI",
                "gelarDepanExpanded": "Haji",
                "gelarBelakangExpanded": "Sarjana Hukum",
                "tempatLahir": "JAKARTA",
                "tanggalLahir": "17-08-1945",
                "jenisKelamin": "LAKI-LAKI",
                "kelDesa": "GAMBIR",
                "statusPerkawinan": "KAWIN",
            }
        )
        assert data.gelar_depan_expanded == "Haji"
        assert data.gelar_belakang_expanded == "Sarjana Hukum"
        assert data.tempat_lahir == "JAKARTA"
        assert data.tanggal_lahir == "17-08-1945"
        assert data.jenis_kelamin == "LAKI-LAKI"
        assert data.kel_desa == "GAMBIR"
        assert data.status_perkawinan == "KAWIN"

    def test_snake_case_keys(self):
        data = KtpData(nik="1", tempat_lahir="Bandung", kel_desa="Cihapit")
        assert data.tempat_lahir == "Bandung"
        assert data.kel_desa == "Cihapit"

    def test_missing_fields_default_to_empty(self):
        data = KtpData()
        assert data.nik == ""
        assert data.gelar_depan_expanded == ""
        assert data.kewarganegaraan == ""

    def test_none_and_numbers_coerced_to_text(self):
        data = KtpData.model_validate({"nik": None, "rt": 5, "rw": 12, "gelarDepanExpanded": None})
        assert data.nik == ""
        assert data.rt == "5"
        assert data.rw == "12"
        assert data.gelar_depan_expanded == ""

    def test_invalid_type_raises(self):
        with pytest.raises(ValidationError):
            KtpData.model_validate({"nama": ["BUDI"]})

    def test_frozen(self):
        data = KtpData(nik="1")
        with pytest.raises(ValidationError):
            data.nik = "2"

    def test_unknown_keys_ignored(self):
        data = KtpData.model_validate({"nik": "1", "agama": "ISLAM"})
        assert not hasattr(data, "agama")


class TestUploadedImage:
    """Test UploadedImage model"""

    def test_defaults(self):
        image = UploadedImage(file_name="ktp.jpg", data=b"\xff\xd8")
        assert image.mime_type == "image/jpeg"
        assert image.data == b"\xff\xd8"

    def test_missing_data_raises(self):
        with pytest.raises(ValidationError):
            UploadedImage(file_name="ktp.jpg")
