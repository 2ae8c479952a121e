"""
Tests for the process_image.py command line tool
"""

import asyncio
import io
from unittest.mock import AsyncMock, patch

import pytest
from PIL import Image

import process_image
from komparisi.utils.async_ocr import ExtractionError


@pytest.fixture
def ktp_files(tmp_path):
    paths = []
    for name, fmt in (("satu.jpg", "JPEG"), ("dua.png", "PNG")):
        buffer = io.BytesIO()
        Image.new("RGB", (40, 25), color="white").save(buffer, format=fmt)
        path = tmp_path / name
        path.write_bytes(buffer.getvalue())
        paths.append(str(path))
    return paths


@pytest.fixture(autouse=True)
def no_log_setup():
    with patch("process_image.configure_logging"):
        yield


def test_parse_args_flags():
    args = process_image.parse_args(["a.jpg", "b.jpg", "--html", "-v"])
    assert args.images == ["a.jpg", "b.jpg"]
    assert args.html is True
    assert args.verbose is True


def test_load_images_detects_mime(ktp_files):
    images = process_image.load_images(ktp_files)
    assert [image.file_name for image in images] == ["satu.jpg", "dua.png"]
    assert [image.mime_type for image in images] == ["image/jpeg", "image/png"]


def test_main_prints_paragraph_per_file(ktp_files, capsys):
    narrate = AsyncMock(return_value=["Tuan A, dilahirkan.", "Nyonya B, dilahirkan."])
    with patch("process_image.narrate_images", narrate):
        assert process_image.main(ktp_files) == 0

    out = capsys.readouterr().out
    assert "# satu.jpg\nTuan A, dilahirkan.\n" in out
    assert "# dua.png\nNyonya B, dilahirkan.\n" in out
    assert narrate.call_args.kwargs["html"] is False


def test_main_missing_file(tmp_path, capsys):
    assert process_image.main([str(tmp_path / "hilang.jpg")]) == 1
    assert "tidak ditemukan" in capsys.readouterr().err


def test_main_too_many_files(ktp_files, capsys, monkeypatch):
    monkeypatch.setattr("komparisi.batch.settings.MAX_FILES", 1)
    assert process_image.main(ktp_files) == 1
    assert "tidak boleh melebihi 1 file" in capsys.readouterr().err


@pytest.mark.parametrize(
    "error, text",
    [
        (ExtractionError("Vision API returned error: 500"), "gagal mengekstrak"),
        (asyncio.TimeoutError(), "waktu pemrosesan habis"),
    ],
)
def test_main_extraction_errors(ktp_files, capsys, error, text):
    with patch("process_image.narrate_images", AsyncMock(side_effect=error)):
        assert process_image.main(ktp_files) == 1
    assert text in capsys.readouterr().err
