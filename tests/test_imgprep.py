"""
Tests for komparisi/imgprep/prepare.py
"""

import io

from PIL import Image

from komparisi.imgprep.prepare import detect_mime_type, prepare_for_ocr, resize_image


def make_image(size=(100, 60), fmt="JPEG", mode="RGB"):
    buffer = io.BytesIO()
    Image.new(mode, size, color="white").save(buffer, format=fmt)
    return buffer.getvalue()


class TestDetectMimeType:
    def test_jpeg(self):
        assert detect_mime_type(make_image(fmt="JPEG")) == "image/jpeg"

    def test_png(self):
        assert detect_mime_type(make_image(fmt="PNG")) == "image/png"

    def test_unreadable_bytes_use_default(self):
        assert detect_mime_type(b"not an image") == "image/jpeg"
        assert detect_mime_type(b"not an image", default="image/webp") == "image/webp"


class TestResizeImage:
    def test_small_image_untouched(self):
        original = make_image()
        assert resize_image(original) is original

    def test_large_image_downscaled(self):
        buffer = io.BytesIO()
        Image.effect_noise((3200, 2000), 64).save(buffer, format="PNG")
        original = buffer.getvalue()
        result = resize_image(original, max_size=800)

        with Image.open(io.BytesIO(result)) as img:
            assert max(img.size) <= 800

    def test_invalid_bytes_returned_unchanged(self):
        assert resize_image(b"garbage") == b"garbage"


class TestPrepareForOcr:
    def test_reads_path(self, tmp_path):
        path = tmp_path / "ktp.jpg"
        data = make_image()
        path.write_bytes(data)
        assert prepare_for_ocr(str(path)) == data

    def test_preprocessing_disabled(self):
        data = make_image(size=(3000, 3000))
        assert prepare_for_ocr(data, use_preprocessing=False) is data
