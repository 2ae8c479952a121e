from unittest.mock import patch

from komparisi.config import Settings, get_ocr_key, settings


class TestSettings:
    """Test Settings defaults and environment overrides."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("MAX_FILES", raising=False)
        monkeypatch.delenv("OPENAI_MODEL", raising=False)
        s = Settings(_env_file=None)
        assert s.MAX_FILES == 10
        assert s.OPENAI_MODEL == "gpt-4o"
        assert s.OCR_TIMEOUT == 60
        assert s.BOT_LANGUAGE == "id"
        assert s.USE_IMAGE_PREPROCESSING is True

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("MAX_FILES", "3")
        monkeypatch.setenv("USE_IMAGE_PREPROCESSING", "false")
        s = Settings(_env_file=None)
        assert s.MAX_FILES == 3
        assert s.USE_IMAGE_PREPROCESSING is False


class TestGetOcrKey:
    """Test API key resolution."""

    def test_ocr_key_wins(self):
        with patch.object(settings, "OPENAI_OCR_KEY", "ocr-key"), patch.object(
            settings, "OPENAI_API_KEY", "api-key"
        ):
            assert get_ocr_key() == "ocr-key"

    def test_falls_back_to_api_key(self):
        with patch.object(settings, "OPENAI_OCR_KEY", ""), patch.object(
            settings, "OPENAI_API_KEY", "api-key"
        ):
            assert get_ocr_key() == "api-key"

    def test_no_key(self, monkeypatch):
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)
        with patch.object(settings, "OPENAI_OCR_KEY", ""), patch.object(
            settings, "OPENAI_API_KEY", ""
        ):
            assert get_ocr_key() == ""
