import logging
import os

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

# OPENAI_OCR_KEY below reads the environment at import time
load_dotenv(os.getenv("ENV_FILE", ".env"))


class Settings(BaseSettings):
    TELEGRAM_BOT_TOKEN: str = ""
    OPENAI_API_KEY: str = ""
    OPENAI_MODEL: str = "gpt-4o"
    OPENAI_API_URL: str = "https://api.openai.com/v1/chat/completions"

    # Vision extraction configuration
    OPENAI_OCR_KEY: str = os.getenv("OPENAI_OCR_KEY", os.getenv("OPENAI_API_KEY", ""))
    OCR_TIMEOUT: int = 60  # seconds per extraction call
    OCR_MAX_RETRIES: int = 2  # retries for transient API errors

    # Image preprocessing configuration
    USE_IMAGE_PREPROCESSING: bool = True

    # Batch configuration
    MAX_FILES: int = 10  # KTP images per batch

    # Language for bot messages (texts_<lang>.yaml)
    BOT_LANGUAGE: str = "id"

    model_config = SettingsConfigDict(
        extra="allow", env_file=os.getenv("ENV_FILE", ".env"), env_file_encoding="utf-8"
    )


settings = Settings()


def get_ocr_key() -> str:
    """
    Resolve the API key used for KTP extraction.

    OPENAI_OCR_KEY wins; OPENAI_API_KEY is the fallback.

    Returns:
        str: API key, empty string if none is configured
    """
    ocr_key = settings.OPENAI_OCR_KEY
    if not ocr_key:
        logging.warning("OPENAI_OCR_KEY not set, trying to use OPENAI_API_KEY")
        ocr_key = settings.OPENAI_API_KEY or os.getenv("OPENAI_API_KEY", "")

    if not ocr_key:
        logging.error("OPENAI_OCR_KEY and OPENAI_API_KEY are not set; extraction unavailable")
    return ocr_key
