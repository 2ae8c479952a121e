"""
Message catalogue for Komparisi.
Provides translation functions for the bot and CLI texts.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

logger = logging.getLogger(__name__)

DEFAULT_LANG = "id"

# Dictionary to store loaded translations
_translations: Dict[str, Dict[str, Any]] = {}


def load_translations(lang: str) -> Dict[str, Any]:
    """
    Load translations for the specified language.

    Args:
        lang: The language code to load (e.g., 'id', 'en')

    Returns:
        Dictionary with translation keys
    """
    if lang in _translations:
        return _translations[lang]

    file_path = Path(__file__).resolve().parent / f"texts_{lang}.yaml"
    if not file_path.exists():
        logger.warning(f"Translation file for language '{lang}' not found: {file_path}")
        # Fall back to Indonesian if the requested language is not available
        if lang != DEFAULT_LANG:
            return load_translations(DEFAULT_LANG)
        return {}

    try:
        with open(file_path, "r", encoding="utf-8") as f:
            translations = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.error(f"Error loading translations for '{lang}': {str(e)}")
        return {}

    _translations[lang] = translations
    return translations


def get_nested_value(data: Dict[str, Any], key_path: str) -> Optional[str]:
    """
    Get a nested value from a dictionary using dot notation.

    Args:
        data: The dictionary to search in
        key_path: The path to the value (e.g., 'buttons.process')

    Returns:
        The value if found, None otherwise
    """
    result = data
    for key in key_path.split("."):
        if isinstance(result, dict) and key in result:
            result = result[key]
        else:
            return None

    return result if isinstance(result, str) else None


def t(key: str, lang: str = DEFAULT_LANG, **kwargs) -> str:
    """
    Get a translated string for the given key and language.

    Args:
        key: The translation key (e.g., 'errors.no_images')
        lang: The language code (default: 'id')
        **kwargs: Format arguments to be inserted into the translated string

    Returns:
        The translated string, or the key itself if not found
    """
    value = get_nested_value(load_translations(lang), key)
    if value is None and lang != DEFAULT_LANG:
        value = get_nested_value(load_translations(DEFAULT_LANG), key)

    if value is None:
        logger.warning(f"Translation key '{key}' not found for language '{lang}'")
        return key

    if kwargs:
        try:
            return value.format(**kwargs)
        except (KeyError, IndexError) as e:
            logger.error(f"Missing format argument in translation '{key}': {str(e)}")
            return value

    return value
