"""Static catalog of languages offered by the translation form."""

from src.languages.catalog import (
    DEFAULT_SOURCE_LANGUAGE,
    DEFAULT_TARGET_LANGUAGE,
    LANGUAGES,
    Language,
    get_language,
    is_supported,
)

__all__ = [
    "DEFAULT_SOURCE_LANGUAGE",
    "DEFAULT_TARGET_LANGUAGE",
    "LANGUAGES",
    "Language",
    "get_language",
    "is_supported",
]
