"""Translation backends (Strategy pattern) for the remote translation service."""

from src.translation.base import (
    TranslationBackend,
    TranslationError,
    TranslationRequest,
    TranslationResult,
)
from src.translation.config import LibreTranslateConfig, get_backend
from src.translation.libretranslate import LibreTranslateBackend

__all__ = [
    "LibreTranslateBackend",
    "LibreTranslateConfig",
    "TranslationBackend",
    "TranslationError",
    "TranslationRequest",
    "TranslationResult",
    "get_backend",
]
