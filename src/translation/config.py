"""Configuration dataclass and factory function for the translation backend."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.translation.base import TranslationBackend

DEFAULT_SERVICE_URL = "https://libretranslate.de/translate"


@dataclass
class LibreTranslateConfig:
    """Configuration for the LibreTranslate HTTP backend."""

    url: str = DEFAULT_SERVICE_URL
    timeout: float | None = None  # None = wait as long as the service takes


def get_backend(config: LibreTranslateConfig | None = None) -> TranslationBackend:
    """Return a configured backend instance.

    Args:
        config: Service configuration. Uses defaults if None.

    Returns:
        A concrete TranslationBackend instance.
    """
    # Import here to avoid circular imports
    from src.translation.libretranslate import LibreTranslateBackend

    return LibreTranslateBackend(config or LibreTranslateConfig())
