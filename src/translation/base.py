"""Abstract base class for translation backends (Strategy pattern)."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


class TranslationError(RuntimeError):
    """Raised by a backend when a translation could not be obtained."""


@dataclass(frozen=True)
class TranslationRequest:
    """One submission, snapshotted from the form at submit time."""

    text: str
    source_language: str
    target_language: str

    def to_payload(self) -> dict[str, str]:
        """JSON body understood by LibreTranslate's ``/translate``."""
        return {
            "q": self.text,
            "source": self.source_language,
            "target": self.target_language,
        }


@dataclass
class TranslationResult:
    """Result of a translation operation."""

    translated_text: str
    source_language: str
    target_language: str
    backend_used: str


class TranslationBackend(ABC):
    """Abstract interface that all translation backends must implement."""

    @abstractmethod
    async def translate(self, request: TranslationRequest) -> TranslationResult:
        """Translate the request text.

        Args:
            request: Text plus source/target language codes.

        Returns:
            TranslationResult with the translated text and metadata.

        Raises:
            TranslationError: If the service could not produce a translation.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name for this backend."""
        ...
