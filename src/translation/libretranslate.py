"""LibreTranslate backend: one JSON POST per translation."""

from __future__ import annotations

import logging
import time

import httpx

from src.translation.base import (
    TranslationBackend,
    TranslationError,
    TranslationRequest,
    TranslationResult,
)
from src.translation.config import LibreTranslateConfig

logger = logging.getLogger(__name__)


class LibreTranslateBackend(TranslationBackend):
    """Translation backend that talks to a LibreTranslate ``/translate`` endpoint.

    Args:
        config:    Service URL and timeout.
        transport: Optional httpx transport, e.g. ``httpx.MockTransport`` in tests.
    """

    def __init__(
        self,
        config: LibreTranslateConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config or LibreTranslateConfig()
        self._transport = transport

    @property
    def config(self) -> LibreTranslateConfig:
        return self._config

    async def translate(self, request: TranslationRequest) -> TranslationResult:
        """POST the request and read ``translatedText`` from the reply.

        Raises:
            TranslationError: On network failure, a non-success status, a
                non-JSON body, or a reply without ``translatedText``.
        """
        logger.info(
            "[INFO] Translating %d characters %s -> %s",
            len(request.text),
            request.source_language,
            request.target_language,
        )
        start_time = time.perf_counter()

        try:
            async with httpx.AsyncClient(
                timeout=self._config.timeout,
                transport=self._transport,
            ) as client:
                response = await client.post(
                    self._config.url,
                    json=request.to_payload(),
                    headers={"Content-Type": "application/json"},
                )
                response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise TranslationError(
                f"Translation service returned HTTP {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            raise TranslationError(
                f"Could not reach translation service at {self._config.url}: {exc}"
            ) from exc

        try:
            data = response.json()
        except ValueError as exc:
            raise TranslationError("Translation service returned a non-JSON body") from exc

        translated = data.get("translatedText") if isinstance(data, dict) else None
        if not isinstance(translated, str):
            raise TranslationError(
                "Translation service reply has no 'translatedText' field"
            )

        logger.info("[INFO] Translation took %.2fs", time.perf_counter() - start_time)

        return TranslationResult(
            translated_text=translated,
            source_language=request.source_language,
            target_language=request.target_language,
            backend_used=self.name,
        )

    @property
    def name(self) -> str:
        return "libretranslate"
