"""Translation form controller.

Owns the four-field form state and the submit action. All mutations happen on
the asyncio event loop the view runs on; ``submit`` schedules the service call
and returns immediately, so the form stays editable while requests are in
flight. Responses are applied in completion order: a slow early request can
overwrite the output of a faster later one.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Callable

from src.languages import (
    DEFAULT_SOURCE_LANGUAGE,
    DEFAULT_TARGET_LANGUAGE,
    get_language,
    is_supported,
)
from src.translation import (
    TranslationBackend,
    TranslationError,
    TranslationRequest,
)

logger = logging.getLogger(__name__)


@dataclass
class FormState:
    """Current values of the form. ``output_text`` is written only by a response."""

    source_language: str = DEFAULT_SOURCE_LANGUAGE
    target_language: str = DEFAULT_TARGET_LANGUAGE
    input_text: str = ""
    output_text: str = ""


class TranslationFormController:
    """Mutates a FormState in response to user events and service replies.

    Args:
        backend:   Translation service client.
        on_change: Called with the state after every mutation (the view's render).
    """

    def __init__(
        self,
        backend: TranslationBackend,
        on_change: Callable[[FormState], None] | None = None,
    ) -> None:
        self._backend = backend
        self._on_change = on_change
        self._state = FormState()
        self._pending: set[asyncio.Task] = set()

    @property
    def state(self) -> FormState:
        return self._state

    @property
    def pending(self) -> int:
        """Number of submissions still waiting for the service."""
        return len(self._pending)

    # ------------------------------------------------------------------
    # User input
    # ------------------------------------------------------------------

    def set_source_language(self, code: str) -> None:
        self._require_supported(code)
        self._state.source_language = code
        self._changed()

    def set_target_language(self, code: str) -> None:
        self._require_supported(code)
        self._state.target_language = code
        self._changed()

    def set_input_text(self, text: str) -> None:
        self._state.input_text = text
        self._changed()

    # ------------------------------------------------------------------
    # Submission
    # ------------------------------------------------------------------

    def submit(self) -> asyncio.Task:
        """Send the current text to the translation service.

        Must be called from within the running event loop. The returned task
        is not awaited here; it resolves once the reply has been applied (or
        the failure logged).
        """
        request = TranslationRequest(
            text=self._state.input_text,
            source_language=self._state.source_language,
            target_language=self._state.target_language,
        )
        logger.info(
            "[INFO] Submitting translation %s -> %s",
            get_language(request.source_language).name,
            get_language(request.target_language).name,
        )
        task = asyncio.ensure_future(self._translate(request))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def _translate(self, request: TranslationRequest) -> None:
        try:
            result = await self._backend.translate(request)
        except TranslationError as exc:
            logger.warning("Translation failed: %s", exc)
            return

        self._state.output_text = result.translated_text
        self._changed()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _changed(self) -> None:
        if self._on_change is not None:
            self._on_change(self._state)

    @staticmethod
    def _require_supported(code: str) -> None:
        if not is_supported(code):
            raise ValueError(f"Unsupported language code: {code!r}")
