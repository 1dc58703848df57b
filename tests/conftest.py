"""Shared test fixtures for Translatr tests."""

import asyncio

import pytest

from src.translation import (
    TranslationBackend,
    TranslationError,
    TranslationRequest,
    TranslationResult,
)


class StubBackend(TranslationBackend):
    """Backend whose replies are resolved by the test.

    Every ``translate`` call records its request and waits on a future that the
    test completes with ``reply(index, text)`` or ``fail(index, exc)``.
    """

    def __init__(self):
        self.requests: list[TranslationRequest] = []
        self._replies: list[asyncio.Future] = []

    async def translate(self, request):
        self.requests.append(request)
        reply = asyncio.get_running_loop().create_future()
        self._replies.append(reply)
        text = await reply
        return TranslationResult(
            translated_text=text,
            source_language=request.source_language,
            target_language=request.target_language,
            backend_used=self.name,
        )

    def reply(self, index, text):
        self._replies[index].set_result(text)

    def fail(self, index, exc):
        self._replies[index].set_exception(exc)

    @property
    def name(self):
        return "stub"


class FixedBackend(TranslationBackend):
    """Backend that answers every request immediately with the same text."""

    def __init__(self, text):
        self.text = text

    async def translate(self, request):
        return TranslationResult(
            translated_text=self.text,
            source_language=request.source_language,
            target_language=request.target_language,
            backend_used=self.name,
        )

    @property
    def name(self):
        return "fixed"


@pytest.fixture
def stub_backend():
    return StubBackend()


@pytest.fixture
def hola_backend():
    return FixedBackend("Hola.")


@pytest.fixture
def translation_error():
    return TranslationError("service unavailable")
