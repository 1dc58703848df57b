"""Tests for the Flet form screen. Skipped when flet is not installed."""

from types import SimpleNamespace
from unittest.mock import MagicMock

import asyncio

import pytest

ft = pytest.importorskip("flet")

from src.form import FormState  # noqa: E402
from src.languages import LANGUAGES  # noqa: E402
from src.ui.app import TranslatrApp, render_form  # noqa: E402
from src.ui.components import language_options  # noqa: E402


def _event(value):
    return SimpleNamespace(control=SimpleNamespace(value=value))


@pytest.fixture
def page():
    return MagicMock()


@pytest.fixture
def app(page, hola_backend):
    return TranslatrApp(page=page, backend=hola_backend)


class TestLanguageOptions:

    def test_one_option_per_catalog_entry(self):
        options = language_options(LANGUAGES)

        assert [(o.key, o.text) for o in options] == [(lang.code, lang.name) for lang in LANGUAGES]


class TestTranslatrApp:

    def test_selectors_list_the_catalog(self, app):
        for dropdown in (app.controls.language_from, app.controls.language_to):
            assert [(o.key, o.text) for o in dropdown.options] == [
                (lang.code, lang.name) for lang in LANGUAGES
            ]

    def test_labels(self, app):
        assert app.controls.language_from.label == "From"
        assert app.controls.language_to.label == "To"
        assert app.controls.text_from.label == "Text to translate"
        assert app.controls.text_to.label == "Translated text"

    def test_mount_renders_defaults(self, app, page):
        assert app.controls.language_from.value == "en"
        assert app.controls.language_to.value == "fr"
        assert app.controls.text_from.value == ""
        assert app.controls.text_to.value == ""
        page.add.assert_called_once()
        page.update.assert_called()

    def test_output_is_not_editable(self, app):
        assert app.controls.text_to.read_only is True
        assert app.controls.text_to.disabled is True
        assert app.controls.text_to.on_change is None
        assert not app.controls.text_from.read_only

    @pytest.mark.asyncio
    async def test_events_update_state(self, app):
        await app._on_language_from(_event("de"))
        await app._on_language_to(_event("es"))
        await app._on_text_from(_event("Hallo"))

        assert app.controller.state == FormState("de", "es", "Hallo", "")

    @pytest.mark.asyncio
    async def test_submit_renders_translation(self, app, page):
        await app._on_language_to(_event("es"))
        await app._on_text_from(_event("Hello."))
        page.update.reset_mock()

        await app.controller.submit()

        assert app.controls.text_to.value == "Hola."
        assert app.controls.text_from.value == "Hello."
        page.update.assert_called()

    def test_heading_is_added_to_page(self, app, page):
        column = page.add.call_args.args[0]

        assert app.header.value == "Translatr"
        assert any(c is app.header for c in column.controls)

    def test_translate_button(self, app, page):
        column = page.add.call_args.args[0]

        assert app.translate_button.content == "Translate"
        assert any(c is app.translate_button for c in column.controls)

    @pytest.mark.asyncio
    async def test_clicking_translate_renders_translation(self, app):
        await app._on_language_to(_event("es"))
        await app._on_text_from(_event("Hello."))

        await app.translate_button.on_click(None)
        for _ in range(5):
            await asyncio.sleep(0)

        assert app.controller.pending == 0
        assert app.controls.text_to.value == "Hola."
        assert app.controller.state.input_text == "Hello."


class TestRenderForm:

    def test_copies_state_into_controls(self):
        controls = SimpleNamespace(
            language_from=SimpleNamespace(value=None),
            language_to=SimpleNamespace(value=None),
            text_from=SimpleNamespace(value=None),
            text_to=SimpleNamespace(value=None),
        )

        render_form(controls, FormState("en", "es", "Hello.", "Hola."))

        assert controls.language_from.value == "en"
        assert controls.language_to.value == "es"
        assert controls.text_from.value == "Hello."
        assert controls.text_to.value == "Hola."
