"""Translation form screen.

The screen keeps no state of its own: every user event goes through the
TranslationFormController, and the controller calls ``render_form`` after each
mutation to copy the FormState back into the controls.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import flet as ft

from src.form import FormState, TranslationFormController
from src.languages import LANGUAGES
from src.translation import TranslationBackend
from src.ui.components import language_dropdown, text_area

logger = logging.getLogger(__name__)


@dataclass
class FormControls:
    """The Flet controls that mirror a FormState."""

    language_from: ft.Dropdown
    language_to: ft.Dropdown
    text_from: ft.TextField
    text_to: ft.TextField


def render_form(controls: FormControls, state: FormState) -> None:
    """Copy ``state`` into ``controls``. Does not call ``page.update()``."""
    controls.language_from.value = state.source_language
    controls.language_to.value = state.target_language
    controls.text_from.value = state.input_text
    controls.text_to.value = state.output_text


class TranslatrApp:
    """The translation form: From/To selectors, input and output areas, Translate.

    Args:
        page:    Flet Page for this session.
        backend: Translation service client shared by all submissions.
    """

    def __init__(self, page: ft.Page, backend: TranslationBackend) -> None:
        self.page = page
        self._controller = TranslationFormController(backend, on_change=self._render)
        self._build_ui()

    @property
    def controller(self) -> TranslationFormController:
        return self._controller

    @property
    def controls(self) -> FormControls:
        return self._controls

    @property
    def header(self) -> ft.Text:
        return self._header

    @property
    def translate_button(self) -> ft.FilledButton:
        return self._btn_translate

    # ------------------------------------------------------------------
    # Page setup
    # ------------------------------------------------------------------

    @staticmethod
    def configure_page(page: ft.Page) -> None:
        page.title = "Translatr"
        page.theme_mode = ft.ThemeMode.LIGHT
        page.bgcolor = "#F5F5F5"
        page.padding = 20

    # ------------------------------------------------------------------
    # Build UI
    # ------------------------------------------------------------------

    def _build_ui(self) -> None:
        self.page.controls.clear()

        state = self._controller.state
        self._controls = FormControls(
            language_from=language_dropdown(
                "From", state.source_language, LANGUAGES, on_select=self._on_language_from
            ),
            language_to=language_dropdown(
                "To", state.target_language, LANGUAGES, on_select=self._on_language_to
            ),
            text_from=text_area("Text to translate", on_change=self._on_text_from),
            text_to=text_area("Translated text", read_only=True),
        )

        self._header = ft.Text("Translatr", size=26, weight=ft.FontWeight.BOLD)

        self._btn_translate = ft.FilledButton(
            "Translate",
            icon=ft.Icons.TRANSLATE,
            on_click=self._on_submit,
            style=ft.ButtonStyle(bgcolor="#1976D2", color="white"),
        )

        row = ft.Row(
            [
                ft.Column(
                    [self._controls.language_from, self._controls.text_from],
                    spacing=10,
                    expand=True,
                ),
                ft.Column(
                    [self._controls.language_to, self._controls.text_to],
                    spacing=10,
                    expand=True,
                ),
            ],
            spacing=20,
            vertical_alignment=ft.CrossAxisAlignment.START,
        )

        self.page.add(
            ft.Column(
                [self._header, ft.Divider(height=1), row, self._btn_translate],
                spacing=12,
                expand=True,
            )
        )
        self._render(state)

    def _render(self, state: FormState) -> None:
        render_form(self._controls, state)
        self.page.update()

    # ------------------------------------------------------------------
    # Event handlers (coroutines, so they run on the session's event loop)
    # ------------------------------------------------------------------

    async def _on_language_from(self, e) -> None:
        self._controller.set_source_language(e.control.value)

    async def _on_language_to(self, e) -> None:
        self._controller.set_target_language(e.control.value)

    async def _on_text_from(self, e) -> None:
        self._controller.set_input_text(e.control.value or "")

    async def _on_submit(self, e) -> None:  # noqa: ARG002
        self._controller.submit()
