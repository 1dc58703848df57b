from __future__ import annotations

"""Reusable UI components for the translation form."""

from typing import Iterable

import flet as ft

from src.languages import Language


def language_options(languages: Iterable[Language]) -> list[ft.DropdownOption]:
    """One option per catalog entry: key is the code, text is the display name."""
    return [ft.DropdownOption(key=lang.code, text=lang.name) for lang in languages]


def language_dropdown(
    label: str,
    value: str,
    languages: Iterable[Language],
    on_select=None,
) -> ft.Dropdown:
    """Create a language selector."""
    return ft.Dropdown(
        label=label,
        value=value,
        options=language_options(languages),
        on_select=on_select,
        width=250,
    )


def text_area(
    label: str,
    read_only: bool = False,
    on_change=None,
    min_lines: int = 6,
    max_lines: int = 12,
) -> ft.TextField:
    """Create a multiline text area. Read-only areas are also disabled."""
    return ft.TextField(
        label=label,
        value="",
        multiline=True,
        read_only=read_only,
        disabled=read_only,
        min_lines=min_lines,
        max_lines=max_lines,
        on_change=on_change,
        expand=True,
        text_size=13,
    )
