"""Language catalog used to populate the From/To selectors.

The list mirrors the languages served by the public LibreTranslate instance.
Tuple order is display order.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Language:
    code: str  # ISO-639-1 as expected by LibreTranslate
    name: str


LANGUAGES: tuple[Language, ...] = (
    Language("en", "English"),
    Language("ar", "Arabic"),
    Language("az", "Azerbaijani"),
    Language("zh", "Chinese"),
    Language("cs", "Czech"),
    Language("da", "Danish"),
    Language("nl", "Dutch"),
    Language("eo", "Esperanto"),
    Language("fi", "Finnish"),
    Language("fr", "French"),
    Language("de", "German"),
    Language("el", "Greek"),
    Language("he", "Hebrew"),
    Language("hi", "Hindi"),
    Language("hu", "Hungarian"),
    Language("id", "Indonesian"),
    Language("ga", "Irish"),
    Language("it", "Italian"),
    Language("ja", "Japanese"),
    Language("ko", "Korean"),
    Language("fa", "Persian"),
    Language("pl", "Polish"),
    Language("pt", "Portuguese"),
    Language("ru", "Russian"),
    Language("sk", "Slovak"),
    Language("es", "Spanish"),
    Language("sv", "Swedish"),
    Language("tr", "Turkish"),
    Language("uk", "Ukrainian"),
    Language("vi", "Vietnamese"),
)

DEFAULT_SOURCE_LANGUAGE = "en"
DEFAULT_TARGET_LANGUAGE = "fr"

_BY_CODE = {lang.code: lang for lang in LANGUAGES}


def is_supported(code: str) -> bool:
    return code in _BY_CODE


def get_language(code: str) -> Language:
    """Return the catalog entry for `code`.

    Raises:
        KeyError: If the code is not in the catalog.
    """
    try:
        return _BY_CODE[code]
    except KeyError:
        raise KeyError(f"Unknown language code: {code!r}") from None
