import logging
import os

import flet as ft

from src.translation import LibreTranslateConfig, get_backend
from src.translation.config import DEFAULT_SERVICE_URL
from src.ui.app import TranslatrApp

logger = logging.getLogger(__name__)


def _config_from_env() -> LibreTranslateConfig:
    """Build the service config; ``TRANSLATR_SERVICE_URL`` overrides the URL."""
    url = os.environ.get("TRANSLATR_SERVICE_URL") or DEFAULT_SERVICE_URL
    return LibreTranslateConfig(url=url)


def _open_in_browser() -> bool:
    return os.environ.get("TRANSLATR_WEB", "1").strip().lower() not in ("0", "false", "no")


def main(page: ft.Page) -> None:
    """Flet app entry point, called by ft.app() once per session."""
    TranslatrApp.configure_page(page)
    backend = get_backend(_config_from_env())
    logger.info("[INFO] New session, translation service: %s", backend.config.url)
    TranslatrApp(page=page, backend=backend)


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    if _open_in_browser():
        ft.app(main, view=ft.AppView.WEB_BROWSER)
    else:
        ft.app(main)
