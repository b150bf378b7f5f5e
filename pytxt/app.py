from __future__ import annotations

import logging
from collections.abc import Sequence

from dotenv import load_dotenv
from PyQt6.QtWidgets import QApplication

from pytxt.di.container import Container
from pytxt.services.config.app_config import AppConfig, build_app_config
from pytxt.utils.constants import API_KEY_ENV, APP_NAME, APP_ORG
from pytxt.utils.logging_setup import setup_logging

logger = logging.getLogger(__name__)


def check_credentials(config: AppConfig) -> bool:
    """Log a diagnostic when no API key is configured. Never blocks startup."""
    settings = config.gemini_settings()
    if not settings.has_key:
        logger.error(
            "%s is not set. Set it in your environment or a .env file to use Write with AI.",
            API_KEY_ENV,
        )
        return False
    return True


def run_app(argv: Sequence[str]) -> int:
    """
    Loads environment + config, bootstraps Qt, composes the application via
    the DI container, and launches the main window.
    """
    load_dotenv()
    config = build_app_config()
    setup_logging(config.log_level())
    logger.info("Starting %s %s", APP_NAME, config.get_version())
    check_credentials(config)

    QApplication.setOrganizationName(APP_ORG)
    QApplication.setApplicationName(APP_NAME)
    app = QApplication(list(argv))

    container = Container.default(gemini=config.gemini_settings())
    win = container.build_main_window(app_title=APP_NAME)
    win.show()

    return app.exec()
