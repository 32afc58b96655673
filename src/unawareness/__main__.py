"""
Main entry point for Unawareness application.
Usage: python -m unawareness
"""

import sys
import logging
from typing import Optional, Tuple

from PySide6.QtWidgets import QApplication, QMessageBox

from . import __version__
from .necro_data import Document, NecroDataError, NecroDataService
from .settings import AppSettings, ConfigError
from .gui.actions import ask_game_path
from .gui.main_window import MainWindow
from .utils.logging_config import setup_logging

logger = logging.getLogger(__name__)


def show_error_dialog(title: str, message: str, details: Optional[str] = None) -> None:
    """Show a modal error box, creating the QApplication if needed."""
    if QApplication.instance() is None:
        QApplication(sys.argv)

    msg_box = QMessageBox()
    msg_box.setIcon(QMessageBox.Icon.Critical)
    msg_box.setWindowTitle(title)
    msg_box.setText(message)
    if details:
        msg_box.setDetailedText(details)
    msg_box.exec()


def check_settings(settings: AppSettings) -> bool:
    """Log validation results; report errors to the user.

    Returns:
        False if the configuration cannot be used
    """
    result = settings.validate()
    for warning in result.warnings:
        logger.warning(f"Configuration: {warning}")
    if result.is_valid:
        return True

    for error in result.errors:
        logger.error(f"Configuration: {error}")
    show_error_dialog(
        "Configuration Error",
        "Configuration validation failed. Please check your settings.",
        "\n".join(result.errors),
    )
    return False


def load_initial_document(settings: AppSettings) -> Tuple[NecroDataService, Document]:
    """Find the game directory (asking once if unset) and load the document.

    Raises:
        ConfigError: if no game directory is configured
        NecroDataError: if necrodancer.xml cannot be loaded
    """
    if settings.necrodancer_path is None:
        logger.warning("NecroDancer path not configured, prompting user")
        ask_game_path(settings)

    service = NecroDataService(settings.require_necrodancer_path(), settings)
    return service, service.load()


def main() -> int:
    """Main application entry point."""
    try:
        settings = AppSettings()

        app = QApplication(sys.argv)
        app.setApplicationName("unawareness")
        app.setApplicationVersion(__version__)
        app.setOrganizationName("unawareness")
        app.setStyle("Fusion")

        setup_logging(settings)
        logger.info(f"Starting Unawareness {__version__}")
        logger.info(f"Configuration loaded from {settings.get_settings_file_path()}")

        if not check_settings(settings):
            return 1

        try:
            service, document = load_initial_document(settings)
        except (ConfigError, NecroDataError) as e:
            logger.error(str(e))
            show_error_dialog("Unawareness", str(e))
            return 1

        settings.set_first_run_complete()

        # Keep a reference for the lifetime of the event loop
        main_window = MainWindow(settings, service, document)
        main_window.show()

        logger.info("Application started successfully")
        return app.exec()

    except Exception as e:
        logger.exception("Unhandled exception in main")
        show_error_dialog("Application Error", "An unexpected error occurred.", str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
