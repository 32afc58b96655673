"""Action handlers for MainWindow.

Keeps UI action logic separate from window construction/layout.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Optional

from PySide6.QtWidgets import QFileDialog, QMessageBox, QWidget

from .. import __version__
from ..necro_data import NecroDataError, NecroDataService
from .dialogs import LoggingSettingsDialog, show_about_dialog

if TYPE_CHECKING:
    from ..settings import AppSettings
    from .main_window import MainWindow


def is_necrodancer_dir(game_path: Path) -> bool:
    """Check that a directory looks like a NecroDancer installation."""
    return (game_path / "data" / "necrodancer.xml").is_file()


def ask_game_path(
    settings: "AppSettings", parent: Optional[QWidget] = None
) -> Optional[Path]:
    """Ask the user for the game directory and store it in settings.

    Returns:
        The chosen directory, or None if the user cancelled
    """
    current_path = settings.necrodancer_path
    initial_dir = str(current_path) if current_path else str(Path.cwd())

    while True:
        selected_dir = QFileDialog.getExistingDirectory(
            parent,
            "Select Crypt of the NecroDancer Directory",
            initial_dir,
            QFileDialog.Option.ShowDirsOnly | QFileDialog.Option.DontResolveSymlinks,
        )
        if not selected_dir:
            return None

        game_path = Path(selected_dir).resolve()
        if is_necrodancer_dir(game_path):
            break

        reply = QMessageBox.question(
            parent,
            "Invalid NecroDancer Directory",
            "The selected directory doesn't appear to be a NecroDancer installation.\n\n"
            "Expected to find 'data/necrodancer.xml'.\n\n"
            f"Selected: {game_path}\n\n"
            "Do you want to use it anyway?",
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
            QMessageBox.StandardButton.No,
        )
        if reply == QMessageBox.StandardButton.Yes:
            break
        initial_dir = str(game_path)

    settings.necrodancer_path = game_path
    settings.sync()
    return game_path


class MainWindowActions:
    """Handles actions and events for the main window."""

    def __init__(self, main_window: "MainWindow") -> None:
        self.main_window = main_window
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def reload_document(self) -> None:
        """Reload necrodancer.xml, keeping the current document on failure."""
        mw = self.main_window
        mw.logger.info("Reload requested")

        if mw.state is not None and mw.state.dirty:
            reply = QMessageBox.question(
                mw,
                "Discard Changes",
                "Reloading discards the curse changes made in this session.\n\n"
                "Continue?",
                QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
                QMessageBox.StandardButton.No,
            )
            if reply != QMessageBox.StandardButton.Yes:
                return

        try:
            document = mw.service.load()
        except NecroDataError as e:
            mw.logger.error(f"Reload failed: {e}")
            QMessageBox.warning(
                mw,
                "Reload Failed",
                f"Failed to reload necrodancer.xml:\n{e}\n\n"
                "The previously loaded data is kept.",
            )
            return

        mw.set_document(document)
        mw.status_bar.showMessage("necrodancer.xml reloaded", 3000)

    def setup_game_path(self) -> None:
        """Show dialog to configure the game directory and reload."""
        mw = self.main_window

        if mw.settings.paths.env_necrodancer_path is not None:
            QMessageBox.information(
                mw,
                "Environment Override",
                "NECRODANCER_PATH is set in the environment and takes precedence "
                "over the stored game path.",
            )
            return

        old_path = mw.settings.necrodancer_path
        game_path = ask_game_path(mw.settings, mw)
        if game_path is None:
            return

        mw.logger.info(f"NecroDancer path updated: {old_path} -> {game_path}")
        mw.service = NecroDataService(game_path, mw.settings)
        mw.images.data_path = mw.service.data_path
        mw.images.clear()
        self.reload_document()

    def logging_settings(self) -> None:
        """Show logging settings dialog."""
        dialog = LoggingSettingsDialog(self.main_window.settings, self.main_window)
        dialog.exec()

    def about(self) -> None:
        """Show about dialog."""
        mw = self.main_window
        game_path = str(mw.settings.necrodancer_path) if mw.settings.necrodancer_path else None
        show_about_dialog(
            version=__version__,
            game_path=game_path,
            xml_path=str(mw.service.resolve_xml_path()),
            parent=mw,
        )
