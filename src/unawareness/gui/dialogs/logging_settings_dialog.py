"""
Logging settings dialog for Unawareness.
"""

import logging
from typing import Optional

from PySide6.QtCore import Qt, QUrl
from PySide6.QtGui import QDesktopServices
from PySide6.QtWidgets import (
    QCheckBox,
    QComboBox,
    QDialog,
    QDialogButtonBox,
    QFormLayout,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from ...settings import AppSettings
from ...settings.logging import VALID_LEVELS
from ...utils.logging_config import setup_logging


class LoggingSettingsDialog(QDialog):
    """Edits console and file logging options.

    Accepted changes are stored and the handlers are rebuilt right away.
    """

    def __init__(self, settings: AppSettings, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.settings = settings

        self.setWindowTitle("Logging Settings")
        self.setModal(True)

        self.console_enabled_check = QCheckBox("Log to console")
        self.console_level_combo = QComboBox()
        self.console_level_combo.addItems(VALID_LEVELS)
        self.console_colors_check = QCheckBox("Colored level names")
        self.file_enabled_check = QCheckBox("Log to CSV file (always DEBUG)")

        # Level and colors only matter with console output on
        self.console_enabled_check.toggled.connect(self.console_level_combo.setEnabled)
        self.console_enabled_check.toggled.connect(self.console_colors_check.setEnabled)

        form = QFormLayout()
        form.addRow(self.console_enabled_check)
        form.addRow("Console level:", self.console_level_combo)
        form.addRow(self.console_colors_check)
        form.addRow(self.file_enabled_check)

        log_path = self.settings.logging.log_file_absolute_path
        path_label = QLabel(str(log_path))
        path_label.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
        open_button = QPushButton("Open Folder")
        open_button.clicked.connect(self._open_log_folder)
        path_row = QHBoxLayout()
        path_row.addWidget(path_label, stretch=1)
        path_row.addWidget(open_button)
        form.addRow("Log file:", path_row)

        buttons = QDialogButtonBox(
            QDialogButtonBox.StandardButton.Ok | QDialogButtonBox.StandardButton.Cancel
        )
        buttons.accepted.connect(self._apply)
        buttons.rejected.connect(self.reject)

        layout = QVBoxLayout(self)
        layout.addLayout(form)
        layout.addWidget(buttons)

        self._load()

    def _load(self) -> None:
        options = self.settings.logging
        self.console_enabled_check.setChecked(options.console_logging)
        self.console_level_combo.setCurrentText(options.console_log_level)
        self.console_colors_check.setChecked(options.console_use_colors)
        self.file_enabled_check.setChecked(options.file_logging)
        self.console_level_combo.setEnabled(options.console_logging)
        self.console_colors_check.setEnabled(options.console_logging)

    def _apply(self) -> None:
        options = self.settings.logging
        options.console_logging = self.console_enabled_check.isChecked()
        options.console_log_level = self.console_level_combo.currentText()
        options.console_use_colors = self.console_colors_check.isChecked()
        options.file_logging = self.file_enabled_check.isChecked()

        setup_logging(self.settings)
        self.logger.info("Logging settings updated")
        self.accept()

    def _open_log_folder(self) -> None:
        folder = self.settings.logging.log_file_absolute_path.parent
        if not folder.is_dir():
            self.logger.warning(f"Log folder does not exist yet: {folder}")
            return
        if not QDesktopServices.openUrl(QUrl.fromLocalFile(str(folder))):
            self.logger.error(f"Failed to open log folder: {folder}")
