"""
Core settings management for Unawareness.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from PySide6.QtCore import QSettings
from PySide6.QtWidgets import QWidget, QMainWindow

from .base import SettingsSection
from .types import ConfigVersion, ValidationResult
from .migration import SettingsMigrator
from .validation import SettingsValidator
from .paths import PathSettings
from .ui import UISettings
from .logging import LoggingSettings

logger = logging.getLogger(__name__)


class AppSettings(SettingsSection):
    """
    Configuration management using QSettings.

    Values live under a per-profile group. Path and UI values are exposed
    directly; logging options are reached through ``settings.logging``.
    """

    def __init__(self, profile: str = "default"):
        """Open the settings store and run pending migrations.

        Args:
            profile: Settings profile name (default: "default")
        """
        super().__init__(QSettings("unawareness", "unawareness"))
        self.profile = profile

        # unawareness/unawareness/<profile>/...
        self.settings.beginGroup(profile)

        self._validator = SettingsValidator(self)
        self._paths = PathSettings(self.settings)
        self._ui = UISettings(self.settings)
        self._logging = LoggingSettings(self.settings)

        SettingsMigrator(self.settings).ensure_version()

        logger.debug(
            f"Settings initialized for profile '{profile}', stored at: {self.settings.fileName()}"
        )

    @property
    def paths(self) -> PathSettings:
        return self._paths

    @property
    def ui(self) -> UISettings:
        return self._ui

    @property
    def logging(self) -> LoggingSettings:
        return self._logging

    # === VERSION AND FIRST RUN ===

    @property
    def is_first_run(self) -> bool:
        return self._get_bool("app/first_run", True)

    def set_first_run_complete(self) -> None:
        self._set("app/first_run", False)

    @property
    def version(self) -> str:
        """Configuration version stored in this profile."""
        return self._get_str("app/version", ConfigVersion.CURRENT.value)

    # === PATHS ===

    @property
    def necrodancer_path(self) -> Optional[Path]:
        """Game directory (``NECRODANCER_PATH`` wins over the stored value)."""
        return self._paths.necrodancer_path

    @necrodancer_path.setter
    def necrodancer_path(self, value: Optional[Path]) -> None:
        self._paths.necrodancer_path = value

    def require_necrodancer_path(self) -> Path:
        return self._paths.require_necrodancer_path()

    @property
    def necrodancer_data_path(self) -> Optional[Path]:
        return self._paths.necrodancer_data_path

    @property
    def mod_name(self) -> str:
        return self._paths.mod_name

    @mod_name.setter
    def mod_name(self, value: str) -> None:
        self._paths.mod_name = value

    # === UI ===

    def save_window_geometry(self, widget: Union[QWidget, QMainWindow]) -> None:
        self._ui.save_window_geometry(widget)

    def restore_window_geometry(self, widget: Union[QWidget, QMainWindow]) -> bool:
        return self._ui.restore_window_geometry(widget)

    @property
    def last_character(self) -> int:
        return self._ui.last_character

    @last_character.setter
    def last_character(self, value: int) -> None:
        self._ui.last_character = value

    # === UTILITY METHODS ===

    def validate(self) -> ValidationResult:
        """Validate current configuration."""
        return self._validator.validate()

    def get_settings_file_path(self) -> str:
        return self.settings.fileName()

    def clear(self) -> None:
        """Remove every value stored under this profile."""
        self.settings.remove("")
        self.settings.sync()

    def sync(self) -> None:
        self.settings.sync()
