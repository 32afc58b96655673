"""
Path-related settings for Unawareness.
"""

import os
from pathlib import Path
from typing import Optional, TYPE_CHECKING

from dotenv import load_dotenv

from .base import SettingsSection
from .types import MissingSettingError

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings

# Environment variable that overrides the stored game path
NECRODANCER_PATH_ENV = "NECRODANCER_PATH"
DEFAULT_MOD_NAME = "Unawareness"


class PathSettings(SettingsSection):
    """Game directory and mod name.

    The game directory comes from ``NECRODANCER_PATH`` (environment or a
    ``.env`` file) when set, otherwise from stored settings.
    """

    def __init__(self, settings: "QSettings"):
        super().__init__(settings)
        load_dotenv()

    @property
    def env_necrodancer_path(self) -> Optional[Path]:
        """Game directory from the environment, if set."""
        path_str = os.getenv(NECRODANCER_PATH_ENV, "")
        return Path(path_str) if path_str else None

    @property
    def necrodancer_path(self) -> Optional[Path]:
        env_path = self.env_necrodancer_path
        if env_path:
            return env_path
        path_str = self._get_str("paths/necrodancer", "")
        return Path(path_str) if path_str else None

    @necrodancer_path.setter
    def necrodancer_path(self, value: Optional[Path]) -> None:
        # Stored even when the environment overrides it
        self._set("paths/necrodancer", str(value) if value else "")

    def require_necrodancer_path(self) -> Path:
        """Return the game directory or fail if it is not configured.

        Raises:
            MissingSettingError: if neither environment nor settings set it
        """
        path = self.necrodancer_path
        if path is None:
            raise MissingSettingError(NECRODANCER_PATH_ENV)
        return path

    @property
    def necrodancer_data_path(self) -> Optional[Path]:
        """The game's ``data`` directory, derived from the game path."""
        game_path = self.necrodancer_path
        return game_path / "data" if game_path else None

    @property
    def mod_name(self) -> str:
        """Directory under ``mods/`` that edits are written to."""
        return self._get_str("paths/mod_name", DEFAULT_MOD_NAME) or DEFAULT_MOD_NAME

    @mod_name.setter
    def mod_name(self, value: str) -> None:
        self._set("paths/mod_name", value)
