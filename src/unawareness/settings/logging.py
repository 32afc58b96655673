"""
Logging-related settings for Unawareness.
"""

import logging
from pathlib import Path

from .base import SettingsSection

logger = logging.getLogger(__name__)

LOG_FILE_PATH = "logs/unawareness.csv"
VALID_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

KEY_CONSOLE_ENABLED = "logging/console_enabled"
KEY_CONSOLE_LEVEL = "logging/console_level"
KEY_CONSOLE_COLORS = "logging/console_use_colors"
KEY_FILE_ENABLED = "logging/file_enabled"


class LoggingSettings(SettingsSection):
    """Console and file logging options.

    The file handler always records DEBUG; only the console level is
    configurable.
    """

    @property
    def console_logging(self) -> bool:
        return self._get_bool(KEY_CONSOLE_ENABLED, True)

    @console_logging.setter
    def console_logging(self, value: bool) -> None:
        self._set(KEY_CONSOLE_ENABLED, value)

    @property
    def console_log_level(self) -> str:
        return self._get_str(KEY_CONSOLE_LEVEL, "INFO")

    @console_log_level.setter
    def console_log_level(self, value: str) -> None:
        level = value.upper()
        if level not in VALID_LEVELS:
            logger.warning(
                f"Invalid console log level: {value}, keeping {self.console_log_level}"
            )
            return
        self._set(KEY_CONSOLE_LEVEL, level)

    @property
    def console_use_colors(self) -> bool:
        return self._get_bool(KEY_CONSOLE_COLORS, True)

    @console_use_colors.setter
    def console_use_colors(self, value: bool) -> None:
        self._set(KEY_CONSOLE_COLORS, value)

    @property
    def file_logging(self) -> bool:
        return self._get_bool(KEY_FILE_ENABLED, False)

    @file_logging.setter
    def file_logging(self, value: bool) -> None:
        self._set(KEY_FILE_ENABLED, value)

    @property
    def log_file_path(self) -> Path:
        """Log file location, relative to the working directory."""
        return Path(LOG_FILE_PATH)

    @property
    def log_file_absolute_path(self) -> Path:
        return self.log_file_path.resolve()
