"""
Settings package for Unawareness.

This package provides a modular, type-safe configuration management system
using Qt's QSettings for cross-platform storage. The game directory can also
come from the ``NECRODANCER_PATH`` environment variable or a ``.env`` file.

Usage:
    from unawareness.settings import AppSettings, ValidationResult

    settings = AppSettings()
    result = settings.validate()
"""

from .core import AppSettings
from .types import ConfigVersion, ConfigError, MissingSettingError, ValidationResult
from .paths import NECRODANCER_PATH_ENV

__all__ = [
    "AppSettings",
    "ConfigVersion",
    "ConfigError",
    "MissingSettingError",
    "ValidationResult",
    "NECRODANCER_PATH_ENV",
]
