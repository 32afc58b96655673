"""
Configuration type definitions and exceptions for Unawareness.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List


class ConfigVersion(Enum):
    """Configuration version for migration support."""
    V1_0 = "1.0"
    V1_1 = "1.1"
    CURRENT = V1_1


class ConfigError(Exception):
    """Raised when configuration is invalid or cannot be accessed."""
    pass


class MissingSettingError(ConfigError):
    """Raised when a required configuration value is not set."""

    def __init__(self, name: str):
        super().__init__(f"Missing variable `{name}`")
        self.name = name


@dataclass
class ValidationResult:
    """Result of configuration or document validation."""
    is_valid: bool
    errors: List[str]
    warnings: List[str]
