"""
Settings validation system for Unawareness.
"""

import logging
from typing import List, TYPE_CHECKING

from .types import ValidationResult

if TYPE_CHECKING:
    from .core import AppSettings

logger = logging.getLogger(__name__)


class SettingsValidator:
    """Validates configuration settings."""

    def __init__(self, settings: "AppSettings"):
        self.settings = settings

    def validate(self) -> ValidationResult:
        """Validate current configuration."""
        errors: List[str] = []
        warnings: List[str] = []

        game_path = self.settings.necrodancer_path
        if game_path:
            if not game_path.exists():
                errors.append(f"NecroDancer path does not exist: {game_path}")
            elif not (game_path / "data").exists():
                warnings.append(
                    f"NecroDancer path might be invalid (no 'data' directory): {game_path}"
                )
        else:
            warnings.append("NecroDancer path not set")

        mod_name = self.settings.mod_name
        if any(sep in mod_name for sep in ("/", "\\")):
            errors.append(f"Mod name must be a single directory name: {mod_name}")

        return ValidationResult(
            is_valid=len(errors) == 0, errors=errors, warnings=warnings
        )
