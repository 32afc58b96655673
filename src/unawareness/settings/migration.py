"""
Settings migration system for Unawareness.

Each step upgrades stored keys from one configuration version to the
next; ``ensure_version`` runs the chain up to ConfigVersion.CURRENT.
"""

import logging
from pathlib import Path
from typing import Callable, Dict, Tuple, TYPE_CHECKING

from .types import ConfigVersion

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings

logger = logging.getLogger(__name__)


def _migrate_1_0_to_1_1(settings: "QSettings") -> None:
    """1.0 stored the data directory; 1.1 stores the game root."""
    old_data_path = str(settings.value("paths/necrodancer_data", "") or "")
    if not old_data_path:
        return
    data_path = Path(old_data_path)
    game_path = data_path.parent if data_path.name == "data" else data_path
    settings.setValue("paths/necrodancer", str(game_path))
    settings.remove("paths/necrodancer_data")
    logger.info(f"Migrated data directory to game root: {game_path}")


# from_version -> (to_version, step)
MIGRATIONS: Dict[str, Tuple[str, Callable[["QSettings"], None]]] = {
    ConfigVersion.V1_0.value: (ConfigVersion.V1_1.value, _migrate_1_0_to_1_1),
}


class SettingsMigrator:
    """Handles configuration migration between versions."""

    def __init__(self, settings: "QSettings"):
        self.settings = settings

    def ensure_version(self) -> None:
        """Stamp a fresh profile, or migrate an older one."""
        stored = str(self.settings.value("app/version", "") or "")
        target = ConfigVersion.CURRENT.value

        if not stored:
            self.settings.setValue("app/version", target)
            self.settings.setValue("app/first_run", True)
            self.settings.sync()
            logger.info("First run detected, initializing configuration")
            return

        version = stored
        while version != target and version in MIGRATIONS:
            next_version, step = MIGRATIONS[version]
            logger.info(f"Migrating configuration from {version} to {next_version}")
            step(self.settings)
            version = next_version

        if version != stored:
            self.settings.setValue("app/version", version)
            self.settings.setValue("app/migrated_from", stored)
            self.settings.sync()
        if version != target:
            logger.warning(f"No migration path from configuration version {version}")
