"""
UI-related settings for Unawareness.
"""

from typing import Any, Optional, Union

from PySide6.QtCore import QByteArray
from PySide6.QtWidgets import QMainWindow, QWidget

from .base import SettingsSection


def _as_byte_array(value: Any) -> Optional[QByteArray]:
    """Normalize a stored geometry blob; some backends return bytes."""
    if isinstance(value, bytes):
        return QByteArray(value)
    if isinstance(value, QByteArray) and not value.isEmpty():
        return value
    return None


class UISettings(SettingsSection):
    """Window geometry and the last selected character."""

    def save_window_geometry(self, widget: Union[QWidget, QMainWindow]) -> None:
        self.settings.setValue("ui/window_geometry", widget.saveGeometry())
        if isinstance(widget, QMainWindow):
            self.settings.setValue("ui/window_state", widget.saveState())
        self.settings.sync()

    def restore_window_geometry(self, widget: Union[QWidget, QMainWindow]) -> bool:
        """Restore geometry (and dock state for main windows).

        Returns:
            True if anything was restored
        """
        restored = False

        geometry = _as_byte_array(self.settings.value("ui/window_geometry"))
        if geometry is not None:
            restored = widget.restoreGeometry(geometry)

        state = _as_byte_array(self.settings.value("ui/window_state"))
        if state is not None and isinstance(widget, QMainWindow):
            restored = widget.restoreState(state) or restored

        return restored

    @property
    def last_character(self) -> int:
        """Index of the character selected when the editor last closed."""
        return max(0, self._get_int("ui/last_character", 0))

    @last_character.setter
    def last_character(self, value: int) -> None:
        self._set("ui/last_character", int(value))
