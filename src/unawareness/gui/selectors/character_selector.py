"""
Character selector widget for Unawareness.

A qtawesome icon on the left and a combo box of character names on the
right.
"""

import logging
from typing import List, Optional

from PySide6.QtCore import QSize, Qt, Signal
from PySide6.QtGui import QPalette
from PySide6.QtWidgets import QComboBox, QHBoxLayout, QLabel, QWidget
import qtawesome as qta  # type: ignore

from ...necro_data.models import Character

ICON_SIZE = 20


class CharacterSelector(QWidget):
    """
    Widget for picking the character being edited.

    Emits characterPicked with the character's index in the document.
    Programmatic changes never emit.
    """

    characterPicked = Signal(int)

    ICON_NAME = "mdi.account-music"

    def __init__(self, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

        layout = QHBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(8)

        self.icon_label = QLabel()
        self.icon_label.setFixedSize(ICON_SIZE, ICON_SIZE)
        self.icon_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.icon_label.setToolTip("Character")
        layout.addWidget(self.icon_label)

        self.combo = QComboBox()
        self.combo.setMinimumWidth(160)
        self.combo.currentIndexChanged.connect(self._on_index_changed)
        layout.addWidget(self.combo)
        layout.addStretch()

        self._update_icon()

    def _update_icon(self) -> None:
        # Follow the palette so the icon stays visible on dark themes
        color = self.palette().color(QPalette.ColorRole.WindowText)
        pixmap = qta.icon(self.ICON_NAME, color=color).pixmap(QSize(ICON_SIZE, ICON_SIZE))
        if pixmap.isNull():
            self.logger.warning(f"Failed to create pixmap from icon {self.ICON_NAME}")
            return
        self.icon_label.setPixmap(pixmap)

    def set_characters(self, characters: List[Character], current_index: int = 0):
        """Replace the selectable characters without emitting a pick."""
        self.combo.blockSignals(True)
        try:
            self.combo.clear()
            for index, character in enumerate(characters):
                self.combo.addItem(character.name, index)
                self.combo.setItemData(index, f"id {character.id}", Qt.ItemDataRole.ToolTipRole)
            if 0 <= current_index < len(characters):
                self.combo.setCurrentIndex(current_index)
        finally:
            self.combo.blockSignals(False)
        self.logger.debug(f"Character selector filled with {len(characters)} entries")

    def set_current_index(self, index: int):
        """Select a character without emitting a pick."""
        self.combo.blockSignals(True)
        self.combo.setCurrentIndex(index)
        self.combo.blockSignals(False)

    def _on_index_changed(self, combo_index: int):
        if combo_index < 0:
            return
        self.characterPicked.emit(int(self.combo.itemData(combo_index)))
