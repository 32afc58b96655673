"""
Slot panel for the main window.

One column per equipment slot (button + "cursed" checkbox) and a detail
list showing the items of the expanded slot.
"""

import logging
from typing import Dict, Optional

from PySide6.QtCore import Qt, Signal, QSize
from PySide6.QtGui import QIcon
from PySide6.QtWidgets import (
    QCheckBox,
    QGroupBox,
    QHBoxLayout,
    QListWidget,
    QListWidgetItem,
    QPushButton,
    QVBoxLayout,
    QWidget,
)
import qtawesome as qta  # type: ignore

from ..necro_data.models import Slot
from ..state import EditorState
from .item_images import ItemImageCache

SLOT_ICONS: Dict[Slot, str] = {
    Slot.SHOVEL: "mdi.shovel",
    Slot.WEAPON: "mdi.sword",
    Slot.BODY: "mdi.tshirt-crew",
    Slot.HEAD: "mdi.hard-hat",
    Slot.FEET: "mdi.shoe-print",
    Slot.TORCH: "mdi.fire",
    Slot.RING: "mdi.ring",
    Slot.SPELL: "mdi.auto-fix",
    Slot.ACTION: "mdi.flask",
    Slot.MISC: "mdi.dots-horizontal",
    Slot.OTHER: "mdi.help-circle-outline",
}


class SlotColumn(QWidget):
    """Button and curse checkbox for a single slot."""

    def __init__(self, slot: Slot, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.slot = slot

        layout = QVBoxLayout(self)
        layout.setContentsMargins(2, 2, 2, 2)
        layout.setSpacing(4)

        self.button = QPushButton(str(slot))
        self.button.setCheckable(True)
        self.button.setIconSize(QSize(16, 16))
        try:
            self.button.setIcon(QIcon(qta.icon(SLOT_ICONS[slot])))  # type: ignore[arg-type]
        except Exception as e:
            logging.getLogger(__name__).debug(f"No icon for slot {slot}: {e}")
        layout.addWidget(self.button)

        self.cursed_check = QCheckBox("cursed")
        layout.addWidget(self.cursed_check, alignment=Qt.AlignmentFlag.AlignHCenter)


class SlotPanel(QWidget):
    """Slot buttons, curse checkboxes and the expanded slot's item list.

    The panel never changes the state itself; it emits signals and is
    redrawn from the state with ``refresh``.
    """

    slotPressed = Signal(object)
    curseToggled = Signal(object, bool)

    def __init__(self, images: ItemImageCache, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.images = images
        self.columns: Dict[Slot, SlotColumn] = {}

        layout = QVBoxLayout(self)

        row = QHBoxLayout()
        for slot in Slot.display_order():
            column = SlotColumn(slot)
            column.button.clicked.connect(
                lambda _checked=False, s=slot: self.slotPressed.emit(s)
            )
            column.cursed_check.toggled.connect(
                lambda checked, s=slot: self.curseToggled.emit(s, checked)
            )
            self.columns[slot] = column
            row.addWidget(column)
        layout.addLayout(row)

        self.detail_group = QGroupBox()
        detail_layout = QVBoxLayout(self.detail_group)
        self.detail_list = QListWidget()
        self.detail_list.setIconSize(QSize(self.images.size, self.images.size))
        detail_layout.addWidget(self.detail_list)
        self.detail_group.setVisible(False)
        layout.addWidget(self.detail_group, stretch=1)

        self.logger.debug("SlotPanel created")

    def refresh(self, state: EditorState) -> None:
        """Redraw checkboxes, buttons and the detail list from the state."""
        character = state.current_character

        for slot, column in self.columns.items():
            column.cursed_check.blockSignals(True)
            column.cursed_check.setChecked(
                character is not None and character.is_cursed(slot)
            )
            column.cursed_check.setEnabled(character is not None)
            column.cursed_check.blockSignals(False)
            column.button.setChecked(state.expanded_slot == slot)

        self._refresh_detail(state)

    def _refresh_detail(self, state: EditorState) -> None:
        slot = state.expanded_slot
        self.detail_list.clear()
        if slot is None:
            self.detail_group.setVisible(False)
            return

        character = state.current_character
        equipped = set(character.items) if character else set()
        items = state.document.get_items_in_slot(slot)

        self.detail_group.setTitle(f"{slot} ({len(items)} items)")
        for item in items:
            entry = QListWidgetItem(item.name)
            entry.setToolTip(item.id)
            if item.id in equipped:
                font = entry.font()
                font.setBold(True)
                entry.setFont(font)
                entry.setText(f"{item.name}  (equipped)")
            pixmap = self.images.pixmap_for(item)
            if pixmap is not None:
                entry.setIcon(QIcon(pixmap))
            self.detail_list.addItem(entry)
        self.detail_group.setVisible(True)
