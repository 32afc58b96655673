"""
Editor state and the messages that mutate it.

The main window owns one EditorState and forwards every user action to
``EditorState.update`` as a message. Nothing else mutates the document.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Union

from .necro_data.models import Character, Document, Slot


@dataclass(frozen=True)
class CharPicked:
    """Select the character at ``index``."""
    index: int


@dataclass(frozen=True)
class SlotPressed:
    """Expand a slot's detail view, or collapse it if already expanded."""
    slot: Slot


@dataclass(frozen=True)
class CurseSlot:
    """Set or clear a curse on the current character."""
    slot: Slot
    cursed: bool


Message = Union[CharPicked, SlotPressed, CurseSlot]


class EditorState:
    """Loaded document plus the current selection.

    Attributes:
        document: The document being edited
        current_index: Index of the selected character
        expanded_slot: Slot whose detail view is open, if any
        dirty: Whether characters changed since load
    """

    def __init__(self, document: Document, current_index: int = 0):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.document = document
        self.current_index = 0
        self.expanded_slot: Optional[Slot] = None
        self.dirty = False

        if self._valid_index(current_index):
            self.current_index = current_index

    def _valid_index(self, index: int) -> bool:
        return 0 <= index < len(self.document.characters)

    @property
    def current_character(self) -> Optional[Character]:
        """Return the selected character, or None for an empty document."""
        if not self._valid_index(self.current_index):
            return None
        return self.document.characters[self.current_index]

    def update(self, message: Message) -> None:
        """Apply one message to the state."""
        self.logger.debug(f"got message {message}")

        if isinstance(message, CharPicked):
            self._pick_character(message.index)
        elif isinstance(message, SlotPressed):
            self._press_slot(message.slot)
        elif isinstance(message, CurseSlot):
            self._curse_slot(message.slot, message.cursed)
        else:
            raise TypeError(f"Unknown message: {message!r}")

    def _pick_character(self, index: int) -> None:
        if not self._valid_index(index):
            self.logger.warning(f"Ignoring unknown character index: {index}")
            return
        self.current_index = index
        self.expanded_slot = None

    def _press_slot(self, slot: Slot) -> None:
        if self.expanded_slot == slot:
            self.expanded_slot = None
        else:
            self.expanded_slot = slot

    def _curse_slot(self, slot: Slot, cursed: bool) -> None:
        character = self.current_character
        if character is None:
            self.logger.warning("No character selected, curse ignored")
            return
        if character.is_cursed(slot) != cursed:
            character.set_curse(slot, cursed)
            self.dirty = True
            self.logger.info(
                f"{character.name}: {slot} {'cursed' if cursed else 'uncursed'}"
            )
