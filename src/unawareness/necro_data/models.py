"""
Data models for NecroDancer character and item data.

Contains the equipment slot enumeration and the records derived from
necrodancer.xml. Models hold no file-system or parsing logic beyond
slot token conversion.
"""

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Set


class Slot(Enum):
    """Equipment category a character can have equipped or cursed."""

    SHOVEL = "shovel"
    WEAPON = "weapon"
    HEAD = "head"
    FEET = "feet"
    BODY = "body"
    RING = "ring"
    SPELL = "spell"
    TORCH = "torch"
    ACTION = "action"
    MISC = "misc"
    OTHER = "other"

    @classmethod
    def parse(cls, token: str) -> "Slot":
        """Convert a lowercase slot token from necrodancer.xml to a Slot.

        ``hud`` and ``bomb`` both collapse to OTHER. The token ``other``
        is not a valid source token.

        Raises:
            ValueError: if the token matches no slot
        """
        slot = SLOT_TOKENS.get(token)
        if slot is None:
            raise ValueError(f"no slot matches token {token!r}")
        return slot

    @classmethod
    def display_order(cls) -> List["Slot"]:
        """Return all slots in the order the editor shows them."""
        return [
            cls.SHOVEL,
            cls.WEAPON,
            cls.BODY,
            cls.HEAD,
            cls.FEET,
            cls.TORCH,
            cls.RING,
            cls.SPELL,
            cls.ACTION,
            cls.MISC,
            cls.OTHER,
        ]

    def __str__(self) -> str:
        return self.value


SLOT_TOKENS: Dict[str, Slot] = {
    "shovel": Slot.SHOVEL,
    "weapon": Slot.WEAPON,
    "head": Slot.HEAD,
    "feet": Slot.FEET,
    "body": Slot.BODY,
    "ring": Slot.RING,
    "spell": Slot.SPELL,
    "torch": Slot.TORCH,
    "action": Slot.ACTION,
    "misc": Slot.MISC,
    "hud": Slot.OTHER,
    "bomb": Slot.OTHER,
}
"""Source token -> Slot. Many-to-one for ``hud`` and ``bomb``."""


CHARACTER_NAMES: Dict[str, str] = {
    "0": "Cadence",
    "1": "Melody",
    "2": "Aria",
    "3": "Dorian",
    "4": "Eli",
    "5": "Monk",
    "6": "Dove",
    "7": "Coda",
    "8": "Bolt",
    "9": "Bard",
    "10": "Nocturna",
    "11": "Diamond",
    "12": "Mary",
    "13": "Tempo",
    "14": "Reaper",
}
"""Known character ids and their display names."""


def character_display_name(character_id: str) -> str:
    """Return the display name for a character id, or the id itself."""
    return CHARACTER_NAMES.get(character_id, character_id)


@dataclass(frozen=True)
class Item:
    """Equipment definition from the <items> section.

    The image is kept as the raw text payload of the element.
    """

    id: str
    name: str
    slot: Slot = Slot.OTHER
    image: str = ""


@dataclass
class Character:
    """Playable character and its initial equipment.

    ``items`` holds item ids (lookup keys into Document.items), in
    equipment-list order. ``curses`` is a set, so each slot appears once.
    """

    id: str
    name: str
    items: List[str] = field(default_factory=lambda: [])
    curses: Set[Slot] = field(default_factory=lambda: set())

    def is_cursed(self, slot: Slot) -> bool:
        """Check whether the slot starts cursed."""
        return slot in self.curses

    def set_curse(self, slot: Slot, cursed: bool) -> None:
        """Add or remove a single slot from the curse set."""
        if cursed:
            self.curses.add(slot)
        else:
            self.curses.discard(slot)

    def add_item(self, item_id: str) -> None:
        """Append an item id to the starting equipment."""
        self.items.append(item_id)

    def remove_item(self, item_id: str) -> bool:
        """Remove the first occurrence of an item id.

        Returns:
            True if the id was present and removed
        """
        try:
            self.items.remove(item_id)
            return True
        except ValueError:
            return False


@dataclass
class Document:
    """Parsed necrodancer.xml.

    The raw tree is retained so that a write-back can replace only the
    <characters> subtree. It is excluded from equality and repr.
    """

    root: ET.Element = field(compare=False, repr=False)
    items: List[Item] = field(default_factory=lambda: [])
    characters: List[Character] = field(default_factory=lambda: [])

    def get_item(self, item_id: str) -> Optional[Item]:
        """Return the item with the given id, if defined."""
        for item in self.items:
            if item.id == item_id:
                return item
        return None

    def get_items_in_slot(self, slot: Slot) -> List[Item]:
        """Return items of one slot in document order."""
        return [item for item in self.items if item.slot == slot]

    def get_item_ids(self) -> Set[str]:
        """Return the set of all defined item ids."""
        return {item.id for item in self.items}
