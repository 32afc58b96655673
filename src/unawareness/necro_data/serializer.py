"""
Write-back of edited characters into necrodancer.xml.

Only the <characters> subtree is rebuilt. Everything else in the retained
tree, <items> included, is written back untouched. No validation is done
here.
"""

import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Iterable, Union

from .loader import local_name
from .models import Character, Document, Slot

logger = logging.getLogger(__name__)


def build_characters_element(characters: Iterable[Character]) -> ET.Element:
    """Build a <characters> element from character records.

    Items keep their order. Curses follow the items, in Slot declaration
    order.
    """
    characters_e = ET.Element("characters")
    for character in characters:
        character_e = ET.SubElement(characters_e, "character", {"id": character.id})
        equipment_e = ET.SubElement(character_e, "initial_equipment")
        for item_id in character.items:
            ET.SubElement(equipment_e, "item", {"type": item_id})
        for slot in Slot:
            if slot in character.curses:
                ET.SubElement(equipment_e, "cursed", {"slot": str(slot)})
    return characters_e


def replace_characters(root: ET.Element, characters: Iterable[Character]) -> None:
    """Swap the <characters> subtree of a tree for a rebuilt one.

    The new element takes the old one's position. If the tree has no
    <characters> element the new one is appended.
    """
    new_characters = build_characters_element(characters)
    for index, child in enumerate(root):
        if local_name(child) == "characters":
            new_characters.tail = child.tail
            root.remove(child)
            root.insert(index, new_characters)
            return
    root.append(new_characters)


def write_document(document: Document, xml_path: Union[str, Path]) -> Path:
    """Write the document, with current characters, to a file.

    Parent directories are created if needed.

    Returns:
        The path written
    """
    xml_path = Path(xml_path)
    replace_characters(document.root, document.characters)
    xml_path.parent.mkdir(parents=True, exist_ok=True)
    ET.ElementTree(document.root).write(
        xml_path, encoding="utf-8", xml_declaration=True
    )
    logger.info(
        f"Wrote {len(document.characters)} characters to {xml_path}"
    )
    return xml_path
