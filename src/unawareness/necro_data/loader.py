"""
Loader for necrodancer.xml.

Turns the fixed-schema XML document into Item and Character records.
Loading is strict: the first schema violation raises and no partial
document is returned.
"""

import logging
import re
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import BinaryIO, List, Optional, Set, Union

from .errors import DocumentParseError, DocumentReadError, SchemaError
from .models import Character, Document, Item, Slot, character_display_name

# |anything|NAME|
FLYAWAY_PATTERN = re.compile(r"\|[^|]*\|([^|]*)\|")


def local_name(element: ET.Element) -> str:
    """Return the element tag without any namespace prefix."""
    tag = element.tag
    if isinstance(tag, str) and tag.startswith("{"):
        return tag.rpartition("}")[2]
    return str(tag)


def find_child(element: ET.Element, name: str) -> Optional[ET.Element]:
    """Return the first direct child with the given local name."""
    for child in element:
        if local_name(child) == name:
            return child
    return None


def direct_text(element: ET.Element) -> str:
    """Return the text nodes directly under an element, concatenated."""
    parts = [element.text or ""]
    parts.extend(child.tail or "" for child in element)
    return "".join(parts)


def extract_flyaway_name(flyaway: str) -> str:
    """Extract the display name from a ``|x|NAME|`` flyaway string.

    Returns the flyaway unchanged when it does not match the pattern.
    """
    match = FLYAWAY_PATTERN.fullmatch(flyaway)
    if match:
        return match.group(1)
    return flyaway


class DocumentLoader:
    """Loads necrodancer.xml into a Document."""

    def __init__(self):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def load_file(self, xml_path: Union[str, Path]) -> Document:
        """Open and load a necrodancer.xml file.

        The file handle is closed as soon as the tree is parsed.

        Raises:
            DocumentReadError: if the file cannot be opened
            DocumentParseError: if the file is not well-formed XML
            SchemaError: if the document layout is invalid
        """
        xml_path = Path(xml_path)
        self.logger.debug(f"Reading {xml_path}")
        try:
            with xml_path.open("rb") as f:
                root = self._parse(f)
        except OSError as e:
            raise DocumentReadError(f"Cannot read {xml_path}: {e}") from e
        return self.build_document(root)

    def load(self, source: BinaryIO) -> Document:
        """Load a document from a readable byte stream."""
        return self.build_document(self._parse(source))

    @staticmethod
    def _parse(source: BinaryIO) -> ET.Element:
        try:
            return ET.parse(source).getroot()
        except ET.ParseError as e:
            raise DocumentParseError(f"Invalid XML: {e}") from e

    def build_document(self, root: ET.Element) -> Document:
        """Derive items and characters from an already parsed tree."""
        items_e = find_child(root, "items")
        if items_e is None:
            raise SchemaError("missing <items> tag")
        items = [self._parse_item(child) for child in items_e]

        characters_e = find_child(root, "characters")
        if characters_e is None:
            raise SchemaError("missing <characters> tag")
        characters = [self._parse_character(child) for child in characters_e]

        self.logger.debug(
            f"Parsed {len(items)} items and {len(characters)} characters"
        )
        return Document(root=root, items=items, characters=characters)

    @staticmethod
    def _parse_item(element: ET.Element) -> Item:
        item_id = local_name(element)
        flyaway = element.get("flyaway", item_id)

        slot_token = element.get("slot")
        if slot_token is None:
            slot = Slot.OTHER
        else:
            try:
                slot = Slot.parse(slot_token)
            except ValueError:
                raise SchemaError(
                    f"bad item slot: {slot_token} (item {item_id})"
                ) from None

        return Item(
            id=item_id,
            name=extract_flyaway_name(flyaway),
            slot=slot,
            image=direct_text(element),
        )

    @staticmethod
    def _parse_character(element: ET.Element) -> Character:
        tag = local_name(element)
        if tag != "character":
            raise SchemaError(f"bad character tag: <{tag}>")

        character_id = element.get("id")
        if character_id is None:
            raise SchemaError("character missing id attr")

        equipment = find_child(element, "initial_equipment")
        if equipment is None:
            raise SchemaError(
                f"missing <initial_equipment> for character {character_id}"
            )

        items: List[str] = []
        curses: Set[Slot] = set()
        for entry in equipment:
            entry_tag = local_name(entry)
            if entry_tag == "item":
                item_type = entry.get("type")
                if item_type is None:
                    raise SchemaError(
                        f"item missing type attr (character {character_id})"
                    )
                items.append(item_type)
            elif entry_tag == "cursed":
                slot_token = entry.get("slot")
                if slot_token is None:
                    raise SchemaError(
                        f"cursed missing slot attr (character {character_id})"
                    )
                try:
                    curses.add(Slot.parse(slot_token))
                except ValueError:
                    raise SchemaError(
                        f"bad cursed slot: {slot_token} (character {character_id})"
                    ) from None
            else:
                raise SchemaError(
                    f"bad initial equipment: <{entry_tag}> (character {character_id})"
                )

        return Character(
            id=character_id,
            name=character_display_name(character_id),
            items=items,
            curses=curses,
        )


def load_document(xml_path: Union[str, Path]) -> Document:
    """Load necrodancer.xml from a path with a default loader."""
    return DocumentLoader().load_file(xml_path)
