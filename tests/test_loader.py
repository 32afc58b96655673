"""Unit tests for loading necrodancer.xml."""

import io
from pathlib import Path
from typing import Callable

import pytest

from unawareness.necro_data import (
    Document,
    DocumentLoader,
    DocumentParseError,
    DocumentReadError,
    SchemaError,
    Slot,
    load_document,
)
from unawareness.necro_data.loader import extract_flyaway_name

from .conftest import SAMPLE_XML, make_xml

Loader = Callable[[str], Document]


class TestFlyawayNames:
    """Test display name extraction from flyaway strings."""

    def test_structured_flyaway(self) -> None:
        """Test the middle field is extracted."""
        assert extract_flyaway_name("|a|Shiny Sword|") == "Shiny Sword"

    def test_empty_fields(self) -> None:
        """Test empty first and middle fields still match."""
        assert extract_flyaway_name("|||") == ""
        assert extract_flyaway_name("||Dagger|") == "Dagger"

    @pytest.mark.parametrize(
        "flyaway", ["Heart Container", "|a|b|c|", "|a|Sword", "a|Sword|", "sword01"]
    )
    def test_unmatched_flyaway_is_kept(self, flyaway: str) -> None:
        """Test strings not shaped like |x|NAME| pass through unchanged."""
        assert extract_flyaway_name(flyaway) == flyaway


class TestItems:
    """Test <items> parsing."""

    def test_sample_items_in_document_order(self, sample_document: Document) -> None:
        """Test items keep document order and tag names as ids."""
        assert [item.id for item in sample_document.items] == [
            "shovel_basic",
            "weapon_dagger",
            "bomb",
            "hud_backpack",
            "misc_heart_container",
            "ring_courage",
        ]

    def test_item_fields(self, sample_document: Document) -> None:
        """Test name, slot and image of a typical item."""
        dagger = sample_document.get_item("weapon_dagger")
        assert dagger is not None
        assert dagger.name == "Dagger"
        assert dagger.slot is Slot.WEAPON
        assert dagger.image == "items/weapon_dagger.png"

    def test_flyaway_name(self, load_xml: Loader) -> None:
        """Test a structured flyaway gives the display name."""
        doc = load_xml(make_xml(items='<sword flyaway="|a|Shiny Sword|"/>'))
        assert doc.items[0].name == "Shiny Sword"

    def test_missing_flyaway_uses_id(self, load_xml: Loader) -> None:
        """Test an item without flyaway is named after its tag."""
        doc = load_xml(make_xml(items="<sword01/>"))
        assert doc.items[0].name == "sword01"

    def test_missing_slot_defaults_to_other(self, load_xml: Loader) -> None:
        """Test an item without slot attribute is OTHER."""
        doc = load_xml(make_xml(items="<sword01/>"))
        assert doc.items[0].slot is Slot.OTHER

    def test_hud_and_bomb_slots_collapse(self, sample_document: Document) -> None:
        """Test hud and bomb slots load as OTHER."""
        assert sample_document.get_item("bomb").slot is Slot.OTHER  # type: ignore[union-attr]
        assert sample_document.get_item("hud_backpack").slot is Slot.OTHER  # type: ignore[union-attr]

    def test_bad_slot_names_token(self, load_xml: Loader) -> None:
        """Test an unparseable slot fails and names the token."""
        with pytest.raises(SchemaError, match="shield"):
            load_xml(make_xml(items='<buckler slot="shield"/>'))

    def test_image_text_is_verbatim(self, load_xml: Loader) -> None:
        """Test image text keeps surrounding whitespace."""
        doc = load_xml(make_xml(items="<sword01>\n  items/sword.png  </sword01>"))
        assert doc.items[0].image == "\n  items/sword.png  "

    def test_image_text_skips_child_elements(self, load_xml: Loader) -> None:
        """Test only direct text nodes form the image."""
        doc = load_xml(make_xml(items="<sword01>a<x>inner</x>b</sword01>"))
        assert doc.items[0].image == "ab"

    def test_empty_item_has_empty_image(self, load_xml: Loader) -> None:
        """Test an item without text has an empty image."""
        doc = load_xml(make_xml(items="<sword01/>"))
        assert doc.items[0].image == ""


class TestCharacters:
    """Test <characters> parsing."""

    def test_sample_characters(self, sample_document: Document) -> None:
        """Test ids, names, items and curses of the sample characters."""
        cadence, monk, unknown = sample_document.characters

        assert (cadence.id, cadence.name) == ("0", "Cadence")
        assert cadence.items == ["shovel_basic", "weapon_dagger", "bomb"]
        assert cadence.curses == set()

        assert monk.name == "Monk"
        assert monk.curses == {Slot.RING, Slot.HEAD}

        assert unknown.name == "99"

    def test_item_order_ignores_interleaved_curses(self, load_xml: Loader) -> None:
        """Test items keep equipment order around cursed entries."""
        doc = load_xml(
            make_xml(
                characters=(
                    '<character id="2"><initial_equipment>'
                    '<item type="a"/><cursed slot="feet"/><item type="b"/>'
                    "</initial_equipment></character>"
                )
            )
        )
        assert doc.characters[0].items == ["a", "b"]
        assert doc.characters[0].curses == {Slot.FEET}

    def test_duplicate_curses_collapse(self, load_xml: Loader) -> None:
        """Test repeated cursed entries give one slot."""
        doc = load_xml(
            make_xml(
                characters=(
                    '<character id="2"><initial_equipment>'
                    '<cursed slot="ring"/><cursed slot="ring"/>'
                    "</initial_equipment></character>"
                )
            )
        )
        assert doc.characters[0].curses == {Slot.RING}

    def test_wrong_character_tag_fails(self, load_xml: Loader) -> None:
        """Test a non-<character> child of <characters> is rejected."""
        with pytest.raises(SchemaError, match="monster"):
            load_xml(make_xml(characters='<monster id="1"/>'))

    def test_missing_id_fails(self, load_xml: Loader) -> None:
        """Test a character without id is rejected."""
        with pytest.raises(SchemaError, match="id"):
            load_xml(
                make_xml(characters="<character><initial_equipment/></character>")
            )

    def test_missing_initial_equipment_fails(self, load_xml: Loader) -> None:
        """Test a character without <initial_equipment> is rejected."""
        with pytest.raises(SchemaError, match="initial_equipment"):
            load_xml(make_xml(characters='<character id="1"/>'))

    def test_unknown_equipment_entry_fails(self, load_xml: Loader) -> None:
        """Test an equipment child that is neither item nor cursed fails."""
        with pytest.raises(SchemaError, match="bad initial equipment"):
            load_xml(
                make_xml(
                    characters=(
                        '<character id="1"><initial_equipment>'
                        '<blessed slot="ring"/>'
                        "</initial_equipment></character>"
                    )
                )
            )

    def test_item_without_type_fails(self, load_xml: Loader) -> None:
        """Test an <item> without type is rejected."""
        with pytest.raises(SchemaError, match="type"):
            load_xml(
                make_xml(
                    characters=(
                        '<character id="1"><initial_equipment><item/>'
                        "</initial_equipment></character>"
                    )
                )
            )

    def test_cursed_without_slot_fails(self, load_xml: Loader) -> None:
        """Test a <cursed> without slot is rejected."""
        with pytest.raises(SchemaError, match="slot"):
            load_xml(
                make_xml(
                    characters=(
                        '<character id="1"><initial_equipment><cursed/>'
                        "</initial_equipment></character>"
                    )
                )
            )

    def test_cursed_with_bad_slot_fails(self, load_xml: Loader) -> None:
        """Test a <cursed> with an unparseable slot is rejected."""
        with pytest.raises(SchemaError, match="other"):
            load_xml(
                make_xml(
                    characters=(
                        '<character id="1"><initial_equipment><cursed slot="other"/>'
                        "</initial_equipment></character>"
                    )
                )
            )


class TestDocumentStructure:
    """Test top-level structure and error reporting."""

    def test_missing_items_fails(self, load_xml: Loader) -> None:
        """Test a document without <items> names the missing tag."""
        with pytest.raises(SchemaError, match="items"):
            load_xml("<necrodancer><characters/></necrodancer>")

    def test_missing_characters_fails(self, load_xml: Loader) -> None:
        """Test a document without <characters> names the missing tag."""
        with pytest.raises(SchemaError, match="characters"):
            load_xml("<necrodancer><items/></necrodancer>")

    def test_malformed_xml_fails(self, load_xml: Loader) -> None:
        """Test unbalanced tags raise a parse error."""
        with pytest.raises(DocumentParseError):
            load_xml("<necrodancer><items></necrodancer>")

    def test_first_violation_wins(self, load_xml: Loader) -> None:
        """Test item errors are reported before character errors."""
        with pytest.raises(SchemaError, match="bad item slot"):
            load_xml(
                make_xml(
                    items='<buckler slot="shield"/>',
                    characters='<monster id="1"/>',
                )
            )

    def test_namespaced_document(self, load_xml: Loader) -> None:
        """Test namespace prefixes do not affect tag matching."""
        doc = load_xml(
            '<necrodancer xmlns="urn:nd"><items><sword01/></items>'
            '<characters><character id="3"><initial_equipment>'
            '<item type="sword01"/></initial_equipment></character></characters>'
            "</necrodancer>"
        )
        assert doc.items[0].id == "sword01"
        assert doc.characters[0].name == "Dorian"

    def test_schema_error_message(self, load_xml: Loader) -> None:
        """Test schema errors carry a readable description."""
        with pytest.raises(SchemaError) as exc_info:
            load_xml("<necrodancer><characters/></necrodancer>")
        assert exc_info.value.description == "missing <items> tag"
        assert str(exc_info.value) == "Malformed necrodancer.xml: missing <items> tag"

    def test_identical_documents_compare_equal(self, load_xml: Loader) -> None:
        """Test equality ignores the retained tree."""
        first = load_xml(SAMPLE_XML)
        second = load_xml(SAMPLE_XML)
        assert first.root is not second.root
        assert first == second
        assert first.items == second.items
        assert first.characters == second.characters

    def test_raw_tree_is_retained(self, sample_document: Document) -> None:
        """Test the parsed root element stays on the document."""
        assert sample_document.root.tag == "necrodancer"
        assert sample_document.root.find("items") is not None


class TestFileLoading:
    """Test loading from disk."""

    def test_load_from_path(self, game_dir: Path) -> None:
        """Test load_document reads a file."""
        document = load_document(game_dir / "data" / "necrodancer.xml")
        assert len(document.characters) == 3

    def test_missing_file_fails(self, tmp_path: Path) -> None:
        """Test a missing file raises a read error."""
        with pytest.raises(DocumentReadError):
            DocumentLoader().load_file(tmp_path / "absent.xml")

    def test_invalid_encoding_fails(self) -> None:
        """Test bytes that are not valid UTF-8 raise a parse error."""
        with pytest.raises(DocumentParseError):
            DocumentLoader().load(io.BytesIO(b"<necrodancer>\xff\xfe</necrodancer>"))
