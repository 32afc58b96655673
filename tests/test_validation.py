"""Unit tests for item reference checks."""

from typing import Callable

from unawareness.necro_data import Document, check_item_references

from .conftest import make_xml


class TestItemReferences:
    """Test detection of character items missing from <items>."""

    def test_unknown_item_is_warned(self, sample_document: Document) -> None:
        """Test a dangling item id produces one warning."""
        result = check_item_references(sample_document)

        assert result.is_valid
        assert result.errors == []
        assert len(result.warnings) == 1
        assert "weapon_golden_lute" in result.warnings[0]
        assert "99" in result.warnings[0]

    def test_clean_document_has_no_warnings(
        self, load_xml: Callable[[str], Document]
    ) -> None:
        """Test a document whose references all resolve is clean."""
        document = load_xml(
            make_xml(
                items="<sword01/>",
                characters=(
                    '<character id="0"><initial_equipment>'
                    '<item type="sword01"/>'
                    "</initial_equipment></character>"
                ),
            )
        )
        result = check_item_references(document)
        assert result.warnings == []
