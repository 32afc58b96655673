import os
from pathlib import Path

import pytest

from unawareness.necro_data import NecroDataService, Slot, check_item_references

NECRODANCER_PATH = os.environ.get("NECRODANCER_PATH", "")


@pytest.mark.skipif(
    not NECRODANCER_PATH or not Path(NECRODANCER_PATH, "data").exists(),
    reason="NecroDancer installation not found",
)
def test_load_installed_necrodancer_xml():
    service = NecroDataService(game_path=NECRODANCER_PATH)
    document = service.load()

    names = [character.name for character in document.characters]
    assert "Cadence" in names, "Cadence not found"
    assert document.get_items_in_slot(Slot.SHOVEL), "no shovels loaded"
    print(f"✓ loaded {len(document.items)} items from {service.resolve_xml_path()}")


@pytest.mark.skipif(
    not NECRODANCER_PATH or not Path(NECRODANCER_PATH, "data").exists(),
    reason="NecroDancer installation not found",
)
def test_installed_references():
    service = NecroDataService(game_path=NECRODANCER_PATH)
    result = check_item_references(service.load())
    print(f"[references] {len(result.warnings)} unknown item ids")
    assert result.is_valid
