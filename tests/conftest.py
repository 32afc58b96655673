"""Shared fixtures for Unawareness tests."""

import io
from pathlib import Path
from typing import TYPE_CHECKING, Callable, Iterator

import pytest
from PySide6.QtCore import QSettings

from unawareness.necro_data import Document, DocumentLoader

if TYPE_CHECKING:
    from unawareness.settings import AppSettings

SAMPLE_XML = """<?xml version="1.0" encoding="UTF-8"?>
<necrodancer>
  <items>
    <shovel_basic flyaway="|10|Shovel|" slot="shovel">items/shovel_basic.png</shovel_basic>
    <weapon_dagger flyaway="|20|Dagger|" slot="weapon">items/weapon_dagger.png</weapon_dagger>
    <bomb slot="bomb">items/bomb.png</bomb>
    <hud_backpack flyaway="|30|Backpack|" slot="hud">items/hud_backpack.png</hud_backpack>
    <misc_heart_container flyaway="Heart Container">items/misc_heart_container.png</misc_heart_container>
    <ring_courage flyaway="|40|Ring of Courage|" slot="ring">items/ring_courage.png</ring_courage>
  </items>
  <characters>
    <character id="0">
      <initial_equipment>
        <item type="shovel_basic"/>
        <item type="weapon_dagger"/>
        <item type="bomb"/>
      </initial_equipment>
    </character>
    <character id="5">
      <initial_equipment>
        <item type="shovel_basic"/>
        <cursed slot="ring"/>
        <cursed slot="head"/>
      </initial_equipment>
    </character>
    <character id="99">
      <initial_equipment>
        <item type="weapon_golden_lute"/>
      </initial_equipment>
    </character>
  </characters>
</necrodancer>
"""


def make_xml(items: str = "", characters: str = "") -> str:
    """Wrap item and character fragments into a necrodancer document."""
    return (
        "<necrodancer>"
        f"<items>{items}</items>"
        f"<characters>{characters}</characters>"
        "</necrodancer>"
    )


@pytest.fixture
def load_xml() -> Callable[[str], Document]:
    """Return a function that loads a document from an XML string."""

    def _load(xml_text: str) -> Document:
        return DocumentLoader().load(io.BytesIO(xml_text.encode("utf-8")))

    return _load


@pytest.fixture
def sample_document(load_xml: Callable[[str], Document]) -> Document:
    """The sample necrodancer.xml loaded into a Document."""
    return load_xml(SAMPLE_XML)


@pytest.fixture
def game_dir(tmp_path: Path) -> Path:
    """A fake game directory with the sample file as data/necrodancer.xml."""
    data_dir = tmp_path / "data"
    data_dir.mkdir()
    (data_dir / "necrodancer.xml").write_text(SAMPLE_XML, encoding="utf-8")
    return tmp_path


@pytest.fixture
def isolated_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Redirect QSettings storage to a temporary directory.

    Also clears NECRODANCER_PATH and keeps a stray .env from setting it.
    """
    monkeypatch.delenv("NECRODANCER_PATH", raising=False)
    monkeypatch.setattr(
        "unawareness.settings.paths.load_dotenv", lambda *args, **kwargs: False
    )
    settings_dir = tmp_path / "settings"
    settings_dir.mkdir()
    for settings_format in (QSettings.Format.NativeFormat, QSettings.Format.IniFormat):
        QSettings.setPath(settings_format, QSettings.Scope.UserScope, str(settings_dir))
    yield settings_dir


@pytest.fixture
def app_settings(isolated_settings: Path) -> Iterator["AppSettings"]:
    """Fresh AppSettings under a throwaway profile."""
    from unawareness.settings import AppSettings

    settings = AppSettings(profile="pytest")
    yield settings
    settings.clear()
