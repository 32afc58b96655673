"""
Main service for working with necrodancer.xml.

Resolves which copy of the file to read, loads it and writes edits back
into the mod directory.
"""

import logging
from pathlib import Path
from typing import Optional, TYPE_CHECKING

from .loader import DocumentLoader
from .models import Document
from .serializer import write_document
from .validation import check_item_references
from ..settings.paths import DEFAULT_MOD_NAME

if TYPE_CHECKING:
    from ..settings import AppSettings

XML_FILE_NAME = "necrodancer.xml"


class NecroDataService:
    """Service for loading and saving NecroDancer character data.

    The mod copy (``mods/<mod>/necrodancer.xml``) is preferred; the game's
    own ``data/necrodancer.xml`` is used when the mod has none yet.
    """

    def __init__(
        self,
        game_path: str | Path,
        settings: Optional["AppSettings"] = None,
        mod_name: Optional[str] = None,
    ):
        """Initialize the service.

        Args:
            game_path: NecroDancer installation directory (contains `data/`)
            settings: App settings; supplies the mod name when not given
            mod_name: Mod directory name under `mods/`
        """
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.game_path = Path(game_path)
        self.settings = settings
        if mod_name is None:
            mod_name = settings.mod_name if settings else DEFAULT_MOD_NAME
        self.mod_name = mod_name

        self.loader = DocumentLoader()
        self.document: Optional[Document] = None

        self.logger.info(f"Initializing NecroDataService with path: {game_path}")

    @property
    def primary_path(self) -> Path:
        """Path of the mod's copy of necrodancer.xml."""
        return self.game_path / "mods" / self.mod_name / XML_FILE_NAME

    @property
    def fallback_path(self) -> Path:
        """Path of the game's default necrodancer.xml."""
        return self.game_path / "data" / XML_FILE_NAME

    @property
    def data_path(self) -> Path:
        """Directory that item image paths are relative to."""
        return self.game_path / "data"

    def resolve_xml_path(self) -> Path:
        """Return the mod copy if present, else the default data file."""
        if self.primary_path.is_file():
            return self.primary_path
        self.logger.debug(
            f"No mod copy at {self.primary_path}, using {self.fallback_path}"
        )
        return self.fallback_path

    def load(self) -> Document:
        """Load necrodancer.xml and keep the result as the current document.

        Raises:
            NecroDataError: on any read, parse or schema failure
        """
        xml_path = self.resolve_xml_path()
        self.logger.info(f"Loading {xml_path}")

        document = self.loader.load_file(xml_path)

        self.logger.info(
            f"Loaded {len(document.items)} items and "
            f"{len(document.characters)} characters"
        )
        references = check_item_references(document)
        for warning in references.warnings:
            self.logger.warning(warning)

        self.document = document
        return document

    def save(self, document: Optional[Document] = None) -> Path:
        """Write characters back into the mod copy of necrodancer.xml.

        Args:
            document: Document to write (defaults to the loaded one)

        Returns:
            The path written
        """
        document = document or self.document
        if document is None:
            raise ValueError("No document loaded")
        return write_document(document, self.primary_path)
