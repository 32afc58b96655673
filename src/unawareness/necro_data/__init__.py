"""
Module for working with NecroDancer character data.

Provides the domain model for necrodancer.xml, a strict loader, the
<characters> write-back and a service that ties them to a game directory.
"""

from .service import NecroDataService
from .models import (
    Slot,
    Item,
    Character,
    Document,
    CHARACTER_NAMES,
    SLOT_TOKENS,
)
from .errors import (
    NecroDataError,
    DocumentReadError,
    DocumentParseError,
    SchemaError,
)
from .loader import DocumentLoader, load_document
from .serializer import build_characters_element, replace_characters, write_document
from .validation import check_item_references

# Public exports
__all__ = [
    # Main service
    "NecroDataService",
    # Models
    "Slot",
    "Item",
    "Character",
    "Document",
    # Constants
    "CHARACTER_NAMES",
    "SLOT_TOKENS",
    # Errors
    "NecroDataError",
    "DocumentReadError",
    "DocumentParseError",
    "SchemaError",
    # Component functions and classes
    "DocumentLoader",
    "load_document",
    "build_characters_element",
    "replace_characters",
    "write_document",
    "check_item_references",
]
