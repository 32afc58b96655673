"""
Unawareness: starting equipment editor for Crypt of the NecroDancer

Loads necrodancer.xml and edits each character's starting items and
cursed equipment slots.
"""

__version__ = "0.1.0"
__author__ = "Unawareness Contributors"

# Core service imports
from .necro_data import NecroDataService, DocumentLoader, load_document
from .utils.logging_config import setup_logging

# Main data models
from .necro_data.models import Slot, Item, Character, Document

__all__ = [
    # Services
    "NecroDataService",
    "DocumentLoader",
    "load_document",

    # Logging
    "setup_logging",

    # Data models
    "Slot",
    "Item",
    "Character",
    "Document",
]
