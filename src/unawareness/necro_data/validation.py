"""
Item reference checks for loaded documents.

Character equipment refers to items by id. The loader does not require
those ids to exist; this check reports dangling references as warnings.
"""

from typing import List

from ..settings.types import ValidationResult
from .models import Document


def check_item_references(document: Document) -> ValidationResult:
    """Report character item ids with no matching <items> entry.

    Never produces errors, so ``is_valid`` is always True.
    """
    known_ids = document.get_item_ids()
    warnings: List[str] = []

    for character in document.characters:
        for item_id in character.items:
            if item_id not in known_ids:
                warnings.append(
                    f"Character {character.name} ({character.id}) "
                    f"starts with unknown item: {item_id}"
                )

    return ValidationResult(is_valid=True, errors=[], warnings=warnings)
