"""
Selector widgets for the main window.
"""

from .character_selector import CharacterSelector

__all__ = ["CharacterSelector"]
