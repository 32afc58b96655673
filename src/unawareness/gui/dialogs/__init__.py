"""
Dialog components for Unawareness GUI.
"""

from .about_dialog import show_about_dialog
from .logging_settings_dialog import LoggingSettingsDialog

__all__ = [
    "show_about_dialog",
    "LoggingSettingsDialog",
]
