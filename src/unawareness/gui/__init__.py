"""
PySide6 user interface for Unawareness.
"""

from .main_window import MainWindow

__all__ = ["MainWindow"]
