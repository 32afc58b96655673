"""
Menu builder for main application window.
"""

import logging
from typing import TYPE_CHECKING, Callable, Optional, Union

from PySide6.QtGui import QAction, QKeySequence

if TYPE_CHECKING:
    from .main_window import MainWindow


class MenuBuilder:
    """Creates the window's actions and the File / Settings / Help menus.

    Actions are stored on the main window as ``action_*`` attributes so
    other code can enable, disable or trigger them.
    """

    def __init__(self, main_window: "MainWindow") -> None:
        self.main_window = main_window
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def _action(
        self,
        text: str,
        handler: Callable[[], object],
        tip: str,
        shortcut: Optional[Union[QKeySequence, QKeySequence.StandardKey]] = None,
    ) -> QAction:
        action = QAction(text, self.main_window)
        action.setStatusTip(tip)
        if shortcut is not None:
            action.setShortcut(shortcut)
        action.triggered.connect(handler)
        return action

    def setup_actions(self) -> None:
        """Create all actions for menus."""
        mw = self.main_window
        handlers = mw.main_window_actions

        mw.action_reload = self._action(
            "&Reload necrodancer.xml",
            handlers.reload_document,
            "Reload characters and items from disk",
            QKeySequence.StandardKey.Refresh,
        )
        mw.action_exit = self._action(
            "E&xit", mw.close, "Exit the application", QKeySequence.StandardKey.Quit
        )
        mw.action_setup_game_path = self._action(
            "Setup &Game Path...",
            handlers.setup_game_path,
            "Configure Crypt of the NecroDancer game directory",
        )
        mw.action_logging_settings = self._action(
            "&Logging Settings...", handlers.logging_settings, "Configure logging"
        )
        mw.action_about = self._action("&About", handlers.about, "About Unawareness")

        self.logger.debug("Actions created")

    def setup_menus(self) -> None:
        """Fill the menu bar; ``None`` entries become separators."""
        mw = self.main_window
        layout = [
            ("&File", [mw.action_reload, None, mw.action_exit]),
            ("&Settings", [mw.action_setup_game_path, None, mw.action_logging_settings]),
            ("&Help", [mw.action_about]),
        ]

        menubar = mw.menuBar()
        for title, entries in layout:
            menu = menubar.addMenu(title)
            for action in entries:
                if action is None:
                    menu.addSeparator()
                else:
                    menu.addAction(action)  # type: ignore[arg-type]

        self.logger.debug("Menus created")
