"""
Main application window for Unawareness.
"""

import logging
from typing import Optional

from PySide6.QtWidgets import QMainWindow, QVBoxLayout, QWidget
from PySide6.QtGui import QAction, QCloseEvent

from ..necro_data import Document, NecroDataService
from ..settings import AppSettings
from ..state import CharPicked, CurseSlot, EditorState, Message, SlotPressed
from .actions import MainWindowActions
from .item_images import ItemImageCache
from .menu import MenuBuilder
from .selectors import CharacterSelector
from .slot_panel import SlotPanel


class MainWindow(QMainWindow):
    """Main application window.

    Owns the EditorState. Widgets emit signals, which are turned into
    state messages in ``dispatch``; the view is then redrawn from state.
    """

    # Menu actions (created by MenuBuilder)
    action_reload: QAction
    action_exit: QAction
    action_setup_game_path: QAction
    action_logging_settings: QAction
    action_about: QAction

    def __init__(
        self,
        settings: AppSettings,
        service: NecroDataService,
        document: Document,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)

        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

        self.setObjectName("main_window")
        self.settings = settings
        self.service = service
        self.state: Optional[EditorState] = None
        self.images = ItemImageCache(service.data_path)

        self.menu_builder = MenuBuilder(self)
        self.main_window_actions = MainWindowActions(self)

        self._setup_central_widget()
        self.menu_builder.setup_actions()
        self.menu_builder.setup_menus()
        self.status_bar = self.statusBar()

        if not self.settings.restore_window_geometry(self):
            self.resize(1100, 500)

        self.setWindowTitle("Unawareness")

        self.set_document(document, self.settings.last_character)

        self.logger.info("Main window initialized")

    def _setup_central_widget(self) -> None:
        central = QWidget()
        layout = QVBoxLayout(central)

        self.character_selector = CharacterSelector()
        self.character_selector.characterPicked.connect(
            lambda index: self.dispatch(CharPicked(index))
        )
        layout.addWidget(self.character_selector)

        self.slot_panel = SlotPanel(self.images)
        self.slot_panel.slotPressed.connect(lambda slot: self.dispatch(SlotPressed(slot)))
        self.slot_panel.curseToggled.connect(
            lambda slot, cursed: self.dispatch(CurseSlot(slot, cursed))
        )
        layout.addWidget(self.slot_panel, stretch=1)

        self.setCentralWidget(central)

    def set_document(self, document: Document, current_index: int = 0) -> None:
        """Start editing a freshly loaded document."""
        self.state = EditorState(document, current_index)
        self.character_selector.set_characters(
            document.characters, self.state.current_index
        )
        self.refresh()
        self.status_bar.showMessage(
            f"{len(document.characters)} characters, {len(document.items)} items "
            f"from {self.service.resolve_xml_path()}",
            10000,
        )

    def dispatch(self, message: Message) -> None:
        """Apply a message to the state and redraw."""
        if self.state is None:
            return
        self.state.update(message)
        if isinstance(message, CharPicked):
            self.settings.last_character = self.state.current_index
        self.refresh()

    def refresh(self) -> None:
        """Redraw widgets from the state."""
        if self.state is None:
            return
        self.character_selector.set_current_index(self.state.current_index)
        self.slot_panel.refresh(self.state)
        title = "Unawareness"
        if self.state.dirty:
            title += " *"
        self.setWindowTitle(title)

    def closeEvent(self, event: QCloseEvent) -> None:
        """Handle window close event to save settings."""
        self.settings.save_window_geometry(self)
        self.logger.info("Window geometry saved")
        super().closeEvent(event)
