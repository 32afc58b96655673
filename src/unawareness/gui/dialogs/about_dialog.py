"""
About dialog for Unawareness.
"""

from typing import Optional
from PySide6.QtWidgets import QMessageBox, QWidget
from PySide6.QtCore import Qt


def show_about_dialog(
    version: str,
    game_path: Optional[str] = None,
    xml_path: Optional[str] = None,
    parent: Optional[QWidget] = None,
) -> None:
    """
    Show about dialog with application information.

    Args:
        version: Application version string
        game_path: Path to NecroDancer game directory (optional)
        xml_path: Path of the loaded necrodancer.xml (optional)
        parent: Parent widget
    """
    msg = QMessageBox(parent)
    msg.setWindowTitle("")

    game_path_display = game_path if game_path else "Not configured"
    xml_path_display = xml_path if xml_path else "Not loaded"

    msg.setText(
        f"<h3>Unawareness v{version}</h3>"
        "<p>Starting equipment editor for Crypt of the NecroDancer</p>"
        f"<p><b>Configuration:</b><br>"
        f"game path: {game_path_display}<br>"
        f"necrodancer.xml: {xml_path_display}</p>"
    )
    msg.setIcon(QMessageBox.Icon.Information)

    msg.setWindowFlags(
        Qt.WindowType.Dialog
        | Qt.WindowType.CustomizeWindowHint
        | Qt.WindowType.MSWindowsFixedSizeDialogHint
    )

    msg.exec()
