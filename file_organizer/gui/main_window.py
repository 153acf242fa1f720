# file_organizer/gui/main_window.py

import sys
from pathlib import Path

from PySide6.QtCore import Slot, Qt
from PySide6.QtWidgets import (
    QApplication, QMainWindow, QWidget, QLabel, QLineEdit, QPushButton, QHBoxLayout, QVBoxLayout, QMessageBox
)

from file_organizer.core.config_manager import APP_CONFIG_PATH
from file_organizer.core.executor import CommandExecutor
from file_organizer.utils.logger import setup_logging
from .action_controller import OrganizeOrchestrator
from .instructions_dialog import InstructionsDialog
from .models import ConfigState, PathInputGate
from .notifications import NotificationSink
from .panel_coordinator import PanelCoordinator
from .resources import load_stylesheet, validate_assets
from .widgets import SidePanel, ToastOverlay

DISABLED_BUTTON_TEXT = "Enter valid path to folder to organize"
ENABLED_BUTTON_TEXT = "Click to organize files"


class MainWindow(QMainWindow):
    """
    The application shell. It creates the shared state, hands it to the
    controllers, and wires the widgets to them. It holds no logic of its own.
    """

    def __init__(self, executor: CommandExecutor | None = None, config_path: Path = APP_CONFIG_PATH):
        super().__init__()
        self.setWindowTitle("File Organizer")
        self.setGeometry(100, 100, 720, 420)

        executor = executor if executor is not None else CommandExecutor()

        # --- Shared state and controllers ---
        self.config_state = ConfigState.from_config_file(config_path, parent=self)
        self.gate = PathInputGate(self)
        self.sink = NotificationSink(parent=self)
        self.orchestrator = OrganizeOrchestrator(self.gate, self.config_state, self.sink, executor, self)
        self.panel_coordinator = PanelCoordinator(self.config_state, self.sink, executor, self)

        self._init_ui()
        self._connect_signals()
        self._update_action_button(self.gate.is_action_enabled())

    def _init_ui(self):
        central = QWidget()
        root_layout = QHBoxLayout(central)
        root_layout.setContentsMargins(0, 0, 0, 0)

        self.side_panel = SidePanel(self.panel_coordinator)

        content = QWidget()
        content_layout = QVBoxLayout(content)
        content_layout.setContentsMargins(24, 24, 24, 24)
        content_layout.setSpacing(16)

        header_layout = QHBoxLayout()
        self.menu_button = QPushButton("☰")
        self.menu_button.setObjectName("MenuButton")
        self.menu_button.setFixedWidth(40)
        title = QLabel("File Organizer")
        title.setObjectName("TitleLabel")
        title.setAlignment(Qt.AlignCenter)
        header_layout.addWidget(self.menu_button)
        header_layout.addWidget(title, stretch=1)

        self.path_edit = QLineEdit()
        self.path_edit.setPlaceholderText("Enter folder to organize...")
        self.path_edit.setAlignment(Qt.AlignCenter)

        self.organize_button = QPushButton(DISABLED_BUTTON_TEXT)
        self.organize_button.setObjectName("OrganizeButton")

        content_layout.addLayout(header_layout)
        content_layout.addStretch()
        content_layout.addWidget(self.path_edit)
        content_layout.addWidget(self.organize_button)
        content_layout.addStretch()

        root_layout.addWidget(self.side_panel)
        root_layout.addWidget(content, stretch=1)
        self.setCentralWidget(central)

        self.toast_overlay = ToastOverlay(central, self.sink)

    def _connect_signals(self):
        self.path_edit.textChanged.connect(self.gate.set_path)
        self.gate.path_changed.connect(self._show_path)
        self.gate.action_enabled_changed.connect(self._update_action_button)
        self.organize_button.clicked.connect(self.orchestrator.request_organize)

        self.menu_button.clicked.connect(self.panel_coordinator.open_panel)
        self.panel_coordinator.instructions_requested.connect(self._show_instructions)

    @Slot(str)
    def _show_path(self, path: str):
        # Only programmatic changes (the reset after a request) need to reach the edit.
        if self.path_edit.text() != path:
            self.path_edit.setText(path)

    @Slot(bool)
    def _update_action_button(self, enabled: bool):
        self.organize_button.setEnabled(enabled)
        self.organize_button.setText(ENABLED_BUTTON_TEXT if enabled else DISABLED_BUTTON_TEXT)
        # Lets the stylesheet restyle the button through a dynamic property.
        self.organize_button.setProperty("inputFilled", enabled)
        self.organize_button.style().unpolish(self.organize_button)
        self.organize_button.style().polish(self.organize_button)

    @Slot()
    def _show_instructions(self):
        InstructionsDialog(self).exec()

    def closeEvent(self, event):
        """Waits for running requests, since they cannot be cancelled."""
        if self.orchestrator.is_idle() and self.panel_coordinator.dispatcher.is_idle():
            event.accept()
            return

        reply = QMessageBox.question(self, 'Operation in Progress',
                                     "Files are still being organized. Quit once it has finished?",
                                     QMessageBox.Yes | QMessageBox.No, QMessageBox.No)
        if reply == QMessageBox.Yes:
            self.orchestrator.dispatcher.wait_for_all()
            self.panel_coordinator.dispatcher.wait_for_all()
            event.accept()
        else:
            event.ignore()


def run_gui():
    """The entry point for the desktop application."""
    setup_logging()
    validate_assets()

    app = QApplication(sys.argv)
    app.setStyleSheet(load_stylesheet())

    window = MainWindow()
    window.show()

    sys.exit(app.exec())
