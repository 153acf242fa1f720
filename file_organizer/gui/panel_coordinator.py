# file_organizer/gui/panel_coordinator.py

import logging
from enum import Enum, auto

from PySide6.QtCore import QObject, Signal, Slot

from file_organizer.core.executor import CommandExecutor
from file_organizer.core.results import OrganizeResult
from .models import ConfigState
from .notifications import NotificationSink
from .workers import CommandDispatcher

logger = logging.getLogger(__name__)

CONFIG_NOTIFICATION_POSITION = "center-right"
CONFIG_NOTIFICATION_EMPHASIS = 0.8


class PanelState(Enum):
    CLOSED = auto()
    OPEN = auto()


class MirrorState(Enum):
    STALE = auto()
    SYNCED = auto()


class PanelCoordinator(QObject):
    """
    Owns the side panel's visibility and the "Enable Backup" toggle.

    The toggle shows a mirror of ConfigState.backup_enabled. The store is the
    source of truth: the mirror is re-read whenever the panel opens, and
    whenever the store changes while the panel is open. A change made while
    the panel is closed leaves the mirror STALE until the next open.
    """
    visibility_changed = Signal(bool)
    mirror_changed = Signal(bool)
    instructions_requested = Signal()
    config_request_settled = Signal(int, object)

    def __init__(self, config_state: ConfigState, sink: NotificationSink,
                 executor: CommandExecutor | None = None, parent=None):
        super().__init__(parent)
        self.config_state = config_state
        self.sink = sink
        self.executor = executor if executor is not None else CommandExecutor()
        self.dispatcher = CommandDispatcher(self)

        self._panel_state = PanelState.CLOSED
        self._mirror_state = MirrorState.STALE
        self._mirror_checked = False
        self._toggling = False

        self.config_state.backup_enabled_changed.connect(self._on_canonical_changed)
        self.dispatcher.command_settled.connect(self._on_config_request_settled)

    # --- State ---

    @property
    def panel_state(self) -> PanelState:
        return self._panel_state

    @property
    def mirror_state(self) -> MirrorState:
        return self._mirror_state

    @property
    def mirror_checked(self) -> bool:
        return self._mirror_checked

    def is_open(self) -> bool:
        return self._panel_state is PanelState.OPEN

    # --- Transitions ---

    @Slot()
    def open_panel(self):
        if self._panel_state is not PanelState.OPEN:
            self._panel_state = PanelState.OPEN
            self.visibility_changed.emit(True)
        self._sync_mirror()

    @Slot()
    def close_panel(self):
        if self._panel_state is PanelState.CLOSED:
            return
        self._panel_state = PanelState.CLOSED
        self.visibility_changed.emit(False)

    @Slot()
    def toggle_backup(self):
        """Flips the toggle and writes the same value to the store right away."""
        new_value = not self._mirror_checked
        self._set_mirror(new_value)
        self._mirror_state = MirrorState.SYNCED

        self._toggling = True
        try:
            self.config_state.set_backup_enabled(new_value)
        finally:
            self._toggling = False
        logger.info(f"Backup toggled to {new_value}")

    @Slot()
    def open_instructions(self):
        self.instructions_requested.emit()

    @Slot()
    def open_config(self) -> int:
        """Asks the executor to open the file map config. Returns the request id."""
        return self.dispatcher.dispatch(self.executor.open_config_file)

    # --- Internals ---

    def _sync_mirror(self):
        self._set_mirror(self.config_state.backup_enabled)
        self._mirror_state = MirrorState.SYNCED

    def _set_mirror(self, value: bool):
        if value == self._mirror_checked:
            return
        self._mirror_checked = value
        self.mirror_changed.emit(value)

    @Slot(bool)
    def _on_canonical_changed(self, value: bool):
        if self._toggling:
            return
        self._mirror_state = MirrorState.STALE
        if self.is_open():
            self._sync_mirror()

    @Slot(int, str)
    def _on_config_request_settled(self, request_id: int, text: str):
        result = OrganizeResult.from_tagged_text(text)
        if result is None:
            logger.warning(f"Config request #{request_id} returned untagged text: {text!r}")
        else:
            self.sink.notify(result.raw_text, result.severity,
                             CONFIG_NOTIFICATION_POSITION, CONFIG_NOTIFICATION_EMPHASIS)
        self.config_request_settled.emit(request_id, result)
