# file_organizer/gui/action_controller.py

import logging

from PySide6.QtCore import QObject, Signal, Slot

from file_organizer.core.executor import CommandExecutor
from file_organizer.core.results import OrganizeResult
from .models import ConfigState, PathInputGate
from .notifications import NotificationSink
from .workers import CommandDispatcher

logger = logging.getLogger(__name__)


class OrganizeOrchestrator(QObject):
    """
    The non-visual brain behind the organize button.

    One click issues one organize request with the current path and the
    canonical backup flag. When it settles, the result is shown through the
    notification sink and the path input is cleared, which disables the
    button again.
    """
    request_started = Signal(int, str, bool)
    request_settled = Signal(int, object)

    def __init__(self, gate: PathInputGate, config_state: ConfigState, sink: NotificationSink,
                 executor: CommandExecutor | None = None, parent=None):
        super().__init__(parent)
        self.gate = gate
        self.config_state = config_state
        self.sink = sink
        self.executor = executor if executor is not None else CommandExecutor()
        self.dispatcher = CommandDispatcher(self)
        self.dispatcher.command_settled.connect(self._on_request_settled)

    def is_idle(self) -> bool:
        return self.dispatcher.is_idle()

    def in_flight_count(self) -> int:
        return self.dispatcher.in_flight_count()

    @Slot()
    def request_organize(self) -> int | None:
        """
        Click handler. Does nothing while the gate is closed.

        The backup flag is read from the canonical store at this moment, never
        from the toggle in the side panel.
        """
        if not self.gate.is_action_enabled():
            logger.debug("Organize requested with an empty path; ignoring.")
            return None
        return self.organize(self.gate.path, self.config_state.backup_enabled)

    def organize(self, path: str, backup_enabled: bool) -> int:
        """Issues exactly one organize request. Returns its request id."""
        if not path:
            raise ValueError("organize() needs a non-empty path")

        # No busy lock: a second click while this one runs issues another request.
        request_id = self.dispatcher.dispatch(self.executor.organize_files, path, backup_enabled)
        logger.info(f"Organize request #{request_id} issued for '{path}' (backup={backup_enabled})")
        self.request_started.emit(request_id, path, backup_enabled)
        return request_id

    @Slot(int, str)
    def _on_request_settled(self, request_id: int, text: str):
        result = OrganizeResult.from_text(text)
        logger.info(f"Organize request #{request_id} settled with {result.severity.value}")

        self.sink.notify(result.raw_text, result.severity)
        self.gate.clear()
        self.request_settled.emit(request_id, result)
