# file_organizer/gui/workers.py

import logging
from itertools import count
from typing import Callable

from PySide6.QtCore import QObject, QThread, Signal, Slot

logger = logging.getLogger(__name__)


class CommandWorker(QObject):
    """Runs one backend command in a background thread and reports its text result."""
    finished = Signal(int, str)

    def __init__(self, request_id: int, command: Callable[..., str], args: tuple):
        super().__init__()
        self.request_id = request_id
        self.command = command
        self.args = args

    @Slot()
    def run(self):
        # The UI only understands tagged text, so a crash becomes an "Error:" result.
        result = ""
        try:
            result = self.command(*self.args)
        except Exception as e:
            logger.critical(f"Command worker error: {e}", exc_info=True)
            result = f"Error: {e}"
        finally:
            self.finished.emit(self.request_id, result)


class CommandDispatcher(QObject):
    """
    Starts each command on its own QThread and hands the result back on the
    UI thread through `command_settled`.

    There is no queue and no lock. Every call to `dispatch` starts a new
    command immediately, and results arrive in the order the commands finish.
    """
    command_settled = Signal(int, str)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._request_ids = count(1)
        self._active: dict[int, tuple[QThread, CommandWorker]] = {}

    def dispatch(self, command: Callable[..., str], *args) -> int:
        """Starts `command(*args)` in the background. Returns the request id."""
        request_id = next(self._request_ids)

        thread = QThread()
        worker = CommandWorker(request_id, command, args)
        worker.moveToThread(thread)

        worker.finished.connect(self._on_worker_finished)
        thread.started.connect(worker.run)

        self._active[request_id] = (thread, worker)
        logger.debug(f"Dispatching request #{request_id}: {getattr(command, '__name__', command)}{args}")
        thread.start()
        return request_id

    def in_flight_count(self) -> int:
        return len(self._active)

    def is_idle(self) -> bool:
        return not self._active

    def wait_for_all(self):
        """Blocks until every running command thread has stopped."""
        for thread, _ in list(self._active.values()):
            thread.quit()
            thread.wait()

    @Slot(int, str)
    def _on_worker_finished(self, request_id: int, result: str):
        entry = self._active.pop(request_id, None)
        if entry is None:
            return
        thread, _ = entry
        thread.quit()
        thread.wait()
        logger.debug(f"Request #{request_id} settled")
        self.command_settled.emit(request_id, result)
