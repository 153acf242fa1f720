# file_organizer/gui/models.py

"""
Application state models.

These hold state and announce changes through signals. They only depend on
QtCore, so they work (and are tested) without any widget being created. The
views read from them and the controllers write to them.
"""
import logging
from pathlib import Path

from PySide6.QtCore import QObject, Signal

from file_organizer.core.config_manager import APP_CONFIG_PATH, read_backup_status

logger = logging.getLogger(__name__)


class PathInputGate(QObject):
    """Tracks the folder path typed by the user and whether the organize action is allowed."""
    path_changed = Signal(str)
    action_enabled_changed = Signal(bool)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._path = ""
        self._action_enabled = False

    @property
    def path(self) -> str:
        return self._path

    def set_path(self, text: str):
        """Replaces the path as-is. No trimming, no validation."""
        self._path = text
        self.path_changed.emit(text)

        enabled = len(text) > 0
        if enabled != self._action_enabled:
            self._action_enabled = enabled
            self.action_enabled_changed.emit(enabled)

    def clear(self):
        self.set_path("")

    def is_action_enabled(self) -> bool:
        return self._action_enabled


class ConfigState(QObject):
    """
    The canonical "backup enabled" flag, shared by reference with every consumer.

    `set_backup_enabled` is the only writer. Listeners are told about real
    changes only, never about writes of the current value.
    """
    backup_enabled_changed = Signal(bool)

    def __init__(self, backup_enabled: bool = False, parent=None):
        super().__init__(parent)
        self._backup_enabled = backup_enabled

    @classmethod
    def from_config_file(cls, config_path: Path = APP_CONFIG_PATH, parent=None) -> "ConfigState":
        state = cls(parent=parent)
        state.load(config_path)
        return state

    def load(self, config_path: Path = APP_CONFIG_PATH) -> bool:
        """Seeds (or reloads) the flag from the persisted config.json."""
        value = read_backup_status(config_path)
        logger.info(f"Backup flag loaded from configuration: {value}")
        self.set_backup_enabled(value)
        return value

    @property
    def backup_enabled(self) -> bool:
        return self._backup_enabled

    def set_backup_enabled(self, value: bool):
        value = bool(value)
        if value == self._backup_enabled:
            return
        self._backup_enabled = value
        logger.debug(f"Backup flag changed to {value}")
        self.backup_enabled_changed.emit(value)
