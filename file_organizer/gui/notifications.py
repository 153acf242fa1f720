# file_organizer/gui/notifications.py

import logging
from dataclasses import dataclass, field
from itertools import count

from PySide6.QtCore import QObject, Signal, QTimer

from file_organizer.core.results import Severity, strip_tag

logger = logging.getLogger(__name__)

NOTIFICATION_LIFETIME_MS = 5000
DEFAULT_POSITION = "top-center"
DEFAULT_EMPHASIS = 1.0

_notification_ids = count(1)


@dataclass(frozen=True)
class Notification:
    """One transient message, as handed to whatever renders it."""
    message: str
    severity: Severity
    position: str = DEFAULT_POSITION
    emphasis: float = DEFAULT_EMPHASIS
    lifetime_ms: int = NOTIFICATION_LIFETIME_MS
    id: int = field(default_factory=lambda: next(_notification_ids))


class NotificationSink(QObject):
    """
    Turns tagged command results into auto-dismissing notifications.

    Notifications stack in arrival order. Nothing is deduplicated: posting the
    same text twice shows it twice.
    """
    notification_posted = Signal(object)
    notification_dismissed = Signal(object)

    def __init__(self, lifetime_ms: int = NOTIFICATION_LIFETIME_MS, parent=None):
        super().__init__(parent)
        self.lifetime_ms = lifetime_ms
        self._active: list[Notification] = []

    def notify(self, raw_text: str, severity, position: str = DEFAULT_POSITION,
               emphasis: float = DEFAULT_EMPHASIS) -> Notification | None:
        """
        Shows `raw_text` without its "Error:"/"Success:" tag.

        Args:
            raw_text: The text exactly as the command returned it.
            severity: A Severity or "success"/"error". Anything else shows nothing.
            position: Where on screen the renderer should place it.
            emphasis: Relative font size for the renderer.

        Returns:
            The posted Notification, or None if the severity was not recognized.
        """
        parsed = Severity.parse(severity)
        if parsed is None:
            logger.debug(f"Ignoring notification with unknown severity {severity!r}")
            return None

        notification = Notification(
            message=strip_tag(raw_text),
            severity=parsed,
            position=position,
            emphasis=emphasis,
            lifetime_ms=self.lifetime_ms,
        )
        self._active.append(notification)

        if parsed is Severity.ERROR:
            logger.warning(f"Notifying error:{notification.message}")
        else:
            logger.info(f"Notifying success:{notification.message}")

        self.notification_posted.emit(notification)
        QTimer.singleShot(self.lifetime_ms, self, lambda: self.dismiss(notification))
        return notification

    def dismiss(self, notification: Notification) -> bool:
        """Removes a notification early (e.g. clicked). Returns False if it was already gone."""
        if notification not in self._active:
            return False
        self._active.remove(notification)
        self.notification_dismissed.emit(notification)
        return True

    def active(self) -> list[Notification]:
        """The notifications currently visible, oldest first."""
        return list(self._active)
