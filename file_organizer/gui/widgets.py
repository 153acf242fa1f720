# file_organizer/gui/widgets.py

from PySide6.QtCore import Qt, Signal, Slot, QEvent, QObject
from PySide6.QtWidgets import (
    QWidget, QFrame, QLabel, QPushButton, QCheckBox, QVBoxLayout, QHBoxLayout, QSizePolicy
)

from file_organizer.core.results import Severity
from .notifications import Notification, NotificationSink
from .panel_coordinator import PanelCoordinator

TOAST_WIDTH = 320
TOAST_MARGIN = 12
BASE_FONT_POINT_SIZE = 11


# --- Toasts ---
class ToastWidget(QFrame):
    """A single notification bubble. Clicking it dismisses it early."""
    clicked = Signal(object)

    def __init__(self, notification: Notification, parent=None):
        super().__init__(parent)
        self.notification = notification
        # The stylesheet colours the bubble by object name.
        self.setObjectName("ToastError" if notification.severity is Severity.ERROR else "ToastSuccess")
        self.setFixedWidth(TOAST_WIDTH)
        self.setCursor(Qt.PointingHandCursor)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(12, 8, 12, 8)

        self.label = QLabel(notification.message.strip())
        self.label.setWordWrap(True)
        font = self.label.font()
        font.setPointSizeF(BASE_FONT_POINT_SIZE * notification.emphasis)
        self.label.setFont(font)
        layout.addWidget(self.label)

    def mousePressEvent(self, event):
        self.clicked.emit(self.notification)
        super().mousePressEvent(event)


class ToastOverlay(QObject):
    """
    Renders the sink's notifications on top of a host widget.

    Each position ("top-center", "center-right", ...) gets its own column of
    toasts, newest at the bottom. The columns follow the host when it resizes.
    """

    def __init__(self, host: QWidget, sink: NotificationSink):
        super().__init__(host)
        self.host = host
        self.sink = sink
        self._columns: dict[str, QWidget] = {}
        self._toasts: dict[int, ToastWidget] = {}

        host.installEventFilter(self)
        sink.notification_posted.connect(self.show_notification)
        sink.notification_dismissed.connect(self.remove_notification)

    @Slot(object)
    def show_notification(self, notification: Notification):
        column = self._column_for(notification.position)
        toast = ToastWidget(notification, column)
        toast.clicked.connect(self.sink.dismiss)
        column.layout().addWidget(toast)
        self._toasts[notification.id] = toast
        column.show()
        column.adjustSize()
        self._place(notification.position, column)
        column.raise_()

    @Slot(object)
    def remove_notification(self, notification: Notification):
        toast = self._toasts.pop(notification.id, None)
        if toast is None:
            return
        column = toast.parentWidget()
        column.layout().removeWidget(toast)
        toast.deleteLater()
        column.adjustSize()
        self._place(notification.position, column)

    def visible_messages(self) -> list[str]:
        return [toast.label.text() for toast in self._toasts.values()]

    def eventFilter(self, watched, event):
        if watched is self.host and event.type() == QEvent.Resize:
            for position, column in self._columns.items():
                self._place(position, column)
        return False

    def _column_for(self, position: str) -> QWidget:
        if position not in self._columns:
            column = QWidget(self.host)
            layout = QVBoxLayout(column)
            layout.setContentsMargins(0, 0, 0, 0)
            layout.setSpacing(6)
            self._columns[position] = column
        return self._columns[position]

    def _place(self, position: str, column: QWidget):
        host_rect = self.host.rect()
        size = column.sizeHint()
        vertical, _, horizontal = position.partition("-")

        if horizontal == "left":
            x = TOAST_MARGIN
        elif horizontal == "right":
            x = host_rect.width() - size.width() - TOAST_MARGIN
        else:
            x = (host_rect.width() - size.width()) // 2

        if vertical == "bottom":
            y = host_rect.height() - size.height() - TOAST_MARGIN
        elif vertical == "center":
            y = (host_rect.height() - size.height()) // 2
        else:
            y = TOAST_MARGIN

        column.setGeometry(max(x, 0), max(y, 0), size.width(), size.height())


# --- Side Panel ---
class SidePanel(QFrame):
    """
    The slide-in panel with the configuration shortcuts and the backup toggle.
    It is a "dumb" view: every click goes to the PanelCoordinator, and the
    toggle only ever displays the coordinator's mirror value.
    """

    def __init__(self, coordinator: PanelCoordinator, parent=None):
        super().__init__(parent)
        self.coordinator = coordinator
        self.setObjectName("SidePanel")
        self.setFixedWidth(260)
        self.setSizePolicy(QSizePolicy.Fixed, QSizePolicy.Expanding)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 20, 16, 16)
        layout.setSpacing(12)

        self.open_config_button = QPushButton("Open configuration file")
        self.open_instructions_button = QPushButton("Open instructions")
        self.backup_checkbox = QCheckBox("Enable Backup")
        self.close_button = QPushButton("Close")
        self.close_button.setObjectName("ClosePanelButton")

        layout.addWidget(self.open_config_button)
        layout.addWidget(self.open_instructions_button)
        layout.addWidget(self.backup_checkbox)
        layout.addStretch()
        layout.addWidget(self.close_button, alignment=Qt.AlignLeft)

        self.backup_checkbox.setChecked(coordinator.mirror_checked)
        self.setVisible(coordinator.is_open())

        # 'clicked' fires for user interaction only, never for setChecked().
        self.backup_checkbox.clicked.connect(self._on_backup_clicked)
        self.open_config_button.clicked.connect(coordinator.open_config)
        self.open_instructions_button.clicked.connect(coordinator.open_instructions)
        self.close_button.clicked.connect(coordinator.close_panel)

        coordinator.mirror_changed.connect(self._show_mirror)
        coordinator.visibility_changed.connect(self.setVisible)

    @Slot()
    def _on_backup_clicked(self):
        self.coordinator.toggle_backup()
        # Keep the box honest even if the coordinator did not emit a change.
        self._show_mirror(self.coordinator.mirror_checked)

    @Slot(bool)
    def _show_mirror(self, checked: bool):
        if self.backup_checkbox.isChecked() != checked:
            self.backup_checkbox.setChecked(checked)
