# file_organizer/gui/instructions_dialog.py

from PySide6.QtCore import Slot
from PySide6.QtWidgets import QDialog, QVBoxLayout, QHBoxLayout, QLabel, QPushButton

from .resources import INSTRUCTIONS_URL

EDITING_STEPS = [
    "Open the configuration file with any text editor",
    "Change the values to your liking",
    "<b>IMPORTANT!</b> Keep the original format",
    "Save the file",
]

RUNNING_STEPS = [
    "At first the button is disabled",
    "You need to enter any valid path to the input field",
    "Button becomes <b>enabled</b>, no matter what your input is",
    "Click the button to run the program",
    "If your path is valid, the program will run and organize your files to corresponding folders",
    "After run, the button will be disabled again and you will see the output on the screen",
]


def _numbered_list(steps: list) -> str:
    items = "".join(f"<li>{step}</li>" for step in steps)
    return f"<ol>{items}</ol>"


class InstructionsDialog(QDialog):
    """
    Two collapsible help sections. At most one is expanded: opening one
    collapses the other.
    """

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Instructions")
        self.setMinimumWidth(480)
        self.editing_open = False
        self.running_open = False

        layout = QVBoxLayout(self)

        header_layout = QHBoxLayout()
        title = QLabel("<h2>Instructions</h2>")
        self.read_more_label = QLabel(f'<a href="{INSTRUCTIONS_URL}">Read more</a>')
        self.read_more_label.setOpenExternalLinks(True)
        header_layout.addWidget(title)
        header_layout.addWidget(self.read_more_label)
        header_layout.addStretch()

        self.editing_button = QPushButton()
        self.editing_button.setObjectName("SectionHeader")
        self.editing_body = QLabel(_numbered_list(EDITING_STEPS))
        self.editing_body.setWordWrap(True)

        self.running_button = QPushButton()
        self.running_button.setObjectName("SectionHeader")
        self.running_body = QLabel(_numbered_list(RUNNING_STEPS))
        self.running_body.setWordWrap(True)

        self.back_button = QPushButton("Back")

        layout.addLayout(header_layout)
        layout.addWidget(self.editing_button)
        layout.addWidget(self.editing_body)
        layout.addWidget(self.running_button)
        layout.addWidget(self.running_body)
        layout.addStretch()
        layout.addWidget(self.back_button)

        self.editing_button.clicked.connect(self.toggle_editing)
        self.running_button.clicked.connect(self.toggle_running)
        self.back_button.clicked.connect(self.accept)

        self._refresh()

    @Slot()
    def toggle_editing(self):
        self.editing_open = not self.editing_open
        self.running_open = False
        self._refresh()

    @Slot()
    def toggle_running(self):
        self.running_open = not self.running_open
        self.editing_open = False
        self._refresh()

    def _refresh(self):
        self.editing_button.setText(f"{'▾' if self.editing_open else '▸'} Editing config file")
        self.running_button.setText(f"{'▾' if self.running_open else '▸'} Running the program")
        self.editing_body.setVisible(self.editing_open)
        self.running_body.setVisible(self.running_open)
