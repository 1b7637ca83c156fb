from PyQt6.QtWidgets import QFrame, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QTextEdit
from PyQt6.QtGui import QFont

from calendar_app.core.config import FONT_LABEL, FONT_LABEL_SIZE, INLINE_EDITOR_HEIGHT
from calendar_app.core.utils import format_date


class ClearOnDoubleClickTextEdit(QTextEdit):
    """Text box that empties itself on double-click without saving."""
    def mouseDoubleClickEvent(self, event):
        self.clear()
        event.accept()


class InlineEditor(QFrame):
    """Description editor shown below the calendar for the selected day."""
    def __init__(self, controller, parent=None):
        super().__init__(parent)
        self.controller = controller

        self.init_ui()

        self.controller.daySelected.connect(self.load_event)
        self.controller.eventChanged.connect(self.load_event)
        self.load_event(self.controller.selected_date)

    def init_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        header_layout = QHBoxLayout()
        self.date_label = QLabel()
        self.date_label.setFont(QFont(FONT_LABEL, FONT_LABEL_SIZE, QFont.Weight.Bold))
        header_layout.addWidget(self.date_label, 1)

        self.save_button = QPushButton("Save")
        self.save_button.clicked.connect(self.save)
        header_layout.addWidget(self.save_button)
        layout.addLayout(header_layout)

        self.text_edit = ClearOnDoubleClickTextEdit()
        self.text_edit.setPlaceholderText("Enter event description...")
        self.text_edit.setFixedHeight(INLINE_EDITOR_HEIGHT)
        layout.addWidget(self.text_edit)

    def load_event(self, selected_date):
        """Show the description stored for the selected date."""
        self.date_label.setText(format_date(selected_date))
        event = self.controller.store.find_by_date(selected_date)
        self.text_edit.setPlainText(event.text if event else "")

    def save(self):
        self.controller.save_event(self.text_edit.toPlainText())
