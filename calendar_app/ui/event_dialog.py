from PyQt6.QtWidgets import (
    QDialog, QVBoxLayout, QHBoxLayout, QLabel, QLineEdit,
    QPushButton, QComboBox, QTextEdit
)
from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont

from calendar_app.core.config import (
    FONT_DATE, FONT_DATE_SIZE, FONT_LABEL, FONT_LABEL_SIZE,
    DEFAULT_DIALOG_WIDTH, DEFAULT_DIALOG_HEIGHT, NOTES_DIALOG_HEIGHT,
    MAIN_STYLE, CATEGORIES, DEFAULT_CATEGORY, MODE_NOTES
)
from calendar_app.core.utils import format_date


class EventDialog(QDialog):
    """Modal dialog for editing the event of the selected day."""
    def __init__(self, controller, parent=None, mode=None):
        super().__init__(parent)
        self.controller = controller
        self.mode = mode
        self.event_date = controller.selected_date

        height = NOTES_DIALOG_HEIGHT if mode == MODE_NOTES else DEFAULT_DIALOG_HEIGHT
        self.setWindowTitle("Event Details")
        self.setModal(True)
        self.resize(DEFAULT_DIALOG_WIDTH, height)
        self.setStyleSheet(MAIN_STYLE)

        self.init_ui()
        self.load_event()

    def init_ui(self):
        """Create and arrange all dialog widgets."""
        main_layout = QVBoxLayout(self)
        main_layout.setSpacing(15)
        main_layout.setContentsMargins(15, 15, 15, 15)

        self.date_label = QLabel(format_date(self.event_date))
        self.date_label.setFont(QFont(FONT_DATE, FONT_DATE_SIZE, QFont.Weight.Bold))
        self.date_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        main_layout.addWidget(self.date_label)

        if self.mode == MODE_NOTES:
            text_label = QLabel("Description:")
            text_label.setFont(QFont(FONT_LABEL, FONT_LABEL_SIZE))
            main_layout.addWidget(text_label)

            self.text_edit = QTextEdit()
            self.text_edit.setPlaceholderText("Enter event description...")
            main_layout.addWidget(self.text_edit, 1)
        else:
            name_layout = QHBoxLayout()
            text_label = QLabel("Event Name:")
            text_label.setFont(QFont(FONT_LABEL, FONT_LABEL_SIZE))
            name_layout.addWidget(text_label)

            self.text_edit = QLineEdit()
            self.text_edit.setPlaceholderText("Enter event name...")
            self.text_edit.returnPressed.connect(self.save)
            name_layout.addWidget(self.text_edit, 1)
            main_layout.addLayout(name_layout)

        category_layout = QHBoxLayout()
        category_label = QLabel("Category:")
        category_label.setFont(QFont(FONT_LABEL, FONT_LABEL_SIZE))
        category_layout.addWidget(category_label)

        self.category_combo = QComboBox()
        self.category_combo.addItems(CATEGORIES)
        self.category_combo.setCurrentText(DEFAULT_CATEGORY)
        category_layout.addWidget(self.category_combo, 1)
        main_layout.addLayout(category_layout)

        button_layout = QHBoxLayout()

        self.save_button = QPushButton("Save Event")
        self.save_button.clicked.connect(self.save)
        button_layout.addWidget(self.save_button)

        clear_text = "Delete Event" if self.mode == MODE_NOTES else "Clear Event"
        self.clear_button = QPushButton(clear_text)
        self.clear_button.setObjectName("clearButton")
        self.clear_button.clicked.connect(self.clear)
        button_layout.addWidget(self.clear_button)

        main_layout.addLayout(button_layout)

    def load_event(self):
        """Fill the form from the existing event for this date, if any."""
        event = self.controller.selected_event()
        if not event:
            return

        if self.mode == MODE_NOTES:
            self.text_edit.setPlainText(event.text)
        else:
            self.text_edit.setText(event.text)

        index = self._category_index(event.category)
        if index >= 0:
            self.category_combo.setCurrentIndex(index)

    def _category_index(self, category):
        if not category:
            return -1
        for i, name in enumerate(CATEGORIES):
            if name.lower() == str(category).lower():
                return i
        return -1

    def text(self):
        if self.mode == MODE_NOTES:
            return self.text_edit.toPlainText().strip()
        return self.text_edit.text().strip()

    def save(self):
        """Save the event; saving empty text removes it."""
        self.controller.save_event(self.text(), self.category_combo.currentText())
        self.accept()

    def clear(self):
        """Remove the event for this date."""
        self.controller.clear_event()
        self.accept()
