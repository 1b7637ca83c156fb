import logging

from PyQt6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QLabel, QFrame, QCalendarWidget
)
from PyQt6.QtCore import Qt, QDate
from PyQt6.QtGui import QColor, QFont, QTextCharFormat

from calendar_app.core.config import (
    DEFAULT_WINDOW_SIZE, MAIN_STYLE, WINDOW_TITLE, FONT_HEADER, FONT_HEADER_SIZE,
    FONT_LABEL, FONT_LABEL_SIZE, PADDING, UNSTYLED_EVENT_COLOR, MODE_CATEGORY, MODE_INLINE
)
from calendar_app.core.events import category_color
from calendar_app.core.utils import format_date
from calendar_app.ui.event_dialog import EventDialog
from calendar_app.ui.inline_editor import InlineEditor

logger = logging.getLogger(__name__)


def to_qdate(value):
    return QDate(value.year, value.month, value.day)


class CalendarWindow(QMainWindow):
    """Main application window."""
    def __init__(self, controller, mode=MODE_CATEGORY):
        super().__init__()
        self.controller = controller
        self.mode = mode
        self.marked_dates = {}
        self.inline_editor = None

        self.setWindowTitle(WINDOW_TITLE)
        self.resize(*DEFAULT_WINDOW_SIZE)
        self.setStyleSheet(MAIN_STYLE)

        self.init_ui()

        self.controller.monthChanged.connect(self.on_controller_month_changed)
        self.controller.marksChanged.connect(self.update_calendar_marks)
        self.controller.daySelected.connect(self.update_status)
        self.controller.eventChanged.connect(self.update_status)

        self.controller.refresh_marks()
        self.update_status(self.controller.selected_date)

    def init_ui(self):
        """Initialize the main UI components."""
        central_widget = QWidget()
        self.setCentralWidget(central_widget)
        main_layout = QVBoxLayout(central_widget)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)

        self.init_header(main_layout)

        content = QFrame()
        content_layout = QVBoxLayout(content)
        content_layout.setContentsMargins(PADDING, PADDING, PADDING, PADDING)
        content_layout.setSpacing(PADDING // 2)

        self.init_calendar(content_layout)

        self.status_label = QLabel()
        self.status_label.setFont(QFont(FONT_LABEL, FONT_LABEL_SIZE))
        self.status_label.setWordWrap(True)
        content_layout.addWidget(self.status_label)

        if self.mode == MODE_INLINE:
            self.inline_editor = InlineEditor(self.controller)
            content_layout.addWidget(self.inline_editor)

        main_layout.addWidget(content, 1)

    def init_header(self, parent_layout):
        header = QFrame()
        header.setObjectName("header")
        header.setMinimumHeight(60)

        header_layout = QHBoxLayout(header)
        header_layout.setContentsMargins(PADDING, PADDING // 2, PADDING, PADDING // 2)

        title_label = QLabel("Calendar")
        title_label.setFont(QFont(FONT_HEADER, FONT_HEADER_SIZE, QFont.Weight.Bold))
        header_layout.addWidget(title_label)
        header_layout.addStretch(1)

        parent_layout.addWidget(header)

    def init_calendar(self, parent_layout):
        self.calendar = QCalendarWidget()
        self.calendar.setGridVisible(True)
        self.calendar.setVerticalHeaderFormat(QCalendarWidget.VerticalHeaderFormat.ISOWeekNumbers)
        self.calendar.setFirstDayOfWeek(Qt.DayOfWeek.Monday)
        self.calendar.setSelectedDate(to_qdate(self.controller.selected_date))
        self.calendar.setCurrentPage(self.controller.displayed_year, self.controller.displayed_month)

        self.calendar.currentPageChanged.connect(self.on_page_changed)
        self.calendar.selectionChanged.connect(self.on_selection_changed)
        self.calendar.activated.connect(self.on_day_activated)

        parent_layout.addWidget(self.calendar, 1)

    def on_page_changed(self, year, month):
        self.controller.set_month(year, month)

    def on_controller_month_changed(self, year, month):
        if (self.calendar.yearShown(), self.calendar.monthShown()) != (year, month):
            self.calendar.setCurrentPage(year, month)

    def on_selection_changed(self):
        """Follow the grid selection, whether changed by mouse or keyboard."""
        self.controller.select_date(self.calendar.selectedDate().toPyDate())

    def on_day_activated(self, qdate):
        """Open the event editor on double-click or Enter."""
        self.controller.select_date(qdate.toPyDate())
        if self.mode == MODE_INLINE:
            self.inline_editor.text_edit.setFocus()
        else:
            self.open_event_dialog()

    def create_event_dialog(self):
        return EventDialog(self.controller, parent=self, mode=self.mode)

    def open_event_dialog(self):
        dialog = self.create_event_dialog()
        dialog.exec()

    def update_calendar_marks(self, marks):
        """Re-mark the displayed month: bold days with events, colored by category."""
        self.calendar.setDateTextFormat(QDate(), QTextCharFormat())
        self.marked_dates = {}

        year, month = self.controller.displayed_year, self.controller.displayed_month
        for day, category in marks.items():
            color = category_color(category) or UNSTYLED_EVENT_COLOR
            text_format = QTextCharFormat()
            text_format.setFontWeight(QFont.Weight.Bold.value)
            text_format.setBackground(QColor(color))

            qdate = QDate(year, month, day)
            self.calendar.setDateTextFormat(qdate, text_format)
            self.marked_dates[qdate.toPyDate()] = color

    def update_status(self, selected_date):
        event = self.controller.store.find_by_date(selected_date)
        date_text = format_date(selected_date)
        if not event:
            self.status_label.setText(f"{date_text}: no event")
        elif event.category:
            self.status_label.setText(f"{date_text}: {event.text} ({event.category})")
        else:
            self.status_label.setText(f"{date_text}: {event.text}")

    def closeEvent(self, event):
        """Handle window close event."""
        logger.info("Calendar window closed")
        event.accept()
