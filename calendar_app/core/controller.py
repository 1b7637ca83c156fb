import logging
from datetime import date

from PyQt6.QtCore import QObject, pyqtSignal

from calendar_app.core.utils import format_date, get_next_month, get_prev_month

logger = logging.getLogger(__name__)


class CalendarController(QObject):
    """Holds the displayed month and selected day, and notifies views of changes."""
    monthChanged = pyqtSignal(int, int)
    marksChanged = pyqtSignal(object)
    daySelected = pyqtSignal(object)
    eventChanged = pyqtSignal(object)

    def __init__(self, store, today=None, parent=None):
        super().__init__(parent)
        self.store = store
        today = today or date.today()
        self.displayed_year, self.displayed_month = today.year, today.month
        self.selected_date = today

    def set_month(self, year, month):
        """Switch the displayed month and re-mark its days."""
        if (year, month) == (self.displayed_year, self.displayed_month):
            return
        self.displayed_year, self.displayed_month = year, month
        logger.debug(f"Displaying {format_date(date(year, month, 1), 'month_year')}")
        self.monthChanged.emit(year, month)
        self.refresh_marks()

    def prev_month(self):
        self.set_month(*get_prev_month(self.displayed_year, self.displayed_month))

    def next_month(self):
        self.set_month(*get_next_month(self.displayed_year, self.displayed_month))

    def marked_days(self):
        return self.store.marked_days(self.displayed_year, self.displayed_month)

    def refresh_marks(self):
        self.marksChanged.emit(self.marked_days())

    def select_date(self, selected):
        self.selected_date = selected
        self.daySelected.emit(selected)

    def selected_event(self):
        return self.store.find_by_date(self.selected_date)

    def save_event(self, text, category=None):
        """Save text for the selected date; empty text clears the day."""
        if not (text or '').strip():
            self.clear_event()
            return None

        event = self.store.save_event(self.selected_date, text, category)
        logger.info(f"Saved event for {self.selected_date}: {event.text}")
        self._notify_changed()
        return event

    def clear_event(self):
        removed = self.store.clear_event(self.selected_date)
        if removed:
            logger.info(f"Cleared event for {self.selected_date}")
        self._notify_changed()
        return removed

    def _notify_changed(self):
        self.eventChanged.emit(self.selected_date)
        self.refresh_marks()
