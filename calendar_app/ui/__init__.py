# UI modules initialization
from calendar_app.ui.event_dialog import EventDialog
from calendar_app.ui.inline_editor import InlineEditor
from calendar_app.ui.calendar_window import CalendarWindow

__all__ = ['EventDialog', 'InlineEditor', 'CalendarWindow']
