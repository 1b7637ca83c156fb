# Core modules initialization
from calendar_app.core.models import CalendarEvent
from calendar_app.core.store import EventStore
from calendar_app.core.controller import CalendarController

__all__ = ['CalendarEvent', 'EventStore', 'CalendarController']
