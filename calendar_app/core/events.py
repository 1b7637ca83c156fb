"""Lookup and edit operations over a list of calendar events.

Every function works on a plain list so the same logic backs the store,
the controller and the tests. Mutating functions change the list in place.
Dates are compared by calendar day only; datetimes are reduced to their date.
"""

from calendar_app.core.config import CATEGORY_STYLES, STYLE_COLORS
from calendar_app.core.models import CalendarEvent
from calendar_app.core.utils import parse_event_date

_STYLE_LOOKUP = {name.lower(): style for name, style in CATEGORY_STYLES.items()}


def find_by_date(events, date):
    """Return the first event on the given date, or None."""
    day = parse_event_date(date)
    for event in events:
        if parse_event_date(event.date) == day:
            return event
    return None


def upsert(events, date, text, category=None):
    """Replace any events on the date with a single new event."""
    day = parse_event_date(date)
    delete(events, day)
    event = CalendarEvent(day, text, category)
    events.append(event)
    return event


def delete(events, date):
    """Remove every event on the date and return how many were removed."""
    day = parse_event_date(date)
    kept = [e for e in events if parse_event_date(e.date) != day]
    removed = len(events) - len(kept)
    events[:] = kept
    return removed


def month_filter(events, year, month):
    """Get all events within a specific month."""
    return [e for e in events if e.date.year == year and e.date.month == month]


def marked_days(events, year, month):
    """Map each day of the month that has an event to that event's category."""
    return {e.date.day: e.category for e in month_filter(events, year, month)}


def category_style(category):
    """Map a category to its styling class, or None when it has no style."""
    if not category:
        return None
    return _STYLE_LOOKUP.get(str(category).strip().lower())


def category_color(category):
    style = category_style(category)
    return STYLE_COLORS.get(style) if style else None
