import calendar
from datetime import date, datetime

from calendar_app.core.models import CalendarEvent

TEXT_KEY_ALIASES = ('eventname', 'description', 'text', 'name')


def parse_event_date(value):
    """Parse a stored date, accepting plain ISO dates and ISO date-times.

    Time of day and timezone are dropped so events compare by date only.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValueError(f"Unsupported date value: {value!r}")

    return date.fromisoformat(value.strip()[:10])


def event_from_dict(data):
    """Build a CalendarEvent from a JSON record, whatever the key spelling."""
    if not isinstance(data, dict):
        raise ValueError(f"Event record must be an object, got {type(data).__name__}")

    fields = {str(key).lower(): value for key, value in data.items()}
    if 'date' not in fields:
        raise ValueError(f"Event record has no date: {data!r}")

    text = ''
    for key in TEXT_KEY_ALIASES:
        if key in fields and fields[key] is not None:
            text = str(fields[key])
            break

    category = fields.get('category')
    if category is not None:
        category = str(category)

    return CalendarEvent(parse_event_date(fields['date']), text, category)


def format_date(dt, format_type='long'):
    """Format a date for display.

    Args:
        dt: The date to format
        format_type: One of 'long', 'month_year'
    """
    if format_type == 'long':
        return f"{calendar.month_name[dt.month]} {dt.day}, {dt.year}"
    elif format_type == 'month_year':
        return f"{calendar.month_name[dt.month]} {dt.year}"
    else:
        return str(dt)


def get_prev_month(year, month):
    return (year - 1, 12) if month == 1 else (year, month - 1)


def get_next_month(year, month):
    return (year + 1, 1) if month == 12 else (year, month + 1)

