import json
import logging
import os

from calendar_app.core import events as ops
from calendar_app.core.config import EVENTS_FILE, JSON_INDENT
from calendar_app.core.utils import event_from_dict

logger = logging.getLogger(__name__)


class EventStore:
    """In-memory list of calendar events backed by a single JSON file.

    The whole file is read once by load() and rewritten on every mutation.
    Load and save failures are logged and never raised.
    """
    def __init__(self, path=EVENTS_FILE, text_key='eventName'):
        self.path = path
        self.text_key = text_key
        self.events = []

    def load(self):
        """Load all events from disk, falling back to an empty list on any error."""
        self.events = []
        if not os.path.exists(self.path):
            logger.info(f"No events file at {self.path}, starting empty")
            return self.events

        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                raw = f.read()
            if not raw.strip():
                return self.events

            data = json.loads(raw)
            if not isinstance(data, list):
                raise ValueError(f"Expected a JSON array, got {type(data).__name__}")
            self.events = [event_from_dict(item) for item in data]
        except (json.JSONDecodeError, RecursionError) as e:
            logger.error(f"Error loading events: {str(e)}")
            self.events = []
        except ValueError as e:
            logger.error(f"Error parsing events: {str(e)}")
            self.events = []
        except OSError as e:
            logger.error(f"Error reading events file: {str(e)}")
            self.events = []

        logger.debug(f"Loaded {len(self.events)} events from {self.path}")
        return self.events

    def save(self, events=None):
        """Write the full event list to disk. Returns False if the write failed."""
        if events is None:
            events = self.events

        try:
            payload = json.dumps([e.to_dict(self.text_key) for e in events],
                                 ensure_ascii=False, indent=JSON_INDENT).encode('utf-8')
        except (TypeError, ValueError) as e:
            logger.error(f"Error serializing events: {str(e)}")
            return False

        try:
            with open(self.path, 'wb') as f:
                f.write(payload)
        except OSError as e:
            logger.error(f"Error writing events file: {str(e)}")
            return False

        logger.debug(f"Saved {len(events)} events to {self.path}")
        return True

    def find_by_date(self, date):
        return ops.find_by_date(self.events, date)

    def month_events(self, year, month):
        return ops.month_filter(self.events, year, month)

    def marked_days(self, year, month):
        return ops.marked_days(self.events, year, month)

    def save_event(self, date, text, category=None):
        """Store text for a date; empty text removes the date's event instead."""
        text = (text or '').strip()
        if not text:
            self.clear_event(date)
            return None

        event = ops.upsert(self.events, date, text, category)
        self.save()
        return event

    def clear_event(self, date):
        """Remove the event for a date and persist the change."""
        removed = ops.delete(self.events, date)
        self.save()
        return removed
