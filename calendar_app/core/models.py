class CalendarEvent:
    """Represents the single event stored for a calendar day."""
    def __init__(self, date, text, category=None):
        self.date = date
        self.text = text
        self.category = category

    def to_dict(self, text_key='eventName'):
        """Serialize the event for the JSON store."""
        data = {'date': self.date.isoformat(), text_key: self.text}
        if self.category is not None:
            data['category'] = self.category
        return data

    def __eq__(self, other):
        if not isinstance(other, CalendarEvent):
            return NotImplemented
        return (self.date, self.text, self.category) == (other.date, other.text, other.category)

    def __repr__(self):
        return f"CalendarEvent(date={self.date!r}, text={self.text!r}, category={self.category!r})"
