"""Tests for EventStore load/save behaviour and its failure handling."""

import json
import logging
from datetime import date

import pytest

from calendar_app.core.models import CalendarEvent
from calendar_app.core.store import EventStore


class TestLoad:

    def test_missing_file_is_empty(self, events_path):
        store = EventStore(str(events_path))
        assert store.load() == []

    @pytest.mark.parametrize("content", ["", "   \n  "])
    def test_blank_file_is_empty(self, events_path, content):
        events_path.write_text(content, encoding="utf-8")
        assert EventStore(str(events_path)).load() == []

    def test_invalid_json_logs_and_returns_empty(self, events_path, caplog):
        events_path.write_text("[{not json", encoding="utf-8")
        with caplog.at_level(logging.ERROR):
            assert EventStore(str(events_path)).load() == []
        assert "Error loading events" in caplog.text

    def test_non_array_is_rejected(self, events_path, caplog):
        events_path.write_text('{"date": "2024-03-15"}', encoding="utf-8")
        with caplog.at_level(logging.ERROR):
            assert EventStore(str(events_path)).load() == []
        assert "Error parsing events" in caplog.text

    def test_bad_date_discards_file(self, events_path, caplog):
        events_path.write_text('[{"date": "someday", "eventName": "x"}]', encoding="utf-8")
        with caplog.at_level(logging.ERROR):
            assert EventStore(str(events_path)).load() == []
        assert "Error parsing events" in caplog.text

    def test_unreadable_path_logs_and_returns_empty(self, tmp_path, caplog):
        with caplog.at_level(logging.ERROR):
            assert EventStore(str(tmp_path)).load() == []
        assert "Error reading events file" in caplog.text

    def test_deeply_nested_json_logs_and_returns_empty(self, events_path, caplog):
        events_path.write_text("[" * 100000 + "]" * 100000, encoding="utf-8")
        with caplog.at_level(logging.ERROR):
            assert EventStore(str(events_path)).load() == []
        assert "Error loading events" in caplog.text

    def test_reads_original_file_layout(self, events_path):
        events_path.write_text(
            '[{"Date":"2024-03-15T00:00:00","EventName":"Dentist","Category":"Personal"},'
            '{"Date":"2024-03-20T00:00:00+01:00","EventName":"Standup","Category":"Work"}]',
            encoding="utf-8",
        )
        events = EventStore(str(events_path)).load()
        assert events == [
            CalendarEvent(date(2024, 3, 15), "Dentist", "Personal"),
            CalendarEvent(date(2024, 3, 20), "Standup", "Work"),
        ]

    def test_reads_description_records_without_category(self, events_path):
        events_path.write_text('[{"date": "2024-03-15", "description": "Call mum"}]', encoding="utf-8")
        event = EventStore(str(events_path)).load()[0]
        assert event.text == "Call mum"
        assert event.category is None

    def test_unknown_category_kept(self, events_path):
        events_path.write_text('[{"date": "2024-03-15", "eventName": "x", "category": "Holiday"}]',
                               encoding="utf-8")
        assert EventStore(str(events_path)).load()[0].category == "Holiday"


class TestSave:

    def test_round_trip(self, events_path):
        events = [
            CalendarEvent(date(2024, 3, 15), "Dentist", "Personal"),
            CalendarEvent(date(2024, 12, 31), "Party", "Other"),
            CalendarEvent(date(2025, 1, 2), "Kickoff", "Work"),
        ]
        assert EventStore(str(events_path)).save(events) is True

        loaded = EventStore(str(events_path)).load()
        assert {e.date: (e.text, e.category) for e in loaded} == \
            {e.date: (e.text, e.category) for e in events}

    def test_writes_json_array(self, events_path):
        store = EventStore(str(events_path), text_key="description")
        store.save([CalendarEvent(date(2024, 3, 15), "Dentist")])
        data = json.loads(events_path.read_text(encoding="utf-8"))
        assert data == [{"date": "2024-03-15", "description": "Dentist"}]

    def test_unicode_text(self, events_path):
        store = EventStore(str(events_path))
        store.save([CalendarEvent(date(2024, 3, 15), "Zahnarzt ü ✓", "Personal")])
        assert EventStore(str(events_path)).load()[0].text == "Zahnarzt ü ✓"

    def test_write_failure_is_logged_not_raised(self, tmp_path, caplog):
        store = EventStore(str(tmp_path / "missing" / "events.json"))
        store.events.append(CalendarEvent(date(2024, 3, 15), "Dentist", "Personal"))
        with caplog.at_level(logging.ERROR):
            assert store.save() is False
        assert "Error writing events file" in caplog.text
        assert len(store.events) == 1

    def test_unencodable_text_keeps_existing_file(self, store, events_path, caplog):
        store.save_event(date(2024, 3, 1), "Rent", "Personal")
        on_disk = events_path.read_text(encoding="utf-8")

        with caplog.at_level(logging.ERROR):
            store.save_event(date(2024, 3, 15), "bad \ud800", "Personal")

        assert "Error serializing events" in caplog.text
        assert events_path.read_text(encoding="utf-8") == on_disk
        assert EventStore(str(events_path)).load() == [CalendarEvent(date(2024, 3, 1), "Rent", "Personal")]


class TestMutations:

    def test_save_event_persists(self, store, events_path):
        store.save_event(date(2024, 3, 15), "  Dentist  ", "Personal")
        data = json.loads(events_path.read_text(encoding="utf-8"))
        assert data == [{"date": "2024-03-15", "eventName": "Dentist", "category": "Personal"}]

    def test_empty_text_deletes(self, store):
        store.save_event(date(2024, 3, 15), "Dentist", "Personal")
        assert store.save_event(date(2024, 3, 15), "   ", "Personal") is None
        assert store.find_by_date(date(2024, 3, 15)) is None

    def test_empty_text_on_empty_day_creates_nothing(self, store, events_path):
        store.save_event(date(2024, 3, 15), "")
        assert store.events == []
        assert json.loads(events_path.read_text(encoding="utf-8")) == []

    def test_clear_event(self, store, events_path):
        store.save_event(date(2024, 3, 15), "Dentist", "Personal")
        assert store.clear_event(date(2024, 3, 15)) == 1
        assert EventStore(str(events_path)).load() == []

    def test_dentist_scenario(self, store, events_path):
        store.save_event(date(2024, 3, 15), "Dentist", "Personal")

        reloaded = EventStore(str(events_path))
        reloaded.load()
        event = reloaded.find_by_date(date(2024, 3, 15))
        assert event.text == "Dentist"
        assert event.category == "Personal"
        assert len(reloaded.month_events(2024, 3)) == 1

    def test_last_write_wins_on_disk(self, store, events_path):
        store.save_event(date(2024, 3, 15), "Dentist", "Personal")
        store.save_event(date(2024, 3, 15), "Orthodontist", "Work")

        reloaded = EventStore(str(events_path)).load()
        assert reloaded == [CalendarEvent(date(2024, 3, 15), "Orthodontist", "Work")]
