"""
Tests for the file based event source.
"""

import asyncio
import json

import pytest

from meetingfinder.adapters.file_event_source import FileEventSource, parse_minute
from meetingfinder.config import AppConfig, Person
from meetingfinder.domain.exceptions import EventSourceError
from meetingfinder.domain.models import END_OF_DAY, Event, TimeRange


class TestParseMinute:
    """Tests for time-of-day parsing."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("00:00", 0),
            ("09:30", 570),
            ("23:59", 1439),
            ("24:00", END_OF_DAY),
            (630, 630),
        ],
    )
    def test_valid_values(self, value, expected):
        assert parse_minute(value) == expected

    @pytest.mark.parametrize("value", ["soon", "2024-11-25", True, 9.5, None])
    def test_invalid_values(self, value):
        with pytest.raises(ValueError):
            parse_minute(value)


def _write(tmp_path, content, name="events.yaml"):
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")
    return path


class TestFileEventSource:
    """Tests for FileEventSource."""

    def test_load_yaml_events(self, tmp_path):
        path = _write(
            tmp_path,
            "events:\n"
            "  - name: Standup\n"
            "    start: '09:00'\n"
            "    end: '09:15'\n"
            "    attendees: [alice, bob, alice]\n"
            "  - name: Review\n"
            "    start: '10:30'\n"
            "    duration: 90\n"
            "    attendees: carol\n",
        )

        events = FileEventSource(path).load()

        assert events == [
            Event("Standup", TimeRange(540, 555), {"alice", "bob"}),
            Event("Review", TimeRange(630, 720), {"carol"}),
        ]

    def test_unquoted_times_are_minutes(self, tmp_path):
        path = _write(tmp_path, "- start: 10:30\n  end: 11:00\n")

        events = FileEventSource(path).load()

        assert events[0].when == TimeRange(630, 660)
        assert events[0].name == "event-0"

    def test_load_json_list(self, tmp_path):
        path = _write(
            tmp_path,
            json.dumps([{"name": "Late", "start": "22:00", "end": "24:00", "attendees": []}]),
            name="events.json",
        )

        events = FileEventSource(path).load()

        assert events == [Event("Late", TimeRange(1320, END_OF_DAY))]

    def test_aliases_resolved_through_config(self, tmp_path):
        config = AppConfig(people=[Person(name="alice", email="alice@example.com")])
        path = _write(
            tmp_path,
            "events:\n"
            "  - start: 0\n"
            "    duration: 30\n"
            "    attendees: [Alice, Person B]\n",
        )

        events = FileEventSource(path, config=config).load()

        assert events[0].attendees == frozenset({"alice@example.com", "Person B"})

    def test_empty_file(self, tmp_path):
        path = _write(tmp_path, "")

        assert FileEventSource(path).load() == []

    def test_missing_file(self, tmp_path):
        with pytest.raises(EventSourceError, match="not found"):
            FileEventSource(tmp_path / "missing.yaml").load()

    def test_missing_end_and_duration(self, tmp_path):
        path = _write(tmp_path, "events:\n  - start: '09:00'\n")

        with pytest.raises(EventSourceError, match="#0"):
            FileEventSource(path).load()

    def test_event_ending_before_start(self, tmp_path):
        path = _write(
            tmp_path,
            "events:\n"
            "  - start: '09:00'\n"
            "    end: '10:00'\n"
            "  - start: '12:00'\n"
            "    end: '11:00'\n",
        )

        with pytest.raises(EventSourceError, match="#1"):
            FileEventSource(path).load()

    def test_event_past_end_of_day(self, tmp_path):
        path = _write(tmp_path, "events:\n  - start: '23:30'\n    duration: 60\n")

        with pytest.raises(EventSourceError):
            FileEventSource(path).load()

    @pytest.mark.parametrize("duration", ["30.5", "'30'", "true"])
    def test_duration_must_be_whole_minutes(self, tmp_path, duration):
        path = _write(tmp_path, f"events:\n  - start: '09:00'\n    duration: {duration}\n")

        with pytest.raises(EventSourceError, match="whole minutes"):
            FileEventSource(path).load()

    def test_not_a_list(self, tmp_path):
        path = _write(tmp_path, "events: nope\n")

        with pytest.raises(EventSourceError, match="list of events"):
            FileEventSource(path).load()

    def test_get_events_is_awaitable(self, tmp_path):
        path = _write(tmp_path, "events:\n  - start: 60\n    end: 90\n    attendees: [a]\n")

        events = asyncio.run(FileEventSource(path).get_events())

        assert events == [Event("event-0", TimeRange(60, 90), {"a"})]
