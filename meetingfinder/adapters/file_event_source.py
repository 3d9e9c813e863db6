"""
Event source that reads a day's busy events from a YAML or JSON file.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import pendulum
import yaml

from ..config import AppConfig
from ..domain.exceptions import EventSourceError
from ..domain.models import END_OF_DAY, Event, TimeRange

logger = logging.getLogger(__name__)


def parse_minute(value: Any) -> int:
    """
    Convert a time of day into minutes since midnight.

    Accepts integers (already minutes) and ``HH:MM`` strings. ``24:00`` is
    the end of the day.

    Raises:
        ValueError: If the value is not a time of day
    """
    if isinstance(value, bool):
        raise ValueError(f"Not a time of day: {value!r}")
    # Unquoted H:MM in YAML 1.1 arrives as a base-60 int, which is already minutes.
    if isinstance(value, int):
        return value
    if not isinstance(value, str):
        raise ValueError(f"Not a time of day: {value!r}")

    text = value.strip()
    if text == "24:00":
        return END_OF_DAY

    try:
        parsed = pendulum.parse(text, exact=True)
    except ValueError as exc:
        raise ValueError(f"Not a time of day: {value!r}") from exc

    if not isinstance(parsed, pendulum.Time):
        raise ValueError(f"Expected a time of day without a date, got {value!r}")

    return parsed.hour * 60 + parsed.minute


class FileEventSource:
    """
    Loads events from a document shaped like::

        events:
          - name: Standup
            start: "09:00"
            end: "09:30"        # or duration: 30
            attendees: [alice@example.com, bob]

    JSON files are read the same way, as JSON is valid YAML.
    """

    def __init__(self, path: Path, config: Optional[AppConfig] = None):
        """
        Initialize the event source.

        Args:
            path: File holding the events
            config: Optional AppConfig used to resolve attendee aliases
        """
        self.path = Path(path)
        self.config = config

    async def get_events(self) -> List[Event]:
        """Load the events of the file."""
        return self.load()

    def load(self) -> List[Event]:
        """
        Read and parse every event of the file.

        Raises:
            EventSourceError: If the file is missing or an entry is malformed
        """
        raw_events = self._read_entries()
        events: List[Event] = []

        for index, entry in enumerate(raw_events):
            try:
                events.append(self._parse_event(index, entry))
            except (KeyError, TypeError, ValueError) as exc:
                raise EventSourceError(
                    f"Invalid event #{index} in {self.path}: {exc}"
                ) from exc

        logger.debug("Loaded %d events from %s", len(events), self.path)
        return events

    def _read_entries(self) -> List[Dict[str, Any]]:
        if not self.path.exists():
            raise EventSourceError(f"Events file not found: {self.path}")

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise EventSourceError(f"Invalid YAML in {self.path}: {exc}") from exc

        if data is None:
            logger.warning("Events file %s is empty", self.path)
            return []

        # A bare list of events is accepted as well as an ``events`` mapping.
        if isinstance(data, dict):
            data = data.get("events") or []

        if not isinstance(data, list):
            raise EventSourceError(f"{self.path} must contain a list of events.")

        return data

    def _parse_event(self, index: int, entry: Dict[str, Any]) -> Event:
        if not isinstance(entry, dict):
            raise TypeError("event must be a mapping")

        start = parse_minute(entry["start"])

        if "end" in entry:
            when = TimeRange.from_start_end(start, parse_minute(entry["end"]), inclusive=False)
        elif "duration" in entry:
            duration = entry["duration"]
            if isinstance(duration, bool) or not isinstance(duration, int):
                raise ValueError(f"duration must be whole minutes, got {duration!r}")
            when = TimeRange.from_start_duration(start, duration)
        else:
            raise KeyError("either 'end' or 'duration' is required")

        attendees = entry.get("attendees") or []
        if isinstance(attendees, str):
            attendees = [attendees]

        return Event(
            name=str(entry.get("name") or f"event-{index}"),
            when=when,
            attendees=frozenset(self._resolve(str(attendee)) for attendee in attendees),
        )

    def _resolve(self, attendee: str) -> str:
        if self.config is None:
            return attendee
        return self.config.resolve_participant(attendee)
