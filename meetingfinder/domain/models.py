"""
Domain models for time ranges, events and meeting requests.

All times are whole minutes since midnight of a single day.
"""

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable

from .exceptions import InvalidRequest, InvalidTimeRange

START_OF_DAY = 0
END_OF_DAY = 24 * 60  # exclusive boundary, equal to the length of the day
LAST_MINUTE_OF_DAY = END_OF_DAY - 1


@dataclass(frozen=True, order=True)
class TimeRange:
    """
    Represents an immutable span of minutes within one day.

    ``end`` is stored exclusive, so ``duration == end - start``. Ranges order
    by start first and end second.

    Invariant: START_OF_DAY <= start <= end <= END_OF_DAY.
    """
    start: int
    end: int

    def __post_init__(self):
        if not START_OF_DAY <= self.start <= END_OF_DAY:
            raise InvalidTimeRange(f"Start minute {self.start} is outside the day")
        if self.end < self.start:
            raise InvalidTimeRange(f"End minute {self.end} is before start minute {self.start}")
        if self.end > END_OF_DAY:
            raise InvalidTimeRange(f"Range {self.start}-{self.end} runs past the end of the day")

    @classmethod
    def from_start_duration(cls, start: int, duration: int) -> "TimeRange":
        """Create a range that starts at ``start`` and lasts ``duration`` minutes."""
        if duration < 0:
            raise InvalidTimeRange(f"Duration must not be negative, got {duration}")
        return cls(start=start, end=start + duration)

    @classmethod
    def from_start_end(cls, start: int, end: int, inclusive: bool) -> "TimeRange":
        """
        Create a range between two minutes.

        Args:
            start: First minute of the range
            end: Boundary minute
            inclusive: Whether minute ``end`` itself belongs to the range

        Returns:
            TimeRange instance
        """
        return cls(start=start, end=end + 1 if inclusive else end)

    @property
    def duration(self) -> int:
        """Length of the range in minutes."""
        return self.end - self.start

    def contains(self, point: int) -> bool:
        """Check if a minute falls inside this range."""
        return self.start <= point < self.end

    def contains_range(self, other: "TimeRange") -> bool:
        """Check if another range lies completely within this one."""
        return self.start <= other.start and other.end <= self.end

    def overlaps(self, other: "TimeRange") -> bool:
        """Check if this range shares at least one minute with another."""
        return self.start < other.end and other.start < self.end

    def __str__(self) -> str:
        return f"[{self.start}, {self.end})"


WHOLE_DAY = TimeRange.from_start_end(START_OF_DAY, LAST_MINUTE_OF_DAY, inclusive=True)


def _freeze(names: Iterable[str]) -> FrozenSet[str]:
    if isinstance(names, str):
        # A bare string would otherwise be split into characters.
        return frozenset([names])
    return frozenset(names)


@dataclass(frozen=True)
class Event:
    """
    A busy span of the day and the people attending it.

    The name is only used for diagnostics.
    """
    name: str
    when: TimeRange
    attendees: FrozenSet[str] = field(default_factory=frozenset)

    def __post_init__(self):
        object.__setattr__(self, "attendees", _freeze(self.attendees))

    def involves_any(self, people: FrozenSet[str]) -> bool:
        """Check if at least one of ``people`` attends this event."""
        return not self.attendees.isdisjoint(people)


@dataclass(frozen=True)
class MeetingRequest:
    """
    A request for a meeting of ``duration`` minutes.

    ``attendees`` must be able to attend; ``optional_attendees`` should be
    included when possible. The two sets may overlap.
    """
    duration: int
    attendees: FrozenSet[str] = field(default_factory=frozenset)
    optional_attendees: FrozenSet[str] = field(default_factory=frozenset)

    def __post_init__(self):
        if self.duration <= 0:
            raise InvalidRequest(f"Meeting duration must be greater than zero, got {self.duration}")
        object.__setattr__(self, "attendees", _freeze(self.attendees))
        object.__setattr__(self, "optional_attendees", _freeze(self.optional_attendees))

    @property
    def all_attendees(self) -> FrozenSet[str]:
        """Mandatory and optional attendees combined."""
        return self.attendees | self.optional_attendees
