"""
Domain layer - Pure business logic without external dependencies.
"""

from .exceptions import InvalidRequest, InvalidTimeRange, MeetingFinderError
from .meeting_query import MeetingQuery
from .models import (
    END_OF_DAY,
    LAST_MINUTE_OF_DAY,
    START_OF_DAY,
    WHOLE_DAY,
    Event,
    MeetingRequest,
    TimeRange,
)

__all__ = [
    "END_OF_DAY",
    "LAST_MINUTE_OF_DAY",
    "START_OF_DAY",
    "WHOLE_DAY",
    "Event",
    "InvalidRequest",
    "InvalidTimeRange",
    "MeetingFinderError",
    "MeetingQuery",
    "MeetingRequest",
    "TimeRange",
]
