"""
Domain-specific exception hierarchy for the meeting finder application.
"""


class MeetingFinderError(Exception):
    """Base class for all application-level errors."""


class InvalidRequest(MeetingFinderError, ValueError):
    """Raised when a meeting request cannot be interpreted (e.g. duration <= 0)."""


class InvalidTimeRange(MeetingFinderError, ValueError):
    """Raised when a time range falls outside the day or ends before it starts."""


class EventSourceError(MeetingFinderError):
    """Raised when event data cannot be loaded or parsed."""


class ConfigError(MeetingFinderError):
    """Raised when the configuration file is unusable."""
