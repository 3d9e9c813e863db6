"""
Application services for finding meeting windows.

The service coordinates loading busy events via an event source adapter and
delegates the actual window calculation to the domain-level
``MeetingQuery``. This keeps the CLI thin and lets tests swap the event
source for a stub through a simple protocol.
"""

from __future__ import annotations

import logging
from typing import Collection, List, Optional, Protocol

from ..domain.meeting_query import MeetingQuery
from ..domain.models import Event, MeetingRequest, TimeRange

logger = logging.getLogger(__name__)


class EventSourceProtocol(Protocol):
    """Protocol describing the event source behaviour needed by the service."""

    async def get_events(self) -> List[Event]:
        """Return the busy events of the day."""


class MeetingFinderService:
    """
    Orchestrates event retrieval and window calculation.
    """

    def __init__(
        self,
        event_source: EventSourceProtocol,
        meeting_query: Optional[MeetingQuery] = None,
    ) -> None:
        self._event_source = event_source
        self._meeting_query = meeting_query or MeetingQuery()

    async def find_meeting_times(self, request: MeetingRequest) -> List[TimeRange]:
        """
        Retrieve the day's events and compute the windows for ``request``.
        """
        events = await self._event_source.get_events()
        logger.debug("Event source returned %d events", len(events))

        return self.calculate(events, request)

    def calculate(
        self,
        events: Collection[Event],
        request: MeetingRequest,
    ) -> List[TimeRange]:
        """Calculate meeting windows from already loaded events."""
        return self._meeting_query.query(events, request)
