"""
Tests for the MeetingFinderService orchestration layer.
"""

import asyncio
from typing import List

from meetingfinder.domain.meeting_query import MeetingQuery
from meetingfinder.domain.models import END_OF_DAY, Event, MeetingRequest, TimeRange
from meetingfinder.services.meeting_finder import MeetingFinderService


class StubEventSource:
    """Minimal stub matching EventSourceProtocol."""

    def __init__(self, events: List[Event]):
        self._events = events
        self.calls = 0

    async def get_events(self) -> List[Event]:
        self.calls += 1
        return self._events


class RecordingMeetingQuery(MeetingQuery):
    """MeetingQuery that remembers what it was asked."""

    def __init__(self):
        self.requests = []

    def query(self, events, request):
        self.requests.append((list(events), request))
        return super().query(events, request)


def test_find_meeting_times_uses_event_source_and_query():
    """End-to-end call should yield calculated windows."""
    events = [Event("Busy", TimeRange(600, 660), {"a@example.com"})]
    source = StubEventSource(events)
    meeting_query = RecordingMeetingQuery()
    service = MeetingFinderService(event_source=source, meeting_query=meeting_query)
    request = MeetingRequest(duration=30, attendees={"a@example.com"})

    windows = asyncio.run(service.find_meeting_times(request))

    assert windows == [TimeRange(0, 600), TimeRange(660, END_OF_DAY)]
    assert source.calls == 1
    assert meeting_query.requests == [(events, request)]


def test_default_query_is_created():
    service = MeetingFinderService(event_source=StubEventSource([]))
    request = MeetingRequest(duration=30, optional_attendees={"b@example.com"})

    assert asyncio.run(service.find_meeting_times(request)) == [TimeRange(0, END_OF_DAY)]


def test_calculate_skips_event_source():
    source = StubEventSource([])
    service = MeetingFinderService(event_source=source)
    events = [Event("Busy", TimeRange(0, 1200), {"a"})]

    windows = service.calculate(events, MeetingRequest(duration=60, attendees={"a"}))

    assert windows == [TimeRange(1200, END_OF_DAY)]
    assert source.calls == 0
