"""
Core business logic for finding meeting windows within a day.

Pure domain logic: no I/O, no shared state. Each call to ``query`` depends
only on its arguments.
"""

import logging
from dataclasses import dataclass
from typing import Collection, List

from .models import (
    END_OF_DAY,
    LAST_MINUTE_OF_DAY,
    START_OF_DAY,
    WHOLE_DAY,
    Event,
    MeetingRequest,
    TimeRange,
)

logger = logging.getLogger(__name__)


@dataclass
class _BlockExtent:
    """
    Rightmost minute up to which one attendee class is known to be busy.

    ``seen`` records whether any event of the class has been swept. An
    unseen extent stays at START_OF_DAY, which is a real boundary, so the
    flag only feeds diagnostics and never changes a window.
    """
    end: int = START_OF_DAY
    seen: bool = False

    def advance(self, minute: int) -> None:
        self.end = max(self.end, minute)
        self.seen = True


class MeetingQuery:
    """
    Finds meeting windows for a request given the day's busy events.

    Algorithm:
    1. Sort events by start time
    2. Sweep them left to right, keeping one block extent for mandatory
       attendees and one for optional attendees
    3. A gap between an extent and the next event touching that class is a
       window if it is long enough for the meeting
    4. The gap after the last event is evaluated against the end of the day
    5. Prefer windows that suit optional attendees too, if there are any
    """

    def query(self, events: Collection[Event], request: MeetingRequest) -> List[TimeRange]:
        """
        Find all maximal windows that fit the request.

        Args:
            events: Busy events of the day, in any order
            request: The meeting to place

        Returns:
            Windows in ascending order, each at least ``request.duration`` long
        """
        if not request.all_attendees:
            return [WHOLE_DAY]

        if request.duration > END_OF_DAY:
            logger.debug("Requested duration %d exceeds the day", request.duration)
            return []

        consider_optional = bool(request.optional_attendees)
        mandatory = _BlockExtent()
        optional = _BlockExtent()

        mandatory_slots: List[TimeRange] = []
        combined_slots: List[TimeRange] = []

        sorted_events = sorted(events, key=lambda event: event.when)
        logger.debug(
            "Sweeping %d events for %d mandatory and %d optional attendees",
            len(sorted_events),
            len(request.attendees),
            len(request.optional_attendees),
        )

        for event in sorted_events:
            touches_mandatory = event.involves_any(request.attendees)
            touches_optional = event.involves_any(request.optional_attendees)

            # Events nobody in the request attends, and zero-length events that
            # occupy no minute, neither close nor open a window.
            if not (touches_mandatory or touches_optional) or event.when.duration == 0:
                continue

            boundary = event.when.start

            if touches_mandatory and self._fits(mandatory.end, boundary, request.duration):
                mandatory_slots.append(
                    TimeRange.from_start_end(mandatory.end, boundary, inclusive=False)
                )

            if consider_optional:
                window_start = self._window_start(mandatory, optional)
                if self._fits(window_start, boundary, request.duration):
                    combined_slots.append(
                        TimeRange.from_start_end(window_start, boundary, inclusive=False)
                    )

            if touches_mandatory:
                mandatory.advance(event.when.end)
            if touches_optional:
                optional.advance(event.when.end)

        # The rest of the day after the last busy block.
        if self._fits(mandatory.end, END_OF_DAY, request.duration):
            mandatory_slots.append(
                TimeRange.from_start_end(mandatory.end, LAST_MINUTE_OF_DAY, inclusive=True)
            )

        if consider_optional:
            window_start = self._window_start(mandatory, optional)
            if self._fits(window_start, END_OF_DAY, request.duration):
                combined_slots.append(
                    TimeRange.from_start_end(window_start, LAST_MINUTE_OF_DAY, inclusive=True)
                )

        for label, extent in (("mandatory", mandatory), ("optional", optional)):
            if not extent.seen:
                logger.debug("No busy time for %s attendees", label)

        if combined_slots:
            logger.debug("Found %d windows including optional attendees", len(combined_slots))
            return combined_slots

        logger.debug("Found %d windows for mandatory attendees", len(mandatory_slots))
        return mandatory_slots

    @staticmethod
    def _fits(window_start: int, window_end: int, duration: int) -> bool:
        """Check if a gap is long enough to hold the meeting."""
        return window_end - window_start >= duration

    @staticmethod
    def _window_start(*extents: _BlockExtent) -> int:
        """First minute at which every attendee class is free."""
        return max(extent.end for extent in extents)
