"""Clock abstractions for PageTree.

Default page timestamps and the recency cutoff both depend on "now". Reading
it through a Clock lets tests pin time to a fixed instant.
"""

from abc import ABC, abstractmethod
from datetime import datetime, time, timedelta, tzinfo
from typing import Optional


def as_aware(moment: datetime) -> datetime:
    """Return ``moment`` with a time zone, treating naive values as local time."""
    if moment.tzinfo is None or moment.tzinfo.utcoffset(moment) is None:
        return moment.astimezone()
    return moment


class Clock(ABC):
    """Source of the current instant.

    Subclasses supply ``now()`` and the zone calendar days are measured in.
    A zone of None means the local system zone.
    """

    timezone: Optional[tzinfo] = None

    @abstractmethod
    def now(self) -> datetime:
        """Return the current instant as an aware datetime."""
        pass

    def start_of_day(self, days_ago: int = 0) -> datetime:
        """Midnight at the start of the calendar day ``days_ago`` days before today.

        Args:
            days_ago: Whole days to step back from today (0 = today)

        Returns:
            Aware datetime for 00:00 of that day in this clock's zone
        """
        if self.timezone is None:
            today = self.now().astimezone().date()
            day = today - timedelta(days=days_ago)
            # Going through a naive local time applies the zone's DST rules
            # for that day rather than today's offset.
            return datetime.combine(day, time.min).astimezone()

        today = self.now().astimezone(self.timezone).date()
        day = today - timedelta(days=days_ago)
        return datetime.combine(day, time.min, tzinfo=self.timezone)


class SystemClock(Clock):
    """Wall-clock time, in the local system zone unless a zone is given."""

    def __init__(self, timezone: Optional[tzinfo] = None):
        self.timezone = timezone

    def now(self) -> datetime:
        if self.timezone is None:
            return datetime.now().astimezone()
        return datetime.now(self.timezone)

    def __repr__(self) -> str:
        return f"SystemClock(timezone={self.timezone!r})"


class FixedClock(Clock):
    """A clock frozen at one instant.

    Calendar days are measured in the instant's own zone, or in the local
    system zone when ``local_days`` is set. The latter keeps the day
    boundaries on the local DST rules of each day rather than the fixed
    offset the instant was captured with. ``advance`` moves the frozen
    instant, which is handy when building trees with timestamps relative to
    "now".
    """

    def __init__(self, instant: datetime, local_days: bool = False):
        self._instant = as_aware(instant)
        self.timezone = None if local_days else self._instant.tzinfo

    def now(self) -> datetime:
        return self._instant

    def advance(self, delta: timedelta) -> None:
        """Move the frozen instant by ``delta`` (negative to go back)."""
        self._instant = self._instant + delta

    def __repr__(self) -> str:
        return f"FixedClock({self._instant.isoformat()})"


SYSTEM_CLOCK = SystemClock()
