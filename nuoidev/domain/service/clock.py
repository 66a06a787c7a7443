"""Clock port.

Services never read the system clock directly; they ask a ``Clock``. This
keeps the "today" of the vote quota a function of an injected instant.
"""

from datetime import date, datetime, timezone


class Clock:
    """Source of the current instant."""

    def now(self) -> datetime:
        """Return the current time as a timezone-aware datetime."""
        raise NotImplementedError


def utc_day(moment: datetime) -> date:
    """Return the UTC calendar day containing ``moment``.

    Naive datetimes are treated as already being in UTC.
    """
    if moment.tzinfo is None:
        return moment.date()
    return moment.astimezone(timezone.utc).date()
