"""Resolve named date ranges to concrete ISO date windows."""

from datetime import date, datetime
from zoneinfo import ZoneInfo

from dateutil.relativedelta import relativedelta

from weight_tracker.domain.weights import DateRange, DateWindow

# relativedelta clamps to the last valid day of the target month,
# so Mar 31 minus one month is Feb 28 (or 29).
_RANGE_OFFSETS: dict[DateRange, relativedelta] = {
    DateRange.LAST_7_DAYS: relativedelta(days=7),
    DateRange.LAST_MONTH: relativedelta(months=1),
    DateRange.LAST_3_MONTHS: relativedelta(months=3),
    DateRange.LAST_6_MONTHS: relativedelta(months=6),
    DateRange.LAST_9_MONTHS: relativedelta(months=9),
    DateRange.LAST_YEAR: relativedelta(years=1),
}

UNBOUNDED = DateWindow(start_date=None, end_date=None)


def today_in(timezone_name: str = "UTC") -> date:
    """Return the current calendar date in the given timezone."""
    return datetime.now(tz=ZoneInfo(timezone_name)).date()


def resolve_date_range(
    date_range: DateRange | str, today: date | None = None
) -> DateWindow:
    """Return the window for a range token, ending today.

    ``all`` resolves to an unbounded window. When ``today`` is omitted the
    clock is read on every call.
    """
    token = DateRange(date_range)
    if token is DateRange.ALL:
        return UNBOUNDED
    end = today if today is not None else today_in()
    start = end - _RANGE_OFFSETS[token]
    return DateWindow(start_date=start.isoformat(), end_date=end.isoformat())
