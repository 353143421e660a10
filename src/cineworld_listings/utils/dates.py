"""Calendar reconstruction for branch pages.

Branch pages never show absolute dates for showings: only a row of day
buttons ("Today", "Monday", ...) and bare clock times. These helpers turn
those into real dates and instants in the branch's timezone.
"""

import re
from collections.abc import Sequence
from datetime import date, datetime, time, timedelta, timezone, tzinfo
from zoneinfo import ZoneInfo

from cineworld_listings.schemas.listing import DayDate, TimeValue

LONDON_TZ = ZoneInfo("Europe/London")

CLOCK_PATTERN = re.compile(r"\b(\d{1,2}):(\d{2})\b")


def current_date(tz: tzinfo = LONDON_TZ) -> date:
    """Today's date in the given timezone."""
    return datetime.now(tz).date()


def get_dates_from_days(
    days: object,
    today: date | None = None,
    tz: tzinfo = LONDON_TZ,
) -> list[DayDate]:
    """
    Pair each day label with a date, starting from today.

    The labels are display text and are not parsed; the i-th label is
    always today plus i days.

    Args:
        days: Ordered day labels as shown on the page
        today: The first date (defaults to today in ``tz``)
        tz: Timezone used to determine today

    Returns:
        One DayDate per label, or an empty list if ``days`` is not a
        non-empty list of labels
    """
    if isinstance(days, (str, bytes)) or not isinstance(days, Sequence) or not days:
        return []

    start = today or current_date(tz)
    return [
        DayDate(day=str(day), date=(start + timedelta(days=index)).isoformat())
        for index, day in enumerate(days)
    ]


def format_instant(moment: datetime) -> str:
    """Format an aware datetime as a UTC instant with millisecond precision."""
    utc = moment.astimezone(timezone.utc)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"


def get_time_from_offset(
    start_time: object,
    offset_minutes: int = 0,
    today: date | None = None,
    tz: tzinfo = LONDON_TZ,
) -> TimeValue:
    """
    Turn a bare "HH:MM" start time plus an offset into a label and instant.

    The clock time is anchored to today in ``tz`` and the offset is added in
    wall-clock time, so 23:30 plus 60 minutes is 00:30 the next day. An offset
    too large to represent gives an empty value.

    Args:
        start_time: Clock time as displayed, e.g. "14:30"
        offset_minutes: Minutes to add (0 for a start time, the film's
            duration for an end time)
        today: Date the time falls on (defaults to today in ``tz``)
        tz: Timezone the clock time is expressed in

    Returns:
        The "HH:MM" label and ISO instant, both empty if the time is malformed
    """
    if not isinstance(start_time, str):
        return TimeValue()

    match = CLOCK_PATTERN.search(start_time)
    if not match:
        return TimeValue()

    hours, minutes = int(match.group(1)), int(match.group(2))
    if hours > 23 or minutes > 59:
        return TimeValue()

    try:
        offset = timedelta(minutes=int(offset_minutes))
    except (TypeError, ValueError):
        offset = timedelta()
    except OverflowError:
        return TimeValue()

    anchor = today or current_date(tz)
    try:
        moment = datetime.combine(anchor, time(hours, minutes), tzinfo=tz) + offset
        return TimeValue(label=moment.strftime("%H:%M"), value=format_instant(moment))
    except (OverflowError, ValueError):
        return TimeValue()
