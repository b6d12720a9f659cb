"""Calendar boundaries, time windows by type, and local-time stamp helpers."""

from __future__ import annotations

import math
import re
import time
from datetime import datetime, timedelta
from enum import IntEnum
from typing import Optional

TIME_FORMAT_YEAR = "%Y-%m-%d"
TIME_FORMAT_DATE = "%m-%d"
TIME_FORMAT_TIME24 = "%H:%M:%S"
TIME_FORMAT_TIME12 = "%I:%M:%S"
TIME_FORMAT_ALL = "%Y-%m-%d %H:%M:%S"

SECONDS_PER_DAY = 24 * 3600
SECONDS_PER_HOUR = 3600

_TICK = timedelta(microseconds=1)
_DAY_RE = re.compile(r"\d{4}-\d{2}-\d{2}")


class TimeType(IntEnum):
    """How a time window is measured."""

    FOREVER = 0  # no bounds
    ABS = 1  # seconds back from now
    DAY = 2  # calendar days
    WEEK = 3  # calendar weeks
    MONTH = 4  # calendar months
    YEAR = 5  # calendar years
    BACK_ABS = 6  # seconds forward from now


def _add_date(moment: datetime, years: int = 0, months: int = 0, days: int = 0) -> datetime:
    """Add years, months and days, letting an overflowing day roll into the next month."""
    total = moment.year * 12 + (moment.month - 1) + years * 12 + months
    year, month0 = divmod(total, 12)
    first = moment.replace(year=year, month=month0 + 1, day=1)
    return first + timedelta(days=moment.day - 1 + days)


def _midnight(moment: datetime) -> datetime:
    return moment.replace(hour=0, minute=0, second=0, microsecond=0)


def _unix(moment: datetime) -> int:
    return math.floor(moment.timestamp())


def _go_mod(a: int, b: int) -> int:
    remainder = abs(a) % b
    return -remainder if a < 0 else remainder


def _local_offset() -> int:
    offset = datetime.now().astimezone().utcoffset()
    return int(offset.total_seconds()) if offset is not None else 0


def start_of_year(now: datetime) -> datetime:
    """Midnight on the first of January of now's year."""
    return _midnight(now.replace(month=1, day=1))


def end_of_year(now: datetime) -> datetime:
    """The last instant before the first of now's month, one year on."""
    shifted = _add_date(now, years=1)
    return _midnight(shifted.replace(day=1)) - _TICK


def start_of_month(now: datetime) -> datetime:
    """Midnight on the first of now's month."""
    return _midnight(now.replace(day=1))


def end_of_month(now: datetime) -> datetime:
    """The last instant of the month reached by adding one month to now."""
    shifted = _add_date(now, months=1)
    return _midnight(shifted.replace(day=1)) - _TICK


def start_of_day(now: datetime) -> datetime:
    """Midnight at the start of now's day."""
    return _midnight(now)


def end_of_day(now: datetime) -> datetime:
    """The last instant of now's day."""
    return _midnight(_add_date(now, days=1)) - _TICK


def start_of_week(now: datetime) -> datetime:
    """Midnight on the Monday of now's week."""
    return _add_date(_midnight(now), days=-now.weekday())


def end_of_week(now: datetime) -> datetime:
    """The last instant of the Sunday that ends now's week."""
    return _add_date(_midnight(now), days=7 - now.weekday()) - _TICK


def start_of_day_stamp_from_str(day: str = "") -> int:
    """Unix stamp of local midnight on a YYYY-MM-DD day, or today when empty."""
    if day:
        if not _DAY_RE.fullmatch(day):
            raise ValueError(f"day {day!r} is not in YYYY-MM-DD form")
        return _unix(datetime.strptime(day, "%Y-%m-%d"))
    return _unix(start_of_day(datetime.now()))


def _window(time_type: TimeType, value: int, now: datetime) -> tuple[datetime, datetime]:
    if time_type is TimeType.ABS:
        return now - timedelta(seconds=value), now
    if time_type is TimeType.DAY:
        return start_of_day(now), end_of_day(_add_date(now, days=value))
    if time_type is TimeType.WEEK:
        return start_of_week(now), end_of_day(_add_date(now, days=value * 7))
    if time_type is TimeType.MONTH:
        return start_of_month(now), end_of_month(_add_date(now, months=value))
    if time_type is TimeType.YEAR:
        return start_of_month(now), end_of_month(_add_date(now, years=value))
    if time_type is TimeType.BACK_ABS:
        return now, now + timedelta(seconds=value)
    raise ValueError(f"not support timetype {int(time_type)}")


def get_time_se(
    time_type: int, time_value: int, now: datetime
) -> tuple[Optional[datetime], Optional[datetime]]:
    """Start and end of the window of the given type; (None, None) for FOREVER."""
    try:
        kind = TimeType(time_type)
    except ValueError:
        raise ValueError(f"not support timetype {time_type}") from None
    if kind is TimeType.FOREVER:
        return None, None
    return _window(kind, time_value, now)


def get_time_se2(time_type: int, time_value: int, now: datetime) -> tuple[int, int]:
    """Like ``get_time_se`` but as Unix stamps, with 0 for a missing bound."""
    start, end = get_time_se(time_type, time_value, now)
    return (
        _unix(start) if start is not None else 0,
        _unix(end) if end is not None else 0,
    )


def local_time_from_string(fmt: str, text: str) -> datetime:
    """Parse text with a strftime format as a naive local time."""
    return datetime.strptime(text, fmt)


def time_from_stamp(stamp: int, fmt: str) -> str:
    """Format a Unix stamp as local time."""
    return datetime.fromtimestamp(stamp).strftime(fmt)


def day_begin_stamp(now: int) -> int:
    """Stamp of the start of the local day holding now, using the current UTC offset."""
    return now - _go_mod(now + _local_offset(), SECONDS_PER_DAY)


def hour_begin_stamp(now: int) -> int:
    """Stamp of the start of the local hour holding now, using the current UTC offset."""
    return now - _go_mod(now + _local_offset(), SECONDS_PER_HOUR)


def week_scope(stamp: int) -> tuple[int, int]:
    """First and last second of the Monday-to-Sunday local week holding stamp."""
    now = datetime.fromtimestamp(stamp)
    zero_day = _midnight(now)
    begin = _unix(zero_day) - (now.isoweekday() - 1) * SECONDS_PER_DAY
    return begin, begin + SECONDS_PER_DAY * 7 - 1


def month_scope(stamp: int) -> tuple[int, int]:
    """First and last second of the local month holding stamp."""
    now = datetime.fromtimestamp(stamp)
    first = _midnight(now.replace(day=1))
    last = _add_date(first, months=1, days=-1)
    return _unix(first), _unix(last) + SECONDS_PER_DAY - 1


class RunTimeStat:
    """Measures time elapsed since creation or the last reset."""

    def __init__(self) -> None:
        self._since = time.perf_counter_ns()

    def nanosecond(self) -> int:
        return time.perf_counter_ns() - self._since

    def microsecond(self) -> int:
        return self.nanosecond() // 1000

    def millisecond(self) -> int:
        return self.microsecond() // 1000

    def duration(self) -> timedelta:
        return timedelta(microseconds=self.nanosecond() / 1000)

    def reset(self) -> None:
        self._since = time.perf_counter_ns()