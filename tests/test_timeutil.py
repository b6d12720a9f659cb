import time
from datetime import datetime, timedelta

import pytest

from xtoolkit.timeutil import (
    TIME_FORMAT_ALL,
    RunTimeStat,
    TimeType,
    day_begin_stamp,
    end_of_day,
    end_of_month,
    end_of_week,
    end_of_year,
    get_time_se,
    get_time_se2,
    hour_begin_stamp,
    local_time_from_string,
    month_scope,
    start_of_day,
    start_of_day_stamp_from_str,
    start_of_month,
    start_of_week,
    start_of_year,
    time_from_stamp,
    week_scope,
)

TICK = timedelta(microseconds=1)
NOW = datetime(2024, 7, 13, 14, 5, 30, 1234)


def test_start_of_year():
    assert start_of_year(NOW) == datetime(2024, 1, 1)


def test_end_of_year_is_instant_before_month_start_a_year_on():
    assert end_of_year(NOW) == datetime(2025, 6, 30, 23, 59, 59, 999999)


def test_end_of_month_rolls_over_long_days():
    assert end_of_month(datetime(2024, 1, 31, 8)) == datetime(2024, 2, 29, 23, 59, 59, 999999)


@pytest.mark.parametrize("day", [1, 10, 15, 28])
def test_month_bounds_meet(day):
    now = datetime(2024, 7, day, 9, 30)
    start = start_of_month(now)
    end = end_of_month(now)
    assert start.day == 1 and start.month == now.month
    assert start <= now <= end
    after = end + TICK
    assert after.day == 1 and after == start_of_month(after)


def test_day_bounds():
    start = start_of_day(NOW)
    end = end_of_day(NOW)
    assert start.date() == NOW.date() == end.date()
    assert (start.hour, start.minute, start.second, start.microsecond) == (0, 0, 0, 0)
    assert end + TICK == start_of_day(NOW + timedelta(days=1))


@pytest.mark.parametrize("offset", range(7))
def test_week_bounds(offset):
    now = datetime(2024, 7, 8, 12) + timedelta(days=offset)
    start = start_of_week(now)
    end = end_of_week(now)
    assert start.weekday() == 0
    assert start == start_of_day(start)
    assert start <= now <= end
    assert end + TICK - start == timedelta(days=7)


def test_get_time_se_forever():
    assert get_time_se(TimeType.FOREVER, 5, NOW) == (None, None)
    assert get_time_se2(TimeType.FOREVER, 5, NOW) == (0, 0)


def test_get_time_se_abs_and_back_abs():
    start, end = get_time_se(TimeType.ABS, 90, NOW)
    assert end == NOW
    assert end - start == timedelta(seconds=90)
    start, end = get_time_se(TimeType.BACK_ABS, 90, NOW)
    assert start == NOW
    assert end - start == timedelta(seconds=90)


def test_get_time_se_day_and_week():
    start, end = get_time_se(TimeType.DAY, 2, NOW)
    assert start == start_of_day(NOW)
    assert end == end_of_day(NOW + timedelta(days=2))
    start, end = get_time_se(TimeType.WEEK, 0, NOW)
    assert start == start_of_week(NOW)
    assert end == end_of_day(NOW)


def test_get_time_se_month_and_year_with_zero_value():
    assert get_time_se(TimeType.MONTH, 0, NOW) == (start_of_month(NOW), end_of_month(NOW))
    assert get_time_se(TimeType.YEAR, 0, NOW) == (start_of_month(NOW), end_of_month(NOW))


def test_get_time_se_unsupported():
    with pytest.raises(ValueError, match="not support timetype 9"):
        get_time_se(9, 1, NOW)


def test_get_time_se2_abs_difference():
    start, end = get_time_se2(TimeType.ABS, 90, NOW)
    assert end - start == 90


def test_start_of_day_stamp_from_str():
    assert start_of_day_stamp_from_str("2024-07-13") == int(datetime(2024, 7, 13).timestamp())
    today = start_of_day_stamp_from_str("")
    assert today == int(start_of_day(datetime.now()).timestamp())


@pytest.mark.parametrize("bad", ["2024/07/13", "2024-7-13", "yesterday"])
def test_start_of_day_stamp_from_str_rejects(bad):
    with pytest.raises(ValueError):
        start_of_day_stamp_from_str(bad)


def test_stamp_format_round_trip():
    moment = datetime(2024, 7, 13, 14, 5, 30)
    text = time_from_stamp(int(moment.timestamp()), TIME_FORMAT_ALL)
    assert local_time_from_string(TIME_FORMAT_ALL, text) == moment


def test_local_time_from_string_rejects():
    with pytest.raises(ValueError):
        local_time_from_string(TIME_FORMAT_ALL, "not a time")


def test_day_begin_stamp():
    now = int(time.time())
    begin = day_begin_stamp(now)
    assert begin <= now < begin + 86400
    assert day_begin_stamp(begin) == begin


def test_hour_begin_stamp():
    now = int(time.time())
    begin = hour_begin_stamp(now)
    assert begin <= now < begin + 3600
    assert hour_begin_stamp(begin) == begin


def test_week_scope():
    stamp = int(datetime(2024, 7, 13, 12).timestamp())
    begin, end = week_scope(stamp)
    assert begin <= stamp <= end
    assert end - begin == 7 * 86400 - 1
    assert datetime.fromtimestamp(begin) == start_of_week(datetime.fromtimestamp(stamp))


def test_month_scope():
    moment = datetime(2024, 7, 13, 12)
    first, last = month_scope(int(moment.timestamp()))
    assert datetime.fromtimestamp(first) == start_of_month(moment)
    assert datetime.fromtimestamp(last + 1) == end_of_month(moment) + TICK


def test_run_time_stat():
    stat = RunTimeStat()
    time.sleep(0.02)
    assert stat.millisecond() >= 20
    assert stat.duration() >= timedelta(milliseconds=20)
    assert stat.nanosecond() >= stat.microsecond() * 1000
    stat.reset()
    assert stat.millisecond() < 20