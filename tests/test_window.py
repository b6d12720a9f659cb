import time

import pytest

from xtoolkit.window import (
    TIME_TYPE_ABS,
    TIME_TYPE_HAND,
    TIME_TYPE_NATURE_DAY,
    AbsTimeChecker,
    HandTimeChecker,
    NatureDayTimeChecker,
    check_need_update,
    check_need_update2,
    time_checker_factory,
    time_checker_valid,
)


def test_factory_builds_configured_checkers():
    assert time_checker_factory(TIME_TYPE_HAND, "") == HandTimeChecker()
    assert time_checker_factory(TIME_TYPE_ABS, '{"value": 60}') == AbsTimeChecker(60)
    assert time_checker_factory(TIME_TYPE_NATURE_DAY, '{"value": 3}') == NatureDayTimeChecker(3)


def test_factory_key_is_case_insensitive_and_unknown_keys_ignored():
    checker = time_checker_factory(TIME_TYPE_ABS, '{"Value": 7, "other": "x"}')
    assert checker == AbsTimeChecker(7)


def test_factory_without_extra_leaves_zero():
    assert time_checker_factory(TIME_TYPE_ABS, "") == AbsTimeChecker(0)


@pytest.mark.parametrize("extra", ['{"value": "5"}', '{"value": 1.5}', "[1]", "{bad json"])
def test_factory_rejects_bad_extra(extra):
    with pytest.raises(ValueError):
        time_checker_factory(TIME_TYPE_ABS, extra)


def test_unsupported_update_type():
    with pytest.raises(ValueError, match="not support updatetype"):
        time_checker_factory(9, "")
    with pytest.raises(ValueError, match="not support updatetype"):
        check_need_update2(9, "", 0, 0)


def test_time_checker_valid_raises_on_bad_json():
    with pytest.raises(ValueError):
        time_checker_valid(TIME_TYPE_NATURE_DAY, "{nope")


def test_hand_checker_never_due():
    assert HandTimeChecker().check(0, 10**9) is False
    assert check_need_update2(TIME_TYPE_HAND, "", 0, 10**9) is False


def test_abs_checker():
    checker = AbsTimeChecker(60)
    assert checker.check(100, 160) is True
    assert checker.check(100, 159) is False


@pytest.mark.parametrize("cls", [AbsTimeChecker, NatureDayTimeChecker])
@pytest.mark.parametrize("value", [0, -1])
def test_validate_rejects_non_positive(cls, value):
    with pytest.raises(ValueError, match="lag value must > 0"):
        cls(value).validate()


def test_check_need_update2_validates():
    with pytest.raises(ValueError, match="lag value must > 0"):
        check_need_update2(TIME_TYPE_ABS, "", 0, 100)
    assert check_need_update2(TIME_TYPE_ABS, '{"value": 10}', 0, 10) is True
    assert check_need_update2(TIME_TYPE_ABS, '{"value": 10}', 0, 9) is False


def test_nature_day_checker():
    start = int(time.time())
    checker = NatureDayTimeChecker(1)
    assert checker.check(start, start) is False
    assert checker.check(start, start + 2 * 86400) is True


def test_check_need_update_against_now():
    assert check_need_update(TIME_TYPE_ABS, '{"value": 1}', 0) is True
    assert check_need_update(TIME_TYPE_ABS, '{"value": 3600}', int(time.time())) is False