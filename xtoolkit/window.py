"""Checks whether enough time has passed for something to be updated again."""

from __future__ import annotations

import dataclasses
import json
import math
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any

from xtoolkit.timeutil import day_begin_stamp

TIME_TYPE_HAND = 0
TIME_TYPE_ABS = 1
TIME_TYPE_NATURE_DAY = 2

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


class TimeChecker(ABC):
    """Decides whether the span from start to end calls for an update."""

    @abstractmethod
    def check(self, start: int, end: int) -> bool:
        """True when an update is due."""

    @abstractmethod
    def validate(self) -> None:
        """Raise ValueError when the settings are unusable."""

    @classmethod
    def _from_json_object(cls, data: dict[str, Any]) -> TimeChecker:
        values: dict[str, int] = {}
        for field in dataclasses.fields(cls):
            if field.name in data:
                raw = data[field.name]
            else:
                matches = [key for key in data if key.lower() == field.name.lower()]
                if not matches:
                    continue
                raw = data[matches[0]]
            if raw is None:
                continue
            if isinstance(raw, bool) or not isinstance(raw, int):
                raise ValueError(f"cannot load {raw!r} into field {field.name} of {cls.__name__}")
            if not _INT64_MIN <= raw <= _INT64_MAX:
                raise ValueError(f"value {raw} overflows field {field.name} of {cls.__name__}")
            values[field.name] = raw
        return cls(**values)


@dataclass
class HandTimeChecker(TimeChecker):
    """Manual updates only: never due."""

    def check(self, start: int, end: int) -> bool:
        return False

    def validate(self) -> None:
        return None


@dataclass
class AbsTimeChecker(TimeChecker):
    """Due once value seconds have passed since start."""

    value: int = 0

    def check(self, start: int, end: int) -> bool:
        return start + self.value <= end

    def validate(self) -> None:
        if self.value <= 0:
            raise ValueError("lag value must > 0")


@dataclass
class NatureDayTimeChecker(TimeChecker):
    """Due once end falls on or after the local day that is value days after start."""

    value: int = 0

    def check(self, start: int, end: int) -> bool:
        shifted = datetime.fromtimestamp(start) + timedelta(days=self.value)
        return day_begin_stamp(math.floor(shifted.timestamp())) <= day_begin_stamp(end)

    def validate(self) -> None:
        if self.value <= 0:
            raise ValueError("lag value must > 0")


_CHECKERS: dict[int, type[TimeChecker]] = {
    TIME_TYPE_HAND: HandTimeChecker,
    TIME_TYPE_ABS: AbsTimeChecker,
    TIME_TYPE_NATURE_DAY: NatureDayTimeChecker,
}


def time_checker_factory(update_type: int, extra: str = "") -> TimeChecker:
    """Build the checker for an update type, configured from JSON text."""
    try:
        checker_cls = _CHECKERS[update_type]
    except KeyError:
        raise ValueError("not support updatetype") from None
    if not extra:
        return checker_cls()
    data = json.loads(extra)
    if data is None:
        return checker_cls()
    if not isinstance(data, dict):
        raise ValueError(f"cannot load JSON {type(data).__name__} into {checker_cls.__name__}")
    return checker_cls._from_json_object(data)


def time_checker_valid(update_type: int, extra: str = "") -> None:
    """Raise ValueError when a checker cannot be built from these settings."""
    time_checker_factory(update_type, extra)


def check_need_update2(update_type: int, extra: str, start: int, end: int) -> bool:
    """Build and validate a checker, then check the span from start to end."""
    checker = time_checker_factory(update_type, extra)
    checker.validate()
    return checker.check(start, end)


def check_need_update(update_type: int, extra: str, tm: int) -> bool:
    """Check the span from tm to now."""
    return check_need_update2(update_type, extra, tm, int(time.time()))