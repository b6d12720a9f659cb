"""Random numbers, selections and random strings."""

from __future__ import annotations

import random
from typing import Sequence, TypeVar

T = TypeVar("T")

PROBABILITY = 10000
LETTER_DIGIT = "0123456789"
LETTER_ALPHA = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"

_rng = random.Random()


class Random:
    """Random draws on a scale of ``PROBABILITY``."""

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)

    def get_random_number(self, n: int) -> int:
        """A number in [0, n); n of zero means ``PROBABILITY``."""
        if n == 0:
            n = PROBABILITY
        return self._rng.randrange(n)

    def check_probability_jackpot(self, prob: int) -> bool:
        """True with probability prob / PROBABILITY."""
        return self.get_random_number(PROBABILITY) < prob

    def _cal_random_number_between(self, low: int, high: int) -> int:
        if high == 0:
            return 1
        value = low + self.get_random_number(high - low)
        return value or 1


RAND = Random()


def wave(base: int, low_rate: int, up_rate: int) -> int:
    """Shift base by a random percentage in [low_rate, up_rate]."""
    rate = _rng.randint(low_rate, up_rate)
    return base + int(float(base) * rate / 100)


def rand_between(start: int, end: int) -> int:
    """A number in [start, end], or 0 when start exceeds end."""
    if start > end:
        return 0
    return _rng.randint(start, end)


def choose_m_n(m: int, n: int) -> list[int]:
    """Pick n distinct indices out of range(m); all of them when m <= n."""
    if n < 0:
        raise ValueError("n must not be negative")
    if m <= n:
        return list(range(m))
    return _rng.sample(range(m), n)


def _rand_from(alphabet: str, n: int) -> str:
    return "".join(_rng.choice(alphabet) for _ in range(n))


def rand_string(n: int) -> str:
    """n random letters and digits."""
    return _rand_from(LETTER_ALPHA, n)


def rand_digit(n: int) -> str:
    """n random decimal digits."""
    return _rand_from(LETTER_DIGIT, n)


def rand_once_from(items: Sequence[T]) -> T:
    """One item, chosen by a generator seeded with the sequence length."""
    length = len(items)
    return items[random.Random(length).randrange(length)]


def rand_some_from(items: Sequence[T], count: int) -> Sequence[T]:
    """The first min(len(items), count) items of the sequence."""
    chosen = choose_m_n(len(items), count)
    return items[: len(chosen)]