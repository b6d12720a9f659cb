"""Exponential back-off, a controllable periodic timer and a jittered ticker."""

from __future__ import annotations

import random
import threading
from datetime import datetime
from enum import Enum
from typing import Callable, Optional


class BackOffCtrl:
    """Blocking back-off that doubles from step up to ceil; times are in seconds."""

    def __init__(self, step: float, ceil: float) -> None:
        self._cond = threading.Condition()
        self._step = step
        self._ceil = ceil
        self._backtime = 0.0
        self._waiting = 0
        self._resets = 0

    @property
    def backtime(self) -> float:
        """The wait the next ``back_off`` call will make."""
        with self._cond:
            return self._backtime

    def set_ctrl(self, step: float, ceil: float) -> None:
        """Change step and ceiling, then reset."""
        with self._cond:
            self._step = step
            self._ceil = ceil
        self.reset()

    def back_off(self) -> None:
        """Wait the current back-off time, then grow it; a reset cuts the wait short."""
        with self._cond:
            wait = max(self._backtime, 0.0)
            self._waiting += 1
            try:
                if self._cond.wait_for(lambda: self._resets > 0, timeout=wait):
                    self._resets -= 1
                    return
                self._backtime = self._step if self._backtime <= 0 else self._backtime * 2
                if self._backtime >= self._ceil:
                    self._backtime = self._ceil
            finally:
                self._waiting -= 1

    def reset(self) -> None:
        """Zero the back-off and release one caller waiting in ``back_off``."""
        with self._cond:
            self._backtime = 0.0
            if self._waiting > self._resets:
                self._resets += 1
                self._cond.notify_all()


class _Action(Enum):
    STOP = "stop"
    RESET = "reset"
    TRIGGER = "trigger"


class Timer:
    """Calls a function every interval seconds on its own thread.

    An interval of zero or less waits indefinitely for ``trigger`` or ``stop``.
    Once ``stop`` returns the function is not running and will not be called again.
    """

    def __init__(self, interval: float) -> None:
        self._interval = interval
        self._mu = threading.Lock()
        self._running = False
        self._cond = threading.Condition()
        self._msg: Optional[_Action] = None
        self._alive = False
        self._thread: Optional[threading.Thread] = None

    def start(self, keephouse: Callable[[], object]) -> None:
        """Start calling keephouse; does nothing when already running."""
        with self._mu:
            if self._running:
                return
            self._running = True
            with self._cond:
                self._alive = True
                self._msg = None
            self._thread = threading.Thread(target=self._run, args=(keephouse,), daemon=True)
            self._thread.start()

    def _run(self, keephouse: Callable[[], object]) -> None:
        try:
            while True:
                interval = self._interval
                with self._cond:
                    arrived = self._cond.wait_for(
                        lambda: self._msg is not None,
                        timeout=interval if interval > 0 else None,
                    )
                    action = self._msg if arrived else None
                    self._msg = None
                    self._cond.notify_all()
                if action is _Action.STOP:
                    return
                if action is _Action.RESET:
                    continue
                keephouse()
        finally:
            with self._cond:
                self._alive = False
                self._msg = None
                self._cond.notify_all()

    def _send(self, action: _Action) -> None:
        with self._cond:
            self._cond.wait_for(lambda: self._msg is None or not self._alive)
            if not self._alive:
                return
            self._msg = action
            self._cond.notify_all()
            self._cond.wait_for(lambda: self._msg is None or not self._alive)

    def set_interval(self, interval: float) -> None:
        """Change the interval and restart the current wait."""
        self._interval = interval
        with self._mu:
            if self._running:
                self._send(_Action.RESET)

    def trigger(self) -> None:
        """Call the function now, then restart the wait."""
        with self._mu:
            if self._running:
                self._send(_Action.TRIGGER)

    def trigger_after(self, delay: float) -> None:
        """Trigger once after delay seconds, without blocking."""
        pending = threading.Timer(delay, self.trigger)
        pending.daemon = True
        pending.start()

    def stop(self) -> None:
        """Stop the timer, waiting for a running call to finish."""
        with self._mu:
            if self._running:
                self._send(_Action.STOP)
                self._running = False

    def interval(self) -> float:
        return self._interval


class RandTicker:
    """Ticks every period seconds, give or take up to variance seconds.

    A tick that nobody has collected is kept; further ticks are dropped until it is.
    """

    def __init__(self, period: float, variance: float) -> None:
        if variance <= 0:
            raise ValueError("variance must be positive")
        self._period = period
        self._variance = variance
        self._cond = threading.Condition()
        self._tick: Optional[datetime] = None
        self._closed = False
        self._done = threading.Event()
        self._thread = threading.Thread(target=self._run, daemon=True)
        self._thread.start()

    def _run(self) -> None:
        rng = random.Random()
        try:
            while True:
                delay = self._period + rng.uniform(-self._variance, self._variance)
                if self._done.wait(max(delay, 0.0)):
                    return
                with self._cond:
                    if self._tick is None:
                        self._tick = datetime.now()
                        self._cond.notify_all()
        finally:
            with self._cond:
                self._closed = True
                self._cond.notify_all()

    def get(self, timeout: Optional[float] = None) -> Optional[datetime]:
        """The next tick's time, or None once stopped and drained.

        Raises TimeoutError when no tick arrives in time.
        """
        with self._cond:
            self._cond.wait_for(lambda: self._tick is not None or self._closed, timeout=timeout)
            if self._tick is not None:
                tick, self._tick = self._tick, None
                return tick
            if self._closed:
                return None
        raise TimeoutError("no tick in time")

    def stop(self) -> None:
        """Stop ticking; waiting ``get`` calls then return None."""
        self._done.set()
        if threading.current_thread() is not self._thread:
            self._thread.join()