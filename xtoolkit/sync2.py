"""Thread-safe value holders, a counting semaphore with timeout and a simple mutex."""

from __future__ import annotations

import threading
from typing import Any, Optional


class _Atomic:
    """A value guarded by a lock."""

    def __init__(self, value: Any) -> None:
        self._lock = threading.Lock()
        self._value = value

    def _coerce(self, value: Any) -> Any:
        return value

    def set(self, value: Any) -> None:
        value = self._coerce(value)
        with self._lock:
            self._value = value

    def get(self) -> Any:
        with self._lock:
            return self._value

    def compare_and_swap(self, old: Any, new: Any) -> bool:
        """Replace the value with new if it equals old; report whether it did."""
        old, new = self._coerce(old), self._coerce(new)
        with self._lock:
            if self._value == old:
                self._value = new
                return True
            return False


class AtomicInt(_Atomic):
    """An integer with atomic add, set, get and compare-and-swap."""

    def __init__(self, value: int = 0) -> None:
        super().__init__(int(value))

    def _coerce(self, value: Any) -> int:
        return int(value)

    def add(self, n: int) -> int:
        """Add n and return the new value."""
        with self._lock:
            self._value += int(n)
            return self._value

    def set(self, n: int) -> None:
        super().set(n)

    def get(self) -> int:
        return super().get()

    def compare_and_swap(self, old: int, new: int) -> bool:
        return super().compare_and_swap(old, new)


class AtomicDuration(_Atomic):
    """A duration in seconds with atomic add, set, get and compare-and-swap."""

    def __init__(self, duration: float = 0.0) -> None:
        super().__init__(float(duration))

    def _coerce(self, value: Any) -> float:
        return float(value)

    def add(self, duration: float) -> float:
        """Add duration seconds and return the new value."""
        with self._lock:
            self._value += float(duration)
            return self._value

    def set(self, duration: float) -> None:
        super().set(duration)

    def get(self) -> float:
        return super().get()

    def compare_and_swap(self, old: float, new: float) -> bool:
        return super().compare_and_swap(old, new)


class AtomicBool(_Atomic):
    """A boolean with atomic set, get and compare-and-swap."""

    def __init__(self, value: bool = False) -> None:
        super().__init__(bool(value))

    def _coerce(self, value: Any) -> bool:
        return bool(value)

    def set(self, value: bool) -> None:
        super().set(value)

    def get(self) -> bool:
        return super().get()

    def compare_and_swap(self, old: bool, new: bool) -> bool:
        return super().compare_and_swap(old, new)


class AtomicString(_Atomic):
    """A string with atomic set, get and compare-and-swap."""

    def __init__(self, value: str = "") -> None:
        super().__init__(str(value))

    def _coerce(self, value: Any) -> str:
        return str(value)

    def set(self, value: str) -> None:
        super().set(value)

    def get(self) -> str:
        return super().get()

    def compare_and_swap(self, old: str, new: str) -> bool:
        return super().compare_and_swap(old, new)


class Semaphore:
    """A counting semaphore; a timeout of zero means acquire waits indefinitely."""

    def __init__(self, count: int, timeout: float = 0.0) -> None:
        if count <= 0:
            raise ValueError("semaphore count must be positive")
        self._capacity = count
        self._available = count
        self._timeout = timeout
        self._cond = threading.Condition()

    def acquire(self) -> bool:
        """Take a slot; return False if the timeout passes first."""
        with self._cond:
            timeout: Optional[float] = None if self._timeout == 0 else self._timeout
            if not self._cond.wait_for(lambda: self._available > 0, timeout=timeout):
                return False
            self._available -= 1
            return True

    def try_acquire(self) -> bool:
        """Take a slot only if one is free right now."""
        with self._cond:
            if self._available > 0:
                self._available -= 1
                return True
            return False

    def release(self) -> None:
        """Give a slot back; raises ValueError when none is taken."""
        with self._cond:
            if self._available >= self._capacity:
                raise ValueError("semaphore released more times than acquired")
            self._available += 1
            self._cond.notify()

    def size(self) -> int:
        """Number of free slots."""
        with self._cond:
            return self._available

    def __enter__(self) -> Semaphore:
        self._cond.acquire()
        self._cond.release()
        if not self.acquire():
            raise TimeoutError("semaphore acquire timed out")
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.release()


class Mutex:
    """A mutex that any thread may unlock and that supports a non-blocking try."""

    def __init__(self) -> None:
        self._lock = threading.Lock()

    def lock(self) -> None:
        self._lock.acquire()

    def unlock(self) -> None:
        """Release the mutex; raises RuntimeError when it is not locked."""
        try:
            self._lock.release()
        except RuntimeError:
            raise RuntimeError("sync2: unlock of unlocked mutex") from None

    def try_lock(self) -> bool:
        """Lock if free right now; report whether it did."""
        return self._lock.acquire(blocking=False)

    def __enter__(self) -> Mutex:
        self.lock()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.unlock()