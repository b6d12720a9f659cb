"""A callable run on its own thread whose outcome can be collected later."""

from __future__ import annotations

import contextlib
import threading
import time
from typing import Any, Callable


class Future:
    """Runs ``fn`` immediately in a background thread."""

    def __init__(self, fn: Callable[[], Any]) -> None:
        self._fn = fn
        self._finished = threading.Event()
        self._result: Any = None
        self._error: BaseException | None = None
        threading.Thread(target=self._run, daemon=True).start()

    def _run(self) -> None:
        try:
            self._result = self._fn()
        except BaseException as exc:  # noqa: BLE001 - kept for the caller
            self._error = exc
        finally:
            self._finished.set()

    def get(self, timeout: float | None = None) -> Any:
        """Wait for the result; re-raise what the callable raised.

        Raises TimeoutError if the callable has not finished in time.
        """
        if not self._finished.wait(timeout):
            raise TimeoutError("future did not finish in time")
        if self._error is not None:
            raise self._error
        return self._result

    def done(self) -> bool:
        return self._finished.is_set()


def wait_all_futures(*futures: Future, timeout: float | None = None) -> None:
    """Wait for every future, ignoring their errors, within one shared timeout."""
    deadline = None if timeout is None else time.monotonic() + timeout
    for future in futures:
        remaining = None if deadline is None else max(0.0, deadline - time.monotonic())
        with contextlib.suppress(Exception):
            future.get(remaining)