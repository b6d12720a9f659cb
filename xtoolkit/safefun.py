"""Rollback sequences and running callables without letting them raise."""

from __future__ import annotations

import traceback
from typing import Any, Callable, Optional


class RollbackError(Exception):
    """Raised when one or more rollback steps fail; holds every failure."""

    def __init__(self, errors: list[Exception]) -> None:
        super().__init__(": ".join(str(error) for error in errors))
        self.errors = errors


class PanicError(RuntimeError):
    """An exception captured by ``fun_wrapper``, with the frames it passed."""


class RollbackOp:
    """A list of undo steps, run newest first."""

    def __init__(self) -> None:
        self._ops: list[Callable[[], Any]] = []

    def add(self, fn: Callable[[], Any]) -> None:
        self._ops.append(fn)

    def rollback(self) -> None:
        """Run every step in reverse order; raise RollbackError if any failed."""
        errors: list[Exception] = []
        for op in reversed(self._ops):
            try:
                op()
            except Exception as exc:  # noqa: BLE001 - every step must run
                errors.append(exc)
        if errors:
            raise RollbackError(errors)


def dump_stack(exc: Any) -> Optional[PanicError]:
    """Wrap a value in a PanicError whose message lists the frames it came through."""
    if exc is None:
        return None
    if isinstance(exc, BaseException) and exc.__traceback__ is not None:
        frames = traceback.extract_tb(exc.__traceback__)
    else:
        frames = traceback.extract_stack()[:-1]
    message = str(exc) + "".join(f"\t {frame.filename}:{frame.lineno}" for frame in frames)
    error = PanicError(message)
    if isinstance(exc, BaseException):
        error.__cause__ = exc
    return error


def fun_wrapper(fn: Callable[..., Any], *args: Any) -> Optional[PanicError]:
    """Call fn(*args); return the error it raised, wrapped, or None."""
    try:
        fn(*args)
    except Exception as exc:  # noqa: BLE001 - turned into a return value
        return dump_stack(exc)
    return None