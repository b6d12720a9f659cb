"""Dotted version comparison by zero-padding each component."""

from __future__ import annotations

_WIDTH = 20


def _format(ver: str) -> str:
    return "".join(part.rjust(_WIDTH, "0") for part in ver.split("."))


class VersionCmp:
    """Compares a fixed version string with others, component by component."""

    def __init__(self, ver: str) -> None:
        self._ver = _format(ver)

    def min_version(self) -> str:
        return _format("0")

    def max_version(self) -> str:
        return _format("9" * _WIDTH)

    def lt(self, ver: str) -> bool:
        return self._ver < _format(ver)

    def lte(self, ver: str) -> bool:
        return self._ver <= _format(ver)

    def gt(self, ver: str) -> bool:
        return self._ver > _format(ver)

    def gte(self, ver: str) -> bool:
        return self._ver >= _format(ver)

    def eq(self, ver: str) -> bool:
        return self._ver == _format(ver)

    def ne(self, ver: str) -> bool:
        return self._ver != _format(ver)

    def format_version(self) -> str:
        return self._ver