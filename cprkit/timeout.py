"""Request timeout expressed in milliseconds."""

from __future__ import annotations

from datetime import timedelta

_LONG_MAX = 2**63 - 1
_LONG_MIN = -(2**63)


class Timeout:
    """A timeout given as whole milliseconds or as a ``timedelta``."""

    __slots__ = ("ms",)

    def __init__(self, duration: int | timedelta) -> None:
        if isinstance(duration, timedelta):
            self.ms = duration // timedelta(milliseconds=1)
        else:
            self.ms = int(duration)

    def __repr__(self) -> str:
        return f"Timeout({self.ms})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Timeout):
            return NotImplemented
        return self.ms == other.ms

    def __hash__(self) -> int:
        return hash(self.ms)

    def milliseconds(self) -> int:
        """Return the timeout in milliseconds, checked against a 64-bit range."""
        if self.ms > _LONG_MAX:
            raise OverflowError(f"Timeout: timeout value overflow: {self.ms} ms.")
        if self.ms < _LONG_MIN:
            raise OverflowError(f"Timeout: timeout value underflow: {self.ms} ms.")
        return self.ms