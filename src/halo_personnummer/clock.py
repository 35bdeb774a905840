"""
Clock providers.

Everything that depends on "now" (century inference, the +/- separator and
age) asks a clock instead of reading the system time directly.
"""

from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Protocol, Union, runtime_checkable


@runtime_checkable
class Clock(Protocol):
    """Anything with a ``now()`` method returning a datetime."""

    def now(self) -> datetime: ...


class SystemClock:
    """Real local wall-clock time."""

    def now(self) -> datetime:
        return datetime.now()

    def __repr__(self) -> str:
        return "SystemClock()"


@dataclass(frozen=True)
class FixedClock:
    """Clock frozen at a given instant. A plain date means midnight."""

    instant: Union[date, datetime]

    def now(self) -> datetime:
        return as_datetime(self.instant)


def as_datetime(value: Union[date, datetime]) -> datetime:
    """Promote a date to a datetime at midnight; datetimes pass through."""
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time())
    raise TypeError(f"Expected date or datetime, got {type(value).__name__}")
