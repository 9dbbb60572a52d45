"""Core value types.

Instants and durations are stored as whole seconds plus a non-negative
nanosecond remainder, which keeps arithmetic exact at nanosecond resolution.
"""

from __future__ import annotations

import math
import time
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Union

from timephrase.errors import InvalidInstantError

NANOS_PER_SECOND = 1_000_000_000
NANOS_PER_MICROSECOND = 1_000
NANOS_PER_MILLISECOND = 1_000_000

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class Tense(Enum):
    """Direction of a time difference relative to the reference."""

    PAST = "past"
    FUTURE = "future"


class Unit(Enum):
    """Granularity buckets, ordered from smallest to largest."""

    NANOSECOND = "nanosecond"
    MICROSECOND = "microsecond"
    MILLISECOND = "millisecond"
    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"

    @property
    def is_instant(self) -> bool:
        """True for the sub-second units rendered as a fixed phrase."""
        return self in _INSTANT_UNITS

    @classmethod
    def timed(cls) -> list["Unit"]:
        """Units above the sub-second floor."""
        return [unit for unit in cls if not unit.is_instant]


_INSTANT_UNITS = frozenset({Unit.NANOSECOND, Unit.MICROSECOND, Unit.MILLISECOND})


@dataclass(frozen=True, order=True)
class Duration:
    """Signed span of time.

    ``nanos`` is always in ``[0, 1e9)``, so negative spans with a fractional
    part carry a negative ``seconds`` and a positive ``nanos``
    (-0.001s is ``Duration(-1, 999_000_000)``).
    """

    seconds: int = 0
    nanos: int = 0

    def __post_init__(self) -> None:
        # Carry out-of-range nanos into seconds: Duration(0, -500) is -500ns
        if not 0 <= self.nanos < NANOS_PER_SECOND:
            carry, nanos = divmod(self.nanos, NANOS_PER_SECOND)
            object.__setattr__(self, "seconds", self.seconds + carry)
            object.__setattr__(self, "nanos", nanos)

    @classmethod
    def from_nanos(cls, total: int) -> "Duration":
        seconds, nanos = divmod(total, NANOS_PER_SECOND)
        return cls(seconds, nanos)

    @classmethod
    def from_seconds(cls, seconds: int) -> "Duration":
        return cls(seconds, 0)

    @property
    def total_nanos(self) -> int:
        return self.seconds * NANOS_PER_SECOND + self.nanos

    @property
    def is_negative(self) -> bool:
        return self.seconds < 0

    def abs(self) -> "Duration":
        return Duration.from_nanos(abs(self.total_nanos))

    def whole_seconds(self) -> int:
        """Number of whole seconds elapsed, ignoring direction.

        Truncates toward zero: a negative span with a fractional part is
        shifted by one second before taking the magnitude, so -1.5s gives 1
        rather than 2.
        """
        seconds = self.seconds
        if seconds < 0 and self.nanos > 0:
            seconds += 1
        return abs(seconds)

    def __neg__(self) -> "Duration":
        return Duration.from_nanos(-self.total_nanos)

    def __add__(self, other: "Duration") -> "Duration":
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration.from_nanos(self.total_nanos + other.total_nanos)

    def __sub__(self, other: "Duration") -> "Duration":
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration.from_nanos(self.total_nanos - other.total_nanos)


@dataclass(frozen=True, order=True)
class Instant:
    """Point in time with nanosecond resolution and no timezone."""

    seconds: int
    nanos: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.nanos < NANOS_PER_SECOND:
            raise ValueError(f"nanos must be in [0, {NANOS_PER_SECOND}), got {self.nanos}")

    @classmethod
    def now(cls) -> "Instant":
        """Read the system clock."""
        return cls.from_nanos(time.time_ns())

    @classmethod
    def from_nanos(cls, total: int) -> "Instant":
        seconds, nanos = divmod(total, NANOS_PER_SECOND)
        return cls(seconds, nanos)

    @classmethod
    def from_timestamp(cls, value: float | int) -> "Instant":
        """Create from POSIX seconds."""
        if isinstance(value, int):
            return cls(value, 0)
        if not math.isfinite(value):
            raise InvalidInstantError(value, "timestamp is not finite")
        seconds = math.floor(value)
        nanos = round((value - seconds) * NANOS_PER_SECOND)
        if nanos >= NANOS_PER_SECOND:
            seconds += 1
            nanos -= NANOS_PER_SECOND
        return cls(int(seconds), nanos)

    @classmethod
    def from_datetime(cls, dt: datetime) -> "Instant":
        """Create from a datetime. Naive datetimes are read as UTC."""
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        delta = dt - _EPOCH
        seconds = delta.days * 86400 + delta.seconds
        return cls(seconds, delta.microseconds * NANOS_PER_MICROSECOND)

    @classmethod
    def parse(cls, text: str) -> "Instant":
        """Parse an ISO-8601 timestamp such as ``2019-01-01T00:00:00.000Z``."""
        value = text.strip()
        if value.endswith(("Z", "z")):
            value = value[:-1] + "+00:00"
        try:
            dt = datetime.fromisoformat(value)
        except ValueError as e:
            raise InvalidInstantError(text, str(e)) from e
        return cls.from_datetime(dt)

    @property
    def total_nanos(self) -> int:
        return self.seconds * NANOS_PER_SECOND + self.nanos

    def to_datetime(self) -> datetime:
        """Convert to an aware UTC datetime (sub-microsecond digits are dropped)."""
        return _EPOCH + timedelta(
            seconds=self.seconds, microseconds=self.nanos // NANOS_PER_MICROSECOND
        )

    def isoformat(self) -> str:
        return self.to_datetime().isoformat().replace("+00:00", "Z")

    def __add__(self, other: Duration) -> "Instant":
        if not isinstance(other, Duration):
            return NotImplemented
        return Instant.from_nanos(self.total_nanos + other.total_nanos)

    def __sub__(self, other):
        if isinstance(other, Instant):
            return Duration.from_nanos(self.total_nanos - other.total_nanos)
        if isinstance(other, Duration):
            return Instant.from_nanos(self.total_nanos - other.total_nanos)
        return NotImplemented


@dataclass(frozen=True)
class Classification:
    """Result of bucketing a time difference.

    Attributes:
        tense: PAST when the target precedes the reference.
        unit: Bucket the magnitude falls into.
        amount: Whole units elapsed, never negative.
    """

    tense: Tense
    unit: Unit
    amount: int


InstantLike = Union[Instant, datetime, int, float]


def coerce_instant(value: InstantLike) -> Instant:
    """Convert a supported value to an Instant.

    Args:
        value: Instant, datetime, or POSIX seconds.

    Returns:
        Instant instance.

    Raises:
        InvalidInstantError: If the value has an unsupported type.
    """
    if isinstance(value, Instant):
        return value
    if isinstance(value, datetime):
        return Instant.from_datetime(value)
    if isinstance(value, bool):
        raise InvalidInstantError(value, "booleans are not timestamps")
    if isinstance(value, (int, float)):
        return Instant.from_timestamp(value)
    raise InvalidInstantError(value, f"unsupported type {type(value).__name__}")
