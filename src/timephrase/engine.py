"""Difference and bucketing engine.

Computes the signed difference between a target and a reference instant and
classifies its magnitude into a unit using fixed-length approximations of the
average Gregorian calendar:

    minute  = 60 s
    hour    = 3600 s
    day     = 86400 s
    week    = 604800 s
    month   = 2629800 s   (30.4375 days)
    year    = 31557600 s  (365.25 days)

Each bucket covers ``[threshold of previous unit, threshold of next unit)``,
so a value exactly on a boundary belongs to the larger unit.
"""

from __future__ import annotations

import logging

from timephrase.types import (
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    Classification,
    Duration,
    Instant,
    InstantLike,
    Tense,
    Unit,
    coerce_instant,
)

logger = logging.getLogger(__name__)


SECONDS_PER_UNIT: dict[Unit, int] = {
    Unit.SECOND: 1,
    Unit.MINUTE: 60,
    Unit.HOUR: 3600,
    Unit.DAY: 86400,
    Unit.WEEK: 604800,
    Unit.MONTH: 2629800,
    Unit.YEAR: 31557600,
}

# (upper bound exclusive, unit); the last unit has no upper bound
THRESHOLDS: tuple[tuple[int, Unit], ...] = (
    (SECONDS_PER_UNIT[Unit.MINUTE], Unit.SECOND),
    (SECONDS_PER_UNIT[Unit.HOUR], Unit.MINUTE),
    (SECONDS_PER_UNIT[Unit.DAY], Unit.HOUR),
    (SECONDS_PER_UNIT[Unit.WEEK], Unit.DAY),
    (SECONDS_PER_UNIT[Unit.MONTH], Unit.WEEK),
    (SECONDS_PER_UNIT[Unit.YEAR], Unit.MONTH),
)


def difference(target: InstantLike, reference: InstantLike) -> Duration:
    """Time from ``reference`` to ``target``; positive when target is later."""
    return coerce_instant(target) - coerce_instant(reference)


def bucket(seconds: int) -> tuple[Unit, int]:
    """Classify a whole-second magnitude into a unit.

    Args:
        seconds: Non-negative number of elapsed seconds.

    Returns:
        Tuple of (unit, amount) where amount is truncated, never rounded.
    """
    if seconds < 0:
        raise ValueError(f"seconds must be non-negative, got {seconds}")

    for upper, unit in THRESHOLDS:
        if seconds < upper:
            return unit, seconds // SECONDS_PER_UNIT[unit]
    return Unit.YEAR, seconds // SECONDS_PER_UNIT[Unit.YEAR]


def classify_duration(raw: Duration) -> Classification:
    """Classify an already computed signed difference."""
    tense = Tense.PAST if raw.is_negative else Tense.FUTURE
    magnitude = raw.abs()

    if magnitude.seconds == 0:
        nanos = magnitude.nanos
        if nanos < NANOS_PER_MICROSECOND:
            return Classification(tense, Unit.NANOSECOND, nanos)
        if nanos < NANOS_PER_MILLISECOND:
            return Classification(tense, Unit.MICROSECOND, nanos // NANOS_PER_MICROSECOND)
        return Classification(tense, Unit.MILLISECOND, nanos // NANOS_PER_MILLISECOND)

    unit, amount = bucket(raw.whole_seconds())
    return Classification(tense, unit, amount)


def classify(target: InstantLike, reference: InstantLike) -> Classification:
    """Classify the offset of ``target`` relative to ``reference``.

    Args:
        target: Instant being described.
        reference: Instant the description is relative to.

    Returns:
        Classification with tense, unit and amount.

    Example:
        >>> ref = Instant(1546300800)
        >>> classify(Instant(1546300740), ref)
        Classification(tense=<Tense.PAST: 'past'>, unit=<Unit.MINUTE: 'minute'>, amount=1)
    """
    result = classify_duration(difference(target, reference))
    logger.debug(
        "Classified offset: tense=%s unit=%s amount=%d",
        result.tense.value,
        result.unit.value,
        result.amount,
    )
    return result


__all__ = [
    "SECONDS_PER_UNIT",
    "THRESHOLDS",
    "bucket",
    "classify",
    "classify_duration",
    "difference",
]
