"""Relative time formatting entry points.

Two equivalent styles are supported:

    >>> format_relative(target, reference)                # functional
    '5 minutes ago'

    >>> fmt = create().with_locale("fr").with_reference_time(reference)
    >>> fmt.format(target)                                # builder
    'il y a 5 minutes'

``Formatter`` is immutable; every ``with_*`` call returns a new instance, so a
configured formatter can be shared between threads. When no reference time is
set, the clock is read on every ``format`` call rather than when the formatter
is built.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Callable, Union

from timephrase.config import get_settings
from timephrase.engine import classify
from timephrase.locales import LocaleFn, get_locale, locale_name
from timephrase.types import Classification, Instant, InstantLike, coerce_instant

LocaleSpec = Union[LocaleFn, str]


def resolve_locale(locale: LocaleSpec | None) -> LocaleFn:
    """Turn a locale code, formatter or ``None`` into a formatter.

    ``None`` resolves to the configured default locale.
    """
    if locale is None:
        return get_locale(get_settings().locale)
    if isinstance(locale, str):
        return get_locale(locale)
    if callable(locale):
        return locale
    raise TypeError(f"locale must be a code or a callable, got {type(locale).__name__}")


@dataclass(frozen=True)
class Formatter:
    """Immutable relative time formatter.

    Attributes:
        reference: Fixed reference instant, or None for "now" at call time.
        locale: Locale formatter, or None for the configured default.
        clock: Source of the current instant.
    """

    reference: Instant | None = None
    locale: LocaleFn | None = None
    clock: Callable[[], Instant] = field(default=Instant.now, repr=False, compare=False)

    def with_reference_time(self, reference: InstantLike | None) -> "Formatter":
        """Return a copy using a fixed reference (None restores "now")."""
        instant = None if reference is None else coerce_instant(reference)
        return replace(self, reference=instant)

    def with_locale(self, locale: LocaleSpec | None) -> "Formatter":
        """Return a copy using another locale (code or formatter)."""
        return replace(self, locale=None if locale is None else resolve_locale(locale))

    def with_clock(self, clock: Callable[[], Instant]) -> "Formatter":
        """Return a copy reading the current time from ``clock``."""
        return replace(self, clock=clock)

    def reference_instant(self) -> Instant:
        """Reference in effect for a call made now."""
        return self.reference if self.reference is not None else self.clock()

    def classify(self, target: InstantLike) -> Classification:
        """Classify ``target`` against the reference without rendering it."""
        return classify(target, self.reference_instant())

    def format(self, target: InstantLike) -> str:
        """Describe ``target`` relative to the reference."""
        result = self.classify(target)
        return resolve_locale(self.locale)(result.tense, result.unit, result.amount)

    @property
    def locale_code(self) -> str:
        return locale_name(resolve_locale(self.locale))


def create() -> Formatter:
    """Create a formatter with the default locale and a call-time reference."""
    return Formatter()


def with_reference_time(formatter: Formatter, reference: InstantLike | None) -> Formatter:
    return formatter.with_reference_time(reference)


def with_locale(formatter: Formatter, locale: LocaleSpec | None) -> Formatter:
    return formatter.with_locale(locale)


def format(formatter: Formatter, target: InstantLike) -> str:
    return formatter.format(target)


def format_relative(
    target: InstantLike,
    reference: InstantLike | None = None,
    locale: LocaleSpec | None = None,
) -> str:
    """Describe ``target`` relative to ``reference``.

    Args:
        target: Instant to describe.
        reference: Instant to compare against (defaults to now).
        locale: Locale code or formatter (defaults to the configured locale,
            ``en_us`` unless overridden).

    Returns:
        Phrase such as "5 minutes ago" or "in 2 hours".

    Example:
        >>> ref = datetime(2019, 1, 1)
        >>> format_relative(ref - timedelta(minutes=5), ref)
        '5 minutes ago'
        >>> format_relative(ref + timedelta(hours=2), ref, locale="de")
        'in 2 Stunden'
    """
    reference_instant = Instant.now() if reference is None else coerce_instant(reference)
    result = classify(target, reference_instant)
    return resolve_locale(locale)(result.tense, result.unit, result.amount)
