"""Exception hierarchy for timephrase.

All errors raised by the library derive from ``TimephraseError`` so callers
can catch them with a single ``except`` clause.
"""

from __future__ import annotations

from typing import Any


class TimephraseError(Exception):
    """Base exception for timephrase errors."""

    pass


class InvalidInstantError(TimephraseError, TypeError):
    """Raised when a value cannot be interpreted as an instant."""

    def __init__(self, value: Any, reason: str | None = None) -> None:
        self.value = value
        message = f"Cannot interpret {value!r} as an instant"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class LocaleError(TimephraseError):
    """Base locale error."""

    pass


class UnknownLocaleError(LocaleError, KeyError):
    """Raised when a locale code is not registered."""

    def __init__(self, code: str, available: list[str] | None = None) -> None:
        self.code = code
        self.available = available or []
        super().__init__(code)

    def __str__(self) -> str:
        message = f"Unknown locale: {self.code!r}"
        if self.available:
            message += f" (available: {', '.join(self.available)})"
        return message


class IncompleteLocaleError(LocaleError):
    """Raised when a locale does not cover every tense and unit.

    Attributes:
        locale: Locale code.
        missing: Keys with no template, as tuples.
    """

    def __init__(self, locale: str, missing: list[tuple[Any, ...]]) -> None:
        self.locale = locale
        self.missing = missing
        shown = ", ".join("/".join(_key_name(part) for part in key) for key in missing[:5])
        more = f" and {len(missing) - 5} more" if len(missing) > 5 else ""
        super().__init__(f"Locale {locale!r} is missing templates for {shown}{more}")


class ConfigError(TimephraseError):
    """Raised when configuration cannot be loaded."""

    pass


def _key_name(part: Any) -> str:
    return getattr(part, "value", str(part))
