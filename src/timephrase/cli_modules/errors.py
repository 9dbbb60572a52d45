"""CLI error handling utilities.

This module maps library exceptions onto exit codes and consistent
error output for CLI commands.
"""

from __future__ import annotations

import functools
import logging
from enum import Enum
from typing import Any, Callable, TypeVar

import typer

from timephrase.errors import (
    ConfigError,
    InvalidInstantError,
    LocaleError,
    UnknownLocaleError,
)
from timephrase.types import Instant

logger = logging.getLogger(__name__)


# =============================================================================
# Error Codes
# =============================================================================


class ErrorCode(Enum):
    """Standard CLI error codes."""

    GENERAL_ERROR = 1

    # Input errors (10-19)
    INVALID_TIMESTAMP = 10

    # Locale errors (20-29)
    UNKNOWN_LOCALE = 20
    INCOMPLETE_LOCALE = 21

    # Configuration errors (30-39)
    CONFIG_INVALID = 30


# =============================================================================
# Exception Classes
# =============================================================================


class CLIError(Exception):
    """Base exception for CLI errors.

    Attributes:
        message: Error message
        code: Error code
        hint: Helpful hint for resolution
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.GENERAL_ERROR,
        hint: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.hint = hint

    def __str__(self) -> str:
        parts = [self.message]
        if self.hint:
            parts.append(f"Hint: {self.hint}")
        return "\n".join(parts)


class InvalidTimestampError(CLIError):
    """Error when a timestamp argument cannot be parsed."""

    def __init__(self, value: str) -> None:
        super().__init__(
            message=f"Invalid timestamp: {value}",
            code=ErrorCode.INVALID_TIMESTAMP,
            hint="Use ISO-8601 (2019-01-01T00:00:00Z), POSIX seconds, or 'now'.",
        )
        self.value = value


def _from_library_error(error: Exception) -> CLIError:
    if isinstance(error, UnknownLocaleError):
        return CLIError(
            str(error),
            code=ErrorCode.UNKNOWN_LOCALE,
            hint="Run 'timephrase locales' to list supported locales.",
        )
    if isinstance(error, LocaleError):
        return CLIError(str(error), code=ErrorCode.INCOMPLETE_LOCALE)
    if isinstance(error, ConfigError):
        return CLIError(
            str(error),
            code=ErrorCode.CONFIG_INVALID,
            hint="Check the configuration file and TIMEPHRASE_* variables.",
        )
    if isinstance(error, InvalidInstantError):
        return CLIError(str(error), code=ErrorCode.INVALID_TIMESTAMP)
    return CLIError(str(error))


# =============================================================================
# Decorator
# =============================================================================


F = TypeVar("F", bound=Callable[..., Any])


def error_boundary(func: F) -> F:
    """Error boundary decorator.

    Prints library and CLI errors in a consistent format and exits with the
    matching error code. Unexpected errors are logged with their traceback.
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except typer.Exit:
            raise
        except (CLIError, LocaleError, ConfigError, InvalidInstantError) as e:
            error = e if isinstance(e, CLIError) else _from_library_error(e)
            typer.echo(typer.style(f"Error: {error.message}", fg="red"), err=True)
            if error.hint:
                typer.echo(typer.style(f"Hint: {error.hint}", fg="yellow"), err=True)
            raise typer.Exit(error.code.value)
        except Exception as e:
            logger.exception("Unexpected error")
            typer.echo(typer.style(f"Error: {e}", fg="red"), err=True)
            raise typer.Exit(ErrorCode.GENERAL_ERROR.value)

    return wrapper  # type: ignore


# =============================================================================
# Validation Helpers
# =============================================================================


def parse_instant_arg(value: str | None) -> Instant | None:
    """Parse a timestamp argument.

    Args:
        value: ISO-8601 text, POSIX seconds, "now", or None.

    Returns:
        Parsed instant, or None when no value was given.

    Raises:
        InvalidTimestampError: If the value cannot be parsed.
    """
    if value is None:
        return None
    text = value.strip()
    if text.lower() == "now":
        return Instant.now()
    try:
        return Instant.from_timestamp(float(text)) if _is_number(text) else Instant.parse(text)
    except InvalidInstantError as e:
        raise InvalidTimestampError(value) from e


def _is_number(text: str) -> bool:
    try:
        float(text)
    except ValueError:
        return False
    return True
