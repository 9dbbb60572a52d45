"""Support modules for the timephrase command-line interface."""

from timephrase.cli_modules.errors import (
    CLIError,
    ErrorCode,
    InvalidTimestampError,
    error_boundary,
    parse_instant_arg,
)

__all__ = [
    "CLIError",
    "ErrorCode",
    "InvalidTimestampError",
    "error_boundary",
    "parse_instant_arg",
]
