"""Command-line interface for timephrase."""

import json
import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from timephrase.cli_modules.errors import error_boundary, parse_instant_arg
from timephrase.config import load_settings, set_settings
from timephrase.formatter import create, resolve_locale
from timephrase.locales import get_supported_locales, locale_name
from timephrase.log import configure_logging
from timephrase.types import Duration, Instant, Tense, Unit

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="timephrase",
    help="Describe instants as human-readable relative time phrases",
    add_completion=False,
)

# Offsets shown by the `table` command, in seconds relative to the reference
SAMPLE_OFFSETS: list[int] = [
    0,
    -1,
    -45,
    -60,
    -3 * 3600,
    -86400,
    -3 * 86400,
    2 * 604800,
    5 * 2629800,
    -22 * 31557600,
]


@app.callback()
@error_boundary
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Configuration file (YAML, JSON or TOML)"),
    ] = None,
) -> None:
    """Describe instants as human-readable relative time phrases."""
    settings = load_settings(config)
    set_settings(settings)
    configure_logging(
        level="DEBUG" if verbose else settings.log_level,
        format=settings.log_format,
    )
    logger.debug("CLI settings: %s", settings.to_dict())


@app.command(name="format")
@error_boundary
def format_cmd(
    target: Annotated[str, typer.Argument(help="Instant to describe (ISO-8601, POSIX seconds or 'now')")],
    reference: Annotated[
        Optional[str],
        typer.Option("--reference", "-r", help="Reference instant (defaults to now)"),
    ] = None,
    locale: Annotated[
        Optional[str],
        typer.Option("--locale", "-l", help="Locale code (e.g. en_us, fr, pt-BR)"),
    ] = None,
) -> None:
    """Print the relative time phrase for TARGET."""
    formatter = create().with_locale(locale).with_reference_time(parse_instant_arg(reference))
    typer.echo(formatter.format(parse_instant_arg(target)))


@app.command(name="classify")
@error_boundary
def classify_cmd(
    target: Annotated[str, typer.Argument(help="Instant to classify")],
    reference: Annotated[
        Optional[str],
        typer.Option("--reference", "-r", help="Reference instant (defaults to now)"),
    ] = None,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Output as JSON"),
    ] = False,
) -> None:
    """Print the tense, unit and amount for TARGET."""
    result = create().with_reference_time(parse_instant_arg(reference)).classify(
        parse_instant_arg(target)
    )
    if as_json:
        typer.echo(
            json.dumps(
                {"tense": result.tense.value, "unit": result.unit.value, "amount": result.amount}
            )
        )
    else:
        typer.echo(f"{result.tense.value} {result.unit.value} {result.amount}")


@app.command(name="locales")
@error_boundary
def locales_cmd() -> None:
    """List supported locales."""
    table = Table(show_header=True, header_style="bold")
    table.add_column("Locale", style="cyan")
    table.add_column("Instant")
    table.add_column("Past")
    table.add_column("Future")

    for code in get_supported_locales():
        fn = resolve_locale(code)
        table.add_row(
            code,
            fn(Tense.PAST, Unit.MILLISECOND, 0),
            fn(Tense.PAST, Unit.HOUR, 2),
            fn(Tense.FUTURE, Unit.DAY, 3),
        )

    Console().print(table)


@app.command(name="table")
@error_boundary
def table_cmd(
    reference: Annotated[
        Optional[str],
        typer.Option("--reference", "-r", help="Reference instant (defaults to now)"),
    ] = None,
    locales: Annotated[
        Optional[list[str]],
        typer.Option("--locale", "-l", help="Locale to include (repeatable, defaults to all)"),
    ] = None,
) -> None:
    """Show sample offsets rendered in each locale."""
    ref = parse_instant_arg(reference) or Instant.now()
    formatters = [
        create().with_reference_time(ref).with_locale(code)
        for code in (locales or get_supported_locales())
    ]

    table = Table(show_header=True, header_style="bold")
    table.add_column("Offset (s)", justify="right")
    for formatter in formatters:
        table.add_column(locale_name(formatter.locale))

    for offset in SAMPLE_OFFSETS:
        target = ref + Duration.from_seconds(offset)
        table.add_row(f"{offset:,}", *(formatter.format(target) for formatter in formatters))

    Console().print(table)


if __name__ == "__main__":
    app()
