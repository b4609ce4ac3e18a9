#!/usr/bin/env python3
"""
Parse CLI - Try Out Import Value Parsing

Shows how a single import value is interpreted with a given date or
currency format, or why it is rejected.
"""

import click

from ..core.currency import CURRENCY_FORMATS, format_monetary
from ..core.dates import DATE_FORMATS
from ..core.errors import ParseError
from ..importer.parsers import parse_date, parse_monetary, parse_reconciled


@click.group()
def parse() -> None:
    """Parse single import values."""
    pass


@parse.command()
@click.argument("value")
@click.option(
    "--date-format",
    type=click.IntRange(0, len(DATE_FORMATS) - 1),
    help="Date format index (default: configured format)",
)
@click.pass_context
def date(ctx: click.Context, value: str, date_format: int | None) -> None:
    """
    Parse a date.

    Examples:
      tximport parse date 2024-01-15
      tximport parse date 15.01.2024 --date-format 1
    """
    if date_format is None:
        date_format = ctx.obj["config"].importer.date_format

    try:
        parsed = parse_date(value, date_format)
    except ParseError as e:
        raise click.ClickException(e.message)

    click.echo(f"{parsed.isoformat()} ({DATE_FORMATS[date_format].name})")


@parse.command()
@click.argument("value")
@click.option(
    "--currency-format",
    type=click.Choice([str(f) for f in CURRENCY_FORMATS]),
    help="0 = locale, 1 = period decimal, 2 = comma decimal (default: configured format)",
)
@click.pass_context
def amount(ctx: click.Context, value: str, currency_format: str | None) -> None:
    """
    Parse a monetary amount.

    Examples:
      tximport parse amount '$1,234.56' --currency-format 1
      tximport parse amount '1.234,56 €' --currency-format 2
    """
    fmt = int(currency_format) if currency_format is not None else ctx.obj["config"].importer.currency_format

    try:
        parsed = parse_monetary(value, fmt)
    except ParseError as e:
        raise click.ClickException(e.message)

    if parsed.is_decimal:
        click.echo(format_monetary(parsed, fmt))
    else:
        click.echo(str(parsed))


@parse.command()
@click.argument("value")
def reconcile(value: str) -> None:
    """
    Parse a reconcile state code (n, c, y, f or v).

    Example:
      tximport parse reconcile y
    """
    try:
        state = parse_reconciled(value)
    except ParseError as e:
        raise click.ClickException(e.message)

    click.echo(state.name.lower().replace("_", " "))
