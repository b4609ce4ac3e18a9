#!/usr/bin/env python3
"""
Main CLI Entry Point for the Transaction Importer

Provides the unified command-line interface for the importer tools.
"""

import click

from ..core.config import get_config
from ..importer.prop_types import PropertyType, is_multi_col_prop, is_trans_prop, sanitize_trans_prop


@click.group()
@click.option(
    "--config-env",
    type=click.Choice(["development", "test", "production"]),
    help="Override environment configuration",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, config_env: str | None, verbose: bool, debug: bool) -> None:
    """
    Transaction Importer - CSV Transaction Property Assembly

    Inspect import column types and check how import values will be parsed.
    """
    # Ensure context object exists
    ctx.ensure_object(dict)

    # Set environment if specified
    if config_env:
        import os

        os.environ["TXIMPORT_ENV"] = config_env

    # Configure debug logging if requested
    if debug:
        import logging
        import os

        os.environ["LOG_LEVEL"] = "DEBUG"
        logging.getLogger().setLevel(logging.DEBUG)
        logging.getLogger("tximport").setLevel(logging.DEBUG)

    try:
        config = get_config()
    except ValueError as e:
        raise click.ClickException(str(e))

    # Store global options
    ctx.obj["verbose"] = verbose
    ctx.obj["debug"] = debug
    ctx.obj["config"] = config

    if verbose:
        click.echo(f"Environment: {config.environment.value}")

    if debug:
        click.echo("Debug logging enabled")


@main.command()
@click.pass_context
def version(ctx: click.Context) -> None:
    """Show version information."""
    from tximport import __author__, __version__

    click.echo(f"Transaction Importer v{__version__}")
    click.echo(f"Author: {__author__}")


@main.command()
@click.pass_context
def config(ctx: click.Context) -> None:
    """Show current configuration."""
    config_obj = ctx.obj["config"]

    click.echo("Current Configuration:")
    click.echo(f"  Environment: {config_obj.environment.value}")
    click.echo(f"  Date Format: {config_obj.importer.date_format}")
    click.echo(f"  Currency Format: {config_obj.importer.currency_format}")
    click.echo(f"  Multi-split: {config_obj.importer.multi_split}")
    click.echo(f"  Base Currency: {config_obj.importer.base_currency}")
    click.echo(f"  Debug Mode: {config_obj.debug}")
    click.echo(f"  Log Level: {config_obj.log_level}")


@main.command()
@click.option(
    "--multi-split/--two-split",
    default=None,
    help="Import mode to check types against (default: configured mode)",
)
@click.pass_context
def types(ctx: click.Context, multi_split: bool | None) -> None:
    """
    List the column property types.

    Shows each type's label, whether it applies to the transaction or a
    split, whether several columns may share it and whether it can be used
    in the selected import mode.

    Example:
      tximport types --multi-split
    """
    if multi_split is None:
        multi_split = ctx.obj["config"].importer.multi_split

    mode = "multi-split" if multi_split else "two-split"
    click.echo(f"Column types ({mode} mode):")
    click.echo("=" * 60)

    for prop_type in PropertyType:
        if prop_type == PropertyType.NONE:
            continue
        scope = "transaction" if is_trans_prop(prop_type) else "split"
        flags = []
        if is_multi_col_prop(prop_type):
            flags.append("multi-column")
        if sanitize_trans_prop(prop_type, multi_split) == PropertyType.NONE:
            flags.append("not available")
        suffix = f" [{', '.join(flags)}]" if flags else ""
        click.echo(f"  {prop_type.label:<28} {scope:<12}{suffix}")


# Import parse command group
from .parse import parse  # noqa: E402

main.add_command(parse)


if __name__ == "__main__":
    main()
