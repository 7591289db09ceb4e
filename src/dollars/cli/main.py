#!/usr/bin/env python3
"""
Main CLI Entry Point for Dollars

Parses, formats and totals dollar amounts from the command line.
"""

import logging
import os

import click

from ..core.config import get_config, reload_config
from ..core.currency import MoneyOverflowError, ParseError
from ..core.money import Money

logger = logging.getLogger(__name__)

# Lets negative amounts like "-5.50" through as arguments instead of options.
AMOUNT_SETTINGS = {"ignore_unknown_options": True}


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
    Dollars - fixed-point US dollar amounts.

    Amounts are written like 5, 5.5, $5.50, -$5.50 or +5.50.
    """
    # Ensure context object exists
    ctx.ensure_object(dict)

    try:
        if config_env:
            os.environ["DOLLARS_ENV"] = config_env
            config = reload_config()
        else:
            config = get_config()
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    # Configure debug logging if requested
    if debug:
        logging.getLogger("dollars").setLevel(logging.DEBUG)

    # Store global options
    ctx.obj["verbose"] = verbose
    ctx.obj["debug"] = debug
    ctx.obj["config"] = config

    if verbose:
        click.echo(f"Environment: {config.environment.value}")

    if debug:
        click.echo("Debug logging enabled")


def _parse_amount(text: str) -> Money:
    try:
        return Money.parse(text)
    except ParseError as e:
        raise click.ClickException(str(e)) from e


@main.command(context_settings=AMOUNT_SETTINGS)
@click.argument("amounts", nargs=-1, required=True)
@click.pass_context
def parse(ctx: click.Context, amounts: tuple[str, ...]) -> None:
    """
    Parse dollar amounts and show their canonical form and total cents.

    Examples:
      dollars parse 5.5
      dollars parse '$12.34' -5
    """
    verbose = ctx.obj.get("verbose", False)
    for text in amounts:
        money = _parse_amount(text)
        logger.debug("Parsed %r as %d cents", text, money.total_cents())
        if verbose:
            click.echo(f"{text} -> {money} ({money.total_cents()} cents)")
        else:
            click.echo(f"{money} ({money.total_cents()} cents)")


@main.command(name="format", context_settings=AMOUNT_SETTINGS)
@click.argument("cents", nargs=-1, required=True, type=int)
def format_command(cents: tuple[int, ...]) -> None:
    """
    Format integer cent counts as dollar strings.

    Examples:
      dollars format 550 -150
    """
    for value in cents:
        try:
            money = Money.from_cents(value)
        except MoneyOverflowError as e:
            raise click.ClickException(str(e)) from e
        click.echo(str(money))


@main.command(name="sum", context_settings=AMOUNT_SETTINGS)
@click.argument("amounts", nargs=-1, required=True)
@click.pass_context
def sum_command(ctx: click.Context, amounts: tuple[str, ...]) -> None:
    """
    Add up dollar amounts.

    Examples:
      dollars sum 12.34 '$5' -0.34
    """
    total = Money.zero()
    for text in amounts:
        money = _parse_amount(text)
        try:
            total = total + money
        except MoneyOverflowError as e:
            raise click.ClickException(f"Total overflows after {text}: {e}") from e
        if ctx.obj.get("verbose", False):
            click.echo(f"  {money:>12}  running total {total}")

    click.echo(str(total))


@main.command()
def version() -> None:
    """Show version information."""
    from dollars import __version__

    click.echo(f"Dollars v{__version__}")


@main.command()
@click.pass_context
def config(ctx: click.Context) -> None:
    """Show current configuration."""
    config_obj = ctx.obj["config"]

    click.echo("Current Configuration:")
    click.echo(f"  Environment: {config_obj.environment.value}")
    click.echo(f"  Debug Mode: {config_obj.debug}")
    click.echo(f"  Log Level: {config_obj.log_level}")


if __name__ == "__main__":
    main()
