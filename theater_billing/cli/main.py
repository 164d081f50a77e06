"""
CLI interface for Theater Billing.

Prints statements for invoice files and shows the active pricing.
"""

import logging
import sys
from dataclasses import fields
from typing import Optional

import typer
import yaml
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from theater_billing.config.loader import CONFIG_ENV_VAR, load_pricing_config
from theater_billing.core.errors import StatementError
from theater_billing.core.pricing import DEFAULT_PRICING, PricingConfig
from theater_billing.core.statement import generate_statement
from theater_billing.data.loader import load_invoices, load_plays
from theater_billing.demo.sample_data import INVOICE, PLAYS
from theater_billing.report.text import format_usd, render_table, render_text

app = typer.Typer()
console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger(__name__)

EXIT_CODE_PASS = 0
EXIT_CODE_FAIL = 1

# Errors reported to the user as a one-line message rather than a traceback
USER_ERRORS = (StatementError, ValueError, FileNotFoundError, yaml.YAMLError)


def _configure_logging(verbose: bool) -> None:
    """Route log records through rich on stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _load_config(config_path: Optional[str]) -> PricingConfig:
    if config_path is None:
        logger.debug("No pricing config given, using defaults")
        return DEFAULT_PRICING
    return load_pricing_config(config_path)


def _print_error(error: Exception) -> None:
    console.print(f"[red]Error:[/] {escape(str(error))}", highlight=False, soft_wrap=True)


def _print_statement(statement, table: bool) -> None:
    if table:
        console.print(render_table(statement))
    else:
        console.print(render_text(statement), markup=False, highlight=False, soft_wrap=True, end="")


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context):
    """Theater Billing CLI."""
    if ctx.invoked_subcommand is None:
        console.print("Theater Billing - Use --help to see available commands")


@app.command()
def statement(
    plays: str = typer.Argument(..., help="Plays file (YAML or JSON)"),
    invoices: str = typer.Argument(..., help="Invoices file (YAML or JSON)"),
    config: Optional[str] = typer.Option(
        None,
        "--config",
        "-c",
        envvar=CONFIG_ENV_VAR,
        help="Pricing configuration file"
    ),
    table: bool = typer.Option(
        False,
        "--table",
        "-t",
        help="Show statements as tables"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging"
    )
):
    """
    Print a statement for every invoice in INVOICES.

    Any unknown play or genre aborts the run before anything is printed.
    """
    _configure_logging(verbose)
    try:
        pricing = _load_config(config)
        catalog = load_plays(plays)
        invoice_list = load_invoices(invoices)

        statements = [generate_statement(invoice, catalog, pricing) for invoice in invoice_list]
    except USER_ERRORS as e:
        _print_error(e)
        sys.exit(EXIT_CODE_FAIL)

    for result in statements:
        _print_statement(result, table)
    sys.exit(EXIT_CODE_PASS)


@app.command()
def rates(
    config: Optional[str] = typer.Option(
        None,
        "--config",
        "-c",
        envvar=CONFIG_ENV_VAR,
        help="Pricing configuration file"
    )
):
    """Show the active pricing configuration."""
    try:
        pricing = _load_config(config)
    except USER_ERRORS as e:
        _print_error(e)
        sys.exit(EXIT_CODE_FAIL)

    _display_rates(pricing)
    sys.exit(EXIT_CODE_PASS)


@app.command()
def demo(
    table: bool = typer.Option(
        False,
        "--table",
        "-t",
        help="Show the statement as a table"
    )
):
    """Print the statement for the built-in sample invoice."""
    _print_statement(generate_statement(INVOICE, PLAYS), table)
    sys.exit(EXIT_CODE_PASS)


def _display_rates(pricing: PricingConfig):
    """Display pricing rates, one row per genre setting."""
    table = Table(title="Pricing")
    table.add_column("Genre")
    table.add_column("Setting")
    table.add_column("Value", justify="right")

    for genre, strategy in sorted(pricing.genres.items()):
        for f in fields(strategy):
            value = getattr(strategy, f.name)
            # Divisors and thresholds are counts, everything else is money
            shown = str(value) if f.name.endswith(("threshold", "divisor")) else format_usd(value)
            table.add_row(genre, f.name, shown)

    table.add_section()
    table.add_row("all", "base_credit_threshold", str(pricing.base_credit_threshold))
    console.print(table)


if __name__ == "__main__":
    app()
