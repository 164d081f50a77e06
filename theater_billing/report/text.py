"""
Statement rendering.

Turns a StatementResult into plain text or a rich table.
"""

from decimal import Decimal
from typing import Callable

from rich.table import Table

from theater_billing.core.models import StatementResult

CurrencyFormatter = Callable[[int], str]

CENTS_PER_DOLLAR = Decimal(100)


def format_usd(amount_in_cents: int) -> str:
    """Format cents as US dollars, e.g. 173000 -> "$1,730.00"."""
    dollars = Decimal(amount_in_cents) / CENTS_PER_DOLLAR
    sign = "-" if dollars < 0 else ""
    return f"{sign}${abs(dollars):,.2f}"


def render_text(statement: StatementResult, format_currency: CurrencyFormatter = format_usd) -> str:
    """Render the plain-text statement.

    Args:
        statement: Statement to render
        format_currency: Formatter for amounts in cents

    Returns:
        Statement text, one newline-terminated line per row
    """
    lines = [f"Statement for {statement.customer}"]
    for line in statement.lines:
        lines.append(
            f"  {line.play_name}: {format_currency(line.amount_in_cents)} ({line.audience} seats)"
        )
    lines.append(f"Amount owed is {format_currency(statement.total_amount_in_cents)}")
    lines.append(f"You earned {statement.total_credits} credits")
    return "\n".join(lines) + "\n"


def render_table(statement: StatementResult, format_currency: CurrencyFormatter = format_usd) -> Table:
    """Render the statement as a rich table for terminal output."""
    table = Table(title=f"Statement for {statement.customer}")
    table.add_column("Play")
    table.add_column("Seats", justify="right")
    table.add_column("Amount", justify="right")
    table.add_column("Credits", justify="right")

    for line in statement.lines:
        table.add_row(
            line.play_name,
            str(line.audience),
            format_currency(line.amount_in_cents),
            str(line.credits),
        )

    table.add_section()
    table.add_row(
        "[bold]Total[/bold]",
        "",
        f"[bold]{format_currency(statement.total_amount_in_cents)}[/bold]",
        f"[bold]{statement.total_credits}[/bold]",
    )
    return table
