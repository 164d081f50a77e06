"""
Statement aggregation.

Prices every performance on an invoice and totals the results. The first
failure aborts the whole statement.
"""

from typing import List

from .errors import PlayNotFound
from .models import Invoice, LineResult, PlayCatalog, StatementResult
from .pricing import DEFAULT_PRICING, PricingConfig, compute_amount, compute_credits


def generate_statement(
    invoice: Invoice,
    catalog: PlayCatalog,
    config: PricingConfig = DEFAULT_PRICING
) -> StatementResult:
    """Build the statement for an invoice.

    Lines follow the invoice's performance order. Totals are exact sums of
    the line values.

    Args:
        invoice: Invoice to bill
        catalog: Play id -> Play lookup
        config: Pricing configuration

    Returns:
        StatementResult with per-performance lines and totals

    Raises:
        PlayNotFound: If a performance references an unknown play id
        UnknownPlayType: If a play's genre is not supported
    """
    lines: List[LineResult] = []
    total_amount = 0
    total_credits = 0

    for performance in invoice.performances:
        play = catalog.get(performance.play_id)
        if play is None:
            raise PlayNotFound(performance.play_id)

        amount = compute_amount(play, performance.audience, config)
        credits = compute_credits(play, performance.audience, config)

        lines.append(LineResult(
            play_name=play.name,
            amount_in_cents=amount,
            audience=performance.audience,
            credits=credits
        ))
        total_amount += amount
        total_credits += credits

    return StatementResult(
        customer=invoice.customer,
        lines=tuple(lines),
        total_amount_in_cents=total_amount,
        total_credits=total_credits
    )
