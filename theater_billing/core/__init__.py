"""
Core modules for Theater Billing.

This package contains the pricing rules, credit accrual and statement
aggregation. Nothing here performs I/O.
"""

from .errors import InvalidAudience, PlayNotFound, StatementError, UnknownPlayType
from .models import Invoice, LineResult, Performance, Play, StatementResult
from .pricing import DEFAULT_PRICING, PricingConfig, compute_amount, compute_credits
from .statement import generate_statement

__all__ = [
    "DEFAULT_PRICING",
    "InvalidAudience",
    "Invoice",
    "LineResult",
    "Performance",
    "Play",
    "PlayNotFound",
    "PricingConfig",
    "StatementError",
    "StatementResult",
    "UnknownPlayType",
    "compute_amount",
    "compute_credits",
    "generate_statement",
]
