"""
Data models for statement generation.

Input records (plays, performances, invoices) and the derived statement
result. All of them are immutable once created.
"""

from dataclasses import dataclass
from typing import Dict, Tuple

from .errors import InvalidAudience


@dataclass(frozen=True)
class Play:
    """Reference data for a play, looked up by its identifier."""
    name: str
    type: str  # Genre tag, e.g. "tragedy" or "comedy"


@dataclass(frozen=True)
class Performance:
    """A single performance of a play on an invoice."""
    play_id: str
    audience: int

    def __post_init__(self):
        """Reject negative audiences."""
        if self.audience < 0:
            raise InvalidAudience(self.audience)


@dataclass(frozen=True)
class Invoice:
    """A customer's performances, in the order they are billed."""
    customer: str
    performances: Tuple[Performance, ...]

    def __post_init__(self):
        # Accept any sequence but store a tuple so the invoice stays immutable
        object.__setattr__(self, "performances", tuple(self.performances))


PlayCatalog = Dict[str, Play]


@dataclass(frozen=True)
class LineResult:
    """Priced line for one performance."""
    play_name: str
    amount_in_cents: int
    audience: int
    credits: int


@dataclass(frozen=True)
class StatementResult:
    """Complete statement for an invoice.

    Totals are exact sums of the per-line values.
    """
    customer: str
    lines: Tuple[LineResult, ...]
    total_amount_in_cents: int
    total_credits: int
