"""
Pricing calculations and credit accrual.

Each genre owns its pricing strategy; a PricingConfig maps genre tags to
strategies and carries the shared credit threshold. All amounts are integer
cents.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field, fields
from types import MappingProxyType
from typing import Dict, Mapping, Type

from .errors import InvalidAudience, UnknownPlayType
from .models import Play


class GenrePricing(ABC):
    """Pricing strategy for one genre."""

    @abstractmethod
    def amount(self, audience: int) -> int:
        """Charge in cents for a performance with the given audience."""

    def credit_bonus(self, audience: int) -> int:
        """Extra volume credits on top of the base credits."""
        return 0

    def __post_init__(self):
        """Validate every rate is a non-negative integer."""
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{f.name} must be an integer, got {value!r}")
            if value < 0:
                raise ValueError(f"{f.name} must be >= 0")


@dataclass(frozen=True)
class TragedyPricing(GenrePricing):
    """Flat base amount plus a per-person charge past the threshold."""
    base_amount: int = 40000
    audience_threshold: int = 30
    over_threshold_per_person: int = 1000

    def amount(self, audience: int) -> int:
        result = self.base_amount
        if audience > self.audience_threshold:
            result += self.over_threshold_per_person * (audience - self.audience_threshold)
        return result


@dataclass(frozen=True)
class ComedyPricing(GenrePricing):
    """Base amount, an over-capacity surcharge, and a per-head fee that always applies."""
    base_amount: int = 30000
    audience_threshold: int = 20
    over_threshold_amount: int = 10000
    over_threshold_per_person: int = 500
    per_audience_amount: int = 300
    credit_divisor: int = 5  # One extra credit for every N attendees

    def __post_init__(self):
        super().__post_init__()
        if self.credit_divisor <= 0:
            raise ValueError("credit_divisor must be > 0")

    def amount(self, audience: int) -> int:
        result = self.base_amount
        if audience > self.audience_threshold:
            result += (
                self.over_threshold_amount
                + self.over_threshold_per_person * (audience - self.audience_threshold)
            )
        result += self.per_audience_amount * audience
        return result

    def credit_bonus(self, audience: int) -> int:
        return audience // self.credit_divisor


# Genre tag -> strategy class, used when building a config from a file
GENRE_STRATEGIES: Dict[str, Type[GenrePricing]] = {
    "tragedy": TragedyPricing,
    "comedy": ComedyPricing,
}


def default_genres() -> Dict[str, GenrePricing]:
    return {genre: strategy() for genre, strategy in GENRE_STRATEGIES.items()}


@dataclass(frozen=True)
class PricingConfig:
    """Pricing strategies per genre plus the credit threshold shared by all genres."""
    genres: Mapping[str, GenrePricing] = field(default_factory=default_genres)
    base_credit_threshold: int = 30

    def __post_init__(self):
        """Freeze the genre mapping and validate the credit threshold."""
        object.__setattr__(self, "genres", MappingProxyType(dict(self.genres)))
        if isinstance(self.base_credit_threshold, bool) or not isinstance(self.base_credit_threshold, int):
            raise ValueError("base_credit_threshold must be an integer")
        if self.base_credit_threshold < 0:
            raise ValueError("base_credit_threshold must be >= 0")

    def get_pricing(self, play_type: str) -> GenrePricing:
        """Get the pricing strategy for a genre.

        Args:
            play_type: Genre tag of the play

        Returns:
            GenrePricing registered for the genre

        Raises:
            UnknownPlayType: If no strategy is registered for the genre
        """
        if play_type not in self.genres:
            raise UnknownPlayType(play_type)
        return self.genres[play_type]


DEFAULT_PRICING = PricingConfig()


def _check_audience(audience: int) -> None:
    if audience < 0:
        raise InvalidAudience(audience)


def compute_amount(play: Play, audience: int, config: PricingConfig = DEFAULT_PRICING) -> int:
    """Calculate the charge for one performance.

    Args:
        play: The play being performed
        audience: Number of attendees
        config: Pricing configuration

    Returns:
        Amount in cents

    Raises:
        InvalidAudience: If the audience is negative
        UnknownPlayType: If the play's genre is not supported
    """
    _check_audience(audience)
    return config.get_pricing(play.type).amount(audience)


def compute_credits(play: Play, audience: int, config: PricingConfig = DEFAULT_PRICING) -> int:
    """Calculate volume credits earned by one performance.

    Raises:
        InvalidAudience: If the audience is negative
        UnknownPlayType: If the play's genre is not supported
    """
    _check_audience(audience)
    pricing = config.get_pricing(play.type)
    return max(audience - config.base_credit_threshold, 0) + pricing.credit_bonus(audience)
