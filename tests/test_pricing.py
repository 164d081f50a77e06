"""
Unit tests for pricing and credit calculations.

Tests genre formulas, threshold boundaries, credits and error handling.
"""

from dataclasses import FrozenInstanceError

import pytest

from theater_billing.core.errors import InvalidAudience, UnknownPlayType
from theater_billing.core.models import Play
from theater_billing.core.pricing import (
    DEFAULT_PRICING,
    ComedyPricing,
    GenrePricing,
    PricingConfig,
    TragedyPricing,
    compute_amount,
    compute_credits,
)

HAMLET = Play(name="Hamlet", type="tragedy")
AS_LIKE = Play(name="As You Like It", type="comedy")
OPERA = Play(name="Carmen", type="opera")


class TestTragedyPricing:
    """Test tragedy amounts."""

    def test_at_threshold_charges_base_only(self):
        """Verify no overage at exactly the threshold."""
        assert compute_amount(HAMLET, 30) == 40000

    def test_below_threshold_charges_base_only(self):
        """Verify small audiences pay the base amount."""
        assert compute_amount(HAMLET, 0) == 40000
        assert compute_amount(HAMLET, 10) == 40000

    def test_overage_past_threshold(self):
        """Verify per-person overage above the threshold."""
        # 40000 + 1000 * (55 - 30)
        assert compute_amount(HAMLET, 55) == 65000

    def test_one_past_threshold(self):
        """Verify the first seat over the threshold is charged."""
        assert compute_amount(HAMLET, 31) == 41000

    def test_no_credit_bonus(self):
        """Verify tragedies earn no bonus credits."""
        assert TragedyPricing().credit_bonus(100) == 0


class TestComedyPricing:
    """Test comedy amounts."""

    def test_per_head_fee_below_threshold(self):
        """Verify the per-head fee applies even below the threshold."""
        # 30000 + 300 * 15
        assert compute_amount(AS_LIKE, 15) == 34500

    def test_over_threshold(self):
        """Verify surcharge, overage and per-head fee above the threshold."""
        # 30000 + 10000 + 500 * 5 + 300 * 25
        assert compute_amount(AS_LIKE, 25) == 50000

    def test_at_threshold_no_surcharge(self):
        """Verify no surcharge at exactly the threshold."""
        assert compute_amount(AS_LIKE, 20) == 30000 + 300 * 20

    def test_zero_audience(self):
        """Verify an empty house pays the base amount."""
        assert compute_amount(AS_LIKE, 0) == 30000

    def test_reference_performance(self):
        """Verify the As You Like It line of the reference invoice."""
        assert compute_amount(AS_LIKE, 35) == 58000


class TestCredits:
    """Test volume credit accrual."""

    def test_comedy_below_threshold_gets_bonus_only(self):
        """Verify comedy bonus credits with no base credits."""
        assert compute_credits(AS_LIKE, 25) == 5

    def test_comedy_above_threshold(self):
        """Verify base credits plus comedy bonus."""
        # (35 - 30) + 35 // 5
        assert compute_credits(AS_LIKE, 35) == 12

    def test_comedy_bonus_truncates(self):
        """Verify the comedy bonus uses integer division."""
        assert compute_credits(AS_LIKE, 9) == 1

    def test_tragedy_base_credits(self):
        """Verify tragedies earn only base credits."""
        assert compute_credits(HAMLET, 55) == 25
        assert compute_credits(HAMLET, 30) == 0
        assert compute_credits(HAMLET, 0) == 0


class TestNegativeAudience:
    """Test audience validation when pricing directly."""

    def test_amount_rejects_negative_audience(self):
        """Verify a negative comedy audience can't discount the charge."""
        with pytest.raises(InvalidAudience) as exc_info:
            compute_amount(AS_LIKE, -5)
        assert exc_info.value.audience == -5

    def test_credits_reject_negative_audience(self):
        """Verify negative audiences can't produce negative credits."""
        with pytest.raises(InvalidAudience):
            compute_credits(AS_LIKE, -3)

    def test_tragedy_rejects_negative_audience(self):
        """Verify the check applies to every genre."""
        with pytest.raises(InvalidAudience):
            compute_amount(HAMLET, -1)


class TestUnknownGenre:
    """Test genres without a pricing strategy."""

    def test_amount_raises(self):
        """Verify unknown genre fails amount calculation."""
        with pytest.raises(UnknownPlayType, match="unknown type: opera") as exc_info:
            compute_amount(OPERA, 10)
        assert exc_info.value.play_type == "opera"

    def test_credits_raises(self):
        """Verify unknown genre fails credit calculation as well."""
        with pytest.raises(UnknownPlayType):
            compute_credits(OPERA, 10)


class TestPricingConfig:
    """Test configurable rates and genre registration."""

    def test_defaults_register_known_genres(self):
        """Verify default config prices tragedy and comedy."""
        assert set(DEFAULT_PRICING.genres) == {"tragedy", "comedy"}
        assert DEFAULT_PRICING.base_credit_threshold == 30

    def test_custom_rates(self):
        """Verify rates come from the supplied config."""
        config = PricingConfig(
            genres={"tragedy": TragedyPricing(base_amount=100, audience_threshold=2, over_threshold_per_person=10)},
            base_credit_threshold=1
        )
        assert compute_amount(HAMLET, 5, config) == 130
        assert compute_credits(HAMLET, 5, config) == 4

    def test_genre_missing_from_config(self):
        """Verify a genre absent from a custom config is unknown."""
        config = PricingConfig(genres={"tragedy": TragedyPricing()})
        with pytest.raises(UnknownPlayType):
            compute_amount(AS_LIKE, 10, config)

    def test_new_genre_is_local_extension(self):
        """Verify adding a genre needs only a new strategy."""
        class FlatPricing(GenrePricing):
            def amount(self, audience: int) -> int:
                return 1234

        config = PricingConfig(genres={**DEFAULT_PRICING.genres, "opera": FlatPricing()})
        assert compute_amount(OPERA, 500, config) == 1234
        assert compute_credits(OPERA, 40, config) == 10
        # Existing genres unchanged
        assert compute_amount(HAMLET, 55, config) == 65000

    def test_negative_rate_rejected(self):
        """Verify negative rates fail validation."""
        with pytest.raises(ValueError, match="base_amount must be >= 0"):
            TragedyPricing(base_amount=-1)

    def test_non_integer_rate_rejected(self):
        """Verify fractional rates fail validation."""
        with pytest.raises(ValueError, match="must be an integer"):
            ComedyPricing(per_audience_amount=2.5)

    def test_zero_credit_divisor_rejected(self):
        """Verify the comedy credit divisor must be positive."""
        with pytest.raises(ValueError, match="credit_divisor must be > 0"):
            ComedyPricing(credit_divisor=0)

    def test_negative_credit_threshold_rejected(self):
        """Verify negative credit threshold fails validation."""
        with pytest.raises(ValueError, match="base_credit_threshold must be >= 0"):
            PricingConfig(base_credit_threshold=-5)

    def test_default_genres_are_read_only(self):
        """Verify the shared default config can't be changed at runtime."""
        with pytest.raises(TypeError):
            DEFAULT_PRICING.genres["tragedy"] = TragedyPricing(base_amount=1)
        assert compute_amount(HAMLET, 55) == 65000

    def test_config_copies_genre_mapping(self):
        """Verify later edits to the source dict don't leak into a config."""
        genres = {"tragedy": TragedyPricing()}
        config = PricingConfig(genres=genres)
        genres["comedy"] = ComedyPricing()

        with pytest.raises(UnknownPlayType):
            compute_amount(AS_LIKE, 10, config)

    def test_strategies_are_immutable(self):
        """Verify rates can't be changed after construction."""
        with pytest.raises(FrozenInstanceError):
            TragedyPricing().base_amount = 1

    def test_amount_is_deterministic_and_non_negative(self):
        """Verify repeated calls agree and never go negative."""
        for audience in range(0, 80):
            for play in (HAMLET, AS_LIKE):
                first = compute_amount(play, audience)
                assert first == compute_amount(play, audience)
                assert first >= 0
