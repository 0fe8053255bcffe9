"""Unit tests for serving scaling and quantity accumulation."""

import pytest

from littlecook.plan.quantities import (
    Numeric,
    Textual,
    format_number,
    merge,
    scale_quantity,
)
from littlecook.plan.scaling import (
    effective_multiplier,
    effective_servings,
    format_quantity,
    round_for_display,
)

# =============================================================================
# Serving Scaling
# =============================================================================


class TestEffectiveServings:
    """Tests for effective_servings function."""

    def test_people_count_without_minimum(self):
        assert effective_servings(4, None, 2) == 2

    def test_minimum_raises_servings(self):
        assert effective_servings(4, 4, 1) == 4

    def test_minimum_does_not_cap(self):
        assert effective_servings(4, 2, 6) == 6

    def test_never_below_one(self):
        assert effective_servings(4, None, 0) == 1
        assert effective_servings(4, 0, 0) == 1

    def test_negative_counts_are_rejected(self):
        with pytest.raises(ValueError):
            effective_servings(4, None, -1)
        with pytest.raises(ValueError):
            effective_servings(-4, None, 1)


class TestEffectiveMultiplier:
    """Tests for effective_multiplier function."""

    def test_half_recipe(self):
        assert effective_multiplier(4, None, 2) == 0.5

    def test_minimum_servings(self):
        assert effective_multiplier(4, 4, 1) == 1.0

    def test_unset_or_zero_servings_count_as_one(self):
        assert effective_multiplier(None, None, 3) == 3.0
        assert effective_multiplier(0, None, 3) == 3.0

    def test_always_positive(self):
        for servings in (None, 0, 1, 4, 12):
            for people in range(0, 6):
                assert effective_multiplier(servings, None, people) > 0

    def test_monotonic_in_people_count(self):
        values = [effective_multiplier(4, 2, people) for people in range(0, 10)]
        assert values == sorted(values)


class TestRoundForDisplay:
    """Tests for round_for_display and format_quantity."""

    def test_below_one_keeps_two_decimals(self):
        assert round_for_display(0.3333) == 0.33

    def test_below_ten_keeps_one_decimal(self):
        assert round_for_display(2.46) == 2.5

    def test_large_values_are_integers(self):
        assert round_for_display(133.6) == 134
        assert isinstance(round_for_display(133.6), int)

    def test_format_quantity(self):
        assert format_quantity(2.5) == "2.5"
        assert format_quantity(3.0) == "3"
        assert format_quantity(0.125) == "0.12"
        assert format_quantity(250.0) == "250"

    def test_non_finite_values_are_unchanged(self):
        assert round_for_display(float("inf")) == float("inf")
        assert format_quantity(float("inf")) == "inf"


# =============================================================================
# Quantity Accumulation
# =============================================================================


class TestScaleQuantity:
    """Tests for scale_quantity function."""

    def test_number(self):
        assert scale_quantity(200, 0.5) == Numeric(100.0)

    def test_text_with_leading_number(self):
        assert scale_quantity("1,5 kg", 2) == Numeric(3.0)
        assert scale_quantity("1/2", 4) == Numeric(2.0)

    def test_text_without_number_is_kept(self):
        assert scale_quantity("  une pincée ", 3) == Textual("une pincée")

    def test_invalid_types(self):
        with pytest.raises(TypeError):
            scale_quantity(None, 1)
        with pytest.raises(TypeError):
            scale_quantity(True, 1)


class TestMerge:
    """Tests for merge function."""

    def test_numbers_are_summed(self):
        assert merge(Numeric(3.0), Numeric(2.0)) == Numeric(5.0)

    def test_number_then_text(self):
        assert merge(Numeric(4.0), Textual("une pincée")) == Textual("4 + une pincée")

    def test_text_then_number(self):
        assert merge(Textual("un peu"), Numeric(0.5)) == Textual("un peu + 0.5")

    def test_text_then_text(self):
        assert merge(Textual("a"), Textual("b")) == Textual("a + b")

    def test_format_number(self):
        assert format_number(3.0) == "3"
        assert format_number(1 / 3) == "0.3333"
        assert format_number(2.5) == "2.5"
