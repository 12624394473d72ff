import random

import pytest

from models.budget import BudgetBreakdown, BudgetCategory, approximate_price, classify_budget


@pytest.mark.parametrize("value", [0, 1, 999.99, 1999.99])
def test_below_2000_is_economico(value):
    assert classify_budget(value) == BudgetCategory.ECONOMICO


@pytest.mark.parametrize(
    "value, expected",
    [
        (2000, BudgetCategory.MODERADO),
        (5000, BudgetCategory.CONFORTAVEL),
        (15000, BudgetCategory.LUXO),
        (50000, BudgetCategory.ULTRA_LUXO),
    ],
)
def test_threshold_belongs_to_higher_tier(value, expected):
    assert classify_budget(value) == expected


def test_just_below_thresholds():
    assert classify_budget(4999.99) == BudgetCategory.MODERADO
    assert classify_budget(14999.99) == BudgetCategory.CONFORTAVEL
    assert classify_budget(49999.99) == BudgetCategory.LUXO


def test_monotonic():
    values = [0, 500, 1999, 2000, 3000, 4999, 5000, 9000, 15000, 30000, 50000, 1e7]
    tiers = [classify_budget(v) for v in values]
    assert all(a <= b for a, b in zip(tiers, tiers[1:]))


def test_negative_budget_is_clamped():
    assert classify_budget(-100) == BudgetCategory.ECONOMICO


def test_category_ordering_and_values():
    assert BudgetCategory.ECONOMICO < BudgetCategory.MODERADO < BudgetCategory.CONFORTAVEL
    assert BudgetCategory.LUXO < BudgetCategory.ULTRA_LUXO
    assert BudgetCategory.ULTRA_LUXO.value == "ultra luxo"


def test_approximate_price_stays_within_jitter():
    rng = random.Random(42)
    for _ in range(200):
        price = approximate_price("medium", rng)
        assert 5500 * 0.8 - 1 <= price <= 5500 * 1.2 + 1


def test_approximate_price_unknown_tier_uses_default():
    rng = random.Random(1)
    price = approximate_price("unknown", rng)
    assert 4000 - 1 <= price <= 6000 + 1


def test_breakdown_splits_price():
    breakdown = BudgetBreakdown.from_price(10000)
    assert breakdown.lodging == 4000
    assert breakdown.food == 3000
    assert breakdown.tours == 2000
    assert breakdown.transport == 1000
    assert breakdown.total == 10000
    assert breakdown.remaining(8000) == -2000
