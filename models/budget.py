# models/budget.py
from __future__ import annotations
import random
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from utils.money import clamp_non_negative


class BudgetCategory(str, Enum):
    ECONOMICO = "econômico"
    MODERADO = "moderado"
    CONFORTAVEL = "confortável"
    LUXO = "luxo"
    ULTRA_LUXO = "ultra luxo"

    @property
    def rank(self) -> int:
        return list(BudgetCategory).index(self)

    def __lt__(self, other):
        if not isinstance(other, BudgetCategory):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other):
        if not isinstance(other, BudgetCategory):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other):
        if not isinstance(other, BudgetCategory):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other):
        if not isinstance(other, BudgetCategory):
            return NotImplemented
        return self.rank >= other.rank


# Lower bounds, inclusive. Checked from the top down.
BUDGET_THRESHOLDS = (
    (50000.0, BudgetCategory.ULTRA_LUXO),
    (15000.0, BudgetCategory.LUXO),
    (5000.0, BudgetCategory.CONFORTAVEL),
    (2000.0, BudgetCategory.MODERADO),
)

COST_BASE_PRICE = {
    "low": 2500,
    "medium": 5500,
    "high": 12000,
    "very high": 25000,
}
DEFAULT_BASE_PRICE = 5000
PRICE_JITTER = 0.2


def classify_budget(value: float) -> BudgetCategory:
    """
    Maps a per-person budget to its tier.
    Negative values are clamped to zero, so they land in ECONOMICO.
    """
    amount = clamp_non_negative(value)
    for lower_bound, category in BUDGET_THRESHOLDS:
        if amount >= lower_bound:
            return category
    return BudgetCategory.ECONOMICO


def approximate_price(average_cost: str, rng: Optional[random.Random] = None) -> int:
    """
    Display-only price for a cost tier with up to ±20% variation.
    Never feed this back into matching.
    """
    base = COST_BASE_PRICE.get(average_cost, DEFAULT_BASE_PRICE)
    rng = rng or random.Random()
    variation = rng.uniform(-PRICE_JITTER, PRICE_JITTER)
    return int(round(base * (1 + variation)))


@dataclass
class BudgetBreakdown:
    lodging: float = 0.0
    food: float = 0.0
    tours: float = 0.0
    transport: float = 0.0

    @classmethod
    def from_price(cls, price: float) -> "BudgetBreakdown":
        return cls(
            lodging=round(price * 0.4),
            food=round(price * 0.3),
            tours=round(price * 0.2),
            transport=round(price * 0.1),
        )

    @property
    def total(self) -> float:
        return float(self.lodging + self.food + self.tours + self.transport)

    def remaining(self, budget: float) -> float:
        return float(budget - self.total)
