# models/destination.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from utils.money import safe_div

# Ordered cheapest first.
COST_TIERS: Tuple[str, ...] = ("low", "medium", "high", "very high")

RATING_DIMENSIONS: Tuple[str, ...] = ("culture", "nature", "food", "adventure", "relaxation")


@dataclass(frozen=True)
class Ratings:
    culture: float
    nature: float
    food: float
    adventure: float
    relaxation: float

    def __post_init__(self):
        for dim in RATING_DIMENSIONS:
            value = getattr(self, dim)
            if not 0 <= value <= 10:
                raise ValueError(f"rating '{dim}' must be within [0, 10], got {value}")

    def get(self, dimension: str) -> float:
        if dimension not in RATING_DIMENSIONS:
            raise KeyError(dimension)
        return float(getattr(self, dimension))

    def as_dict(self) -> Dict[str, float]:
        return {dim: self.get(dim) for dim in RATING_DIMENSIONS}

    @property
    def average(self) -> float:
        values = self.as_dict().values()
        return safe_div(sum(values), len(values))


@dataclass(frozen=True)
class Destination:
    id: str
    name: str
    country: str
    description: str
    tags: Tuple[str, ...]
    ratings: Ratings
    average_cost: str
    best_time_to_visit: Tuple[str, ...] = ()
    image_url: str = ""

    def __post_init__(self):
        if self.average_cost not in COST_TIERS:
            raise ValueError(f"average_cost must be one of {COST_TIERS}, got {self.average_cost!r}")
        # tuples keep the record hashable and read-only
        object.__setattr__(self, "tags", tuple(t.lower() for t in self.tags))
        object.__setattr__(self, "best_time_to_visit", tuple(self.best_time_to_visit))


@dataclass(frozen=True)
class ScoredDestination:
    """A catalog destination annotated with the score of one matching pass."""

    destination: Destination
    # None when the destination was picked without a matching pass
    match_score: Optional[float] = None

    @property
    def id(self) -> str:
        return self.destination.id

    @property
    def name(self) -> str:
        return self.destination.name
