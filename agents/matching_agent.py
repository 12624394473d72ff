# agents/matching_agent.py
from __future__ import annotations

import random
from typing import Dict, FrozenSet, List, Optional, Sequence

from data.destinations import all_destinations
from models.destination import Destination, ScoredDestination
from models.preferences import UserPreferences

INTEREST_POINTS = 2.0
ACTIVITY_RATING_THRESHOLD = 7.0
ACTIVITY_WEIGHT = 3.0
STYLE_RATING_THRESHOLD = 8.0
STYLE_BONUS = 3.0

BUDGET_ALLOWED_COSTS: Dict[str, FrozenSet[str]] = {
    "econômico": frozenset({"low"}),
    "moderado": frozenset({"low", "medium"}),
    "luxo": frozenset({"medium", "high", "very high"}),
}

ACTIVITY_DIMENSIONS: Dict[str, str] = {
    "explorar cultura local": "culture",
    "aventuras ao ar livre": "adventure",
    "relaxar em paisagens naturais": "relaxation",
    "experimentar gastronomia": "food",
    "apreciar a natureza": "nature",
}

STYLE_DIMENSIONS: Dict[str, str] = {
    "aventureiro": "adventure",
    "relaxado": "relaxation",
    "cultural": "culture",
}

# Lower bounds for the card badge, checked in order.
MATCH_LABELS = (
    (10.0, "Combinação perfeita"),
    (6.0, "Ótima escolha"),
    (3.0, "Boa opção"),
)
LOW_MATCH_LABEL = "Compatibilidade baixa"


def filter_by_budget(budget: str, catalog: Sequence[Destination]) -> List[Destination]:
    """
    Drops destinations whose cost tier doesn't fit the budget label.
    Labels outside BUDGET_ALLOWED_COSTS leave the catalog untouched.
    """
    allowed = BUDGET_ALLOWED_COSTS.get((budget or "").strip().lower())
    if not allowed:
        return list(catalog)
    return [d for d in catalog if d.average_cost in allowed]


def score_destination(prefs: UserPreferences, dest: Destination) -> float:
    score = 0.0

    for interest in prefs.interests:
        needle = interest.lower()
        if any(needle in tag.lower() for tag in dest.tags):
            score += INTEREST_POINTS

    for activity in prefs.preferred_activities:
        dimension = ACTIVITY_DIMENSIONS.get(activity.lower())
        if not dimension:
            continue
        rating = dest.ratings.get(dimension)
        if rating > ACTIVITY_RATING_THRESHOLD:
            score += rating / 10 * ACTIVITY_WEIGHT

    style_dimension = STYLE_DIMENSIONS.get(prefs.travel_style)
    if style_dimension and dest.ratings.get(style_dimension) > STYLE_RATING_THRESHOLD:
        score += STYLE_BONUS

    return score


def score_destinations(
    prefs: UserPreferences,
    catalog: Optional[Sequence[Destination]] = None,
) -> List[ScoredDestination]:
    """
    Ranks the catalog against the preferences, best match first.
    Pure: no randomness, no I/O. Equal scores keep catalog order.
    """
    if catalog is None:
        catalog = all_destinations()
    candidates = filter_by_budget(prefs.budget, catalog)
    scored = [ScoredDestination(destination=d, match_score=score_destination(prefs, d)) for d in candidates]
    # sorted() is stable
    return sorted(scored, key=lambda s: s.match_score, reverse=True)


def match_label(score: float) -> str:
    for lower_bound, label in MATCH_LABELS:
        if score > lower_bound:
            return label
    return LOW_MATCH_LABEL


class MatchingAgent:
    """
    Picks the destinations shown in the recommendations panel.
    With nothing selected the ranking is meaningless, so a random sample is shown instead.
    """

    def __init__(self, catalog: Optional[Sequence[Destination]] = None, rng: Optional[random.Random] = None):
        self.catalog = list(catalog) if catalog is not None else all_destinations()
        self.rng = rng or random.Random()

    def run(self, prefs: UserPreferences) -> List[ScoredDestination]:
        return score_destinations(prefs, self.catalog)

    def recommend(self, prefs: UserPreferences, limit: int = 4) -> List[ScoredDestination]:
        if limit <= 0:
            return []
        if not prefs.has_selections():
            sample = self.rng.sample(self.catalog, min(limit, len(self.catalog)))
            return [ScoredDestination(destination=d) for d in sample]
        return self.run(prefs)[:limit]
