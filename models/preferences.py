# models/preferences.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional

TRAVEL_STYLES = ("aventureiro", "equilibrado", "cultural", "relaxado")
BUDGET_LABELS = ("econômico", "moderado", "luxo")
DURATIONS = ("3-5 dias", "7-10 dias", "10-15 dias", "15+ dias")
SEASONS = ("verao", "outono", "inverno", "primavera", "qualquer")

# Options offered by the preference controls (lowercased before storing).
INTEREST_OPTIONS = ["Cultura", "Natureza", "Gastronomia", "História", "Praia", "Aventura", "Arquitetura", "Relaxamento"]
ACTIVITY_OPTIONS = [
    "Explorar cultura local",
    "Aventuras ao ar livre",
    "Relaxar em paisagens naturais",
    "Experimentar gastronomia",
    "Apreciar a natureza",
]

@dataclass
class UserPreferences:
    interests: List[str] = field(default_factory=list)
    preferred_activities: List[str] = field(default_factory=list)
    travel_style: str = "equilibrado"
    budget: str = "moderado"
    budget_value: Optional[float] = 5000.0
    duration: Optional[str] = "7-10 dias"
    season: Optional[str] = "qualquer"

    def has_selections(self) -> bool:
        return bool(self.interests or self.preferred_activities)
