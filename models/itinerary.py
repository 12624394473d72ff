# models/itinerary.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List

@dataclass
class Activity:
    time: str  # "Manhã", "Tarde", "Noite"
    activity: str
    description: str = ""

@dataclass
class ItineraryDay:
    day: int
    activities: List[Activity] = field(default_factory=list)

@dataclass
class Itinerary:
    destination: str
    days: List[ItineraryDay]
    generated_by_ai: bool = True

    def __str__(self) -> str:
        lines: List[str] = []
        for d in self.days:
            lines.append(f"Dia {d.day} — {self.destination}")
            if not d.activities:
                lines.append("  • Tempo livre para explorar")
            for a in d.activities:
                lines.append(f"  • {a.time}: {a.activity}")
                desc = self._shorten(a.description, a.activity)
                if desc:
                    lines.append(f"    {desc}")
            lines.append("")
        return "\n".join(lines).rstrip()

    def _shorten(self, text: str, name: str, limit: int = 180) -> str:
        if not text:
            return ""
        clean = " ".join(str(text).split())
        # avoid repeating the name as description
        if clean.lower() == str(name or "").lower():
            return ""
        if len(clean) <= limit:
            return clean
        return clean[: limit - 3].rstrip() + "..."

@dataclass
class Attraction:
    name: str
    description: str
    rating: float
    category: str

@dataclass
class TravelTips:
    when_to_go: str
    transportation: str
    documentation: str
    cultural_tips: str
