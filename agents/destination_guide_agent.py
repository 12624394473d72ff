# agents/destination_guide_agent.py
from __future__ import annotations

import json
import logging
import random
import re
from typing import Any, Dict, List, Optional

from agents.prompts import attractions_prompt, destination_prompt, itinerary_prompt, tips_prompt
from clients.llm import Collaborator
from models.budget import BudgetBreakdown, approximate_price
from models.destination import Destination
from models.itinerary import Activity, Attraction, Itinerary, ItineraryDay, TravelTips
from utils.date_parser import best_season_text
from utils.errors import ConfigurationError, ExplorAIError, MalformedResponseError

logger = logging.getLogger(__name__)

DURATION_OPTIONS = {"3-dias": 3, "5-dias": 5, "7-dias": 7, "10-dias": 10, "15-dias": 15}
DEFAULT_DAYS = 7

# Local activities and the tags that make each one relevant.
ACTIVITY_TAGS: Dict[str, List[str]] = {
    "Passeio pelo centro histórico": ["histórico", "arquitetura", "cultural"],
    "Visita ao museu local": ["histórico", "cultural", "arte"],
    "Exploração de parques naturais": ["natureza", "aventura", "paisagem"],
    "Tour gastronômico": ["gastronomia", "cultural"],
    "Dia de praia": ["praia", "relaxamento", "natureza"],
    "Compras em mercados locais": ["cultural", "gastronomia", "artesanato"],
    "Visita a pontos turísticos icônicos": ["histórico", "arquitetura", "cultural"],
    "Excursão a uma cidade próxima": ["cultural", "histórico"],
    "Aula de culinária típica": ["gastronomia", "cultural"],
    "Passeio de barco": ["natureza", "aventura", "praia"],
    "Relaxamento em spas locais": ["relaxamento", "luxo"],
    "Tour fotográfico pela cidade": ["arquitetura", "cultural", "paisagem"],
    "Trilha em áreas naturais": ["natureza", "aventura"],
    "Show cultural": ["cultural", "arte"],
    "Visita a monumentos históricos": ["histórico", "arquitetura", "cultural"],
}

EVENING_ACTIVITIES = [
    "Jantar em restaurante local",
    "Caminhada noturna pela cidade",
    "Evento cultural noturno",
    "Descanso no hotel",
    "Passeio por área de entretenimento",
]

_FENCE = re.compile(r"```(?:json)?\n?")


def parse_days(duration: str) -> int:
    return DURATION_OPTIONS.get(duration, DEFAULT_DAYS)


def parse_json_payload(content: str) -> Any:
    """Strips markdown fences and salvages the first JSON array/object in the text."""
    clean = _FENCE.sub("", content or "").strip()
    if not clean:
        raise MalformedResponseError("Empty model response.")
    try:
        return json.loads(clean)
    except json.JSONDecodeError as exc:
        match = re.search(r"(\[.*\]|\{.*\})", clean, re.DOTALL)
        if match:
            try:
                return json.loads(match.group(0))
            except json.JSONDecodeError:
                pass
        raise MalformedResponseError("Model did not return valid JSON.") from exc


class DestinationGuideAgent:
    """
    Content for the destination detail view: narrative, itinerary, attractions and tips.
    Model output is used when it parses; otherwise local content is built from the catalog.
    """

    def __init__(self, collaborator: Optional[Collaborator], seed: Optional[int] = None):
        self.collaborator = collaborator
        self.seed = seed

    def recommendation(self, dest: Destination, budget_value: Optional[float] = None) -> str:
        try:
            return self._ask(destination_prompt(dest, budget_value))
        except ExplorAIError as exc:
            logger.warning("Destination narrative fell back for %s: %s", dest.id, exc)
        return (
            "**Erro ao carregar recomendações**\n\n"
            f"Não foi possível gerar recomendações personalizadas para {dest.name} no momento. "
            "Verifique se a API do Gemini está configurada corretamente ou tente novamente mais tarde.\n\n"
            f"**Informações básicas sobre {dest.name}:**\n{dest.description}"
        )

    def itinerary(self, dest: Destination, days: int = DEFAULT_DAYS) -> Itinerary:
        try:
            data = parse_json_payload(self._ask(itinerary_prompt(dest, days)))
            return self._itinerary_from_json(dest, data)
        except ExplorAIError as exc:
            logger.warning("Itinerary fell back to local plan for %s: %s", dest.id, exc)
        return self.local_itinerary(dest, days)

    def attractions(self, dest: Destination) -> List[Attraction]:
        try:
            data = parse_json_payload(self._ask(attractions_prompt(dest)))
            if not isinstance(data, list):
                raise MalformedResponseError("attractions must be a JSON list")
            return [
                Attraction(
                    name=str(item["name"]),
                    description=str(item.get("description", "")),
                    rating=float(item.get("rating", 0)),
                    category=str(item.get("category", "")),
                )
                for item in data
            ]
        except (AttributeError, KeyError, TypeError, ValueError) as exc:
            logger.warning("Attractions payload unusable for %s: %s", dest.id, exc)
        except ExplorAIError as exc:
            logger.warning("Attractions fell back for %s: %s", dest.id, exc)
        return []

    def tips(self, dest: Destination) -> TravelTips:
        try:
            data = parse_json_payload(self._ask(tips_prompt(dest)))
            if not isinstance(data, dict):
                raise MalformedResponseError("tips must be a JSON object")
            return TravelTips(
                when_to_go=str(data.get("whenToGo", "")),
                transportation=str(data.get("transportation", "")),
                documentation=str(data.get("documentation", "")),
                cultural_tips=str(data.get("culturalTips", "")),
            )
        except ExplorAIError as exc:
            logger.warning("Tips fell back for %s: %s", dest.id, exc)
        return TravelTips(
            when_to_go=f"Melhor época: {best_season_text(dest.best_time_to_visit)}.",
            transportation="",
            documentation="",
            cultural_tips="",
        )

    def budget(self, dest: Destination, rng: Optional[random.Random] = None) -> BudgetBreakdown:
        return BudgetBreakdown.from_price(approximate_price(dest.average_cost, rng))

    def local_itinerary(self, dest: Destination, days: int) -> Itinerary:
        rng = random.Random(self.seed if self.seed is not None else dest.id)
        pool = self._activity_pool(dest, days)
        itinerary_days: List[ItineraryDay] = []
        for day in range(1, days + 1):
            morning = rng.choice(pool)
            afternoon_options = [a for a in pool if a != morning] or pool
            afternoon = rng.choice(afternoon_options)
            itinerary_days.append(
                ItineraryDay(
                    day=day,
                    activities=[
                        Activity("Manhã", morning, f"Aproveite a {morning.lower()} para conhecer mais sobre a cultura local."),
                        Activity("Tarde", afternoon, f"Dedique a tarde para {afternoon.lower()} e aproveitar ao máximo sua experiência."),
                        Activity("Noite", rng.choice(EVENING_ACTIVITIES), "Termine o dia relaxando e aproveitando a vida noturna local."),
                    ],
                )
            )
        return Itinerary(destination=dest.name, days=itinerary_days, generated_by_ai=False)

    # ----------------------
    # helpers
    # ----------------------
    def _ask(self, prompt: str) -> str:
        if self.collaborator is None:
            raise ConfigurationError("No language model configured")
        try:
            return self.collaborator.generate(prompt)
        except ExplorAIError:
            raise
        except Exception as exc:
            raise MalformedResponseError(f"Unexpected collaborator failure: {exc}") from exc

    def _activity_pool(self, dest: Destination, days: int) -> List[str]:
        relevant = [
            activity
            for activity, tags in ACTIVITY_TAGS.items()
            if any(tag in t for tag in tags for t in dest.tags)
        ]
        if len(relevant) < days * 2:
            # not enough variety: use everything
            return list(ACTIVITY_TAGS)
        return relevant

    def _itinerary_from_json(self, dest: Destination, data: Any) -> Itinerary:
        if not isinstance(data, list) or not data:
            raise MalformedResponseError("itinerary must be a non-empty JSON list")
        try:
            days = [
                ItineraryDay(
                    day=int(entry.get("day", idx)),
                    activities=[
                        Activity(
                            time=str(a.get("time", "")),
                            activity=str(a.get("activity", "")),
                            description=str(a.get("description", "")),
                        )
                        for a in entry.get("activities", [])
                    ],
                )
                for idx, entry in enumerate(data, start=1)
            ]
        except (AttributeError, TypeError, ValueError) as exc:
            raise MalformedResponseError("itinerary entries have the wrong shape") from exc
        return Itinerary(destination=dest.name, days=days)
