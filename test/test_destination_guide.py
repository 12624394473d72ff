import json
import random

import pytest

from agents.destination_guide_agent import (
    DEFAULT_DAYS,
    DestinationGuideAgent,
    parse_days,
    parse_json_payload,
)
from data.destinations import get_destination
from utils.errors import MalformedResponseError, TransportError


class ScriptedCollaborator:
    def __init__(self, answer=None, error=None):
        self.answer = answer
        self.error = error

    def generate(self, prompt, system_prompt=None):
        if self.error is not None:
            raise self.error
        return self.answer


@pytest.fixture
def kyoto():
    return get_destination("dest-001")


@pytest.mark.parametrize(
    "duration, days",
    [("3-dias", 3), ("5-dias", 5), ("10-dias", 10), ("15-dias", 15), ("um mês", DEFAULT_DAYS)],
)
def test_parse_days(duration, days):
    assert parse_days(duration) == days


def test_parse_json_strips_fences():
    assert parse_json_payload('```json\n[{"day": 1}]\n```') == [{"day": 1}]


def test_parse_json_salvages_embedded_payload():
    text = 'Claro! Aqui está: {"whenToGo": "Primavera"} Boa viagem!'
    assert parse_json_payload(text) == {"whenToGo": "Primavera"}


@pytest.mark.parametrize("text", ["", "sem json aqui", "[{quebrado"])
def test_parse_json_rejects_garbage(text):
    with pytest.raises(MalformedResponseError):
        parse_json_payload(text)


def test_itinerary_from_model(kyoto):
    payload = [
        {
            "day": 1,
            "activities": [
                {"time": "Manhã", "activity": "Fushimi Inari", "description": "Portões vermelhos"},
                {"time": "Noite", "activity": "Gion", "description": "Bairro das gueixas"},
            ],
        }
    ]
    agent = DestinationGuideAgent(ScriptedCollaborator(answer=json.dumps(payload)))
    itinerary = agent.itinerary(kyoto, 1)
    assert itinerary.generated_by_ai is True
    assert itinerary.days[0].activities[0].activity == "Fushimi Inari"


@pytest.mark.parametrize("answer", ["não sei", "{}", "[]", '[{"day": "um"}]'])
def test_unusable_itinerary_falls_back_to_local_plan(kyoto, answer):
    agent = DestinationGuideAgent(ScriptedCollaborator(answer=answer), seed=3)
    itinerary = agent.itinerary(kyoto, 5)
    assert itinerary.generated_by_ai is False
    assert [d.day for d in itinerary.days] == [1, 2, 3, 4, 5]


def test_local_itinerary_shape(kyoto):
    itinerary = DestinationGuideAgent(None).local_itinerary(kyoto, 3)
    assert itinerary.destination == "Kyoto"
    for day in itinerary.days:
        assert [a.time for a in day.activities] == ["Manhã", "Tarde", "Noite"]
        # morning and afternoon differ
        assert day.activities[0].activity != day.activities[1].activity


def test_local_itinerary_is_repeatable(kyoto):
    first = DestinationGuideAgent(None).local_itinerary(kyoto, 7)
    second = DestinationGuideAgent(None).local_itinerary(kyoto, 7)
    assert str(first) == str(second)


def test_attractions_from_model(kyoto):
    payload = '```json\n[{"name": "Kinkaku-ji", "description": "Pavilhão dourado", "rating": 4.8, "category": "histórico"}]\n```'
    attractions = DestinationGuideAgent(ScriptedCollaborator(answer=payload)).attractions(kyoto)
    assert len(attractions) == 1
    assert attractions[0].name == "Kinkaku-ji"
    assert attractions[0].rating == 4.8


@pytest.mark.parametrize("answer", ['{"name": "x"}', '[{"description": "sem nome"}]', '["texto"]'])
def test_bad_attractions_give_empty_list(kyoto, answer):
    assert DestinationGuideAgent(ScriptedCollaborator(answer=answer)).attractions(kyoto) == []


def test_tips_from_model(kyoto):
    payload = json.dumps({"whenToGo": "Outono", "transportation": "Metrô", "documentation": "Passaporte", "culturalTips": "Silêncio"})
    tips = DestinationGuideAgent(ScriptedCollaborator(answer=payload)).tips(kyoto)
    assert tips.when_to_go == "Outono"
    assert tips.cultural_tips == "Silêncio"


def test_tips_fall_back_to_best_season(kyoto):
    tips = DestinationGuideAgent(ScriptedCollaborator(error=TransportError("down"))).tips(kyoto)
    assert tips.when_to_go == "Melhor época: Março - Novembro."


def test_recommendation_fallback_keeps_description(kyoto):
    text = DestinationGuideAgent(None).recommendation(kyoto, 8000)
    assert "Erro ao carregar recomendações" in text
    assert kyoto.description in text


def test_unexpected_collaborator_error_is_contained(kyoto):
    agent = DestinationGuideAgent(ScriptedCollaborator(error=RuntimeError("bug")))
    assert agent.itinerary(kyoto, 3).generated_by_ai is False
    assert agent.attractions(kyoto) == []


def test_budget_breakdown_matches_tier(kyoto):
    breakdown = DestinationGuideAgent(None).budget(kyoto, random.Random(1))
    # medium tier: 5500 ± 20%
    assert 4400 <= breakdown.total <= 6600
