import pytest

from agents.intent_agent import INTENT_KEYWORDS, classify_intent, wants_recommendations
from models.chat import Intent


@pytest.mark.parametrize(
    "text, intent",
    [
        ("Oi", Intent.GREETING),
        ("Olá, tudo bem?", Intent.GREETING),
        ("Boa noite!", Intent.GREETING),
        ("Quais destinos você recomenda para amantes de gastronomia?", Intent.ASK_DESTINATIONS),
        ("Sugira um lugar para relaxar", Intent.ASK_DESTINATIONS),
        ("Quanto custa uma semana em Kyoto?", Intent.ASK_BUDGET),
        ("Qual o orçamento ideal?", Intent.ASK_BUDGET),
        ("Quantos dias preciso em Porto?", Intent.ASK_DURATION),
        ("Gosto muito de praia e natureza", Intent.SHARE_PREFERENCES),
        ("Qual é a capital da Hungria?", Intent.OTHER),
        ("", Intent.OTHER),
    ],
)
def test_classify_intent(text, intent):
    assert classify_intent(text) == intent


def test_greeting_words_must_be_whole():
    # "noite" contains "oi" but isn't a greeting on its own
    assert classify_intent("Passeio à noite") == Intent.OTHER


def test_keywords_are_data():
    assert set(INTENT_KEYWORDS) == {
        Intent.ASK_BUDGET,
        Intent.ASK_DURATION,
        Intent.ASK_DESTINATIONS,
        Intent.SHARE_PREFERENCES,
        Intent.GREETING,
    }


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Me recomenda algo?", True),
        ("Quero viajar para a Grécia", True),
        ("Algum lugar com praia?", True),
        ("Obrigado!", False),
    ],
)
def test_wants_recommendations(text, expected):
    assert wants_recommendations(text) is expected
