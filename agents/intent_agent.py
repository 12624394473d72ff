# agents/intent_agent.py
from __future__ import annotations

import re
import unicodedata
from typing import Dict, Tuple

from models.chat import Intent

# Checked in this order; the first intent with a hit wins.
# Keywords are accent-free stems matched at the start of a word.
INTENT_KEYWORDS: Dict[Intent, Tuple[str, ...]] = {
    Intent.ASK_BUDGET: (
        "orcamento",
        "quanto custa",
        "quanto gast",
        "custo",
        "preco",
        "barat",
        "caro",
        "economi",
        "dinheiro",
        "reais",
        "r$",
    ),
    Intent.ASK_DURATION: (
        "quantos dias",
        "quanto tempo",
        "duracao",
        "dias",
        "semana",
        "feriado",
    ),
    Intent.ASK_DESTINATIONS: (
        "recomen",
        "sugest",
        "sugir",
        "sugere",
        "destin",
        "lugar",
        "viajar para",
        "onde ir",
        "para onde",
        "indica",
    ),
    Intent.SHARE_PREFERENCES: (
        "gosto",
        "adoro",
        "prefiro",
        "curto",
        "quero",
        "interess",
        "procurando",
    ),
    Intent.GREETING: (
        "ola",
        "oi",
        "bom dia",
        "boa tarde",
        "boa noite",
        "e ai",
        "hello",
        "hi",
    ),
}

# Greetings are short words; match them whole so "oi" doesn't fire on "noite".
WHOLE_WORD_INTENTS = frozenset({Intent.GREETING})

# Substrings that make the page reveal the recommendations panel.
RECOMMENDATION_TRIGGERS: Tuple[str, ...] = ("recomen", "sugest", "destin", "lugar", "viajar para")


def _fold(text: str) -> str:
    decomposed = unicodedata.normalize("NFKD", (text or "").lower())
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def _has_keyword(text: str, keyword: str, whole_word: bool) -> bool:
    pattern = rf"\b{re.escape(keyword.strip())}"
    if whole_word:
        pattern += r"\b"
    return re.search(pattern, text) is not None


def classify_intent(text: str) -> Intent:
    folded = _fold(text)
    if not folded.strip():
        return Intent.OTHER
    for intent, keywords in INTENT_KEYWORDS.items():
        whole_word = intent in WHOLE_WORD_INTENTS
        if any(_has_keyword(folded, kw, whole_word) for kw in keywords):
            return intent
    return Intent.OTHER


def wants_recommendations(text: str) -> bool:
    lower = (text or "").lower()
    return any(trigger in lower for trigger in RECOMMENDATION_TRIGGERS)
