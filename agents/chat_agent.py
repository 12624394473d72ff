# agents/chat_agent.py
from __future__ import annotations

import logging
import re
from typing import List, Optional, Sequence

from agents.intent_agent import classify_intent, wants_recommendations
from agents.matching_agent import score_destinations
from agents.prompts import (
    GREETING,
    chat_recommendation_prompt,
    chat_system_prompt,
    conversation_prompt,
)
from clients.llm import Collaborator
from data.destinations import all_destinations
from models.chat import ChatReply, ChatSession, Intent
from models.destination import Destination
from models.preferences import UserPreferences
from utils.errors import ConfigurationError, ExplorAIError, MalformedResponseError
from utils.date_parser import extract_month, season_for_month

logger = logging.getLogger(__name__)

HISTORY_WINDOW = 5
CHAT_RECOMMENDATION_COUNT = 3
PROMPT_MATCHES = 3

UNAVAILABLE_MESSAGE = (
    "O chat com IA não está disponível no momento porque a integração com o modelo de linguagem "
    "não foi configurada. Enquanto isso, ajuste suas preferências para ver os destinos recomendados."
)

# Rotated so the same apology isn't shown twice in a row.
TECHNICAL_FALLBACKS = (
    "Desculpe, estou com dificuldades técnicas no momento. Tente novamente em alguns instantes.",
    "Desculpe, estou enfrentando dificuldades para processar sua solicitação. Poderia tentar novamente?",
)

BUSY_MESSAGE = "Ainda estou respondendo sua mensagem anterior. Aguarde só um instante!"

_ID_PATTERN = re.compile(r"dest-\d+")


class ChatAgent:
    """
    Boundary between the chat panel and the language model.
    Every collaborator failure turns into a readable message; nothing raises to the UI.
    """

    def __init__(self, collaborator: Optional[Collaborator], catalog: Optional[Sequence[Destination]] = None):
        self.collaborator = collaborator
        self.catalog = list(catalog) if catalog is not None else all_destinations()

    def start(self, session: ChatSession) -> None:
        if not session.history:
            session.add("assistant", GREETING)

    def reply(self, session: ChatSession, text: str, prefs: UserPreferences) -> ChatReply:
        text = (text or "").strip()
        if not text:
            return ChatReply(text="", failed=True)
        if session.pending:
            return ChatReply(text=BUSY_MESSAGE, failed=True)

        prior = session.recent(HISTORY_WINDOW)
        session.add("user", text)
        intent = classify_intent(text)
        show = intent == Intent.ASK_DESTINATIONS or wants_recommendations(text)
        month = extract_month(text)
        season = season_for_month(month) if month else None

        session.pending = True
        try:
            answer = self._generate(prior, text, prefs, intent, season)
            failed = False
        except ConfigurationError as exc:
            logger.warning("Chat unavailable: %s", exc)
            answer, failed = UNAVAILABLE_MESSAGE, True
        except ExplorAIError as exc:
            logger.warning("Chat collaborator failed: %s", exc)
            answer, failed = self._technical_fallback(session), True
        except Exception:
            logger.exception("Unexpected chat collaborator failure")
            answer, failed = self._technical_fallback(session), True
        finally:
            session.pending = False

        if not failed:
            session.last_fallback = None
        session.add("assistant", answer)
        return ChatReply(text=answer, intent=intent, show_recommendations=show, season=season, failed=failed)

    def recommend_from_chat(self, session: ChatSession, prefs: UserPreferences) -> List[Destination]:
        """
        Asks the model for three catalog ids. Anything unusable falls back
        to the first three catalog entries.
        """
        try:
            if self.collaborator is None:
                raise ConfigurationError("No language model configured")
            prompt = chat_recommendation_prompt(session.recent(3), prefs, self.catalog)
            response = self.collaborator.generate(prompt)
            return self._parse_ids(response)
        except ExplorAIError as exc:
            logger.warning("Chat-based recommendations fell back to defaults: %s", exc)
        except Exception:
            logger.exception("Unexpected failure in chat-based recommendations")
        return self.catalog[:CHAT_RECOMMENDATION_COUNT]

    def _generate(self, prior, text: str, prefs: UserPreferences, intent: Intent, season: Optional[str]) -> str:
        if self.collaborator is None:
            raise ConfigurationError("No language model configured")
        top = None
        if prefs.has_selections():
            top = [s.destination for s in score_destinations(prefs, self.catalog)[:PROMPT_MATCHES]]
        system_prompt = chat_system_prompt(prefs, top, intent=intent, mentioned_season=season)
        prompt = conversation_prompt(prior, text)
        answer = self.collaborator.generate(prompt, system_prompt=system_prompt)
        if not answer or not answer.strip():
            raise MalformedResponseError("Empty chat reply")
        return answer.strip()

    def _parse_ids(self, response: str) -> List[Destination]:
        wanted = {token.strip() for token in (response or "").split(",")}
        wanted.update(_ID_PATTERN.findall(response or ""))
        picked = [d for d in self.catalog if d.id in wanted][:CHAT_RECOMMENDATION_COUNT]
        if not picked:
            raise MalformedResponseError(f"No catalog ids in response: {response!r}")
        return picked

    def _technical_fallback(self, session: ChatSession) -> str:
        choice = TECHNICAL_FALLBACKS[0]
        if session.last_fallback == choice:
            choice = TECHNICAL_FALLBACKS[1]
        session.last_fallback = choice
        return choice
