# agents/travel_agent.py
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional, Tuple

from agents.chat_agent import ChatAgent
from agents.destination_guide_agent import DEFAULT_DAYS, DestinationGuideAgent
from agents.final_output_agent import FinalOutputAgent
from agents.matching_agent import MatchingAgent
from agents.travel_preferences_agent import PreferenceStore
from clients.llm import Collaborator
from data.destinations import all_destinations, get_destination
from models.chat import ChatReply, ChatSession
from models.destination import Destination, ScoredDestination

logger = logging.getLogger(__name__)


class TravelAgent:
    """
    Orchestrator for one user session: preferences, ranking, chat and detail pages.
    Detail content is kept per destination, so a rerun of the page doesn't call the model again.
    """

    def __init__(self, collaborator: Optional[Collaborator] = None, store: Optional[PreferenceStore] = None):
        catalog = all_destinations()
        self.store = store or PreferenceStore()
        self.matching_agent = MatchingAgent(catalog)
        self.chat_agent = ChatAgent(collaborator, catalog)
        self.guide_agent = DestinationGuideAgent(collaborator)
        self.output_agent = FinalOutputAgent()

        self.recommended: List[ScoredDestination] = []
        self.chat_picks: List[Destination] = []
        self._guide_cache: Dict[Tuple[Any, ...], Any] = {}
        self.store.subscribe(self._refresh)
        self._refresh(self.store.snapshot())

    def _refresh(self, prefs) -> None:
        self.recommended = self.matching_agent.recommend(prefs)

    def chat(self, session: ChatSession, text: str) -> ChatReply:
        # the chat never writes preferences; a mentioned season is only offered to the user
        prefs = self.store.snapshot()
        reply = self.chat_agent.reply(session, text, prefs)
        if reply.show_recommendations and not reply.failed:
            self.chat_picks = self.chat_agent.recommend_from_chat(session, prefs)
            logger.info("Chat picks: %s", [d.id for d in self.chat_picks])
        return reply

    def render_recommendations(self) -> str:
        return self.output_agent.render_list(self.recommended, self.store.snapshot())

    def render_detail(self, destination_id: str, days: int = DEFAULT_DAYS) -> str:
        # NotFoundError propagates; the page shows the not-found view
        dest = get_destination(destination_id)
        budget_value = self.store.snapshot().budget_value
        guide = self.guide_agent
        return self.output_agent.render_detail(
            dest,
            budget=self._cached(("budget", dest.id), lambda: guide.budget(dest)),
            itinerary=self._cached(("itinerary", dest.id, days), lambda: guide.itinerary(dest, days)),
            attractions=self._cached(("attractions", dest.id), lambda: guide.attractions(dest)),
            tips=self._cached(("tips", dest.id), lambda: guide.tips(dest)),
            budget_value=budget_value,
            narrative=self._cached(
                ("narrative", dest.id, budget_value),
                lambda: guide.recommendation(dest, budget_value),
            ),
        )

    def _cached(self, key: Tuple[Any, ...], build: Callable[[], Any]) -> Any:
        if key not in self._guide_cache:
            self._guide_cache[key] = build()
        return self._guide_cache[key]
