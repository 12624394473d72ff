# main.py
from __future__ import annotations
import logging

from dotenv import load_dotenv

from agents.travel_agent import TravelAgent
from agents.travel_preferences_agent import PreferenceStore
from clients.llm import build_collaborator
from models.preferences import UserPreferences

if __name__ == "__main__":
    load_dotenv()
    logging.basicConfig(level=logging.INFO)

    store = PreferenceStore(
        UserPreferences(
            interests=["cultura", "gastronomia"],
            preferred_activities=["experimentar gastronomia"],
            travel_style="cultural",
            budget="moderado",
            budget_value=6000,
        )
    )

    agent = TravelAgent(build_collaborator(), store=store)
    print(agent.output_agent.render_preferences(store.snapshot()))
    print()
    print(agent.render_recommendations())
