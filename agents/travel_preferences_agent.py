# agents/travel_preferences_agent.py
from __future__ import annotations

import logging
import threading
from dataclasses import replace
from typing import Any, Callable, Dict, Iterable, List, Optional

from models.budget import BudgetCategory, classify_budget
from models.preferences import DURATIONS, SEASONS, TRAVEL_STYLES, UserPreferences
from utils.money import clamp_non_negative

logger = logging.getLogger(__name__)

Listener = Callable[[UserPreferences], None]


def _clean_list(values: Iterable[Any]) -> List[str]:
    seen = set()
    out: List[str] = []
    for v in values or []:
        item = str(v).strip().lower()
        if item and item not in seen:
            seen.add(item)
            out.append(item)
    return out


def _toggle(values: List[str], item: str) -> List[str]:
    item = item.strip().lower()
    if item in values:
        return [v for v in values if v != item]
    return [*values, item]


class TravelPreferencesAgent:
    """
    Validates/normalizes user input into UserPreferences.
    Works with either a raw dict OR an already built UserPreferences.
    """

    def normalize(self, raw: Any) -> UserPreferences:
        if isinstance(raw, UserPreferences):
            prefs = replace(raw)
        elif isinstance(raw, dict):
            prefs = self._from_dict(raw)
        else:
            raise TypeError("TravelPreferencesAgent.normalize expects UserPreferences or dict")

        defaults = UserPreferences()
        prefs.interests = _clean_list(prefs.interests)
        prefs.preferred_activities = _clean_list(prefs.preferred_activities)

        prefs.travel_style = (prefs.travel_style or "").strip().lower()
        if prefs.travel_style not in TRAVEL_STYLES:
            prefs.travel_style = defaults.travel_style

        # Free-form budget labels are allowed; they just don't filter.
        prefs.budget = (prefs.budget or "").strip().lower()
        if not prefs.budget and prefs.budget_value is not None:
            prefs.budget = classify_budget(prefs.budget_value).value

        if prefs.budget_value is not None:
            prefs.budget_value = clamp_non_negative(prefs.budget_value)

        if prefs.duration not in DURATIONS:
            prefs.duration = defaults.duration
        if prefs.season not in SEASONS:
            prefs.season = defaults.season

        return prefs

    def _from_dict(self, d: Dict[str, Any]) -> UserPreferences:
        budget_value = d.get("budget_value")
        try:
            budget_value = float(budget_value) if budget_value not in (None, "") else None
        except (TypeError, ValueError):
            budget_value = None

        return UserPreferences(
            interests=list(d.get("interests") or []),
            preferred_activities=list(d.get("preferred_activities") or []),
            travel_style=str(d.get("travel_style") or ""),
            budget=str(d.get("budget") or ""),
            budget_value=budget_value,
            duration=d.get("duration"),
            season=d.get("season"),
        )


class PreferenceStore:
    """
    Holds the session's current preferences.
    Every update builds a new record and swaps it in under the lock, so a reader
    always sees a complete record. Listeners run synchronously after the swap.
    """

    def __init__(self, initial: Optional[UserPreferences] = None):
        self._prefs = TravelPreferencesAgent().normalize(initial or UserPreferences())
        self._lock = threading.Lock()
        self._listeners: List[Listener] = []

    def snapshot(self) -> UserPreferences:
        with self._lock:
            current = self._prefs
        # hand out a copy; lists are shared otherwise
        return replace(
            current,
            interests=list(current.interests),
            preferred_activities=list(current.preferred_activities),
        )

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def toggle_interest(self, interest: str) -> UserPreferences:
        return self._update(lambda p: replace(p, interests=_toggle(p.interests, interest)))

    def toggle_activity(self, activity: str) -> UserPreferences:
        return self._update(lambda p: replace(p, preferred_activities=_toggle(p.preferred_activities, activity)))

    def set_travel_style(self, style: str) -> UserPreferences:
        return self._update(lambda p: replace(p, travel_style=style.strip().lower()))

    def set_budget(self, budget: str) -> UserPreferences:
        return self._update(lambda p: replace(p, budget=budget.strip().lower()))

    def set_budget_value(self, value: Optional[float]) -> UserPreferences:
        amount = clamp_non_negative(value) if value is not None else None
        return self._update(lambda p: replace(p, budget_value=amount))

    def set_duration(self, duration: Optional[str]) -> UserPreferences:
        return self._update(lambda p: replace(p, duration=duration))

    def set_season(self, season: Optional[str]) -> UserPreferences:
        return self._update(lambda p: replace(p, season=season))

    def budget_category(self) -> Optional[BudgetCategory]:
        value = self.snapshot().budget_value
        if value is None:
            return None
        return classify_budget(value)

    def _update(self, change: Callable[[UserPreferences], UserPreferences]) -> UserPreferences:
        with self._lock:
            self._prefs = change(self._prefs)
        updated = self.snapshot()
        logger.debug("Preferences updated: %s", updated)
        for listener in list(self._listeners):
            listener(updated)
        return updated
