# agents/final_output_agent.py
from __future__ import annotations
import random
from typing import List, Optional, Sequence

from agents.matching_agent import match_label
from models.budget import BudgetBreakdown, approximate_price, classify_budget
from models.destination import Destination, ScoredDestination
from models.itinerary import Attraction, Itinerary, TravelTips
from models.preferences import UserPreferences
from utils.date_parser import SEASON_LABELS, best_season_text, is_good_season
from utils.money import format_brl

COST_LABELS = {
    "low": "Econômico",
    "medium": "Moderado",
    "high": "Caro",
    "very high": "Muito caro",
}

class FinalOutputAgent:
    """Markdown for destination cards and the detail view. Prices here are display-only."""

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def cost_label(self, cost: str) -> str:
        return COST_LABELS.get(cost, cost)

    def price_text(self, dest: Destination) -> str:
        return format_brl(approximate_price(dest.average_cost, self.rng))

    def render_card(self, scored: ScoredDestination, prefs: Optional[UserPreferences] = None) -> str:
        d = scored.destination
        lines: List[str] = []
        title = f"### {d.name}"
        if scored.match_score is not None:
            title += f"  ·  _{match_label(scored.match_score)}_"
        lines.append(title)
        lines.append(f"📍 {d.country} | **{self.cost_label(d.average_cost)}**")
        lines.append("")
        lines.append(d.description)
        lines.append("")
        lines.append(" ".join(f"`{t}`" for t in d.tags[:4]))
        lines.append(f"⭐ {d.ratings.average:.1f} | 📅 {best_season_text(d.best_time_to_visit)}")
        if prefs and not is_good_season(d.best_time_to_visit, prefs.season):
            lines.append(f"⚠️ Fora da melhor época para {SEASON_LABELS.get(prefs.season, prefs.season)}")
        lines.append(f"Valor aproximado p/ pessoa: **{self.price_text(d)}**")
        return "\n".join(lines)

    def render_list(self, items: Sequence[ScoredDestination], prefs: Optional[UserPreferences] = None) -> str:
        if not items:
            return "- _Nenhum destino encontrado para esse orçamento._"
        return "\n\n---\n\n".join(self.render_card(s, prefs) for s in items)

    def render_preferences(self, prefs: UserPreferences) -> str:
        lines = [
            "### Preferências",
            f"- **Interesses:** {', '.join(prefs.interests) or '—'}",
            f"- **Atividades:** {', '.join(prefs.preferred_activities) or '—'}",
            f"- **Estilo:** {prefs.travel_style}",
            f"- **Orçamento:** {prefs.budget}",
        ]
        if prefs.budget_value is not None:
            tier = classify_budget(prefs.budget_value).value
            lines.append(f"- **Valor p/ pessoa:** {format_brl(prefs.budget_value)} ({tier})")
        lines.append(f"- **Duração:** {prefs.duration or '—'}")
        lines.append(f"- **Época:** {SEASON_LABELS.get(prefs.season or 'qualquer', prefs.season)}")
        return "\n".join(lines)

    def render_detail(
        self,
        dest: Destination,
        budget: BudgetBreakdown,
        itinerary: Itinerary,
        attractions: Optional[List[Attraction]] = None,
        tips: Optional[TravelTips] = None,
        budget_value: Optional[float] = None,
        narrative: Optional[str] = None,
    ) -> str:
        lines: List[str] = []
        lines.append(f"## {dest.name}")
        lines.append(f"📍 {dest.country} | **{self.cost_label(dest.average_cost)}** | ⭐ {dest.ratings.average:.1f}")
        lines.append("")
        lines.append(dest.description)
        lines.append("")
        lines.append(f"- **Melhor época:** {best_season_text(dest.best_time_to_visit)}")
        lines.append("")

        if narrative:
            lines.append("### Recomendações personalizadas")
            lines.append(narrative.strip())
            lines.append("")

        lines.append("### Orçamento estimado")
        lines.append(f"- Hospedagem: {format_brl(budget.lodging)}")
        lines.append(f"- Alimentação: {format_brl(budget.food)}")
        lines.append(f"- Passeios: {format_brl(budget.tours)}")
        lines.append(f"- Transporte: {format_brl(budget.transport)}")
        lines.append(f"- **Total:** {format_brl(budget.total)}")
        if budget_value is not None:
            remaining = budget.remaining(budget_value)
            lines.append(f"- **Sobra do seu orçamento:** {format_brl(remaining)}")
            if remaining < 0:
                lines.append("")
                lines.append("⚠️ Acima do orçamento. Considere uma viagem mais curta ou outra época.")
        lines.append("")

        lines.append("### Roteiro")
        itinerary_text = str(itinerary)
        lines.append(itinerary_text or "- _Roteiro indisponível._")
        if not itinerary.generated_by_ai:
            lines.append("")
            lines.append("_Roteiro sugerido automaticamente._")
        lines.append("")

        if attractions:
            lines.append("### Atrações")
            for a in attractions:
                lines.append(f"- **{a.name}** ({a.category}) ⭐ {a.rating:.1f}")
                if a.description:
                    lines.append(f"  {a.description}")
            lines.append("")

        if tips:
            tip_lines = [
                ("Quando ir", tips.when_to_go),
                ("Transporte", tips.transportation),
                ("Documentação", tips.documentation),
                ("Dicas culturais", tips.cultural_tips),
            ]
            tip_lines = [(k, v) for k, v in tip_lines if v]
            if tip_lines:
                lines.append("### Dicas")
                for k, v in tip_lines:
                    lines.append(f"- **{k}:** {v}")

        return "\n".join(lines).rstrip()
