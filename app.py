from __future__ import annotations

import logging
import os

import streamlit as st
from dotenv import load_dotenv

from agents.destination_guide_agent import DURATION_OPTIONS, parse_days
from agents.prompts import QUICK_SUGGESTIONS
from agents.travel_agent import TravelAgent
from clients.llm import Collaborator, build_collaborator
from models.chat import ChatSession
from models.destination import ScoredDestination
from models.preferences import ACTIVITY_OPTIONS, BUDGET_LABELS, DURATIONS, INTEREST_OPTIONS, SEASONS, TRAVEL_STYLES
from utils.date_parser import SEASON_LABELS
from utils.errors import NotFoundError

load_dotenv()
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

APP_STYLE = """
<style>
:root {
  --bg: #f6f8fb;
  --panel: #ffffff;
  --text: #0f172a;
  --muted: #475569;
  --accent: #0ea5e9;
}
html, body {
  background: var(--bg);
  color: var(--text);
}
.hero {
  background: linear-gradient(135deg, rgba(14,165,233,0.18), rgba(34,197,94,0.14));
  border: 1px solid rgba(14,165,233,0.12);
  padding: 1.25rem 1.5rem;
  border-radius: 14px;
  margin-bottom: 1rem;
}
.hero h1 {
  margin: 0;
  color: var(--text);
}
.hero p {
  margin: 0.25rem 0 0;
  color: var(--muted);
}
[data-testid="stChatMessage"] {
  border: 1px solid rgba(15,23,42,0.08);
  background: var(--panel);
  border-radius: 12px;
  padding: 0.75rem 0.9rem;
}
</style>
"""


@st.cache_resource
def get_collaborator() -> Collaborator:
    return build_collaborator()


def get_agent() -> TravelAgent:
    if "agent" not in st.session_state:
        st.session_state.agent = TravelAgent(get_collaborator())
    return st.session_state.agent


def get_chat_session(agent: TravelAgent) -> ChatSession:
    if "chat" not in st.session_state:
        session = ChatSession()
        agent.chat_agent.start(session)
        st.session_state.chat = session
    return st.session_state.chat


def open_destination(destination_id: str) -> None:
    st.query_params["destino"] = destination_id


def go_home() -> None:
    st.query_params.clear()


def render_preferences(agent: TravelAgent) -> None:
    store = agent.store
    prefs = store.snapshot()
    st.subheader("🧭 Minhas preferências de viagem")
    tab_interests, tab_activities, tab_style, tab_budget, tab_trip = st.tabs(
        ["Interesses", "Atividades", "Estilo", "Orçamento", "Viagem"]
    )

    with tab_interests:
        cols = st.columns(3)
        for idx, interest in enumerate(INTEREST_OPTIONS):
            value = interest.lower()
            cols[idx % 3].checkbox(
                interest,
                value=value in prefs.interests,
                key=f"interest-{value}",
                on_change=store.toggle_interest,
                args=(value,),
            )

    with tab_activities:
        for activity in ACTIVITY_OPTIONS:
            value = activity.lower()
            st.checkbox(
                activity,
                value=value in prefs.preferred_activities,
                key=f"activity-{value}",
                on_change=store.toggle_activity,
                args=(value,),
            )

    with tab_style:
        cols = st.columns(len(TRAVEL_STYLES))
        for col, style in zip(cols, TRAVEL_STYLES):
            col.button(
                style.capitalize(),
                key=f"style-{style}",
                type="primary" if prefs.travel_style == style else "secondary",
                on_click=store.set_travel_style,
                args=(style,),
            )

    with tab_budget:
        cols = st.columns(len(BUDGET_LABELS))
        for col, label in zip(cols, BUDGET_LABELS):
            col.button(
                label.capitalize(),
                key=f"budget-{label}",
                type="primary" if prefs.budget == label else "secondary",
                on_click=store.set_budget,
                args=(label,),
            )
        st.number_input(
            "Valor por pessoa (R$)",
            min_value=0.0,
            step=500.0,
            value=float(prefs.budget_value or 0.0),
            key="budget-value",
            on_change=lambda: store.set_budget_value(st.session_state["budget-value"]),
        )
        category = store.budget_category()
        if category is not None:
            st.caption(f"Categoria: **{category.value}**")

    with tab_trip:
        # the chat suggestion button can change the season; keep the widget in step with the store
        if st.session_state.get("season", prefs.season) != prefs.season:
            st.session_state["season"] = prefs.season
        st.selectbox(
            "Duração",
            DURATIONS,
            index=DURATIONS.index(prefs.duration or DURATIONS[1]),
            key="duration",
            on_change=lambda: store.set_duration(st.session_state["duration"]),
        )
        st.selectbox(
            "Época",
            SEASONS,
            index=SEASONS.index(prefs.season or "qualquer"),
            format_func=lambda s: SEASON_LABELS.get(s, s),
            key="season",
            on_change=lambda: store.set_season(st.session_state["season"]),
        )


def apply_season(agent: TravelAgent, season: str) -> None:
    agent.store.set_season(season)
    st.session_state.pop("suggested_season", None)


def render_chat_picks(agent: TravelAgent) -> None:
    if not agent.chat_picks:
        return
    st.subheader("Sugestões do chat")
    prefs = agent.store.snapshot()
    for dest in agent.chat_picks:
        with st.container(border=True):
            st.markdown(agent.output_agent.render_card(ScoredDestination(dest), prefs))
            st.button("Ver detalhes", key=f"chat-open-{dest.id}", on_click=open_destination, args=(dest.id,))


def render_recommendations(agent: TravelAgent) -> None:
    st.subheader("Recomendações para você")
    prefs = agent.store.snapshot()
    if not agent.recommended:
        st.info("Nenhum destino combina com esse orçamento. Experimente outra faixa.")
        return
    cols = st.columns(2)
    for idx, scored in enumerate(agent.recommended):
        with cols[idx % 2].container(border=True):
            if scored.destination.image_url:
                st.image(f"{scored.destination.image_url}?auto=format&fit=crop&w=600&h=350")
            st.markdown(agent.output_agent.render_card(scored, prefs))
            st.button("Ver detalhes", key=f"open-{scored.id}", on_click=open_destination, args=(scored.id,))


def render_chat(agent: TravelAgent) -> None:
    session = get_chat_session(agent)
    st.subheader("💬 Chat com ExplorAI")
    st.caption("Converse comigo para descobrir seu próximo destino")

    history = st.container(height=520)
    with history:
        for message in session.history:
            st.chat_message(message.role).markdown(message.content)

    if len(session.history) == 1:
        st.caption("Sugestões rápidas:")
        for idx, suggestion in enumerate(QUICK_SUGGESTIONS):
            if st.button(suggestion, key=f"suggestion-{idx}"):
                st.session_state.queued_prompt = suggestion

    suggested = st.session_state.get("suggested_season")
    if suggested:
        st.button(
            f"Usar época: {SEASON_LABELS.get(suggested, suggested)}",
            key="apply-season",
            on_click=apply_season,
            args=(agent, suggested),
        )

    user_prompt = st.chat_input("Digite sua mensagem...", disabled=session.pending)
    user_prompt = user_prompt or st.session_state.pop("queued_prompt", None)
    if not user_prompt:
        return

    with history:
        st.chat_message("user").markdown(user_prompt)
        with st.chat_message("assistant"):
            placeholder = st.empty()
            placeholder.markdown("_Pensando..._")
            reply = agent.chat(session, user_prompt)
            placeholder.markdown(reply.text)

    if reply.show_recommendations:
        st.session_state.show_recommendations = True
    if reply.season and reply.season != agent.store.snapshot().season:
        st.session_state.suggested_season = reply.season
    st.rerun()


def render_detail(agent: TravelAgent, destination_id: str) -> None:
    st.button("← Voltar", on_click=go_home)
    days_key = st.radio(
        "Duração do roteiro",
        list(DURATION_OPTIONS),
        index=list(DURATION_OPTIONS).index("7-dias"),
        horizontal=True,
        format_func=lambda d: d.replace("-", " "),
    )
    try:
        with st.spinner("Gerando recomendações personalizadas..."):
            detail = agent.render_detail(destination_id, parse_days(days_key))
    except NotFoundError:
        st.header("Destino não encontrado")
        st.write("Não foi possível encontrar o destino solicitado.")
        st.button("Voltar para página inicial", on_click=go_home)
        return
    st.markdown(detail)


st.set_page_config(page_title="ExplorAI", page_icon="🧭", layout="wide")
st.markdown(APP_STYLE, unsafe_allow_html=True)

agent = get_agent()
destination_id = st.query_params.get("destino")

if destination_id:
    render_detail(agent, destination_id)
else:
    st.markdown(
        """
        <div class="hero">
          <h1>Descubra destinos perfeitos para o seu estilo de viagem</h1>
          <p>ExplorAI analisa suas preferências e recomenda lugares que combinam com você.</p>
        </div>
        """,
        unsafe_allow_html=True,
    )
    left, right = st.columns(2)
    with left:
        render_preferences(agent)
        if st.session_state.get("show_recommendations") or agent.store.snapshot().has_selections():
            render_recommendations(agent)
        render_chat_picks(agent)
    with right:
        render_chat(agent)
