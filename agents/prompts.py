# agents/prompts.py
from __future__ import annotations
from typing import List, Optional, Sequence

from models.chat import ChatMessage, Intent
from models.destination import Destination
from models.preferences import UserPreferences
from utils.date_parser import SEASON_LABELS
from utils.money import format_brl

ASSISTANT_NAME = "ExplorAI"

GREETING = (
    "Olá! Sou o ExplorAI, seu assistente de viagens personalizadas. "
    "Como posso ajudar você a encontrar seu próximo destino?"
)

QUICK_SUGGESTIONS = [
    "Quais destinos você recomenda para amantes de gastronomia?",
    "Estou procurando lugares com natureza exuberante.",
    "Quero conhecer destinos com rica história e cultura.",
    "Sugira um destino para relaxar em praias paradisíacas.",
]

CHAT_GUIDELINES = """
DIRETRIZES:
- Seja amigável, entusiástico e prestativo
- Use emojis ocasionalmente para deixar a conversa mais natural
- Forneça recomendações específicas e detalhadas
- Considere sempre as preferências do usuário
- Se não houver preferências definidas, incentive o usuário a configurá-las
- Mantenha respostas concisas mas informativas (máximo 200 palavras)
- Foque em destinos que realmente combinem com o perfil do usuário
- Seja conversacional e natural, como se fosse um consultor de viagens experiente
"""


# What the reply should focus on, by intent of the latest message.
INTENT_HINTS = {
    Intent.GREETING: "O usuário cumprimentou: responda brevemente e pergunte sobre as preferências de viagem.",
    Intent.ASK_DESTINATIONS: "O usuário quer sugestões: cite até 3 destinos do catálogo e explique por que combinam com ele.",
    Intent.ASK_BUDGET: "O usuário perguntou sobre custos: dê valores aproximados em reais por pessoa.",
    Intent.ASK_DURATION: "O usuário perguntou sobre duração: sugira quantos dias ficar em cada destino citado.",
    Intent.SHARE_PREFERENCES: "O usuário contou o que gosta: relacione isso aos destinos do catálogo.",
}


def _budget_line(prefs: UserPreferences) -> str:
    if prefs.budget_value:
        return f"{prefs.budget} ({format_brl(prefs.budget_value)})"
    return prefs.budget


def chat_system_prompt(
    prefs: UserPreferences,
    top_matches: Optional[Sequence[Destination]] = None,
    intent: Optional[Intent] = None,
    mentioned_season: Optional[str] = None,
) -> str:
    lines = [
        "Você é o ExplorAI, um assistente especializado em recomendações de viagem personalizadas.",
        "",
        "INFORMAÇÕES DO USUÁRIO:",
        f"- Interesses: {', '.join(prefs.interests) or 'Não definidos'}",
        f"- Atividades preferidas: {', '.join(prefs.preferred_activities) or 'Não definidas'}",
        f"- Estilo de viagem: {prefs.travel_style}",
        f"- Orçamento: {_budget_line(prefs)}",
        f"- Duração preferida: {prefs.duration or 'Não definida'}",
        f"- Época preferida: {prefs.season or 'Qualquer'}",
    ]
    if top_matches:
        lines.append("")
        lines.append("DESTINOS MAIS COMPATÍVEIS NO CATÁLOGO:")
        lines.extend(f"- {d.name}, {d.country}" for d in top_matches)
    if mentioned_season:
        lines.append("")
        lines.append(f"ÉPOCA MENCIONADA NA CONVERSA: {SEASON_LABELS.get(mentioned_season, mentioned_season)}")
    hint = INTENT_HINTS.get(intent)
    if hint:
        lines.append("")
        lines.append(f"FOCO DA RESPOSTA: {hint}")
    return "\n".join(lines) + "\n" + CHAT_GUIDELINES.rstrip()


def conversation_prompt(history: Sequence[ChatMessage], user_text: str) -> str:
    turns = [
        f"{'Usuário' if m.role == 'user' else ASSISTANT_NAME}: {m.content}"
        for m in history
    ]
    turns.append(f"\nUsuário: {user_text}\n\n{ASSISTANT_NAME}:")
    return "\n".join(turns)


def chat_recommendation_prompt(
    history: Sequence[ChatMessage],
    prefs: UserPreferences,
    catalog: Sequence[Destination],
) -> str:
    conversation = "\n".join(f"{m.role}: {m.content}" for m in history)
    destinations: List[str] = [f"{d.id}: {d.name}, {d.country} - {d.description[:100]}..." for d in catalog]
    return f"""Baseado na conversa e preferências do usuário, selecione os 3 destinos mais adequados da lista disponível.

CONVERSA RECENTE:
{conversation}

PREFERÊNCIAS DO USUÁRIO:
- Interesses: {', '.join(prefs.interests) or 'Não definidos'}
- Atividades: {', '.join(prefs.preferred_activities) or 'Não definidas'}
- Estilo: {prefs.travel_style}
- Orçamento: {prefs.budget}

DESTINOS DISPONÍVEIS:
{chr(10).join(destinations)}

Responda com uma lista de IDs separados por vírgula dos 3 destinos mais adequados (exemplo: dest-001,dest-003,dest-005).
Considere a conversa recente e as preferências para fazer as melhores recomendações.

Responda APENAS com os IDs separados por vírgula, sem texto adicional."""


def destination_prompt(dest: Destination, budget_value: Optional[float] = None) -> str:
    budget = format_brl(budget_value) if budget_value else "Não informado"
    return f"""Você é um especialista em turismo para {dest.name}, {dest.country}.

SOBRE O DESTINO:
{dest.description}

ORÇAMENTO DO USUÁRIO: {budget}

TAREFA:
Crie um roteiro de viagem detalhado para {dest.name} considerando o orçamento informado. Inclua:

1. **Duração sugerida**: quantos dias seria ideal
2. **Principais atrações**: 4-5 pontos turísticos imperdíveis
3. **Experiências locais**: atividades autênticas da região
4. **Gastronomia**: pratos típicos e restaurantes recomendados
5. **Custos aproximados**: valores em reais para cada categoria (hospedagem, alimentação, atrações, transporte)
6. **Dicas práticas**: melhor época para visitar, documentação necessária, etc.

Seja específico com preços e recomendações práticas. Adapte as sugestões ao orçamento disponível.
Formato: Use markdown para organizar bem o conteúdo com títulos e listas.
Máximo: 600 palavras."""


def itinerary_prompt(dest: Destination, days: int) -> str:
    return f"""Crie um itinerário detalhado de {days} dias para {dest.name}, {dest.country}.

Para cada dia, forneça:
- Atividades para manhã, tarde e noite
- Locais turísticos reais e específicos da cidade
- Descrições práticas das atividades

Formato de resposta JSON:
[
  {{
    "day": 1,
    "activities": [
      {{"time": "Manhã", "activity": "Nome específico do local/atividade", "description": "Descrição detalhada"}},
      {{"time": "Tarde", "activity": "Nome específico do local/atividade", "description": "Descrição detalhada"}},
      {{"time": "Noite", "activity": "Nome específico do local/atividade", "description": "Descrição detalhada"}}
    ]
  }}
]

Responda APENAS com o JSON válido, sem texto adicional."""


def attractions_prompt(dest: Destination) -> str:
    return f"""Liste as 5 principais atrações turísticas de {dest.name}, {dest.country}.

Para cada atração, forneça:
- Nome real e específico
- Descrição detalhada
- Avaliação de 1-5 (baseada na popularidade e qualidade)
- Categoria (histórico, cultural, natureza, etc.)

Formato de resposta JSON:
[
  {{
    "name": "Nome real da atração",
    "description": "Descrição detalhada da atração, sua importância e o que esperar",
    "rating": 4.5,
    "category": "histórico"
  }}
]

Use atrações reais e bem conhecidas. Responda APENAS com o JSON válido, sem texto adicional."""


def tips_prompt(dest: Destination) -> str:
    return f"""Forneça dicas práticas de viagem para {dest.name}, {dest.country}.

Inclua informações sobre:
- Melhor época para visitar
- Transporte local
- Documentação necessária
- Dicas culturais

Formato de resposta JSON:
{{
  "whenToGo": "Informações sobre melhor época, clima e estações",
  "transportation": "Opções de transporte local, preços aproximados",
  "documentation": "Documentos necessários, vistos, vacinas",
  "culturalTips": "Costumes locais, etiqueta, dicas para respeitar a cultura"
}}

Responda APENAS com o JSON válido, sem texto adicional."""
