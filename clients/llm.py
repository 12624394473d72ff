# clients/llm.py
from __future__ import annotations
import logging
import os
from typing import Optional, Protocol

from dotenv import load_dotenv

from clients.gemini_client import GeminiClient
from clients.ollama_client import OllamaClient

logger = logging.getLogger(__name__)


class Collaborator(Protocol):
    def generate(self, prompt: str, system_prompt: Optional[str] = None) -> str:
        ...


def build_collaborator(provider: Optional[str] = None) -> Collaborator:
    """Pick the language model backend from LLM_PROVIDER (gemini by default)."""
    load_dotenv()
    name = (provider or os.getenv("LLM_PROVIDER") or "gemini").strip().lower()
    if name == "ollama":
        logger.info("Using Ollama backend")
        return OllamaClient()
    if name != "gemini":
        logger.warning("Unknown LLM_PROVIDER %r, falling back to gemini", name)
    return GeminiClient()
