# clients/ollama_client.py
from __future__ import annotations
import logging
import os
from typing import Dict, List, Optional

import ollama

from utils.errors import MalformedResponseError, TransportError

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "llama3"

class OllamaClient:
    """Local model backend. Same contract as GeminiClient.generate."""

    def __init__(self, model: Optional[str] = None, host: Optional[str] = None, timeout: Optional[float] = None):
        self.model = model or os.getenv("OLLAMA_MODEL", DEFAULT_MODEL)
        timeout = timeout if timeout is not None else float(os.getenv("LLM_TIMEOUT", "30"))
        self.client = ollama.Client(host=host or os.getenv("OLLAMA_HOST"), timeout=timeout)

    def enabled(self) -> bool:
        return True

    def generate(self, prompt: str, system_prompt: Optional[str] = None) -> str:
        messages: List[Dict[str, str]] = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt.strip()})
        messages.append({"role": "user", "content": prompt})
        logger.debug("Calling Ollama model %s", self.model)

        try:
            response = self.client.chat(model=self.model, messages=messages)
        except Exception as exc:
            raise TransportError(f"Ollama chat failed: {exc}") from exc

        content = (response.get("message", {}).get("content") or "").strip()
        if not content:
            raise MalformedResponseError("Empty model response.")
        return content
