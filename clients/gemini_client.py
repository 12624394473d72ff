# clients/gemini_client.py
from __future__ import annotations
import logging
import os
from typing import Any, Dict, Optional

import requests

from utils.errors import ConfigurationError, MalformedResponseError, TransportError

logger = logging.getLogger(__name__)

BASE_URL = "https://generativelanguage.googleapis.com/v1beta/models"
DEFAULT_MODEL = "gemini-1.5-flash-latest"

GENERATION_CONFIG = {
    "temperature": 0.7,
    "topP": 0.8,
    "topK": 40,
    "maxOutputTokens": 500,
}

class GeminiClient:
    """
    Calls the Gemini generateContent REST endpoint.
    One attempt per call; the timeout bounds how long a chat turn can hang.
    """

    def __init__(self, api_key: Optional[str] = None, model: Optional[str] = None, timeout: Optional[float] = None):
        self.api_key = api_key if api_key is not None else os.getenv("GEMINI_API_KEY", "")
        self.model = model or os.getenv("GEMINI_MODEL", DEFAULT_MODEL)
        self.timeout = timeout if timeout is not None else float(os.getenv("LLM_TIMEOUT", "30"))

    def enabled(self) -> bool:
        return bool(self.api_key and self.api_key.strip())

    def generate(self, prompt: str, system_prompt: Optional[str] = None) -> str:
        if not self.enabled():
            raise ConfigurationError("GEMINI_API_KEY is missing. Set it in .env.")

        logger.debug("Calling Gemini model %s", self.model)
        full_prompt = f"{system_prompt}\n\n{prompt}" if system_prompt else prompt
        url = f"{BASE_URL}/{self.model}:generateContent"
        body = {
            "contents": [{"parts": [{"text": full_prompt}]}],
            "generationConfig": GENERATION_CONFIG,
        }
        try:
            res = requests.post(url, params={"key": self.api_key}, json=body, timeout=self.timeout)
            res.raise_for_status()
        except requests.RequestException as exc:
            status = getattr(getattr(exc, "response", None), "status_code", None)
            raise TransportError(f"Gemini request failed (status={status})") from exc

        try:
            data = res.json()
        except ValueError as exc:
            raise MalformedResponseError("Gemini returned a non-JSON body") from exc
        return self._extract_text(data)

    def _extract_text(self, data: Dict[str, Any]) -> str:
        try:
            text = data["candidates"][0]["content"]["parts"][0]["text"]
        except (KeyError, IndexError, TypeError) as exc:
            raise MalformedResponseError("Gemini response has no candidate text") from exc
        if not isinstance(text, str) or not text.strip():
            raise MalformedResponseError("Gemini returned empty text")
        return text
