# utils/errors.py
from __future__ import annotations


class ExplorAIError(Exception):
    """Base class for every error raised by the app."""


class ConfigurationError(ExplorAIError):
    """The language model credential is missing. Permanent, never retried."""


class TransportError(ExplorAIError):
    """Network failure or non-success status from the language model."""


class MalformedResponseError(ExplorAIError):
    """The model answered but the expected text or structure is missing."""


class NotFoundError(ExplorAIError):
    def __init__(self, destination_id: str):
        super().__init__(f"Destination not found: {destination_id}")
        self.destination_id = destination_id
