# models/chat.py
from __future__ import annotations
import uuid
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Deque, List, Optional

HISTORY_LIMIT = 20


class Intent(str, Enum):
    GREETING = "greeting"
    ASK_DESTINATIONS = "ask_destinations"
    ASK_BUDGET = "ask_budget"
    ASK_DURATION = "ask_duration"
    SHARE_PREFERENCES = "share_preferences"
    OTHER = "other"


@dataclass
class ChatMessage:
    role: str  # "user" or "assistant"
    content: str
    timestamp: datetime = field(default_factory=datetime.now)
    id: str = field(default_factory=lambda: uuid.uuid4().hex)


@dataclass
class ChatReply:
    text: str
    intent: Intent = Intent.OTHER
    show_recommendations: bool = False
    # season of a month named in the message; offered to the user, never applied
    season: Optional[str] = None
    failed: bool = False


@dataclass
class ChatSession:
    """
    Chat state owned by one browser session.
    History is a ring buffer; older turns fall off once the limit is reached.
    """

    history: Deque[ChatMessage] = field(default_factory=lambda: deque(maxlen=HISTORY_LIMIT))
    pending: bool = False
    last_fallback: Optional[str] = None

    def add(self, role: str, content: str) -> ChatMessage:
        message = ChatMessage(role=role, content=content)
        self.history.append(message)
        return message

    def recent(self, n: int) -> List[ChatMessage]:
        if n <= 0:
            return []
        return list(self.history)[-n:]
