"""In-memory conversation transcript for a single chat session."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import List, Tuple


class Role(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"


@dataclass(frozen=True)
class ChatTurn:
    role: Role
    content: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


def new_session_id() -> str:
    """Opaque session identifier in the form the web client used: ``web-session-<ms>``."""
    return f"web-session-{int(time.time() * 1000)}"


class SessionTranscript:
    """Ordered list of turns; lives only as long as the session object."""

    def __init__(self, session_id: str | None = None) -> None:
        self.session_id = session_id or new_session_id()
        self._turns: List[ChatTurn] = []

    def add_user(self, content: str) -> ChatTurn:
        return self._append(Role.USER, content)

    def add_assistant(self, content: str) -> ChatTurn:
        return self._append(Role.ASSISTANT, content)

    def _append(self, role: Role, content: str) -> ChatTurn:
        turn = ChatTurn(role=role, content=content)
        self._turns.append(turn)
        return turn

    @property
    def turns(self) -> Tuple[ChatTurn, ...]:
        return tuple(self._turns)

    def is_empty(self) -> bool:
        return not self._turns

    def __len__(self) -> int:
        return len(self._turns)
