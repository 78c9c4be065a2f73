from __future__ import annotations
from typing import List
from app.core.config import SUGGESTIONS
from app.services.agent_chat.dispatcher import DispatchResult, ResponseDispatcher


def chat(dispatcher: ResponseDispatcher, message: str, session_id: str) -> DispatchResult:
    """Forward a chat message to the agent and normalize its reply."""
    return dispatcher.dispatch(message, session_id)

def suggestions() -> List[str]:
    """Starter questions shown before the first message of a session."""
    return list(SUGGESTIONS)
