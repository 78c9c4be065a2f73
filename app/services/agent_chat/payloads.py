"""Value types passed between the agent client and the normalization pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, AsyncIterable, Iterable, Union


class NotFoundType(Enum):
    NOT_FOUND = "not_found"

    def __repr__(self) -> str:
        return self.name


# Returned by the reducer when no chunk produced a usable answer
NOT_FOUND = NotFoundType.NOT_FOUND


@dataclass(frozen=True)
class RawChunk:
    """One element of the agent's completion stream."""

    body: bytes | None = None


@dataclass(frozen=True)
class Bytes:
    """Base64 payload found in an event-stream envelope, not yet expanded."""

    b64: str


@dataclass(frozen=True)
class InlineResult:
    text: str


@dataclass(frozen=True)
class DirectString:
    text: str


@dataclass(frozen=True)
class Unrecognized:
    reason: str = ""


DecodedPayload = Union[Bytes, InlineResult, DirectString, Unrecognized]


@dataclass(frozen=True)
class NormalizedAnswer:
    """Cleaned answer text; ``is_list`` is set when list items were re-segmented."""

    text: str
    is_list: bool = False


@dataclass(frozen=True)
class AgentRequest:
    agent_id: str
    agent_alias_id: str
    session_id: str
    input_text: str

    def to_invoke_kwargs(self) -> dict[str, str]:
        """Keyword arguments for ``bedrock-agent-runtime`` ``invoke_agent``."""
        return {
            "agentId": self.agent_id,
            "agentAliasId": self.agent_alias_id,
            "sessionId": self.session_id,
            "inputText": self.input_text,
        }


Completion = Union[str, Iterable[Any], AsyncIterable[Any], None]


@dataclass
class AgentResponse:
    completion: Completion = None
