"""Turns agent completions into the client-facing success/error result."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from app.core.config import EMPTY_MESSAGE, NO_MEANINGFUL_RESPONSE, PROCESSING_ERROR
from app.services.text_normalization import clean_response
from .bedrock_client import BedrockAgentClient
from .payloads import NOT_FOUND, Completion, NormalizedAnswer, NotFoundType
from .stream_reducer import StreamReducer


@dataclass(frozen=True)
class DispatchResult:
    status_code: int
    response: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_payload(self) -> dict[str, str]:
        if self.error is not None:
            return {"error": self.error}
        return {"response": self.response or ""}

    @classmethod
    def success(cls, response: str) -> "DispatchResult":
        return cls(status_code=200, response=response)

    @classmethod
    def client_error(cls, message: str) -> "DispatchResult":
        return cls(status_code=400, error=message)

    @classmethod
    def server_error(cls, message: str = PROCESSING_ERROR) -> "DispatchResult":
        return cls(status_code=500, error=message)


def build_result(answer: NormalizedAnswer | NotFoundType | str | None) -> DispatchResult:
    """Map the normalized answer to a success, or a 400 when nothing usable came back."""
    if answer is NOT_FOUND or answer is None:
        return DispatchResult.client_error(NO_MEANINGFUL_RESPONSE)
    text = answer.text if isinstance(answer, NormalizedAnswer) else answer
    if not text.strip():
        return DispatchResult.client_error(NO_MEANINGFUL_RESPONSE)
    return DispatchResult.success(text.strip())


class ResponseDispatcher:
    """Validates input, calls the agent and normalizes whatever it returns."""

    def __init__(self, logger: logging.Logger, client: BedrockAgentClient | None = None) -> None:
        self.logger = logger
        self.client = client or BedrockAgentClient(logger)
        self.reducer = StreamReducer(logger)

    # ----------------------- Public API -----------------------
    def dispatch(self, message: str, session_id: str) -> DispatchResult:
        text = (message or "").strip()
        if not text:
            return DispatchResult.client_error(EMPTY_MESSAGE)

        request = self.client.build_request(session_id, text)
        try:
            response = self.client.invoke(request)
        except Exception:
            self.logger.exception("Error processing message for session %s", session_id)
            return DispatchResult.server_error()
        return self.handle(response.completion)

    def normalize_completion(self, completion: Completion) -> NormalizedAnswer | NotFoundType:
        if completion is None:
            return NOT_FOUND
        if isinstance(completion, str):
            return NormalizedAnswer(clean_response(completion))
        if hasattr(completion, "__aiter__"):
            raise TypeError("async completion streams need anormalize_completion")
        return self.reducer.reduce(completion)

    async def anormalize_completion(self, completion: Completion | Any) -> NormalizedAnswer | NotFoundType:
        if hasattr(completion, "__aiter__"):
            return await self.reducer.areduce(completion)
        return self.normalize_completion(completion)

    async def ahandle(self, completion: Completion) -> DispatchResult:
        """Async counterpart of the normalization step for streams consumed with ``async for``."""
        try:
            answer = await self.anormalize_completion(completion)
        except Exception:
            self.logger.exception("Error reading agent completion stream")
            return DispatchResult.server_error()
        return build_result(answer)

    def handle(self, completion: Completion) -> DispatchResult:
        try:
            answer = self.normalize_completion(completion)
        except Exception:
            self.logger.exception("Error reading agent completion stream")
            return DispatchResult.server_error()
        return build_result(answer)
