"""Client wrapper for invoking an AWS Bedrock agent."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Iterator

import boto3
from botocore.config import Config
from dotenv import load_dotenv

from app.core.config import settings
from .payloads import AgentRequest, AgentResponse, RawChunk


class BedrockAgentClient:
    """Encapsulates the bedrock-agent-runtime ``invoke_agent`` call."""

    def __init__(self, logger: logging.Logger, client: Any | None = None) -> None:
        load_dotenv()
        self.logger = logger
        self.agent_id = settings.agent_id or ""
        self.agent_alias_id = settings.agent_alias_id or ""
        if self.agent_id and self.agent_alias_id:
            self.logger.info("Bedrock agent %s (alias %s) configured.", self.agent_id, self.agent_alias_id)
        else:
            self.logger.warning("WARNING: AGENT_ID or AGENT_ALIAS_ID not found in settings or environment.")
        self._client = client if client is not None else self._build_client()

    @staticmethod
    def _build_client():
        config = Config(
            connect_timeout=settings.agent_connect_timeout,
            read_timeout=settings.agent_read_timeout,
            retries={"max_attempts": settings.agent_max_attempts},
        )
        return boto3.client(
            "bedrock-agent-runtime",
            region_name=settings.aws_region,
            aws_access_key_id=settings.aws_access_key_id,
            aws_secret_access_key=settings.aws_secret_access_key,
            config=config,
        )

    def build_request(self, session_id: str, input_text: str) -> AgentRequest:
        return AgentRequest(
            agent_id=self.agent_id,
            agent_alias_id=self.agent_alias_id,
            session_id=session_id,
            input_text=input_text.strip(),
        )

    def invoke(self, request: AgentRequest) -> AgentResponse:
        """Call the agent; a streamed completion is exposed lazily as raw chunks."""
        self.logger.debug("Invoking agent for session %s", request.session_id)
        response = self._client.invoke_agent(**request.to_invoke_kwargs())
        completion = response.get("completion")
        if completion is None or isinstance(completion, str):
            return AgentResponse(completion=completion)
        return AgentResponse(completion=iter_raw_chunks(completion))


def iter_raw_chunks(events: Iterable[dict]) -> Iterator[RawChunk]:
    """Map event-stream events to chunks; events other than ``chunk`` carry no body."""
    for event in events:
        chunk = event.get("chunk") if isinstance(event, dict) else None
        yield RawChunk(body=(chunk or {}).get("bytes"))
