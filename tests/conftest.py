from __future__ import annotations

import base64
import json

import pytest

from app.core.config import settings


class FakeAgentRuntime:
    """Stands in for the boto3 ``bedrock-agent-runtime`` client."""

    def __init__(self, completion=None, error: Exception | None = None):
        self.completion = completion
        self.error = error
        self.calls: list[dict] = []

    def invoke_agent(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return {"completion": self.completion, "sessionId": kwargs.get("sessionId")}


def envelope(payload: str) -> bytes:
    """Event-stream style frame carrying ``payload`` as base64 ``bytes``."""
    encoded = base64.b64encode(payload.encode("utf-8")).decode("ascii")
    return json.dumps({"bytes": encoded}).encode("utf-8")


@pytest.fixture(autouse=True)
def agent_settings(monkeypatch):
    monkeypatch.setattr(settings, "agent_id", "AGENT123")
    monkeypatch.setattr(settings, "agent_alias_id", "ALIAS456")
    yield settings
