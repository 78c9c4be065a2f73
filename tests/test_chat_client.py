from __future__ import annotations

import dataclasses
import logging

import pytest
import requests

from app.core.config import SUGGESTIONS
from app.services.transcript import ChatTurn, Role, SessionTranscript
from chatbot.chat_client import ERROR_REPLY, ChatClient

logger = logging.getLogger("test-chat-client")


class _FakeResponse:
    def __init__(self, status_code: int, payload):
        self.status_code = status_code
        self._payload = payload

    @property
    def ok(self) -> bool:
        return self.status_code < 400

    def json(self):
        return self._payload

    def raise_for_status(self):
        if not self.ok:
            raise requests.HTTPError(f"{self.status_code}")


class _FakeHttp:
    def __init__(self, response=None, error: Exception | None = None):
        self.response = response
        self.error = error
        self.posts: list[tuple[str, dict]] = []

    def post(self, url, json=None, timeout=None):
        self.posts.append((url, json))
        if self.error is not None:
            raise self.error
        return self.response

    def get(self, url, timeout=None):
        if self.error is not None:
            raise self.error
        return self.response


def test_send_records_both_turns():
    http = _FakeHttp(_FakeResponse(200, {"response": "Bangkok is great"}))
    chat = ChatClient("http://api/", logger, http=http, session_id="web-session-1")

    assert chat.show_suggestions
    assert chat.send("  Where to go?  ") == "Bangkok is great"

    assert http.posts == [
        ("http://api/api/v1/chat", {"message": "Where to go?", "sessionId": "web-session-1"})
    ]
    assert [(t.role, t.content) for t in chat.transcript.turns] == [
        (Role.USER, "Where to go?"),
        (Role.ASSISTANT, "Bangkok is great"),
    ]
    assert not chat.show_suggestions
    assert chat.last_error is None


def test_send_ignores_blank_input():
    http = _FakeHttp(_FakeResponse(200, {"response": "unused"}))
    chat = ChatClient("http://api", logger, http=http)
    assert chat.send("   ") is None
    assert http.posts == []
    assert chat.transcript.is_empty()


def test_send_reports_api_errors():
    http = _FakeHttp(_FakeResponse(400, {"error": "Couldn't generate a meaningful response"}))
    chat = ChatClient("http://api", logger, http=http)
    assert chat.send("hi") == ERROR_REPLY
    assert chat.last_error == "HTTP error! status: 400"


def test_send_reports_error_field_and_transport_failures():
    chat = ChatClient("http://api", logger, http=_FakeHttp(_FakeResponse(200, {"error": "boom"})))
    assert chat.send("hi") == ERROR_REPLY
    assert chat.last_error == "boom"

    chat = ChatClient("http://api", logger, http=_FakeHttp(error=requests.ConnectionError("refused")))
    assert chat.send("hi") == ERROR_REPLY
    assert chat.last_error == "refused"
    assert len(chat.transcript) == 2


def test_send_without_response_field():
    chat = ChatClient("http://api", logger, http=_FakeHttp(_FakeResponse(200, {})))
    assert chat.send("hi") == "No response received"


def test_suggestions_fall_back_to_defaults():
    chat = ChatClient("http://api", logger, http=_FakeHttp(error=requests.Timeout("slow")))
    assert chat.suggestions() == SUGGESTIONS

    chat = ChatClient("http://api", logger, http=_FakeHttp(_FakeResponse(200, {"suggestions": ["a"]})))
    assert chat.suggestions() == ["a"]


def test_transcript_generates_session_ids_and_freezes_turns():
    transcript = SessionTranscript()
    assert transcript.session_id.startswith("web-session-")
    turn = transcript.add_user("hello")
    assert isinstance(turn, ChatTurn)
    assert turn.created_at.tzinfo is not None
    with pytest.raises(dataclasses.FrozenInstanceError):
        turn.content = "changed"
    assert transcript.turns[0].content == "hello"
