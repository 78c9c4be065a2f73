"""Terminal chat front-end for the agent chat relay API."""

from __future__ import annotations

import logging
import sys
from typing import List

import requests

from app.core.config import SUGGESTIONS, settings
from app.services.transcript import SessionTranscript

ERROR_REPLY = "Sorry, I encountered an error. Please try again."
EMPTY_REPLY = "No response received"
REQUEST_TIMEOUT_S = 130


class ChatClient:
    """Keeps the session transcript and talks to ``/api/v1`` over HTTP."""

    def __init__(
        self,
        base_url: str,
        logger: logging.Logger,
        http: requests.Session | None = None,
        session_id: str | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.logger = logger
        self.http = http or requests.Session()
        self.transcript = SessionTranscript(session_id)
        self.last_error: str | None = None

    @property
    def show_suggestions(self) -> bool:
        return self.transcript.is_empty()

    def suggestions(self) -> List[str]:
        try:
            res = self.http.get(f"{self.base_url}/api/v1/suggestions", timeout=REQUEST_TIMEOUT_S)
            res.raise_for_status()
            return list(res.json()["suggestions"])
        except (requests.RequestException, ValueError, KeyError) as e:
            self.logger.warning(f"Could not fetch suggestions, using defaults: {e}")
            return list(SUGGESTIONS)

    def send(self, text: str) -> str | None:
        """Send one message and return the assistant turn's content."""
        message = text.strip()
        if not message:
            return None

        self.last_error = None
        self.transcript.add_user(message)
        try:
            res = self.http.post(
                f"{self.base_url}/api/v1/chat",
                json={"message": message, "sessionId": self.transcript.session_id},
                timeout=REQUEST_TIMEOUT_S,
            )
            if not res.ok:
                raise RuntimeError(f"HTTP error! status: {res.status_code}")
            data = res.json()
            if data.get("error"):
                raise RuntimeError(data["error"])
            reply = data.get("response") or EMPTY_REPLY
        except (requests.RequestException, RuntimeError, ValueError) as e:
            self.last_error = str(e) or "An unexpected error occurred"
            self.logger.error(f"Error: {self.last_error}")
            reply = ERROR_REPLY

        self.transcript.add_assistant(reply)
        return reply


def main(argv: List[str] | None = None) -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )
    logger = logging.getLogger("chat_client")
    argv = sys.argv[1:] if argv is None else argv
    client = ChatClient(argv[0] if argv else settings.api_base_url, logger)

    suggestions = client.suggestions()
    print("BioBlend+ FAQ Assistant  (type /quit to exit)")
    while True:
        if client.show_suggestions:
            for i, suggestion in enumerate(suggestions, start=1):
                print(f"  [{i}] {suggestion}")
        try:
            line = input("> ")
        except (EOFError, KeyboardInterrupt):
            break
        if line.strip() == "/quit":
            break
        if client.show_suggestions and line.strip().isdigit():
            index = int(line.strip()) - 1
            if 0 <= index < len(suggestions):
                line = suggestions[index]
                print(f"> {line}")
        reply = client.send(line)
        if reply is None:
            continue
        if client.last_error:
            print(f"! {client.last_error}")
        print(reply)


if __name__ == "__main__":
    main()
