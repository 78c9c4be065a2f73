"""Decoding ladder for a single raw chunk of an agent completion stream.

Agent transports mix three framings inside one deployment:

* an event-stream envelope ``{"bytes": "<base64>"}`` whose payload is either
  ``{"result": "..."}`` or the answer text itself,
* flat JSON ``{"result": "..."}``,
* a bare JSON string, or plain text that is not JSON at all.

Every rung is a total function; a failure moves on to the next rung instead of
raising, so callers never see decode errors.
"""

from __future__ import annotations

import base64
import binascii
import json
from typing import Any

from .payloads import Bytes, DecodedPayload, DirectString, InlineResult, Unrecognized


def _result_text(value: Any) -> str:
    return value if isinstance(value, str) else str(value)


def _parse_json(text: str) -> tuple[bool, Any]:
    try:
        return True, json.loads(text)
    except (ValueError, RecursionError):
        return False, None


def decode_envelope(parsed: Any) -> DecodedPayload:
    """Classify an already-parsed JSON value without expanding base64."""

    if isinstance(parsed, dict):
        if "bytes" in parsed and isinstance(parsed["bytes"], str):
            return Bytes(parsed["bytes"])
        if parsed.get("result") is not None:
            return InlineResult(_result_text(parsed["result"]))
        return Unrecognized("json object without bytes or result")
    if isinstance(parsed, str):
        return DirectString(parsed)
    return Unrecognized(f"unexpected json value of type {type(parsed).__name__}")


def expand_bytes(payload: Bytes, raw_text: str) -> DecodedPayload:
    """Decode the base64 payload of an envelope into an inline result.

    Falls back to the raw chunk text when the payload is not valid base64 or
    not UTF-8, so a damaged frame still surfaces something.
    """

    try:
        decoded = base64.b64decode(payload.b64, validate=True).decode("utf-8")
    except (binascii.Error, ValueError):
        return DirectString(raw_text)

    ok, inner = _parse_json(decoded)
    if ok and isinstance(inner, dict) and inner.get("result") is not None:
        return InlineResult(_result_text(inner["result"]))
    return InlineResult(decoded)


def decode_chunk(body: bytes) -> DecodedPayload:
    """Interpret one chunk body, never raising."""

    if not isinstance(body, (bytes, bytearray, memoryview)):
        return Unrecognized(f"chunk body is {type(body).__name__}, not bytes")
    try:
        raw_text = bytes(body).decode("utf-8")
    except UnicodeDecodeError as exc:
        return Unrecognized(f"chunk is not utf-8: {exc}")

    ok, parsed = _parse_json(raw_text)
    if not ok:
        return DirectString(raw_text)

    payload = decode_envelope(parsed)
    if isinstance(payload, Bytes):
        return expand_bytes(payload, raw_text)
    return payload
