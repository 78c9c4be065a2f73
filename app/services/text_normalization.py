"""Utilities for turning raw agent output into display-ready text."""

from __future__ import annotations

import re
from typing import List

# Agents that echo their system instruction put it before the answer
INSTRUCTION_ENVELOPE_PATTERN = re.compile(r'"instruction":"[^"]*","result":')

# A single leading {" or "
LEADING_WRAPPER_PATTERN = re.compile(r'\A\{?"')

# A single trailing "} or " unless an odd run of backslashes escapes it
TRAILING_WRAPPER_PATTERN = re.compile(r'(?<!\\)((?:\\\\)*)"\}?\Z')

NUMBERED_LINE_PATTERN = re.compile(r"^\d+\.", re.MULTILINE)

# Split before "12." but never between "1" and "2."
NUMBERED_MARKER_SPLIT = re.compile(r"(?<!\d)(?=\d+\.)")


def clean_response(text: str | None) -> str:
    """Strip JSON envelope fragments and escaping from a raw answer fragment."""

    if not text:
        return ""

    cleaned = INSTRUCTION_ENVELOPE_PATTERN.sub("", str(text), count=1)
    cleaned = LEADING_WRAPPER_PATTERN.sub("", cleaned)
    cleaned = TRAILING_WRAPPER_PATTERN.sub(r"\1", cleaned)
    cleaned = cleaned.replace('\\"', '"')
    cleaned = cleaned.replace("\\\\", "\\")
    return cleaned


def has_numbered_list(text: str) -> bool:
    """Return True when some line of ``text`` starts with a ``<number>.`` marker."""

    return bool(NUMBERED_LINE_PATTERN.search(text))


def split_numbered_items(text: str) -> List[str]:
    """Split ``text`` before every numbered marker, dropping blank segments."""

    items: List[str] = []
    for segment in NUMBERED_MARKER_SPLIT.split(text):
        segment = segment.strip()
        if segment:
            items.append(segment)
    return items


def segment_numbered_list(text: str) -> str:
    """Put each item of a run-on numbered list into its own paragraph.

    Text without a line starting with ``<number>.`` is returned unchanged.
    This is a textual heuristic: a line that begins with a decimal such as
    ``3.50`` is treated as a list marker too.
    """

    if not has_numbered_list(text):
        return text
    return "\n\n".join(split_numbered_items(text))
