from __future__ import annotations

import logging
from typing import Any, AsyncIterable, Iterable

from app.services.text_normalization import clean_response, has_numbered_list, segment_numbered_list

from .chunk_decoder import decode_chunk
from .payloads import NOT_FOUND, DirectString, InlineResult, NormalizedAnswer, NotFoundType


class StreamReducer:
    """
    Folds an agent completion stream into one answer. Chunks are pulled one
    at a time and the first chunk that decodes to non-blank text wins; the
    rest of the stream is left unread.
    """

    def __init__(self, logger: logging.Logger | None = None):
        self.logger = logger or logging.getLogger(__name__)

    def reduce(self, chunks: Iterable[Any]) -> NormalizedAnswer | NotFoundType:
        position = 0
        for position, chunk in enumerate(chunks, start=1):
            answer = self._step(position, chunk)
            if answer is not None:
                return answer
        self.logger.info("No usable answer in %d chunk(s)", position)
        return NOT_FOUND

    async def areduce(self, chunks: AsyncIterable[Any]) -> NormalizedAnswer | NotFoundType:
        position = 0
        async for chunk in chunks:
            position += 1
            answer = self._step(position, chunk)
            if answer is not None:
                return answer
        self.logger.info("No usable answer in %d chunk(s)", position)
        return NOT_FOUND

    def _step(self, position: int, chunk: Any) -> NormalizedAnswer | None:
        body = getattr(chunk, "body", None)
        if not body:
            self.logger.debug("Chunk %d has no body, skipping", position)
            return None

        payload = decode_chunk(body)
        if isinstance(payload, (InlineResult, DirectString)):
            answer = finalize_answer(payload.text)
            if not answer.text.strip():
                self.logger.debug("Chunk %d decoded to blank text, skipping", position)
                return None
            self.logger.debug("Chunk %d decoded as %s", position, type(payload).__name__)
            return answer

        self.logger.debug("Chunk %d unrecognized: %s", position, payload.reason)
        return None


def finalize_answer(text: str) -> NormalizedAnswer:
    """Clean decoded text and re-segment run-on numbered lists."""

    cleaned = clean_response(text)
    if has_numbered_list(cleaned):
        return NormalizedAnswer(segment_numbered_list(cleaned), is_list=True)
    return NormalizedAnswer(cleaned)


def reduce_stream(chunks: Iterable[Any], logger: logging.Logger | None = None):
    return StreamReducer(logger).reduce(chunks)


async def reduce_stream_async(chunks: AsyncIterable[Any], logger: logging.Logger | None = None):
    return await StreamReducer(logger).areduce(chunks)
