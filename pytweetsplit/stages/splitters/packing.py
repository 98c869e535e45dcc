"""Greedy word packing with ``(n/d)`` post prefixes.

The prefix length depends on the number of posts, and the number of posts
depends on how much room the prefix leaves. PackingSplitter resolves this by
reserving ``denom`` digits for the total: a packing pass that reaches a post
index wider than ``denom`` is thrown away and rerun from the start with one
more digit reserved. Each pass is linear in the text length and ``denom``
never exceeds the digit count of ``len(text)``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

from ...constants import WORD_SEPARATOR
from ...errors import ConfigurationError
from ...prefix import format_prefix, prefix_size
from ...runtime.tracing import trace_timing
from ...types import Chunk, Post, Trace
from ..protocols import DocumentResult
from .words import pull_word

if TYPE_CHECKING:
    from ...pipeline_config import PipelineConfig

logger = logging.getLogger(__name__)

ChunkAction = Literal["accept", "break", "stop"]


@dataclass(frozen=True)
class Decision:
    """Outcome of offering one word to a chunk being filled.

    Attributes:
        action: ``accept`` keeps the whole word and keeps pulling, ``break``
            keeps a leading slice of the word and ends the chunk, ``stop``
            ends the chunk without consuming the word.
        chunk_text: The chunk body after the decision.
        consumed: Number of characters of the word taken into the chunk.
    """

    action: ChunkAction
    chunk_text: str
    consumed: int


def decide(chunk_text: str, word: str, capacity: int) -> Decision:
    spacer = WORD_SEPARATOR if chunk_text else ""
    candidate = chunk_text + spacer + word
    if len(candidate) <= capacity:
        return Decision("accept", candidate, len(word))

    room = capacity - len(chunk_text) - len(spacer)
    if len(word) >= capacity and room >= 1:
        # Too long to share a chunk with anything else
        return Decision("break", chunk_text + spacer + word[:room], room)

    return Decision("stop", chunk_text, 0)


def pull_chunk(text: str, pos: int, capacity: int) -> tuple[Chunk, int] | None:
    """Fill one chunk of at most ``capacity`` characters starting at ``pos``.

    Returns the chunk and the position to resume from, or None when no word
    is left at ``pos``.
    """
    if capacity < 1:
        raise ValueError(f"Chunk capacity must be positive, got {capacity}")

    chunk_text = ""
    char_start: int | None = None
    char_end = pos
    breaks_word = False

    while len(chunk_text) < capacity:
        word = pull_word(text, pos, max_len=capacity)
        if word is None:
            break

        decision = decide(chunk_text, word.text, capacity)
        if decision.action == "stop":
            break

        if char_start is None:
            char_start = word.start
        chunk_text = decision.chunk_text

        if decision.action == "accept":
            pos = word.next_pos
            char_end = word.start + len(word.text)
            continue

        pos = word.start + decision.consumed
        char_end = pos
        breaks_word = True
        break

    if char_start is None:
        return None
    chunk = Chunk(
        text=chunk_text,
        char_start=char_start,
        char_end=char_end,
        breaks_word=breaks_word,
    )
    return chunk, pos


class PackingSplitter:
    def split(
        self, doc: DocumentResult, cfg: PipelineConfig, trace: Trace
    ) -> list[Post]:
        text = doc.clean_text
        limit = cfg.limit
        if len(text) <= limit:
            return [self._single_post(text, 0, len(text))]

        chunks: list[Chunk] | None = None
        max_denom = len(str(len(text)))
        for denom in range(1, max_denom + 1):
            with trace_timing(trace, "split", "pack", denom=denom) as details:
                chunks = self.pack(text, limit, denom)
                details["abandoned"] = chunks is None
                details["chunks"] = len(chunks) if chunks is not None else None
            if chunks is not None:
                break
            logger.debug(
                "Post count outgrew %d digit(s); restarting with denom=%d",
                denom,
                denom + 1,
            )
        if chunks is None:
            raise RuntimeError(
                f"Could not fit {len(text)} chars within {max_denom} prefix digits"
            )

        trace.chunks = chunks
        for chunk in chunks:
            if chunk.breaks_word:
                trace.warnings.append(
                    f"Word broken across posts at char {chunk.char_end}"
                )

        with trace_timing(trace, "prefix", "apply", posts=len(chunks)):
            return self._apply_prefixes(chunks)

    def pack(self, text: str, limit: int, denom: int) -> list[Chunk] | None:
        """Run one packing pass, or return None if ``denom`` proves too narrow.

        Raises:
            ConfigurationError: If ``limit`` leaves no room for a body
                character next to the prefix.
        """
        chunks: list[Chunk] = []
        pos = 0
        while True:
            n = len(chunks) + 1
            if len(str(n)) > denom:
                if pull_word(text, pos, max_len=0) is None:
                    break
                return None

            size = prefix_size(n, denom)
            if size >= limit:
                if pull_word(text, pos, max_len=0) is None:
                    break
                raise ConfigurationError(
                    f"A {size}-char post prefix does not fit a {limit}-char limit"
                )

            pulled = pull_chunk(text, pos, limit - size)
            if pulled is None:
                break
            chunk, pos = pulled
            chunks.append(chunk)

        logger.debug("Packed %d chunks with denom=%d", len(chunks), denom)
        return chunks

    def _apply_prefixes(self, chunks: list[Chunk]) -> list[Post]:
        if not chunks:
            return [self._single_post("", 0, 0)]
        if len(chunks) == 1:
            chunk = chunks[0]
            return [
                self._single_post(
                    chunk.text, chunk.char_start, chunk.char_end, chunk.breaks_word
                )
            ]

        total = len(chunks)
        return [
            Post(
                index=n,
                total=total,
                body=chunk.text,
                text=format_prefix(n, total) + chunk.text,
                char_start=chunk.char_start,
                char_end=chunk.char_end,
                breaks_word=chunk.breaks_word,
            )
            for n, chunk in enumerate(chunks, start=1)
        ]

    @staticmethod
    def _single_post(
        text: str, char_start: int, char_end: int, breaks_word: bool = False
    ) -> Post:
        return Post(
            index=1,
            total=1,
            body=text,
            text=text,
            char_start=char_start,
            char_end=char_end,
            breaks_word=breaks_word,
        )
