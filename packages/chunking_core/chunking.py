from __future__ import annotations

import logging
from typing import List

from .models import Chunk
from .segmentation import iter_paragraphs, split_sentences
from .tokens import CHARS_PER_TOKEN, estimate_tokens

_log = logging.getLogger(__name__)

DEFAULT_MAX_TOKENS = 500
DEFAULT_OVERLAP_TOKENS = 50

PARAGRAPH_SEPARATOR = "\n\n"
SENTENCE_SEPARATOR = " "


class _ChunkBuilder:
    """
    Accumulation state for a single ``chunk_text`` call.

    Holds the growing text buffer and the chunks emitted so far. A new
    builder is created per call, so nothing is shared between invocations.
    """

    def __init__(self, source: str, max_tokens: int, overlap_tokens: int) -> None:
        self.source = source
        self.max_tokens = max_tokens
        self.overlap_chars = max(overlap_tokens, 0) * CHARS_PER_TOKEN
        self.buffer = ""
        # True once text beyond the overlap seed has been appended.
        self.pending = False
        self.chunks: list[Chunk] = []

    def has_content(self) -> bool:
        return self.pending and bool(self.buffer.strip())

    def would_overflow(self, text: str) -> bool:
        return estimate_tokens(self.buffer + text) > self.max_tokens

    def append(self, text: str, separator: str) -> None:
        self.buffer += text + separator
        self.pending = True

    def flush(self, separator: str) -> None:
        """Emit the buffer as a chunk and reseed it with the overlap tail."""
        if not self.has_content():
            return

        position = len(self.chunks)
        chunk = Chunk(
            id=f"{self.source}_chunk_{position}",
            content=self.buffer.strip(),
            token_count=estimate_tokens(self.buffer),
            source=self.source,
            position=position,
        )
        self.chunks.append(chunk)
        _log.debug("Flushed chunk %s (%d tokens)", chunk.id, chunk.token_count)

        # Character-based tail; a tail longer than the buffer keeps all of it.
        if self.overlap_chars > 0:
            self.buffer = self.buffer[-self.overlap_chars :] + separator
        else:
            self.buffer = ""
        self.pending = False

    def add_paragraph(self, paragraph: str) -> None:
        if estimate_tokens(paragraph) > self.max_tokens:
            self.flush(PARAGRAPH_SEPARATOR)
            for sentence in split_sentences(paragraph):
                if self.would_overflow(sentence):
                    self.flush(SENTENCE_SEPARATOR)
                self.append(sentence, SENTENCE_SEPARATOR)
            return

        if self.would_overflow(paragraph):
            self.flush(PARAGRAPH_SEPARATOR)
        self.append(paragraph, PARAGRAPH_SEPARATOR)

    def finish(self) -> List[Chunk]:
        self.flush(PARAGRAPH_SEPARATOR)
        return self.chunks


def chunk_text(
    text: str,
    source: str,
    max_tokens: int = DEFAULT_MAX_TOKENS,
    overlap_tokens: int = DEFAULT_OVERLAP_TOKENS,
) -> List[Chunk]:
    """
    Split text into overlapping, size-bounded chunks.

    Paragraphs (blank-line separated) are packed into a buffer until the next
    one would push it past ``max_tokens``; the buffer is then emitted and the
    next chunk starts with the last ``overlap_tokens * 4`` characters of the
    previous one. Paragraphs that are too large on their own are packed
    sentence by sentence instead. A single sentence larger than the budget is
    still emitted whole, never truncated.

    Args:
        text: Extracted document text.
        source: Source document name, used in chunk ids.
        max_tokens: Soft upper bound of estimated tokens per chunk.
        overlap_tokens: Estimated tokens repeated at the start of the next chunk.

    Returns:
        Chunks in document order with positions 0..n-1.
    """
    if overlap_tokens >= max_tokens > 0:
        _log.warning(
            "overlap_tokens=%d is not below max_tokens=%d; chunks for %s will keep growing",
            overlap_tokens,
            max_tokens,
            source,
        )

    builder = _ChunkBuilder(source, max_tokens, overlap_tokens)
    for paragraph in iter_paragraphs(text):
        builder.add_paragraph(paragraph)
    chunks = builder.finish()

    _log.info("Split %r into %d chunks", source, len(chunks))
    return chunks


__all__ = [
    "DEFAULT_MAX_TOKENS",
    "DEFAULT_OVERLAP_TOKENS",
    "chunk_text",
]
