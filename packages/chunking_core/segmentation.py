from __future__ import annotations

import re
from typing import Iterator, List

PARAGRAPH_BREAK_PATTERN = re.compile(r"\n\n+")

# Either a run of non-terminators closed by a run of terminators, or a
# trailing run with no terminator at all. Together the alternatives cover
# every character of the input.
SENTENCE_PATTERN = re.compile(r"[^.!?]*[.!?]+|[^.!?]+")
SENTENCE_TERMINATORS = frozenset(".!?")


def iter_paragraphs(text: str) -> Iterator[str]:
    """
    Yield trimmed paragraphs of ``text`` in their original order.

    Paragraphs are separated by two or more consecutive newlines; pieces that
    are empty after trimming are skipped.
    """
    for piece in PARAGRAPH_BREAK_PATTERN.split(text):
        paragraph = piece.strip()
        if paragraph:
            yield paragraph


def split_sentences(paragraph: str) -> List[str]:
    """
    Split an oversized paragraph into sentence units.

    The terminating punctuation stays with its sentence. A paragraph without
    any terminator comes back as a single unit, so callers always make
    progress even on text with no usable boundaries.
    """
    if not any(ch in SENTENCE_TERMINATORS for ch in paragraph):
        return [paragraph]

    sentences: list[str] = []
    for match in SENTENCE_PATTERN.finditer(paragraph):
        sentence = match.group(0).strip()
        if sentence:
            sentences.append(sentence)
    return sentences or [paragraph]


__all__ = ["iter_paragraphs", "split_sentences"]
