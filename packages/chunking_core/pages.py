from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Iterable, List

from .chunking import DEFAULT_MAX_TOKENS, DEFAULT_OVERLAP_TOKENS, chunk_text
from .models import Chunk

_log = logging.getLogger(__name__)

# Delimiter written between pages by the PDF text extractor. ASCII digits
# only, capped at the interpreter's int() conversion limit; anything else
# stays ordinary page text.
PAGE_MARKER_PATTERN = re.compile(r"--- PAGE ([0-9]{1,4300}) ---")

# Text before the first marker is attributed to this page.
FIRST_PAGE = 1


@dataclass(frozen=True)
class Page:
    """Text span attributed to one page of the source document."""

    page_num: int
    content: str


def format_page_marker(page_num: int) -> str:
    """Return the delimiter line for ``page_num``."""
    return f"--- PAGE {page_num} ---"


def join_pages(page_texts: Iterable[str], start: int = FIRST_PAGE) -> str:
    """
    Render already-extracted page strings into one marker-delimited text.

    Produces the same layout as the PDF extractor: every page is preceded by
    a newline and its marker line.
    """
    return "".join(
        f"\n{format_page_marker(num)}\n{text}"
        for num, text in enumerate(page_texts, start=start)
    )


def has_page_markers(text: str) -> bool:
    return PAGE_MARKER_PATTERN.search(text) is not None


def split_pages(full_text: str) -> List[Page]:
    """
    Partition text into pages using ``--- PAGE <N> ---`` markers.

    Each marker opens a page carrying its number verbatim; numbers are not
    checked for order or gaps. Spans that are blank after trimming are
    dropped. Text without markers comes back as a single page 1.
    """
    pages: list[Page] = []
    current_page = FIRST_PAGE
    span_start = 0

    for match in PAGE_MARKER_PATTERN.finditer(full_text):
        content = full_text[span_start : match.start()].strip()
        if content:
            pages.append(Page(page_num=current_page, content=content))
        current_page = int(match.group(1))
        span_start = match.end()

    content = full_text[span_start:].strip()
    if content:
        pages.append(Page(page_num=current_page, content=content))

    return pages


def chunk_pdf(
    full_text: str,
    source_name: str,
    max_tokens: int = DEFAULT_MAX_TOKENS,
    overlap_tokens: int = DEFAULT_OVERLAP_TOKENS,
) -> List[Chunk]:
    """
    Chunk page-marked PDF text so that no chunk spans a page boundary.

    Every page is chunked on its own (overlap does not carry across pages).
    Resulting chunks are tagged with their page number and renumbered across
    the whole document: ids become ``{source}_p{page}_chunk_{n}`` and
    positions run 0..n-1 over all pages.

    Text without any page marker is chunked as plain text and carries no
    page numbers.
    """
    if not has_page_markers(full_text):
        _log.info("No page markers in %r, chunking as plain text", source_name)
        return chunk_text(full_text, source_name, max_tokens, overlap_tokens)

    pages = split_pages(full_text)
    chunks: list[Chunk] = []

    for page in pages:
        for page_chunk in chunk_text(page.content, source_name, max_tokens, overlap_tokens):
            index = len(chunks)
            chunks.append(
                page_chunk.model_copy(
                    update={
                        "id": f"{source_name}_p{page.page_num}_chunk_{index}",
                        "page_number": page.page_num,
                        "position": index,
                    }
                )
            )

    _log.info(
        "PDF %r chunked into %d chunks across %d pages",
        source_name,
        len(chunks),
        len(pages),
    )
    return chunks


__all__ = [
    "PAGE_MARKER_PATTERN",
    "Page",
    "chunk_pdf",
    "format_page_marker",
    "has_page_markers",
    "join_pages",
    "split_pages",
]
