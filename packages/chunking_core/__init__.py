"""
Document chunking core.

This package contains:
- The Chunk data model
- Token estimation and paragraph/sentence segmentation
- Size-bounded, overlapping chunking of plain text
- Page-aware chunking of PDF-extracted text
"""

from .chunking import DEFAULT_MAX_TOKENS, DEFAULT_OVERLAP_TOKENS, chunk_text
from .models import Chunk
from .pages import chunk_pdf, split_pages
from .tokens import estimate_tokens

__all__ = [
    "DEFAULT_MAX_TOKENS",
    "DEFAULT_OVERLAP_TOKENS",
    "Chunk",
    "chunk_pdf",
    "chunk_text",
    "estimate_tokens",
    "split_pages",
]
