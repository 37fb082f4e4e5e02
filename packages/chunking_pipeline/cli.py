from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import click

from chunking_core import Chunk, chunk_pdf, chunk_text, estimate_tokens, split_pages
from chunking_core.pages import has_page_markers

from .config import get_settings

_log = logging.getLogger(__name__)

_INPUT_FILE = click.Path(exists=True, dir_okay=False, path_type=Path)


def _configure_logging(level_name: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level_name.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _chunk_document(
    text: str,
    source: str,
    mode: str,
    max_tokens: int,
    overlap_tokens: int,
) -> List[Chunk]:
    if mode == "pdf" or (mode == "auto" and has_page_markers(text)):
        return chunk_pdf(text, source, max_tokens=max_tokens, overlap_tokens=overlap_tokens)
    return chunk_text(text, source, max_tokens=max_tokens, overlap_tokens=overlap_tokens)


@click.group()
def main() -> None:
    """CLI entrypoint for chunking extracted document text."""


@main.command("chunk")
@click.argument("path", type=_INPUT_FILE)
@click.option("--source", default=None, help="Source name for chunk ids (default: file name).")
@click.option("--max-tokens", type=click.IntRange(min=1), default=None)
@click.option("--overlap-tokens", type=click.IntRange(min=0), default=None)
@click.option(
    "--mode",
    type=click.Choice(["auto", "pdf", "text"]),
    default="auto",
    show_default=True,
    help="'auto' uses page-aware chunking when page markers are present.",
)
@click.option(
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write JSONL here instead of stdout.",
)
def chunk(
    path: Path,
    source: Optional[str],
    max_tokens: Optional[int],
    overlap_tokens: Optional[int],
    mode: str,
    output: Optional[Path],
) -> None:
    """
    Chunk an extracted text file and emit one JSON record per chunk.

    Page-marked text (`--- PAGE N ---`) produced by PDF extraction gets page
    numbers on every chunk.
    """
    settings = get_settings()
    _configure_logging(settings.log_level)

    if max_tokens is None:
        max_tokens = settings.max_tokens
    if overlap_tokens is None:
        overlap_tokens = settings.overlap_tokens
    source = source or path.name

    _log.info("Chunking %s (max_tokens=%d, overlap_tokens=%d, mode=%s)", path, max_tokens, overlap_tokens, mode)

    text = path.read_text(encoding="utf-8")
    chunks = _chunk_document(text, source, mode, max_tokens, overlap_tokens)
    lines = [c.model_dump_json(by_alias=True, exclude_none=True) for c in chunks]

    if output is None:
        for line in lines:
            click.echo(line)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    with output.open("w", encoding="utf-8") as f_jsonl:
        for line in lines:
            f_jsonl.write(line + "\n")
    _log.info("Wrote %d chunks to %s", len(chunks), output)


@main.command("pages")
@click.argument("path", type=_INPUT_FILE)
def pages(path: Path) -> None:
    """List the pages detected in an extracted text file."""
    settings = get_settings()
    _configure_logging(settings.log_level)

    text = path.read_text(encoding="utf-8")
    if not has_page_markers(text):
        click.echo("No page markers found.")
        return

    detected = split_pages(text)
    for page in detected:
        click.echo(
            f"page {page.page_num}: {len(page.content)} chars, ~{estimate_tokens(page.content)} tokens"
        )
    click.echo(f"{len(detected)} pages with content")


if __name__ == "__main__":
    main()
