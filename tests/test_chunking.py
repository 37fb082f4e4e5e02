from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from chunking_core import chunk_text, estimate_tokens


def test_short_text_yields_single_chunk() -> None:
    text = "This is a short text."
    chunks = chunk_text(text, "test-source")

    assert len(chunks) == 1
    chunk = chunks[0]
    assert chunk.content == text
    assert chunk.source == "test-source"
    assert chunk.position == 0
    assert chunk.id == "test-source_chunk_0"
    assert chunk.page_number is None
    # estimate of the raw buffer, which still carries the paragraph separator
    assert chunk.token_count == estimate_tokens(text + "\n\n")


@pytest.mark.parametrize("text", ["", "   ", "\n\n  \n\n\t"])
def test_blank_input_yields_no_chunks(text: str) -> None:
    assert chunk_text(text, "empty") == []


def test_short_input_is_trimmed() -> None:
    chunks = chunk_text("\n\n   padded text   \n", "padded")
    assert [c.content for c in chunks] == ["padded text"]


def test_long_text_is_split_with_bounded_overshoot(long_paragraph: str) -> None:
    chunks = chunk_text(long_paragraph, "long-source", 500, 50)

    assert len(chunks) > 1
    assert all(estimate_tokens(c.content) <= 600 for c in chunks)
    unit = estimate_tokens("This is a sentence that repeats. ")
    assert all(c.token_count <= 500 + unit for c in chunks)


def test_next_chunk_starts_with_overlap(long_paragraph: str) -> None:
    chunks = chunk_text(long_paragraph, "overlap", 500, 50)

    for previous, current in zip(chunks, chunks[1:]):
        assert previous.content[-100:] in current.content


def test_paragraphs_that_fit_share_one_chunk() -> None:
    text = "First paragraph.\n\nSecond paragraph."
    chunks = chunk_text(text, "structured", 1000, 0)

    assert len(chunks) == 1
    assert chunks[0].content == "First paragraph.\n\nSecond paragraph."


def test_ids_unique_and_positions_contiguous() -> None:
    text = "Short.\n\n" * 50
    chunks = chunk_text(text, "ids-test", 100, 0)

    ids = [c.id for c in chunks]
    assert len(set(ids)) == len(ids)
    assert [c.position for c in chunks] == list(range(len(chunks)))
    assert all(c.content.strip() for c in chunks)


def test_zero_overlap_repeats_nothing() -> None:
    paragraphs = [f"Paragraph number {i} with some filler words." for i in range(6)]
    chunks = chunk_text("\n\n".join(paragraphs), "no-overlap", max_tokens=20, overlap_tokens=0)

    assert len(chunks) == len(paragraphs)
    assert "\n\n".join(c.content for c in chunks) == "\n\n".join(paragraphs)


def test_overlap_longer_than_chunk_carries_whole_chunk(caplog: pytest.LogCaptureFixture) -> None:
    text = "Alpha beta gamma.\n\nDelta epsilon."

    with caplog.at_level(logging.WARNING):
        chunks = chunk_text(text, "carry", max_tokens=5, overlap_tokens=100)

    assert [c.content for c in chunks] == [
        "Alpha beta gamma.",
        "Alpha beta gamma.\n\n\n\nDelta epsilon.",
    ]
    assert chunks[0].token_count == 5
    assert "overlap_tokens=100" in caplog.text


def test_unsplittable_unit_is_emitted_whole() -> None:
    text = "x" * 3000
    chunks = chunk_text(text, "blob", max_tokens=500, overlap_tokens=50)

    assert len(chunks) == 1
    assert chunks[0].content == text
    assert chunks[0].token_count > 500


def test_oversized_paragraph_flushes_previous_buffer(long_paragraph: str) -> None:
    chunks = chunk_text("Intro paragraph.\n\n" + long_paragraph, "mixed", 500, 50)

    assert chunks[0].content == "Intro paragraph."
    assert chunks[1].content.startswith("Intro paragraph.")
    assert len(chunks) > 2


def test_overlap_seed_alone_is_never_emitted() -> None:
    chunks = chunk_text("Head.\n\n" + "y" * 2400, "seed", max_tokens=500, overlap_tokens=50)

    assert len(chunks) == 2
    assert chunks[0].content == "Head."
    assert chunks[1].content.endswith("y" * 2400)


def test_no_content_is_lost(long_paragraph: str) -> None:
    text = "Opening words.\n\n" + long_paragraph + "\n\nClosing words without a stop"
    chunks = chunk_text(text, "complete", 200, 20)

    joined = " ".join(c.content for c in chunks)
    assert "Opening words." in joined
    assert "Closing words without a stop" in joined
    assert joined.count("repeats.") >= 100


def test_chunks_are_immutable() -> None:
    chunk = chunk_text("Some text.", "frozen")[0]
    with pytest.raises(ValidationError):
        chunk.content = "changed"
