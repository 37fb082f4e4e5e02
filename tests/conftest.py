from __future__ import annotations

import pytest


@pytest.fixture
def three_page_text() -> str:
    return (
        "--- PAGE 1 ---\n"
        "Content on page 1.\n\n"
        "--- PAGE 2 ---\n"
        "Content on page 2.\n\n"
        "--- PAGE 3 ---\n"
        "Content on page 3."
    )


@pytest.fixture
def long_paragraph() -> str:
    # 3300 characters in a single paragraph, ~825 estimated tokens
    return "This is a sentence that repeats. " * 100


@pytest.fixture(autouse=True)
def _clean_chunking_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("CHUNKING_MAX_TOKENS", "CHUNKING_OVERLAP_TOKENS", "CHUNKING_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
