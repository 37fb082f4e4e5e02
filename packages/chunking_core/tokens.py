from __future__ import annotations

import math

# Rough heuristic: 4 characters ≈ 1 token. Good enough for sizing chunks
# without pulling in a model-specific tokenizer.
CHARS_PER_TOKEN = 4


def estimate_tokens(text: str) -> int:
    """Approximate the number of model tokens in ``text``."""
    return math.ceil(len(text) / CHARS_PER_TOKEN)


__all__ = ["CHARS_PER_TOKEN", "estimate_tokens"]
