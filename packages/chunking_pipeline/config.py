from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from chunking_core import DEFAULT_MAX_TOKENS, DEFAULT_OVERLAP_TOKENS


class ChunkingSettings(BaseSettings):
    """Configuration for the chunking pipeline."""

    model_config = SettingsConfigDict(
        env_prefix="CHUNKING_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    max_tokens: int = Field(
        default=DEFAULT_MAX_TOKENS,
        gt=0,
        description="Soft upper bound of estimated tokens per chunk.",
    )
    overlap_tokens: int = Field(
        default=DEFAULT_OVERLAP_TOKENS,
        ge=0,
        description="Estimated tokens repeated at the start of the next chunk.",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level name used by the CLI.",
    )


def get_settings() -> ChunkingSettings:
    """Return settings read from the environment (and .env if present)."""
    return ChunkingSettings()


__all__ = ["ChunkingSettings", "get_settings"]
