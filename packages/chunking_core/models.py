from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Chunk(BaseModel):
    """Bounded-size text segment produced for embedding and retrieval."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(..., description="Identifier, unique within one chunking call for a source.")
    content: str = Field(..., description="Trimmed chunk text.")
    token_count: int = Field(
        ...,
        ge=0,
        alias="tokenCount",
        description="Estimated tokens of the untrimmed buffer the chunk was cut from.",
    )
    source: str = Field(..., description="Name of the originating document.")
    page_number: Optional[int] = Field(
        default=None,
        alias="pageNumber",
        description="Page the chunk came from, set only on the page-aware path.",
    )
    position: int = Field(
        ...,
        ge=0,
        description="0-based index of the chunk within its source.",
    )

    @field_validator("content")
    @classmethod
    def _content_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("chunk content must not be blank")
        return value

    def to_record(self) -> dict:
        """Return the JSON-ready record handed to the indexer (camelCase keys)."""
        return self.model_dump(by_alias=True, exclude_none=True)


__all__ = ["Chunk"]
