"""Conversion result models."""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ConversionStats(BaseModel):
    """Length statistics for an (original, cleaned) pair."""

    original_length: int = Field(serialization_alias="originalLength")
    cleaned_length: int = Field(serialization_alias="cleanedLength")
    reduction_percent: float = Field(serialization_alias="reductionPercent")

    def to_dict(self) -> dict[str, Any]:
        """Return the stats with camelCase keys."""
        return self.model_dump(by_alias=True)


class ConversionResult(BaseModel):
    """Complete conversion result."""

    success: bool
    content: str = ""
    source: str = ""
    stats: ConversionStats | None = None

    # Source tracking
    filename: str | None = None
    conversion_time_ms: float | None = None

    # Error handling
    error: str | None = None

    def to_text(self) -> str:
        """Return the plain text."""
        return self.content

    def to_dict(self) -> dict[str, Any]:
        """Return full result as dictionary."""
        return self.model_dump(by_alias=True)
