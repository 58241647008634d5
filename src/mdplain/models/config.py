"""Normalizer configuration."""
from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from mdplain.core.rules import RULE_NAMES


class NormalizerConfig(BaseModel):
    """Main normalizer configuration."""

    # Pipeline
    disabled_rules: list[str] = Field(default_factory=list)

    # File handling
    encoding: str = "utf-8"

    # Error handling
    raise_on_error: bool = False

    @field_validator("disabled_rules")
    @classmethod
    def _check_rule_names(cls, value: list[str]) -> list[str]:
        unknown = [name for name in value if name not in RULE_NAMES]
        if unknown:
            raise ValueError(
                f"Unknown rule(s): {', '.join(unknown)}. "
                f"Available: {', '.join(RULE_NAMES)}"
            )
        return value
