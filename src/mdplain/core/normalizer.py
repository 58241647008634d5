"""Markdown to plain text normalization."""
from __future__ import annotations

from mdplain.core.rules import PIPELINE, RewriteRule
from mdplain.models.config import NormalizerConfig
from mdplain.utils.logging import get_logger

logger = get_logger(__name__)


class MarkdownNormalizer:
    """Run the rewrite pipeline over Markdown text."""

    def __init__(self, config: NormalizerConfig | None = None) -> None:
        self.config = config or NormalizerConfig()
        disabled = set(self.config.disabled_rules)
        self.rules: tuple[RewriteRule, ...] = tuple(
            rule for rule in PIPELINE if rule.name not in disabled
        )

    def normalize(self, text: str) -> str:
        """Strip Markdown syntax from *text* and trim the result."""
        if not text:
            return ""

        cleaned = text
        for rule in self.rules:
            cleaned = rule.apply(cleaned)
        cleaned = cleaned.strip()

        logger.debug("Normalized %d chars to %d chars", len(text), len(cleaned))
        return cleaned


_default_normalizer = MarkdownNormalizer()


def normalize(text: str, config: NormalizerConfig | None = None) -> str:
    """Convert Markdown to human-readable plain text.

    Never raises for string input: malformed or unbalanced syntax is left
    as it is.

    Args:
        text: Markdown source, possibly empty.
        config: Optional configuration, e.g. rules to skip.

    Returns:
        The plain text.
    """
    normalizer = _default_normalizer if config is None else MarkdownNormalizer(config)
    return normalizer.normalize(text)
