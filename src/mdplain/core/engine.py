"""Main conversion engine."""
from __future__ import annotations

import time
from pathlib import Path

from mdplain.core.normalizer import MarkdownNormalizer
from mdplain.core.stats import compute_stats
from mdplain.models.config import NormalizerConfig
from mdplain.models.result import ConversionResult
from mdplain.utils.logging import get_logger

logger = get_logger(__name__)


class ConversionEngine:
    """Normalize Markdown and attach length statistics."""

    def __init__(self, config: NormalizerConfig | None = None) -> None:
        self.config = config or NormalizerConfig()
        self._normalizer = MarkdownNormalizer(self.config)

    def convert(self, text: str, filename: str | None = None) -> ConversionResult:
        """Convert a Markdown string. Always succeeds."""
        start_time = time.perf_counter()

        cleaned = self._normalizer.normalize(text)

        return ConversionResult(
            success=True,
            content=cleaned,
            source=text,
            stats=compute_stats(text, cleaned),
            filename=filename,
            conversion_time_ms=(time.perf_counter() - start_time) * 1000,
        )

    def convert_file(self, path: str | Path) -> ConversionResult:
        """Read a Markdown file and convert it."""
        path = Path(path)
        try:
            text = path.read_text(encoding=self.config.encoding)
        except (OSError, UnicodeDecodeError) as e:
            if self.config.raise_on_error:
                raise
            logger.warning("Could not read %s: %s", path, e)
            return self._error_result(f"Cannot read {path}: {e}", path.name)

        logger.debug("Converting %s (%d chars)", path, len(text))
        return self.convert(text, filename=path.name)

    def _error_result(self, error: str, filename: str | None) -> ConversionResult:
        """Create error result."""
        return ConversionResult(
            success=False,
            error=error,
            filename=filename,
        )


# Convenience function
def convert(
    text: str,
    config: NormalizerConfig | None = None,
) -> ConversionResult:
    """Convert Markdown text to plain text with statistics.

    Args:
        text: Markdown source
        config: Normalizer configuration

    Returns:
        ConversionResult with plain text and stats
    """
    engine = ConversionEngine(config)
    return engine.convert(text)
