"""mdplain - Strip Markdown down to human-readable plain text."""
from mdplain.core.engine import ConversionEngine, convert
from mdplain.core.normalizer import MarkdownNormalizer, normalize
from mdplain.core.rules import PIPELINE, RULE_NAMES, RewriteRule
from mdplain.core.stats import compute_stats
from mdplain.models.config import NormalizerConfig
from mdplain.models.result import ConversionResult, ConversionStats

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "normalize",
    "compute_stats",
    "convert",
    "ConversionEngine",
    "MarkdownNormalizer",
    "NormalizerConfig",
    "ConversionResult",
    "ConversionStats",
    "RewriteRule",
    "PIPELINE",
    "RULE_NAMES",
]
