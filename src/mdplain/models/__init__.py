"""mdplain data models."""
from mdplain.models.config import NormalizerConfig
from mdplain.models.result import ConversionResult, ConversionStats

__all__ = [
    "NormalizerConfig",
    "ConversionResult",
    "ConversionStats",
]
