"""Length-reduction statistics for a conversion."""
from __future__ import annotations

from mdplain.models.result import ConversionStats


def reduction_percent(original_length: int, cleaned_length: int) -> float:
    """Return how much shorter the cleaned text is, in percent.

    The value is rounded to one decimal place, half away from zero, using
    integer arithmetic so ties are exact (12.25 -> 12.3, -12.25 -> -12.3).
    An empty original yields 0.0.
    """
    if original_length == 0:
        return 0.0

    delta = original_length - cleaned_length
    tenths, remainder = divmod(abs(delta) * 1000, original_length)
    if remainder * 2 >= original_length:
        tenths += 1
    return (-tenths if delta < 0 else tenths) / 10


def compute_stats(original: str, cleaned: str) -> ConversionStats:
    """Compute length statistics for an (original, cleaned) pair."""
    return ConversionStats(
        original_length=len(original),
        cleaned_length=len(cleaned),
        reduction_percent=reduction_percent(len(original), len(cleaned)),
    )
