"""Statistical utilities for computing distribution summaries."""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Iterable, List, Sequence

from sizeplot.utils.exceptions import EmptyInputException


@dataclass(frozen=True)
class Distribution:
    """Five-number summary of a collection of byte sizes."""

    min: int
    max: int
    median: float
    lower_quartile: float
    upper_quartile: float


def split_point(sorted_values: Sequence[int], multiplier: int, divisor: int) -> float:
    """
    Pick the value sitting at fraction ``multiplier / divisor`` of a sorted sequence.

    When ``len * multiplier`` divides evenly by ``divisor`` the point falls between two
    elements and their mean is returned; otherwise the element at the truncated index
    is returned as-is. This is a discrete rule, not linear interpolation: for very
    small inputs the quartiles collapse onto the extremes (for two values the lower
    quartile is the first value and the upper quartile the last).
    """
    scaled = len(sorted_values) * multiplier
    idx = scaled // divisor
    if scaled % divisor == 0:
        return (sorted_values[idx - 1] + sorted_values[idx]) / 2
    return float(sorted_values[idx])


def calculate_distribution(sizes: Iterable[int]) -> Distribution:
    """Compute the five-number summary for a collection of sizes.

    Raises:
        EmptyInputException: if ``sizes`` yields nothing.
    """
    values: List[int] = sorted(sizes)
    if not values:
        raise EmptyInputException()
    return Distribution(
        min=values[0],
        max=values[-1],
        median=split_point(values, 1, 2),
        lower_quartile=split_point(values, 1, 4),
        upper_quartile=split_point(values, 3, 4),
    )


def distribution_to_dict(summary: Distribution) -> Dict[str, Any]:
    """Convert a Distribution to a dictionary."""
    return asdict(summary)
