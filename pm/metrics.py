"""
Per-sample statistics over a SORTED array of final portfolio values.

All lookups return actual sample elements (no interpolation), and every index
is bounds-checked before use.
"""

from __future__ import annotations

import math
from typing import Tuple

import numpy as np

from core.errors import InvalidConfig


def _require_non_empty(sorted_values: np.ndarray) -> int:
    n = len(sorted_values)
    if n == 0:
        raise InvalidConfig("Cannot summarize an empty sample.")
    return n


def upper_median(sorted_values: np.ndarray) -> float:
    """
    Element at index n // 2.

    For even n this is the upper of the two middle values, not their average.
    """
    n = _require_non_empty(sorted_values)
    return float(sorted_values[n // 2])


def goal_probability(values: np.ndarray, goal: float) -> float:
    """Fraction of outcomes that meet or exceed the goal."""
    n = _require_non_empty(values)
    hits = int(np.count_nonzero(values >= goal))
    return hits / n


def confidence_indices(n: int, confidence_level: float) -> Tuple[int, int]:
    """
    (lower, upper) indices into a sorted sample of size n:
      lower = floor(n * (1 - level) / 2)
      upper = floor(n * (1 + level) / 2)

    Raises InvalidConfig when either index falls outside [0, n).
    """
    if not 0.0 <= confidence_level <= 1.0:
        raise InvalidConfig(f"confidence_level must be in [0, 1], got {confidence_level}.")
    if n <= 0:
        raise InvalidConfig("Cannot compute a confidence interval for an empty sample.")

    lower = math.floor(n * (1.0 - confidence_level) / 2.0)
    upper = math.floor(n * (1.0 + confidence_level) / 2.0)
    if not (0 <= lower < n and 0 <= upper < n):
        raise InvalidConfig(
            f"A {confidence_level:.0%} interval needs indices ({lower}, {upper}) "
            f"but the sample only has {n} values; run more simulations."
        )
    return lower, upper


def confidence_interval(sorted_values: np.ndarray, confidence_level: float) -> Tuple[float, float]:
    """(lower, upper) sample values bracketing the central confidence_level share."""
    lower, upper = confidence_indices(len(sorted_values), confidence_level)
    return float(sorted_values[lower]), float(sorted_values[upper])
