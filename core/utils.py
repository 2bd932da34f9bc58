from __future__ import annotations

import math
from typing import Optional

import numpy as np

from .errors import InvalidConfig


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Fresh PCG64 generator; seed=None draws entropy from the OS."""
    if seed is not None:
        require_non_negative_int(seed, "seed")
    return np.random.default_rng(seed)


def require_positive_int(value, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise InvalidConfig(f"{name} must be an integer, got {value!r}.")
    if value < 1:
        raise InvalidConfig(f"{name} must be at least 1, got {value}.")
    return int(value)


def require_non_negative_int(value, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise InvalidConfig(f"{name} must be an integer, got {value!r}.")
    if value < 0:
        raise InvalidConfig(f"{name} must be non-negative, got {value}.")
    return int(value)


def require_finite(value, name: str) -> float:
    if not math.isfinite(value):
        raise InvalidConfig(f"{name} must be finite, got {value}.")
    return float(value)
