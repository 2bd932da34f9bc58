"""
Return sampler — draws annual portfolio returns for the Monte Carlo engine.

Input:  expected annual return (mu) + annual volatility (sigma)
Output: one simulated yearly return per call, or a whole path of them

Each draw is one plausible year in the market:
  Year 1: +17.3%   (good year)
  Year 2:  -4.1%   (drawdown)
  Year 3:  +9.8%   (about average)

Returns are NOT clipped. A draw below -100% or above +100% is kept as is, since
the normal model is meant to carry the full equity volatility.

Randomness is owned explicitly: the sampler holds a numpy Generator that is
either injected by the caller or built from a seed. Nothing touches numpy's
global random state, so two samplers seeded alike produce identical streams.
"""

from __future__ import annotations

import math
from typing import Optional

import numpy as np
import pandas as pd

from core.errors import InvalidParameter
from core.utils import make_rng


class ReturnSampler:
    """Interface for drawing one annual return at a time."""

    def sample(self) -> float:
        raise NotImplementedError

    def sample_path(self, years: int) -> np.ndarray:
        """Draw ``years`` consecutive annual returns."""
        if years < 0:
            raise InvalidParameter(f"years must be non-negative, got {years}.")
        return np.array([self.sample() for _ in range(years)], dtype=float)


class NormalReturnSampler(ReturnSampler):
    """
    Annual returns ~ Normal(expected, volatility).

    Usage:
        sampler = NormalReturnSampler(0.07, 0.15, seed=42)
        r = sampler.sample()          # one year
        path = sampler.sample_path(30)  # thirty years, same stream
    """

    def __init__(
        self,
        expected: float,
        volatility: float,
        *,
        rng: Optional[np.random.Generator] = None,
        seed: Optional[int] = None,
    ):
        if not math.isfinite(expected):
            raise InvalidParameter(f"expected return must be finite, got {expected}.")
        if not math.isfinite(volatility) or volatility < 0:
            raise InvalidParameter(
                f"volatility must be a finite, non-negative number, got {volatility}."
            )
        if rng is not None and seed is not None:
            raise InvalidParameter("Provide rng OR seed, not both.")

        self.expected = float(expected)
        self.volatility = float(volatility)
        self.rng = rng if rng is not None else make_rng(seed)

    def sample(self) -> float:
        return float(self.rng.normal(self.expected, self.volatility))

    def sample_path(self, years: int) -> np.ndarray:
        if years < 0:
            raise InvalidParameter(f"years must be non-negative, got {years}.")
        # Generator.normal with size=k consumes the stream exactly like k scalar draws
        return self.rng.normal(self.expected, self.volatility, size=years)

    def describe(self) -> pd.DataFrame:
        """Return a one-row table of the distribution parameters."""
        return pd.DataFrame([
            {"Distribution": "Normal", "Mean": self.expected, "StdDev": self.volatility},
        ])

    def __repr__(self) -> str:
        return f"NormalReturnSampler(expected={self.expected!r}, volatility={self.volatility!r})"
