"""
Projection configuration.
The field set mirrors what the engine consumes; the return model itself lives in
distributions/sampler.py (NormalReturnSampler).
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

MONTHS_PER_YEAR = 12

# Confidence level used for the (lower, upper) interval of the final-value sample.
CONFIDENCE_LEVEL = 0.90

# Fewer trials than this still run, but percentile estimates get noisy.
RECOMMENDED_MIN_SIMULATIONS = 1000


@dataclass(frozen=True)
class PortfolioConfig:
    initial_investment: float
    expected_yearly_return: float
    monthly_contributions: float
    volatility: float
    years: int
    goal: float
    num_simulations: int = 10_000

    # None = seed the generator from OS entropy
    seed: Optional[int] = None

    def replace(self, **changes) -> "PortfolioConfig":
        """Return a copy with the given fields changed."""
        return replace(self, **changes)


# Example portfolio shipped with the tool (used when no config is supplied).
DEFAULT_PORTFOLIO = PortfolioConfig(
    initial_investment=3340.0,
    expected_yearly_return=0.10,
    monthly_contributions=50.0,
    volatility=0.10,
    years=3,
    goal=5800.0,
    num_simulations=1_000_000,
)
