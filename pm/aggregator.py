"""
Aggregate N trial outcomes into a summary a planner can act on.

Instead of: "The portfolio will be worth 5,512" (one number, no context)
The planner gets:
  - median outcome
  - probability of reaching the goal
  - the 90% confidence interval of the final value

Reduction rules:
  1. Sort the sample ascending
  2. Median = sorted[n // 2]  (upper-middle for even n, never averaged)
  3. Goal probability = count(sorted >= goal) / n
  4. Interval = (sorted[floor(n*(1-L)/2)], sorted[floor(n*(1+L)/2)]), L = 0.90
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np
import pandas as pd

from core.config import CONFIDENCE_LEVEL, PortfolioConfig
from core.errors import InvalidConfig
from core.utils import require_finite, require_non_negative_int, require_positive_int
from engine.runner import run_trials

from .metrics import confidence_interval, goal_probability, upper_median

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SummaryResult:
    """Summary statistics of one Monte Carlo run."""
    median_value: float
    goal_probability: float  # fraction in [0, 1]
    confidence_interval: Tuple[float, float]
    confidence_level: float

    # echoed from the run for reporting
    goal: float
    num_simulations: int

    @property
    def lower_bound(self) -> float:
        return self.confidence_interval[0]

    @property
    def upper_bound(self) -> float:
        return self.confidence_interval[1]


def summarize_sample(
    sample: np.ndarray,
    *,
    goal: float,
    confidence_level: float = CONFIDENCE_LEVEL,
) -> SummaryResult:
    """
    Reduce a sample of final values to a SummaryResult.

    The input is not modified; sorting happens on a copy.
    Raises InvalidConfig for an empty sample or out-of-range interval indices.
    """
    values = np.sort(np.asarray(sample, dtype=float))
    n = len(values)
    if n == 0:
        raise InvalidConfig("Cannot summarize an empty sample (num_simulations == 0).")

    interval = confidence_interval(values, confidence_level)
    return SummaryResult(
        median_value=upper_median(values),
        goal_probability=goal_probability(values, goal),
        confidence_interval=interval,
        confidence_level=confidence_level,
        goal=float(goal),
        num_simulations=n,
    )


def run_experiment(
    config: PortfolioConfig,
    *,
    rng: Optional[np.random.Generator] = None,
    confidence_level: float = CONFIDENCE_LEVEL,
) -> SummaryResult:
    """
    Run the full Monte Carlo experiment for one portfolio.

    Parameters
    ----------
    config : PortfolioConfig
        Portfolio and simulation settings
    rng : np.random.Generator, optional
        Generator shared by all trials. Defaults to one built from config.seed.
    confidence_level : float
        Central share of outcomes covered by the interval (default 0.90)

    Returns
    -------
    SummaryResult. The raw sample is discarded once reduced.
    """
    # Reject bad configs before any trial runs
    require_positive_int(config.num_simulations, "num_simulations")
    require_non_negative_int(config.years, "years")
    for name in ("initial_investment", "monthly_contributions", "goal"):
        require_finite(getattr(config, name), name)

    logger.info("Running %d simulations...", config.num_simulations)
    sample = run_trials(config, rng=rng)
    result = summarize_sample(sample, goal=config.goal, confidence_level=confidence_level)
    logger.info(
        "Simulation complete: median=%.2f goal_probability=%.4f",
        result.median_value, result.goal_probability,
    )
    return result


def percentile_table(
    sample: np.ndarray,
    *,
    percentiles: Tuple[float, ...] = (0.05, 0.25, 0.50, 0.75, 0.95),
) -> pd.DataFrame:
    """
    Distribution summary of final values: one row with mean/std/min/percentiles/max.

    Percentiles here are numpy's interpolated estimates, for display only;
    SummaryResult uses exact sample elements.
    """
    values = np.asarray(sample, dtype=float)
    if len(values) == 0:
        raise InvalidConfig("Cannot summarize an empty sample.")

    row = {
        "Metric": "Final Value",
        "Mean": float(np.mean(values)),
        "Std Dev": float(np.std(values)),
        "Min": float(np.min(values)),
    }
    for p in percentiles:
        row[f"P{int(round(p * 100)):02d}"] = float(np.percentile(values, p * 100))
    row["Max"] = float(np.max(values))
    return pd.DataFrame([row])
