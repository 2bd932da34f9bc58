"""
Trial runner — compounds sampled yearly returns into final portfolio values.

One trial:
  value_0 = initial_investment
  for each year: draw r, value *= (1 + r), value += 12 * monthly_contributions
  outcome = value after the last year

Many trials (run_trials) share ONE generator sequentially. No other state is
carried from one trial to the next, so a seeded config always reproduces the
same sample.
"""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np
import pandas as pd

from core.config import PortfolioConfig
from core.utils import make_rng, require_non_negative_int, require_positive_int
from distributions.sampler import NormalReturnSampler, ReturnSampler

from .cashflow import grow_one_year

logger = logging.getLogger(__name__)


def build_sampler(
    config: PortfolioConfig,
    rng: Optional[np.random.Generator] = None,
) -> NormalReturnSampler:
    """Normal return sampler for the config, on the given generator (or config.seed)."""
    if rng is None:
        rng = make_rng(config.seed)
    return NormalReturnSampler(
        config.expected_yearly_return,
        config.volatility,
        rng=rng,
    )


def simulate_path(config: PortfolioConfig, sampler: ReturnSampler) -> np.ndarray:
    """
    Year-end values of one trial: [value_0, value_1, ..., value_years].

    value_0 is the initial investment; the last element is the trial outcome.
    """
    years = require_non_negative_int(config.years, "years")
    values = np.empty(years + 1, dtype=float)
    value = float(config.initial_investment)
    values[0] = value
    for t in range(years):
        value = grow_one_year(value, sampler.sample(), config.monthly_contributions)
        values[t + 1] = value
    return values


def run_trial(config: PortfolioConfig, sampler: ReturnSampler) -> float:
    """Final portfolio value of one simulated path (same steps as simulate_path)."""
    years = require_non_negative_int(config.years, "years")
    value = float(config.initial_investment)
    for _ in range(years):
        value = grow_one_year(value, sampler.sample(), config.monthly_contributions)
    return value


def run_trials(
    config: PortfolioConfig,
    *,
    rng: Optional[np.random.Generator] = None,
) -> np.ndarray:
    """
    Run config.num_simulations independent trials and return the raw sample.

    Parameters
    ----------
    config : PortfolioConfig
        Portfolio and simulation settings
    rng : np.random.Generator, optional
        Generator to draw from. Defaults to one built from config.seed.

    Returns
    -------
    np.ndarray of shape (num_simulations,), in trial order (unsorted)
    """
    n = require_positive_int(config.num_simulations, "num_simulations")
    sampler = build_sampler(config, rng)

    logger.debug("Running %d trials over %d years", n, config.years)
    sample = np.empty(n, dtype=float)
    for i in range(n):
        sample[i] = run_trial(config, sampler)
    return sample


def run_paths(
    config: PortfolioConfig,
    *,
    n_paths: int,
    rng: Optional[np.random.Generator] = None,
) -> pd.DataFrame:
    """
    Year-by-year values for n_paths trials, in long format for charting.

    Returns
    -------
    DataFrame with columns: path_id, year, value
    """
    n_paths = require_positive_int(n_paths, "n_paths")
    sampler = build_sampler(config, rng)
    years = config.years

    values = np.vstack([simulate_path(config, sampler) for _ in range(n_paths)])
    return pd.DataFrame({
        "path_id": np.repeat(np.arange(n_paths), years + 1),
        "year": np.tile(np.arange(years + 1), n_paths),
        "value": values.reshape(-1),
    })
