"""
Projection engine — deterministic compounding math + Monte Carlo trial runner.
"""

from .cashflow import deterministic_value, grow_one_year
from .runner import build_sampler, run_paths, run_trial, run_trials, simulate_path

__all__ = [
    "deterministic_value",
    "grow_one_year",
    "build_sampler",
    "run_paths",
    "run_trial",
    "run_trials",
    "simulate_path",
]
