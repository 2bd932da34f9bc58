"""
Distributions package — the return model that drives each simulated year.

  sampler.py — ReturnSampler interface + NormalReturnSampler (seedable, injectable RNG)
"""

from .sampler import NormalReturnSampler, ReturnSampler

__all__ = [
    "NormalReturnSampler",
    "ReturnSampler",
]
