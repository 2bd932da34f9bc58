"""
Deterministic compounding helpers.

Key conventions (one step per simulated year):
  1. Growth first: value *= (1 + yearly_return)
  2. Contributions second: value += 12 * monthly_contributions
  3. Contributions made during a year do NOT earn that year's return
  4. Negative contributions are withdrawals; the value is never floored at zero
"""

from __future__ import annotations

from core.config import MONTHS_PER_YEAR, PortfolioConfig


def annual_contribution(monthly_contributions: float) -> float:
    """Twelve monthly contributions, added in bulk at year end."""
    return monthly_contributions * MONTHS_PER_YEAR


def grow_one_year(value: float, yearly_return: float, monthly_contributions: float) -> float:
    """Apply one year of growth, then that year's contributions."""
    value *= 1.0 + yearly_return
    value += annual_contribution(monthly_contributions)
    return value


def deterministic_value(config: PortfolioConfig) -> float:
    """
    Closed-form end value when every year returns exactly the expected rate.

    P(1+r)^k + C * ((1+r)^k - 1) / r, with the r -> 0 limit P + C*k.
    Matches the simulated outcome of a zero-volatility config up to rounding.
    """
    k = config.years
    r = config.expected_yearly_return
    c = annual_contribution(config.monthly_contributions)
    p = config.initial_investment
    if k <= 0:
        return float(p)
    if abs(r) < 1e-12:
        return float(p + c * k)
    growth = (1.0 + r) ** k
    return float(p * growth + c * (growth - 1.0) / r)
