"""
Pre-flight validation for portfolio configs before they enter the engine.

Catches problems early:
- Trial counts that cannot be summarized
- Negative horizons or volatility
- Returns that look like percents instead of decimals
- Withdrawals that drain the principal
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List

from core.config import RECOMMENDED_MIN_SIMULATIONS, PortfolioConfig
from core.errors import InvalidConfig
from engine.cashflow import deterministic_value


@dataclass
class ValidationResult:
    """Collects all validation warnings/errors for a config."""
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def summary(self) -> str:
        lines = []
        if self.errors:
            lines.append(f"ERRORS ({len(self.errors)}):")
            for e in self.errors:
                lines.append(f"  ✗ {e}")
        if self.warnings:
            lines.append(f"WARNINGS ({len(self.warnings)}):")
            for w in self.warnings:
                lines.append(f"  ⚠ {w}")
        if not lines:
            lines.append("✓ All checks passed.")
        return "\n".join(lines)

    def raise_for_errors(self) -> None:
        if self.errors:
            raise InvalidConfig("; ".join(self.errors))


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_config(config: PortfolioConfig) -> ValidationResult:
    """
    Run all validation checks on a portfolio config.
    Returns a ValidationResult with errors (blocking) and warnings (informational).
    """
    result = ValidationResult()

    # --- Trial count ---
    n = config.num_simulations
    if not _is_int(n):
        result.errors.append(f"num_simulations must be an integer, got {n!r}.")
    elif n < 1:
        result.errors.append(f"num_simulations must be at least 1, got {n}.")
    elif n < RECOMMENDED_MIN_SIMULATIONS:
        result.warnings.append(
            f"num_simulations={n} is below {RECOMMENDED_MIN_SIMULATIONS}; "
            f"percentile estimates will be noisy."
        )

    # --- Horizon ---
    if not _is_int(config.years):
        result.errors.append(f"years must be an integer, got {config.years!r}.")
    elif config.years < 0:
        result.errors.append(f"years must be non-negative, got {config.years}.")

    # --- Volatility ---
    vol = config.volatility
    if not math.isfinite(vol) or vol < 0:
        result.errors.append(f"volatility must be a finite, non-negative number, got {vol}.")
    elif vol > 1.0:
        result.warnings.append(
            f"volatility={vol} is above 1.0 (100%); check if it is in percent vs decimal form."
        )

    # --- Expected return ---
    mu = config.expected_yearly_return
    if not math.isfinite(mu):
        result.errors.append(f"expected_yearly_return must be finite, got {mu}.")
    elif not -1.0 <= mu <= 1.0:
        result.warnings.append(
            f"expected_yearly_return={mu} is outside [-1, 1]; check if it is in percent "
            f"vs decimal form."
        )

    # --- Money fields ---
    for name in ("initial_investment", "monthly_contributions", "goal"):
        value = getattr(config, name)
        if not math.isfinite(value):
            result.errors.append(f"{name} must be finite, got {value}.")

    # --- Seed ---
    seed = config.seed
    if seed is not None and (not _is_int(seed) or seed < 0):
        result.errors.append(f"seed must be a non-negative integer, got {seed!r}.")

    # --- Principal ---
    if math.isfinite(config.initial_investment) and config.initial_investment <= 0:
        result.warnings.append(
            f"initial_investment={config.initial_investment} is not positive."
        )

    # --- Withdrawals ---
    if result.is_valid and config.monthly_contributions < 0 and config.years > 0:
        expected_end = deterministic_value(config)
        if expected_end < 0:
            result.warnings.append(
                f"Withdrawals exhaust the portfolio at the expected return "
                f"(deterministic end value {expected_end:,.2f})."
            )

    return result
