"""
Core package — configuration, constants, typed errors, and shared utilities.
No simulation logic lives here.
"""

from .config import (
    CONFIDENCE_LEVEL,
    DEFAULT_PORTFOLIO,
    MONTHS_PER_YEAR,
    RECOMMENDED_MIN_SIMULATIONS,
    PortfolioConfig,
)
from .errors import InvalidConfig, InvalidParameter, ProjectionError
from .utils import make_rng

__all__ = [
    "CONFIDENCE_LEVEL",
    "DEFAULT_PORTFOLIO",
    "MONTHS_PER_YEAR",
    "RECOMMENDED_MIN_SIMULATIONS",
    "PortfolioConfig",
    "InvalidConfig",
    "InvalidParameter",
    "ProjectionError",
    "make_rng",
]
