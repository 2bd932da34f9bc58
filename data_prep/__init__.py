"""
Data preparation — loading portfolio configs from disk and validating them.
"""

from .loader import (
    PortfolioConfigModel,
    load_portfolio_config,
    load_scenarios_csv,
    parse_portfolio_config,
)
from .validators import ValidationResult, validate_config

__all__ = [
    "PortfolioConfigModel",
    "load_portfolio_config",
    "load_scenarios_csv",
    "parse_portfolio_config",
    "ValidationResult",
    "validate_config",
]
