"""
Console entry point — run one Monte Carlo projection and print the report.

Run: montecarlo-projection --years 10 --goal 25000 --seed 7
     montecarlo-projection --config portfolio.json
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from core.config import CONFIDENCE_LEVEL, DEFAULT_PORTFOLIO, PortfolioConfig
from core.errors import ProjectionError
from data_prep.loader import load_portfolio_config
from data_prep.validators import validate_config
from pm.aggregator import run_experiment
from pm.report import completion_banner, format_report, run_banner

logger = logging.getLogger(__name__)

# flag name -> PortfolioConfig field
_OVERRIDES = {
    "initial_investment": float,
    "expected_yearly_return": float,
    "monthly_contributions": float,
    "volatility": float,
    "years": int,
    "goal": float,
    "num_simulations": int,
    "seed": int,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="montecarlo-projection",
        description="Project the future value of a portfolio with Monte Carlo simulation.",
    )
    parser.add_argument("--config", help="JSON file with the portfolio config")
    for name, type_ in _OVERRIDES.items():
        parser.add_argument(
            "--" + name.replace("_", "-"),
            dest=name,
            type=type_,
            default=None,
            help=f"override {name}",
        )
    parser.add_argument(
        "--confidence-level",
        type=float,
        default=CONFIDENCE_LEVEL,
        help="central share covered by the interval (default: %(default)s)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


def resolve_config(args: argparse.Namespace) -> PortfolioConfig:
    """Base config (file or built-in example) with command-line overrides applied."""
    config = load_portfolio_config(args.config) if args.config else DEFAULT_PORTFOLIO
    changes = {
        name: getattr(args, name)
        for name in _OVERRIDES
        if getattr(args, name) is not None
    }
    return config.replace(**changes) if changes else config


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = resolve_config(args)
        validation = validate_config(config)
        for warning in validation.warnings:
            logger.warning(warning)
        validation.raise_for_errors()

        print(run_banner(config.num_simulations))
        result = run_experiment(config, confidence_level=args.confidence_level)
    except (ProjectionError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    print(format_report(result))
    print(completion_banner())
    return 0


if __name__ == "__main__":
    sys.exit(main())
