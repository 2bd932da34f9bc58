"""
Report rendering — turns a SummaryResult into console text or a display table.

Console layout:
  Median Portfolio Value: 5512.34
  Probability of reaching the goal of 5800.00: 31.42%
  Confidence Interval at 90%: (4780.11, 6301.57)
"""

from __future__ import annotations

from typing import List

import pandas as pd

from .aggregator import SummaryResult

SEPARATOR = "=========================="


def report_lines(result: SummaryResult) -> List[str]:
    lower, upper = result.confidence_interval
    return [
        f"Median Portfolio Value: {result.median_value:.2f}",
        f"Probability of reaching the goal of {result.goal:.2f}: "
        f"{result.goal_probability * 100.0:.2f}%",
        f"Confidence Interval at {result.confidence_level * 100.0:.0f}%: "
        f"({lower:.2f}, {upper:.2f})",
    ]


def format_report(result: SummaryResult) -> str:
    """Three-line text report of a run."""
    return "\n".join(report_lines(result))


def run_banner(num_simulations: int) -> str:
    return "\n".join([SEPARATOR, f"Running {num_simulations} simulations...", SEPARATOR])


def completion_banner() -> str:
    return "\n".join([
        SEPARATOR,
        "Monte Carlo simulation completed.",
        "Thank you for using the Monte Carlo simulation tool!",
        SEPARATOR,
    ])


def report_table(result: SummaryResult) -> pd.DataFrame:
    """Convert to a display-friendly table."""
    lower, upper = result.confidence_interval
    rows = [
        {"Metric": "Simulations", "Value": f"{result.num_simulations:,}"},
        {"Metric": "Median Portfolio Value", "Value": f"{result.median_value:,.2f}"},
        {"Metric": "Goal", "Value": f"{result.goal:,.2f}"},
        {"Metric": "P(Value >= Goal)", "Value": f"{result.goal_probability:.2%}"},
        {
            "Metric": f"{result.confidence_level:.0%} Interval",
            "Value": f"{lower:,.2f} to {upper:,.2f}",
        },
    ]
    return pd.DataFrame(rows)
