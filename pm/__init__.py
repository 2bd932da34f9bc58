"""
PM (Portfolio Manager) outputs — sample statistics, aggregation, and reporting.
"""

from .aggregator import SummaryResult, percentile_table, run_experiment, summarize_sample
from .metrics import confidence_indices, confidence_interval, goal_probability, upper_median
from .report import format_report, report_table

__all__ = [
    "SummaryResult",
    "percentile_table",
    "run_experiment",
    "summarize_sample",
    "confidence_indices",
    "confidence_interval",
    "goal_probability",
    "upper_median",
    "format_report",
    "report_table",
]
