"""
Tests for report rendering.
"""
import pytest
from pm.aggregator import SummaryResult
from pm.report import completion_banner, format_report, report_table, run_banner


@pytest.fixture
def result():
    return SummaryResult(
        median_value=5512.3456,
        goal_probability=0.3142,
        confidence_interval=(4780.111, 6301.567),
        confidence_level=0.90,
        goal=5800.0,
        num_simulations=1000,
    )


@pytest.mark.unit
class TestReport:
    """Tests for the console and table renderings."""

    def test_format_report(self, result):
        assert format_report(result) == (
            "Median Portfolio Value: 5512.35\n"
            "Probability of reaching the goal of 5800.00: 31.42%\n"
            "Confidence Interval at 90%: (4780.11, 6301.57)"
        )

    def test_banners(self):
        assert "Running 250 simulations..." in run_banner(250)
        assert "Monte Carlo simulation completed." in completion_banner()

    def test_report_table(self, result):
        table = report_table(result)
        assert list(table.columns) == ["Metric", "Value"]
        values = dict(zip(table["Metric"], table["Value"]))
        assert values["Simulations"] == "1,000"
        assert values["P(Value >= Goal)"] == "31.42%"
        assert values["90% Interval"] == "4,780.11 to 6,301.57"
