"""
Tests for the console entry point.
"""
import json
import pytest
from app.cli import build_parser, main, resolve_config
from core.config import DEFAULT_PORTFOLIO

DETERMINISTIC = [
    "--initial-investment", "10000",
    "--expected-yearly-return", "0.10",
    "--volatility", "0",
    "--monthly-contributions", "0",
    "--years", "1",
    "--goal", "11000",
    "--num-simulations", "5",
]


@pytest.mark.unit
class TestResolveConfig:
    """Tests for building the config from flags."""

    def test_defaults_to_example_portfolio(self):
        args = build_parser().parse_args([])
        assert resolve_config(args) == DEFAULT_PORTFOLIO

    def test_overrides(self):
        args = build_parser().parse_args(["--years", "7", "--seed", "3"])
        config = resolve_config(args)
        assert config.years == 7
        assert config.seed == 3
        assert config.goal == DEFAULT_PORTFOLIO.goal

    def test_config_file_with_override(self, tmp_path):
        path = tmp_path / "p.json"
        path.write_text(json.dumps({
            "initial_investment": 500.0,
            "expected_yearly_return": 0.05,
            "volatility": 0.1,
            "years": 4,
            "goal": 700.0,
            "num_simulations": 100,
        }), encoding="utf-8")
        args = build_parser().parse_args(["--config", str(path), "--goal", "900"])
        config = resolve_config(args)
        assert config.initial_investment == 500.0
        assert config.goal == 900.0


@pytest.mark.integration
class TestMain:
    """End-to-end runs through the CLI."""

    def test_deterministic_run(self, capsys):
        assert main(DETERMINISTIC) == 0
        out = capsys.readouterr().out
        assert "Running 5 simulations..." in out
        assert "Median Portfolio Value: 11000.00" in out
        assert "Probability of reaching the goal of 11000.00: 100.00%" in out
        assert "Confidence Interval at 90%: (11000.00, 11000.00)" in out
        assert "Monte Carlo simulation completed." in out

    def test_zero_simulations_exit_code(self, capsys):
        argv = DETERMINISTIC[:-1] + ["0"]
        assert main(argv) == 2
        captured = capsys.readouterr()
        assert "num_simulations" in captured.err
        assert "Median Portfolio Value" not in captured.out

    def test_negative_volatility_exit_code(self, capsys):
        argv = DETERMINISTIC + ["--volatility", "-0.2"]
        assert main(argv) == 2
        assert "volatility" in capsys.readouterr().err

    def test_missing_config_file(self, tmp_path, capsys):
        assert main(["--config", str(tmp_path / "missing.json")]) == 2

    def test_negative_seed_exit_code(self, capsys):
        argv = DETERMINISTIC + ["--seed", "-1"]
        assert main(argv) == 2
        assert "seed" in capsys.readouterr().err

    def test_nan_goal_exit_code(self, capsys):
        argv = DETERMINISTIC + ["--goal", "nan"]
        assert main(argv) == 2
        assert "goal" in capsys.readouterr().err
