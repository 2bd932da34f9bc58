"""
Tests for loading portfolio configs from JSON and CSV files.
"""
import json
import pytest
from core.config import PortfolioConfig
from core.errors import InvalidConfig
from data_prep.loader import load_portfolio_config, load_scenarios_csv, parse_portfolio_config

BASE = {
    "initial_investment": 3340.0,
    "expected_yearly_return": 0.1,
    "monthly_contributions": 50.0,
    "volatility": 0.1,
    "years": 3,
    "goal": 5800.0,
    "num_simulations": 1000,
}


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "portfolio.json"
    path.write_text(json.dumps({**BASE, "seed": 7}), encoding="utf-8")
    return path


@pytest.mark.unit
class TestJsonLoader:
    """Tests for single-portfolio JSON files."""

    def test_load(self, config_file):
        config = load_portfolio_config(config_file)
        assert config == PortfolioConfig(**BASE, seed=7)

    def test_defaults_applied(self):
        data = {k: v for k, v in BASE.items() if k not in ("monthly_contributions", "num_simulations")}
        config = parse_portfolio_config(data)
        assert config.monthly_contributions == 0.0
        assert config.num_simulations == 10_000
        assert config.seed is None

    def test_missing_field(self):
        data = {k: v for k, v in BASE.items() if k != "goal"}
        with pytest.raises(InvalidConfig, match="goal"):
            parse_portfolio_config(data)

    def test_unknown_field(self):
        with pytest.raises(InvalidConfig):
            parse_portfolio_config({**BASE, "inflation": 0.02})

    def test_wrong_type(self):
        with pytest.raises(InvalidConfig):
            parse_portfolio_config({**BASE, "years": "three"})

    def test_not_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(InvalidConfig):
            load_portfolio_config(path)

    def test_not_an_object(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text("[1, 2, 3]", encoding="utf-8")
        with pytest.raises(InvalidConfig):
            load_portfolio_config(path)

    def test_not_utf8(self, tmp_path):
        path = tmp_path / "latin1.json"
        path.write_bytes(b"\xff\xfe{\"goal\": 1}")
        with pytest.raises(InvalidConfig, match="UTF-8"):
            load_portfolio_config(path)


@pytest.mark.unit
class TestCsvLoader:
    """Tests for multi-scenario CSV files."""

    def test_load_scenarios(self, tmp_path):
        path = tmp_path / "scenarios.csv"
        path.write_text(
            "name,initial_investment,expected_yearly_return,monthly_contributions,"
            "volatility,years,goal,num_simulations,seed\n"
            "base,3340,0.10,50,0.10,3,5800,1000,1\n"
            "stress,3340,0.02,50,0.25,3,5800,1000,\n",
            encoding="utf-8",
        )
        scenarios = load_scenarios_csv(path)
        assert list(scenarios) == ["base", "stress"]
        assert scenarios["base"].seed == 1
        assert scenarios["base"].years == 3
        assert scenarios["stress"].seed is None
        assert scenarios["stress"].volatility == 0.25

    def test_missing_name_column(self, tmp_path):
        path = tmp_path / "scenarios.csv"
        path.write_text("initial_investment,years\n1000,3\n", encoding="utf-8")
        with pytest.raises(InvalidConfig, match="name"):
            load_scenarios_csv(path)

    def test_duplicate_names(self, tmp_path):
        path = tmp_path / "scenarios.csv"
        header = ",".join(["name"] + list(BASE)) + "\n"
        row = ",".join(["same"] + [str(v) for v in BASE.values()]) + "\n"
        path.write_text(header + row + row, encoding="utf-8")
        with pytest.raises(InvalidConfig, match="Duplicate"):
            load_scenarios_csv(path)
