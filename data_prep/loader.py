"""
Load portfolio configs from disk.

JSON files hold one portfolio; CSV files hold one scenario per row. Both are
type-checked through PortfolioConfigModel before becoming a PortfolioConfig.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, Optional, Union

import pandas as pd
from pydantic import BaseModel, ConfigDict, ValidationError

from core.config import PortfolioConfig
from core.errors import InvalidConfig

SCENARIO_NAME_COLUMN = "name"


class PortfolioConfigModel(BaseModel):
    """Schema for file-sourced portfolio configs."""

    model_config = ConfigDict(extra="forbid", strict=False)

    initial_investment: float
    expected_yearly_return: float
    monthly_contributions: float = 0.0
    volatility: float
    years: int
    goal: float
    num_simulations: int = 10_000
    seed: Optional[int] = None

    def to_config(self) -> PortfolioConfig:
        return PortfolioConfig(**self.model_dump())


def parse_portfolio_config(data: dict) -> PortfolioConfig:
    """Validate a plain dict into a PortfolioConfig."""
    try:
        return PortfolioConfigModel.model_validate(data).to_config()
    except ValidationError as exc:
        raise InvalidConfig(f"Invalid portfolio config: {exc}") from exc


def load_portfolio_config(path: Union[str, Path]) -> PortfolioConfig:
    """Load a single portfolio config from a JSON file."""
    path = Path(path)
    with path.open("r", encoding="utf-8") as fh:
        try:
            data = json.load(fh)
        except json.JSONDecodeError as exc:
            raise InvalidConfig(f"{path} is not valid JSON: {exc}") from exc
        except UnicodeDecodeError as exc:
            raise InvalidConfig(f"{path} is not UTF-8 text: {exc}") from exc
    if not isinstance(data, dict):
        raise InvalidConfig(f"{path} must contain a JSON object, got {type(data).__name__}.")
    return parse_portfolio_config(data)


def load_scenarios_csv(path: Union[str, Path]) -> Dict[str, PortfolioConfig]:
    """
    Load several portfolio scenarios from a CSV file.

    Expected columns: name, initial_investment, expected_yearly_return,
    monthly_contributions, volatility, years, goal, num_simulations, [seed].
    Returns {name: PortfolioConfig} in file order.
    """
    df = pd.read_csv(path)
    if SCENARIO_NAME_COLUMN not in df.columns:
        raise InvalidConfig(f"Missing required column: {SCENARIO_NAME_COLUMN!r}")

    names = df[SCENARIO_NAME_COLUMN].astype(str)
    dup = names[names.duplicated()].tolist()
    if dup:
        raise InvalidConfig(f"Duplicate scenario names: {dup}")

    scenarios: Dict[str, PortfolioConfig] = {}
    for name, row in zip(names, df.drop(columns=[SCENARIO_NAME_COLUMN]).to_dict(orient="records")):
        # NaN cells (e.g. an empty seed) mean "not set"
        data = {k: v for k, v in row.items() if not pd.isna(v)}
        try:
            scenarios[name] = PortfolioConfigModel.model_validate(data).to_config()
        except ValidationError as exc:
            raise InvalidConfig(f"Invalid scenario {name!r}: {exc}") from exc
    return scenarios
