"""
Tests for pre-flight config validation.
"""
import pytest
from core.config import DEFAULT_PORTFOLIO, PortfolioConfig
from core.errors import InvalidConfig
from data_prep.validators import ValidationResult, validate_config


def make_config(**overrides):
    params = dict(
        initial_investment=10_000.0,
        expected_yearly_return=0.07,
        monthly_contributions=100.0,
        volatility=0.15,
        years=10,
        goal=30_000.0,
        num_simulations=5000,
    )
    params.update(overrides)
    return PortfolioConfig(**params)


@pytest.mark.unit
class TestValidationResult:
    """Tests for the ValidationResult container."""

    def test_empty_is_valid(self):
        result = ValidationResult()
        assert result.is_valid
        assert "All checks passed" in result.summary()
        result.raise_for_errors()

    def test_errors_raise(self):
        result = ValidationResult(errors=["bad"])
        assert not result.is_valid
        assert "ERRORS (1)" in result.summary()
        with pytest.raises(InvalidConfig, match="bad"):
            result.raise_for_errors()


@pytest.mark.unit
class TestValidateConfig:
    """Tests for each validation rule."""

    def test_default_portfolio_is_clean(self):
        result = validate_config(DEFAULT_PORTFOLIO)
        assert result.is_valid
        assert result.warnings == []

    def test_zero_simulations_is_error(self):
        result = validate_config(make_config(num_simulations=0))
        assert not result.is_valid
        assert any("num_simulations" in e for e in result.errors)

    def test_few_simulations_is_warning(self):
        result = validate_config(make_config(num_simulations=50))
        assert result.is_valid
        assert any("noisy" in w for w in result.warnings)

    def test_zero_years_is_allowed(self):
        assert validate_config(make_config(years=0)).is_valid

    def test_negative_years_is_error(self):
        assert not validate_config(make_config(years=-1)).is_valid

    def test_fractional_years_is_error(self):
        assert not validate_config(make_config(years=2.5)).is_valid

    def test_negative_volatility_is_error(self):
        result = validate_config(make_config(volatility=-0.1))
        assert any("volatility" in e for e in result.errors)

    def test_percent_volatility_is_warning(self):
        result = validate_config(make_config(volatility=15.0))
        assert result.is_valid
        assert any("percent" in w for w in result.warnings)

    def test_percent_return_is_warning(self):
        result = validate_config(make_config(expected_yearly_return=7.0))
        assert result.is_valid
        assert any("expected_yearly_return" in w for w in result.warnings)

    def test_non_positive_principal_is_warning(self):
        result = validate_config(make_config(initial_investment=0.0))
        assert result.is_valid
        assert any("initial_investment" in w for w in result.warnings)

    def test_draining_withdrawals_warn(self):
        config = make_config(initial_investment=1000.0, monthly_contributions=-200.0,
                             expected_yearly_return=0.0, years=5)
        result = validate_config(config)
        assert any("exhaust" in w for w in result.warnings)

    def test_sustainable_withdrawals_do_not_warn(self):
        config = make_config(initial_investment=1_000_000.0, monthly_contributions=-100.0,
                             expected_yearly_return=0.05, years=5)
        result = validate_config(config)
        assert not any("exhaust" in w for w in result.warnings)

    @pytest.mark.parametrize("field", ["initial_investment", "monthly_contributions", "goal"])
    def test_non_finite_money_field_is_error(self, field):
        result = validate_config(make_config(**{field: float("nan")}))
        assert not result.is_valid
        assert any(field in e for e in result.errors)

    def test_negative_seed_is_error(self):
        result = validate_config(make_config(seed=-1))
        assert any("seed" in e for e in result.errors)

    def test_seed_zero_is_allowed(self):
        assert validate_config(make_config(seed=0)).is_valid
