# tests/unit/test_models.py
import pytest
from pydantic import ValidationError

from mortcalc.schemas.models import LoanScenario


def test_scenario_derived_terms(baseline_scenario):
    assert baseline_scenario.monthly_rate == pytest.approx(0.005)
    assert baseline_scenario.number_of_payments == 360


def test_scenario_is_frozen(baseline_scenario):
    with pytest.raises(ValidationError):
        baseline_scenario.principal = 1  # type: ignore[misc]


def test_scenario_accepts_values_outside_policy_bounds():
    # Policy bounds belong to the input layer, not the model.
    s = LoanScenario(principal=10, annual_interest_rate_percent=45.0, term_years=50)
    assert s.number_of_payments == 600


def test_scenario_rejects_fractional_principal():
    with pytest.raises(ValidationError):
        LoanScenario(principal=1500.5, annual_interest_rate_percent=6.0, term_years=30)


def test_scenarios_compare_by_value():
    a = LoanScenario(principal=1000, annual_interest_rate_percent=5.0, term_years=1)
    b = LoanScenario(principal=1000, annual_interest_rate_percent=5.0, term_years=1)
    assert a == b
    assert hash(a) == hash(b)
