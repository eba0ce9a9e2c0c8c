# tests/unit/test_yearly_rollup.py
import pytest

from mortcalc.core.finance.amortization import (
    annual_totals,
    balance_after_years,
    generate_schedule,
    summarize_by_year,
)
from tests.utils import make_scenario


def test_year1_totals(baseline_scenario):
    sched = generate_schedule(baseline_scenario)
    total, interest, principal = annual_totals(sched, 1)
    assert total == pytest.approx(sum(e.payment for e in sched[:12]))
    assert interest + principal == pytest.approx(total)


def test_year_past_end_is_zero(baseline_scenario):
    sched = generate_schedule(baseline_scenario)
    assert annual_totals(sched, 31) == (0.0, 0.0, 0.0)


def test_year_index_is_one_based(baseline_scenario):
    sched = generate_schedule(baseline_scenario)
    with pytest.raises(ValueError):
        annual_totals(sched, 0)


def test_summarize_by_year_rows(baseline_scenario):
    sched = generate_schedule(baseline_scenario)
    years = summarize_by_year(sched)
    assert [y.year for y in years] == list(range(1, 31))
    assert years[0].ending_balance == sched[11].balance
    assert years[-1].ending_balance == 0.0
    assert sum(y.principal for y in years) == pytest.approx(200_000, abs=1e-6)


def test_summarize_by_year_empty():
    assert summarize_by_year([]) == []


def test_balance_after_years():
    sched = generate_schedule(make_scenario(500_000, 4.5, 30))
    assert balance_after_years(sched, 0) == pytest.approx(500_000)
    bal_5 = balance_after_years(sched, 5)
    assert 0 < bal_5 < 500_000
    assert bal_5 == sched[59].balance
    # Clamped to the schedule length
    assert balance_after_years(sched, 99) == 0.0
    assert balance_after_years([], 3) == 0.0
