# mortcalc/reports/comparison.py

from __future__ import annotations

from collections.abc import Sequence

from mortcalc.core.finance.amortization import summarize
from mortcalc.reports.formatting import US, CurrencyFormat, format_currency, format_percent
from mortcalc.schemas.models import LoanScenario

COMPARISON_HEADER = "Loan Scenario Comparison:\n"


def compare_scenarios(scenarios: Sequence[LoanScenario], *, fmt: CurrencyFormat = US) -> str:
    """
    Restate each scenario with its monthly payment and total interest.

    Blocks keep input order and are numbered from 1. No ranking or aggregate
    figures are computed. An empty sequence yields the header alone.

    Raises:
        InvalidScenarioError: if any scenario cannot be amortized.
    """
    parts = [COMPARISON_HEADER]
    for i, scenario in enumerate(scenarios, start=1):
        s = summarize(scenario)
        parts.append(
            f"Scenario {i}: Principal: {format_currency(scenario.principal, fmt)}, "
            f"Rate: {format_percent(scenario.annual_interest_rate_percent)}, "
            f"Term: {scenario.term_years} years\n"
            f"   Monthly Payment: {format_currency(s.monthly_payment, fmt)}\n"
            f"   Total Interest Paid: {format_currency(s.total_interest, fmt)}\n\n"
        )
    return "".join(parts)
