"""Fixed-rate mortgage calculator: payments, amortization schedules, scenario comparison."""

from mortcalc.core.errors import InvalidScenarioError, MortgageCalcError
from mortcalc.core.finance.amortization import (
    AmortizationEntry,
    calculate_monthly_payment,
    calculate_total_interest,
    generate_schedule,
    summarize,
)
from mortcalc.reports.comparison import compare_scenarios
from mortcalc.reports.formatting import CurrencyFormat, format_currency, get_currency_format
from mortcalc.schemas.models import LoanScenario, LoanSummary

__all__ = [
    "LoanScenario",
    "LoanSummary",
    "AmortizationEntry",
    "calculate_monthly_payment",
    "calculate_total_interest",
    "generate_schedule",
    "summarize",
    "compare_scenarios",
    "CurrencyFormat",
    "format_currency",
    "get_currency_format",
    "MortgageCalcError",
    "InvalidScenarioError",
]
