# mortcalc/core/finance/__init__.py

from .amortization import (
    AmortizationEntry,
    YearSummary,
    annual_totals,
    balance_after_years,
    calculate_monthly_payment,
    calculate_total_interest,
    generate_schedule,
    summarize,
    summarize_by_year,
)

__all__ = [
    "AmortizationEntry",
    "YearSummary",
    "calculate_monthly_payment",
    "calculate_total_interest",
    "generate_schedule",
    "summarize",
    "summarize_by_year",
    "annual_totals",
    "balance_after_years",
]
