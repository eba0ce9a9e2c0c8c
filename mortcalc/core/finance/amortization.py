# mortcalc/core/finance/amortization.py

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Literal

from mortcalc.core.errors import InvalidScenarioError
from mortcalc.schemas.models import MONTHS_IN_YEAR, LoanScenario, LoanSummary

logger = logging.getLogger(__name__)

_EPS = 1e-6  # for floating cleanup
_REL_EPS = 1e-9  # final-period drift allowed per unit of principal

FinalPeriod = Literal["clamp", "settle"]


@dataclass(frozen=True)
class AmortizationEntry:
    """
    Immutable record of a single monthly payment.

    Attributes:
        period (int): 1-based month index.
        payment (float): Level payment for the month (principal + interest).
        principal (float): Principal repaid this month.
        interest (float): Interest charged this month.
        balance (float): Remaining balance after this month's payment.
    """

    period: int
    payment: float
    principal: float
    interest: float
    balance: float

    def __str__(self) -> str:
        return (
            f"Month {self.period}: Payment: ${self.payment:.2f}, Principal: ${self.principal:.2f}, "
            f"Interest: ${self.interest:.2f}, Remaining: ${self.balance:.2f}"
        )


@dataclass(frozen=True)
class YearSummary:
    year: int
    payment: float
    interest: float
    principal: float
    ending_balance: float


def _check_scenario(scenario: LoanScenario) -> None:
    """Raise InvalidScenarioError for inputs the annuity formula cannot handle."""
    values = (scenario.principal, scenario.annual_interest_rate_percent, scenario.term_years)
    try:
        finite = all(math.isfinite(v) for v in values)
    except OverflowError as e:
        # ints too large for a float
        raise InvalidScenarioError(f"Scenario values are out of floating-point range: {scenario!r}") from e
    if not finite:
        raise InvalidScenarioError(f"Scenario values must be finite numbers: {scenario!r}")
    if scenario.principal < 0:
        raise InvalidScenarioError(f"Principal must be >= 0, got {scenario.principal}")
    if scenario.term_years <= 0:
        raise InvalidScenarioError(f"Term must be at least 1 year, got {scenario.term_years}")
    if scenario.annual_interest_rate_percent <= 0:
        raise InvalidScenarioError(
            f"Annual interest rate must be > 0%, got {scenario.annual_interest_rate_percent}%"
        )


def calculate_monthly_payment(scenario: LoanScenario) -> float:
    """
    Constant monthly payment for a fully-amortizing fixed-rate loan.

    Formula (standard annuity):
        PMT = [ P * r * (1 + r)^n ] / [ (1 + r)^n - 1 ]

    Where:
        P = principal
        r = monthly rate = annual percent / 100 / 12
        n = number of monthly payments = term_years * 12

    (1 + r)^n - 1 is evaluated as expm1(n * log1p(r)), which keeps full
    precision for rates near zero (the payment tends to P / n).

    Raises:
        InvalidScenarioError: zero/negative term or rate, negative principal,
            non-finite or out-of-range values, a monthly rate that underflows
            to 0.0, or a rate so large that (1 + r)^n overflows.
    """
    _check_scenario(scenario)

    r = scenario.monthly_rate
    n = scenario.number_of_payments
    try:
        den = math.expm1(n * math.log1p(r))
    except OverflowError as e:
        raise InvalidScenarioError(f"Rate {scenario.annual_interest_rate_percent}% overflows over {n} payments") from e
    growth = den + 1

    if den == 0:
        raise InvalidScenarioError(
            f"Rate {scenario.annual_interest_rate_percent}% is too small to amortize over {n} payments"
        )

    payment = scenario.principal * r * (growth / den)
    if not math.isfinite(payment):
        raise InvalidScenarioError(f"Monthly payment is not a finite number for {scenario!r}")
    return payment


def calculate_total_interest(scenario: LoanScenario) -> float:
    """Total interest over the life of the loan: payment * n - principal."""
    return calculate_monthly_payment(scenario) * scenario.number_of_payments - scenario.principal


def summarize(scenario: LoanScenario) -> LoanSummary:
    payment = calculate_monthly_payment(scenario)
    n = scenario.number_of_payments
    return LoanSummary(
        scenario=scenario,
        monthly_payment=payment,
        total_interest=payment * n - scenario.principal,
        total_paid=payment * n,
    )


def generate_schedule(scenario: LoanScenario, *, final_period: FinalPeriod = "clamp") -> list[AmortizationEntry]:
    """
    Build the month-by-month amortization schedule (length = term_years * 12).

    Args:
        scenario: Loan terms.
        final_period: How the last month absorbs floating-point drift.
            "clamp"  - balance = max(0, balance - principal); the last principal
                       component may overshoot the true balance by a rounding error.
            "settle" - the last principal component is the remaining balance
                       itself, so the schedule repays exactly the principal.

    Returns:
        One AmortizationEntry per month; the payment is the same on every entry
        and the final balance is exactly 0.0.

    Raises:
        InvalidScenarioError: as calculate_monthly_payment, or when the last
            level payment would leave more than max(1e-6, 1e-9 * principal)
            unpaid (rates so high that each month's principal share is lost
            to rounding). Checked in both final_period modes.
    """
    if final_period not in ("clamp", "settle"):
        raise ValueError(f"final_period must be 'clamp' or 'settle', got {final_period!r}")

    pmt = calculate_monthly_payment(scenario)
    r = scenario.monthly_rate
    n = scenario.number_of_payments
    logger.debug("Generating %d-month schedule for %r (payment=%.6f)", n, scenario, pmt)

    schedule: list[AmortizationEntry] = []
    bal = float(scenario.principal)
    final_tolerance = max(_EPS, _REL_EPS * bal)

    for month in range(1, n + 1):
        interest = bal * r
        principal_paid = pmt - interest
        if month == n:
            residual = bal - principal_paid
            if residual >= final_tolerance:
                raise InvalidScenarioError(
                    f"Schedule for {scenario!r} leaves {residual:.6g} unpaid; the rate is too high to amortize"
                )
            if final_period == "settle":
                principal_paid = bal
        bal = max(0.0, bal - principal_paid)
        # Clean tiny residual drift; the last balance is always zero
        if bal < _EPS or month == n:
            bal = 0.0
        schedule.append(AmortizationEntry(month, pmt, principal_paid, interest, bal))

    return schedule


def annual_totals(schedule: list[AmortizationEntry], year_index: int) -> tuple[float, float, float]:
    """
    Aggregate the payments of a 1-based year.

    Returns:
        (payment_total, interest_paid, principal_paid); zeros when the year
        lies past the end of the schedule.
    """
    if year_index <= 0:
        raise ValueError("year_index is 1-based (Year 1, Year 2, ...).")

    start = (year_index - 1) * MONTHS_IN_YEAR
    end = min(len(schedule), year_index * MONTHS_IN_YEAR)
    if start >= len(schedule):
        return (0.0, 0.0, 0.0)

    rows = schedule[start:end]
    return (
        sum(e.payment for e in rows),
        sum(e.interest for e in rows),
        sum(e.principal for e in rows),
    )


def summarize_by_year(schedule: list[AmortizationEntry]) -> list[YearSummary]:
    """Roll a monthly schedule up into one row per year (a partial last year is kept)."""
    years = math.ceil(len(schedule) / MONTHS_IN_YEAR)
    out: list[YearSummary] = []
    for y in range(1, years + 1):
        payment, interest, principal = annual_totals(schedule, y)
        last = schedule[min(len(schedule), y * MONTHS_IN_YEAR) - 1]
        out.append(YearSummary(y, payment=payment, interest=interest, principal=principal, ending_balance=last.balance))
    return out


def balance_after_years(schedule: list[AmortizationEntry], years_elapsed: int) -> float:
    """
    Remaining balance after a whole number of years (clamped to the schedule length).

    Year 0 is the balance before any payment, i.e. the first entry's balance
    plus its principal component.
    """
    if not schedule:
        return 0.0
    if years_elapsed <= 0:
        first = schedule[0]
        return first.balance + first.principal
    cutoff = min(len(schedule), years_elapsed * MONTHS_IN_YEAR)
    return schedule[cutoff - 1].balance
