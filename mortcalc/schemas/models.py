# mortcalc/schemas/models.py

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

MONTHS_IN_YEAR = 12
PERCENT = 100

# =========================
# Core inputs
# =========================


class LoanScenario(BaseModel):
    """
    Fixed-rate loan terms. Immutable once constructed.

    Policy bounds (principal 1,000–1,000,000, rate 1–30%, term 1–30 years) are
    enforced where values are collected, not here: the engine still accepts
    degenerate scenarios and reports the ones it cannot amortize.
    """

    model_config = ConfigDict(frozen=True)

    principal: int = Field(..., description="Amount borrowed (whole currency units).")
    annual_interest_rate_percent: float = Field(
        ..., description="Nominal annual rate as a percentage (e.g., 6.0 = 6%), compounded monthly."
    )
    term_years: int = Field(..., description="Loan term in years; one payment per month.")

    @property
    def monthly_rate(self) -> float:
        """Periodic rate as a fraction: annual percent / 100 / 12."""
        return self.annual_interest_rate_percent / PERCENT / MONTHS_IN_YEAR

    @property
    def number_of_payments(self) -> int:
        return self.term_years * MONTHS_IN_YEAR


# =========================
# Computed outputs
# =========================


class LoanSummary(BaseModel):
    """Headline figures for one scenario."""

    model_config = ConfigDict(frozen=True)

    scenario: LoanScenario
    monthly_payment: float = Field(..., description="Level monthly payment (principal + interest).")
    total_interest: float = Field(..., description="monthly_payment × number of payments − principal.")
    total_paid: float = Field(..., description="monthly_payment × number of payments.")
