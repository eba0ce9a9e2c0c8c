# tests/utils.py
"""
Single source of truth for test data and factories.
Update values here to cascade across the test suite.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Any

from mortcalc.schemas.models import LoanScenario

# -----------------------------
# Global defaults (edit once)
# -----------------------------

DEFAULT_PRINCIPAL = 200_000
DEFAULT_RATE_PCT = 6.0
DEFAULT_TERM_YEARS = 30

# Reference figure for 200k @ 6% over 30 years
DEFAULT_MONTHLY_PAYMENT = 1199.10

# A spread of policy-valid loans used by property-style tests
VALID_SCENARIO_GRID: list[tuple[int, float, int]] = [
    (1_000, 1.0, 1),
    (1_000, 30.0, 30),
    (100_000, 5.0, 15),
    (200_000, 6.0, 30),
    (350_000, 3.25, 20),
    (750_000, 7.875, 25),
    (1_000_000, 30.0, 1),
    (1_000_000, 1.0, 30),
]


def make_scenario(
    principal: int = DEFAULT_PRINCIPAL,
    rate_pct: float = DEFAULT_RATE_PCT,
    term_years: int = DEFAULT_TERM_YEARS,
) -> LoanScenario:
    return LoanScenario(principal=principal, annual_interest_rate_percent=rate_pct, term_years=term_years)


def scenario_dict(
    principal: int = DEFAULT_PRINCIPAL,
    rate_pct: float = DEFAULT_RATE_PCT,
    term_years: int = DEFAULT_TERM_YEARS,
) -> dict[str, Any]:
    """Scenario in the JSON shape accepted by the inputs loader."""
    return {"principal": principal, "annual_interest_rate_percent": rate_pct, "term_years": term_years}


def write_json(path: Path, payload: Any) -> Path:
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def scripted_input(lines: Iterable[str]) -> tuple[Callable[[str], str], list[str]]:
    """
    Build a read_line stand-in that replays `lines` and records each prompt.
    Raises EOFError once the script is exhausted, like input() at end of stdin.
    """
    it = iter(lines)
    prompts: list[str] = []

    def _read(prompt: str) -> str:
        prompts.append(prompt)
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return _read, prompts
