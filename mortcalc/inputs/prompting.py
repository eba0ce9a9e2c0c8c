# mortcalc/inputs/prompting.py
"""
Console input validation.

Goals
-----
- No global console state: every function takes its read/write callables.
- Bad input is never fatal. Non-numeric or out-of-range text becomes a
  RetryPrompt signal and the prompt loop asks again.
- Policy bounds live here, not in the engine or the LoanScenario model.

Public API
----------
- validate_number(raw, *, minimum, maximum, kind) -> number | RetryPrompt
- prompt_number(label, *, minimum, maximum, kind, read_line, write) -> number
- prompt_scenario(read_line, write) -> LoanScenario
- confirm(answer) -> bool
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeAlias

from mortcalc.core.errors import InputClosedError
from mortcalc.schemas.models import LoanScenario

Number: TypeAlias = int | float

ReadLine = Callable[[str], str]
Write = Callable[[str], None]

NOT_A_NUMBER = "Invalid input. Please enter a number."

# 1-3 leading digits, then groups of three joined by one consistent separator
_GROUPED = re.compile(r"[+-]?\d{1,3}(?P<sep>[,_])\d{3}(?:(?P=sep)\d{3})*(?:\.\d*)?")


@dataclass(frozen=True)
class InputPolicy:
    """Accepted ranges for interactively entered loan terms (inclusive)."""

    min_principal: int = 1_000
    max_principal: int = 1_000_000
    min_annual_rate: float = 1.0
    max_annual_rate: float = 30.0
    min_term_years: int = 1
    max_term_years: int = 30


DEFAULT_POLICY = InputPolicy()


@dataclass(frozen=True)
class RetryPrompt:
    """Signal that the entered text was rejected; `reason` is shown to the user."""

    reason: str


def _range_message(minimum: float, maximum: float, kind: type) -> str:
    if kind is float:
        return f"Enter a value between {minimum:.2f} and {maximum:.2f}"
    return f"Enter a value between {minimum} and {maximum}"


def validate_number(raw: str, *, minimum: Number, maximum: Number, kind: type = int) -> Number | RetryPrompt:
    """
    Parse `raw` as `kind` and check it against [minimum, maximum].

    Surrounding whitespace is ignored. Thousands separators are accepted only
    in well-formed groups of three ("200,000", "1,000.5", "200_000"); text such
    as "2,5" or "1,00" is rejected rather than read as 25 or 100. Returns the
    value, or a RetryPrompt explaining the rejection.
    """
    text = raw.strip()
    if "," in text or "_" in text:
        if not _GROUPED.fullmatch(text):
            return RetryPrompt(NOT_A_NUMBER)
        text = text.replace(",", "").replace("_", "")
    try:
        value = kind(text)
    except ValueError:
        return RetryPrompt(NOT_A_NUMBER)
    # float("nan") parses but can never be in range.
    if not (minimum <= value <= maximum):
        return RetryPrompt(_range_message(minimum, maximum, kind))
    return value


def prompt_number(
    label: str,
    *,
    minimum: Number,
    maximum: Number,
    kind: type = int,
    read_line: ReadLine = input,
    write: Write = print,
) -> Number:
    """
    Ask for `label` until a valid value is entered.

    Raises:
        InputClosedError: if the input stream ends (EOFError from read_line).
    """
    while True:
        try:
            raw = read_line(f"{label}: ")
        except EOFError as e:
            raise InputClosedError(f"Input ended while reading {label!r}") from e
        result = validate_number(raw, minimum=minimum, maximum=maximum, kind=kind)
        if isinstance(result, RetryPrompt):
            write(result.reason)
            continue
        return result


def prompt_scenario(
    read_line: ReadLine = input,
    write: Write = print,
    policy: InputPolicy = DEFAULT_POLICY,
) -> LoanScenario:
    """Collect principal, rate and term within the policy bounds."""
    principal = prompt_number(
        "Principal",
        minimum=policy.min_principal,
        maximum=policy.max_principal,
        kind=int,
        read_line=read_line,
        write=write,
    )
    rate = prompt_number(
        "Annual Interest Rate",
        minimum=policy.min_annual_rate,
        maximum=policy.max_annual_rate,
        kind=float,
        read_line=read_line,
        write=write,
    )
    term = prompt_number(
        "Period (Years)",
        minimum=policy.min_term_years,
        maximum=policy.max_term_years,
        kind=int,
        read_line=read_line,
        write=write,
    )
    return LoanScenario(principal=principal, annual_interest_rate_percent=rate, term_years=term)


def confirm(answer: str) -> bool:
    """True when the answer starts with "y" (case-insensitive)."""
    return answer.strip().lower().startswith("y")
