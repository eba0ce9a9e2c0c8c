# mortcalc/core/errors.py
"""
Typed errors for the mortgage calculator.

Exports
-------
- MortgageCalcError, InvalidScenarioError, InputClosedError,
  UnknownLocaleError, ConfigError
- MORTCALC_ERRORS
"""

from __future__ import annotations

# =========================
# Exception types
# =========================


class MortgageCalcError(RuntimeError):
    """Base class for mortgage calculator failures."""


class InvalidScenarioError(MortgageCalcError, ValueError):
    """Scenario cannot be amortized (zero term, non-positive rate, non-finite inputs)."""


class InputClosedError(MortgageCalcError):
    """Input stream ended while a value was still being prompted for."""


class UnknownLocaleError(MortgageCalcError, ValueError):
    """No currency format is registered for the requested locale."""


class ConfigError(MortgageCalcError, ValueError):
    """Scenario file could not be read or failed validation."""


# Selector tuple for grouped exception handling
MORTCALC_ERRORS = (
    InvalidScenarioError,
    InputClosedError,
    UnknownLocaleError,
    ConfigError,
)

__all__ = [
    "MortgageCalcError",
    "InvalidScenarioError",
    "InputClosedError",
    "UnknownLocaleError",
    "ConfigError",
    "MORTCALC_ERRORS",
]
