# mortcalc/inputs/inputs.py
"""
Scenario file loader for the mortgage calculator.

Goals
-----
- File-first inputs with validation via Pydantic.
- Scenario values are held to the same policy bounds as interactive entry.
- Minimal environment-variable overrides for CI/CLI convenience.

Supported JSON shapes
---------------------
1) Legacy (root = list of scenarios)
   [
     {"principal": 200000, "annual_interest_rate_percent": 6.0, "term_years": 30},
     ...
   ]

2) Structured (root = AppInputs)
   {
     "scenarios": [ ... ],
     "run": {
       "locale": "en_US",
       "schedule_months": 5,
       "out": "mortgage_report.md",
       "final_period": "clamp"
     }
   }

Environment overrides (optional)
--------------------------------
- MORTCALC_LOCALE           -> AppInputs.run.locale
- MORTCALC_OUT              -> AppInputs.run.out
- MORTCALC_SCHEDULE_MONTHS  -> AppInputs.run.schedule_months (int)

Public API
----------
- class InputsLoader:
    - load(path: str | Path) -> AppInputs
    - load_json(text: str) -> AppInputs
    - with_overrides(cfg, **kwargs) -> AppInputs (non-destructive copies)
- function load_inputs(path: str | Path) -> AppInputs  (convenience)
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field, ValidationError

from mortcalc.core.errors import ConfigError
from mortcalc.inputs.prompting import DEFAULT_POLICY as _P
from mortcalc.schemas.models import LoanScenario

logger = logging.getLogger(__name__)

# ----------------------------
# Pydantic models for structured inputs
# ----------------------------


class ScenarioInput(BaseModel):
    """One scenario as written in a file, held to the interactive policy bounds."""

    principal: int = Field(..., ge=_P.min_principal, le=_P.max_principal, description="Amount borrowed.")
    annual_interest_rate_percent: float = Field(
        ..., ge=_P.min_annual_rate, le=_P.max_annual_rate, description="Annual rate in percent."
    )
    term_years: int = Field(..., ge=_P.min_term_years, le=_P.max_term_years, description="Term in years.")

    def to_scenario(self) -> LoanScenario:
        return LoanScenario(**self.model_dump())


class RunOptions(BaseModel):
    """Runtime (non-financial) options controlling output."""

    locale: str = Field("en_US", description="Currency format key (e.g., en_US, de_DE).")
    schedule_months: int = Field(5, ge=0, le=360, description="Schedule months to print per scenario.")
    out: str | None = Field(None, description="Path to write a Markdown report (optional).")
    final_period: Literal["clamp", "settle"] = Field("clamp", description="Final-period drift handling.")


class AppInputs(BaseModel):
    """
    Full input payload.

    Attributes:
        scenarios: Loan scenarios in the order they should be reported.
        run:       Output options for the current execution.
    """

    scenarios: list[ScenarioInput] = Field(default_factory=list)
    run: RunOptions = RunOptions()

    def loan_scenarios(self) -> list[LoanScenario]:
        return [s.to_scenario() for s in self.scenarios]


# ----------------------------
# Loader
# ----------------------------


@dataclass(frozen=True)
class InputsLoader:
    """
    File-first inputs loader with light env overrides.

    Responsibilities:
        - Read JSON from a file or string
        - Accept both the legacy list and the structured shape
        - Validate with Pydantic
        - Apply environment overrides for run options
    """

    env_prefix: str = "MORTCALC_"

    # ---------- Public API ----------

    def load(self, path: str | Path) -> AppInputs:
        """
        Load inputs from a JSON file.

        Raises:
            FileNotFoundError: path does not exist.
            ConfigError: unsupported format, bad JSON, or validation failure.
        """
        p = Path(path)
        if not p.exists():
            raise FileNotFoundError(f"Inputs file not found: {p}")
        raw = self._read_json_file(p)
        cfg = self._parse_root(self._maybe_translate_legacy(raw))
        logger.debug("Loaded %d scenario(s) from %s", len(cfg.scenarios), p)
        return self._apply_env_overrides(cfg)

    def load_json(self, text: str) -> AppInputs:
        """
        Load inputs from a JSON string (either shape).
        """
        try:
            raw = json.loads(text)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON payload: {e}") from e
        cfg = self._parse_root(self._maybe_translate_legacy(raw))
        return self._apply_env_overrides(cfg)

    def with_overrides(
        self,
        cfg: AppInputs,
        *,
        locale: str | None = None,
        schedule_months: int | None = None,
        out: str | None = None,
        final_period: str | None = None,
    ) -> AppInputs:
        """
        Return a *new* AppInputs with provided non-null overrides applied to RunOptions.
        Does not mutate `cfg`.
        """
        updates: dict[str, Any] = {}
        if locale is not None:
            updates["locale"] = locale
        if schedule_months is not None:
            updates["schedule_months"] = schedule_months
        if out is not None:
            updates["out"] = out
        if final_period is not None:
            updates["final_period"] = final_period

        if not updates:
            return cfg

        return self._update_run(cfg, updates)

    # ---------- Internals ----------

    def _read_json_file(self, p: Path) -> Any:
        if p.suffix.lower() != ".json":
            raise ConfigError(f"Unsupported inputs format for {p.name}; only .json is supported.")
        try:
            return json.loads(p.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in {p}: {e}") from e

    def _maybe_translate_legacy(self, raw: Any) -> dict[str, Any]:
        """
        A bare list at the root is the legacy shape: wrap it as {"scenarios": [...]}.
        """
        if isinstance(raw, list):
            return {"scenarios": raw}
        if isinstance(raw, dict):
            return raw
        raise ConfigError(f"Inputs root must be a list or an object, got {type(raw).__name__}")

    def _parse_root(self, data: dict[str, Any]) -> AppInputs:
        try:
            return AppInputs.model_validate(data)
        except ValidationError as e:
            raise ConfigError(f"Inputs validation failed:\n{e}") from e

    def _update_run(self, cfg: AppInputs, updates: dict[str, Any]) -> AppInputs:
        # model_copy does not validate
        try:
            run_new = RunOptions.model_validate({**cfg.run.model_dump(), **updates})
        except ValidationError as e:
            raise ConfigError(f"Invalid run options:\n{e}") from e
        return cfg.model_copy(update={"run": run_new})

    def _apply_env_overrides(self, cfg: AppInputs) -> AppInputs:
        """
        Apply light, optional overrides from environment variables to run options.
        """
        prefix = self.env_prefix
        updates: dict[str, Any] = {}

        locale = os.getenv(f"{prefix}LOCALE")
        if locale:
            updates["locale"] = locale.strip()

        out = os.getenv(f"{prefix}OUT")
        if out:
            updates["out"] = out

        months = os.getenv(f"{prefix}SCHEDULE_MONTHS")
        if months:
            try:
                updates["schedule_months"] = int(months)
            except ValueError:
                # Ignore bad value; keep validated cfg.run.schedule_months
                logger.warning("Ignoring %sSCHEDULE_MONTHS=%r (not an integer)", prefix, months)

        if not updates:
            return cfg

        return self._update_run(cfg, updates)


# ----------------------------
# Convenience function
# ----------------------------


def load_inputs(path: str | Path) -> AppInputs:
    """Convenience wrapper for one-shot callers."""
    return InputsLoader().load(path)
