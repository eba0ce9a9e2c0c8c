# mortcalc/cli.py
"""
Command-line entry point.

Usage
-----
    python main.py                                  # interactive: prompt for one loan
    python main.py --config scenarios.json          # compare the file's scenarios
    python main.py --config scenarios.json --out report.md --locale de_DE
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from mortcalc.core.errors import MORTCALC_ERRORS
from mortcalc.core.finance.amortization import FinalPeriod, generate_schedule, summarize
from mortcalc.diagnostics import configure_logging
from mortcalc.inputs.inputs import InputsLoader
from mortcalc.inputs.prompting import ReadLine, Write, confirm, prompt_scenario
from mortcalc.reports.comparison import compare_scenarios
from mortcalc.reports.formatting import CurrencyFormat, format_currency, format_entry, get_currency_format
from mortcalc.reports.generator import write_report
from mortcalc.schemas.models import LoanScenario

logger = logging.getLogger(__name__)

DEFAULT_SCHEDULE_MONTHS = 5


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments."""
    p = argparse.ArgumentParser(description="Fixed-rate mortgage calculator")
    p.add_argument("--config", type=str, default=None, help="Path to a JSON scenarios file to compare.")
    p.add_argument("--locale", type=str, default=None, help="Currency format, e.g. en_US, de_DE (default en_US).")
    p.add_argument(
        "--schedule-months",
        type=int,
        default=None,
        help=f"Schedule months to print (default {DEFAULT_SCHEDULE_MONTHS}).",
    )
    p.add_argument("--out", type=str, default=None, help="Write a Markdown report to this path.")
    p.add_argument(
        "--settle-final",
        action="store_true",
        help="Pay off the exact remaining balance in the last month instead of clamping at zero.",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return p.parse_args(argv)


def run_interactive(
    fmt: CurrencyFormat,
    *,
    schedule_months: int,
    final_period: FinalPeriod,
    read_line: ReadLine,
    write: Write,
) -> LoanScenario:
    """Prompt for one loan, print its figures, optionally print the opening months."""
    scenario = prompt_scenario(read_line, write)
    summary = summarize(scenario)

    write("\n--- Mortgage Calculation Results ---")
    write(f"Monthly Payment: {format_currency(summary.monthly_payment, fmt)}")
    write(f"Total Interest Paid: {format_currency(summary.total_interest, fmt)}")

    try:
        answer = read_line("\nGenerate Amortization Schedule? (y/n): ")
    except EOFError:
        answer = ""
    if confirm(answer):
        schedule = generate_schedule(scenario, final_period=final_period)
        shown = schedule[:schedule_months]
        write(f"\nFirst {len(shown)} Months Amortization Schedule:")
        for entry in shown:
            write(format_entry(entry, fmt))
    return scenario


def main(argv: Sequence[str] | None = None, *, read_line: ReadLine = input, write: Write = print) -> int:
    """Run the calculator; returns a process exit code."""
    args = parse_args(argv)
    configure_logging(args.verbose)

    final_period: FinalPeriod = "settle" if args.settle_final else "clamp"
    try:
        if args.config:
            loader = InputsLoader()
            cfg = loader.load(args.config)
            cfg = loader.with_overrides(
                cfg,
                locale=args.locale,
                schedule_months=args.schedule_months,
                out=args.out,
                final_period="settle" if args.settle_final else None,
            )
            fmt = get_currency_format(cfg.run.locale)
            scenarios = cfg.loan_scenarios()
            write(compare_scenarios(scenarios, fmt=fmt).rstrip("\n"))
            if cfg.run.out:
                out = write_report(
                    cfg.run.out,
                    scenarios,
                    fmt=fmt,
                    schedule_months=cfg.run.schedule_months,
                    final_period=cfg.run.final_period,
                )
                write(f"\nReport written to {out}")
        else:
            fmt = get_currency_format(args.locale or "en_US")
            months = DEFAULT_SCHEDULE_MONTHS if args.schedule_months is None else max(0, args.schedule_months)
            scenario = run_interactive(
                fmt, schedule_months=months, final_period=final_period, read_line=read_line, write=write
            )
            if args.out:
                out = write_report(args.out, [scenario], fmt=fmt, schedule_months=months, final_period=final_period)
                write(f"\nReport written to {out}")
    except KeyboardInterrupt:
        print("\nCancelled.", file=sys.stderr)
        return 130
    except (*MORTCALC_ERRORS, OSError) as e:
        logger.debug("Run failed", exc_info=True)
        print(f"An error occurred: {e}", file=sys.stderr)
        return 1
    return 0
