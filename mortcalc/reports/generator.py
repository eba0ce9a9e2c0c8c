# mortcalc/reports/generator.py
from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from mortcalc.core.finance.amortization import (
    AmortizationEntry,
    FinalPeriod,
    YearSummary,
    generate_schedule,
    summarize,
    summarize_by_year,
)
from mortcalc.reports.formatting import US, CurrencyFormat, format_currency, format_percent
from mortcalc.schemas.models import LoanScenario, LoanSummary


def _section(title: str) -> str:
    """
    Render a level-2 heading for Markdown sections.
    """
    return f"\n## {title}\n"


def _render_header(count: int) -> str:
    noun = "scenario" if count == 1 else "scenarios"
    return f"# Mortgage Analysis\n\nFixed-rate, level-payment loans; {count} {noun}.\n"


def _render_comparison_table(summaries: list[LoanSummary], fmt: CurrencyFormat) -> str:
    """
    One row per scenario, in input order. Purely a restatement: no ranking.
    """
    header = [
        _section("Scenario Comparison"),
        "| # | Principal | Rate | Term (years) | Monthly Payment | Total Interest | Total Paid |",
        "| ---: | ---: | ---: | ---: | ---: | ---: | ---: |",
    ]
    rows = []
    for i, s in enumerate(summaries, start=1):
        sc = s.scenario
        rows.append(
            f"| {i} "
            f"| {format_currency(sc.principal, fmt)} "
            f"| {format_percent(sc.annual_interest_rate_percent)} "
            f"| {sc.term_years} "
            f"| {format_currency(s.monthly_payment, fmt)} "
            f"| {format_currency(s.total_interest, fmt)} "
            f"| {format_currency(s.total_paid, fmt)} |"
        )
    return "\n".join(header + rows) + "\n"


def _render_months(entries: list[AmortizationEntry], fmt: CurrencyFormat) -> str:
    if not entries:
        return ""
    header = [
        "",
        f"**First {len(entries)} Months**",
        "",
        "| Month | Payment | Principal | Interest | Remaining |",
        "| ---: | ---: | ---: | ---: | ---: |",
    ]
    rows = [
        f"| {e.period} | {format_currency(e.payment, fmt)} | {format_currency(e.principal, fmt)} "
        f"| {format_currency(e.interest, fmt)} | {format_currency(e.balance, fmt)} |"
        for e in entries
    ]
    return "\n".join(header + rows) + "\n"


def _render_years(years: list[YearSummary], fmt: CurrencyFormat) -> str:
    header = [
        "",
        "**Yearly Totals**",
        "",
        "| Year | Payments | Principal | Interest | Ending Balance |",
        "| ---: | ---: | ---: | ---: | ---: |",
    ]
    rows = [
        f"| {y.year} | {format_currency(y.payment, fmt)} | {format_currency(y.principal, fmt)} "
        f"| {format_currency(y.interest, fmt)} | {format_currency(y.ending_balance, fmt)} |"
        for y in years
    ]
    return "\n".join(header + rows) + "\n"


def _render_scenario(
    index: int,
    summary: LoanSummary,
    fmt: CurrencyFormat,
    schedule_months: int,
    final_period: FinalPeriod,
) -> str:
    """
    Summary bullets, the opening months and the yearly roll-up for one scenario.
    """
    sc = summary.scenario
    schedule = generate_schedule(sc, final_period=final_period)
    lines = [
        _section(f"Scenario {index}"),
        f"- **Principal:** {format_currency(sc.principal, fmt)}",
        f"- **Rate:** {format_percent(sc.annual_interest_rate_percent)}",
        f"- **Term:** {sc.term_years} years ({sc.number_of_payments} payments)",
        f"- **Monthly Payment:** {format_currency(summary.monthly_payment, fmt)}",
        f"- **Total Interest Paid:** {format_currency(summary.total_interest, fmt)}",
        f"- **Total Paid:** {format_currency(summary.total_paid, fmt)}",
    ]
    return (
        "\n".join(lines)
        + "\n"
        + _render_months(schedule[:schedule_months], fmt)
        + _render_years(summarize_by_year(schedule), fmt)
    )


# -----------------------
# Orchestration
# -----------------------


def generate_report(
    scenarios: Sequence[LoanScenario],
    *,
    fmt: CurrencyFormat = US,
    schedule_months: int = 5,
    final_period: FinalPeriod = "clamp",
) -> str:
    """
    Generate a Markdown report for one or more loan scenarios.

    Sections:
      - Header
      - Scenario Comparison: one table row per scenario
      - Scenario N: summary, first `schedule_months` months, yearly totals
    """
    summaries = [summarize(s) for s in scenarios]
    parts = [
        _render_header(len(summaries)),
        _render_comparison_table(summaries, fmt) if summaries else "",
    ]
    for i, s in enumerate(summaries, start=1):
        parts.append(_render_scenario(i, s, fmt, schedule_months, final_period))
    return "\n".join(part for part in parts if part).strip() + "\n"


def write_report(
    path: str | Path,
    scenarios: Sequence[LoanScenario],
    *,
    fmt: CurrencyFormat = US,
    schedule_months: int = 5,
    final_period: FinalPeriod = "clamp",
) -> Path:
    """
    Convenience helper to write the generated report to disk.
    """
    md = generate_report(scenarios, fmt=fmt, schedule_months=schedule_months, final_period=final_period)
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(md, encoding="utf-8")
    return out
