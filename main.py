# main.py
"""
Entry Point: Mortgage Calculator

Purpose
-------
Compute the level monthly payment, total interest and amortization schedule of
fixed-rate loans:
  1) Interactive: prompt for principal, rate and term (re-prompting on bad input),
     print the results and optionally the first months of the schedule.
  2) Batch: --config scenarios.json prints a side-by-side comparison and, with
     --out, writes a Markdown report.

Usage
-----
    python main.py
    python main.py --config data/sample/scenarios.json --out mortgage_report.md --locale en_US
"""

from __future__ import annotations

import sys

from mortcalc.cli import main

if __name__ == "__main__":
    sys.exit(main())
