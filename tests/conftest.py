# tests/conftest.py
from __future__ import annotations

import logging

import pytest

from mortcalc.diagnostics import LOGGER_NAME
from mortcalc.reports.formatting import get_currency_format
from tests.utils import make_scenario


# -------- Environment isolation --------
@pytest.fixture(autouse=True)
def _clear_mortcalc_env(monkeypatch):
    for key in (
        "MORTCALC_LOCALE",
        "MORTCALC_OUT",
        "MORTCALC_SCHEDULE_MONTHS",
        "MORTCALC_DEBUG",
        "MORTCALC_LOG_FILE",
    ):
        monkeypatch.delenv(key, raising=False)
    yield


# -------- Domain fixtures --------
@pytest.fixture
def baseline_scenario():
    """200k @ 6% over 30 years."""
    return make_scenario()


@pytest.fixture
def fifteen_year_scenario():
    return make_scenario(100_000, 5.0, 15)


@pytest.fixture
def us_format():
    """Pinned currency format so output never depends on the host locale."""
    return get_currency_format("en_US")


@pytest.fixture
def collector():
    """A write() stand-in that records printed lines."""
    lines: list[str] = []
    return lines


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """configure_logging() attaches handlers to the package logger; drop them between tests."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
