# tests/unit/test_prompting.py
import pytest

from mortcalc.core.errors import InputClosedError
from mortcalc.inputs.prompting import (
    NOT_A_NUMBER,
    InputPolicy,
    RetryPrompt,
    confirm,
    prompt_number,
    prompt_scenario,
    validate_number,
)
from tests.utils import scripted_input


def test_validate_number_accepts_in_range_int():
    assert validate_number("250000", minimum=1_000, maximum=1_000_000) == 250_000


def test_validate_number_bounds_are_inclusive():
    assert validate_number("1000", minimum=1_000, maximum=1_000_000) == 1_000
    assert validate_number("1000000", minimum=1_000, maximum=1_000_000) == 1_000_000


def test_validate_number_accepts_grouping_and_whitespace():
    assert validate_number("  200,000 ", minimum=1_000, maximum=1_000_000) == 200_000
    assert validate_number("200_000", minimum=1_000, maximum=1_000_000) == 200_000


def test_validate_number_float_kind():
    value = validate_number(" 6.5 ", minimum=1.0, maximum=30.0, kind=float)
    assert value == 6.5
    assert isinstance(value, float)


@pytest.mark.parametrize("raw", ["2,5", "6,25", "1,00", "1,0000", "2_5", "1_000,000", ",100", "100,"])
def test_validate_number_malformed_grouping_is_retry(raw):
    assert validate_number(raw, minimum=1.0, maximum=1_000_000.0, kind=float) == RetryPrompt(NOT_A_NUMBER)


def test_validate_number_grouped_float_with_decimals():
    assert validate_number("1,000.5", minimum=1.0, maximum=1_000_000.0, kind=float) == 1000.5
    assert validate_number("1,000,000", minimum=1_000, maximum=1_000_000) == 1_000_000


@pytest.mark.parametrize("raw", ["abc", "", "   ", "6.5", "1e3"])
def test_validate_number_non_numeric_int_is_retry(raw):
    assert validate_number(raw, minimum=1, maximum=30) == RetryPrompt(NOT_A_NUMBER)


def test_validate_number_out_of_range_int_message():
    result = validate_number("500", minimum=1_000, maximum=1_000_000)
    assert isinstance(result, RetryPrompt)
    assert result.reason == "Enter a value between 1000 and 1000000"


def test_validate_number_out_of_range_float_message():
    result = validate_number("31", minimum=1.0, maximum=30.0, kind=float)
    assert result == RetryPrompt("Enter a value between 1.00 and 30.00")


@pytest.mark.parametrize("raw", ["nan", "inf", "-inf"])
def test_validate_number_non_finite_float_is_retry(raw):
    result = validate_number(raw, minimum=1.0, maximum=30.0, kind=float)
    assert isinstance(result, RetryPrompt)


def test_prompt_number_retries_until_valid(collector):
    read, prompts = scripted_input(["oops", "50", "2000"])
    value = prompt_number("Principal", minimum=1_000, maximum=1_000_000, read_line=read, write=collector.append)
    assert value == 2000
    assert prompts == ["Principal: "] * 3
    assert collector == [NOT_A_NUMBER, "Enter a value between 1000 and 1000000"]


def test_prompt_number_end_of_input_raises(collector):
    read, _ = scripted_input(["not a number"])
    with pytest.raises(InputClosedError):
        prompt_number("Period (Years)", minimum=1, maximum=30, read_line=read, write=collector.append)
    assert collector == [NOT_A_NUMBER]


def test_prompt_scenario_collects_all_three(collector):
    read, prompts = scripted_input(["200000", "6", "30"])
    s = prompt_scenario(read, collector.append)
    assert (s.principal, s.annual_interest_rate_percent, s.term_years) == (200_000, 6.0, 30)
    assert prompts == ["Principal: ", "Annual Interest Rate: ", "Period (Years): "]
    assert collector == []


def test_prompt_scenario_honors_custom_policy(collector):
    read, _ = scripted_input(["5000", "2", "40"])
    s = prompt_scenario(read, collector.append, InputPolicy(max_term_years=40))
    assert s.term_years == 40
    assert collector == []


def test_prompt_scenario_term_above_default_policy_retries(collector):
    read, _ = scripted_input(["5000", "2", "40", "25"])
    s = prompt_scenario(read, collector.append)
    assert s.term_years == 25
    assert collector == ["Enter a value between 1 and 30"]


@pytest.mark.parametrize("answer", ["y", "Y", "yes", " YES", "yeah"])
def test_confirm_yes(answer):
    assert confirm(answer) is True


@pytest.mark.parametrize("answer", ["n", "no", "", "  ", "maybe"])
def test_confirm_no(answer):
    assert confirm(answer) is False
