import pytest

from errors import InvalidFormatError, OutOfRangeError
from scenario import Mode
from validation import build_inputs, check_field, parse_number, validate_field, validate_inputs

# unit tests for input parsing and validation

RAW = {
    "lumpsum_amount": "1,00,000",
    "goal_amount": "₹10,00,000",
    "years": 5,
    "annual_return_pct": 12.0,
    "compounding_freq": 12,
    "inflation_enabled": False,
    "inflation_pct": 6.0,
    "tax_enabled": False,
    "tax_pct": 20.0,
}


@pytest.mark.parametrize(
    "text, expected",
    [
        ("₹1,00,000", 100_000),
        ("Rs. 5 000", 5_000),
        ("INR 2,50,000.50", 250_000.5),
        ("$1_000", 1_000),
        ("12.5%", 12.5),
        ("  42 ", 42),
        (7, 7.0),
    ],
)
def test_parse_number_accepts_formatted_text(text, expected):
    assert parse_number(text) == expected


@pytest.mark.parametrize("bad", ["", "abc", "12abc", "₹", "nan", "inf", None, True])
def test_parse_number_rejects_garbage(bad):
    with pytest.raises(InvalidFormatError):
        parse_number(bad)


def test_amount_below_minimum_is_out_of_range():
    with pytest.raises(OutOfRangeError) as exc:
        check_field("lumpsum_amount", "500")
    assert exc.value.field == "lumpsum_amount"


def test_years_must_be_whole():
    with pytest.raises(InvalidFormatError):
        check_field("years", 5.5)
    assert check_field("years", "10") == 10


def test_compounding_frequency_must_be_a_known_option():
    assert check_field("compounding_freq", 4) == 4
    with pytest.raises(OutOfRangeError):
        check_field("compounding_freq", 3)


def test_validate_field_reports_reason():
    ok = validate_field("annual_return_pct", "12")
    assert ok.valid and ok.value == 12
    bad = validate_field("annual_return_pct", "45")
    assert not bad.valid
    assert "between" in bad.reason


def test_unknown_field():
    with pytest.raises(KeyError):
        check_field("salary", 10)


def test_build_inputs_investment():
    inputs = build_inputs(RAW, Mode.INVESTMENT)
    assert inputs.amount == 100_000
    assert inputs.years == 5
    assert inputs.compounding_freq == 12
    assert inputs.mode == Mode.INVESTMENT
    assert not inputs.inflation_enabled


def test_build_inputs_goal_uses_goal_amount():
    raw = dict(RAW, lumpsum_amount="not checked in goal mode")
    inputs = build_inputs(raw, Mode.GOAL)
    assert inputs.amount == 1_000_000
    assert inputs.mode == Mode.GOAL


def test_disabled_toggles_skip_their_fields():
    raw = dict(RAW, inflation_pct=99, tax_pct=-5)
    inputs = build_inputs(raw, Mode.INVESTMENT)
    assert inputs.inflation_pct == 0.0
    assert inputs.tax_pct == 0.0


def test_enabled_toggles_check_their_fields():
    raw = dict(RAW, tax_enabled=True, tax_pct=60)
    with pytest.raises(OutOfRangeError):
        build_inputs(raw, Mode.INVESTMENT)
    raw = dict(RAW, tax_enabled=True, inflation_enabled=True)
    inputs = build_inputs(raw, Mode.INVESTMENT)
    assert (inputs.inflation_pct, inputs.tax_pct) == (6.0, 20.0)


def test_compounding_defaults_when_missing():
    raw = {k: v for k, v in RAW.items() if k != "compounding_freq"}
    assert build_inputs(raw, Mode.INVESTMENT).compounding_freq == 1


def test_validate_inputs_reports_each_field():
    raw = dict(RAW, lumpsum_amount="abc", years=99)
    report = validate_inputs(raw, Mode.INVESTMENT)
    assert set(report) == {"lumpsum_amount", "years", "annual_return_pct", "compounding_freq"}
    assert not report["lumpsum_amount"].valid
    assert not report["years"].valid
    assert report["annual_return_pct"].valid
