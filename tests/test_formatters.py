import math
from decimal import Decimal

import pytest

from costcheck.core.exceptions import UnsupportedLocaleException
from costcheck.utils.formatters import (
    concat_text,
    format_currency,
    format_number,
    format_rate,
    naive_sum,
    round_rate,
    to_number,
    type_tag,
)


@pytest.mark.parametrize("value", [None, "", "   "])
def test_to_number_empty_values_are_zero(value):
    assert to_number(value) == 0


def test_to_number_passes_numbers_through():
    assert to_number(60000) == 60000
    assert to_number(12.5) == 12.5
    assert to_number(Decimal("3.25")) == Decimal("3.25")


def test_to_number_parses_numeric_strings():
    assert to_number("60000") == 60000
    assert isinstance(to_number("60000"), int)
    assert to_number(" 8000 ") == 8000
    assert to_number("12.5") == 12.5
    assert to_number("1e3") == 1000.0
    assert to_number("-42") == -42


@pytest.mark.parametrize("value", [
    "abc", "12abc", "60,000", "1_000", "nan", "inf", "infinity", "-inf", "INFINITY",
    "0b12", "0x", "-0x10", "\u0663\u0664", "\uff11\uff12", "1e", ".", "+",
    [1], {"a": 1}, object(),
])
def test_to_number_unparseable_is_zero(value):
    assert to_number(value) == 0


def test_to_number_parses_radix_and_infinity_literals():
    assert to_number("0x10") == 16
    assert to_number("0X1f") == 31
    assert to_number("0b11") == 3
    assert to_number("0o17") == 15
    assert isinstance(to_number("0x10"), int)
    assert to_number("Infinity") == math.inf
    assert to_number("+Infinity") == math.inf
    assert to_number("-Infinity") == -math.inf


def test_to_number_decimal_literal_forms():
    assert to_number("1.") == 1.0
    assert to_number(".5") == 0.5
    assert to_number("+5") == 5
    assert to_number("007") == 7
    assert to_number("2E-3") == 0.002
    assert to_number("\u00a0 42\ufeff") == 42


def test_to_number_nan_is_zero():
    assert to_number(float("nan")) == 0
    assert to_number(Decimal("NaN")) == 0


def test_to_number_bool():
    assert to_number(True) == 1
    assert to_number(False) == 0


@pytest.mark.parametrize("value", [0, 60000, -5.5, "158000", "abc", None, "2.5"])
def test_to_number_idempotent(value):
    assert to_number(to_number(value)) == to_number(value)


def test_format_number_zero():
    assert format_number(0) == "0"
    assert format_number(None) == "0"
    assert format_number("abc") == "0"


def test_format_number_groups_digits():
    assert format_number(158000) == "158,000"
    assert format_number("150000") == "150,000"
    assert format_number(1234567.891) == "1,234,567.891"
    assert format_number(1234.5) == "1,234.5"
    assert format_number(-5000) == "-5,000"
    assert format_number(999) == "999"


def test_format_number_fraction_digits_capped():
    assert format_number(0.12345) == "0.123"
    assert format_number(2.0) == "2"


def test_format_number_other_locales():
    assert format_number(1234567.5, locale="de-DE") == "1.234.567,5"
    assert format_number(158000, locale="en-US") == "158,000"
    assert format_number(158000, locale="fr-FR") == "158\u202f000"


def test_format_number_unknown_locale():
    with pytest.raises(UnsupportedLocaleException):
        format_number(158000, locale="xx-XX")


def test_format_number_infinity():
    assert format_number(float("inf")) == "∞"
    assert format_number(float("-inf")) == "-∞"


def test_format_currency():
    assert format_currency(158000) == "¥158,000"
    assert format_currency(0) == "¥0"
    assert format_currency(150000, symbol="$") == "$150,000"


def test_format_rate():
    assert format_rate(158000 / 150000 * 100) == "105.3%"
    assert format_rate((1 - 158000 / 150000) * 100) == "-5.3%"
    assert format_rate(12.3456, decimals=2) == "12.35%"
    assert format_rate("abc") == "0.0%"


def test_type_tag():
    assert type_tag(60000) == "int"
    assert type_tag("60000") == "str"
    assert type_tag(1.5) == "float"


def test_concat_text_joins_in_order():
    assert concat_text([60000, 50000, 30000, 10000, 8000]) == "600005000030000100008000"


def test_naive_sum_concatenates_strings():
    result = naive_sum(["60000", "50000", "30000", "10000", "8000"])
    assert result == "600005000030000100008000"
    assert isinstance(result, str)


def test_naive_sum_adds_numbers():
    assert naive_sum([60000, 50000, 30000, 10000, 8000]) == 158000


def test_naive_sum_mixed_types_raises():
    with pytest.raises(TypeError):
        naive_sum(["60000", 50000])


def test_format_rate_rounds_ties_away_from_zero():
    assert format_rate(12.25) == "12.3%"
    assert format_rate(-12.25) == "-12.3%"
    assert format_rate(0.25) == "0.3%"
    # rounding follows the stored binary value, 1.005 is just below the tie
    assert format_rate(1.005, decimals=2) == "1.00%"


def test_format_rate_signs_and_infinity():
    assert format_rate(-0.04) == "-0.0%"
    assert format_rate(-0.0) == "0.0%"
    assert format_rate(math.inf) == "Infinity%"


def test_round_rate():
    assert round_rate(12.25) == 12.3
    assert round_rate(40.04) == 40.0
    assert round_rate(60000 / 150000 * 100) == 40.0
    assert round_rate(12.3456, decimals=2) == 12.35
