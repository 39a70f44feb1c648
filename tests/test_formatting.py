from datetime import date, datetime
from decimal import Decimal

import pytest

from transaction_tracker.formatting import (
    INVALID_DATE,
    format_currency,
    format_date,
    formatCurrency,
    formatDate,
)


@pytest.mark.parametrize(
    ("amount", "expected"),
    [
        (1234.5, "$1,234.50"),
        (-5, "-$5.00"),
        (0, "$0.00"),
        (1234567.891, "$1,234,567.89"),
        (2.675, "$2.68"),
        (Decimal("-0.125"), "-$0.13"),
        ("42", "$42.00"),
    ],
)
def test_format_currency(amount, expected):
    assert format_currency(amount) == expected


def test_format_currency_non_finite():
    assert format_currency(float("nan")) == "$NaN"
    assert format_currency("not a number") == "$NaN"
    assert format_currency(float("inf")) == "$∞"
    assert format_currency(float("-inf")) == "-$∞"


def test_format_currency_rounds_tiny_negatives_to_unsigned_zero():
    assert format_currency(-0.001) == "$0.00"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("2024-01-05", "1/5/2024"),
        ("2024-12-31T23:30:00Z", "12/31/2024"),
        ("01/05/2024", "1/5/2024"),
        ("3/7/24", "3/7/2024"),
        ("January 5, 2024", "1/5/2024"),
        ("Feb 29, 2024", "2/29/2024"),
        (date(2023, 10, 1), "10/1/2023"),
        (datetime(2023, 10, 1, 8, 0), "10/1/2023"),
    ],
)
def test_format_date(value, expected):
    assert format_date(value) == expected


@pytest.mark.parametrize("value", ["", "yesterday", "2024-13-45", None])
def test_format_date_invalid_is_placeholder(value):
    assert format_date(value) == INVALID_DATE


def test_camel_case_aliases():
    assert formatCurrency(1234.5) == "$1,234.50"
    assert formatDate("2024-01-05") == "1/5/2024"
