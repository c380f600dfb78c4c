"""
Formatter tests: currency conversion and display strings.
"""

import pytest

from hardcem_roi.formatter import (
    ROI_NOT_APPLICABLE,
    convert_amount,
    format_currency,
    format_roi,
    format_unit_cost,
)
from hardcem_roi.schemas import Currency

FX = 0.73


def test_cad_passes_through():
    assert convert_amount(1000, Currency.CAD, FX) == 1000


def test_usd_multiplies_by_fx():
    assert convert_amount(1000, "USD", FX) == pytest.approx(730)


def _parse_money(text):
    """Parse "-C$1,234" back to -1234.0."""
    sign = -1 if text.startswith("-") else 1
    return sign * float(text.lstrip("-").lstrip("C").lstrip("$").replace(",", ""))


@pytest.mark.parametrize("amount", [1, 999.99, 24444.44, 4320000, -1234.4])
def test_formatted_usd_over_fx_matches_formatted_cad(amount):
    usd = _parse_money(format_currency(amount, Currency.USD, FX))
    cad = _parse_money(format_currency(amount, Currency.CAD, FX))
    # Each string is rounded to whole units
    assert usd / FX == pytest.approx(cad, abs=0.5 / FX + 0.5)


def test_currency_whole_units_with_separators():
    assert format_currency(4289058.68, Currency.CAD, FX) == "C$4,289,059"
    assert format_currency(1000, Currency.USD, FX) == "$730"


def test_negative_currency():
    assert format_currency(-1234.4, Currency.CAD, FX) == "-C$1,234"
    assert format_currency(-0.4, Currency.CAD, FX) == "C$0"


def test_unit_cost_two_decimals():
    assert format_unit_cost(0.488888, Currency.CAD, FX) == "C$0.49"
    assert format_unit_cost(0.7875, Currency.USD, FX) == "$0.57"


def test_unit_cost_not_applicable():
    assert format_unit_cost(None, Currency.CAD, FX) == "n/a"


def test_roi_text():
    assert format_roi(31.909) == "31.91x"
    assert format_roi(0.0) == "0.00x"
    assert format_roi(None) == ROI_NOT_APPLICABLE
