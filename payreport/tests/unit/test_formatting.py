from datetime import date
from decimal import Decimal

from payreport.logic.formatting import format_date, format_money, quantize_money
from payreport.utils.parsers import parse_date, parse_money


def test_format_money_separators():
    assert format_money(Decimal("2009.44")) == "2.009,44"
    assert format_money(Decimal("25386.97")) == "25.386,97"
    assert format_money(Decimal("1234567.8")) == "1.234.567,80"
    assert format_money(Decimal("8.12")) == "8,12"
    assert format_money(Decimal("0")) == "0,00"


def test_format_money_rounds_half_up():
    assert format_money(Decimal("2101.935")) == "2.101,94"
    assert format_money(Decimal("0.005")) == "0,01"


def test_money_text_round_trip():
    assert format_money(parse_money("2.009,44")) == "2.009,44"


def test_quantize_money_keeps_two_digits():
    assert quantize_money(Decimal("10")) == Decimal("10.00")
    assert str(quantize_money(Decimal("10"))) == "10.00"


def test_format_date():
    assert format_date(date(1961, 5, 2)) == "02/05/1961"
    assert format_date(date(2000, 10, 18)) == "18/10/2000"


def test_format_date_pads_year_to_four_digits():
    assert format_date(date(999, 1, 1)) == "01/01/0999"
    assert format_date(parse_date("01/01/0999")) == "01/01/0999"
