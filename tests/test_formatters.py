from report_dashboard.formatters import (
    NBSP,
    execution_color,
    format_currency,
    format_number,
    format_percent,
    percent_color,
)
from report_dashboard.theme import GRAY, GREEN, ORANGE, RED


def test_currency_groups_thousands_and_drops_decimals():
    assert format_currency(1234567.4) == f"1{NBSP}234{NBSP}567{NBSP}₽"
    assert format_currency(-1500) == f"-1{NBSP}500{NBSP}₽"
    assert format_currency(None) == f"0{NBSP}₽"


def test_number_and_percent():
    assert format_number(7413741) == f"7{NBSP}413{NBSP}741"
    assert format_number(None) == "0"
    assert format_percent(10.54) == "+10.5%"
    assert format_percent(-6.1) == "-6.1%"
    assert format_percent(0) == "0.0%"
    assert format_percent(None) == "0.0%"


def test_colors():
    assert percent_color(5) == GREEN
    assert percent_color(-5) == RED
    assert percent_color(None) == GRAY
    assert execution_color(100) == GREEN
    assert execution_color(85) == ORANGE
    assert execution_color(40) == RED
