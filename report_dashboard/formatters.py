"""Number formatting helpers (ru-RU style: space thousands, ruble sign)."""
from report_dashboard.theme import GREEN, RED, ORANGE, GRAY

NBSP = "\u00a0"


def _group(val):
    return f"{round(val):,}".replace(",", NBSP)


def format_currency(num):
    """1234567 -> '1 234 567 ₽'; None -> '0 ₽'."""
    if num is None:
        return f"0{NBSP}₽"
    if num < 0:
        return f"-{_group(abs(num))}{NBSP}₽"
    return f"{_group(num)}{NBSP}₽"


def format_number(num):
    if num is None:
        return "0"
    if num < 0:
        return f"-{_group(abs(num))}"
    return _group(num)


def format_percent(num):
    """Signed, one decimal: 10.5 -> '+10.5%'."""
    if num is None:
        return "0.0%"
    sign = "+" if num > 0 else ""
    return f"{sign}{num:.1f}%"


def percent_color(percent):
    if percent is None or percent == 0:
        return GRAY
    return GREEN if percent > 0 else RED


def execution_color(percent):
    """Plan execution: on plan green, close orange, behind red."""
    if percent is None:
        return GRAY
    if percent >= 100:
        return GREEN
    if percent >= 80:
        return ORANGE
    return RED
