# inference_calc/ui/formatting.py
from __future__ import annotations


def format_currency(value: float) -> str:
    """USD with thousands separators and cents, e.g. -$1,234.50."""
    value = float(value)
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.2f}"


def format_number(value: float) -> str:
    """Thousands separators, at most three decimals, trailing zeros dropped."""
    text = f"{float(value):,.3f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def format_large_number(value: float) -> str:
    """Compact K/M notation for chart labels."""
    value = float(value)
    if abs(value) >= 1_000_000:
        return f"{value / 1_000_000:.1f}M"
    elif abs(value) >= 1_000:
        return f"{value / 1_000:.1f}K"
    return f"{value:.1f}"


def format_optional_days(value: float | None) -> str:
    if value is None:
        return "Never"
    return f"{value:,.0f} days"
