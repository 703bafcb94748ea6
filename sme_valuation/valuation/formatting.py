import math


def _is_missing(value: float | None) -> bool:
    return value is None or (isinstance(value, float) and math.isnan(value))


def format_currency(value: float | None, currency: str = "USD") -> str:
    """Whole-unit currency string, e.g. 'USD 1,234,568'. Missing values render as '-'."""
    if _is_missing(value):
        return "-"
    sign = "-" if value < 0 else ""
    return f"{sign}{currency} {abs(value):,.0f}"


def format_abbreviated(value: float | None) -> str:
    """Abbreviate to $1.2B / $3.4M / $56K."""
    if _is_missing(value):
        return "-"
    if value >= 1e9:
        return f"${value / 1e9:.1f}B"
    if value >= 1e6:
        return f"${value / 1e6:.1f}M"
    if value >= 1e3:
        return f"${value / 1e3:.0f}K"
    return f"${value:.0f}"


def format_percentage(value: float | None, is_decimal: bool = False) -> str:
    if _is_missing(value):
        return "-"
    percentage = value * 100 if is_decimal else value
    return f"{percentage:.1f}%"
