"""Display helpers for ILS amounts and rates."""

from decimal import Decimal

SHEKEL = "₪"


def format_ils(amount: Decimal, show_decimals: bool = False) -> str:
    """Format an amount as shekels, e.g. "1,234 ₪"."""
    if show_decimals:
        return f"{float(amount):,.2f} {SHEKEL}"
    return f"{float(amount):,.0f} {SHEKEL}"


def format_percent(rate: Decimal, decimals: int = 2) -> str:
    """Format a rate already expressed in percent (4.5 -> "4.50%")."""
    return f"{float(rate):.{decimals}f}%"


def format_number(value: Decimal, decimals: int = 0) -> str:
    return f"{float(value):,.{decimals}f}"
