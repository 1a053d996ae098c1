"""
Display formatting for prices, market caps and percent changes.
Pure functions with no external dependencies.

Precision is tiered inversely with magnitude so small-unit coins keep
meaningful digits and large-unit coins show round numbers.
"""

from datetime import datetime

POSITIVE_CLASS = "change-positive"
NEGATIVE_CLASS = "change-negative"
UP_ARROW = "▲"
DOWN_ARROW = "▼"

_MARKET_CAP_UNITS = (
    (1e12, "T"),
    (1e9, "B"),
    (1e6, "M"),
)


def format_market_cap(value: float) -> str:
    """Scale *value* (USD) to the largest of T/B/M that keeps it >= 1.

    Below one million the whole-dollar amount is shown with no suffix.
    """
    for threshold, suffix in _MARKET_CAP_UNITS:
        if value >= threshold:
            return f"${value / threshold:.2f}{suffix}"
    return f"${value:.0f}"


def format_price(value: float) -> str:
    if value < 1:
        return f"${value:.4f}"
    if value < 1000:
        return f"${value:.2f}"
    return f"${value:.0f}"


def format_change(percent: float) -> tuple[str, str]:
    """Return the (text, css class) pair for a 24h percent change.

    Zero counts as positive. The magnitude is always shown unsigned; the
    arrow carries the direction.
    """
    if percent >= 0:
        return f"{UP_ARROW} {abs(percent):.2f}%", POSITIVE_CLASS
    return f"{DOWN_ARROW} {abs(percent):.2f}%", NEGATIVE_CLASS


def format_timestamp(moment: datetime) -> str:
    """24-hour wall-clock time, e.g. '21:04:09'."""
    return moment.strftime("%H:%M:%S")
