"""
Price Formatting Utilities

Renders prices and model coefficients for console output.
"""

from typing import List, Optional, Sequence, Union

from housingprice.core.constants import FEATURE_LABELS
from housingprice.core.models import FittedModel


def format_price(price: Union[int, float, None], cents: bool = False) -> str:
    """Format a price value as a string.

    Args:
        price: Price value to format.
        cents: If True, keep two decimal places.

    Returns:
        Formatted price string.

    Example:
        >>> format_price(1500000)
        '$1,500,000'
        >>> format_price(-2500.5, cents=True)
        '-$2,500.50'
    """
    if price is None:
        return "-"

    sign = "-" if price < 0 else ""
    price = abs(price)

    if cents:
        return f"{sign}${price:,.2f}"
    return f"{sign}${round(price):,}"


def format_coefficients(model: FittedModel, labels: Optional[Sequence[str]] = None) -> List[str]:
    """Render the intercept and per-feature weights as display lines.

    Example:
        Intercept: $12,345.67
        Square Footage : +150.00 (price impact per unit)
    """
    if labels is None:
        labels = FEATURE_LABELS if len(model.weights) == len(FEATURE_LABELS) else model.feature_columns

    lines = [f"Intercept: {format_price(model.intercept, cents=True)}"]
    for label, weight in zip(labels, model.weights):
        lines.append(f"{label:<15}: {weight:+,.2f} (price impact per unit)")
    return lines
