"""
Utility modules for the Housing Price Predictor.
"""

from housingprice.utils.price_format import format_price, format_coefficients

__all__ = [
    "format_price",
    "format_coefficients",
]
