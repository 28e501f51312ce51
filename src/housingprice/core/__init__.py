"""
Core modules for the Housing Price Predictor.

Contains data models and shared constants.
"""

from housingprice.core.constants import (
    FEATURE_COLUMNS,
    FEATURE_COUNT,
    LOCATION_ORDINALS,
    FURNISHING_ORDINALS,
    KITCHEN_ORDINALS,
)
from housingprice.core.models import PropertyRecord, FittedModel

__all__ = [
    "FEATURE_COLUMNS",
    "FEATURE_COUNT",
    "LOCATION_ORDINALS",
    "FURNISHING_ORDINALS",
    "KITCHEN_ORDINALS",
    "PropertyRecord",
    "FittedModel",
]
