"""
Data Models for the Housing Price Predictor

Dataclass definitions for property records and fitted models.
"""

from dataclasses import dataclass, field, asdict
from typing import Any, Dict, Optional, Tuple

from housingprice.core.constants import FEATURE_COLUMNS


@dataclass(frozen=True)
class PropertyRecord:
    """One property observation; ``price`` is the label and may be absent."""

    area: float
    bedrooms: int
    bathrooms: int
    age_years: int
    neighborhood_score: float
    parking_spaces: int
    location: str  # downtown, suburb, rural, uptown, beachside, metropolitan
    furnishing: str  # furnished, unfurnished, semi-furnished
    kitchen: str  # open, closed
    price: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)


@dataclass(frozen=True)
class FittedModel:
    """Intercept plus one weight per feature, in FEATURE_COLUMNS order."""

    intercept: float
    weights: Tuple[float, ...]
    sample_count: int = 0
    feature_columns: Tuple[str, ...] = field(default=tuple(FEATURE_COLUMNS))
