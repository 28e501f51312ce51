"""
Feature Codec for the Housing Price Model

Maps property records to fixed-order numeric feature vectors and maps
categorical ordinals back to category names for display.

Unknown categories raise InvalidRecordError; there is no fallback ordinal.
"""

from typing import Dict, Iterable, Optional

import numpy as np

from housingprice.core.constants import (
    FEATURE_COUNT,
    FURNISHED,
    FURNISHING_ORDINALS,
    KITCHEN_CLOSED,
    KITCHEN_OPEN,
    KITCHEN_ORDINALS,
    LOCATION_ORDINALS,
    SEMI_FURNISHED,
    UNFURNISHED,
)
from housingprice.core.models import PropertyRecord
from housingprice.exceptions import InvalidRecordError

# Spellings accepted in addition to the canonical names, e.g. the enum-style
# names written by the dataset tooling (SEMI_FURNISHED, OPEN_KITCHEN)
FURNISHING_ALIASES: Dict[str, str] = {
    "furnished": FURNISHED,
    "unfurnished": UNFURNISHED,
    "semi-furnished": SEMI_FURNISHED,
    "semi_furnished": SEMI_FURNISHED,
    "semifurnished": SEMI_FURNISHED,
    "semi furnished": SEMI_FURNISHED,
}

KITCHEN_ALIASES: Dict[str, str] = {
    "open": KITCHEN_OPEN,
    "open_kitchen": KITCHEN_OPEN,
    "open-kitchen": KITCHEN_OPEN,
    "open kitchen": KITCHEN_OPEN,
    "closed": KITCHEN_CLOSED,
    "closed_kitchen": KITCHEN_CLOSED,
    "closed-kitchen": KITCHEN_CLOSED,
    "closed kitchen": KITCHEN_CLOSED,
}


def _normalize(value, aliases: Dict[str, str], field: str) -> str:
    if not isinstance(value, str):
        raise InvalidRecordError(
            f"Invalid {field}: {value!r}", field=field, value=value
        )
    key = value.strip().lower()
    if key not in aliases:
        raise InvalidRecordError(
            f"Unknown {field}: {value!r}", field=field, value=value
        )
    return aliases[key]


def normalize_location(value) -> str:
    """Normalize a location name to its canonical lowercase form.

    Raises:
        InvalidRecordError: If the value is not a known location.
    """
    return _normalize(value, {name: name for name in LOCATION_ORDINALS}, "location")


def normalize_furnishing(value) -> str:
    """Normalize a furnishing state, accepting enum-style spellings."""
    return _normalize(value, FURNISHING_ALIASES, "furnishing")


def normalize_kitchen(value) -> str:
    """Normalize a kitchen layout, accepting ``OPEN_KITCHEN`` style names."""
    return _normalize(value, KITCHEN_ALIASES, "kitchen")


def _lookup(table: Dict[str, int], value: str, field: str) -> int:
    try:
        return table[value]
    except (KeyError, TypeError):
        raise InvalidRecordError(
            f"Unknown {field}: {value!r}", field=field, value=value
        ) from None


def encode(record: PropertyRecord) -> np.ndarray:
    """Encode a record as a FeatureVector.

    Args:
        record: Property record with canonical category names.

    Returns:
        1-D float64 array in FEATURE_COLUMNS order.

    Raises:
        InvalidRecordError: If a categorical field has no ordinal.
    """
    return np.array(
        [
            record.area,
            record.bedrooms,
            record.bathrooms,
            record.age_years,
            record.neighborhood_score,
            record.parking_spaces,
            _lookup(LOCATION_ORDINALS, record.location, "location"),
            _lookup(FURNISHING_ORDINALS, record.furnishing, "furnishing"),
            _lookup(KITCHEN_ORDINALS, record.kitchen, "kitchen"),
        ],
        dtype=np.float64,
    )


def encode_many(records: Iterable[PropertyRecord]) -> np.ndarray:
    """Encode records into an (n, 9) matrix; an empty input gives shape (0, 9)."""
    vectors = [encode(record) for record in records]
    if not vectors:
        return np.empty((0, FEATURE_COUNT), dtype=np.float64)
    return np.vstack(vectors)


def _reverse(table: Dict[str, int], ordinal, field: str) -> str:
    for name, value in table.items():
        if value == ordinal:
            return name
    raise InvalidRecordError(
        f"Unknown {field} ordinal: {ordinal!r}", field=field, value=ordinal
    )


def decode_location(ordinal) -> str:
    """Return the location name for a feature ordinal (4 -> 'downtown')."""
    return _reverse(LOCATION_ORDINALS, ordinal, "location")


def decode_furnishing(ordinal) -> str:
    """Return the furnishing name for a feature ordinal."""
    return _reverse(FURNISHING_ORDINALS, ordinal, "furnishing")


def decode_kitchen(ordinal) -> str:
    """Return the kitchen layout for a feature ordinal."""
    return _reverse(KITCHEN_ORDINALS, ordinal, "kitchen")


def describe_vector(vector) -> Dict[str, object]:
    """Render a feature vector for display, decoding the categorical ordinals."""
    values = [float(v) for v in vector]
    if len(values) != FEATURE_COUNT:
        raise InvalidRecordError(
            f"Expected {FEATURE_COUNT} features, got {len(values)}", field="vector"
        )
    return {
        "area": values[0],
        "bedrooms": int(values[1]),
        "bathrooms": int(values[2]),
        "age": int(values[3]),
        "neighborhood_score": values[4],
        "parking_spaces": int(values[5]),
        "location": decode_location(int(values[6])),
        "furnishing": decode_furnishing(int(values[7])),
        "kitchen": decode_kitchen(int(values[8])),
    }


def build_record(
    area: float,
    bedrooms: int,
    bathrooms: int,
    age_years: int,
    neighborhood_score: float,
    parking_spaces: int,
    location: str,
    furnishing: str,
    kitchen: str,
    price: Optional[float] = None,
) -> PropertyRecord:
    """Build a PropertyRecord, normalizing the category spellings."""
    return PropertyRecord(
        area=float(area),
        bedrooms=int(bedrooms),
        bathrooms=int(bathrooms),
        age_years=int(age_years),
        neighborhood_score=float(neighborhood_score),
        parking_spaces=int(parking_spaces),
        location=normalize_location(location),
        furnishing=normalize_furnishing(furnishing),
        kitchen=normalize_kitchen(kitchen),
        price=None if price is None else float(price),
    )
