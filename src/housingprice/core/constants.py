"""
Shared Constants for the Housing Price Predictor

Contains the category names, ordinal encoding tables, wire-level choice
tables and canonical feature order used across the application.
"""

from typing import Dict, List

# Location categories
LOCATION_DOWNTOWN: str = "downtown"
LOCATION_SUBURB: str = "suburb"
LOCATION_RURAL: str = "rural"
LOCATION_UPTOWN: str = "uptown"
LOCATION_BEACHSIDE: str = "beachside"
LOCATION_METROPOLITAN: str = "metropolitan"

# Furnishing categories
FURNISHED: str = "furnished"
UNFURNISHED: str = "unfurnished"
SEMI_FURNISHED: str = "semi-furnished"

# Kitchen layouts
KITCHEN_OPEN: str = "open"
KITCHEN_CLOSED: str = "closed"

# Feature ordinals. Location values are non-contiguous relative to the
# declaration order and must not be renumbered.
LOCATION_ORDINALS: Dict[str, int] = {
    LOCATION_DOWNTOWN: 4,
    LOCATION_SUBURB: 2,
    LOCATION_RURAL: 1,
    LOCATION_UPTOWN: 3,
    LOCATION_BEACHSIDE: 6,
    LOCATION_METROPOLITAN: 5,
}

FURNISHING_ORDINALS: Dict[str, int] = {
    UNFURNISHED: 1,
    SEMI_FURNISHED: 2,
    FURNISHED: 3,
}

KITCHEN_ORDINALS: Dict[str, int] = {
    KITCHEN_OPEN: 1,
    KITCHEN_CLOSED: 0,
}

# Integer choices accepted at the HTTP boundary (web form option values)
WIRE_LOCATION_CHOICES: Dict[int, str] = {
    1: LOCATION_DOWNTOWN,
    2: LOCATION_SUBURB,
    3: LOCATION_RURAL,
    4: LOCATION_UPTOWN,
    5: LOCATION_BEACHSIDE,
    6: LOCATION_METROPOLITAN,
}

WIRE_FURNISHING_CHOICES: Dict[int, str] = {
    1: UNFURNISHED,
    2: SEMI_FURNISHED,
    3: FURNISHED,
}

WIRE_KITCHEN_CHOICES: Dict[int, str] = {
    0: KITCHEN_CLOSED,
    1: KITCHEN_OPEN,
}

# Canonical feature order
FEATURE_COLUMNS: List[str] = [
    "area",
    "bedrooms",
    "bathrooms",
    "age",
    "neighborhood_score",
    "parking_spaces",
    "location",
    "furnishing",
    "kitchen",
]

FEATURE_COUNT: int = len(FEATURE_COLUMNS)

# Display labels, same order as FEATURE_COLUMNS
FEATURE_LABELS: List[str] = [
    "Square Footage",
    "Bedrooms",
    "Bathrooms",
    "Age",
    "Neighborhood",
    "Parking Spaces",
    "Location",
    "Furnishing",
    "Kitchen Type",
]

# Column names of the CSV layout written by the dataset tooling
CSV_COLUMNS: List[str] = [
    "squareFootage",
    "bedrooms",
    "bathrooms",
    "age",
    "neighborhood",
    "parkingSpaces",
    "locationType",
    "furnishingState",
    "kitchenType",
    "price",
]

# Files written into the model directory
MODEL_FILENAME = "housing_price_model.pkl"
METADATA_FILENAME = "training_metadata.json"
