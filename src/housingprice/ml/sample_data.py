"""
Sample Training Data

Generates the labeled sample houses the API server trains on when no
training records are supplied. Prices follow a fixed hedonic formula so the
fitted weights have a realistic sign and scale.
"""

from typing import List, Optional

import numpy as np

from housingprice.config import get_config
from housingprice.core.constants import (
    FURNISHED,
    KITCHEN_OPEN,
    KITCHEN_ORDINALS,
    LOCATION_BEACHSIDE,
    LOCATION_DOWNTOWN,
    LOCATION_METROPOLITAN,
    LOCATION_ORDINALS,
    LOCATION_RURAL,
    LOCATION_UPTOWN,
    SEMI_FURNISHED,
    UNFURNISHED,
)
from housingprice.core.models import PropertyRecord
from housingprice.logging_config import get_logger

logger = get_logger(__name__)

BASE_PRICE_PER_SQFT = 150.0
BEDROOM_VALUE = 25_000
BATHROOM_VALUE = 20_000
PARKING_VALUE = 15_000
NEIGHBORHOOD_VALUE = 50_000
NEIGHBORHOOD_BASELINE = 2.5
OPEN_KITCHEN_BONUS = 20_000
AGE_DEPRECIATION_PER_YEAR = 0.01
MIN_PRICE = 100_000

LOCATION_MULTIPLIERS = {
    LOCATION_BEACHSIDE: 1.4,
    LOCATION_UPTOWN: 1.3,
    LOCATION_DOWNTOWN: 1.2,
    LOCATION_METROPOLITAN: 1.1,
    LOCATION_RURAL: 0.8,
}

FURNISHING_BONUS = {
    FURNISHED: 30_000,
    SEMI_FURNISHED: 15_000,
}

# Declaration order used when drawing categories uniformly
LOCATIONS = list(LOCATION_ORDINALS)
FURNISHINGS = [FURNISHED, UNFURNISHED, SEMI_FURNISHED]
KITCHENS = list(KITCHEN_ORDINALS)


def sample_price(
    area: float,
    bedrooms: int,
    bathrooms: int,
    age_years: int,
    neighborhood_score: float,
    parking_spaces: int,
    location: str,
    furnishing: str,
    kitchen: str,
) -> float:
    """Price a house with the sample formula.

    Area, rooms, parking and neighborhood are additive; location is a
    multiplier applied before the furnishing and kitchen bonuses; age
    depreciates the total by 1% per year; the result is floored at $100,000.
    """
    price = area * BASE_PRICE_PER_SQFT
    price += bedrooms * BEDROOM_VALUE
    price += bathrooms * BATHROOM_VALUE
    price += parking_spaces * PARKING_VALUE
    price += (neighborhood_score - NEIGHBORHOOD_BASELINE) * NEIGHBORHOOD_VALUE

    price *= LOCATION_MULTIPLIERS.get(location, 1.0)
    price += FURNISHING_BONUS.get(furnishing, 0)
    if kitchen == KITCHEN_OPEN:
        price += OPEN_KITCHEN_BONUS

    price *= 1 - age_years * AGE_DEPRECIATION_PER_YEAR
    return max(MIN_PRICE, price)


def generate_sample_records(count: Optional[int] = None, seed: Optional[int] = None) -> List[PropertyRecord]:
    """Generate labeled sample houses.

    Args:
        count: Number of records. Defaults to config ``default_samples``.
        seed: Random seed. Defaults to config ``random_seed``; the same seed
            and count always give the same records.

    Returns:
        List of PropertyRecord with prices set.
    """
    config = get_config()
    if count is None:
        count = config.ml.default_samples
    if seed is None:
        seed = config.ml.random_seed

    rng = np.random.default_rng(seed)
    records = []

    for _ in range(count):
        area = float(1000 + rng.integers(0, 2000))
        bedrooms = int(1 + rng.integers(0, 4))
        bathrooms = max(1, bedrooms)
        age = int(rng.integers(0, 30))
        neighborhood = round(1 + int(rng.integers(0, 4)) + float(rng.random()), 1)
        parking = int(rng.integers(0, 4))

        location = LOCATIONS[rng.integers(0, len(LOCATIONS))]
        furnishing = FURNISHINGS[rng.integers(0, len(FURNISHINGS))]
        kitchen = KITCHENS[rng.integers(0, len(KITCHENS))]

        price = sample_price(
            area, bedrooms, bathrooms, age, neighborhood,
            parking, location, furnishing, kitchen,
        )
        records.append(PropertyRecord(
            area=area,
            bedrooms=bedrooms,
            bathrooms=bathrooms,
            age_years=age,
            neighborhood_score=neighborhood,
            parking_spaces=parking,
            location=location,
            furnishing=furnishing,
            kitchen=kitchen,
            price=price,
        ))

    logger.debug("Generated %d sample records (seed=%s)", count, seed)
    return records
