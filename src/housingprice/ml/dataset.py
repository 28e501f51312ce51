"""
Training Data Loading

Reads labeled housing records from the CSV layout produced by the dataset
tooling:

    squareFootage,bedrooms,bathrooms,age,neighborhood,parkingSpaces,
    locationType,furnishingState,kitchenType,price

with categories written as enum names (DOWNTOWN, SEMI_FURNISHED,
OPEN_KITCHEN).
"""

from pathlib import Path
from typing import List, Union

import pandas as pd

from housingprice.core.constants import CSV_COLUMNS
from housingprice.core.models import PropertyRecord
from housingprice.exceptions import InvalidRecordError
from housingprice.logging_config import get_logger
from housingprice.ml.feature_codec import build_record

logger = get_logger(__name__)

NUMERIC_COLUMNS = [
    "squareFootage",
    "bedrooms",
    "bathrooms",
    "age",
    "neighborhood",
    "parkingSpaces",
    "price",
]

COUNT_COLUMNS = ["bedrooms", "bathrooms", "age", "parkingSpaces"]


def _reject_rows(mask: pd.Series, problem: str) -> None:
    """Raise InvalidRecordError naming the first row flagged in ``mask``."""
    if mask.any():
        first = int(mask.idxmax())
        raise InvalidRecordError(f"Row {first} {problem}", field="row", value=first)


def records_from_frame(df: pd.DataFrame) -> List[PropertyRecord]:
    """Convert a DataFrame in the dataset CSV layout to PropertyRecords.

    Args:
        df: DataFrame with the CSV_COLUMNS columns.

    Returns:
        List of labeled records in row order.

    Raises:
        InvalidRecordError: On missing columns, non-numeric values, a
            non-positive area, negative or fractional counts, or unknown
            categories.
    """
    missing = [col for col in CSV_COLUMNS if col not in df.columns]
    if missing:
        raise InvalidRecordError(
            f"Missing columns: {', '.join(missing)}", field=missing[0]
        )

    df = df.copy()
    for col in NUMERIC_COLUMNS:
        df[col] = pd.to_numeric(df[col], errors="coerce")

    _reject_rows(
        df[NUMERIC_COLUMNS].isna().any(axis=1),
        "has missing or non-numeric values",
    )
    _reject_rows(df["squareFootage"] <= 0, "has a non-positive squareFootage")
    _reject_rows((df[COUNT_COLUMNS] < 0).any(axis=1), "has a negative count")
    _reject_rows((df[COUNT_COLUMNS] % 1 != 0).any(axis=1), "has a fractional count")

    records = []
    for row in df.itertuples(index=False):
        records.append(build_record(
            area=row.squareFootage,
            bedrooms=row.bedrooms,
            bathrooms=row.bathrooms,
            age_years=row.age,
            neighborhood_score=row.neighborhood,
            parking_spaces=row.parkingSpaces,
            location=row.locationType,
            furnishing=row.furnishingState,
            kitchen=row.kitchenType,
            price=row.price,
        ))
    return records


def load_training_csv(path: Union[str, Path]) -> List[PropertyRecord]:
    """Load labeled records from a dataset CSV file."""
    logger.info("Loading training data from %s", path)
    df = pd.read_csv(path)
    records = records_from_frame(df)
    logger.info("Loaded %d records", len(records))
    return records
