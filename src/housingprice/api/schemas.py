"""
Request Schemas

Pydantic models for the JSON bodies accepted by the API. Decoding is strict:
missing fields, wrong JSON types (a string or boolean where a number is
expected, a fraction where an integer is expected) and out-of-range choice
values are all rejected.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from housingprice.core.constants import (
    WIRE_FURNISHING_CHOICES,
    WIRE_KITCHEN_CHOICES,
    WIRE_LOCATION_CHOICES,
)
from housingprice.core.models import PropertyRecord


class PredictRequest(BaseModel):
    """Body of ``POST /api/predict``."""

    model_config = ConfigDict(allow_inf_nan=False)

    square_footage: float = Field(..., alias="squareFootage", gt=0, strict=True)
    bedrooms: int = Field(..., ge=0, strict=True)
    bathrooms: int = Field(..., ge=0, strict=True)
    age: int = Field(..., ge=0, strict=True)
    neighborhood: float = Field(..., strict=True, description="Neighborhood quality, nominally 1.0-5.0")
    parking_spaces: int = Field(..., alias="parkingSpaces", ge=0, strict=True)
    location_type: int = Field(
        ..., alias="locationType", ge=1, le=6, strict=True,
        description="1 Downtown, 2 Suburb, 3 Rural, 4 Uptown, 5 Beachside, 6 Metropolitan",
    )
    furnishing_state: int = Field(
        ..., alias="furnishingState", ge=1, le=3, strict=True,
        description="1 Unfurnished, 2 Semi-Furnished, 3 Furnished",
    )
    kitchen_type: int = Field(
        ..., alias="kitchenType", ge=0, le=1, strict=True,
        description="0 Closed, 1 Open",
    )

    def to_record(self, price: Optional[float] = None) -> PropertyRecord:
        """Translate wire choices into a PropertyRecord."""
        return PropertyRecord(
            area=self.square_footage,
            bedrooms=self.bedrooms,
            bathrooms=self.bathrooms,
            age_years=self.age,
            neighborhood_score=self.neighborhood,
            parking_spaces=self.parking_spaces,
            location=WIRE_LOCATION_CHOICES[self.location_type],
            furnishing=WIRE_FURNISHING_CHOICES[self.furnishing_state],
            kitchen=WIRE_KITCHEN_CHOICES[self.kitchen_type],
            price=price,
        )


class TrainingRecord(PredictRequest):
    """One labeled record inside a train request."""

    price: float = Field(..., strict=True)

    def to_record(self, price: Optional[float] = None) -> PropertyRecord:
        return super().to_record(self.price if price is None else price)


class TrainRequest(BaseModel):
    """Body of ``POST /api/train``; both fields are optional."""

    samples: Optional[int] = Field(None, ge=1, strict=True)
    records: Optional[List[TrainingRecord]] = Field(None, min_length=1)
