"""
Prediction Service

Transport-independent handlers for the four service operations. Each takes
an already parsed JSON payload, works against the ModelStore it was given,
and returns a JSON-ready dictionary or raises a HousingPriceError subclass
that the HTTP layer turns into an error response.
"""

from typing import Any, Callable, Dict, List, Optional

from pydantic import ValidationError

from housingprice.config import get_config
from housingprice.core.constants import FEATURE_COLUMNS
from housingprice.core.models import PropertyRecord
from housingprice.exceptions import (
    InvalidRequestError,
    ModelError,
    ModelNotTrainedError,
    TrainingFailedError,
    InvalidRecordError,
)
from housingprice.logging_config import get_logger
from housingprice.api.schemas import PredictRequest, TrainRequest
from housingprice.ml.feature_codec import encode
from housingprice.ml.model_store import ModelStore
from housingprice.ml.regression import predict as predict_vector
from housingprice.ml.sample_data import generate_sample_records

logger = get_logger(__name__)

SampleSource = Callable[[int], List[PropertyRecord]]


def _validation_message(exc: ValidationError) -> str:
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    if first.get("type") == "missing":
        return f"Missing required field: {location}"
    return f"Invalid field '{location}': {first.get('msg')}"


def decode(schema, payload: Any):
    """Validate ``payload`` against a pydantic schema.

    Raises:
        InvalidRequestError: If the payload is not an object or fails validation.
    """
    if not isinstance(payload, dict):
        raise InvalidRequestError("Request body must be a JSON object")
    try:
        return schema.model_validate(payload)
    except ValidationError as e:
        raise InvalidRequestError(
            _validation_message(e), errors=e.errors(include_url=False)
        ) from e


class PredictionService:
    """Status, train, predict and inspect over a shared ModelStore."""

    def __init__(self, store: ModelStore, sample_source: Optional[SampleSource] = None):
        self.store = store
        self.sample_source = sample_source or generate_sample_records

    def status(self) -> Dict[str, Any]:
        return {"trained": self.store.is_trained()}

    def train(self, payload: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Fit and install a new model.

        Payload fields (all optional):
            samples: Number of sample records to draw from the sample source.
            records: Explicit labeled records; takes precedence over samples.

        Returns:
            {"samples": <records used>, "status": "trained"}

        Raises:
            InvalidRequestError: Malformed payload or sample count above the limit.
            TrainingFailedError: The regression engine rejected the training set.
        """
        request = decode(TrainRequest, payload if payload is not None else {})
        ml_config = get_config().ml

        if request.records is not None:
            records = [item.to_record() for item in request.records]
        else:
            count = request.samples if request.samples is not None else ml_config.default_samples
            if count > ml_config.max_samples:
                raise InvalidRequestError(
                    f"Invalid field 'samples': must be at most {ml_config.max_samples}"
                )
            records = self.sample_source(count)

        try:
            model = self.store.train(records)
        except (ModelError, InvalidRecordError) as e:
            logger.error("Training failed: %s", e)
            raise TrainingFailedError(str(e)) from e

        return {"samples": model.sample_count, "status": "trained"}

    def predict(self, payload: Any) -> Dict[str, Any]:
        """Predict the price of the property described by ``payload``.

        Raises:
            ModelNotTrainedError: If no model is installed.
            InvalidRequestError: If the payload is malformed.
        """
        model = self.store.current()
        if model is None:
            raise ModelNotTrainedError()

        record = decode(PredictRequest, payload).to_record()
        price = predict_vector(model, encode(record))
        logger.debug("Predicted %.2f for %s", price, record)
        return {"predictedPrice": price}

    def inspect(self) -> Dict[str, Any]:
        """Return the installed model's weights and intercept, unmodified.

        Raises:
            ModelNotTrainedError: If no model is installed.
        """
        model = self.store.inspect()
        return {
            "coefficients": list(model.weights),
            "intercept": model.intercept,
            "features": list(FEATURE_COLUMNS),
        }
