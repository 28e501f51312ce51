"""
Per-Feature Linear Regression Engine

Fits one weight per feature column plus an intercept. Each column's weight
is the univariate covariance-over-variance slope of price against that
column alone:

    weight[j] = sum_i (x[i][j] - mean[j]) * (price[i] - mean_price)
                / sum_i (x[i][j] - mean[j]) ** 2

    intercept = mean_price - sum_j weight[j] * mean[j]

Columns are never adjusted for correlation with each other, so the result
differs from multivariate least squares whenever features are correlated
(bedrooms and area, for instance). A column whose values are all identical
gets a weight of exactly 0.

Predictions are ``intercept + weights . features`` and are never clamped or
rounded.
"""

from typing import Dict, Optional, Sequence

import numpy as np
from sklearn.metrics import mean_absolute_error, mean_absolute_percentage_error, r2_score

from housingprice.core.constants import FEATURE_COLUMNS
from housingprice.core.models import FittedModel, PropertyRecord
from housingprice.exceptions import (
    EmptyTrainingSetError,
    InconsistentVectorLengthError,
    InvalidRecordError,
    NonFiniteModelError,
)
from housingprice.logging_config import get_logger
from housingprice.ml.feature_codec import encode, encode_many

logger = get_logger(__name__)


def _as_matrix(vectors) -> np.ndarray:
    """Stack feature vectors into a 2-D array, checking they share one length."""
    if isinstance(vectors, np.ndarray) and vectors.ndim == 2:
        if vectors.shape[0] == 0:
            raise EmptyTrainingSetError()
        return vectors.astype(np.float64, copy=False)

    rows = [np.asarray(v, dtype=np.float64).ravel() for v in vectors]
    if not rows:
        raise EmptyTrainingSetError()

    expected = rows[0].shape[0]
    for index, row in enumerate(rows):
        if row.shape[0] != expected:
            raise InconsistentVectorLengthError(
                f"Feature vector {index} has length {row.shape[0]}, expected {expected}",
                expected=expected,
                actual=row.shape[0],
            )
    return np.vstack(rows)


def fit_vectors(vectors, prices) -> FittedModel:
    """Fit the per-feature model from encoded vectors and their price labels.

    Args:
        vectors: (n, k) array or sequence of n feature vectors of equal length.
        prices: Sequence of n price labels.

    Returns:
        FittedModel with k weights.

    Raises:
        EmptyTrainingSetError: If there are no vectors.
        InconsistentVectorLengthError: If vector lengths differ, or the
            number of labels differs from the number of vectors.
        InvalidRecordError: If any value is NaN or infinite.
        NonFiniteModelError: If the sums overflow and leave a NaN or
            infinite weight or intercept.
    """
    X = _as_matrix(vectors)
    y = np.asarray(prices, dtype=np.float64).ravel()

    n_samples, n_features = X.shape
    if y.shape[0] != n_samples:
        raise InconsistentVectorLengthError(
            f"Got {y.shape[0]} price labels for {n_samples} feature vectors",
            expected=n_samples,
            actual=y.shape[0],
        )
    if not (np.isfinite(X).all() and np.isfinite(y).all()):
        raise InvalidRecordError("Training data contains non-finite values")

    with np.errstate(over="ignore", invalid="ignore"):
        feature_means = X.mean(axis=0)
        mean_price = y.mean()
        dx = X - feature_means
        dy = y - mean_price
        numerator = (dx * dy[:, np.newaxis]).sum(axis=0)
        denominator = (dx * dx).sum(axis=0)

    # A constant column can still leave rounding residue in dx; test the raw
    # values so its weight is exactly zero.
    constant = (X == X[0]).all(axis=0)
    usable = ~constant & (denominator != 0)

    weights = np.zeros(n_features, dtype=np.float64)
    with np.errstate(over="ignore", invalid="ignore"):
        weights[usable] = numerator[usable] / denominator[usable]
        intercept = mean_price - float(np.dot(weights, feature_means))

    if not (np.isfinite(weights).all() and np.isfinite(intercept)):
        raise NonFiniteModelError(
            f"Fitted model has non-finite weights or intercept on {n_samples} samples"
        )

    if n_features == len(FEATURE_COLUMNS):
        columns = tuple(FEATURE_COLUMNS)
    else:
        columns = tuple(f"feature_{j}" for j in range(n_features))

    logger.debug(
        "Fitted %d weights on %d samples (%d degenerate columns)",
        n_features,
        n_samples,
        int((~usable).sum()),
    )

    return FittedModel(
        intercept=float(intercept),
        weights=tuple(float(w) for w in weights),
        sample_count=int(n_samples),
        feature_columns=columns,
    )


def fit(training_set: Sequence[PropertyRecord]) -> FittedModel:
    """Fit a model from labeled property records.

    Raises:
        EmptyTrainingSetError: If ``training_set`` is empty.
        InvalidRecordError: If a record has no price or an unmapped category.
    """
    records = list(training_set)
    if not records:
        raise EmptyTrainingSetError()

    for index, record in enumerate(records):
        if record.price is None:
            raise InvalidRecordError(
                f"Training record {index} has no price", field="price"
            )

    X = encode_many(records)
    y = np.array([record.price for record in records], dtype=np.float64)
    return fit_vectors(X, y)


def predict(model: FittedModel, vector) -> float:
    """Evaluate the model on one feature vector.

    Raises:
        InconsistentVectorLengthError: If the vector length differs from the
            model's weight count.
    """
    features = np.asarray(vector, dtype=np.float64).ravel()
    if features.shape[0] != len(model.weights):
        raise InconsistentVectorLengthError(
            f"Feature vector has length {features.shape[0]}, model expects {len(model.weights)}",
            expected=len(model.weights),
            actual=features.shape[0],
        )
    return model.intercept + float(np.dot(np.asarray(model.weights), features))


def predict_many(model: FittedModel, vectors) -> np.ndarray:
    """Evaluate the model on every row of ``vectors``."""
    X = _as_matrix(vectors)
    if X.shape[1] != len(model.weights):
        raise InconsistentVectorLengthError(
            f"Feature vectors have length {X.shape[1]}, model expects {len(model.weights)}",
            expected=len(model.weights),
            actual=X.shape[1],
        )
    return model.intercept + X @ np.asarray(model.weights)


def predict_record(model: FittedModel, record: PropertyRecord) -> float:
    """Encode ``record`` and evaluate the model on it."""
    return predict(model, encode(record))


def training_metrics(model: FittedModel, vectors, prices) -> Dict[str, Optional[float]]:
    """In-sample fit statistics for logging and model metadata.

    Returns:
        Dictionary with r2, mae, mape (percent) and sample count. r2 is None
        for fewer than two samples.
    """
    X = _as_matrix(vectors)
    y = np.asarray(prices, dtype=np.float64).ravel()
    y_pred = predict_many(model, X)

    r2 = float(r2_score(y, y_pred)) if len(y) >= 2 else None
    return {
        "r2": r2,
        "mae": float(mean_absolute_error(y, y_pred)),
        "mape": float(mean_absolute_percentage_error(y, y_pred) * 100),
        "samples": int(len(y)),
    }
