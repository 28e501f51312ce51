"""
Model Store

Holds the active FittedModel for the process. The store is either untrained
or holds exactly one model; every ``train`` call is a full refit that
replaces the previous model.

Readers take one reference to an immutable slot, so a prediction running
while ``train`` installs a new model sees either the old model or the new
one in full. Writers are serialized by a lock.
"""

import json
import threading
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Dict, Optional, Sequence

import joblib

from housingprice.config import get_config
from housingprice.core.constants import METADATA_FILENAME, MODEL_FILENAME
from housingprice.core.models import FittedModel, PropertyRecord
from housingprice.exceptions import ModelNotFoundError, ModelNotTrainedError
from housingprice.logging_config import get_logger
from housingprice.ml.feature_codec import encode_many
from housingprice.ml.regression import fit, training_metrics

logger = get_logger(__name__)


@dataclass(frozen=True)
class _Slot:
    model: FittedModel
    trained_at: str
    metrics: Dict = field(default_factory=dict)


class ModelStore:
    """Single-slot holder for the current fitted model."""

    def __init__(self, model_dir: Optional[Path] = None):
        """Initialize an untrained store.

        Args:
            model_dir: Directory used by save/load. Defaults to config.
        """
        if model_dir is None:
            model_dir = Path(get_config().ml.model_dir)

        self.model_dir = Path(model_dir)
        self.model_path = self.model_dir / MODEL_FILENAME
        self.metadata_path = self.model_dir / METADATA_FILENAME

        self._slot: Optional[_Slot] = None
        self._write_lock = threading.Lock()

    def train(self, training_set: Sequence[PropertyRecord]) -> FittedModel:
        """Fit a new model on ``training_set`` and install it.

        Returns:
            The newly installed model.

        Raises:
            EmptyTrainingSetError, InconsistentVectorLengthError,
            InvalidRecordError: Propagated from the regression engine; the
            previous model (if any) stays installed.
        """
        records = list(training_set)
        with self._write_lock:
            logger.info("Training model on %d records", len(records))
            model = fit(records)

            prices = [record.price for record in records]
            metrics = training_metrics(model, encode_many(records), prices)

            self._slot = _Slot(
                model=model,
                trained_at=datetime.now().isoformat(),
                metrics=metrics,
            )

        if metrics["r2"] is not None:
            logger.info("In-sample R² Score: %.4f", metrics["r2"])
        logger.info("In-sample MAE: $%.0f", metrics["mae"])
        return model

    def install(self, model: FittedModel, trained_at: str = None, metrics: Dict = None) -> None:
        """Replace the current model with an already fitted one."""
        with self._write_lock:
            self._slot = _Slot(
                model=model,
                trained_at=trained_at or datetime.now().isoformat(),
                metrics=dict(metrics or {}),
            )

    def current(self) -> Optional[FittedModel]:
        """Return the installed model, or None when untrained."""
        slot = self._slot
        return slot.model if slot is not None else None

    def is_trained(self) -> bool:
        """True once any model has been installed."""
        return self._slot is not None

    def inspect(self) -> FittedModel:
        """Return the installed model.

        Raises:
            ModelNotTrainedError: If no model is installed.
        """
        model = self.current()
        if model is None:
            raise ModelNotTrainedError()
        return model

    @property
    def metadata(self) -> Dict:
        """Training metadata for the installed model (empty when untrained)."""
        slot = self._slot
        if slot is None:
            return {}
        return {
            "trained_at": slot.trained_at,
            "sample_count": slot.model.sample_count,
            "feature_columns": list(slot.model.feature_columns),
            "metrics": dict(slot.metrics),
        }

    def save(self) -> Path:
        """Persist the installed model and its metadata.

        Raises:
            ModelNotTrainedError: If there is nothing to save.
        """
        slot = self._slot
        if slot is None:
            raise ModelNotTrainedError("No model to save. Train the model first.")

        self.model_dir.mkdir(parents=True, exist_ok=True)
        joblib.dump(slot.model, self.model_path)
        with open(self.metadata_path, "w") as f:
            json.dump(self.metadata, f, indent=2, default=str)

        logger.info("Model saved to: %s", self.model_path)
        logger.info("Metadata saved to: %s", self.metadata_path)
        return self.model_path

    def load(self) -> bool:
        """Install the persisted model if one exists.

        Returns:
            True if a model was loaded.
        """
        if not self.model_path.exists():
            logger.warning("Model not found at %s", self.model_path)
            return False

        model = joblib.load(self.model_path)
        if not isinstance(model, FittedModel):
            raise ModelNotFoundError(str(self.model_path))

        metadata = {}
        if self.metadata_path.exists():
            with open(self.metadata_path, "r") as f:
                metadata = json.load(f)

        self.install(
            model,
            trained_at=metadata.get("trained_at"),
            metrics=metadata.get("metrics"),
        )
        logger.info("Model loaded from %s", self.model_path)
        return True
