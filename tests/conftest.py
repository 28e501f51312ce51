"""
Pytest Configuration and Fixtures

Provides shared fixtures for all tests.
"""

from pathlib import Path
from typing import List

import pytest

# Add src to path for imports
import sys
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from housingprice.core.models import PropertyRecord


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Get the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture(autouse=True)
def test_config(tmp_path: Path, monkeypatch):
    """Isolate configuration: temporary model directory, no startup training.

    Yields:
        Config object configured for testing.
    """
    monkeypatch.setenv("HOUSINGPRICE_MODEL_DIR", str(tmp_path / "models"))
    monkeypatch.setenv("HOUSINGPRICE_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("HOUSINGPRICE_TRAIN_ON_STARTUP", "false")
    monkeypatch.delenv("HOUSINGPRICE_DEFAULT_SAMPLES", raising=False)
    monkeypatch.delenv("HOUSINGPRICE_MAX_SAMPLES", raising=False)
    monkeypatch.delenv("HOUSINGPRICE_RANDOM_SEED", raising=False)

    from housingprice.config import reset_config, get_config
    from housingprice.logging_config import reset_logging
    reset_config()
    reset_logging()

    config = get_config()
    yield config

    reset_config()
    reset_logging()


def make_record(**overrides) -> PropertyRecord:
    """Build a PropertyRecord with sensible defaults."""
    values = {
        "area": 1800.0,
        "bedrooms": 3,
        "bathrooms": 2,
        "age_years": 10,
        "neighborhood_score": 4.0,
        "parking_spaces": 2,
        "location": "suburb",
        "furnishing": "semi-furnished",
        "kitchen": "open",
        "price": None,
    }
    values.update(overrides)
    return PropertyRecord(**values)


@pytest.fixture
def record_factory():
    """Factory for PropertyRecords with overridable fields."""
    return make_record


@pytest.fixture
def two_record_set() -> List[PropertyRecord]:
    """Two records that differ only in area, priced at $100 per unit."""
    return [
        make_record(area=1000.0, bedrooms=0, bathrooms=0, age_years=0,
                    neighborhood_score=0.0, parking_spaces=0, price=100000.0),
        make_record(area=2000.0, bedrooms=0, bathrooms=0, age_years=0,
                    neighborhood_score=0.0, parking_spaces=0, price=200000.0),
    ]


@pytest.fixture
def sample_records() -> List[PropertyRecord]:
    """Deterministic generated training set."""
    from housingprice.ml.sample_data import generate_sample_records
    return generate_sample_records(50, seed=7)


@pytest.fixture
def predict_payload() -> dict:
    """Valid body for POST /api/predict."""
    return {
        "squareFootage": 1800.0,
        "bedrooms": 3,
        "bathrooms": 2,
        "age": 10,
        "neighborhood": 4.0,
        "parkingSpaces": 2,
        "locationType": 2,
        "furnishingState": 2,
        "kitchenType": 1,
    }


@pytest.fixture
def store(tmp_path: Path):
    """Untrained model store backed by a temporary directory."""
    from housingprice.ml.model_store import ModelStore
    return ModelStore(model_dir=tmp_path / "store")


@pytest.fixture
def app(store):
    """Flask app serving an untrained store."""
    from housingprice.api.server import create_app
    app = create_app(test_config={"TESTING": True, "TRAIN_ON_STARTUP": False}, store=store)
    return app


@pytest.fixture
def client(app):
    """Flask test client."""
    return app.test_client()
