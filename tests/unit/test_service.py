"""
Unit tests for the prediction service.
"""

import pytest

from housingprice.api.service import PredictionService, decode
from housingprice.api.schemas import PredictRequest
from housingprice.core.models import FittedModel
from housingprice.exceptions import (
    InvalidRequestError,
    ModelNotTrainedError,
    TrainingFailedError,
)
from housingprice.ml.regression import fit


@pytest.fixture
def service(store):
    return PredictionService(store)


def one_hot_model(index: int) -> FittedModel:
    """Model whose prediction equals the value in column ``index``."""
    weights = [0.0] * 9
    weights[index] = 1.0
    return FittedModel(intercept=0.0, weights=tuple(weights), sample_count=1)


class TestStatus:

    def test_untrained(self, service):
        assert service.status() == {"trained": False}

    def test_trained(self, service):
        service.train({})
        assert service.status() == {"trained": True}


class TestTrain:
    """Tests for PredictionService.train."""

    def test_default_sample_count(self, service):
        assert service.train({}) == {"samples": 20, "status": "trained"}

    def test_none_payload(self, service):
        assert service.train(None)["samples"] == 20

    def test_requested_samples(self, service, store):
        assert service.train({"samples": 5}) == {"samples": 5, "status": "trained"}
        assert store.current().sample_count == 5

    def test_sample_source_receives_count(self, store, two_record_set):
        calls = []

        def source(count):
            calls.append(count)
            return two_record_set

        service = PredictionService(store, sample_source=source)
        assert service.train({"samples": 12})["samples"] == 2
        assert calls == [12]

    def test_explicit_records(self, service, store, predict_payload):
        records = [
            dict(predict_payload, squareFootage=1000.0, price=100000.0),
            dict(predict_payload, squareFootage=2000.0, price=200000.0),
        ]
        assert service.train({"records": records}) == {"samples": 2, "status": "trained"}
        assert store.current().weights[0] == 100.0

    def test_records_take_precedence(self, service, predict_payload):
        records = [dict(predict_payload, price=100000.0)]
        assert service.train({"samples": 50, "records": records})["samples"] == 1

    def test_samples_over_limit(self, service, monkeypatch):
        monkeypatch.setenv("HOUSINGPRICE_MAX_SAMPLES", "100")
        from housingprice.config import reset_config
        reset_config()
        with pytest.raises(InvalidRequestError) as exc_info:
            service.train({"samples": 101})
        assert "samples" in exc_info.value.message

    @pytest.mark.parametrize("samples", [0, -3, "10", 2.5, True])
    def test_invalid_samples(self, service, samples):
        with pytest.raises(InvalidRequestError):
            service.train({"samples": samples})

    def test_empty_records_rejected(self, service):
        with pytest.raises(InvalidRequestError):
            service.train({"records": []})

    def test_record_without_price_rejected(self, service, predict_payload):
        with pytest.raises(InvalidRequestError) as exc_info:
            service.train({"records": [predict_payload]})
        assert "price" in exc_info.value.message

    def test_engine_failure_wrapped(self, store):
        service = PredictionService(store, sample_source=lambda count: [])
        with pytest.raises(TrainingFailedError) as exc_info:
            service.train({})
        assert exc_info.value.status_code == 500
        assert exc_info.value.message == "Training failed: Training set is empty"
        assert store.is_trained() is False

    def test_overflowing_records_fail_training(self, service, store, predict_payload):
        records = [
            dict(predict_payload, squareFootage=1e200, price=1e200),
            dict(predict_payload, squareFootage=3e200, price=-1e200),
        ]
        with pytest.raises(TrainingFailedError) as exc_info:
            service.train({"records": records})
        assert "non-finite" in exc_info.value.message
        assert store.is_trained() is False

    def test_failure_keeps_previous_model(self, store, two_record_set):
        store.train(two_record_set)
        model = store.current()
        service = PredictionService(store, sample_source=lambda count: [])
        with pytest.raises(TrainingFailedError):
            service.train({})
        assert store.current() is model

    def test_retrain_replaces_model(self, service, store):
        service.train({"samples": 5})
        first = store.current()
        service.train({"samples": 30})
        assert store.current() is not first
        assert store.current().sample_count == 30


class TestPredict:
    """Tests for PredictionService.predict."""

    def test_untrained(self, service, predict_payload):
        with pytest.raises(ModelNotTrainedError) as exc_info:
            service.predict(predict_payload)
        assert exc_info.value.message == "Model not trained"

    def test_untrained_checked_before_payload(self, service):
        with pytest.raises(ModelNotTrainedError):
            service.predict({})

    def test_prediction(self, service, store, two_record_set, predict_payload):
        store.install(fit(two_record_set))
        result = service.predict(dict(predict_payload, squareFootage=1500.0, bedrooms=0,
                                      bathrooms=0, age=0, neighborhood=0.0, parkingSpaces=0))
        assert result == {"predictedPrice": 150000.0}

    def test_integer_square_footage_accepted(self, service, store, two_record_set, predict_payload):
        store.install(fit(two_record_set))
        result = service.predict(dict(predict_payload, squareFootage=1500))
        assert isinstance(result["predictedPrice"], float)

    @pytest.mark.parametrize("wire,ordinal", [(1, 4), (2, 2), (3, 1), (4, 3), (5, 6), (6, 5)])
    def test_location_choices(self, service, store, predict_payload, wire, ordinal):
        store.install(one_hot_model(6))
        assert service.predict(dict(predict_payload, locationType=wire))["predictedPrice"] == ordinal

    @pytest.mark.parametrize("wire,ordinal", [(1, 1), (2, 2), (3, 3)])
    def test_furnishing_choices(self, service, store, predict_payload, wire, ordinal):
        store.install(one_hot_model(7))
        assert service.predict(dict(predict_payload, furnishingState=wire))["predictedPrice"] == ordinal

    @pytest.mark.parametrize("wire,ordinal", [(0, 0), (1, 1)])
    def test_kitchen_choices(self, service, store, predict_payload, wire, ordinal):
        store.install(one_hot_model(8))
        assert service.predict(dict(predict_payload, kitchenType=wire))["predictedPrice"] == ordinal

    def test_unclamped_negative(self, service, store, predict_payload):
        store.install(FittedModel(intercept=-1000.0, weights=(0.0,) * 9))
        assert service.predict(predict_payload)["predictedPrice"] == -1000.0

    @pytest.mark.parametrize("field", [
        "squareFootage", "bedrooms", "bathrooms", "age", "neighborhood",
        "parkingSpaces", "locationType", "furnishingState", "kitchenType",
    ])
    def test_missing_field(self, service, store, predict_payload, field):
        store.install(one_hot_model(0))
        payload = dict(predict_payload)
        del payload[field]
        with pytest.raises(InvalidRequestError) as exc_info:
            service.predict(payload)
        assert exc_info.value.message == f"Missing required field: {field}"

    @pytest.mark.parametrize("field,value", [
        ("locationType", 0),
        ("locationType", 7),
        ("furnishingState", 0),
        ("furnishingState", 4),
        ("kitchenType", 2),
        ("kitchenType", -1),
        ("bedrooms", 2.5),
        ("bedrooms", True),
        ("bedrooms", "3"),
        ("squareFootage", "1800"),
        ("squareFootage", 0),
        ("squareFootage", None),
        ("age", -1),
    ])
    def test_invalid_field(self, service, store, predict_payload, field, value):
        store.install(one_hot_model(0))
        with pytest.raises(InvalidRequestError) as exc_info:
            service.predict(dict(predict_payload, **{field: value}))
        assert field in exc_info.value.message
        assert exc_info.value.status_code == 400

    def test_non_object_payload(self, service, store):
        store.install(one_hot_model(0))
        with pytest.raises(InvalidRequestError) as exc_info:
            service.predict([1, 2, 3])
        assert exc_info.value.message == "Request body must be a JSON object"


class TestInspect:
    """Tests for PredictionService.inspect."""

    def test_untrained(self, service):
        with pytest.raises(ModelNotTrainedError):
            service.inspect()

    def test_returns_model_values(self, service, store, two_record_set):
        model = fit(two_record_set)
        store.install(model)
        result = service.inspect()
        assert result["coefficients"] == list(model.weights)
        assert result["intercept"] == model.intercept
        assert len(result["features"]) == 9

    def test_after_sample_training(self, service):
        service.train({})
        assert len(service.inspect()["coefficients"]) == 9


class TestDecode:

    def test_collects_errors(self, predict_payload):
        with pytest.raises(InvalidRequestError) as exc_info:
            decode(PredictRequest, dict(predict_payload, bedrooms="x", kitchenType=5))
        assert len(exc_info.value.errors) == 2

    def test_ignores_extra_fields(self, predict_payload):
        request = decode(PredictRequest, dict(predict_payload, color="blue"))
        assert request.square_footage == 1800.0
