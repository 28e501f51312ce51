"""
API Routes for the Housing Price Service

Provides REST API endpoints for:
- Model status
- Model training
- Price predictions
- Model inspection (coefficients and intercept)

Every failure is answered as ``{"error": message}`` with the status code
carried by the raised HousingPriceError (400, 405 or 500).
"""

from typing import Any

from flask import Blueprint, Flask, current_app, jsonify, request
from werkzeug.exceptions import HTTPException

from housingprice.exceptions import (
    HousingPriceError,
    InvalidRequestError,
    MethodNotAllowedError,
)
from housingprice.logging_config import get_logger
from housingprice.api.service import PredictionService

logger = get_logger(__name__)

EXTENSION_KEY = "housingprice.service"

# Create blueprint
api = Blueprint("api", __name__, url_prefix="/api")


def get_service() -> PredictionService:
    """Return the PredictionService attached to the running app."""
    return current_app.extensions[EXTENSION_KEY]


def _read_json(required: bool) -> Any:
    """Parse the request body as JSON.

    An empty body yields None when ``required`` is False.
    """
    if not request.get_data(cache=True) and not required:
        return None
    payload = request.get_json(force=True, silent=True)
    if payload is None:
        raise InvalidRequestError("Request body must be JSON")
    return payload


def error_response(message: str, status_code: int):
    return jsonify({"error": message}), status_code


@api.route("/status", methods=["GET"])
def status():
    """Report whether a model is trained."""
    return jsonify(get_service().status())


@api.route("/train", methods=["POST"])
def train():
    """Train a new model from sample data or supplied records."""
    payload = _read_json(required=False)
    result = get_service().train(payload)
    logger.info("Model trained on %d samples", result["samples"])
    return jsonify(result)


@api.route("/predict", methods=["POST"])
def predict():
    """Predict a property price."""
    payload = _read_json(required=True)
    return jsonify(get_service().predict(payload))


@api.route("/evaluate", methods=["GET"])
def evaluate():
    """Return the trained model's coefficients and intercept."""
    return jsonify(get_service().inspect())


def handle_service_error(e: HousingPriceError):
    if e.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.path, e)
    else:
        logger.warning("%s %s rejected: %s", request.method, request.path, e)
    return error_response(e.message, e.status_code)


def handle_http_error(e: HTTPException):
    if e.code == 405:
        return error_response(MethodNotAllowedError().message, 405)
    return error_response(e.name, e.code or 500)


def handle_unexpected_error(e: Exception):
    logger.error("Unhandled error on %s %s: %s", request.method, request.path, e, exc_info=True)
    return error_response(f"Internal error: {e}", 500)


def register_routes(app: Flask, service: PredictionService) -> None:
    """Register API routes and JSON error handlers with the Flask app.

    Args:
        app: Flask application instance.
        service: Service the routes dispatch to.
    """
    app.extensions[EXTENSION_KEY] = service
    app.register_blueprint(api)

    app.register_error_handler(HousingPriceError, handle_service_error)
    app.register_error_handler(HTTPException, handle_http_error)
    app.register_error_handler(Exception, handle_unexpected_error)
