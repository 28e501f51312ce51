"""
Flask Application Factory

Creates and configures the Flask application.
"""

from flask import Flask
from flask_cors import CORS

from housingprice.config import get_config
from housingprice.api.routes import register_routes
from housingprice.api.service import PredictionService, SampleSource
from housingprice.logging_config import setup_logging, get_logger
from housingprice.ml.model_store import ModelStore

logger = get_logger(__name__)


def _warm_up(store: ModelStore, service: PredictionService) -> None:
    """Install a model at startup: the persisted one if present, else sample data."""
    if store.load():
        return
    result = service.train({})
    logger.info("ML system initialized with %d samples", result["samples"])


def create_app(
    test_config=None,
    store: ModelStore = None,
    sample_source: SampleSource = None,
) -> Flask:
    """Create and configure the Flask application.

    Args:
        test_config: Optional configuration dict applied on top of defaults.
            ``TRAIN_ON_STARTUP`` overrides the configured startup training.
        store: Model store to serve from. A fresh untrained store is created
            when omitted.
        sample_source: Callable producing sample training records; defaults
            to the built-in sample generator.

    Returns:
        Configured Flask application.
    """
    config = get_config()

    setup_logging()

    app = Flask(__name__)
    app.config["DEBUG"] = config.api.debug
    app.config["TRAIN_ON_STARTUP"] = config.api.train_on_startup

    if test_config:
        app.config.update(test_config)

    # Browser clients call the API cross-origin
    CORS(app)

    if store is None:
        store = ModelStore()
    service = PredictionService(store, sample_source=sample_source)

    register_routes(app, service)

    if app.config["TRAIN_ON_STARTUP"]:
        _warm_up(store, service)

    logger.info("Flask app created (model trained: %s)", store.is_trained())
    return app


def run_server(host: str = None, port: int = None, debug: bool = None, train_on_startup: bool = None):
    """Run the Flask development server.

    Args:
        host: Host to bind to.
        port: Port to bind to.
        debug: Enable debug mode.
        train_on_startup: Override ``HOUSINGPRICE_TRAIN_ON_STARTUP``.
    """
    config = get_config()

    host = host or config.api.host
    port = port or config.api.port
    debug = debug if debug is not None else config.api.debug

    overrides = None
    if train_on_startup is not None:
        overrides = {"TRAIN_ON_STARTUP": train_on_startup}
    app = create_app(test_config=overrides)

    logger.info("Starting server on %s:%d", host, port)
    app.run(host=host, port=port, debug=debug)
