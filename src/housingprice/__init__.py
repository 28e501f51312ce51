"""
Housing Price Predictor

Estimates residential property prices from structured attributes with a
per-feature linear model, and serves the model over a small JSON API.

Main components:
- core: Property records, fitted models and encoding tables
- ml: Feature codec, regression engine and model store
- api: Flask REST API server
- cli: Command-line interfaces

Usage:
    from housingprice import get_config
    from housingprice.ml import ModelStore
    from housingprice.api import create_app
"""

__version__ = "1.0.0"

from housingprice.config import get_config
from housingprice.logging_config import setup_logging

__all__ = [
    "__version__",
    "get_config",
    "setup_logging",
]
