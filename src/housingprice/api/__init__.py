"""
Flask REST API for the housing price service.

Provides endpoints for:
- Model status and training
- Property price predictions
- Model inspection
"""

from housingprice.api.server import create_app
from housingprice.api.routes import register_routes
from housingprice.api.service import PredictionService

__all__ = [
    "create_app",
    "register_routes",
    "PredictionService",
]
