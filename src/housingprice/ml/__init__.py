"""
Machine learning modules for housing price estimation.

Provides the feature codec, the per-feature linear regression engine and
the single-slot model store.
"""

from housingprice.ml.feature_codec import encode, encode_many
from housingprice.ml.regression import fit, fit_vectors, predict
from housingprice.ml.model_store import ModelStore

__all__ = [
    "encode",
    "encode_many",
    "fit",
    "fit_vectors",
    "predict",
    "ModelStore",
]
