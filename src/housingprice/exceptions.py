"""
Custom Exceptions for the Housing Price Predictor

Provides a hierarchy of exceptions for standardized error handling across all modules.

Exception Hierarchy:
    HousingPriceError (base)
    ├── ConfigurationError
    ├── InvalidRecordError
    ├── ModelError
    │   ├── EmptyTrainingSetError
    │   ├── InconsistentVectorLengthError
    │   ├── ModelNotTrainedError
    │   ├── ModelNotFoundError
    │   ├── NonFiniteModelError
    │   └── TrainingFailedError
    └── ServiceError
        ├── InvalidRequestError
        └── MethodNotAllowedError

Every error carries a ``status_code`` used by the API layer when it turns the
error into a ``{"error": ...}`` response.
"""


class HousingPriceError(Exception):
    """Base exception for all housing price predictor errors."""

    status_code = 500

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


# Configuration Errors
class ConfigurationError(HousingPriceError):
    """Raised when there's a configuration problem."""

    pass


# Record Errors
class InvalidRecordError(HousingPriceError):
    """Raised when a property record has a missing or unmapped value."""

    status_code = 400

    def __init__(self, message: str, field: str = None, value=None):
        self.field = field
        self.value = value
        super().__init__(message)


# ML Model Errors
class ModelError(HousingPriceError):
    """Base exception for regression model errors."""

    pass


class EmptyTrainingSetError(ModelError):
    """Raised when fitting is attempted with zero training records."""

    def __init__(self, message: str = "Training set is empty"):
        super().__init__(message)


class InconsistentVectorLengthError(ModelError):
    """Raised when feature vectors (or labels) disagree in length."""

    def __init__(self, message: str, expected: int = None, actual: int = None):
        self.expected = expected
        self.actual = actual
        super().__init__(message)


class ModelNotTrainedError(ModelError):
    """Raised when a prediction or inspection needs a model and none is installed."""

    status_code = 400

    def __init__(self, message: str = "Model not trained"):
        super().__init__(message)


class ModelNotFoundError(ModelError):
    """Raised when a persisted model file is not found."""

    def __init__(self, model_path: str = None):
        self.model_path = model_path
        message = f"Model not found at: {model_path}" if model_path else "Model not found"
        super().__init__(message)


class NonFiniteModelError(ModelError):
    """Raised when the fitted weights or intercept overflow to NaN or infinity."""

    def __init__(self, message: str = "Fitted model has non-finite weights"):
        super().__init__(message)


class TrainingFailedError(ModelError):
    """Raised when model training fails; wraps the underlying engine error."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Training failed: {reason}")


# Service Errors
class ServiceError(HousingPriceError):
    """Base exception for request handling errors at the service boundary."""

    pass


class InvalidRequestError(ServiceError):
    """Raised when a request payload is missing fields or has mistyped values."""

    status_code = 400

    def __init__(self, message: str, errors: list = None):
        self.errors = errors or []
        super().__init__(message)


class MethodNotAllowedError(ServiceError):
    """Raised when an endpoint is called with the wrong HTTP verb."""

    status_code = 405

    def __init__(self, message: str = "Method not allowed"):
        super().__init__(message)
