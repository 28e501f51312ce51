"""
Centralized Configuration Module

Provides configuration classes and environment variable loading for all components.

Usage:
    from housingprice.config import get_config

    config = get_config()
    api_port = config.api.port
    default_samples = config.ml.default_samples
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from housingprice.exceptions import ConfigurationError

# Load .env file if present
load_dotenv()


def _get_project_root() -> Path:
    """Get the project root directory."""
    # config.py -> housingprice -> src -> project_root
    current = Path(__file__).resolve()
    return current.parent.parent.parent


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes")


@dataclass
class APIConfig:
    """API server configuration."""

    host: str = field(default_factory=lambda: os.getenv(
        "HOUSINGPRICE_API_HOST", "127.0.0.1"
    ))
    port: int = field(default_factory=lambda: int(os.getenv(
        "HOUSINGPRICE_API_PORT", "8080"
    )))
    debug: bool = field(default_factory=lambda: _env_flag(
        "HOUSINGPRICE_DEBUG", "false"
    ))
    train_on_startup: bool = field(default_factory=lambda: _env_flag(
        "HOUSINGPRICE_TRAIN_ON_STARTUP", "true"
    ))


@dataclass
class MLConfig:
    """Regression model configuration."""

    model_dir: str = field(default_factory=lambda: os.getenv(
        "HOUSINGPRICE_MODEL_DIR",
        str(_get_project_root() / "models")
    ))
    default_samples: int = field(default_factory=lambda: int(os.getenv(
        "HOUSINGPRICE_DEFAULT_SAMPLES", "20"
    )))
    max_samples: int = field(default_factory=lambda: int(os.getenv(
        "HOUSINGPRICE_MAX_SAMPLES", "10000"
    )))
    random_seed: int = field(default_factory=lambda: int(os.getenv(
        "HOUSINGPRICE_RANDOM_SEED", "42"
    )))

    def __post_init__(self):
        # Resolve relative paths
        if not os.path.isabs(self.model_dir):
            self.model_dir = str(_get_project_root() / self.model_dir)
        if self.default_samples < 1:
            raise ConfigurationError(
                f"HOUSINGPRICE_DEFAULT_SAMPLES must be at least 1, got {self.default_samples}"
            )
        if self.max_samples < self.default_samples:
            raise ConfigurationError(
                f"HOUSINGPRICE_MAX_SAMPLES ({self.max_samples}) is below "
                f"HOUSINGPRICE_DEFAULT_SAMPLES ({self.default_samples})"
            )


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = field(default_factory=lambda: os.getenv(
        "HOUSINGPRICE_LOG_LEVEL", "INFO"
    ).upper())
    log_file: Optional[str] = field(default_factory=lambda: os.getenv(
        "HOUSINGPRICE_LOG_FILE"
    ))

    def __post_init__(self):
        # Validate log level
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if self.level not in valid_levels:
            self.level = "INFO"


@dataclass
class Config:
    """Main configuration container."""

    api: APIConfig = field(default_factory=APIConfig)
    ml: MLConfig = field(default_factory=MLConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


# Singleton instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get the global configuration instance.

    Returns:
        Config: The application configuration.
    """
    global _config
    if _config is None:
        _config = Config()
    return _config


def reset_config() -> None:
    """Reset the configuration (useful for testing)."""
    global _config
    _config = None
