"""Configuration management module for the resume matcher."""

from .environment import EnvironmentConfig, load_environment_config
from .exceptions import ConfigurationError
from .loader import load_config, parse_config
from .models import (
    AppConfig,
    ExtractionConfig,
    LogFormat,
    LoggingConfig,
    LogLevel,
    ResultLimitsConfig,
    ScoringConfig,
    ValidationConfig,
)

__all__ = [
    # Loader functions
    "load_config",
    "parse_config",
    "load_environment_config",
    # Configuration models
    "AppConfig",
    "ScoringConfig",
    "ExtractionConfig",
    "ResultLimitsConfig",
    "ValidationConfig",
    "LoggingConfig",
    "EnvironmentConfig",
    # Enums
    "LogLevel",
    "LogFormat",
    # Exceptions
    "ConfigurationError",
]
