"""Environment variable overrides.

All variables are optional:
- RESUME_MATCH_CONFIG: Path to the YAML configuration file
- LOG_LEVEL: Override log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
- LOG_FORMAT: Override log format (json, key-value)
- ENVIRONMENT: Environment label injected into log records
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from .exceptions import ConfigurationError

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
VALID_LOG_FORMATS = ("json", "key-value")


@dataclass
class EnvironmentConfig:
    """Values read from the environment; None means "not set"."""

    config_path: Optional[Path] = None
    log_level: Optional[str] = None
    log_format: Optional[str] = None
    environment: str = "local"


def _choice(name: str, choices: Tuple[str, ...], normalize) -> Tuple[Optional[str], Optional[str]]:
    """Read ``name`` and check it against ``choices``; returns (value, error)."""
    raw = os.getenv(name)
    if not raw:
        return None, None
    value = normalize(raw)
    if value not in choices:
        return None, f"Invalid {name}: '{raw}'. Must be one of: {', '.join(choices)}"
    return value, None


def load_environment_config() -> EnvironmentConfig:
    """Read and validate the environment overrides.

    Raises:
        ConfigurationError: Listing every variable that holds an invalid value
    """
    log_level, level_error = _choice("LOG_LEVEL", VALID_LOG_LEVELS, str.upper)
    log_format, format_error = _choice("LOG_FORMAT", VALID_LOG_FORMATS, str.lower)

    errors = [error for error in (level_error, format_error) if error]
    if errors:
        raise ConfigurationError(
            "Environment variable validation failed",
            errors=errors,
            suggestions=[
                "Check the values in your .env file",
                "Unset the variable to fall back to the configuration file",
            ],
        )

    config_path = os.getenv("RESUME_MATCH_CONFIG")
    return EnvironmentConfig(
        config_path=Path(config_path) if config_path else None,
        log_level=log_level,
        log_format=log_format,
        environment=os.getenv("ENVIRONMENT") or "local",
    )
