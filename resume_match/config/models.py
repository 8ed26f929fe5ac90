"""Configuration schema models using Pydantic.

Every default reproduces the calibration of the original browser extension,
so an empty configuration scores exactly as the extension did.
"""

from enum import Enum

from pydantic import BaseModel, Field, model_validator


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    """Log output formats."""

    JSON = "json"
    KEY_VALUE = "key-value"


class ScoringConfig(BaseModel):
    """Weights and inflation constants for the composite score.

    final = min(max_score, round((base + boost) * scaling_factor * 100)) where
    base = synonym_weight * enriched_ratio + exact_weight * exact_ratio
           + jaccard_weight * jaccard
    """

    synonym_weight: float = Field(0.7, ge=0.0, le=1.0, description="Weight of enriched match ratio")
    exact_weight: float = Field(0.2, ge=0.0, le=1.0, description="Weight of exact match ratio")
    jaccard_weight: float = Field(0.1, ge=0.0, le=1.0, description="Weight of word Jaccard")
    match_boost: float = Field(
        0.1, ge=0.0, le=1.0, description="Added to the base score when anything matched"
    )
    scaling_factor: float = Field(1.5, gt=0.0, le=10.0, description="Score inflation multiplier")
    max_score: int = Field(100, ge=1, le=100, description="Upper bound of the final score")

    @property
    def weight_total(self) -> float:
        return self.synonym_weight + self.exact_weight + self.jaccard_weight


class ExtractionConfig(BaseModel):
    """Keyword extraction limits and weights."""

    max_keywords: int = Field(60, ge=1, description="Keywords kept per document")
    phrase_weight: int = Field(3, ge=1, description="Weight added for an important phrase hit")
    word_weight: int = Field(1, ge=1, description="Weight added per single-word occurrence")
    min_partial_length: int = Field(
        3,
        ge=0,
        description="Both terms must be longer than this for substring matches to count",
    )


class ResultLimitsConfig(BaseModel):
    """Caps on the term lists reported in a MatchResult."""

    max_matched_terms: int = Field(20, ge=0)
    max_resume_terms: int = Field(30, ge=0)
    max_job_terms: int = Field(30, ge=0)


class ValidationConfig(BaseModel):
    """Pre-checks applied to job descriptions before scoring."""

    min_job_length: int = Field(100, ge=0, description="Minimum trimmed job text length")
    max_job_length: int = Field(50000, ge=1, description="Maximum trimmed job text length")
    min_job_keywords: int = Field(
        2, ge=0, description="Job-vocabulary hits needed to accept text as a job posting"
    )

    @model_validator(mode="after")
    def validate_length_bounds(self):
        if self.min_job_length > self.max_job_length:
            raise ValueError(
                f"min_job_length ({self.min_job_length}) cannot exceed "
                f"max_job_length ({self.max_job_length})"
            )
        return self


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(LogLevel.INFO, description="Log level")
    format: LogFormat = Field(
        LogFormat.KEY_VALUE, description="Log output format (json or key-value)"
    )

    model_config = {"use_enum_values": True, "validate_default": True}


class AppConfig(BaseModel):
    """Root configuration object for the resume matcher."""

    scoring: ScoringConfig = Field(default_factory=ScoringConfig)
    extraction: ExtractionConfig = Field(default_factory=ExtractionConfig)
    limits: ResultLimitsConfig = Field(default_factory=ResultLimitsConfig)
    validation: ValidationConfig = Field(default_factory=ValidationConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"extra": "forbid"}
