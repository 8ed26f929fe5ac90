"""Boundary input validation for resume and job text."""

from .exceptions import InputValidationError, JobDescriptionError, ResumeTextError
from .validators import (
    JOB_KEYWORDS,
    JobTextValidator,
    ResumeTextValidator,
    ValidationReport,
    contains_job_keywords,
    find_job_keywords,
)

__all__ = [
    "InputValidationError",
    "JobDescriptionError",
    "ResumeTextError",
    "JobTextValidator",
    "ResumeTextValidator",
    "ValidationReport",
    "JOB_KEYWORDS",
    "contains_job_keywords",
    "find_job_keywords",
]
