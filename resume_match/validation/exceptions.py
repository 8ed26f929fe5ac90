"""Exceptions raised by boundary input checks."""

from resume_match.exceptions import ResumeMatchError


class InputValidationError(ResumeMatchError):
    """Raised when text handed to the matcher fails a pre-check."""

    details_heading = "Validation Errors"


class JobDescriptionError(InputValidationError):
    """Raised when job text does not look like a usable job description."""


class ResumeTextError(InputValidationError):
    """Raised when no usable resume text is available."""
