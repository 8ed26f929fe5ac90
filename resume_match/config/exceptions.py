"""Custom exceptions for configuration management."""

from resume_match.exceptions import ResumeMatchError


class ConfigurationError(ResumeMatchError):
    """Raised when a configuration file or environment variable is unusable.

    ``errors`` holds one entry per problem found (for pydantic failures, one
    per invalid field) so they can all be fixed in a single pass.
    """

    details_heading = "Validation Errors"
