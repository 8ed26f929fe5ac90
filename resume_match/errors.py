"""Error categorisation and user-facing messages.

ErrorHandler is an ordinary object: build one and pass it to whatever
orchestrates the matcher (the CLI does this) instead of reaching for a
process-wide instance.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional

from resume_match.config.exceptions import ConfigurationError
from resume_match.exceptions import ResumeMatchError
from resume_match.logging import get_logger
from resume_match.reporting.models import ReportError
from resume_match.utils.timestamps import format_timestamp, utc_now
from resume_match.validation.exceptions import (
    InputValidationError,
    JobDescriptionError,
    ResumeTextError,
)

logger = get_logger(__name__, component="errors")


class ErrorCategory(str, Enum):
    """Broad failure categories shown to users."""

    JOB_EXTRACTION = "job_extraction"
    RESUME = "resume"
    VALIDATION = "validation"
    CONFIGURATION = "configuration"
    FILE_ACCESS = "file_access"
    REPORT = "report"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class UserMessage:
    title: str
    message: str
    suggestions: List[str] = field(default_factory=list)


USER_MESSAGES: Dict[ErrorCategory, UserMessage] = {
    ErrorCategory.JOB_EXTRACTION: UserMessage(
        title="Job Description Not Found",
        message="The job text does not look like a job description. "
        "Please make sure it comes from a job posting page.",
        suggestions=[
            "Copy the full posting, including responsibilities and requirements",
            "Make sure the page has fully loaded",
            "Try a different job board if the posting is hidden behind a login",
        ],
    ),
    ErrorCategory.RESUME: UserMessage(
        title="Resume Not Found",
        message="No resume text is available. Please provide your resume first.",
        suggestions=[
            "Ensure the resume contains selectable text, not just images",
            "Check that the resume file is not empty",
        ],
    ),
    ErrorCategory.VALIDATION: UserMessage(
        title="Invalid Input",
        message="The data provided is not valid. Please check your input and try again.",
        suggestions=[
            "Check that the input is plain text",
            "Ensure the file is not corrupted",
        ],
    ),
    ErrorCategory.CONFIGURATION: UserMessage(
        title="Configuration Error",
        message="The matcher configuration could not be loaded.",
        suggestions=[
            "Review resume_match.example.yaml for the expected layout",
            "Remove the configuration file to fall back to defaults",
        ],
    ),
    ErrorCategory.FILE_ACCESS: UserMessage(
        title="File Access Error",
        message="A required file could not be read.",
        suggestions=[
            "Check that the path exists",
            "Check file permissions",
            "Make sure the file is UTF-8 text",
        ],
    ),
    ErrorCategory.REPORT: UserMessage(
        title="Report Error",
        message="The match was computed but the report could not be rendered.",
        suggestions=["Try a different output format (--output json)"],
    ),
    ErrorCategory.UNKNOWN: UserMessage(
        title="Unexpected Error",
        message="An unexpected error occurred. Please try again or report the problem "
        "if it persists.",
        suggestions=["Re-run with --log-level DEBUG for details"],
    ),
}

# Message fragments used when the exception type says nothing useful
_MESSAGE_HINTS = (
    (ErrorCategory.JOB_EXTRACTION, ("job description", "extract")),
    (ErrorCategory.RESUME, ("resume",)),
    (ErrorCategory.FILE_ACCESS, ("permission", "denied", "no such file", "not found")),
    (ErrorCategory.VALIDATION, ("invalid", "required", "format", "size")),
)


@dataclass(frozen=True)
class ErrorReport:
    """A categorised error ready to show to a user.

    Attributes:
        category: ErrorCategory of the failure
        title: Short heading
        message: User-friendly explanation
        suggestions: Recovery suggestions
        details: Specific errors carried by the exception, if any
        context: Where the error happened (e.g. "cli.match")
        timestamp: ISO-8601 UTC time the error was handled
        original_error: The exception itself
    """

    category: ErrorCategory
    title: str
    message: str
    suggestions: List[str]
    details: List[str]
    context: str
    timestamp: str
    original_error: Optional[BaseException] = None

    def format(self) -> str:
        lines = [f"{self.title}: {self.message}"]
        for detail in self.details:
            lines.append(f"  - {detail}")
        if self.suggestions:
            lines.append("Suggestions:")
            lines.extend(f"  - {suggestion}" for suggestion in self.suggestions)
        return "\n".join(lines)


class ErrorHandler:
    """Categorises exceptions and produces ErrorReports."""

    def __init__(self, logger_instance: Optional[logging.Logger] = None):
        self.logger = logger_instance or logger

    def categorize(self, error: BaseException) -> ErrorCategory:
        """Pick a category from the exception type, then from its message."""
        if isinstance(error, JobDescriptionError):
            return ErrorCategory.JOB_EXTRACTION
        if isinstance(error, ResumeTextError):
            return ErrorCategory.RESUME
        if isinstance(error, InputValidationError):
            return ErrorCategory.VALIDATION
        if isinstance(error, ConfigurationError):
            return ErrorCategory.CONFIGURATION
        if isinstance(error, ReportError):
            return ErrorCategory.REPORT
        if isinstance(error, (OSError, UnicodeDecodeError)):
            return ErrorCategory.FILE_ACCESS

        lower_message = str(error).lower()
        for category, hints in _MESSAGE_HINTS:
            if any(hint in lower_message for hint in hints):
                return category
        return ErrorCategory.UNKNOWN

    def handle(self, error: BaseException, context: str = "", now: Optional[datetime] = None) -> ErrorReport:
        """Categorise, log and describe an error.

        Args:
            error: The exception to describe
            context: Where the error happened
            now: Override for the report timestamp

        Returns:
            ErrorReport with a user-friendly message
        """
        category = self.categorize(error)
        user_message = USER_MESSAGES[category]

        details: List[str] = []
        suggestions = list(user_message.suggestions)
        if isinstance(error, ResumeMatchError):
            details = list(error.errors)
            suggestions = list(error.suggestions) or suggestions

        self.logger.error(
            f"Error in {context or 'unknown context'}: {error}",
            extra={
                "event": "error.handled",
                "error_category": category.value,
                "error_type": type(error).__name__,
                "error_context": context,
            },
            exc_info=category is ErrorCategory.UNKNOWN,
        )

        return ErrorReport(
            category=category,
            title=user_message.title,
            message=user_message.message,
            suggestions=suggestions,
            details=details,
            context=context,
            timestamp=format_timestamp(now or utc_now()),
            original_error=error,
        )
