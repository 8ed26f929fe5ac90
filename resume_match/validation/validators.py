"""Pre-checks applied to resume and job text before they are scored.

The scoring core never fails on degenerate input; these checks exist so
callers can refuse to score text that is obviously not a job posting (a
login wall, a cookie banner) or a missing resume.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from resume_match.config.models import ValidationConfig

from .exceptions import JobDescriptionError, ResumeTextError

JOB_KEYWORDS: Tuple[str, ...] = (
    # Core job posting terms
    "responsibilities", "requirements", "qualifications", "experience",
    "skills", "education", "salary", "benefits", "position", "role",
    "job", "career", "work", "employment", "candidate", "apply",
    "years", "degree", "bachelor", "master", "certification",
    "manager", "product", "development", "team", "company",
    "overview", "description", "duties", "location", "department",
    # Hiring language
    "hiring", "recruit", "opening", "opportunity", "vacancy",
    "full-time", "part-time", "contract", "remote", "onsite",
    "preferred", "required", "must have", "should have",
    "we are looking", "seeking", "join our team", "about the role",
    "what you will do", "what we offer", "compensation",
    "professional", "expertise", "background", "knowledge",
    "collaborate", "manage", "lead", "develop", "implement",
    "analyze", "design", "create", "maintain", "support",
    # Technical and business terms
    "software", "technology", "engineering", "marketing",
    "sales", "finance", "operations", "human resources",
    "project", "program", "strategy", "business", "client",
    "customer", "stakeholder", "process", "system", "platform",
    # Titles and levels
    "senior", "junior", "principal", "director",
    "coordinator", "specialist", "analyst", "consultant",
    "associate", "executive", "supervisor", "administrator",
)


def find_job_keywords(text: Optional[str]) -> List[str]:
    """Return the job-vocabulary entries occurring in ``text`` (substring, case-insensitive)."""
    if not text:
        return []
    lower_text = text.lower()
    return [keyword for keyword in JOB_KEYWORDS if keyword in lower_text]


def contains_job_keywords(text: Optional[str], min_hits: int = 2) -> bool:
    """Check whether text reads like a job posting.

    Example:
        >>> contains_job_keywords("Senior engineer role, remote friendly")
        True
    """
    return len(find_job_keywords(text)) >= min_hits


@dataclass
class ValidationReport:
    """Outcome of a validation pass.

    Attributes:
        is_valid: True when no errors were found
        errors: Human-readable error messages
    """

    errors: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors


class JobTextValidator:
    """Validates job description text against length and vocabulary rules."""

    def __init__(self, config: Optional[ValidationConfig] = None):
        self.config = config or ValidationConfig()

    def validate(self, text: Optional[str]) -> ValidationReport:
        """Collect every rule violation without raising.

        Args:
            text: Raw job description text

        Returns:
            ValidationReport listing all violations
        """
        report = ValidationReport()

        if not text or not isinstance(text, str):
            report.errors.append("No job description text provided")
            return report

        trimmed = text.strip()

        if len(trimmed) < self.config.min_job_length:
            report.errors.append(
                f"Job description is too short (minimum {self.config.min_job_length} characters)"
            )

        if len(trimmed) > self.config.max_job_length:
            report.errors.append(
                f"Job description is too long (maximum {self.config.max_job_length} characters)"
            )

        if not contains_job_keywords(trimmed, self.config.min_job_keywords):
            report.errors.append("Text doesn't appear to be a job description")

        return report

    def check(self, text: Optional[str]) -> str:
        """Validate and return the trimmed text.

        Raises:
            JobDescriptionError: If any rule is violated
        """
        report = self.validate(text)
        if not report.is_valid:
            raise JobDescriptionError(
                "Job description failed validation",
                errors=report.errors,
                suggestions=[
                    "Make sure the text comes from a job posting page",
                    "Make sure the page has fully loaded before copying",
                    "Include the responsibilities and requirements sections",
                ],
            )
        return text.strip()


class ResumeTextValidator:
    """Validates that resume text is present."""

    def check(self, text: Optional[str]) -> str:
        """Return the trimmed resume text.

        Raises:
            ResumeTextError: If the text is missing or blank
        """
        if not text or not isinstance(text, str) or not text.strip():
            raise ResumeTextError(
                "No resume found. Please upload your resume first.",
                suggestions=[
                    "Ensure the resume is a text-based document, not a scanned image",
                    "Check that the resume file is not empty",
                ],
            )
        return text.strip()
