"""Tests for resume and job text pre-checks."""

import pytest

from resume_match.config.models import ValidationConfig
from resume_match.validation import (
    InputValidationError,
    JobDescriptionError,
    JobTextValidator,
    ResumeTextError,
    ResumeTextValidator,
    contains_job_keywords,
    find_job_keywords,
)


class TestJobKeywords:
    """Tests for job vocabulary detection."""

    def test_finds_keywords_case_insensitively(self):
        """Test matching ignores case."""
        assert find_job_keywords("RESPONSIBILITIES and Requirements") == ["responsibilities", "requirements"]

    def test_multi_word_keywords(self):
        """Test phrase entries are matched."""
        assert "join our team" in find_job_keywords("Come and join our team!")

    def test_threshold(self):
        """Test contains_job_keywords needs min_hits matches."""
        assert contains_job_keywords("Senior engineer role, remote friendly")
        assert not contains_job_keywords("Accept cookies to continue")
        assert not contains_job_keywords("")
        assert contains_job_keywords("remote", min_hits=1)


class TestJobTextValidator:
    """Tests for JobTextValidator."""

    def test_valid_job(self, sample_job_text):
        """Test a realistic posting passes and is trimmed."""
        validator = JobTextValidator()
        assert validator.validate(sample_job_text).is_valid
        assert validator.check(sample_job_text) == sample_job_text.strip()

    @pytest.mark.parametrize("text", ["", None])
    def test_missing_text(self, text):
        """Test missing text stops further checks."""
        report = JobTextValidator().validate(text)
        assert report.errors == ["No job description text provided"]

    def test_too_short(self):
        """Test the minimum length is measured on trimmed text."""
        report = JobTextValidator().validate("   Senior role, remote   ")
        assert report.errors == ["Job description is too short (minimum 100 characters)"]

    def test_too_long(self):
        """Test the maximum length comes from config."""
        validator = JobTextValidator(ValidationConfig(min_job_length=0, max_job_length=20))
        report = validator.validate("Senior product role with a remote team")
        assert report.errors == ["Job description is too long (maximum 20 characters)"]

    def test_not_a_job_description(self):
        """Test text without job vocabulary is flagged."""
        validator = JobTextValidator(ValidationConfig(min_job_length=0))
        report = validator.validate("Please accept cookies to continue browsing")
        assert report.errors == ["Text doesn't appear to be a job description"]

    def test_collects_all_errors(self):
        """Test several violations are reported together."""
        report = JobTextValidator().validate("cookies")
        assert len(report.errors) == 2

    def test_check_raises(self):
        """Test check raises JobDescriptionError carrying the errors."""
        with pytest.raises(JobDescriptionError) as exc_info:
            JobTextValidator().check("cookies")

        error = exc_info.value
        assert isinstance(error, InputValidationError)
        assert error.message == "Job description failed validation"
        assert len(error.errors) == 2
        assert error.suggestions
        assert "Validation Errors:" in str(error)


class TestResumeTextValidator:
    """Tests for ResumeTextValidator."""

    def test_returns_trimmed_text(self):
        """Test valid resume text is trimmed."""
        assert ResumeTextValidator().check("  Product manager  ") == "Product manager"

    @pytest.mark.parametrize("text", ["", "  \n ", None])
    def test_missing_resume(self, text):
        """Test blank resume text raises ResumeTextError."""
        with pytest.raises(ResumeTextError, match="No resume found"):
            ResumeTextValidator().check(text)
