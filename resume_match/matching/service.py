"""Match service orchestrating normalization, extraction, matching and scoring.

This is the single copy of the scoring pipeline. Collaborators are
constructed instances passed in, never module-level singletons, so two
services with different configuration can coexist in one process.
"""

import logging
from typing import Optional

from resume_match.config.models import AppConfig
from resume_match.extraction import KeywordExtractor, build_term_set
from resume_match.logging import get_logger
from resume_match.logging.context import log_context, new_match_id
from resume_match.normalization import TextNormalizer
from resume_match.thesaurus import SynonymThesaurus, default_thesaurus
from resume_match.validation import InputValidationError, JobTextValidator, ResumeTextValidator

from .engine import TermMatcher
from .models import MatchResult
from .scoring import Scorer

logger = get_logger(__name__, component="matching")


class MatchService:
    """Scores resumes against job postings.

    Responsibilities:
    - Normalize both documents
    - Extract keyword + bigram term sets
    - Run the term matcher and scorer
    - Optionally run boundary validation first (match_job_posting)
    - Emit structured logs tagged with a per-request match_id
    """

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        thesaurus: Optional[SynonymThesaurus] = None,
        normalizer: Optional[TextNormalizer] = None,
        logger_instance: Optional[logging.Logger] = None,
    ):
        """Initialize MatchService.

        Args:
            config: Application configuration (defaults to built-in calibration)
            thesaurus: Synonym lookups (defaults to the built-in table)
            normalizer: Text normalizer (defaults to the English stop-word list)
            logger_instance: Optional logger instance (defaults to module logger)
        """
        self.config = config or AppConfig()
        self.logger = logger_instance or logger
        self.normalizer = normalizer or TextNormalizer()
        self.extractor = KeywordExtractor(self.config.extraction)
        self.matcher = TermMatcher(
            thesaurus=thesaurus or default_thesaurus(),
            min_partial_length=self.config.extraction.min_partial_length,
            logger_instance=self.logger,
        )
        self.scorer = Scorer(self.config.scoring, self.config.limits)
        self.job_validator = JobTextValidator(self.config.validation)
        self.resume_validator = ResumeTextValidator()

    def compute_match(self, resume_text: Optional[str], job_text: Optional[str]) -> MatchResult:
        """Score a resume against a job posting.

        Total for any string input: empty or junk text yields a low or zero
        score rather than an error.

        Args:
            resume_text: Plain resume text
            job_text: Plain job description text

        Returns:
            MatchResult
        """
        with log_context(match_id=new_match_id()):
            normalized_resume = self.normalizer.normalize(resume_text)
            normalized_job = self.normalizer.normalize(job_text)

            resume_terms = build_term_set(normalized_resume, self.extractor)
            job_terms = build_term_set(normalized_job, self.extractor)

            outcome = self.matcher.match(
                resume_terms.terms,
                job_terms.terms,
                normalized_resume.word_set,
                normalized_job.word_set,
            )
            result = self.scorer.assemble(outcome, resume_terms, job_terms)

            self.logger.info(
                f"Match computed: score={result.score}",
                extra={
                    "event": "match.computed",
                    "score": result.score,
                    "match_quality": result.match_quality,
                    "resume_term_count": len(resume_terms),
                    "job_term_count": len(job_terms),
                    "exact_match_count": outcome.exact_match_count,
                    "enriched_match_count": outcome.enriched_match_count,
                    "synonym_match_count": outcome.synonym_match_count,
                    "jaccard": round(outcome.jaccard, 4),
                },
            )
            return result

    def match_job_posting(self, resume_text: Optional[str], job_text: Optional[str]) -> MatchResult:
        """Validate both inputs, then score them.

        Args:
            resume_text: Plain resume text
            job_text: Plain job description text

        Returns:
            MatchResult

        Raises:
            ResumeTextError: If the resume text is missing
            JobDescriptionError: If the job text fails the length/vocabulary checks
        """
        try:
            resume_text = self.resume_validator.check(resume_text)
            job_text = self.job_validator.check(job_text)
        except InputValidationError as e:
            self.logger.warning(
                f"Input rejected: {e.message}",
                extra={
                    "event": "match.validation.failed",
                    "error_type": type(e).__name__,
                    "errors": list(e.errors),
                },
            )
            raise

        return self.compute_match(resume_text, job_text)


def compute_match(resume_text: Optional[str], job_text: Optional[str]) -> MatchResult:
    """Score a resume against a job posting with the default configuration.

    Example:
        >>> result = compute_match("Agile product owner", "Product manager, agile team")
        >>> 0 <= result.score <= 100
        True
    """
    return MatchService().compute_match(resume_text, job_text)
