"""Data models for the matching engine.

This module defines the intermediate outcome of comparing two term sets and
the final, immutable MatchResult handed back to callers.
"""

from dataclasses import dataclass, field
from typing import Dict, Tuple

STRONG_MATCH_THRESHOLD = 70
FAIR_MATCH_THRESHOLD = 50


@dataclass(frozen=True)
class TermMatchOutcome:
    """Signals produced by comparing a resume against a job posting.

    Attributes:
        exact_matches: Resume terms also present in the job term set, resume order
        matched_terms: exact_matches followed by every further term found
            during the pairwise scan (exact, synonym or partial), discovery order
        synonym_match_count: Number of (resume, job) pairs linked only by synonym
        jaccard: Word-level Jaccard similarity of the two normalized texts
    """

    exact_matches: Tuple[str, ...] = field(default=())
    matched_terms: Tuple[str, ...] = field(default=())
    synonym_match_count: int = 0
    jaccard: float = 0.0

    @property
    def exact_match_count(self) -> int:
        return len(self.exact_matches)

    @property
    def enriched_match_count(self) -> int:
        return len(self.matched_terms)


@dataclass(frozen=True)
class MatchResult:
    """Result of scoring a resume against a job posting.

    Constructed once per request and returned to the caller; never mutated.

    Attributes:
        score: Bounded match percentage (0-100)
        matched_terms: Up to 20 matched resume terms, discovery order
        resume_terms: Up to 30 top resume terms
        job_terms: Up to 30 top job terms
    """

    score: int
    matched_terms: Tuple[str, ...] = field(default=())
    resume_terms: Tuple[str, ...] = field(default=())
    job_terms: Tuple[str, ...] = field(default=())

    @property
    def match_quality(self) -> str:
        """Return a description of match quality.

        Returns:
            "strong" for scores of 70 and above,
            "fair" for scores of 50 and above,
            "weak" otherwise
        """
        if self.score >= STRONG_MATCH_THRESHOLD:
            return "strong"
        if self.score >= FAIR_MATCH_THRESHOLD:
            return "fair"
        return "weak"

    def to_dict(self) -> Dict:
        return {
            "score": self.score,
            "match_quality": self.match_quality,
            "matched_terms": list(self.matched_terms),
            "resume_terms": list(self.resume_terms),
            "job_terms": list(self.job_terms),
        }
