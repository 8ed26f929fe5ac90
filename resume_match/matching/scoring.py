"""Composite score computation and result assembly."""

import math
from typing import Optional

from resume_match.config.models import ResultLimitsConfig, ScoringConfig
from resume_match.extraction.models import TermSet

from .models import MatchResult, TermMatchOutcome


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positive values (round() would round to even)."""
    return int(math.floor(value + 0.5))


class Scorer:
    """Folds the match signals into one bounded percentage.

    With the default ScoringConfig:
        term   = exact / max(job_terms, 1)
        syn    = enriched / max(job_terms, 1)
        base   = 0.7 * syn + 0.2 * term + 0.1 * jaccard
        boost  = 0.1 if enriched > 0 else 0
        final  = min(100, round((base + boost) * 1.5 * 100))
    """

    def __init__(
        self,
        config: Optional[ScoringConfig] = None,
        limits: Optional[ResultLimitsConfig] = None,
    ):
        self.config = config or ScoringConfig()
        self.limits = limits or ResultLimitsConfig()

    def score(
        self,
        job_term_count: int,
        exact_match_count: int,
        enriched_match_count: int,
        jaccard: float,
    ) -> int:
        """Compute the final score.

        Args:
            job_term_count: Size of the job TermSet
            exact_match_count: Number of exact matches
            enriched_match_count: Number of exact + synonym + partial matches
            jaccard: Word-level Jaccard similarity

        Returns:
            Integer between 0 and max_score
        """
        cfg = self.config
        denominator = max(job_term_count, 1)

        term_match_score = exact_match_count / denominator
        synonym_match_score = enriched_match_count / denominator

        base_score = (
            cfg.synonym_weight * synonym_match_score
            + cfg.exact_weight * term_match_score
            + cfg.jaccard_weight * jaccard
        )
        match_boost = cfg.match_boost if enriched_match_count > 0 else 0.0

        final_score = round_half_up((base_score + match_boost) * cfg.scaling_factor * 100)
        return max(0, min(cfg.max_score, final_score))

    def assemble(
        self, outcome: TermMatchOutcome, resume_terms: TermSet, job_terms: TermSet
    ) -> MatchResult:
        """Build the MatchResult from a matcher outcome and both term sets."""
        score = self.score(
            job_term_count=len(job_terms),
            exact_match_count=outcome.exact_match_count,
            enriched_match_count=outcome.enriched_match_count,
            jaccard=outcome.jaccard,
        )
        return MatchResult(
            score=score,
            matched_terms=outcome.matched_terms[: self.limits.max_matched_terms],
            resume_terms=resume_terms.top(self.limits.max_resume_terms),
            job_terms=job_terms.top(self.limits.max_job_terms),
        )
