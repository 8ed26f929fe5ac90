"""Term matching engine for comparing resume and job term sets.

This module computes the three match signals between two term sets:
1. Exact overlap (membership in the job term set)
2. Synonym-linked overlap (via SynonymThesaurus, either direction)
3. Substring containment between terms longer than a minimum length
plus the whole-text Jaccard similarity over normalized words.
"""

import logging
from typing import AbstractSet, Dict, Optional, Sequence

from resume_match.logging import get_logger
from resume_match.thesaurus import SynonymThesaurus, default_thesaurus

from .models import TermMatchOutcome

logger = get_logger(__name__, component="matching")


def jaccard_similarity(first: AbstractSet[str], second: AbstractSet[str]) -> float:
    """Intersection size over union size; 0.0 when both sets are empty.

    Example:
        >>> jaccard_similarity({"a", "b", "c"}, {"b", "c", "d"})
        0.5
    """
    union = set(first) | set(second)
    if not union:
        return 0.0
    return len(set(first) & set(second)) / len(union)


class TermMatcher:
    """Compares a resume's terms against a job posting's terms.

    The pairwise scan is O(|resume_terms| x |job_terms|), which stays small
    because extraction caps each side at the keyword limit plus bigrams.
    """

    def __init__(
        self,
        thesaurus: Optional[SynonymThesaurus] = None,
        min_partial_length: int = 3,
        logger_instance: Optional[logging.Logger] = None,
    ):
        """Initialize TermMatcher.

        Args:
            thesaurus: Synonym lookups (defaults to the built-in table)
            min_partial_length: Both terms must be longer than this for a
                substring containment to count as a partial match
            logger_instance: Optional logger instance (defaults to module logger)
        """
        self.thesaurus = thesaurus or default_thesaurus()
        self.min_partial_length = min_partial_length
        self.logger = logger_instance or logger

    def match(
        self,
        resume_terms: Sequence[str],
        job_terms: Sequence[str],
        resume_words: AbstractSet[str],
        job_words: AbstractSet[str],
    ) -> TermMatchOutcome:
        """Compute exact, synonym and partial matches plus word Jaccard.

        Algorithm:
        1. Exact matches: resume terms present in the job term set
        2. Seed the enriched set with the exact matches
        3. For every (resume, job) pair, resume-major: add the resume term on
           equality, else on a synonym link (counted), else on substring
           containment when both terms are long enough
        4. Jaccard over the normalized word sets

        Args:
            resume_terms: Ordered, deduplicated resume terms
            job_terms: Ordered, deduplicated job terms
            resume_words: Distinct normalized resume words
            job_words: Distinct normalized job words

        Returns:
            TermMatchOutcome with all four signals
        """
        job_term_set = set(job_terms)

        # Step 1: exact matches keep resume order
        exact_matches = [term for term in resume_terms if term in job_term_set]

        # Step 2: dict as an insertion-ordered set
        matched: Dict[str, None] = dict.fromkeys(exact_matches)
        synonym_match_count = 0

        # Step 3: pairwise scan
        for resume_term in resume_terms:
            for job_term in job_terms:
                if resume_term == job_term:
                    matched.setdefault(resume_term, None)
                elif self.thesaurus.are_synonyms(resume_term, job_term):
                    matched.setdefault(resume_term, None)
                    synonym_match_count += 1
                    self.logger.debug(
                        f"Synonym match: {resume_term} <-> {job_term}",
                        extra={"event": "match.synonym", "resume_term": resume_term, "job_term": job_term},
                    )
                elif self._is_partial_match(resume_term, job_term):
                    matched.setdefault(resume_term, None)
                    self.logger.debug(
                        f"Partial match: {resume_term} <-> {job_term}",
                        extra={"event": "match.partial", "resume_term": resume_term, "job_term": job_term},
                    )

        # Step 4: whole-text similarity
        jaccard = jaccard_similarity(resume_words, job_words)

        return TermMatchOutcome(
            exact_matches=tuple(exact_matches),
            matched_terms=tuple(matched),
            synonym_match_count=synonym_match_count,
            jaccard=jaccard,
        )

    def _is_partial_match(self, resume_term: str, job_term: str) -> bool:
        """Substring containment in either direction, guarded against short tokens."""
        if len(resume_term) <= self.min_partial_length or len(job_term) <= self.min_partial_length:
            return False
        return resume_term in job_term or job_term in resume_term
