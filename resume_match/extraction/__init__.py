"""Term extraction: weighted keywords and positional n-grams."""

from typing import Optional

from resume_match.config.models import ExtractionConfig
from resume_match.normalization.models import NormalizedText

from .keywords import IMPORTANT_PHRASES, KeywordExtractor, extract_keywords
from .models import TermSet
from .ngrams import extract_bigrams, extract_ngrams


def build_term_set(
    normalized: NormalizedText, extractor: Optional[KeywordExtractor] = None
) -> TermSet:
    """Combine weighted keywords and bigrams into one deduplicated TermSet."""
    extractor = extractor or KeywordExtractor(ExtractionConfig())
    return TermSet.combine(extractor.extract(normalized), extract_bigrams(normalized))


__all__ = [
    "IMPORTANT_PHRASES",
    "KeywordExtractor",
    "TermSet",
    "build_term_set",
    "extract_bigrams",
    "extract_keywords",
    "extract_ngrams",
]
