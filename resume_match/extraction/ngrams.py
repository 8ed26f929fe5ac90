"""Positional n-gram extraction."""

from typing import List

from resume_match.normalization.models import NormalizedText


def extract_ngrams(normalized: NormalizedText, n: int) -> List[str]:
    """Return every contiguous n-word window, in order.

    Args:
        normalized: Normalized document
        n: Window size (must be positive)

    Returns:
        List of space-joined phrases; empty if the text has fewer than n words

    Raises:
        ValueError: If n is not positive
    """
    if n < 1:
        raise ValueError(f"n-gram size must be positive, got {n}")

    words = normalized.words
    return [" ".join(words[i:i + n]) for i in range(len(words) - n + 1)]


def extract_bigrams(normalized: NormalizedText) -> List[str]:
    """Return all contiguous word pairs.

    Example:
        >>> extract_bigrams(NormalizedText.from_words(["agile", "scrum", "experience"]))
        ['agile scrum', 'scrum experience']
    """
    return extract_ngrams(normalized, 2)
