"""Text normalization for resume and job-description matching.

Normalization steps:
1. Lowercase the whole input
2. Replace every non-word, non-whitespace character with a space
3. Collapse whitespace runs
4. Drop tokens of length <= 2 and stop words
"""

import re
from typing import FrozenSet, Iterable, Optional

from .models import NormalizedText

# Fixed English list; there is no internationalization strategy
STOP_WORDS: FrozenSet[str] = frozenset({
    "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for", "of", "with",
    "by", "from", "up", "about", "into", "through", "during", "before", "after",
    "above", "below", "between", "among", "is", "are", "was", "were", "be", "been",
    "being", "have", "has", "had", "do", "does", "did", "will", "would", "could",
    "should", "may", "might", "must", "can", "this", "that", "these", "those",
})

MIN_TOKEN_LENGTH = 3

# Word characters are ASCII letters, digits and underscore
_NON_WORD_PATTERN = re.compile(r"[^\w\s]", re.ASCII)
_WHITESPACE_PATTERN = re.compile(r"\s+")


class TextNormalizer:
    """Turns raw documents into NormalizedText.

    Stateless apart from its stop-word set, so one instance can be shared
    by any number of concurrent callers.
    """

    def __init__(self, stop_words: Optional[Iterable[str]] = None):
        """Initialize TextNormalizer.

        Args:
            stop_words: Optional replacement stop-word set (defaults to STOP_WORDS)
        """
        self.stop_words = frozenset(stop_words) if stop_words is not None else STOP_WORDS

    def normalize(self, text: Optional[str]) -> NormalizedText:
        """Normalize raw text.

        Args:
            text: Raw resume or job text (None is treated as empty)

        Returns:
            NormalizedText, empty when nothing survives filtering
        """
        if not text:
            return NormalizedText(text="")

        lowered = text.lower()
        stripped = _NON_WORD_PATTERN.sub(" ", lowered)
        collapsed = _WHITESPACE_PATTERN.sub(" ", stripped)

        words = [
            word
            for word in collapsed.split(" ")
            if len(word) >= MIN_TOKEN_LENGTH and word not in self.stop_words
        ]
        return NormalizedText.from_words(words)


_default_normalizer = TextNormalizer()


def normalize(text: Optional[str]) -> NormalizedText:
    """Normalize text with the default stop-word list.

    Example:
        >>> normalize("Senior Product Manager, with Agile!").text
        'senior product manager agile'
    """
    return _default_normalizer.normalize(text)
