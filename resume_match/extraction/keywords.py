"""Weighted keyword extraction over normalized text."""

from typing import Dict, List, Optional, Sequence, Tuple

from resume_match.config.models import ExtractionConfig
from resume_match.normalization.models import NormalizedText

# Role and skill titles that outrank single words during extraction
IMPORTANT_PHRASES: Tuple[str, ...] = (
    "product manager", "product owner", "project manager", "scrum master",
    "software engineer", "data analyst", "business analyst", "user experience",
    "user interface", "machine learning", "artificial intelligence",
    "project management", "product management", "agile development",
    "software development", "web development", "full stack",
    "front end", "back end", "data science", "cloud computing",
)


class KeywordExtractor:
    """Ranks the terms of a document by weighted frequency.

    Important phrases found anywhere in the text (plain substring test, so
    "back end" also fires inside "feedback endpoint") get ``phrase_weight``;
    every token longer than two characters adds ``word_weight`` per
    occurrence. Ties keep first-seen order.
    """

    def __init__(
        self,
        config: Optional[ExtractionConfig] = None,
        phrases: Sequence[str] = IMPORTANT_PHRASES,
    ):
        self.config = config or ExtractionConfig()
        self.phrases = tuple(phrases)

    def weigh(self, normalized: NormalizedText) -> Dict[str, int]:
        """Build the insertion-ordered term -> weight mapping."""
        frequency: Dict[str, int] = {}
        lower_text = normalized.text.lower()

        for phrase in self.phrases:
            if phrase in lower_text:
                frequency[phrase] = frequency.get(phrase, 0) + self.config.phrase_weight

        for word in normalized.words:
            if len(word) > 2:
                frequency[word] = frequency.get(word, 0) + self.config.word_weight

        return frequency

    def extract(self, normalized: NormalizedText) -> List[str]:
        """Return the top ``max_keywords`` terms by descending weight."""
        frequency = self.weigh(normalized)
        # sorted() is stable, so equal weights keep insertion order
        ranked = sorted(frequency.items(), key=lambda item: item[1], reverse=True)
        return [term for term, _ in ranked[: self.config.max_keywords]]


def extract_keywords(normalized: NormalizedText) -> List[str]:
    """Extract keywords with the default weights and limit."""
    return KeywordExtractor().extract(normalized)
