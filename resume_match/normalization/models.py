"""Data models for the normalization layer."""

from dataclasses import dataclass, field
from typing import FrozenSet, Tuple


@dataclass(frozen=True)
class NormalizedText:
    """Lowercase, punctuation-free, stop-word-filtered text.

    Invariant: ``text`` is either empty or single-space-separated tokens,
    each longer than two characters and not a stop word. ``words`` keeps
    the original token order.

    Attributes:
        text: The normalized text
        words: Tokens of ``text`` in order
    """

    text: str
    words: Tuple[str, ...] = field(default=())

    @classmethod
    def from_words(cls, words) -> "NormalizedText":
        words = tuple(words)
        return cls(text=" ".join(words), words=words)

    @property
    def word_set(self) -> FrozenSet[str]:
        """Distinct words, used for whole-text Jaccard similarity."""
        return frozenset(self.words)

    @property
    def is_empty(self) -> bool:
        return not self.words

    def __str__(self) -> str:
        return self.text

    def __len__(self) -> int:
        return len(self.words)
