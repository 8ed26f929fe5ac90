"""Term sets combining weighted keywords and bigrams."""

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Iterator, Tuple


@dataclass(frozen=True)
class TermSet:
    """Ordered, deduplicated terms extracted from one document.

    Keywords come first (descending weight), then bigrams in text order;
    the first occurrence of a term wins.

    Attributes:
        terms: Ordered unique terms
        members: The same terms as a set, for membership tests
    """

    terms: Tuple[str, ...]
    members: FrozenSet[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "members", frozenset(self.terms))

    @classmethod
    def combine(cls, *sequences: Iterable[str]) -> "TermSet":
        # dict.fromkeys keeps first-seen order while dropping duplicates
        merged = dict.fromkeys(term for sequence in sequences for term in sequence)
        return cls(terms=tuple(merged))

    def top(self, limit: int) -> Tuple[str, ...]:
        return self.terms[:limit]

    def __contains__(self, term: object) -> bool:
        return term in self.members

    def __iter__(self) -> Iterator[str]:
        return iter(self.terms)

    def __len__(self) -> int:
        return len(self.terms)
