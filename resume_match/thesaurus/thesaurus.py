"""Bidirectional synonym lookups over a possibly asymmetric table."""

from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from .data import SYNONYMS


class SynonymThesaurus:
    """Read-only synonym map consulted in both directions.

    Two terms are synonyms when either one's entry lists the other. The map
    itself is never symmetrised; asymmetric_pairs() reports the one-way
    links so they can be reviewed.
    """

    def __init__(self, mapping: Optional[Mapping[str, Iterable[str]]] = None):
        """Initialize SynonymThesaurus.

        Args:
            mapping: Term -> equivalent terms (defaults to the built-in SYNONYMS)
        """
        source = SYNONYMS if mapping is None else mapping
        self._entries: Dict[str, Tuple[str, ...]] = {
            term.lower(): tuple(synonym.lower() for synonym in synonyms)
            for term, synonyms in source.items()
        }

    def synonyms_of(self, term: str) -> Tuple[str, ...]:
        """Return the declared synonyms of ``term`` (one direction only)."""
        return self._entries.get(term, ())

    def are_synonyms(self, first: str, second: str) -> bool:
        """Check whether either term lists the other as a synonym."""
        return second in self.synonyms_of(first) or first in self.synonyms_of(second)

    def asymmetric_pairs(self) -> List[Tuple[str, str]]:
        """Find one-way links.

        Returns:
            (term, synonym) pairs where ``synonym`` has no entry, or its entry
            does not list ``term``. Self-references are ignored.
        """
        pairs = []
        for term, synonyms in self._entries.items():
            for synonym in synonyms:
                if synonym == term:
                    continue
                if term not in self._entries.get(synonym, ()):
                    pairs.append((term, synonym))
        return pairs

    @property
    def terms(self) -> Tuple[str, ...]:
        return tuple(self._entries)

    def __contains__(self, term: object) -> bool:
        return term in self._entries

    def __len__(self) -> int:
        return len(self._entries)


def default_thesaurus() -> SynonymThesaurus:
    """Build a thesaurus over the built-in synonym table."""
    return SynonymThesaurus(SYNONYMS)
