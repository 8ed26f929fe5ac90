"""Static synonym table and its bidirectional lookup helper."""

from .data import SYNONYMS
from .thesaurus import SynonymThesaurus, default_thesaurus

__all__ = ["SYNONYMS", "SynonymThesaurus", "default_thesaurus"]
