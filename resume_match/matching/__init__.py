"""Term matching and scoring engine.

This module provides:
- TermMatcher: Exact, synonym and partial matching plus word Jaccard
- Scorer: Composite score and result assembly
- MatchService: Orchestrates the full pipeline (sole entry point)
- MatchResult / TermMatchOutcome: Result data structures
"""

from .engine import TermMatcher, jaccard_similarity
from .models import MatchResult, TermMatchOutcome
from .scoring import Scorer, round_half_up
from .service import MatchService, compute_match

__all__ = [
    "MatchService",
    "compute_match",
    "TermMatcher",
    "jaccard_similarity",
    "Scorer",
    "round_half_up",
    "MatchResult",
    "TermMatchOutcome",
]
