"""Resume-to-job-description matching.

Usage:
    from resume_match import compute_match

    result = compute_match(resume_text, job_text)
    print(f"Match: {result.score}%")
"""

from .matching import MatchResult, MatchService, compute_match

__all__ = ["compute_match", "MatchService", "MatchResult"]
__version__ = "1.0.0"
