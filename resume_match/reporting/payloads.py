"""Payload building for match reports.

Turns a MatchResult (plus the original job text, when available) into the
dictionary consumed by JSON output and the report templates.
"""

import html
from typing import Dict, Optional

from resume_match.matching.models import MatchResult
from resume_match.utils.highlighting import (
    extract_snippets_with_keywords,
    format_term_list,
    highlight_keywords,
    truncate_text,
)

MAX_SNIPPETS = 3
SNIPPET_CONTEXT_CHARS = 80
SNIPPET_MAX_LENGTH = 300


def build_match_payload(result: MatchResult, job_text: Optional[str] = None) -> Dict:
    """Build a report payload from a match result.

    Args:
        result: MatchResult from the match service
        job_text: Original job text used to pull highlighted excerpts

    Returns:
        Dict with keys:
        - score: Match percentage
        - match_quality: strong, fair or weak
        - matched_terms / resume_terms / job_terms: Term lists
        - matched_count: Number of reported matched terms
        - summary: One-line human-readable summary
        - snippets: Plain job text excerpts containing matched terms
        - snippets_highlighted: Same excerpts, HTML-escaped with <mark> tags
    """
    matched_terms = list(result.matched_terms)

    snippets = []
    if job_text and matched_terms:
        snippets = [
            truncate_text(snippet, max_length=SNIPPET_MAX_LENGTH)
            for snippet in extract_snippets_with_keywords(
                job_text,
                matched_terms,
                context_chars=SNIPPET_CONTEXT_CHARS,
                max_snippets=MAX_SNIPPETS,
            )
        ]

    highlighted = [
        highlight_keywords(snippet, matched_terms, "<mark>", "</mark>", escape=html.escape)
        for snippet in snippets
    ]

    return {
        "score": result.score,
        "match_quality": result.match_quality,
        "matched_terms": matched_terms,
        "resume_terms": list(result.resume_terms),
        "job_terms": list(result.job_terms),
        "matched_count": len(matched_terms),
        "summary": build_summary(result),
        "snippets": snippets,
        "snippets_highlighted": highlighted,
    }


def build_summary(result: MatchResult) -> str:
    """One-line summary of a match result.

    Example:
        >>> build_summary(MatchResult(score=72, matched_terms=("agile", "scrum")))
        '72% (strong) - matched: agile, scrum'
    """
    return (
        f"{result.score}% ({result.match_quality}) - matched: "
        f"{format_term_list(list(result.matched_terms))}"
    )
