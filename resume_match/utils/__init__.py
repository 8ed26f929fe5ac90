"""Utility functions for time handling and keyword highlighting."""

from .highlighting import (
    extract_snippets_with_keywords,
    format_term_list,
    keyword_pattern,
    highlight_keywords,
    truncate_text,
)
from .timestamps import format_timestamp, utc_now

__all__ = [
    # Timestamps
    "utc_now",
    "format_timestamp",
    # Highlighting
    "highlight_keywords",
    "extract_snippets_with_keywords",
    "format_term_list",
    "keyword_pattern",
    "truncate_text",
]
