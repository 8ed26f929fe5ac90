"""Keyword highlighting utilities for match reports.

Matched terms are lowercase and punctuation-free while the job text shown
to users keeps its original casing, so highlighting and snippet lookup are
case-insensitive and leave the original text intact.
"""

import re
from typing import Callable, Iterable, List, Optional, Pattern


def keyword_pattern(keywords: Iterable[str]) -> Optional[Pattern[str]]:
    """Compile one case-insensitive alternation over all keywords.

    Longest keywords come first so "product manager" wins over "product".
    Single words are anchored on word boundaries; phrases match anywhere.
    Returns None when there is nothing to match.
    """
    unique = sorted({k for k in keywords if k and k.strip()}, key=len, reverse=True)
    if not unique:
        return None

    alternatives = []
    for keyword in unique:
        escaped = re.escape(keyword)
        alternatives.append(escaped if " " in keyword else rf"\b{escaped}\b")
    return re.compile("|".join(alternatives), re.IGNORECASE)


def highlight_keywords(
    text: str,
    keywords: List[str],
    marker_start: str = "**",
    marker_end: str = "**",
    escape: Optional[Callable[[str], str]] = None,
) -> str:
    """Wrap every keyword occurrence in markers, in a single pass.

    When ``escape`` is given (e.g. ``html.escape``) it is applied to the text
    between and inside matches but not to the markers. Keywords are located
    in the raw text, so they never match inside an escape sequence.

    Example:
        >>> highlight_keywords("Looking for a Python developer", ["python", "developer"])
        'Looking for a **Python** **developer**'
    """
    escape = escape or (lambda piece: piece)
    pattern = keyword_pattern(keywords) if text else None
    if pattern is None:
        return escape(text)

    parts: List[str] = []
    position = 0
    for match in pattern.finditer(text):
        parts.append(escape(text[position:match.start()]))
        parts.append(f"{marker_start}{escape(match.group(0))}{marker_end}")
        position = match.end()
    parts.append(escape(text[position:]))
    return "".join(parts)


def extract_snippets_with_keywords(
    text: str, keywords: List[str], context_chars: int = 100, max_snippets: int = 0
) -> List[str]:
    """Cut excerpts of ``text`` around keyword occurrences.

    Windows of ``context_chars`` on each side of a hit are merged when they
    overlap, so nearby terms share one excerpt instead of repeating it.

    Args:
        text: Text to extract snippets from
        keywords: Keywords to find
        context_chars: Characters of context before/after each keyword
        max_snippets: Stop after this many snippets (0 = unlimited)

    Returns:
        Excerpts in text order, with "..." where the text was cut
    """
    pattern = keyword_pattern(keywords) if text else None
    if pattern is None:
        return []

    windows: List[List[int]] = []
    for match in pattern.finditer(text):
        start = max(0, match.start() - context_chars)
        end = min(len(text), match.end() + context_chars)
        if windows and start <= windows[-1][1]:
            windows[-1][1] = max(windows[-1][1], end)
            continue
        if max_snippets and len(windows) >= max_snippets:
            break
        windows.append([start, end])

    snippets = []
    for start, end in windows:
        snippet = text[start:end].strip()
        if start > 0:
            snippet = "..." + snippet
        if end < len(text):
            snippet += "..."
        snippets.append(snippet)
    return snippets


def truncate_text(text: str, max_length: int = 500, suffix: str = "...") -> str:
    """Shorten text to ``max_length`` including the suffix.

    Breaks at a word boundary when one is close to the cut point.

    Example:
        >>> truncate_text("This is a very long text that needs truncating", max_length=30)
        'This is a very long text...'
    """
    if not text or len(text) <= max_length:
        return text

    keep = max_length - len(suffix)
    if keep <= 0:
        return suffix[:max_length]

    head = text[:keep]
    space = head.rfind(" ")
    if space > keep * 0.8:
        head = head[:space]
    return head.rstrip() + suffix


def format_term_list(terms: List[str], empty: str = "none") -> str:
    """Join terms for display.

    Example:
        >>> format_term_list(["agile", "scrum"])
        'agile, scrum'
    """
    return ", ".join(terms) if terms else empty
