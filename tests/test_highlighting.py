"""Tests for keyword highlighting utilities."""

import html

from resume_match.utils.highlighting import (
    extract_snippets_with_keywords,
    format_term_list,
    highlight_keywords,
    truncate_text,
)


class TestHighlightKeywords:
    """Test keyword highlighting function."""

    def test_highlight_single_keyword(self):
        """Test highlighting a single keyword."""
        result = highlight_keywords("Looking for a Python developer", ["python"])
        assert result == "Looking for a **Python** developer"

    def test_highlight_preserves_case(self):
        """Test that highlighting preserves original case."""
        result = highlight_keywords("PYTHON and Python and python", ["python"])
        assert result == "**PYTHON** and **Python** and **python**"

    def test_word_boundaries(self):
        """Test single words do not highlight inside other words."""
        result = highlight_keywords("Java and JavaScript", ["java"])
        assert result == "**Java** and JavaScript"

    def test_longest_phrase_wins(self):
        """Test a phrase is highlighted whole, not split by its words."""
        result = highlight_keywords("Senior Product Manager", ["product", "product manager"])
        assert result == "Senior **Product Manager**"

    def test_custom_markers(self):
        """Test custom markers."""
        result = highlight_keywords("agile team", ["agile"], "<mark>", "</mark>")
        assert result == "<mark>agile</mark> team"

    def test_escape_applied_outside_markers(self):
        """Test the escape function covers text but not markers."""
        result = highlight_keywords(
            "Q&A on amp & quot", ["amp", "quot"], "<mark>", "</mark>", escape=html.escape
        )
        assert result == "Q&amp;A on <mark>amp</mark> &amp; <mark>quot</mark>"

    def test_escape_without_matches(self):
        """Test text is still escaped when no keyword occurs."""
        assert highlight_keywords("a < b", ["agile"], escape=html.escape) == "a &lt; b"

    def test_special_characters_escaped(self):
        """Test regex metacharacters in keywords are literal."""
        assert highlight_keywords("Knows c++ well", ["c++"]) == "Knows c++ well"
        assert highlight_keywords("Knows a.b well", ["a.b"]) == "Knows **a.b** well"

    def test_empty_inputs(self):
        """Test empty text or keyword list is returned unchanged."""
        assert highlight_keywords("", ["python"]) == ""
        assert highlight_keywords("text", []) == "text"
        assert highlight_keywords("text", ["  "]) == "text"


class TestExtractSnippets:
    """Test snippet extraction."""

    def test_snippet_with_context(self):
        """Test a snippet includes surrounding context and ellipses."""
        text = "x" * 50 + " agile delivery " + "y" * 50
        snippets = extract_snippets_with_keywords(text, ["agile"], context_chars=10)

        assert len(snippets) == 1
        assert snippets[0].startswith("...")
        assert snippets[0].endswith("...")
        assert "agile" in snippets[0]

    def test_case_insensitive(self):
        """Test lowercase terms find capitalized text."""
        snippets = extract_snippets_with_keywords("Agile teams", ["agile"], context_chars=5)
        assert snippets == ["Agile team..."]

    def test_overlapping_windows_merged(self):
        """Test nearby hits share one excerpt."""
        snippets = extract_snippets_with_keywords("agile scrum", ["agile", "scrum"], context_chars=50)
        assert snippets == ["agile scrum"]

    def test_max_snippets(self):
        """Test extraction stops at max_snippets."""
        text = " ".join(["agile"] + ["filler"] * 30 + ["agile"] + ["filler"] * 30 + ["agile"])
        snippets = extract_snippets_with_keywords(text, ["agile"], context_chars=5, max_snippets=2)
        assert len(snippets) == 2

    def test_whole_words_only(self):
        """Test single-word terms do not match inside longer words."""
        assert extract_snippets_with_keywords("JavaScript only", ["java"]) == []

    def test_no_match(self):
        """Test no snippets when no keyword is present."""
        assert extract_snippets_with_keywords("nothing here", ["agile"]) == []
        assert extract_snippets_with_keywords("", ["agile"]) == []


class TestTruncateText:
    """Test text truncation."""

    def test_short_text_unchanged(self):
        """Test text within the limit is returned as is."""
        assert truncate_text("short", max_length=10) == "short"

    def test_truncates_at_word_boundary(self):
        """Test truncation prefers a nearby space."""
        result = truncate_text("This is a very long text that needs truncating", max_length=30)
        assert result == "This is a very long text..."
        assert len(result) <= 30

    def test_tiny_limit(self):
        """Test a limit smaller than the suffix."""
        assert truncate_text("abcdef", max_length=2) == ".."


def test_format_term_list():
    """Test term lists are comma-joined with an empty placeholder."""
    assert format_term_list(["agile", "scrum"]) == "agile, scrum"
    assert format_term_list([]) == "none"
    assert format_term_list([], empty="-") == "-"
