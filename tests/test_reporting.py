"""Tests for match report payloads and template rendering."""

import pytest

from resume_match.matching import MatchResult
from resume_match.reporting import (
    ReportRenderer,
    ReportTemplateError,
    build_match_payload,
    build_summary,
)


@pytest.fixture
def result():
    return MatchResult(
        score=72,
        matched_terms=("agile", "product manager"),
        resume_terms=("product manager", "agile", "roadmap"),
        job_terms=("product owner", "agile"),
    )


@pytest.fixture
def renderer():
    return ReportRenderer()


class TestBuildMatchPayload:
    """Tests for build_match_payload."""

    def test_payload_fields(self, result):
        """Test the payload mirrors the result with plain lists."""
        payload = build_match_payload(result)

        assert payload["score"] == 72
        assert payload["match_quality"] == "strong"
        assert payload["matched_terms"] == ["agile", "product manager"]
        assert payload["resume_terms"] == ["product manager", "agile", "roadmap"]
        assert payload["job_terms"] == ["product owner", "agile"]
        assert payload["matched_count"] == 2
        assert payload["summary"] == "72% (strong) - matched: agile, product manager"
        assert payload["snippets"] == []
        assert payload["snippets_highlighted"] == []

    def test_snippets_from_job_text(self, result):
        """Test job excerpts are pulled for matched terms."""
        payload = build_match_payload(result, job_text="We run an Agile process with weekly demos.")

        assert payload["snippets"] == ["We run an Agile process with weekly demos."]
        assert payload["snippets_highlighted"] == [
            "We run an <mark>Agile</mark> process with weekly demos."
        ]

    def test_highlighted_snippets_escape_html(self, result):
        """Test job text markup is escaped before <mark> tags are added."""
        payload = build_match_payload(result, job_text="<b>Agile</b> & lean")

        assert payload["snippets_highlighted"] == ["&lt;b&gt;<mark>Agile</mark>&lt;/b&gt; &amp; lean"]

    def test_highlighting_leaves_entities_intact(self):
        """Test a term spelled like an entity name is not marked inside &amp;."""
        result = MatchResult(score=50, matched_terms=("amp",))
        payload = build_match_payload(result, job_text="R&D team builds AMP pages for mobile " * 3)

        expected = " ".join(["R&amp;D team builds <mark>AMP</mark> pages for mobile"] * 3)
        assert payload["snippets_highlighted"] == [expected]
        assert "&<mark>" not in payload["snippets_highlighted"][0]

    def test_snippet_count_limited(self):
        """Test at most three excerpts are returned."""
        result = MatchResult(score=50, matched_terms=("agile",))
        job_text = " ".join((["agile"] + ["filler"] * 40) * 5)

        assert len(build_match_payload(result, job_text)["snippets"]) == 3

    def test_summary_without_matches(self):
        """Test the summary placeholder when nothing matched."""
        assert build_summary(MatchResult(score=0)) == "0% (weak) - matched: none"


class TestReportRenderer:
    """Tests for ReportRenderer."""

    def test_render_text(self, renderer, result):
        """Test the plain text report."""
        output = renderer.render(build_match_payload(result), output_format="text")

        assert output.startswith("Resume Match: 72% (strong)")
        assert "Matched terms (2):" in output
        assert "agile, product manager" in output
        assert "product owner, agile" in output
        assert "Relevant excerpts" not in output

    def test_render_text_with_excerpts(self, renderer, result):
        """Test excerpts appear when job text was supplied."""
        payload = build_match_payload(result, job_text="Agile product manager wanted.")
        output = renderer.render(payload)

        assert "Relevant excerpts:" in output
        assert "Agile product manager wanted." in output

    def test_render_text_without_matches(self, renderer):
        """Test empty lists render a placeholder."""
        output = renderer.render(build_match_payload(MatchResult(score=0)))

        assert "Matched terms (0):\n  none" in output
        assert "Top job terms:\n  none" in output

    def test_render_html(self, renderer, result):
        """Test the HTML report."""
        payload = build_match_payload(result, job_text="Agile team")
        output = renderer.render(payload, output_format="html")

        assert output.startswith("<!DOCTYPE html>")
        assert '<p class="score strong">72%</p>' in output
        assert '<span class="term matched">product manager</span>' in output
        assert "<blockquote><mark>Agile</mark> team</blockquote>" in output

    def test_html_autoescapes_terms(self, renderer):
        """Test term text is escaped in HTML output."""
        payload = build_match_payload(MatchResult(score=10, resume_terms=("<script>",)))
        output = renderer.render(payload, output_format="html")

        assert "&lt;script&gt;" in output
        assert "<script>" not in output

    def test_unknown_format(self, renderer, result):
        """Test an unsupported format is rejected."""
        with pytest.raises(ReportTemplateError, match="Unknown report format"):
            renderer.render(build_match_payload(result), output_format="pdf")

    def test_missing_variable(self, renderer):
        """Test StrictUndefined turns missing context into ReportTemplateError."""
        with pytest.raises(ReportTemplateError, match="Template rendering failed"):
            renderer.render({"score": 10})
