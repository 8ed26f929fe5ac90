"""Match report building and rendering.

This module provides:
- build_match_payload: Report context from a MatchResult
- ReportRenderer: Jinja2-based text/HTML report rendering
- ReportError / ReportTemplateError: Report exceptions
"""

from .models import ReportError, ReportTemplateError
from .payloads import build_match_payload, build_summary
from .templates import OUTPUT_FORMATS, ReportRenderer

__all__ = [
    "ReportRenderer",
    "OUTPUT_FORMATS",
    "ReportError",
    "ReportTemplateError",
    "build_match_payload",
    "build_summary",
]
