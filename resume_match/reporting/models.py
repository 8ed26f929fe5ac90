"""Exceptions for report building and rendering."""


class ReportError(Exception):
    """Base exception for report-related errors."""

    pass


class ReportTemplateError(ReportError):
    """Raised when template rendering fails due to configuration or missing variables."""

    pass
