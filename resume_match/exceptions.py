"""Base exception for errors that carry user-facing details."""

from typing import List, Optional, Sequence


class ResumeMatchError(Exception):
    """Error with a headline, itemised details and recovery suggestions.

    ``str(error)`` renders all three, so the exception is readable in a
    traceback; ErrorHandler uses the structured fields directly.
    """

    details_heading = "Errors"

    def __init__(
        self,
        message: str,
        errors: Optional[Sequence[str]] = None,
        suggestions: Optional[Sequence[str]] = None,
    ):
        self.message = message
        self.errors: List[str] = list(errors or [])
        self.suggestions: List[str] = list(suggestions or [])
        super().__init__(self.render())

    def render(self) -> str:
        lines = [self.message]
        if self.errors:
            lines.append(f"\n{self.details_heading}:")
            lines.extend(f"  {i}. {error}" for i, error in enumerate(self.errors, 1))
        if self.suggestions:
            lines.append("\nSuggestions:")
            lines.extend(f"  - {suggestion}" for suggestion in self.suggestions)
        return "\n".join(lines)
