"""Template rendering for match reports using Jinja2.

Wraps Jinja2 rendering with strict undefined checking to catch template
errors early. HTML templates are auto-escaped; plain-text ones are not.
"""

import logging
from typing import Dict

from jinja2 import Environment, PackageLoader, StrictUndefined, TemplateError, select_autoescape

from .models import ReportTemplateError

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ("text", "html")


class ReportRenderer:
    """Renders match reports from the resume_match.reporting templates.

    Templates are cached by the Jinja2 environment across renders.
    """

    def __init__(
        self,
        template_dir: str = "report_templates",
        text_template: str = "match_report.txt.j2",
        html_template: str = "match_report.html.j2",
    ):
        """Initialize the renderer.

        Args:
            template_dir: Directory name within the resume_match.reporting package
            text_template: Filename of the plain text template
            html_template: Filename of the HTML template
        """
        self.template_names = {"text": text_template, "html": html_template}

        self.env = Environment(
            loader=PackageLoader("resume_match.reporting", template_dir),
            autoescape=select_autoescape(enabled_extensions=("html.j2",), default_for_string=False),
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
        )

        logger.debug(f"Initialized ReportRenderer with templates from {template_dir}")

    def render(self, context: Dict, output_format: str = "text") -> str:
        """Render a report.

        Args:
            context: Payload from build_match_payload()
            output_format: "text" or "html"

        Returns:
            Rendered report

        Raises:
            ReportTemplateError: If the format is unknown or rendering fails
        """
        if output_format not in self.template_names:
            raise ReportTemplateError(
                f"Unknown report format: {output_format}. Must be one of: {', '.join(OUTPUT_FORMATS)}"
            )

        try:
            template = self.env.get_template(self.template_names[output_format])
            rendered = template.render(context)
        except TemplateError as e:
            error_msg = f"Template rendering failed: {e}"
            logger.error(error_msg, exc_info=True)
            raise ReportTemplateError(error_msg) from e

        logger.debug(f"Rendered {output_format} report for score {context.get('score')}")
        return rendered
