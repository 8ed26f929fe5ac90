"""Command-line entry point for the resume matcher."""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from dotenv import load_dotenv

from resume_match.config.environment import EnvironmentConfig, load_environment_config
from resume_match.config.exceptions import ConfigurationError
from resume_match.config.loader import load_config
from resume_match.config.models import AppConfig
from resume_match.errors import ErrorHandler
from resume_match.logging import get_logger
from resume_match.logging.config import configure_logging
from resume_match.matching import MatchService
from resume_match.reporting import OUTPUT_FORMATS, ReportRenderer, build_match_payload
from resume_match.reporting.models import ReportError
from resume_match.validation.exceptions import InputValidationError

logger = get_logger(__name__, component="cli")

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_INPUT_ERROR = 2


def load_runtime_config(
    config_path: Optional[Path], log_level_override: Optional[str]
) -> Tuple[AppConfig, EnvironmentConfig]:
    """
    Load and prepare runtime configuration.

    Priority for the config path: CLI > RESUME_MATCH_CONFIG > default locations.
    Priority for the log level: CLI > LOG_LEVEL > config file.

    Args:
        config_path: Path from --config (may be None)
        log_level_override: Log level from --log-level (may be None)

    Returns:
        Tuple of (AppConfig, EnvironmentConfig) with log_level and log_format resolved

    Raises:
        ConfigurationError: If configuration is invalid
    """
    env_config = load_environment_config()
    app_config = load_config(config_path or env_config.config_path)

    if log_level_override:
        env_config.log_level = log_level_override
    elif not env_config.log_level:
        env_config.log_level = app_config.logging.level

    if not env_config.log_format:
        env_config.log_format = app_config.logging.format

    return app_config, env_config


def read_text_file(path: Path) -> str:
    """Read a UTF-8 text file (OSError/UnicodeDecodeError propagate)."""
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="resume-match",
        description="Score how well a resume matches a job description",
    )
    parser.add_argument("--resume", type=Path, required=True, help="Path to plain-text resume")
    parser.add_argument("--job", type=Path, required=True, help="Path to plain-text job description")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to configuration file (default: resume_match.yaml if present)",
    )
    parser.add_argument(
        "--output",
        default="text",
        choices=list(OUTPUT_FORMATS) + ["json"],
        help="Report format (default: text)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level (overrides config and environment)",
    )
    parser.add_argument(
        "--skip-validation",
        action="store_true",
        help="Score the texts even if the job description fails the pre-checks",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the resume matcher CLI.

    Returns:
        Exit code (0 success, 1 configuration/unexpected error, 2 input error)
    """
    load_dotenv()
    args = build_parser().parse_args(argv)
    error_handler = ErrorHandler()

    try:
        app_config, env_config = load_runtime_config(args.config, args.log_level)
        configure_logging(
            level=env_config.log_level,
            format_type=env_config.log_format,
            environment=env_config.environment,
        )
        logger.info(
            "Configuration loaded",
            extra={
                "event": "config.loaded",
                "config_path": str(args.config) if args.config else None,
                "log_level": env_config.log_level,
            },
        )

        resume_text = read_text_file(args.resume)
        job_text = read_text_file(args.job)

        service = MatchService(config=app_config)
        if args.skip_validation:
            result = service.compute_match(resume_text, job_text)
        else:
            result = service.match_job_posting(resume_text, job_text)

        payload = build_match_payload(result, job_text)
        if args.output == "json":
            output = json.dumps(payload, indent=2)
        else:
            output = ReportRenderer().render(payload, output_format=args.output)

        print(output)
        logger.info(
            "Report written",
            extra={"event": "cli.report.written", "output_format": args.output, "score": result.score},
        )
        return EXIT_OK

    except ConfigurationError as e:
        print(error_handler.handle(e, context="cli.config").format(), file=sys.stderr)
        return EXIT_ERROR
    except (InputValidationError, OSError, UnicodeDecodeError) as e:
        print(error_handler.handle(e, context="cli.input").format(), file=sys.stderr)
        return EXIT_INPUT_ERROR
    except ReportError as e:
        print(error_handler.handle(e, context="cli.report").format(), file=sys.stderr)
        return EXIT_ERROR
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        return EXIT_ERROR
    except Exception as e:
        print(error_handler.handle(e, context="cli").format(), file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
