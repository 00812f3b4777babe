#!/usr/bin/env python3
"""
Syntax Style Validation CLI

Command-line interface for validating style files.
"""

import argparse
import logging
import sys
import time

import colorama
from colorama import Fore, Style

from syntax_validation import ReportGenerator, StyleLoadError, SyntaxStyleValidator, SyntaxValidationController
from syntax_validation.config import load_settings
from syntax_validation.logging_config import setup_logging
from syntax_validation.metrics import get_metrics

EXIT_VALID = 0
EXIT_INVALID = 1
EXIT_ERROR = 2


def colorize(report: str, valid: bool) -> str:
    """Color the header line of a text report."""
    header, sep, details = report.partition("\n")
    color = Fore.GREEN if valid else Fore.RED
    return f"{color}{header}{Style.RESET_ALL}{sep}{details}"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Validate syntax-highlighting style definitions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Validate a style and print the summary
  syntax-validate Python.yaml

  # Print the result as JSON
  syntax-validate Python.yaml --format json
        """,
    )

    parser.add_argument("style", type=str, help="Path to a YAML style file")

    parser.add_argument(
        "--format",
        type=str,
        choices=["text", "json"],
        default="text",
        help="Report output format (default: text)",
    )

    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Logging level (default: from SYNTAX_VALIDATION_LOG_LEVEL or INFO)",
    )

    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Do not color the summary header",
    )

    return parser


def main(argv=None) -> int:
    """Main CLI entrypoint. Returns the process exit code."""
    args = build_parser().parse_args(argv)
    logger = logging.getLogger(__name__)

    try:
        settings = load_settings()
        setup_logging(args.log_level or settings.log_level, settings.log_format)
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        return EXIT_ERROR

    metrics = get_metrics() if settings.metrics_enabled else None

    try:
        validator = SyntaxStyleValidator()
        style = validator.load_style(args.style)

        if args.format == "json":
            start_time = time.time()
            errors = validator.validate_syntax(style)
            if metrics is not None:
                metrics.record_validation(errors, time.time() - start_time)
            valid = not errors
            print(ReportGenerator.generate_json_report(errors))
        else:
            controller = SyntaxValidationController(validator=validator, metrics=metrics)
            controller.represented_object = style
            valid = controller.validate_syntax()

            report = controller.result
            if not args.no_color:
                colorama.init()
                report = colorize(report, valid)
            print(report)

    except (FileNotFoundError, StyleLoadError) as e:
        logger.error(f"Could not load style: {e}")
        return EXIT_ERROR
    except Exception as e:
        logger.error(f"Style validation failed: {e}", exc_info=True)
        return EXIT_ERROR

    return EXIT_VALID if valid else EXIT_INVALID


if __name__ == "__main__":
    sys.exit(main())
