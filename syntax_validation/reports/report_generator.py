"""
Style validation report generator.
"""

from typing import List
import json

from .. import messages
from ..models import SyntaxValidationError


class ReportGenerator:
    """
    Generates human-readable reports from style validation errors.
    """

    @staticmethod
    def generate_text_report(errors: List[SyntaxValidationError]) -> str:
        """
        Generate the summary shown in the validation panel.

        A header line stating how many errors were found, followed by one
        block per error in the order given.

        Args:
            errors: Errors returned by the style validator

        Returns:
            Formatted text report
        """
        count = len(errors)

        if count == 0:
            message = messages.SUCCESS_GLYPH + " " + messages.localize(messages.NO_ERROR_FOUND)
        elif count == 1:
            message = messages.localize(messages.ONE_ERROR_FOUND)
        else:
            message = messages.localize(messages.ERRORS_FOUND) % count

        for error in errors:
            message += ReportGenerator._format_error_detail(error)

        return message

    @staticmethod
    def _format_error_detail(error: SyntaxValidationError) -> str:
        return (
            "\n\n" + messages.WARNING_GLYPH + " "
            + error.localized_type + " [" + error.localized_role + "] :" + error.string
            + "\n\t> " + error.localized_failure_reason
        )

    @staticmethod
    def generate_json_report(errors: List[SyntaxValidationError]) -> str:
        """
        Generate a JSON report for machine consumers.

        Args:
            errors: Errors returned by the style validator

        Returns:
            JSON-formatted report
        """
        report = {
            "valid": not errors,
            "error_count": len(errors),
            "errors": [e.to_dict() for e in errors],
        }
        return json.dumps(report, indent=2, ensure_ascii=False)
