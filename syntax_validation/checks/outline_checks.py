"""
Outline Menu Checks

Every outline menu pattern is a regular expression, whatever its
`regularExpression` flag says.
"""

from typing import Dict, Any, List

from ..models.validation_result import SyntaxValidationError, ErrorRole
from .. import messages
from .style_access import get_definitions
from .syntax_type_checks import compile_pattern


class OutlineChecker:
    """Validates the `outlineMenu` patterns of a style."""

    TYPE_KEY = 'outline'

    def validate(self, style: Dict[str, Any]) -> List[SyntaxValidationError]:
        errors = []

        for definition in get_definitions(style, 'outlineMenu'):
            pattern = definition.get('beginString')
            if not pattern:
                continue
            pattern = str(pattern)

            failure = compile_pattern(pattern, bool(definition.get('ignoreCase')))
            if failure is not None:
                errors.append(SyntaxValidationError(
                    type=self.TYPE_KEY,
                    role=ErrorRole.REGULAR_EXPRESSION,
                    string=pattern,
                    failure_reason=messages.localize(messages.REGEX_ERROR) % failure,
                ))

        return errors
