"""
Syntax Type Checks

Validates the highlight definitions listed under each syntax type key:
- Duplicate definitions (same begin and end string)
- Regular expressions that fail to compile
"""

import logging
import re
from typing import Dict, Any, List, Optional

from ..models.validation_result import SyntaxValidationError, ErrorRole
from .. import messages
from .style_access import get_definitions, SYNTAX_TYPE_KEYS

logger = logging.getLogger(__name__)


def compile_pattern(pattern: str, ignore_case: bool = False) -> Optional[str]:
    """
    Try to compile a regular expression.

    Returns:
        None if the pattern compiles, the compiler's message otherwise
    """
    flags = re.MULTILINE
    if ignore_case:
        flags |= re.IGNORECASE

    try:
        re.compile(pattern, flags)
    except (re.error, OverflowError, RecursionError) as e:
        return str(e)

    return None


def _as_text(value: Any) -> Optional[str]:
    """YAML may hand back numbers or booleans for short strings."""
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


class SyntaxTypeChecker:
    """
    Validates highlight definitions for every syntax type.

    Definitions are visited sorted case-insensitively by begin string, with
    exact spellings grouped, so that duplicates end up next to each other.
    """

    def __init__(self, type_keys: Optional[List[str]] = None):
        self.type_keys = list(type_keys) if type_keys is not None else list(SYNTAX_TYPE_KEYS)

    def validate(self, style: Dict[str, Any]) -> List[SyntaxValidationError]:
        """
        Validate all syntax type definition lists in a style.

        Args:
            style: The style definition

        Returns:
            List of errors (empty if all checks pass)
        """
        errors = []

        for key in self.type_keys:
            errors.extend(self._validate_type(key, get_definitions(style, key)))

        return errors

    def _validate_type(self, type_key: str, definitions: List[Dict[str, Any]]) -> List[SyntaxValidationError]:
        errors = []
        entries = []

        for definition in definitions:
            begin = _as_text(definition.get('beginString'))
            if not begin:
                continue
            entries.append((begin, _as_text(definition.get('endString')) or None, definition))

        entries.sort(key=lambda entry: (entry[0].lower(), entry[0], entry[1] or ''))

        last_begin = None
        last_end = None

        for begin, end, definition in entries:
            if begin == last_begin and end == last_end:
                logger.debug(f"Duplicate {type_key} definition: {begin!r}")
                errors.append(SyntaxValidationError(
                    type=type_key,
                    role=ErrorRole.BEGIN_STRING,
                    string=begin,
                    failure_reason=messages.MULTIPLE_REGISTERED,
                ))

            elif definition.get('regularExpression'):
                ignore_case = bool(definition.get('ignoreCase'))

                failure = compile_pattern(begin, ignore_case)
                if failure is not None:
                    errors.append(self._regex_error(type_key, ErrorRole.BEGIN_STRING, begin, failure))

                if end:
                    failure = compile_pattern(end, ignore_case)
                    if failure is not None:
                        errors.append(self._regex_error(type_key, ErrorRole.END_STRING, end, failure))

            last_begin = begin
            last_end = end

        return errors

    @staticmethod
    def _regex_error(type_key: str, role: ErrorRole, pattern: str, failure: str) -> SyntaxValidationError:
        return SyntaxValidationError(
            type=type_key,
            role=role,
            string=pattern,
            failure_reason=messages.localize(messages.REGEX_ERROR) % failure,
        )
