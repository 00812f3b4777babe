"""
Comment Delimiter Checks
"""

from typing import Dict, Any, List

from ..models.validation_result import SyntaxValidationError, ErrorRole
from .. import messages
from .style_access import get_nested_value


class BlockCommentChecker:
    """
    Block comments need both delimiters or neither.

    Inline delimiters stand alone and are not checked.
    """

    TYPE_KEY = 'block comment'

    def validate(self, style: Dict[str, Any]) -> List[SyntaxValidationError]:
        begin = get_nested_value(style, 'commentDelimiters.beginDelimiter')
        end = get_nested_value(style, 'commentDelimiters.endDelimiter')

        if bool(begin) == bool(end):
            return []

        if begin:
            role, string = ErrorRole.BEGIN_STRING, str(begin)
        else:
            role, string = ErrorRole.END_STRING, str(end)

        return [SyntaxValidationError(
            type=self.TYPE_KEY,
            role=role,
            string=string,
            failure_reason=messages.BLOCK_COMMENT_NEEDS_BOTH,
        )]
