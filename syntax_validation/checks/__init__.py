"""
Validation Checks Package

Contains all style validation check implementations:
- style_access: Safe lookup helpers for style mappings
- syntax_type_checks: Duplicate and regex checks for highlight definitions
- outline_checks: Regex checks for outline menu patterns
- comment_checks: Block comment delimiter pairing
"""

from .style_access import get_nested_value, get_definitions, SYNTAX_TYPE_KEYS
from .syntax_type_checks import SyntaxTypeChecker, compile_pattern
from .outline_checks import OutlineChecker
from .comment_checks import BlockCommentChecker

__all__ = [
    'SyntaxTypeChecker',
    'OutlineChecker',
    'BlockCommentChecker',
    'compile_pattern',
    'get_nested_value',
    'get_definitions',
    'SYNTAX_TYPE_KEYS',
]
