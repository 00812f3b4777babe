"""
Syntax Validation Models Module

Defines data structures for style validation results.
"""

from .validation_result import SyntaxValidationError, ErrorRole

__all__ = ["SyntaxValidationError", "ErrorRole"]
