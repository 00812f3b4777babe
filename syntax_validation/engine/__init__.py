"""
Validation Engine Package

Style manager that runs every check against a style definition.
"""

from .validator import SyntaxStyleValidator, StyleLoadError, get_style_validator

__all__ = ["SyntaxStyleValidator", "StyleLoadError", "get_style_validator"]
