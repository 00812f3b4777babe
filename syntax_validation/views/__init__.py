"""
Views Package

Controllers that back the style editor panels.
"""

from .validation_view import SyntaxValidationController

__all__ = ["SyntaxValidationController"]
