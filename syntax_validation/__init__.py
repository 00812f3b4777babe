"""
Syntax Style Validation Package

Checks user-authored syntax-highlighting styles and renders a summary of
the errors for the style editor's validation panel.

Main Components:
- views: Validation panel controller
- engine: Style manager running the checks
- checks: Individual check implementations
- models: Data structures for validation errors
- reports: Text and JSON summaries
- metrics: Prometheus-compatible metrics

Quick Start:
    from syntax_validation import SyntaxValidationController

    controller = SyntaxValidationController()
    controller.represented_object = style

    if not controller.validate_syntax():
        print(controller.result)
"""

from .models import SyntaxValidationError, ErrorRole
from .engine import SyntaxStyleValidator, StyleLoadError, get_style_validator
from .reports import ReportGenerator
from .metrics import get_metrics
from .views import SyntaxValidationController

__version__ = "1.0.0"

__all__ = [
    "SyntaxValidationController",
    "SyntaxStyleValidator",
    "StyleLoadError",
    "get_style_validator",
    "SyntaxValidationError",
    "ErrorRole",
    "ReportGenerator",
    "get_metrics",
]
