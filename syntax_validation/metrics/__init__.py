"""
Metrics Package

Handles observability of style validation.
"""

from .prometheus import (
    ValidationMetrics,
    get_metrics,
    reset_metrics,
    metrics_endpoint
)

__all__ = [
    'ValidationMetrics',
    'get_metrics',
    'reset_metrics',
    'metrics_endpoint'
]
