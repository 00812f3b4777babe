"""
Prometheus Metrics for Style Validation

Exposes validation metrics in Prometheus text format.

Metrics Exposed:
- syntax_validation_total: Styles validated
- syntax_validation_valid: Styles with no errors
- syntax_validation_invalid: Styles with at least one error
- syntax_validation_errors: Errors by syntax type
- syntax_validation_duration_seconds: Validation processing time
"""

from collections import defaultdict
from typing import Dict, Any, List, Optional
import time

from ..models.validation_result import SyntaxValidationError


class ValidationMetrics:
    """
    Collects and formats style validation metrics for Prometheus.

    Usage:
        metrics = ValidationMetrics()
        metrics.record_validation(errors, duration_seconds)
        print(metrics.export_text())
    """

    def __init__(self):
        self.total_validations = 0
        self.valid_validations = 0
        self.invalid_validations = 0

        self.errors_by_type: Dict[str, int] = defaultdict(int)

        self.duration_sum = 0.0
        self.duration_count = 0

        self.start_time = time.time()

    def record_validation(self, errors: List[SyntaxValidationError], duration_seconds: Optional[float] = None) -> None:
        """
        Record the outcome of one validation pass.

        Args:
            errors: Errors returned by the style validator
            duration_seconds: How long the pass took
        """
        self.total_validations += 1

        if errors:
            self.invalid_validations += 1
        else:
            self.valid_validations += 1

        for error in errors:
            self.errors_by_type[error.type] += 1

        if duration_seconds is not None:
            self.duration_sum += duration_seconds
            self.duration_count += 1

    def export_text(self) -> str:
        """
        Export metrics in Prometheus text exposition format.
        """
        lines = []

        lines.append("# HELP syntax_validation_total Total number of styles validated")
        lines.append("# TYPE syntax_validation_total counter")
        lines.append(f"syntax_validation_total {self.total_validations}")
        lines.append("")

        lines.append("# HELP syntax_validation_valid Styles without errors")
        lines.append("# TYPE syntax_validation_valid counter")
        lines.append(f"syntax_validation_valid {self.valid_validations}")
        lines.append("")

        lines.append("# HELP syntax_validation_invalid Styles with errors")
        lines.append("# TYPE syntax_validation_invalid counter")
        lines.append(f"syntax_validation_invalid {self.invalid_validations}")
        lines.append("")

        lines.append("# HELP syntax_validation_errors Validation errors by syntax type")
        lines.append("# TYPE syntax_validation_errors counter")
        for type_key, count in sorted(self.errors_by_type.items()):
            lines.append(f'syntax_validation_errors{{type="{type_key}"}} {count}')
        lines.append("")

        lines.append("# HELP syntax_validation_duration_seconds Validation processing time")
        lines.append("# TYPE syntax_validation_duration_seconds summary")
        lines.append(f"syntax_validation_duration_seconds_sum {self.duration_sum:.6f}")
        lines.append(f"syntax_validation_duration_seconds_count {self.duration_count}")
        lines.append("")

        uptime = time.time() - self.start_time
        lines.append("# HELP syntax_validation_uptime_seconds Time since metrics started")
        lines.append("# TYPE syntax_validation_uptime_seconds counter")
        lines.append(f"syntax_validation_uptime_seconds {uptime:.2f}")
        lines.append("")

        return "\n".join(lines)

    def export_json(self) -> Dict[str, Any]:
        """Export metrics as a dictionary (for logging/debugging)."""
        valid_rate = (self.valid_validations /
                      self.total_validations) if self.total_validations > 0 else 0

        return {
            'total_validations': self.total_validations,
            'valid_validations': self.valid_validations,
            'invalid_validations': self.invalid_validations,
            'valid_rate': valid_rate,
            'errors_by_type': dict(self.errors_by_type),
            'total_processing_time_seconds': self.duration_sum,
        }

    def reset(self) -> None:
        """Reset all metrics (useful for testing)."""
        self.total_validations = 0
        self.valid_validations = 0
        self.invalid_validations = 0
        self.errors_by_type.clear()
        self.duration_sum = 0.0
        self.duration_count = 0
        self.start_time = time.time()


_global_metrics: Optional[ValidationMetrics] = None


def get_metrics() -> ValidationMetrics:
    """Get global metrics instance (singleton)."""
    global _global_metrics
    if _global_metrics is None:
        _global_metrics = ValidationMetrics()
    return _global_metrics


def reset_metrics() -> None:
    """Reset global metrics instance."""
    if _global_metrics:
        _global_metrics.reset()


def metrics_endpoint() -> str:
    """
    HTTP endpoint handler for Prometheus scraping.

    Returns:
        Metrics in Prometheus text format
    """
    return get_metrics().export_text()
