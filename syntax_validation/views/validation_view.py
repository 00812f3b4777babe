"""
Syntax Validation View Controller

Drives the validation panel of the style editor: validates the style the
panel currently represents and keeps a display message for the bound
text view.
"""

import logging
import time
from typing import Any, Callable, List, Optional

from ..engine import SyntaxStyleValidator, get_style_validator
from ..metrics import ValidationMetrics
from ..reports import ReportGenerator

logger = logging.getLogger(__name__)

ResultObserver = Callable[[str], None]


class SyntaxValidationController:
    """
    View controller for the syntax style validation panel.

    Usage:
        controller = SyntaxValidationController()
        controller.represented_object = style
        controller.bind(text_view.set_text)

        if not controller.validate_syntax():
            # Keep the editor sheet open
            pass
    """

    nib_name = "SyntaxValidationView"

    def __init__(
        self,
        validator: Optional[SyntaxStyleValidator] = None,
        metrics: Optional[ValidationMetrics] = None,
    ):
        """
        Args:
            validator: Style manager to delegate to (default: shared instance)
            metrics: Collector to record validation passes into
        """
        self.validator = validator or get_style_validator()
        self.metrics = metrics

        self.represented_object: Any = None

        self._did_validate = False
        self._result: Optional[str] = None
        self._observers: List[ResultObserver] = []

    @property
    def did_validate(self) -> bool:
        """Whether a represented style has been validated."""
        return self._did_validate

    @property
    def result(self) -> Optional[str]:
        """Message describing the latest validation."""
        return self._result

    def bind(self, observer: ResultObserver) -> None:
        """Call `observer` with the new message after every validation."""
        self._observers.append(observer)

    def unbind(self, observer: ResultObserver) -> None:
        self._observers.remove(observer)

    def validate_syntax(self) -> bool:
        """
        Validate the represented style and store the result message.

        Returns:
            True if the style has no error (or there is no style)
        """
        style = self.represented_object
        if not isinstance(style, dict):
            return True

        start_time = time.time()
        errors = self.validator.validate_syntax(style)
        duration = time.time() - start_time

        if self.metrics is not None:
            self.metrics.record_validation(errors, duration)

        self._set_result(ReportGenerator.generate_text_report(errors))
        self._did_validate = True

        if errors:
            logger.info(f"Style validation found {len(errors)} error(s)")

        return len(errors) == 0

    def start_validation(self, sender: Any = None) -> None:
        """Action: start syntax style validation."""
        self.validate_syntax()

    def _set_result(self, message: str) -> None:
        self._result = message

        for observer in list(self._observers):
            observer(message)

    def __repr__(self) -> str:
        return f"SyntaxValidationController(did_validate={self._did_validate})"
