"""
Style Validation Engine

The style manager that:
1. Loads style definitions from YAML
2. Runs the check modules in order
3. Aggregates their errors
4. Tracks validation statistics

This is the collaborator the validation panel delegates to.
"""

import logging
from pathlib import Path
from typing import Dict, Any, List, Optional, Union

import yaml

from ..models.validation_result import SyntaxValidationError
from ..checks import SyntaxTypeChecker, OutlineChecker, BlockCommentChecker

logger = logging.getLogger(__name__)


class StyleLoadError(Exception):
    """Raised when a style file cannot be read as a style definition."""


class SyntaxStyleValidator:
    """
    Checks the structural correctness of syntax style definitions.

    Usage:
        validator = SyntaxStyleValidator()
        errors = validator.validate_syntax(style)

        if not errors:
            # Style is safe to install
            pass
    """

    def __init__(self):
        self.syntax_type_checker = SyntaxTypeChecker()
        self.outline_checker = OutlineChecker()
        self.block_comment_checker = BlockCommentChecker()

        self.stats = {"total_validated": 0, "valid": 0, "invalid": 0, "total_errors": 0}

    def validate_syntax(self, style: Dict[str, Any]) -> List[SyntaxValidationError]:
        """
        Validate a style definition.

        Validation order:
        1. Syntax type definitions (duplicates, regex)
        2. Outline menu patterns
        3. Block comment delimiters

        Args:
            style: The style definition

        Returns:
            Errors in the order they were found
        """
        errors: List[SyntaxValidationError] = []

        errors.extend(self.syntax_type_checker.validate(style))
        errors.extend(self.outline_checker.validate(style))
        errors.extend(self.block_comment_checker.validate(style))

        self._update_stats(errors)
        logger.debug(f"Validated style {self._style_name(style)!r}: {len(errors)} error(s)")

        return errors

    def load_style(self, path: Union[str, Path]) -> Dict[str, Any]:
        """
        Load a style definition from a YAML file.

        Raises:
            FileNotFoundError: If the file does not exist
            StyleLoadError: If the file is not a YAML mapping
        """
        path = Path(path)

        if not path.exists():
            raise FileNotFoundError(f"Style file not found: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                style = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise StyleLoadError(f"Invalid YAML in {path}: {e}") from e

        if not isinstance(style, dict):
            raise StyleLoadError(f"Style file {path} does not contain a mapping")

        logger.info(f"Loaded style from {path}")
        return style

    def validate_file(self, path: Union[str, Path]) -> List[SyntaxValidationError]:
        """Load a style file and validate it."""
        return self.validate_syntax(self.load_style(path))

    def _update_stats(self, errors: List[SyntaxValidationError]) -> None:
        self.stats["total_validated"] += 1

        if errors:
            self.stats["invalid"] += 1
        else:
            self.stats["valid"] += 1

        self.stats["total_errors"] += len(errors)

    def get_statistics(self) -> Dict[str, Any]:
        """
        Get validation statistics.

        Returns:
            Dictionary with validation stats
        """
        total = self.stats["total_validated"]

        return {
            **self.stats,
            "valid_rate": self.stats["valid"] / total if total > 0 else 0,
        }

    def reset_statistics(self) -> None:
        """Reset validation statistics."""
        self.stats = {"total_validated": 0, "valid": 0, "invalid": 0, "total_errors": 0}

    @staticmethod
    def _style_name(style: Dict[str, Any]) -> str:
        metadata = style.get("metadata")
        if isinstance(metadata, dict) and metadata.get("name"):
            return str(metadata["name"])
        return "untitled"

    def __repr__(self) -> str:
        return f"SyntaxStyleValidator(total_validated={self.stats['total_validated']})"


_default_validator: Optional[SyntaxStyleValidator] = None


def get_style_validator() -> SyntaxStyleValidator:
    """Get default style validator instance (singleton)."""
    global _default_validator
    if _default_validator is None:
        _default_validator = SyntaxStyleValidator()
    return _default_validator
