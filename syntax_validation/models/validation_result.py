"""
Validation Result Data Models

Defines the record produced for every defect found in a syntax style.

Design Philosophy:
- Immutable (dataclasses with frozen=True)
- Self-documenting (localized, human-readable fields)
- Serializable (can be converted to JSON for API responses)
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Any

from .. import messages


class ErrorRole(Enum):
    """
    Which part of a definition is at fault.
    """
    BEGIN_STRING = "Begin string"
    END_STRING = "End string"
    REGULAR_EXPRESSION = "Regular expression"


@dataclass(frozen=True)
class SyntaxValidationError:
    """
    Represents a single defect found in a style definition.

    Attributes:
        type: Syntax type key the definition belongs to (e.g. "keywords",
            "outline", "block comment")
        role: Part of the definition that failed
        string: The offending text fragment
        failure_reason: Human-readable description of the failure
    """
    type: str
    role: ErrorRole
    string: str
    failure_reason: str

    @property
    def localized_type(self) -> str:
        return messages.type_label(self.type)

    @property
    def localized_role(self) -> str:
        return messages.localize(self.role.value)

    @property
    def localized_failure_reason(self) -> str:
        return messages.localize(self.failure_reason)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            'type': self.type,
            'role': self.role.value,
            'string': self.string,
            'failure_reason': self.failure_reason,
        }

    def __str__(self) -> str:
        """Human-readable representation."""
        return f"{self.localized_type} [{self.localized_role}] :{self.string} > {self.localized_failure_reason}"
