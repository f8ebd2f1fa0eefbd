"""Outcome of validating a candidate slot value."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ValidationResult:
    """Accepted value, or the correction message to show the user."""

    valid: bool
    value: Any = None
    message: str | None = None

    @classmethod
    def accept(cls, value: Any) -> "ValidationResult":
        return cls(valid=True, value=value)

    @classmethod
    def reject(cls, message: str) -> "ValidationResult":
        return cls(valid=False, message=message)
