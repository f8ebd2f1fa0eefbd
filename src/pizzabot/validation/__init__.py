"""Validation module for pizzabot"""

# Import validators to auto-register them
from pizzabot.validation import validators  # noqa: F401
from pizzabot.validation.registry import ValidatorRegistry
from pizzabot.validation.result import ValidationResult

__all__ = ["ValidationResult", "ValidatorRegistry"]
