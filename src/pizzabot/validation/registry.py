"""Thread-safe registry for slot validators"""

import logging
from collections.abc import Callable
from threading import Lock
from typing import Any

from pizzabot.validation.result import ValidationResult

logger = logging.getLogger(__name__)

Validator = Callable[[Any], ValidationResult]

_validators: dict[str, Validator] = {}
_validators_lock = Lock()


class ValidatorRegistry:
    """
    Thread-safe registry for slot validators.

    All mutations are protected by a lock to ensure thread-safety
    in concurrent environments.
    """

    @classmethod
    def register(cls, name: str) -> Callable[[Validator], Validator]:
        """
        Register a validator function.

        Usage:
            @ValidatorRegistry.register("pizza_name")
            def validate_pizza_name(value: Any) -> ValidationResult:
                ...

        Args:
            name: Semantic name for the validator

        Returns:
            Decorator function
        """

        def decorator(func: Validator) -> Validator:
            with _validators_lock:
                if name in _validators:
                    logger.warning(
                        f"Validator '{name}' already registered, overwriting",
                        extra={"validator_name": name},
                    )
                _validators[name] = func
                logger.debug(
                    f"Registered validator '{name}'",
                    extra={"validator_name": name},
                )
            return func

        return decorator

    @classmethod
    def get(cls, name: str) -> Validator:
        """
        Get validator by name.

        Raises:
            ValueError: If validator is not registered
        """
        with _validators_lock:
            if name not in _validators:
                raise ValueError(
                    f"Validator '{name}' not registered. Available: {list(_validators.keys())}"
                )
            return _validators[name]

    @classmethod
    def validate(cls, name: str, value: Any) -> ValidationResult:
        """Validate value using the named validator."""
        validator = cls.get(name)
        return validator(value)

    @classmethod
    def list_validators(cls) -> list[str]:
        """List all registered validator names."""
        with _validators_lock:
            return list(_validators.keys())

    @classmethod
    def is_registered(cls, name: str) -> bool:
        """Check if validator is registered."""
        with _validators_lock:
            return name in _validators
