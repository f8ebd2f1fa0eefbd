"""Built-in slot validators for the ordering sequence"""

import re
from typing import Any

from pizzabot.validation.registry import ValidatorRegistry
from pizzabot.validation.result import ValidationResult

PIZZA_NAME_MIN_LENGTH = 3
MIN_PIZZA_PIECES = 1
MAX_PIZZA_PIECES = 4

PIZZA_NAME_MESSAGE = (
    f"Names of pizzas needs to be at least `{PIZZA_NAME_MIN_LENGTH}` characters long."
)
PIZZA_PIECES_MESSAGE = (
    f"The number of pizza pieces should be between `{MIN_PIZZA_PIECES}` and `{MAX_PIZZA_PIECES}`."
)

_NUMBER_WORDS = {
    "zero": 0,
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
    "ten": 10,
}
_NUMBER_PATTERN = re.compile(r"-?\d+(?:[.,]\d+)?")


def parse_quantity(value: Any) -> int | None:
    """Recognize an integer in a raw answer ("2", "2 pieces", "two", 2.0)."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if not isinstance(value, str):
        return None

    # Exactly one whole number; fractions and ranges are rejected
    numbers = _NUMBER_PATTERN.findall(value)
    if numbers:
        if len(numbers) > 1 or not numbers[0].lstrip("-").isdigit():
            return None
        return int(numbers[0])

    words = [w for w in re.findall(r"[a-z]+", value.lower()) if w in _NUMBER_WORDS]
    if len(words) != 1:
        return None
    return _NUMBER_WORDS[words[0]]


@ValidatorRegistry.register("pizza_name")
def validate_pizza_name(value: Any) -> ValidationResult:
    """
    Validate a pizza name.

    The value is trimmed; anything shorter than the minimum length
    (including blank input) is rejected.
    """
    text = value.strip() if isinstance(value, str) else ""
    if len(text) >= PIZZA_NAME_MIN_LENGTH:
        return ValidationResult.accept(text)
    return ValidationResult.reject(PIZZA_NAME_MESSAGE)


@ValidatorRegistry.register("pizza_pieces")
def validate_pizza_pieces(value: Any) -> ValidationResult:
    """Validate the number of pieces lies in the closed range [1, 4]."""
    pieces = parse_quantity(value)
    if pieces is not None and MIN_PIZZA_PIECES <= pieces <= MAX_PIZZA_PIECES:
        return ValidationResult.accept(pieces)
    return ValidationResult.reject(PIZZA_PIECES_MESSAGE)
