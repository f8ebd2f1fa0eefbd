"""Core types, errors and interfaces."""

from pizzabot.core.constants import (
    ActivityType,
    DialogTurnStatus,
    Intent,
    SequenceStatus,
)
from pizzabot.core.errors import (
    ConfigError,
    DialogStackError,
    NLUError,
    PizzaBotError,
    StateError,
)
from pizzabot.core.types import (
    Activity,
    ClassifierResult,
    DialogFrame,
    DialogState,
    EntityValue,
    HeroCard,
    OrderingState,
    TurnState,
)

__all__ = [
    "Activity",
    "ActivityType",
    "ClassifierResult",
    "ConfigError",
    "DialogFrame",
    "DialogStackError",
    "DialogState",
    "DialogTurnStatus",
    "EntityValue",
    "HeroCard",
    "Intent",
    "NLUError",
    "OrderingState",
    "PizzaBotError",
    "SequenceStatus",
    "StateError",
    "TurnState",
]
