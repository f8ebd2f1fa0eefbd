"""pizzabot - conversational turn processor for a pizza ordering assistant.

Each turn classifies one utterance with an external NLU service, merges
recognized entities into the order, handles cancel/help interruptions and
drives a waterfall dialog that collects the pizza name and number of pieces.

Quick start:
    from pizzabot import BotConfig, BotRuntime

    async with BotRuntime(BotConfig()) as runtime:
        replies = await runtime.process_message("I want a pizza", conversation_id="c1")
"""

from pizzabot.__version__ import __version__
from pizzabot.config import BotConfig, ConfigLoader
from pizzabot.core.errors import (
    ConfigError,
    DialogStackError,
    NLUError,
    PizzaBotError,
    StateError,
)
from pizzabot.core.types import Activity, ClassifierResult, HeroCard, OrderingState, TurnState
from pizzabot.dm import DialogStack, OrderingSequence, TurnDispatcher
from pizzabot.runtime import BotRuntime

__all__ = [
    "__version__",
    "Activity",
    "BotConfig",
    "BotRuntime",
    "ClassifierResult",
    "ConfigError",
    "ConfigLoader",
    "DialogStack",
    "DialogStackError",
    "HeroCard",
    "NLUError",
    "OrderingSequence",
    "OrderingState",
    "PizzaBotError",
    "StateError",
    "TurnDispatcher",
    "TurnState",
]
