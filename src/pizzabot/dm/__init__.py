"""Dialog management: waterfall sequences, dialog stack and turn dispatch."""

from pizzabot.dm.context import TurnContext
from pizzabot.dm.dispatcher import TurnDispatcher
from pizzabot.dm.ordering import OrderingSequence
from pizzabot.dm.stack import DialogStack
from pizzabot.dm.waterfall import StepOutcome, WaterfallSequence, WaterfallStep

__all__ = [
    "DialogStack",
    "OrderingSequence",
    "StepOutcome",
    "TurnContext",
    "TurnDispatcher",
    "WaterfallSequence",
    "WaterfallStep",
]
