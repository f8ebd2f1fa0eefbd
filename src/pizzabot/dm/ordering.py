"""Pizza ordering sequence."""

import logging
from typing import Any

from pizzabot.config.models import MessagesConfig
from pizzabot.core.constants import ORDERING_SEQUENCE
from pizzabot.core.state import clear_ordering, get_or_create_ordering, seed_ordering
from pizzabot.core.types import DialogFrame
from pizzabot.dm.context import TurnContext
from pizzabot.dm.waterfall import StepOutcome, WaterfallSequence, WaterfallStep

logger = logging.getLogger(__name__)


class OrderingSequence(WaterfallSequence):
    """Collects the pizza name and number of pieces, then summarizes.

    Collapses to the summary as soon as both slots are filled, whether they
    were answered, merged from entities, or passed as initial options.
    """

    def __init__(self, messages: MessagesConfig | None = None) -> None:
        self.messages = messages or MessagesConfig()
        super().__init__(
            ORDERING_SEQUENCE,
            [
                WaterfallStep("initialize", self._initialize),
                WaterfallStep(
                    "collect_pizza_name",
                    self._collect_pizza_name,
                    validator="pizza_name",
                    on_value=self._store_pizza_name,
                ),
                WaterfallStep(
                    "collect_pizza_pieces",
                    self._collect_pizza_pieces,
                    validator="pizza_pieces",
                    on_value=self._store_pizza_pieces,
                ),
                WaterfallStep("summarize", self._summarize),
            ],
        )

    async def _initialize(self, ctx: TurnContext, frame: DialogFrame) -> StepOutcome:
        seed_ordering(ctx.state, frame.options)
        return StepOutcome.next()

    async def _collect_pizza_name(self, ctx: TurnContext, frame: DialogFrame) -> StepOutcome:
        ordering = get_or_create_ordering(ctx.state)
        if ordering.is_complete:
            return StepOutcome.jump("summarize")
        if not ordering.has_name:
            return StepOutcome.ask(self.messages.pizza_name_prompt)
        return StepOutcome.next()

    async def _collect_pizza_pieces(self, ctx: TurnContext, frame: DialogFrame) -> StepOutcome:
        ordering = get_or_create_ordering(ctx.state)
        if not ordering.has_pieces:
            return StepOutcome.ask(self.messages.pizza_pieces_prompt)
        return StepOutcome.next()

    async def _summarize(self, ctx: TurnContext, frame: DialogFrame) -> StepOutcome:
        ordering = get_or_create_ordering(ctx.state)
        summary = {"pizza_name": ordering.pizza_name, "pizza_pieces": ordering.pizza_pieces}
        await ctx.send(
            self.messages.order_summary.format(
                name=ordering.pizza_name, pieces=ordering.pizza_pieces
            )
        )
        logger.info(
            "Order collected",
            extra={"conversation_id": ctx.conversation_id, **summary},
        )
        clear_ordering(ctx.state)
        return StepOutcome.end(summary)

    def _store_pizza_name(self, ctx: TurnContext, value: Any) -> None:
        ordering = get_or_create_ordering(ctx.state)
        if not ordering.has_name:
            ordering.pizza_name = str(value)

    def _store_pizza_pieces(self, ctx: TurnContext, value: Any) -> None:
        ordering = get_or_create_ordering(ctx.state)
        if not ordering.has_pieces:
            ordering.pizza_pieces = int(value)

    async def on_cancel(self, ctx: TurnContext, frame: DialogFrame) -> None:
        await super().on_cancel(ctx, frame)
        clear_ordering(ctx.state)
