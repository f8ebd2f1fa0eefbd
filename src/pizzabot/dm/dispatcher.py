"""Turn dispatcher: one inbound activity end-to-end."""

import logging
from typing import assert_never

from pizzabot.config.models import BotConfig
from pizzabot.core.constants import ORDERING_SEQUENCE, ActivityType, DialogTurnStatus, Intent
from pizzabot.core.errors import NLUError, UnknownDialogStatusError
from pizzabot.core.interfaces import IIntentClassifier, IStateStore
from pizzabot.core.message_sink import MessageSink
from pizzabot.core.state import get_or_create_ordering
from pizzabot.core.types import Activity, HeroCard
from pizzabot.dm.context import TurnContext
from pizzabot.dm.ordering import OrderingSequence
from pizzabot.dm.stack import DialogStack
from pizzabot.dm.welcome import load_welcome_card
from pizzabot.du.entities import merge_entities, resolve_intent

logger = logging.getLogger(__name__)


class TurnDispatcher:
    """Orchestrates classification, interruptions and the dialog stack.

    This is the single place that turns failures into user-visible fallback
    messages, and it always persists state at the end of a message turn.
    """

    def __init__(
        self,
        config: BotConfig,
        classifier: IIntentClassifier,
        store: IStateStore,
        stack: DialogStack | None = None,
        welcome_card: HeroCard | None = None,
    ) -> None:
        self.config = config
        self.messages = config.messages
        self.classifier = classifier
        self.store = store
        self.stack = stack or DialogStack([OrderingSequence(config.messages)])
        self.welcome_card = welcome_card or load_welcome_card(config.welcome_card)

    async def on_turn(self, activity: Activity, sink: MessageSink) -> None:
        if activity.type == ActivityType.message:
            await self._on_message(activity, sink)
        elif activity.type == ActivityType.conversation_update:
            await self._on_members_added(activity, sink)
        else:
            logger.debug(f"Ignoring activity of type '{activity.type}'")

    async def _on_message(self, activity: Activity, sink: MessageSink) -> None:
        conversation_id, user_id = activity.conversation_id, activity.from_id
        state = await self.store.load(conversation_id, user_id)
        ctx = TurnContext(activity, state, sink)
        try:
            await self._handle_message(ctx)
        finally:
            await self.store.save(conversation_id, user_id, ctx.state)
            logger.debug(
                "Turn state saved",
                extra={
                    "conversation_id": conversation_id,
                    "depth": len(ctx.state.dialog.frames),
                },
            )

    async def _handle_message(self, ctx: TurnContext) -> None:
        text = ctx.activity.text or ""

        try:
            recognized = await self.classifier.classify(text)
        except NLUError as e:
            logger.warning(
                f"Classifier unavailable: {e}",
                extra={"conversation_id": ctx.conversation_id, "error_type": type(e).__name__},
            )
            await ctx.send(self.messages.nlu_unavailable)
            return

        intent = resolve_intent(recognized.intent, self.config.intents)
        logger.debug(
            f"Intent '{intent.value}' (raw '{recognized.intent}')",
            extra={"conversation_id": ctx.conversation_id, "intent": intent.value},
        )

        merge_entities(get_or_create_ordering(ctx.state), recognized, self.config.slots)

        match intent:
            case Intent.CANCEL:
                await self._cancel(ctx)
                return
            case Intent.HELP:
                await self._help(ctx)
                return
            case Intent.ORDERING | Intent.NONE:
                pass
            case _:
                assert_never(intent)

        try:
            result = await self.stack.continue_dialog(ctx, text)
            match result.status:
                case DialogTurnStatus.empty:
                    if not ctx.responded:
                        await self._route(ctx, intent)
                case DialogTurnStatus.waiting:
                    pass
                case DialogTurnStatus.complete:
                    self.stack.pop(ctx)
                case _:
                    raise UnknownDialogStatusError(f"Unhandled dialog status '{result.status}'")
        except UnknownDialogStatusError as e:
            logger.error(
                f"{e}; cancelling all dialogs",
                extra={"conversation_id": ctx.conversation_id},
            )
            await self.stack.cancel_all(ctx)

    async def _route(self, ctx: TurnContext, intent: Intent) -> None:
        if intent is Intent.ORDERING:
            started = await self.stack.push(ctx, ORDERING_SEQUENCE)
            if started.status == DialogTurnStatus.complete:
                self.stack.pop(ctx)
        else:
            await ctx.send(self.messages.not_understood)

    async def _cancel(self, ctx: TurnContext) -> None:
        if await self.stack.cancel_all(ctx):
            await ctx.send(self.messages.canceled)
        else:
            await ctx.send(self.messages.nothing_to_cancel)

    async def _help(self, ctx: TurnContext) -> None:
        await ctx.send(self.messages.help_ack)
        await ctx.send(self.messages.help_text)
        await self.stack.reprompt(ctx)

    async def _on_members_added(self, activity: Activity, sink: MessageSink) -> None:
        for member in activity.members_added:
            if member == activity.recipient_id:
                continue
            logger.info(
                "Welcoming new member",
                extra={"conversation_id": activity.conversation_id, "member": member},
            )
            await sink.send(self.welcome_card)
