"""Bot runtime: wiring and per-conversation turn serialization."""

import asyncio
import logging
from collections.abc import AsyncIterator
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from typing import Any

from pizzabot.config.models import BotConfig
from pizzabot.core.constants import ActivityType
from pizzabot.core.interfaces import IIntentClassifier
from pizzabot.core.message_sink import BufferedMessageSink, MessageSink
from pizzabot.core.types import Activity, OutboundMessage
from pizzabot.dm.dispatcher import TurnDispatcher
from pizzabot.du.factory import create_classifier
from pizzabot.persistence.factory import create_store
from pizzabot.persistence.store import StateStore

logger = logging.getLogger(__name__)


class BotRuntime:
    """Processes activities for many conversations.

    Turns of one conversation run strictly one after another (including
    persistence); different conversations run concurrently.
    """

    def __init__(
        self,
        config: BotConfig,
        classifier: IIntentClassifier | None = None,
        store: StateStore | None = None,
    ) -> None:
        self.config = config
        self._classifier = classifier
        self._store = store
        self._store_cm: AbstractAsyncContextManager[Any] | None = None
        self._dispatcher: TurnDispatcher | None = None
        self._locks: dict[str, asyncio.Lock] = {}
        self._lock_users: dict[str, int] = {}

    async def __aenter__(self) -> "BotRuntime":
        """Create the classifier and the store unless they were injected."""
        if self._classifier is None:
            self._classifier = create_classifier(self.config.settings.nlu)

        if self._store is None:
            base_store, self._store_cm = await create_store(self.config.settings.persistence)
            self._store = StateStore(base_store)

        self._dispatcher = TurnDispatcher(self.config, self._classifier, self._store)
        logger.info("Bot runtime ready")
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        """Close the classifier client and the store."""
        aclose = getattr(self._classifier, "aclose", None)
        if aclose is not None:
            await aclose()
        if self._store_cm is not None:
            await self._store_cm.__aexit__(exc_type, exc_val, exc_tb)
            self._store_cm = None
        self._dispatcher = None

    @asynccontextmanager
    async def _conversation_turn(self, conversation_id: str) -> AsyncIterator[None]:
        """Hold the conversation's lock; drop it once no turn holds or awaits it."""
        lock = self._locks.setdefault(conversation_id, asyncio.Lock())
        self._lock_users[conversation_id] = self._lock_users.get(conversation_id, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._lock_users[conversation_id] -= 1
            if not self._lock_users[conversation_id]:
                del self._lock_users[conversation_id]
                del self._locks[conversation_id]

    async def process_activity(
        self, activity: Activity, sink: MessageSink | None = None
    ) -> list[OutboundMessage]:
        """Run one turn.

        Returns:
            Messages sent during the turn when no sink was given, else an empty list.
        """
        if self._dispatcher is None:
            raise RuntimeError("BotRuntime not initialized. Use 'async with' context.")

        buffer = BufferedMessageSink()
        async with self._conversation_turn(activity.conversation_id):
            await self._dispatcher.on_turn(activity, sink if sink is not None else buffer)
        return buffer.messages

    async def process_message(
        self,
        text: str,
        conversation_id: str = "default",
        user_id: str = "user",
        sink: MessageSink | None = None,
    ) -> list[OutboundMessage]:
        """Run one message turn."""
        activity = Activity(
            type=ActivityType.message.value,
            text=text,
            conversation_id=conversation_id,
            from_id=user_id,
        )
        return await self.process_activity(activity, sink)
