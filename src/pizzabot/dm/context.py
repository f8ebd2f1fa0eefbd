"""Per-turn context handed to every dialog operation."""

import logging

from pizzabot.core.message_sink import MessageSink
from pizzabot.core.types import Activity, OutboundMessage, TurnState

logger = logging.getLogger(__name__)


class TurnContext:
    """Activity, explicit state handle and outbound sink for one turn.

    Tracks whether anything was sent so the dispatcher can tell a consumed
    turn from an idle one.
    """

    def __init__(self, activity: Activity, state: TurnState, sink: MessageSink) -> None:
        self.activity = activity
        self.state = state
        self._sink = sink
        self.responded = False

    @property
    def conversation_id(self) -> str:
        return self.activity.conversation_id

    @property
    def user_id(self) -> str:
        return self.activity.from_id

    async def send(self, message: OutboundMessage) -> None:
        await self._sink.send(message)
        self.responded = True
