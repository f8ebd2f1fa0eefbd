"""Turn state persistence on top of a LangGraph key-value store."""

import logging

from langgraph.store.base import BaseStore
from pydantic import ValidationError

from pizzabot.core.errors import StateError
from pizzabot.core.state import create_empty_state
from pizzabot.core.types import DialogState, OrderingState, TurnState

logger = logging.getLogger(__name__)

ORDERING_NAMESPACE = ("pizzabot", "ordering")
DIALOG_NAMESPACE = ("pizzabot", "dialog")


class StateStore:
    """Reads and writes the state of one conversation turn.

    Slot state is keyed by conversation and user; dialog state by
    conversation. Each turn does one read and one write of each.
    """

    def __init__(self, store: BaseStore) -> None:
        self._store = store

    @staticmethod
    def _ordering_key(conversation_id: str, user_id: str) -> str:
        return f"{conversation_id}/{user_id}"

    async def load(self, conversation_id: str, user_id: str) -> TurnState:
        try:
            ordering_item = await self._store.aget(
                ORDERING_NAMESPACE, self._ordering_key(conversation_id, user_id)
            )
            dialog_item = await self._store.aget(DIALOG_NAMESPACE, conversation_id)
        except Exception as e:
            raise StateError(f"Failed to load state for {conversation_id}: {e}") from e

        state = create_empty_state()
        try:
            if ordering_item is not None:
                state.ordering = OrderingState.model_validate(ordering_item.value)
            if dialog_item is not None:
                state.dialog = DialogState.model_validate(dialog_item.value)
        except ValidationError as e:
            raise StateError(f"Stored state for {conversation_id} is corrupt: {e}") from e

        logger.debug(
            f"Loaded state for {conversation_id}",
            extra={"conversation_id": conversation_id, "depth": len(state.dialog.frames)},
        )
        return state

    async def save(self, conversation_id: str, user_id: str, state: TurnState) -> None:
        ordering_key = self._ordering_key(conversation_id, user_id)
        try:
            if state.ordering is None:
                await self._store.adelete(ORDERING_NAMESPACE, ordering_key)
            else:
                await self._store.aput(
                    ORDERING_NAMESPACE, ordering_key, state.ordering.model_dump(mode="json")
                )
            await self._store.aput(
                DIALOG_NAMESPACE, conversation_id, state.dialog.model_dump(mode="json")
            )
        except Exception as e:
            raise StateError(f"Failed to save state for {conversation_id}: {e}") from e
