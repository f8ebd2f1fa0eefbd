"""Shared fixtures for pizzabot tests.

Uses a scripted classifier and an in-memory store for deterministic, fast
tests without NLU API calls.
"""

import pytest
from langgraph.store.memory import InMemoryStore

from pizzabot.config.models import BotConfig
from pizzabot.core.message_sink import BufferedMessageSink
from pizzabot.core.state import create_empty_state
from pizzabot.core.types import Activity, TurnState
from pizzabot.dm.context import TurnContext
from pizzabot.dm.dispatcher import TurnDispatcher
from pizzabot.persistence.store import StateStore
from tests.mocks import ScriptedClassifier, make_result


@pytest.fixture
def config() -> BotConfig:
    return BotConfig()


@pytest.fixture
def classifier() -> ScriptedClassifier:
    return ScriptedClassifier(
        {
            "I want a pizza": make_result("ordering_pizza"),
            "cancel": make_result("cancel"),
            "help": make_result("help"),
        }
    )


@pytest.fixture
def state_store() -> StateStore:
    return StateStore(InMemoryStore())


@pytest.fixture
def dispatcher(config, classifier, state_store) -> TurnDispatcher:
    return TurnDispatcher(config, classifier, state_store)


@pytest.fixture
def create_context():
    """Factory fixture for a TurnContext over a fresh state and buffered sink."""

    def _create(state: TurnState | None = None, text: str | None = None) -> TurnContext:
        activity = Activity(type="message", text=text, conversation_id="conv-1", from_id="user-1")
        return TurnContext(activity, state or create_empty_state(), BufferedMessageSink())

    return _create


@pytest.fixture
def say(dispatcher):
    """Run one message turn on conv-1 and return the texts sent back."""

    async def _say(text: str, conversation_id: str = "conv-1") -> list[str]:
        sink = BufferedMessageSink()
        activity = Activity(
            type="message", text=text, conversation_id=conversation_id, from_id="user-1"
        )
        await dispatcher.on_turn(activity, sink)
        return sink.texts

    return _say


@pytest.fixture
def result_factory():
    """Factory fixture for classifier results (see make_result)."""
    return make_result
