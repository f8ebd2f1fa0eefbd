"""End-to-end ordering conversations through BotRuntime.

Runs against an in-memory store and a scripted classifier that mimics the
entity extraction of a real NLU provider.
"""

import asyncio

import pytest
import pytest_asyncio
from langgraph.store.memory import InMemoryStore

from pizzabot.config.models import BotConfig
from pizzabot.core.message_sink import BufferedMessageSink
from pizzabot.core.types import Activity, HeroCard
from pizzabot.persistence.store import StateStore
from pizzabot.runtime.loop import BotRuntime
from tests.mocks import ScriptedClassifier, make_result

NAME_PROMPT = "What pizza do you take?"
PIECES_PROMPT = "How many pieces?"


@pytest.fixture
def nlu() -> ScriptedClassifier:
    return ScriptedClassifier(
        {
            "I want a pizza": make_result("ordering_pizza"),
            "I'd like 3 Hawaiian": make_result(
                "ordering_pizza", **{"pizza_name:pizza_name": "Hawaiian", "wit$number:number": 3}
            ),
            "Hawaiian, three pieces": make_result(pizza_name="Hawaiian", number="three"),
            "2": make_result(number=2),
            "7": make_result(number=7),
            "cancel": make_result("cancel"),
            "help": make_result("Help"),
        }
    )


@pytest_asyncio.fixture
async def runtime(nlu):
    async with BotRuntime(BotConfig(), classifier=nlu, store=StateStore(InMemoryStore())) as rt:
        yield rt


async def texts(runtime: BotRuntime, text: str, conversation_id: str = "conv-1") -> list[str]:
    replies = await runtime.process_message(text, conversation_id=conversation_id)
    return [m for m in replies if isinstance(m, str)]


@pytest.mark.asyncio
async def test_margherita_order(runtime):
    assert await texts(runtime, "I want a pizza") == [NAME_PROMPT]
    assert await texts(runtime, "Margherita") == [PIECES_PROMPT]
    assert await texts(runtime, "2") == ["Your order: Margherita 2"]
    # Slot state is gone, so a new order starts from scratch
    assert await texts(runtime, "I want a pizza") == [NAME_PROMPT]


@pytest.mark.asyncio
async def test_corrections_until_valid(runtime):
    await texts(runtime, "I want a pizza")

    assert await texts(runtime, "AB") == [
        "Names of pizzas needs to be at least `3` characters long.",
        NAME_PROMPT,
    ]
    assert await texts(runtime, "Quattro Formaggi") == [PIECES_PROMPT]
    assert await texts(runtime, "7") == [
        "The number of pizza pieces should be between `1` and `4`.",
        PIECES_PROMPT,
    ]
    assert await texts(runtime, "two") == ["Your order: Quattro Formaggi 2"]


@pytest.mark.asyncio
async def test_single_utterance_order(runtime):
    assert await texts(runtime, "I'd like 3 Hawaiian") == ["Your order: Hawaiian 3"]


@pytest.mark.asyncio
async def test_entities_before_intent(runtime):
    assert await texts(runtime, "Hawaiian, three pieces") == [
        "I don't understand what you are saying."
    ]
    assert await texts(runtime, "I want a pizza") == ["Your order: Hawaiian 3"]


@pytest.mark.asyncio
async def test_cancel_then_reorder(runtime):
    await texts(runtime, "I want a pizza")
    await texts(runtime, "Margherita")

    assert await texts(runtime, "cancel") == ["Ok. I canceled the last activity."]
    assert await texts(runtime, "cancel") == ["I have nothing to cancel."]
    assert await texts(runtime, "I want a pizza") == [NAME_PROMPT]


@pytest.mark.asyncio
async def test_help_mid_order(runtime):
    await texts(runtime, "I want a pizza")
    await texts(runtime, "Margherita")

    assert await texts(runtime, "help") == [
        "Happy to help.",
        "I order pizzas, give help or cancel what I am doing.",
        PIECES_PROMPT,
    ]
    assert await texts(runtime, "2") == ["Your order: Margherita 2"]


@pytest.mark.asyncio
async def test_welcome_card(runtime):
    replies = await runtime.process_activity(
        Activity(type="conversationUpdate", conversation_id="conv-1", members_added=["bot", "ann"])
    )

    assert len(replies) == 1
    assert isinstance(replies[0], HeroCard)


@pytest.mark.asyncio
async def test_explicit_sink_receives_messages(runtime):
    sink = BufferedMessageSink()

    returned = await runtime.process_message("I want a pizza", sink=sink)

    assert returned == []
    assert sink.texts == [NAME_PROMPT]


@pytest.mark.asyncio
async def test_conversations_run_concurrently(runtime):
    conversations = [f"conv-{i}" for i in range(5)]

    await asyncio.gather(*(texts(runtime, "I want a pizza", c) for c in conversations))
    await asyncio.gather(*(texts(runtime, "Margherita", c) for c in conversations))
    results = await asyncio.gather(*(texts(runtime, "2", c) for c in conversations))

    assert results == [["Your order: Margherita 2"]] * len(conversations)


@pytest.mark.asyncio
async def test_turns_of_one_conversation_are_serialized(runtime):
    await texts(runtime, "I want a pizza")

    # Both answers race on the same conversation; the second must see the first
    first, second = await asyncio.gather(
        texts(runtime, "Margherita"), texts(runtime, "2")
    )

    assert first == [PIECES_PROMPT]
    assert second == ["Your order: Margherita 2"]


@pytest.mark.asyncio
async def test_runtime_requires_context():
    runtime = BotRuntime(BotConfig(), classifier=ScriptedClassifier())

    with pytest.raises(RuntimeError, match="not initialized"):
        await runtime.process_message("hi")


@pytest.mark.asyncio
async def test_conversation_locks_are_released(runtime):
    conversations = [f"conv-{i}" for i in range(5)]

    await asyncio.gather(*(texts(runtime, "I want a pizza", c) for c in conversations))
    await asyncio.gather(texts(runtime, "Margherita"), texts(runtime, "2"))

    assert runtime._locks == {}
    assert runtime._lock_users == {}


@pytest.mark.asyncio
async def test_conversation_lock_released_after_failed_turn(runtime, nlu):
    nlu.error = RuntimeError("boom")

    with pytest.raises(RuntimeError):
        await runtime.process_message("hi")

    assert runtime._locks == {}
