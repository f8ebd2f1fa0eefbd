"""Unit tests for the classifier and store factories."""

import pytest
from langgraph.store.memory import InMemoryStore

from pizzabot.config.settings import NLUConfig, PersistenceConfig, WitConfig
from pizzabot.core.errors import ConfigError
from pizzabot.du.factory import create_classifier
from pizzabot.du.wit import WitClassifier
from pizzabot.persistence.factory import create_store


@pytest.mark.asyncio
async def test_creates_wit_classifier():
    classifier = create_classifier(NLUConfig(provider="wit", wit=WitConfig(token="secret")))

    assert isinstance(classifier, WitClassifier)
    await classifier.aclose()


def test_wit_without_token_fails():
    with pytest.raises(ConfigError):
        create_classifier(NLUConfig(provider="wit", wit=WitConfig(token=None)))


@pytest.mark.asyncio
async def test_memory_store_has_no_context_manager():
    store, store_cm = await create_store(PersistenceConfig(backend="memory"))

    assert isinstance(store, InMemoryStore)
    assert store_cm is None


@pytest.mark.asyncio
async def test_sqlite_store_persists_to_file(tmp_path):
    path = tmp_path / "nested" / "state.db"

    store, store_cm = await create_store(PersistenceConfig(backend="sqlite", path=str(path)))
    try:
        await store.aput(("pizzabot", "dialog"), "conv-1", {"frames": []})
        item = await store.aget(("pizzabot", "dialog"), "conv-1")
    finally:
        await store_cm.__aexit__(None, None, None)

    assert item.value == {"frames": []}
    assert path.exists()
