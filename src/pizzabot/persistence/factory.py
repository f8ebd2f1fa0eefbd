"""Store factory.

Supports multiple backends:
- memory: In-memory (development/testing)
- sqlite: SQLite file-based (local persistence)
"""

import logging
from contextlib import AbstractAsyncContextManager
from pathlib import Path
from typing import Any

from langgraph.store.base import BaseStore
from langgraph.store.memory import InMemoryStore

from pizzabot.config.settings import PersistenceConfig
from pizzabot.core.errors import ConfigError

logger = logging.getLogger(__name__)


async def create_store(
    config: PersistenceConfig,
) -> tuple[BaseStore, AbstractAsyncContextManager[Any] | None]:
    """Create a store instance.

    Returns:
        Tuple of (store, context_manager). The context manager must be exited
        on shutdown when it is not None.

    Raises:
        ConfigError: If the backend is unknown or its dependencies are missing.
    """
    if config.backend == "memory":
        logger.debug("Creating in-memory store")
        return InMemoryStore(), None

    if config.backend == "sqlite":
        return await _create_sqlite_store(config.path)

    raise ConfigError(f"Unknown persistence backend: {config.backend}")


async def _create_sqlite_store(
    db_path: str,
) -> tuple[BaseStore, AbstractAsyncContextManager[Any]]:
    try:
        from langgraph.store.sqlite.aio import AsyncSqliteStore
    except ImportError as e:
        raise ConfigError(
            "SQLite store requires 'langgraph-checkpoint-sqlite'. "
            "Install with: pip install langgraph-checkpoint-sqlite"
        ) from e

    path = Path(db_path)
    path.parent.mkdir(parents=True, exist_ok=True)

    logger.info(f"Creating SQLite store at {path}")
    store_cm = AsyncSqliteStore.from_conn_string(str(path))
    store = await store_cm.__aenter__()
    await store.setup()
    return store, store_cm
