"""State persistence."""

from pizzabot.persistence.factory import create_store
from pizzabot.persistence.store import StateStore

__all__ = ["StateStore", "create_store"]
