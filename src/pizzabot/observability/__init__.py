"""Observability module for pizzabot."""

from pizzabot.observability.logging import setup_logging

__all__ = ["setup_logging"]
