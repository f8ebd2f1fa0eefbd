"""Runtime module."""

from pizzabot.runtime.loop import BotRuntime

__all__ = ["BotRuntime"]
