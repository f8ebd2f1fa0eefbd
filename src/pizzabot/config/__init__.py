"""Configuration module for pizzabot."""

from pizzabot.config.loader import ConfigLoader
from pizzabot.config.models import BotConfig, MessagesConfig

__all__ = ["BotConfig", "ConfigLoader", "MessagesConfig"]
