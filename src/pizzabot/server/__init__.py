"""HTTP server for pizzabot."""

from pizzabot.server.api import app, create_app

__all__ = ["app", "create_app"]
