"""pizzabot FastAPI application.

Accepts channel activities and returns the messages the bot sends back.
"""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request

from pizzabot import __version__
from pizzabot.config.loader import ConfigLoader
from pizzabot.config.models import BotConfig
from pizzabot.core.types import Activity
from pizzabot.observability.logging import setup_logging
from pizzabot.runtime.loop import BotRuntime
from pizzabot.server.dependencies import RuntimeDep
from pizzabot.server.errors import global_exception_handler
from pizzabot.server.models import ActivityResponse, HealthResponse, OutboundPayload

logger = logging.getLogger(__name__)


def _load_config() -> BotConfig:
    config_path = os.environ.get("PIZZABOT_CONFIG_PATH")
    if not config_path and os.path.exists("pizzabot.yaml"):
        config_path = "pizzabot.yaml"
    if not config_path:
        logger.warning("PIZZABOT_CONFIG_PATH not set and pizzabot.yaml not found. Using defaults.")
        return BotConfig()
    logger.info(f"Loading config from {config_path}")
    return ConfigLoader.load(config_path)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan - initialize on startup, cleanup on shutdown."""
    from dotenv import load_dotenv

    load_dotenv()

    config = getattr(app.state, "config", None) or _load_config()
    setup_logging(os.environ.get("PIZZABOT_LOG_LEVEL") or config.settings.log_level)
    async with BotRuntime(config) as runtime:
        app.state.runtime = runtime
        app.state.config = config
        logger.info("Bot runtime initialized and ready.")
        yield
        logger.info("Bot runtime cleanup...")
    app.state.runtime = None


app = FastAPI(
    title="pizzabot",
    description="Turn processor for a pizza ordering assistant",
    version=__version__,
    lifespan=lifespan,
)

app.add_exception_handler(Exception, global_exception_handler)


@app.get("/health", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    """Liveness probe."""
    runtime = getattr(request.app.state, "runtime", None)
    return HealthResponse(status="healthy" if runtime else "starting", version=__version__)


@app.post("/api/messages", response_model=ActivityResponse)
async def process_activity(activity: Activity, runtime: RuntimeDep) -> ActivityResponse:
    """Process one inbound activity and return the bot's replies."""
    messages = await runtime.process_activity(activity)
    return ActivityResponse(
        conversation_id=activity.conversation_id,
        messages=[OutboundPayload.from_message(m) for m in messages],
    )


def create_app(config: BotConfig | None = None) -> FastAPI:
    """Factory function."""
    if config:
        app.state.config = config
    return app
