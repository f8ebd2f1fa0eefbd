"""Settings configuration models.

Global settings for the NLU provider, persistence and logging.
"""

import os
from typing import Literal

from pydantic import BaseModel, Field

NLUProvider = Literal["wit", "luis", "dspy"]
PersistenceBackend = Literal["memory", "sqlite"]


class WitConfig(BaseModel):
    """Wit.ai provider configuration."""

    base_url: str = Field(default="https://api.wit.ai", description="Wit.ai API root")
    token: str | None = Field(
        default_factory=lambda: os.environ.get("WIT_ACCESS_TOKEN"),
        description="Server access token (falls back to WIT_ACCESS_TOKEN)",
    )
    api_version: str | None = Field(
        default=None, description="Value of the `v` query parameter; today's date when unset"
    )


class LuisConfig(BaseModel):
    """LUIS v3 prediction endpoint configuration."""

    app_id: str | None = Field(default_factory=lambda: os.environ.get("LUIS_APP_ID"))
    endpoint_key: str | None = Field(default_factory=lambda: os.environ.get("LUIS_ENDPOINT_KEY"))
    endpoint: str | None = Field(
        default_factory=lambda: os.environ.get("LUIS_ENDPOINT"),
        description="e.g. https://westeurope.api.cognitive.microsoft.com",
    )
    slot: str = Field(default="production", description="Published slot to query")


class DSPyConfig(BaseModel):
    """LLM-backed classifier configuration."""

    provider: str = Field(default="openai", description="Model provider (openai, anthropic, etc.)")
    model: str = Field(default="gpt-4o-mini", description="Model identifier")
    temperature: float = Field(default=0.0, description="Temperature for generation")


class NLUConfig(BaseModel):
    """Intent classifier selection."""

    provider: NLUProvider = Field(default="wit", description="Classifier backend")
    timeout: float = Field(default=10.0, gt=0, description="HTTP timeout in seconds")
    wit: WitConfig = Field(default_factory=WitConfig)
    luis: LuisConfig = Field(default_factory=LuisConfig)
    dspy: DSPyConfig = Field(default_factory=DSPyConfig)


class PersistenceConfig(BaseModel):
    """Persistence configuration."""

    backend: PersistenceBackend = Field(default="memory", description="Backend type")
    path: str = Field(default="pizzabot.db", description="SQLite database path")


class SettingsConfig(BaseModel):
    """Global settings configuration."""

    nlu: NLUConfig = Field(default_factory=NLUConfig)
    persistence: PersistenceConfig = Field(default_factory=PersistenceConfig)
    log_level: str = Field(default="INFO", description="Log level for pizzabot loggers")
