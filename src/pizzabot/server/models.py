"""API Models - Pydantic models for FastAPI endpoints."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

from pizzabot.core.types import HeroCard, OutboundMessage


class OutboundPayload(BaseModel):
    """One message sent back to the channel."""

    type: Literal["text", "hero_card"]
    text: str | None = None
    card: HeroCard | None = None

    @classmethod
    def from_message(cls, message: OutboundMessage) -> "OutboundPayload":
        if isinstance(message, HeroCard):
            return cls(type="hero_card", card=message)
        return cls(type="text", text=message)


class ActivityResponse(BaseModel):
    """Messages produced while processing an activity."""

    conversation_id: str
    messages: list[OutboundPayload] = Field(default_factory=list)


class HealthResponse(BaseModel):
    """Health check response."""

    status: Literal["healthy", "starting"]
    version: str
    timestamp: str = Field(default_factory=lambda: datetime.now().isoformat())
