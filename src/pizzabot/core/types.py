"""Core type definitions for turn processing."""

import uuid
from typing import Any, Literal, TypeAlias

from pydantic import BaseModel, Field

from pizzabot.core.constants import DialogTurnStatus, SequenceStatus


class OrderingState(BaseModel):
    """Slots collected so far for the active order."""

    pizza_name: str | None = None
    pizza_pieces: int | None = None

    @property
    def has_name(self) -> bool:
        return bool(self.pizza_name and self.pizza_name.strip())

    @property
    def has_pieces(self) -> bool:
        return self.pizza_pieces is not None

    @property
    def is_complete(self) -> bool:
        """Both slots are filled; the order only needs to be summarized."""
        return self.has_name and self.has_pieces


class DialogFrame(BaseModel):
    """Activation record of one in-progress sequence on the dialog stack."""

    frame_id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    sequence_id: str
    step_index: int = 0
    status: SequenceStatus = SequenceStatus.not_started
    options: dict[str, Any] = Field(default_factory=dict)
    prompt: str | None = Field(
        default=None, description="Question the frame is waiting an answer for"
    )


class DialogState(BaseModel):
    """Per-conversation LIFO of active frames (top is the last element)."""

    frames: list[DialogFrame] = Field(default_factory=list)


class TurnState(BaseModel):
    """Explicit state handle threaded through one turn."""

    ordering: OrderingState | None = None
    dialog: DialogState = Field(default_factory=DialogState)


class DialogTurnResult(BaseModel):
    """Result of pushing or continuing the dialog stack."""

    status: DialogTurnStatus
    result: Any = None


class EntityValue(BaseModel):
    """A single value extracted by the classifier."""

    value: Any
    confidence: float = 1.0


class ClassifierResult(BaseModel):
    """Intent and entities recognized in one utterance."""

    text: str = ""
    intent: str = "none"
    score: float = 0.0
    entities: dict[str, list[EntityValue]] = Field(default_factory=dict)


class CardAction(BaseModel):
    """Button on a rich card."""

    type: Literal["openUrl"] = "openUrl"
    title: str
    value: str


class HeroCard(BaseModel):
    """Rich card payload sent to new conversation members."""

    title: str
    subtitle: str = ""
    text: str = ""
    images: list[str] = Field(default_factory=list)
    buttons: list[CardAction] = Field(default_factory=list)


class Activity(BaseModel):
    """Inbound event for one turn."""

    type: str
    text: str | None = None
    conversation_id: str
    from_id: str = "user"
    recipient_id: str = "bot"
    members_added: list[str] = Field(default_factory=list)


OutboundMessage: TypeAlias = str | HeroCard
