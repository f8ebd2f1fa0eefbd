"""Core interfaces (Protocols) for external collaborators."""

from typing import Protocol

from pizzabot.core.types import ClassifierResult, TurnState


class IIntentClassifier(Protocol):
    """Interface for NLU providers.

    Implementations raise NLUError (or a subclass) when the provider cannot
    be reached or returns something unusable. They never default to the
    "none" intent on failure.
    """

    async def classify(self, utterance: str) -> ClassifierResult:
        """Map raw utterance text to an intent and entities."""
        ...


class IStateStore(Protocol):
    """Interface for per-conversation state persistence."""

    async def load(self, conversation_id: str, user_id: str) -> TurnState:
        """Read slot state and dialog state for a conversation turn."""
        ...

    async def save(self, conversation_id: str, user_id: str, state: TurnState) -> None:
        """Write slot state and dialog state at the end of a turn."""
        ...
