"""MessageSink interface for outbound delivery.

This module defines the abstract interface and implementations for
sending prompts, confirmations and cards back to the user.
"""

from abc import ABC, abstractmethod

from pizzabot.core.types import OutboundMessage


class MessageSink(ABC):
    """Interface for delivering messages to the user."""

    @abstractmethod
    async def send(self, message: OutboundMessage) -> None:
        """Send a text message or rich card to the user."""
        ...


class BufferedMessageSink(MessageSink):
    """Buffers messages for HTTP replies or tests."""

    def __init__(self) -> None:
        self.messages: list[OutboundMessage] = []

    async def send(self, message: OutboundMessage) -> None:
        """Append message to buffer."""
        self.messages.append(message)

    @property
    def texts(self) -> list[str]:
        """Plain-text messages only, in send order."""
        return [m for m in self.messages if isinstance(m, str)]

    def clear(self) -> None:
        """Clear the message buffer."""
        self.messages.clear()
