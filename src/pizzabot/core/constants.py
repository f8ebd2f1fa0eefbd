"""Core constants and enums."""

from enum import Enum


class Intent(str, Enum):
    """Intents the dispatcher routes on."""

    ORDERING = "ordering"
    CANCEL = "cancel"
    HELP = "help"
    NONE = "none"


class SequenceStatus(str, Enum):
    """State of a waterfall sequence frame."""

    not_started = "not_started"
    running = "running"
    waiting_for_input = "waiting_for_input"
    completed = "completed"
    cancelled = "cancelled"


class DialogTurnStatus(str, Enum):
    """Outcome of driving the dialog stack for one turn."""

    empty = "empty"
    waiting = "waiting"
    complete = "complete"
    cancelled = "cancelled"


class ActivityType(str, Enum):
    """Inbound activity kinds handled by the dispatcher."""

    message = "message"
    conversation_update = "conversationUpdate"


ORDERING_SEQUENCE = "ordering"
