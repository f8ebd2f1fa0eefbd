"""State factory functions."""

from typing import Any

from pizzabot.core.types import DialogState, OrderingState, TurnState


def create_empty_state() -> TurnState:
    """Create the state of a conversation that has never been seen."""
    return TurnState(ordering=None, dialog=DialogState())


def get_or_create_ordering(state: TurnState) -> OrderingState:
    """Return the slot state, creating an empty one on first access."""
    if state.ordering is None:
        state.ordering = OrderingState()
    return state.ordering


def seed_ordering(state: TurnState, options: dict[str, Any] | None) -> OrderingState:
    """Create slot state from initial options unless it already exists."""
    if state.ordering is None:
        state.ordering = OrderingState.model_validate(options or {})
    return state.ordering


def clear_ordering(state: TurnState) -> None:
    """Reset slot state once an order ends (summary or cancellation)."""
    state.ordering = None
