"""Provider-agnostic lookup of intents and slot entities."""

import logging
from collections.abc import Callable, Sequence
from typing import Any

from pizzabot.config.models import IntentAliasesConfig, SlotAliasesConfig
from pizzabot.core.constants import Intent
from pizzabot.core.types import ClassifierResult, OrderingState
from pizzabot.validation import ValidatorRegistry
from pizzabot.validation.validators import parse_quantity

logger = logging.getLogger(__name__)


def resolve_intent(raw_intent: str | None, aliases: IntentAliasesConfig) -> Intent:
    """Map a provider intent name onto the closed Intent variant.

    Matching is case-insensitive; unknown or missing names map to Intent.NONE.
    """
    if not raw_intent:
        return Intent.NONE

    name = raw_intent.strip().lower()
    table = {
        Intent.ORDERING: aliases.ordering,
        Intent.CANCEL: aliases.cancel,
        Intent.HELP: aliases.help,
    }
    for intent, names in table.items():
        if name == intent.value or name in (n.lower() for n in names):
            return intent
    return Intent.NONE


def first_entity(
    result: ClassifierResult,
    aliases: Sequence[str],
    recognize: Callable[[Any], Any] = lambda value: value,
) -> Any | None:
    """Return the value of the first alias present in the result.

    Only the first value of each entity is considered. An alias whose value
    is not recognized (``recognize`` returns None) is skipped; the first
    recognized one wins.
    """
    for alias in aliases:
        values = result.entities.get(alias)
        if not values:
            continue
        value = recognize(values[0].value)
        if value is not None:
            return value
    return None


def merge_entities(
    state: OrderingState, result: ClassifierResult, aliases: SlotAliasesConfig
) -> bool:
    """Fill unset slots from recognized entities.

    Entity values go through the same validators as prompted answers, without
    emitting correction messages; rejected values are dropped.

    Returns:
        True if any slot was filled.
    """
    changed = False

    if not state.has_name:
        name = first_entity(result, aliases.pizza_name)
        if name is not None:
            changed |= _fill(state, "pizza_name", name)

    if not state.has_pieces:
        pieces = first_entity(result, aliases.pizza_pieces, parse_quantity)
        if pieces is not None:
            changed |= _fill(state, "pizza_pieces", pieces)

    return changed


def _fill(state: OrderingState, slot: str, raw: Any) -> bool:
    outcome = ValidatorRegistry.validate(slot, raw)
    if not outcome.valid:
        logger.debug(f"Entity for '{slot}' rejected: {raw!r}", extra={"slot": slot})
        return False
    setattr(state, slot, outcome.value)
    return True
