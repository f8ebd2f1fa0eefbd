"""Unit tests for intent resolution and entity merging."""

import pytest

from pizzabot.config.models import IntentAliasesConfig, SlotAliasesConfig
from pizzabot.core.constants import Intent
from pizzabot.core.types import ClassifierResult, EntityValue, OrderingState
from pizzabot.du.entities import first_entity, merge_entities, resolve_intent


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("ordering_pizza", Intent.ORDERING),
        ("OrderingPizza", Intent.ORDERING),
        ("cancel", Intent.CANCEL),
        ("Help", Intent.HELP),
        ("none", Intent.NONE),
        ("greeting", Intent.NONE),
        ("", Intent.NONE),
        (None, Intent.NONE),
    ],
)
def test_resolve_intent(raw, expected):
    assert resolve_intent(raw, IntentAliasesConfig()) == expected


def test_resolve_intent_uses_configured_aliases():
    aliases = IntentAliasesConfig(ordering=["zamow_pizze"])

    assert resolve_intent("zamow_pizze", aliases) == Intent.ORDERING
    assert resolve_intent("ordering_pizza", aliases) == Intent.NONE


def test_first_alias_wins_when_several_match(result_factory):
    result = result_factory(PizzaName="Hawaii", pizza_name="Margherita")

    assert first_entity(result, ["pizza_name", "PizzaName"]) == "Margherita"
    assert first_entity(result, ["PizzaName", "pizza_name"]) == "Hawaii"


def test_first_entity_takes_first_value_of_entity():
    result = ClassifierResult(
        entities={"number": [EntityValue(value=3), EntityValue(value=1)]},
    )

    assert first_entity(result, ["number"]) == 3


def test_first_entity_skips_unrecognized_values(result_factory):
    result = result_factory(number="lots", PizzaPieces="2")

    digits = lambda v: v if v.isdigit() else None  # noqa: E731

    assert first_entity(result, ["number", "PizzaPieces"], digits) == "2"


def test_merge_fills_both_slots(result_factory):
    state = OrderingState()

    result = result_factory(pizza_name="Capricciosa", number=2)

    changed = merge_entities(state, result, SlotAliasesConfig())

    assert changed
    assert state.pizza_name == "Capricciosa"
    assert state.pizza_pieces == 2
    assert state.is_complete


def test_merge_does_not_overwrite_collected_slots(result_factory):
    state = OrderingState(pizza_name="Margherita", pizza_pieces=1)

    result = result_factory(pizza_name="Hawaii", number=3)

    changed = merge_entities(state, result, SlotAliasesConfig())

    assert not changed
    assert state.pizza_name == "Margherita"
    assert state.pizza_pieces == 1


def test_merge_drops_invalid_values(result_factory):
    state = OrderingState()

    changed = merge_entities(state, result_factory(pizza_name="AB", number=9), SlotAliasesConfig())

    assert not changed
    assert state.pizza_name is None
    assert state.pizza_pieces is None


def test_merge_parses_numeric_strings(result_factory):
    state = OrderingState()

    merge_entities(state, result_factory(**{"wit$number:number": "4"}), SlotAliasesConfig())

    assert state.pizza_pieces == 4


def test_merge_ignores_unknown_entities(result_factory):
    state = OrderingState()

    assert not merge_entities(state, result_factory(topping="ham"), SlotAliasesConfig())
