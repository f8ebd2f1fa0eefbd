"""Dialogue understanding: intent classifiers and entity lookup."""

from pizzabot.du.entities import first_entity, merge_entities, resolve_intent
from pizzabot.du.factory import create_classifier

__all__ = ["create_classifier", "first_entity", "merge_entities", "resolve_intent"]
