"""Classifier factory.

Supports multiple providers:
- wit: Wit.ai HTTP API
- luis: LUIS v3 prediction endpoint
- dspy: language model through DSPy
"""

import logging

from pizzabot.config.settings import NLUConfig
from pizzabot.core.errors import ConfigError
from pizzabot.core.interfaces import IIntentClassifier

logger = logging.getLogger(__name__)


def create_classifier(config: NLUConfig) -> IIntentClassifier:
    """Create the configured intent classifier.

    Raises:
        ConfigError: If the provider is unknown or its settings are incomplete.
    """
    if config.provider == "wit":
        from pizzabot.du.wit import WitClassifier

        logger.info("Using Wit.ai classifier")
        return WitClassifier(config.wit, timeout=config.timeout)

    if config.provider == "luis":
        from pizzabot.du.luis import LuisClassifier

        logger.info("Using LUIS classifier")
        return LuisClassifier(config.luis, timeout=config.timeout)

    if config.provider == "dspy":
        from pizzabot.du.dspy_classifier import DSPyClassifier

        logger.info(f"Using DSPy classifier with {config.dspy.provider}/{config.dspy.model}")
        return DSPyClassifier(config.dspy)

    raise ConfigError(f"Unknown NLU provider: {config.provider}")
