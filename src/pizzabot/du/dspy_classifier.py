"""LLM-backed intent classifier using DSPy."""

import logging

import dspy

from pizzabot.config.settings import DSPyConfig
from pizzabot.core.errors import NLUParsingError, NLUProviderError
from pizzabot.core.types import ClassifierResult, EntityValue
from pizzabot.du.signatures import ClassifyUtterance, UtteranceAnalysis

logger = logging.getLogger(__name__)


class DSPyClassifier(dspy.Module):
    """Intent classifier that asks a language model through DSPy.

    Entities are reported under the `pizza_name` and `number` names so the
    default alias lists pick them up.
    """

    def __init__(self, config: DSPyConfig, lm: dspy.LM | None = None) -> None:
        super().__init__()
        self.lm = lm or dspy.LM(f"{config.provider}/{config.model}", temperature=config.temperature)
        self.predictor = dspy.Predict(ClassifyUtterance)

    async def classify(self, utterance: str) -> ClassifierResult:
        try:
            with dspy.context(lm=self.lm):
                prediction = await self.predictor.acall(utterance=utterance)
        except Exception as e:
            raise NLUProviderError(f"LLM classification failed: {e}") from e

        analysis = prediction.result
        if not isinstance(analysis, UtteranceAnalysis):
            raise NLUParsingError(f"Unexpected classifier output: {analysis!r}")

        return to_classifier_result(analysis, utterance)


def to_classifier_result(analysis: UtteranceAnalysis, utterance: str) -> ClassifierResult:
    entities: dict[str, list[EntityValue]] = {}
    if analysis.pizza_name:
        entities["pizza_name"] = [
            EntityValue(value=analysis.pizza_name, confidence=analysis.confidence)
        ]
    if analysis.pizza_pieces is not None:
        entities["number"] = [
            EntityValue(value=analysis.pizza_pieces, confidence=analysis.confidence)
        ]

    logger.debug(f"LLM intent '{analysis.intent}'", extra={"intent": analysis.intent})
    return ClassifierResult(
        text=utterance,
        intent=analysis.intent,
        score=analysis.confidence,
        entities=entities,
    )
