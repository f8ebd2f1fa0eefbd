"""LUIS v3 intent classifier."""

import logging
from typing import Any

import httpx

from pizzabot.config.settings import LuisConfig
from pizzabot.core.errors import ConfigError, NLUParsingError, NLUProviderError, NLUTimeoutError
from pizzabot.core.types import ClassifierResult, EntityValue

logger = logging.getLogger(__name__)


class LuisClassifier:
    """Classifies utterances with a published LUIS app."""

    def __init__(
        self,
        config: LuisConfig,
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        missing = [
            name for name in ("app_id", "endpoint_key", "endpoint") if not getattr(config, name)
        ]
        if missing:
            raise ConfigError(f"LUIS classifier is missing settings: {', '.join(missing)}")
        self.config = config
        self._client = client or httpx.AsyncClient(
            base_url=str(config.endpoint).rstrip("/"), timeout=timeout
        )

    async def classify(self, utterance: str) -> ClassifierResult:
        path = f"/luis/prediction/v3.0/apps/{self.config.app_id}/slots/{self.config.slot}/predict"
        params = {
            "subscription-key": self.config.endpoint_key,
            "query": utterance,
            "show-all-intents": "false",
            "verbose": "true",
        }
        try:
            response = await self._client.get(path, params=params)
            response.raise_for_status()
            payload = response.json()
        except httpx.TimeoutException as e:
            raise NLUTimeoutError(f"LUIS request timed out: {e}") from e
        except httpx.HTTPStatusError as e:
            raise NLUProviderError(f"LUIS returned HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise NLUProviderError(f"LUIS request failed: {e}") from e
        except ValueError as e:
            raise NLUParsingError(f"LUIS returned invalid JSON: {e}") from e

        result = parse_luis_response(payload, utterance)
        logger.debug(
            f"LUIS intent '{result.intent}' ({result.score:.2f})",
            extra={"intent": result.intent, "entities": list(result.entities)},
        )
        return result

    async def aclose(self) -> None:
        await self._client.aclose()


def _flatten(value: Any) -> Any:
    # List entities come back as [["Margherita"]]
    while isinstance(value, list) and value:
        value = value[0]
    return value


def parse_luis_response(payload: Any, utterance: str = "") -> ClassifierResult:
    """Convert a LUIS v3 prediction body into a ClassifierResult."""
    prediction = payload.get("prediction") if isinstance(payload, dict) else None
    if not isinstance(prediction, dict):
        raise NLUParsingError("LUIS payload has no 'prediction' object")

    intent = prediction.get("topIntent") or "none"
    intents = prediction.get("intents") or {}
    score = float((intents.get(intent) or {}).get("score", 0.0))

    raw_entities = dict(prediction.get("entities") or {})
    instances = raw_entities.pop("$instance", {}) or {}

    entities: dict[str, list[EntityValue]] = {}
    for name, values in raw_entities.items():
        if not isinstance(values, list):
            continue
        meta = instances.get(name) or []
        parsed = []
        for i, value in enumerate(values):
            flat = _flatten(value)
            if flat in (None, "") or isinstance(flat, (dict, list)):
                continue
            confidence = 1.0
            if i < len(meta) and isinstance(meta[i], dict) and "score" in meta[i]:
                confidence = float(meta[i]["score"])
            parsed.append(EntityValue(value=flat, confidence=confidence))
        if parsed:
            entities[name] = parsed

    return ClassifierResult(
        text=payload.get("query") or utterance,
        intent=intent,
        score=score,
        entities=entities,
    )
