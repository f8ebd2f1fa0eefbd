"""Wit.ai intent classifier."""

import logging
from datetime import date
from typing import Any

import httpx

from pizzabot.config.settings import WitConfig
from pizzabot.core.errors import ConfigError, NLUParsingError, NLUProviderError, NLUTimeoutError
from pizzabot.core.types import ClassifierResult, EntityValue

logger = logging.getLogger(__name__)


class WitClassifier:
    """Classifies utterances with the Wit.ai `/message` endpoint.

    Understands both response shapes Wit has shipped: the legacy one where
    the intent is an `intent` entity, and the current one with a top-level
    `intents` list and `name:role` entity keys.
    """

    def __init__(
        self,
        config: WitConfig,
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        if not config.token:
            raise ConfigError("Wit.ai classifier requires a token (set WIT_ACCESS_TOKEN)")
        self.config = config
        self._client = client or httpx.AsyncClient(base_url=config.base_url, timeout=timeout)
        self._client.headers["Authorization"] = f"Bearer {config.token}"

    async def classify(self, utterance: str) -> ClassifierResult:
        params = {
            "v": self.config.api_version or date.today().strftime("%Y%m%d"),
            "q": utterance,
        }
        try:
            response = await self._client.get("/message", params=params)
            response.raise_for_status()
            payload = response.json()
        except httpx.TimeoutException as e:
            raise NLUTimeoutError(f"Wit.ai request timed out: {e}") from e
        except httpx.HTTPStatusError as e:
            raise NLUProviderError(
                f"Wit.ai returned HTTP {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            raise NLUProviderError(f"Wit.ai request failed: {e}") from e
        except ValueError as e:
            raise NLUParsingError(f"Wit.ai returned invalid JSON: {e}") from e

        result = parse_wit_response(payload, utterance)
        logger.debug(
            f"Wit.ai intent '{result.intent}' ({result.score:.2f})",
            extra={"intent": result.intent, "entities": list(result.entities)},
        )
        return result

    async def aclose(self) -> None:
        await self._client.aclose()


def parse_wit_response(payload: Any, utterance: str = "") -> ClassifierResult:
    """Convert a Wit.ai JSON body into a ClassifierResult."""
    if not isinstance(payload, dict):
        raise NLUParsingError(f"Unexpected Wit.ai payload: {type(payload).__name__}")

    raw_entities = payload.get("entities") or {}
    if not isinstance(raw_entities, dict):
        raise NLUParsingError("Wit.ai 'entities' is not an object")

    intent, score = "none", 0.0
    intents = payload.get("intents")
    if intents:
        top = intents[0]
        intent, score = top.get("name") or "none", float(top.get("confidence", 0.0))

    entities: dict[str, list[EntityValue]] = {}
    for name, values in raw_entities.items():
        if not isinstance(values, list):
            continue
        parsed = [
            EntityValue(value=v.get("value"), confidence=float(v.get("confidence", 1.0)))
            for v in values
            if isinstance(v, dict) and v.get("value") not in (None, "")
        ]
        if not parsed:
            continue
        if name == "intent":
            # Legacy format: the intent travels as an entity
            if not intents:
                intent, score = str(parsed[0].value), parsed[0].confidence
            continue
        entities[name] = parsed

    return ClassifierResult(
        text=payload.get("text") or payload.get("_text") or utterance,
        intent=intent,
        score=score,
        entities=entities,
    )
