"""Welcome card sent to new conversation members."""

import json
from importlib import resources
from pathlib import Path

from pydantic import ValidationError

from pizzabot.core.errors import ConfigError
from pizzabot.core.types import HeroCard

DEFAULT_CARD = "welcome_card.json"


def load_welcome_card(path: str | Path | None = None) -> HeroCard:
    """Load the welcome card template.

    Args:
        path: JSON file to use instead of the packaged template

    Raises:
        ConfigError: If the template is missing or malformed
    """
    try:
        if path is None:
            raw = resources.files("pizzabot.resources").joinpath(DEFAULT_CARD).read_text("utf-8")
        else:
            raw = Path(path).read_text(encoding="utf-8")
        return HeroCard.model_validate(json.loads(raw))
    except (OSError, json.JSONDecodeError, ValidationError) as e:
        raise ConfigError(f"Invalid welcome card template {path or DEFAULT_CARD}: {e}") from e
