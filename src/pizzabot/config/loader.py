"""Config loader for YAML configuration files."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from pizzabot.config.models import BotConfig
from pizzabot.core.errors import ConfigError


class ConfigLoader:
    """Load BotConfig from YAML files."""

    @staticmethod
    def load(path: Path | str) -> BotConfig:
        """Load configuration from a YAML file.

        Args:
            path: Path to a config directory holding pizzabot.yaml, or to the file itself

        Returns:
            Parsed BotConfig instance

        Raises:
            ConfigError: If the file is missing or does not describe a valid config
        """
        config_path = Path(path)
        if config_path.is_dir():
            config_path = config_path / "pizzabot.yaml"

        if not config_path.exists():
            raise ConfigError(f"Config file not found: {config_path}")

        with open(config_path, encoding="utf-8") as f:
            try:
                data: dict[str, Any] = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

        try:
            return BotConfig.model_validate(data)
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration in {config_path}: {e}") from e
