"""Unit tests for configuration loading."""

from pathlib import Path

import pytest

from pizzabot.config import BotConfig, ConfigLoader
from pizzabot.core.errors import ConfigError

EXAMPLE_CONFIG = Path(__file__).parents[2] / "pizzabot.example.yaml"


def test_defaults():
    config = BotConfig()

    assert config.settings.nlu.provider == "wit"
    assert config.settings.persistence.backend == "memory"
    assert config.slots.pizza_pieces[0] == "number"
    assert config.messages.order_summary.format(name="Parma", pieces=2) == "Your order: Parma 2"


def test_load_example_config():
    config = ConfigLoader.load(EXAMPLE_CONFIG)

    assert config.settings.persistence.backend == "sqlite"
    assert config.settings.nlu.wit.api_version == "20181120"
    assert config.intents.ordering == ["ordering_pizza", "OrderingPizza"]


def test_load_from_directory(tmp_path):
    (tmp_path / "pizzabot.yaml").write_text(
        "settings:\n  nlu:\n    provider: dspy\nmessages:\n  help_ack: Sure.\n",
        encoding="utf-8",
    )

    config = ConfigLoader.load(tmp_path)

    assert config.settings.nlu.provider == "dspy"
    assert config.messages.help_ack == "Sure."
    assert config.messages.help_text == BotConfig().messages.help_text


def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")

    assert ConfigLoader.load(path) == BotConfig()


def test_missing_file(tmp_path):
    with pytest.raises(ConfigError, match="not found"):
        ConfigLoader.load(tmp_path / "nope.yaml")


def test_invalid_yaml(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("settings: [unclosed", encoding="utf-8")

    with pytest.raises(ConfigError, match="Invalid YAML"):
        ConfigLoader.load(path)


def test_invalid_values(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("settings:\n  nlu:\n    provider: watson\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="Invalid configuration"):
        ConfigLoader.load(path)


def test_wit_token_from_environment(monkeypatch):
    monkeypatch.setenv("WIT_ACCESS_TOKEN", "from-env")

    assert BotConfig().settings.nlu.wit.token == "from-env"
