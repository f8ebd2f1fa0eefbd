"""Unit tests for logging setup."""

import json
import logging

from pizzabot.observability.logging import build_logging_config, setup_logging


def test_file_handler_writes_json(tmp_path):
    log_file = tmp_path / "pizzabot.log"
    setup_logging("DEBUG", str(log_file))
    logger = logging.getLogger("pizzabot.test")

    logger.info("Order collected", extra={"pizza_name": "Parma"})
    for handler in logging.getLogger("pizzabot").handlers:
        handler.flush()

    record = json.loads(log_file.read_text(encoding="utf-8").splitlines()[-1])
    assert record["message"] == "Order collected"
    assert record["pizza_name"] == "Parma"
    assert record["levelname"] == "INFO"


def test_console_only():
    setup_logging("WARNING", None)

    handlers = logging.getLogger("pizzabot").handlers
    assert len(handlers) == 1
    assert logging.getLogger("pizzabot").level == logging.WARNING


def test_http_client_loggers_are_quieted():
    config = build_logging_config("debug")

    assert config["loggers"]["pizzabot"]["level"] == "DEBUG"
    assert config["loggers"]["httpx"] == {"level": "WARNING"}
    assert "file" not in config["handlers"]
