"""Logging configuration for pizzabot.

Console output is human readable; the optional rotating file gets one JSON
object per record, including the `extra` context the turn processor attaches
(conversation id, intent, slot values).
"""

import logging.config
from typing import Any

# Third-party loggers that log every request at INFO
QUIET_LOGGERS = ("httpx", "httpcore", "LiteLLM", "aiosqlite")

CONSOLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
JSON_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def _file_handler(path: str, level: str) -> dict[str, Any]:
    return {
        "class": "logging.handlers.RotatingFileHandler",
        "filename": path,
        "maxBytes": 10 * 1024 * 1024,
        "backupCount": 5,
        "encoding": "utf-8",
        "formatter": "json",
        "level": level,
    }


def build_logging_config(level: str = "INFO", log_file: str | None = None) -> dict[str, Any]:
    """Build the dictConfig mapping used by setup_logging."""
    level = level.upper()
    handlers = ["console"]
    config: dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "console": {"format": CONSOLE_FORMAT, "datefmt": "%Y-%m-%d %H:%M:%S"},
            "json": {"()": "pythonjsonlogger.json.JsonFormatter", "format": JSON_FORMAT},
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "console",
                "level": level,
            },
        },
        "loggers": {
            "pizzabot": {"handlers": handlers, "level": level, "propagate": False},
            **{name: {"level": "WARNING"} for name in QUIET_LOGGERS},
        },
        "root": {"handlers": ["console"], "level": "WARNING"},
    }

    if log_file:
        config["handlers"]["file"] = _file_handler(log_file, level)
        handlers.append("file")

    return config


def setup_logging(level: str = "INFO", log_file: str | None = "pizzabot.log") -> None:
    """
    Configure logging for pizzabot.

    Args:
        level: Log level for pizzabot loggers (DEBUG, INFO, WARNING, ERROR)
        log_file: Rotating JSON log file; None logs to console only
    """
    logging.config.dictConfig(build_logging_config(level, log_file))
