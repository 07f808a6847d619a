import logging
from logging import Logger as T_Logger
from logging.config import dictConfig
from typing import Optional

from pythonjsonlogger.json import JsonFormatter  # type: ignore # noqa F401

from docvcs.config import LoggingSettings, get_settings

LOGGER_NAME = "docvcs"

logger: T_Logger = logging.getLogger(LOGGER_NAME)
"""Package logger. Stores log through children of this logger."""


def build_logging_config(settings: LoggingSettings) -> dict:
    """Build the dictConfig mapping for the console and JSON file handlers."""
    level = settings.log_level.upper()
    handlers = ["console"]
    config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {
                "()": "pythonjsonlogger.json.JsonFormatter",
                "fmt": "%(asctime)s %(levelname)s %(name)s %(message)s",
            },
            "standard": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "standard",
                "level": level,
            },
        },
        "loggers": {
            LOGGER_NAME: {
                "handlers": handlers,
                "level": level,
                "propagate": False,
            },
        },
    }
    if settings.log_to_file:
        config["handlers"]["file"] = {
            "class": "logging.FileHandler",
            "filename": str(settings.log_file),
            "formatter": "json",
            "level": level,
        }
        handlers.append("file")
    return config


def configure_logging(settings: Optional[LoggingSettings] = None) -> T_Logger:
    """
    Configure the docvcs logger from settings.

    Args:
        settings (Optional[LoggingSettings]): Settings to use. Defaults to the cached
            LoggingSettings instance.

    Returns:
        Logger: The configured package logger.
    """
    settings = settings or get_settings(LoggingSettings)
    if settings.log_to_file:
        settings.log_file.parent.mkdir(parents=True, exist_ok=True)
    dictConfig(build_logging_config(settings))
    system_logger = logger.getChild("SYSTEM")
    system_logger.debug("Logger for docvcs initialized.")
    return logger


def get_logger(name: str) -> T_Logger:
    """Child of the package logger, e.g. get_logger("CommitStore")."""
    return logger.getChild(name)
