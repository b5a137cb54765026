"""Logging setup for tsdoc-extractor.

Extractor modules log through Prefect's logger factory, which places them
under the ``prefect`` logger: ``tsdoc_extractor.extractor.reader`` becomes
``prefect.tsdoc_extractor.extractor.reader``. The built-in configuration
therefore targets that subtree only and leaves the root logger and the rest
of Prefect's loggers alone, so an extraction run inside a Prefect flow keeps
the flow's own logging intact.

Environment variables:
    TSDOC_LOGGING_CONFIG: Path to a YAML file in dictConfig format
    TSDOC_LOG_LEVEL: Level of the built-in configuration (default INFO)
"""

import logging
import logging.config
import os
from pathlib import Path
from typing import Any

import yaml
from prefect.logging import get_logger

from tsdoc_extractor.exceptions import LoggingConfigError

EXTRACTOR_LOGGER = "tsdoc_extractor"


def extractor_logger_name() -> str:
    """Name of the logger every extractor module logs beneath."""
    return get_logger(EXTRACTOR_LOGGER).name


class LoggingConfig:
    """A dictConfig mapping read from YAML, or the built-in one.

    The file comes from `config_path`, else from TSDOC_LOGGING_CONFIG. A path
    that does not exist falls back to the built-in configuration.
    """

    def __init__(self, config_path: Path | None = None) -> None:
        if config_path is None and (env_path := os.environ.get("TSDOC_LOGGING_CONFIG")):
            config_path = Path(env_path)
        self.config_path = config_path

    def load_config(self) -> dict[str, Any]:
        """Read the configuration.

        Raises:
            LoggingConfigError: The file is not valid YAML or is not a mapping.
        """
        if self.config_path is None or not self.config_path.is_file():
            return self.default_config()
        try:
            loaded = yaml.safe_load(self.config_path.read_text())
        except yaml.YAMLError as e:
            raise LoggingConfigError(f"Invalid logging configuration {self.config_path}: {e}") from e
        if not isinstance(loaded, dict):
            raise LoggingConfigError(f"Logging configuration {self.config_path} must be a mapping")
        return loaded

    @staticmethod
    def default_config() -> dict[str, Any]:
        """Console output on stderr for the extractor's logger tree."""
        return {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "extractor": {
                    "format": "%(asctime)s | %(levelname)-7s | %(name)s - %(message)s",
                    "datefmt": "%H:%M:%S",
                },
            },
            "handlers": {
                "extractor_console": {
                    "class": "logging.StreamHandler",
                    "formatter": "extractor",
                    "stream": "ext://sys.stderr",
                },
            },
            "loggers": {
                extractor_logger_name(): {
                    "level": os.environ.get("TSDOC_LOG_LEVEL", "INFO"),
                    "handlers": ["extractor_console"],
                    "propagate": False,
                },
            },
        }

    def apply(self) -> None:
        logging.config.dictConfig(self.load_config())


_configured = False


def setup_logging(config_path: Path | None = None, level: str | None = None) -> None:
    """Configure the extractor's loggers.

    Args:
        config_path: YAML dictConfig file. Defaults to TSDOC_LOGGING_CONFIG,
            then to the built-in configuration.
        level: Level for the extractor's logger tree, applied after the
            configuration. Only the extractor's loggers are touched.

    Example:
        >>> setup_logging(level="DEBUG")
    """
    global _configured

    LoggingConfig(config_path).apply()
    if level:
        get_logger(EXTRACTOR_LOGGER).setLevel(level.upper())
    _configured = True


def get_extractor_logger(name: str) -> logging.Logger:
    """Logger for an extractor module, configuring logging on first use.

    Args:
        name: Module name, typically __name__.
    """
    if not _configured:
        setup_logging()
    return get_logger(name)
