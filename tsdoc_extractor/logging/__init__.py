"""Logging for tsdoc-extractor.

Modules obtain loggers with get_extractor_logger; setup_logging reconfigures
them from YAML or the built-in console configuration.

Example:
    >>> from tsdoc_extractor.logging import get_extractor_logger
    >>>
    >>> logger = get_extractor_logger(__name__)
    >>> logger.info("Reading modules")
"""

from .logging_config import LoggingConfig, extractor_logger_name, get_extractor_logger, setup_logging

__all__ = [
    "LoggingConfig",
    "extractor_logger_name",
    "get_extractor_logger",
    "setup_logging",
]
