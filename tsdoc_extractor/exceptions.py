"""Exception hierarchy for tsdoc-extractor.

All exceptions inherit from TsDocError, so callers can catch extraction
failures with a single handler.
"""


class TsDocError(Exception):
    """Base exception for all tsdoc-extractor errors."""


class SourceFileNotFoundError(TsDocError):
    """Raised when a requested file is not part of the semantic program."""

    def __init__(self, file_name: str) -> None:
        super().__init__(f"Invalid source file: {file_name}")
        self.file_name = file_name


class InvalidPatternError(TsDocError, ValueError):
    """Raised when an ignore pattern cannot be compiled."""


class LoggingConfigError(TsDocError):
    """Raised when a logging configuration file cannot be used."""
