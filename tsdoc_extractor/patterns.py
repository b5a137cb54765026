"""Compilation helpers for caller-supplied name patterns."""

import re
from collections.abc import Iterable
from re import Pattern

from tsdoc_extractor.exceptions import InvalidPatternError

# The compiler escapes the synthetic `__esModule` export with a leading underscore.
ES_MODULE_MARKER: Pattern[str] = re.compile(r"^___esModule$")


def compile_pattern(value: str | Pattern[str]) -> Pattern[str]:
    """Compile a single pattern, passing already-compiled patterns through."""
    if isinstance(value, Pattern):
        return value
    if not isinstance(value, str):
        raise InvalidPatternError(f"Pattern must be a string or compiled regex, got {type(value).__name__}")
    try:
        return re.compile(value)
    except re.error as exc:
        raise InvalidPatternError(f"Invalid pattern {value!r}: {exc}") from exc


def compile_patterns(values: Iterable[str | Pattern[str]] | str | Pattern[str] | None) -> tuple[Pattern[str], ...]:
    """Compile a pattern collection. A lone string or regex is treated as a one-item collection."""
    if values is None:
        return ()
    if isinstance(values, (str, Pattern)):
        return (compile_pattern(values),)
    return tuple(compile_pattern(value) for value in values)


def matches_any(text: str, patterns: Iterable[Pattern[str]]) -> bool:
    """Return True when any pattern finds a match anywhere in text."""
    return any(pattern.search(text) for pattern in patterns)
