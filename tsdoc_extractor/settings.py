"""Extraction options for TypeScript module reading.

Options are loaded from keyword arguments, environment variables and an
optional .env file via pydantic-settings, and are immutable once built.
Each extraction call receives its own settings object; nothing here is
process-global.

Environment variables:
    TSDOC_IGNORE_EXPORTS_MATCHING: JSON list of regexes for export names to skip
    TSDOC_IGNORE_TYPESCRIPT_NAMESPACES: JSON list of regexes for namespaces kept in type strings
    TSDOC_SORT_CLASS_MEMBERS: Order members by source position (default true)

Example:
    >>> from tsdoc_extractor.settings import ExtractorSettings
    >>> settings = ExtractorSettings(ignore_exports_matching=["^_"])
    >>> settings.sort_class_members
    True
"""

from re import Pattern
from typing import Any

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from tsdoc_extractor.patterns import compile_patterns


class ExtractorSettings(BaseSettings):
    """Per-run configuration for the module reader.

    Attributes:
        ignore_exports_matching: Export names matching any of these patterns are
            dropped. The compiler's ES-module marker is always dropped as well.
        ignore_typescript_namespaces: Namespace qualifiers matching any of these
            patterns are kept verbatim in rendered type strings.
        sort_class_members: When true, members are ordered by source position;
            when false, the semantic engine's member table order is kept.
    """

    model_config = SettingsConfigDict(
        env_prefix="TSDOC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    ignore_exports_matching: tuple[Pattern[str], ...] = ()
    ignore_typescript_namespaces: tuple[Pattern[str], ...] = ()
    sort_class_members: bool = True

    @field_validator("ignore_exports_matching", "ignore_typescript_namespaces", mode="before")
    @classmethod
    def _compile(cls, value: Any) -> tuple[Pattern[str], ...]:
        return compile_patterns(value)
