"""Export filtering by name pattern."""

from collections.abc import Iterable
from re import Pattern

from tsdoc_extractor.extractor.exports import ResolvedExport
from tsdoc_extractor.patterns import ES_MODULE_MARKER, compile_patterns, matches_any


class ExportFilter:
    """Drops exports whose name matches any pattern.

    Caller patterns add to the built-in ES-module marker pattern; they never
    replace it.
    """

    def __init__(self, patterns: Iterable[str | Pattern[str]] = ()) -> None:
        self._patterns = (*compile_patterns(patterns), ES_MODULE_MARKER)

    @property
    def patterns(self) -> tuple[Pattern[str], ...]:
        return self._patterns

    def is_ignored(self, name: str) -> bool:
        return matches_any(name, self._patterns)

    def apply(self, exports: Iterable[ResolvedExport]) -> list[ResolvedExport]:
        """Kept exports, in their original order."""
        return [export for export in exports if not self.is_ignored(export.name)]
