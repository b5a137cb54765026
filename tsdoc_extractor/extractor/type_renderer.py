"""Rendering of declared and inferred types to display strings."""

import re
from collections.abc import Iterable
from re import Pattern

from tsdoc_extractor.patterns import matches_any
from tsdoc_extractor.semantic import Node, TypeChecker

# String literals are matched first so dotted text inside quotes is left alone.
_QUALIFIED_NAME_RE = re.compile(
    r"""(?P<string>'(?:[^'\\]|\\.)*'|"(?:[^"\\]|\\.)*"|`(?:[^`\\]|\\.)*`)"""
    r"|(?P<qualified>(?<![\w$.])[A-Za-z_$][\w$]*(?:\.[A-Za-z_$][\w$]*)+)"
)


def strip_namespaces(text: str, keep: Iterable[Pattern[str]] = ()) -> str:
    """Reduce namespace-qualified names to their last segment.

    A qualified name is kept verbatim when any leading part of its qualifier
    matches one of the `keep` patterns: ``A.B.C`` becomes ``C`` unless a
    pattern matches ``A`` or ``A.B``.
    """
    keep = tuple(keep)

    def _replace(match: re.Match[str]) -> str:
        qualified = match.group("qualified")
        if qualified is None:
            return match.group(0)
        *namespaces, name = qualified.split(".")
        prefixes = (".".join(namespaces[: end + 1]) for end in range(len(namespaces)))
        if any(matches_any(prefix, keep) for prefix in prefixes):
            return qualified
        return name

    return _QUALIFIED_NAME_RE.sub(_replace, text)


class TypeRenderer:
    """Prefers the explicit annotation, falls back to the checker's inferred type."""

    def __init__(self, checker: TypeChecker, keep_namespaces: Iterable[Pattern[str]] = ()) -> None:
        self._checker = checker
        self._keep_namespaces = tuple(keep_namespaces)

    def strip(self, text: str) -> str:
        return strip_namespaces(text, self._keep_namespaces)

    def declared_type(self, node: Node) -> str:
        """Type of a property, variable or parameter."""
        text = node.type if node.type is not None else self._checker.get_type_at_location(node)
        return self.strip(text)

    def return_type(self, node: Node) -> str:
        """Return type of a callable; `void` when nothing is annotated or inferred."""
        text = node.type if node.type is not None else self._checker.get_return_type_of_signature(node)
        return self.strip(text or "void")
