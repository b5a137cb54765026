"""Read-only protocols for the semantic engine consumed by the extractor.

A real implementation wraps a TypeScript compiler program; MemoryProgram
implements the same surface over syntax trees assembled in Python.
"""

from collections.abc import Sequence
from pathlib import Path
from typing import Protocol, runtime_checkable

from tsdoc_extractor.semantic.nodes import Node, SourceFile, Symbol


@runtime_checkable
class TypeChecker(Protocol):
    """Query surface of a type checker. Implementations never expose mutation."""

    def get_exports_of_module(self, symbol: Symbol) -> list[Symbol]:
        """Exports of a module or namespace symbol, with `export *` already flattened."""
        ...

    def get_aliased_symbol(self, symbol: Symbol) -> Symbol:
        """Follow an alias chain to the declared symbol. Broken chains yield a symbol without declarations."""
        ...

    def get_type_at_location(self, node: Node) -> str:
        """Display string of the inferred type of a value declaration."""
        ...

    def get_return_type_of_signature(self, node: Node) -> str:
        """Display string of the inferred return type of a callable declaration."""
        ...


@runtime_checkable
class SemanticProgram(Protocol):
    """A built program over a set of root files."""

    def get_source_file(self, file_name: str) -> SourceFile | None:
        """Look up a file by absolute or base-relative name."""
        ...

    def get_type_checker(self) -> TypeChecker:
        """Type checker bound to this program."""
        ...


class ProgramFactory(Protocol):
    """Builds a semantic program once per extraction run."""

    def __call__(self, file_names: Sequence[str], base_dir: Path) -> SemanticProgram: ...
