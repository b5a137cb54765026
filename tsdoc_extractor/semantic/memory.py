"""In-memory semantic program over syntax trees assembled in Python.

Binds source files the way the TypeScript binder does, closely enough for
documentation extraction: external modules get a quoted file symbol,
script files share one global scope (so split namespaces merge), class and
interface members land in per-symbol tables in source order, and aliases
are resolved lazily through import/export specifiers. Used by tests and by
callers that build trees with tsdoc_extractor.semantic.builder.
"""

import copy
import posixpath
import re
from collections.abc import Iterable, Sequence
from pathlib import Path

from tsdoc_extractor.semantic.nodes import (
    PARAMETER_PROPERTY_MODIFIERS,
    Modifier,
    Node,
    SourceFile,
    Symbol,
    SymbolFlags,
    SyntaxKind,
)

__all__ = [
    "CALL_SIGNATURE_NAME",
    "CONSTRUCTOR_NAME",
    "CONSTRUCT_SIGNATURE_NAME",
    "MemoryProgram",
    "MemoryProgramFactory",
    "MemoryTypeChecker",
]

CONSTRUCTOR_NAME = "__constructor"
CALL_SIGNATURE_NAME = "__call"
CONSTRUCT_SIGNATURE_NAME = "__new"

_MODULE_EXTENSIONS = (".ts", ".tsx", ".d.ts", ".js")
_EXTENSION_RE = re.compile(r"(\.d)?\.(ts|tsx|js)$")
_ENUM_REFERENCE_RE = re.compile(r"^([A-Za-z_$][\w$]*)\.[A-Za-z_$][\w$]*$")
_NUMBER_RE = re.compile(r"^-?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$")

_DECLARATION_FLAGS: dict[SyntaxKind, SymbolFlags] = {
    SyntaxKind.CLASS_DECLARATION: SymbolFlags.CLASS,
    SyntaxKind.INTERFACE_DECLARATION: SymbolFlags.INTERFACE,
    SyntaxKind.FUNCTION_DECLARATION: SymbolFlags.FUNCTION,
    SyntaxKind.ENUM_DECLARATION: SymbolFlags.ENUM,
    SyntaxKind.VARIABLE_DECLARATION: SymbolFlags.VARIABLE,
    SyntaxKind.TYPE_ALIAS_DECLARATION: SymbolFlags.TYPE_ALIAS,
    SyntaxKind.MODULE_DECLARATION: SymbolFlags.NAMESPACE_MODULE,
}

_MEMBER_FLAGS: dict[SyntaxKind, SymbolFlags] = {
    SyntaxKind.PROPERTY_DECLARATION: SymbolFlags.PROPERTY,
    SyntaxKind.PROPERTY_SIGNATURE: SymbolFlags.PROPERTY,
    SyntaxKind.METHOD_DECLARATION: SymbolFlags.METHOD,
    SyntaxKind.METHOD_SIGNATURE: SymbolFlags.METHOD,
    SyntaxKind.GET_ACCESSOR: SymbolFlags.GET_ACCESSOR,
    SyntaxKind.SET_ACCESSOR: SymbolFlags.SET_ACCESSOR,
    SyntaxKind.CONSTRUCTOR: SymbolFlags.CONSTRUCTOR,
    SyntaxKind.CALL_SIGNATURE: SymbolFlags.SIGNATURE,
    SyntaxKind.CONSTRUCT_SIGNATURE: SymbolFlags.SIGNATURE,
    SyntaxKind.ENUM_MEMBER: SymbolFlags.ENUM_MEMBER,
}

_SIGNATURE_NAMES: dict[SyntaxKind, str] = {
    SyntaxKind.CONSTRUCTOR: CONSTRUCTOR_NAME,
    SyntaxKind.CALL_SIGNATURE: CALL_SIGNATURE_NAME,
    SyntaxKind.CONSTRUCT_SIGNATURE: CONSTRUCT_SIGNATURE_NAME,
}


def _normalize(path: str) -> str:
    return posixpath.normpath(path.replace("\\", "/"))


def _is_external_module(source_file: SourceFile) -> bool:
    return any(
        statement.kind in (SyntaxKind.IMPORT_DECLARATION, SyntaxKind.EXPORT_DECLARATION) or statement.has_modifier(Modifier.EXPORT)
        for statement in source_file.statements
    )


class MemoryProgram:
    """Semantic program over pre-built source files.

    The trees are deep-copied before binding, so one set of trees can back
    any number of independent programs.
    """

    def __init__(self, source_files: Iterable[SourceFile], base_dir: Path | str = ".") -> None:
        self.base_dir = Path(base_dir)
        self._files: dict[str, SourceFile] = {}
        self._globals: dict[str, Symbol] = {}
        self._locals: dict[str, dict[str, Symbol]] = {}  # file name -> non-exported declarations
        self._star_exports: dict[Symbol, list[tuple[str, str]]] = {}  # module -> [(specifier, from file)]
        self._file_of: dict[Node, SourceFile] = {}

        for source_file in copy.deepcopy(list(source_files)):
            source_file.file_name = self._absolute(source_file.file_name)
            self._files[source_file.file_name] = source_file
        for source_file in self._files.values():
            self._bind_file(source_file)
        self._checker = MemoryTypeChecker(self)

    # -- SemanticProgram ---------------------------------------------------

    def get_source_file(self, file_name: str) -> SourceFile | None:
        """Look up a file by absolute or base-relative name."""
        return self._files.get(self._absolute(file_name))

    def get_type_checker(self) -> "MemoryTypeChecker":
        return self._checker

    # -- Resolution helpers used by the checker ---------------------------

    def resolve_module(self, specifier: str, from_file: str) -> SourceFile | None:
        """Resolve a relative module specifier the way the compiler host would."""
        base = _normalize(posixpath.join(posixpath.dirname(from_file), specifier))
        candidates = [base] if _EXTENSION_RE.search(base) else []
        candidates += [base + ext for ext in _MODULE_EXTENSIONS]
        candidates += [posixpath.join(base, "index" + ext) for ext in _MODULE_EXTENSIONS]
        for candidate in candidates:
            if candidate in self._files:
                return self._files[candidate]
        return None

    def star_exports_of(self, module_symbol: Symbol) -> list[tuple[str, str]]:
        return self._star_exports.get(module_symbol, [])

    def file_of(self, node: Node) -> SourceFile | None:
        current = node
        while current.parent is not None:
            current = current.parent
        return self._file_of.get(current)

    def lookup(self, node: Node, name: str, *, exclude: Symbol | None = None) -> Symbol | None:
        """Resolve a name as seen from node: file locals, then file exports, then globals."""
        source_file = self.file_of(node)
        tables: list[dict[str, Symbol]] = []
        if source_file is not None:
            tables.append(self._locals.get(source_file.file_name, {}))
            if source_file.symbol is not None:
                tables.append(source_file.symbol.exports)
        tables.append(self._globals)
        for table in tables:
            symbol = table.get(name)
            if symbol is not None and symbol is not exclude:
                return symbol
        return None

    def _absolute(self, file_name: str) -> str:
        return _normalize(posixpath.join(self.base_dir.as_posix(), file_name.replace("\\", "/")))

    # -- Binding -----------------------------------------------------------

    def _bind_file(self, source_file: SourceFile) -> None:
        position = 0
        for statement in source_file.statements:
            position = self._link(statement, None, position)
            self._file_of[statement] = source_file

        locals_table = self._locals.setdefault(source_file.file_name, {})
        if _is_external_module(source_file):
            module_name = _EXTENSION_RE.sub("", source_file.file_name)
            source_file.symbol = Symbol(f'"{module_name}"', SymbolFlags.VALUE_MODULE)
            for statement in source_file.statements:
                self._bind_statement(statement, source_file.symbol, source_file.symbol.exports, locals_table, source_file)
        else:
            source_file.symbol = None
            for statement in source_file.statements:
                self._bind_statement(statement, None, self._globals, locals_table, source_file)

    def _link(self, node: Node, parent: Node | None, position: int) -> int:
        """Assign parents and source positions in a pre-order walk."""
        node.parent = parent
        node.symbol = None
        node.pos = position
        position += 1
        for child in node.children():
            position = self._link(child, node, position)
        return position

    def _bind_statement(
        self,
        node: Node,
        container: Symbol | None,
        exports: dict[str, Symbol],
        locals_table: dict[str, Symbol],
        source_file: SourceFile,
    ) -> None:
        if node.kind is SyntaxKind.EXPORT_DECLARATION:
            if not node.elements:
                if container is not None and node.module_specifier:
                    self._star_exports.setdefault(container, []).append((node.module_specifier, source_file.file_name))
                return
            for element in node.elements:
                self._declare(exports, element, element.name or "", SymbolFlags.ALIAS, container)
            return
        if node.kind is SyntaxKind.IMPORT_DECLARATION:
            for element in node.elements:
                self._declare(locals_table, element, element.name or "", SymbolFlags.ALIAS, None)
            return
        flags = _DECLARATION_FLAGS.get(node.kind)
        if flags is None or not node.name:
            return

        # Script files bind everything into the global table; modules and
        # namespaces only expose exported declarations.
        exported = container is None or node.has_modifier(Modifier.EXPORT)
        table = exports if exported else locals_table
        symbol = self._declare(table, node, node.name, flags, container if exported else None)
        self._bind_children(node, symbol, source_file)

    def _bind_children(self, node: Node, symbol: Symbol, source_file: SourceFile) -> None:
        if node.kind is SyntaxKind.CLASS_DECLARATION:
            for member in node.members:
                table = symbol.exports if member.has_modifier(Modifier.STATIC) else symbol.members
                self._bind_member(table, member, symbol)
                if member.kind is SyntaxKind.CONSTRUCTOR:
                    for parameter in member.parameters:
                        if parameter.name and parameter.modifiers & PARAMETER_PROPERTY_MODIFIERS:
                            self._declare(symbol.members, parameter, parameter.name, SymbolFlags.PROPERTY, symbol)
        elif node.kind is SyntaxKind.INTERFACE_DECLARATION:
            for member in node.members:
                self._bind_member(symbol.members, member, symbol)
        elif node.kind is SyntaxKind.ENUM_DECLARATION:
            for member in node.members:
                self._bind_member(symbol.exports, member, symbol)
        elif node.kind is SyntaxKind.MODULE_DECLARATION and node.body is not None:
            body = node.body
            if body.kind is SyntaxKind.MODULE_DECLARATION:
                # `namespace a.b {}`: the inner namespace is implicitly exported
                inner = self._declare(symbol.exports, body, body.name or "", SymbolFlags.NAMESPACE_MODULE, symbol)
                self._bind_children(body, inner, source_file)
            else:
                namespace_locals: dict[str, Symbol] = {}
                for statement in body.statements:
                    self._bind_statement(statement, symbol, symbol.exports, namespace_locals, source_file)

    def _bind_member(self, table: dict[str, Symbol], member: Node, owner: Symbol) -> None:
        flags = _MEMBER_FLAGS.get(member.kind)
        if flags is None:
            return
        name = _SIGNATURE_NAMES.get(member.kind, member.name)
        if name:
            self._declare(table, member, name, flags, owner)

    @staticmethod
    def _declare(table: dict[str, Symbol], node: Node, name: str, flags: SymbolFlags, parent: Symbol | None) -> Symbol:
        symbol = table.get(name)
        if symbol is None:
            symbol = Symbol(name, flags, parent=parent)
            table[name] = symbol
        symbol.flags |= flags
        symbol.declarations.append(node)
        node.symbol = symbol
        return symbol


class MemoryTypeChecker:
    """Type checker over a MemoryProgram.

    Inference honours a node's `inferred_type` hint first, then literal and
    enum-reference initializers, then falls back to `any` for values and
    `void` for signatures.
    """

    def __init__(self, program: MemoryProgram) -> None:
        self._program = program
        self._unknown = Symbol("unknown")

    def get_exports_of_module(self, symbol: Symbol) -> list[Symbol]:
        return self._exports_of(symbol, set())

    def get_aliased_symbol(self, symbol: Symbol) -> Symbol:
        seen: set[Symbol] = set()
        current = symbol
        while current.has(SymbolFlags.ALIAS):
            if current in seen:
                return self._unknown
            seen.add(current)
            target = self._resolve_alias_once(current)
            if target is None:
                return self._unknown
            current = target
        return current

    def get_type_at_location(self, node: Node) -> str:
        if node.inferred_type:
            return node.inferred_type
        if node.type:
            return node.type
        if node.initializer:
            return self._infer_initializer(node, node.initializer.strip())
        return "any"

    def get_return_type_of_signature(self, node: Node) -> str:
        return node.inferred_type or node.type or "void"

    def _exports_of(self, symbol: Symbol, visited: set[Symbol]) -> list[Symbol]:
        if not symbol.has(SymbolFlags.MODULE) or symbol in visited:
            return []
        visited.add(symbol)
        exports = list(symbol.exports.values())
        names = set(symbol.exports)
        for specifier, from_file in self._program.star_exports_of(symbol):
            target = self._program.resolve_module(specifier, from_file)
            if target is None or target.symbol is None:
                continue
            for exported in self._exports_of(target.symbol, visited):
                if exported.name in names or exported.name == "default":
                    continue
                names.add(exported.name)
                exports.append(exported)
        return exports

    def _resolve_alias_once(self, alias: Symbol) -> Symbol | None:
        declaration = alias.value_declaration
        if declaration is None:
            return None
        target_name = declaration.property_name or declaration.name or ""
        owner = declaration.parent
        if owner is not None and owner.module_specifier:
            source_file = self._program.file_of(declaration)
            if source_file is None:
                return None
            target = self._program.resolve_module(owner.module_specifier, source_file.file_name)
            if target is None or target.symbol is None:
                return None
            for exported in self._exports_of(target.symbol, set()):
                if exported.name == target_name:
                    return exported
            return None
        return self._program.lookup(declaration, target_name, exclude=alias)

    def _infer_initializer(self, node: Node, initializer: str) -> str:
        if initializer in ("true", "false"):
            return "boolean"
        if _NUMBER_RE.match(initializer):
            return "number"
        if initializer[:1] in ("'", '"', "`"):
            return "string"
        if match := _ENUM_REFERENCE_RE.match(initializer):
            referenced = self._program.lookup(node, match.group(1))
            if referenced is not None and referenced.has(SymbolFlags.ENUM):
                return referenced.name
        return "any"


class MemoryProgramFactory:
    """ProgramFactory over a fixed set of trees; every call builds a fresh program."""

    def __init__(self, source_files: Iterable[SourceFile]) -> None:
        self._source_files = list(source_files)

    def __call__(self, file_names: Sequence[str], base_dir: Path) -> MemoryProgram:
        return MemoryProgram(self._source_files, base_dir)
