"""Syntax and symbol value types exchanged with a semantic engine.

These mirror the shapes a TypeScript compiler exposes: syntax nodes with
attached symbols, and symbols with export/member tables. The graph is
cyclic (node -> symbol -> declarations -> node), so nodes and symbols
compare and hash by identity.
"""

from dataclasses import dataclass, field
from enum import IntFlag, StrEnum


class SyntaxKind(StrEnum):
    """Kinds of syntax nodes the extractor understands."""

    MODULE_DECLARATION = "ModuleDeclaration"
    MODULE_BLOCK = "ModuleBlock"
    CLASS_DECLARATION = "ClassDeclaration"
    INTERFACE_DECLARATION = "InterfaceDeclaration"
    FUNCTION_DECLARATION = "FunctionDeclaration"
    ENUM_DECLARATION = "EnumDeclaration"
    ENUM_MEMBER = "EnumMember"
    VARIABLE_DECLARATION = "VariableDeclaration"
    TYPE_ALIAS_DECLARATION = "TypeAliasDeclaration"
    PROPERTY_DECLARATION = "PropertyDeclaration"
    PROPERTY_SIGNATURE = "PropertySignature"
    METHOD_DECLARATION = "MethodDeclaration"
    METHOD_SIGNATURE = "MethodSignature"
    CONSTRUCTOR = "Constructor"
    GET_ACCESSOR = "GetAccessor"
    SET_ACCESSOR = "SetAccessor"
    CALL_SIGNATURE = "CallSignature"
    CONSTRUCT_SIGNATURE = "ConstructSignature"
    PARAMETER = "Parameter"
    TYPE_PARAMETER = "TypeParameter"
    IMPORT_DECLARATION = "ImportDeclaration"
    IMPORT_SPECIFIER = "ImportSpecifier"
    EXPORT_DECLARATION = "ExportDeclaration"
    EXPORT_SPECIFIER = "ExportSpecifier"
    EXPRESSION_STATEMENT = "ExpressionStatement"


class Modifier(StrEnum):
    """Declaration modifiers."""

    EXPORT = "export"
    DEFAULT = "default"
    DECLARE = "declare"
    ABSTRACT = "abstract"
    STATIC = "static"
    READONLY = "readonly"
    PUBLIC = "public"
    PROTECTED = "protected"
    PRIVATE = "private"
    ASYNC = "async"
    CONST = "const"


class SymbolFlags(IntFlag):
    """Symbol classification flags."""

    NONE = 0
    VARIABLE = 1 << 0
    PROPERTY = 1 << 1
    ENUM_MEMBER = 1 << 2
    FUNCTION = 1 << 3
    CLASS = 1 << 4
    INTERFACE = 1 << 5
    ENUM = 1 << 6
    VALUE_MODULE = 1 << 7
    NAMESPACE_MODULE = 1 << 8
    TYPE_ALIAS = 1 << 9
    METHOD = 1 << 10
    CONSTRUCTOR = 1 << 11
    GET_ACCESSOR = 1 << 12
    SET_ACCESSOR = 1 << 13
    SIGNATURE = 1 << 14
    ALIAS = 1 << 15

    MODULE = VALUE_MODULE | NAMESPACE_MODULE
    ACCESSOR = GET_ACCESSOR | SET_ACCESSOR


# Parameter modifiers that turn a constructor parameter into an instance property.
PARAMETER_PROPERTY_MODIFIERS = frozenset({Modifier.PUBLIC, Modifier.PROTECTED, Modifier.PRIVATE, Modifier.READONLY})


@dataclass(eq=False)
class Node:
    """A syntax node.

    `type` holds the explicit annotation source text (the return annotation
    for callables, the constraint for type parameters). `inferred_type` is an
    optional hint consumed only by in-memory type checkers. `pos` is the
    source position; the binder assigns it in declaration order.
    """

    kind: SyntaxKind
    name: str | None = None
    modifiers: frozenset[Modifier] = frozenset()
    type: str | None = None
    initializer: str | None = None
    question_token: bool = False
    dot_dot_dot_token: bool = False
    type_parameters: list["Node"] = field(default_factory=list)
    parameters: list["Node"] = field(default_factory=list)
    members: list["Node"] = field(default_factory=list)
    body: "Node | None" = None
    statements: list["Node"] = field(default_factory=list)
    elements: list["Node"] = field(default_factory=list)
    property_name: str | None = None
    module_specifier: str | None = None
    extends: tuple[str, ...] = ()
    implements: tuple[str, ...] = ()
    text: str | None = None
    inferred_type: str | None = field(default=None, repr=False)
    pos: int = -1
    parent: "Node | None" = field(default=None, repr=False)
    symbol: "Symbol | None" = field(default=None, repr=False)

    def has_modifier(self, modifier: Modifier) -> bool:
        return modifier in self.modifiers

    def children(self) -> list["Node"]:
        """Direct children in source order."""
        nested = [self.body] if self.body is not None else []
        return [*self.type_parameters, *self.parameters, *self.members, *nested, *self.statements, *self.elements]


@dataclass(eq=False)
class Symbol:
    """A named entity with its declarations and export/member tables.

    Tables are insertion-ordered: their order is the engine's binding order.
    """

    name: str
    flags: SymbolFlags = SymbolFlags.NONE
    declarations: list[Node] = field(default_factory=list, repr=False)
    exports: dict[str, "Symbol"] = field(default_factory=dict, repr=False)
    members: dict[str, "Symbol"] = field(default_factory=dict, repr=False)
    parent: "Symbol | None" = field(default=None, repr=False)

    def has(self, flags: SymbolFlags) -> bool:
        return bool(self.flags & flags)

    @property
    def value_declaration(self) -> Node | None:
        return self.declarations[0] if self.declarations else None


@dataclass(eq=False)
class SourceFile:
    """A parsed file. `symbol` is set only for files that are external modules."""

    file_name: str
    statements: list[Node] = field(default_factory=list)
    symbol: Symbol | None = field(default=None, repr=False)
