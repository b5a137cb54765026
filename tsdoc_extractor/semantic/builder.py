"""Declaration builders for assembling syntax trees by hand.

Each helper returns an unbound Node; MemoryProgram binds them. Explicit
annotations are passed as source text exactly as they would appear after
the colon, e.g. ``property_decl("point", "{ x:string; y:number }")``.

Example:
    >>> from tsdoc_extractor.semantic import builder as ts
    >>> module = ts.source_file(
    ...     "shapes.ts",
    ...     ts.class_decl("Circle", ts.property_decl("radius", "number"), export=True),
    ... )
"""

from collections.abc import Iterable

from tsdoc_extractor.semantic.nodes import Modifier, Node, SourceFile, SyntaxKind

ModifierLike = Modifier | str


def _modifiers(modifiers: Iterable[ModifierLike], *, export: bool = False) -> frozenset[Modifier]:
    result = {Modifier(modifier) for modifier in modifiers}
    if export:
        result.add(Modifier.EXPORT)
    return frozenset(result)


def _type_parameters(values: Iterable[Node | str]) -> list[Node]:
    return [value if isinstance(value, Node) else type_parameter(value) for value in values]


def source_file(file_name: str, *statements: Node) -> SourceFile:
    return SourceFile(file_name=file_name, statements=list(statements))


def namespace_decl(name: str, *statements: Node, export: bool = False, modifiers: Iterable[ModifierLike] = ()) -> Node:
    """Namespace (or internal module) declaration. Dotted names nest: ``a.b`` declares ``b`` inside ``a``."""
    segments = name.split(".")
    body = Node(SyntaxKind.MODULE_BLOCK, statements=list(statements))
    for segment in reversed(segments[1:]):
        body = Node(SyntaxKind.MODULE_DECLARATION, name=segment, body=body)
    return Node(SyntaxKind.MODULE_DECLARATION, name=segments[0], modifiers=_modifiers(modifiers, export=export), body=body)


def class_decl(
    name: str,
    *members: Node,
    export: bool = False,
    modifiers: Iterable[ModifierLike] = (),
    type_parameters: Iterable[Node | str] = (),
    extends: Iterable[str] = (),
    implements: Iterable[str] = (),
) -> Node:
    return Node(
        SyntaxKind.CLASS_DECLARATION,
        name=name,
        modifiers=_modifiers(modifiers, export=export),
        members=list(members),
        type_parameters=_type_parameters(type_parameters),
        extends=tuple(extends),
        implements=tuple(implements),
    )


def interface_decl(
    name: str,
    *members: Node,
    export: bool = False,
    type_parameters: Iterable[Node | str] = (),
    extends: Iterable[str] = (),
) -> Node:
    return Node(
        SyntaxKind.INTERFACE_DECLARATION,
        name=name,
        modifiers=_modifiers((), export=export),
        members=list(members),
        type_parameters=_type_parameters(type_parameters),
        extends=tuple(extends),
    )


def function_decl(
    name: str,
    *parameters: Node,
    returns: str | None = None,
    inferred: str | None = None,
    export: bool = False,
    modifiers: Iterable[ModifierLike] = (),
    type_parameters: Iterable[Node | str] = (),
) -> Node:
    return Node(
        SyntaxKind.FUNCTION_DECLARATION,
        name=name,
        modifiers=_modifiers(modifiers, export=export),
        parameters=list(parameters),
        type=returns,
        inferred_type=inferred,
        type_parameters=_type_parameters(type_parameters),
    )


def enum_decl(name: str, *members: Node | str, export: bool = False, modifiers: Iterable[ModifierLike] = ()) -> Node:
    return Node(
        SyntaxKind.ENUM_DECLARATION,
        name=name,
        modifiers=_modifiers(modifiers, export=export),
        members=[member if isinstance(member, Node) else enum_member(member) for member in members],
    )


def enum_member(name: str, initializer: str | None = None) -> Node:
    return Node(SyntaxKind.ENUM_MEMBER, name=name, initializer=initializer)


def variable_decl(
    name: str,
    type: str | None = None,
    *,
    initializer: str | None = None,
    inferred: str | None = None,
    const: bool = False,
    export: bool = False,
) -> Node:
    modifiers = (Modifier.CONST,) if const else ()
    return Node(
        SyntaxKind.VARIABLE_DECLARATION,
        name=name,
        modifiers=_modifiers(modifiers, export=export),
        type=type,
        initializer=initializer,
        inferred_type=inferred,
    )


def type_alias_decl(name: str, type: str, *, export: bool = False, type_parameters: Iterable[Node | str] = ()) -> Node:
    return Node(
        SyntaxKind.TYPE_ALIAS_DECLARATION,
        name=name,
        modifiers=_modifiers((), export=export),
        type=type,
        type_parameters=_type_parameters(type_parameters),
    )


def property_decl(
    name: str,
    type: str | None = None,
    *,
    initializer: str | None = None,
    inferred: str | None = None,
    optional: bool = False,
    modifiers: Iterable[ModifierLike] = (),
) -> Node:
    return Node(
        SyntaxKind.PROPERTY_DECLARATION,
        name=name,
        modifiers=_modifiers(modifiers),
        type=type,
        initializer=initializer,
        inferred_type=inferred,
        question_token=optional,
    )


def property_sig(name: str, type: str | None = None, *, optional: bool = False, modifiers: Iterable[ModifierLike] = ()) -> Node:
    return Node(SyntaxKind.PROPERTY_SIGNATURE, name=name, modifiers=_modifiers(modifiers), type=type, question_token=optional)


def method_decl(
    name: str,
    *parameters: Node,
    returns: str | None = None,
    inferred: str | None = None,
    optional: bool = False,
    modifiers: Iterable[ModifierLike] = (),
    type_parameters: Iterable[Node | str] = (),
) -> Node:
    return Node(
        SyntaxKind.METHOD_DECLARATION,
        name=name,
        modifiers=_modifiers(modifiers),
        parameters=list(parameters),
        type=returns,
        inferred_type=inferred,
        question_token=optional,
        type_parameters=_type_parameters(type_parameters),
    )


def method_sig(
    name: str,
    *parameters: Node,
    returns: str | None = None,
    optional: bool = False,
    type_parameters: Iterable[Node | str] = (),
) -> Node:
    return Node(
        SyntaxKind.METHOD_SIGNATURE,
        name=name,
        parameters=list(parameters),
        type=returns,
        question_token=optional,
        type_parameters=_type_parameters(type_parameters),
    )


def constructor_decl(*parameters: Node, modifiers: Iterable[ModifierLike] = ()) -> Node:
    return Node(SyntaxKind.CONSTRUCTOR, name="constructor", modifiers=_modifiers(modifiers), parameters=list(parameters))


def getter(name: str, returns: str | None = None, *, inferred: str | None = None, modifiers: Iterable[ModifierLike] = ()) -> Node:
    return Node(SyntaxKind.GET_ACCESSOR, name=name, modifiers=_modifiers(modifiers), type=returns, inferred_type=inferred)


def setter(name: str, value: Node, *, modifiers: Iterable[ModifierLike] = ()) -> Node:
    return Node(SyntaxKind.SET_ACCESSOR, name=name, modifiers=_modifiers(modifiers), parameters=[value])


def call_sig(*parameters: Node, returns: str | None = None, type_parameters: Iterable[Node | str] = ()) -> Node:
    return Node(
        SyntaxKind.CALL_SIGNATURE,
        parameters=list(parameters),
        type=returns,
        type_parameters=_type_parameters(type_parameters),
    )


def construct_sig(*parameters: Node, returns: str | None = None, type_parameters: Iterable[Node | str] = ()) -> Node:
    return Node(
        SyntaxKind.CONSTRUCT_SIGNATURE,
        parameters=list(parameters),
        type=returns,
        type_parameters=_type_parameters(type_parameters),
    )


def parameter(
    name: str,
    type: str | None = None,
    *,
    optional: bool = False,
    default: str | None = None,
    rest: bool = False,
    inferred: str | None = None,
    modifiers: Iterable[ModifierLike] = (),
) -> Node:
    return Node(
        SyntaxKind.PARAMETER,
        name=name,
        modifiers=_modifiers(modifiers),
        type=type,
        initializer=default,
        question_token=optional,
        dot_dot_dot_token=rest,
        inferred_type=inferred,
    )


def type_parameter(name: str, constraint: str | None = None, default: str | None = None) -> Node:
    text = name
    if constraint:
        text += f" extends {constraint}"
    if default:
        text += f" = {default}"
    return Node(SyntaxKind.TYPE_PARAMETER, name=name, type=constraint, initializer=default, text=text)


def _specifier(kind: SyntaxKind, value: str | tuple[str, str]) -> Node:
    if isinstance(value, tuple):
        original, alias = value
        return Node(kind, name=alias, property_name=original)
    return Node(kind, name=value)


def export_from(module_specifier: str, *names: str | tuple[str, str]) -> Node:
    """``export {a, b as c} from 'module'``; pass ``("b", "c")`` for a renamed export."""
    return Node(
        SyntaxKind.EXPORT_DECLARATION,
        module_specifier=module_specifier,
        elements=[_specifier(SyntaxKind.EXPORT_SPECIFIER, name) for name in names],
    )


def export_names(*names: str | tuple[str, str]) -> Node:
    """``export {a, b as c}`` of local or imported bindings."""
    return Node(SyntaxKind.EXPORT_DECLARATION, elements=[_specifier(SyntaxKind.EXPORT_SPECIFIER, name) for name in names])


def export_star(module_specifier: str) -> Node:
    return Node(SyntaxKind.EXPORT_DECLARATION, module_specifier=module_specifier)


def import_from(module_specifier: str, *names: str | tuple[str, str]) -> Node:
    return Node(
        SyntaxKind.IMPORT_DECLARATION,
        module_specifier=module_specifier,
        elements=[_specifier(SyntaxKind.IMPORT_SPECIFIER, name) for name in names],
    )
