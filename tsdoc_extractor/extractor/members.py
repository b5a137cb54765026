"""Member documents for classes, interfaces and enums.

Access comes from declaration modifiers (public when absent). A class
constructor is documented as a member named ``constructor``, immediately
followed by one property member per parameter property.
"""

from collections.abc import Callable

from tsdoc_extractor.extractor.models import Access, MemberDoc, MemberKind
from tsdoc_extractor.extractor.signatures import SignatureRenderer
from tsdoc_extractor.extractor.type_renderer import TypeRenderer
from tsdoc_extractor.semantic import (
    CALL_SIGNATURE_NAME,
    CONSTRUCT_SIGNATURE_NAME,
    CONSTRUCTOR_NAME,
    PARAMETER_PROPERTY_MODIFIERS,
    Modifier,
    Node,
    Symbol,
    SymbolFlags,
    SyntaxKind,
)

_METHOD_KINDS = frozenset({SyntaxKind.METHOD_DECLARATION, SyntaxKind.METHOD_SIGNATURE})

# (position, documents) - a constructor group holds several documents
_Position = tuple[int, int]
_Entry = tuple[_Position, list[MemberDoc]]


def _position_within(owner: Symbol) -> Callable[[Node], _Position]:
    """Sort key for member declarations: (index of the enclosing owner declaration, source position).

    Source positions restart in every file, so they only compare members
    held by the same owner declaration.
    """
    ranks = {declaration: index for index, declaration in enumerate(owner.declarations)}

    def position(node: Node) -> _Position:
        enclosing: Node | None = node
        while enclosing is not None and enclosing not in ranks:
            enclosing = enclosing.parent
        return (ranks[enclosing] if enclosing is not None else len(ranks), node.pos)

    return position


def access_of(node: Node) -> Access:
    if node.has_modifier(Modifier.PRIVATE):
        return Access.PRIVATE
    if node.has_modifier(Modifier.PROTECTED):
        return Access.PROTECTED
    return Access.PUBLIC


class MemberBuilder:
    """Builds and orders member documents.

    With `sort_class_members` members are ordered by declaration: first by
    which of the owner's declarations holds them (file-processing order for
    an interface merged across files), then by source position within it.
    Without it the engine's table order is kept (instance members, then
    static members).
    """

    def __init__(self, types: TypeRenderer, signatures: SignatureRenderer, *, sort_class_members: bool = True) -> None:
        self._types = types
        self._signatures = signatures
        self._sort = sort_class_members

    def class_members(self, symbol: Symbol, owner_id: str) -> tuple[MemberDoc, ...]:
        position = _position_within(symbol)
        entries: list[_Entry] = []
        for member in symbol.members.values():
            declaration = member.value_declaration
            # parameter properties are emitted with their constructor
            if declaration is None or declaration.kind is SyntaxKind.PARAMETER:
                continue
            if member.name == CONSTRUCTOR_NAME:
                entries.append((position(declaration), self._constructor_group(member, symbol, owner_id)))
            else:
                entries.append((position(declaration), [self._member(member, owner_id)]))
        for member in symbol.exports.values():
            declaration = member.value_declaration
            if declaration is not None:
                entries.append((position(declaration), [self._member(member, owner_id)]))
        return self._ordered(entries)

    def interface_members(self, symbol: Symbol, owner_id: str) -> tuple[tuple[MemberDoc, ...], MemberDoc | None, MemberDoc | None]:
        """Ordinary members plus the call-signature and construct-signature members."""
        position = _position_within(symbol)
        entries: list[_Entry] = []
        call_member: MemberDoc | None = None
        new_member: MemberDoc | None = None
        for member in symbol.members.values():
            declaration = member.value_declaration
            if declaration is None:
                continue
            if member.name == CALL_SIGNATURE_NAME:
                call_member = self._signature_member(member, owner_id, MemberKind.CALL_SIGNATURE)
            elif member.name == CONSTRUCT_SIGNATURE_NAME:
                new_member = self._signature_member(member, owner_id, MemberKind.CONSTRUCT_SIGNATURE)
            else:
                entries.append((position(declaration), [self._member(member, owner_id)]))
        return self._ordered(entries), call_member, new_member

    def enum_members(self, symbol: Symbol, owner_id: str) -> tuple[MemberDoc, ...]:
        return tuple(
            MemberDoc(name=member.name, id=f"{owner_id}.{member.name}", kind=MemberKind.ENUM_MEMBER, return_type=symbol.name)
            for member in symbol.exports.values()
            if member.has(SymbolFlags.ENUM_MEMBER)
        )

    def _ordered(self, entries: list[_Entry]) -> tuple[MemberDoc, ...]:
        if self._sort:
            entries = sorted(entries, key=lambda entry: entry[0])
        return tuple(doc for _, docs in entries for doc in docs)

    def _member(self, member: Symbol, owner_id: str) -> MemberDoc:
        declaration = member.declarations[0]
        common = {
            "name": member.name,
            "id": f"{owner_id}.{member.name}",
            "access": access_of(declaration),
            "is_static": declaration.has_modifier(Modifier.STATIC),
            "optional": declaration.question_token,
        }
        if member.has(SymbolFlags.ACCESSOR):
            return MemberDoc(kind=MemberKind.ACCESSOR, return_type=self._accessor_type(member), **common)
        if declaration.kind in _METHOD_KINDS:
            signature = self._signatures.render(declaration)
            return MemberDoc(
                kind=MemberKind.METHOD,
                parameters=signature.parameters,
                type_parameters=signature.type_parameters,
                return_type=signature.return_type,
                **common,
            )
        return MemberDoc(kind=MemberKind.PROPERTY, return_type=self._types.declared_type(declaration), **common)

    def _accessor_type(self, member: Symbol) -> str:
        for declaration in member.declarations:
            if declaration.kind is SyntaxKind.GET_ACCESSOR:
                return self._types.return_type(declaration)
        for declaration in member.declarations:
            if declaration.kind is SyntaxKind.SET_ACCESSOR and declaration.parameters:
                return self._types.declared_type(declaration.parameters[0])
        return "any"

    def _constructor_group(self, constructor: Symbol, owner: Symbol, owner_id: str) -> list[MemberDoc]:
        declaration = constructor.declarations[0]
        docs = [
            MemberDoc(
                name="constructor",
                id=f"{owner_id}.constructor",
                kind=MemberKind.CONSTRUCTOR,
                access=access_of(declaration),
                parameters=self._signatures.parameters(declaration),
                type_parameters=self._signatures.type_parameters(declaration),
                return_type=owner.name,
            )
        ]
        seen: set[str] = set()
        for overload in constructor.declarations:
            for parameter in overload.parameters:
                name = parameter.name or ""
                if name in seen or not parameter.modifiers & PARAMETER_PROPERTY_MODIFIERS:
                    continue
                seen.add(name)
                docs.append(
                    MemberDoc(
                        name=name,
                        id=f"{owner_id}.{name}",
                        kind=MemberKind.PROPERTY,
                        access=access_of(parameter),
                        return_type=self._types.declared_type(parameter),
                        optional=parameter.question_token,
                    )
                )
        return docs

    def _signature_member(self, member: Symbol, owner_id: str, kind: MemberKind) -> MemberDoc:
        signature = self._signatures.render(member.declarations[0])
        return MemberDoc(
            name=member.name,
            id=f"{owner_id}.{member.name}",
            kind=kind,
            parameters=signature.parameters,
            type_parameters=signature.type_parameters,
            return_type=signature.return_type,
        )
