"""Export document construction, one variant per declaration kind."""

from pathlib import Path

from tsdoc_extractor.extractor.exports import ResolvedExport
from tsdoc_extractor.extractor.members import MemberBuilder
from tsdoc_extractor.extractor.models import (
    ClassDoc,
    ConstDoc,
    EnumDoc,
    ExportDoc,
    FunctionDoc,
    InterfaceDoc,
    TypeAliasDoc,
    UnresolvedExportDoc,
    VariableDoc,
)
from tsdoc_extractor.extractor.naming import declaring_module_id
from tsdoc_extractor.extractor.signatures import SignatureRenderer
from tsdoc_extractor.extractor.type_renderer import TypeRenderer
from tsdoc_extractor.logging import get_extractor_logger
from tsdoc_extractor.semantic import Modifier, Node, Symbol, SyntaxKind

logger = get_extractor_logger(__name__)


def _unique(values: list[str]) -> tuple[str, ...]:
    return tuple(dict.fromkeys(values))


def _documented_declaration(symbol: Symbol) -> Node | None:
    """First declaration that is not a namespace merged into a class, function or enum."""
    for declaration in symbol.declarations:
        if declaration.kind is not SyntaxKind.MODULE_DECLARATION:
            return declaration
    return symbol.value_declaration


class ExportDocBuilder:
    def __init__(self, types: TypeRenderer, signatures: SignatureRenderer, members: MemberBuilder, base_dir: Path) -> None:
        self._types = types
        self._signatures = signatures
        self._members = members
        self._base_dir = base_dir

    def build(self, export: ResolvedExport, module_id: str) -> ExportDoc:
        """Document an export of module_id under its export name.

        Exports that resolve to no declaration produce an UnresolvedExportDoc
        rather than failing the run.
        """
        symbol = export.symbol
        export_id = f"{module_id}/{export.name}"
        common = {
            "name": export.name,
            "id": export_id,
            "module": module_id,
            "original_module": self._original_module(symbol, module_id),
        }
        declaration = _documented_declaration(symbol)
        if declaration is None:
            logger.warning("Export %s of %s does not resolve to a declaration", export.name, module_id)
            return UnresolvedExportDoc(**common)

        match declaration.kind:
            case SyntaxKind.CLASS_DECLARATION:
                return ClassDoc(
                    members=self._members.class_members(symbol, export_id),
                    type_parameters=self._signatures.type_parameters(declaration),
                    extends=declaration.extends,
                    implements=declaration.implements,
                    abstract=declaration.has_modifier(Modifier.ABSTRACT),
                    **common,
                )
            case SyntaxKind.INTERFACE_DECLARATION:
                members, call_member, new_member = self._members.interface_members(symbol, export_id)
                return InterfaceDoc(
                    members=members,
                    type_parameters=self._signatures.type_parameters(declaration),
                    extends=_unique([base for part in self._declarations(symbol, declaration.kind) for base in part.extends]),
                    call_member=call_member,
                    new_member=new_member,
                    **common,
                )
            case SyntaxKind.FUNCTION_DECLARATION:
                signature = self._signatures.render(declaration)
                return FunctionDoc(
                    parameters=signature.parameters,
                    type_parameters=signature.type_parameters,
                    return_type=signature.return_type,
                    **common,
                )
            case SyntaxKind.ENUM_DECLARATION:
                return EnumDoc(members=self._members.enum_members(symbol, export_id), **common)
            case SyntaxKind.VARIABLE_DECLARATION:
                doc_class = ConstDoc if declaration.has_modifier(Modifier.CONST) else VariableDoc
                return doc_class(return_type=self._types.declared_type(declaration), **common)
            case SyntaxKind.TYPE_ALIAS_DECLARATION:
                return TypeAliasDoc(
                    type_definition=self._types.strip(declaration.type or ""),
                    type_parameters=self._signatures.type_parameters(declaration),
                    **common,
                )
        logger.warning("Export %s of %s has unsupported declaration kind %s", export.name, module_id, declaration.kind)
        return UnresolvedExportDoc(**common)

    def _original_module(self, symbol: Symbol, module_id: str) -> str | None:
        declared_in = declaring_module_id(symbol, self._base_dir)
        if declared_in is None or declared_in == module_id:
            return None
        return declared_in

    @staticmethod
    def _declarations(symbol: Symbol, kind: SyntaxKind) -> list[Node]:
        return [declaration for declaration in symbol.declarations if declaration.kind is kind]
