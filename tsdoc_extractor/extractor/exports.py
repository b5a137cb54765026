"""Export resolution: pairs each export name with the symbol it documents."""

from dataclasses import dataclass

from tsdoc_extractor.semantic import Symbol, SymbolFlags, TypeChecker


@dataclass(frozen=True)
class ResolvedExport:
    """An export as seen from its module.

    `name` is the local export name; `symbol` is the declared symbol that
    supplies type and member information; `alias` is the re-export binding
    when there is one.
    """

    name: str
    symbol: Symbol
    alias: Symbol | None = None

    @property
    def is_alias(self) -> bool:
        return self.alias is not None

    @property
    def export_symbol(self) -> Symbol:
        """The symbol that appears in the module's export table."""
        return self.alias if self.alias is not None else self.symbol

    @property
    def is_resolved(self) -> bool:
        return bool(self.symbol.declarations)


def resolve_export(checker: TypeChecker, export: Symbol) -> ResolvedExport:
    if export.has(SymbolFlags.ALIAS):
        return ResolvedExport(name=export.name, symbol=checker.get_aliased_symbol(export), alias=export)
    return ResolvedExport(name=export.name, symbol=export)


def resolve_module_exports(checker: TypeChecker, module_symbol: Symbol) -> list[ResolvedExport]:
    """Exports of a module in export-table order, aliases resolved to their declarations."""
    return [resolve_export(checker, export) for export in checker.get_exports_of_module(module_symbol)]
