"""Module symbol collection for requested source files."""

from tsdoc_extractor.logging import get_extractor_logger
from tsdoc_extractor.semantic import SourceFile, Symbol, SymbolFlags, SyntaxKind, TypeChecker

logger = get_extractor_logger(__name__)


def collect_module_symbols(checker: TypeChecker, source_file: SourceFile) -> list[Symbol]:
    """Return the module symbols a file contributes, in statement order.

    External modules contribute their file symbol. Script files contribute
    the closest exporting namespace of each top-level namespace statement.
    A file without any symbol-bearing statement contributes nothing.
    """
    if source_file.symbol is not None:
        return [source_file.symbol]

    statements = [statement for statement in source_file.statements if statement.symbol is not None]
    if not statements:
        logger.warning("No module code found in %s", source_file.file_name)
        return []

    collected: list[Symbol] = []
    for statement in statements:
        symbol = statement.symbol
        assert symbol is not None
        if not symbol.has(SymbolFlags.MODULE):
            logger.debug("Skipping global %s in %s", symbol.name, source_file.file_name)
            continue
        collected.extend(closest_exporting_symbols(checker, symbol))
    return collected


def closest_exporting_symbols(checker: TypeChecker, symbol: Symbol) -> list[Symbol]:
    """Descend through wrapper namespaces that export nothing themselves.

    A namespace with no exports and a single declaration whose body is
    itself a namespace is replaced by that inner namespace, recursively.
    """
    if checker.get_exports_of_module(symbol) or len(symbol.declarations) != 1:
        return [symbol]
    declaration = symbol.declarations[0]
    body = declaration.body
    if declaration.kind is SyntaxKind.MODULE_DECLARATION and body is not None and body.symbol is not None:
        return closest_exporting_symbols(checker, body.symbol)
    return [symbol]
