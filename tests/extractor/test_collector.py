"""Tests for module symbol collection."""

from unittest.mock import MagicMock, patch

from tests.support.programs import BASE_DIR
from tsdoc_extractor.extractor import collector
from tsdoc_extractor.extractor.collector import closest_exporting_symbols, collect_module_symbols
from tsdoc_extractor.semantic import MemoryProgram, Node, Symbol, SymbolFlags, SyntaxKind
from tsdoc_extractor.semantic import builder as ts


def _collect(program, file_name):
    return collect_module_symbols(program.get_type_checker(), program.get_source_file(file_name))


def test_external_module_contributes_file_symbol(program):
    symbols = _collect(program, "publicModule.ts")
    assert symbols == [program.get_source_file("publicModule.ts").symbol]


def test_script_namespace_contributes_namespace_symbol(program):
    symbols = _collect(program, "uniteNamespaces1.ts")
    assert [symbol.name for symbol in symbols] == ["example"]


def test_split_namespace_collected_once_per_file(program):
    first = _collect(program, "uniteNamespaces1.ts")
    second = _collect(program, "uniteNamespaces2.ts")
    assert first[0] is second[0]


def test_comment_only_file_warns(program):
    with patch.object(collector.logger, "warning") as mock_warning:
        assert _collect(program, "commentOnly.ts") == []
    mock_warning.assert_called_once_with("No module code found in %s", f"{BASE_DIR}/commentOnly.ts")


def test_global_declarations_are_skipped():
    source = ts.source_file(
        "globals.ts",
        ts.class_decl("GlobalClass"),
        ts.namespace_decl("app", ts.function_decl("start", export=True)),
    )
    program = MemoryProgram([source], BASE_DIR)
    with patch.object(collector.logger, "debug") as mock_debug:
        symbols = _collect(program, "globals.ts")
    assert [symbol.name for symbol in symbols] == ["app"]
    mock_debug.assert_called_once()


# ---------------------------------------------------------------------------
# closest_exporting_symbols
# ---------------------------------------------------------------------------


def _namespace(name: str, body: Node | None = None) -> Symbol:
    declaration = Node(SyntaxKind.MODULE_DECLARATION, name=name, body=body)
    symbol = Symbol(name, SymbolFlags.NAMESPACE_MODULE, declarations=[declaration])
    declaration.symbol = symbol
    return symbol


def test_descends_through_wrapper_without_exports():
    inner = _namespace("inner", Node(SyntaxKind.MODULE_BLOCK))
    outer = _namespace("outer", inner.declarations[0])
    checker = MagicMock()
    checker.get_exports_of_module.side_effect = lambda symbol: [Symbol("X")] if symbol is inner else []

    assert closest_exporting_symbols(checker, outer) == [inner]


def test_stops_at_symbol_with_exports():
    inner = _namespace("inner", Node(SyntaxKind.MODULE_BLOCK))
    outer = _namespace("outer", inner.declarations[0])
    checker = MagicMock()
    checker.get_exports_of_module.return_value = [inner]

    assert closest_exporting_symbols(checker, outer) == [outer]


def test_stops_at_merged_declarations():
    outer = _namespace("outer")
    outer.declarations.append(Node(SyntaxKind.MODULE_DECLARATION, name="outer"))
    checker = MagicMock()
    checker.get_exports_of_module.return_value = []

    assert closest_exporting_symbols(checker, outer) == [outer]


def test_stops_at_block_body():
    outer = _namespace("outer", Node(SyntaxKind.MODULE_BLOCK))
    checker = MagicMock()
    checker.get_exports_of_module.return_value = []

    assert closest_exporting_symbols(checker, outer) == [outer]
