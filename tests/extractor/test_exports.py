"""Tests for export resolution."""

from tsdoc_extractor.extractor.exports import ResolvedExport, resolve_export, resolve_module_exports
from tsdoc_extractor.semantic import Symbol


def _module(program, file_name):
    return program.get_source_file(file_name).symbol


def test_plain_export_is_its_own_symbol(program):
    symbol = _module(program, "privateModule.ts").exports["SomeClass"]
    export = resolve_export(program.get_type_checker(), symbol)
    assert export.name == "SomeClass"
    assert export.symbol is symbol
    assert export.is_alias is False
    assert export.export_symbol is symbol


def test_alias_keeps_export_name_and_binding(program):
    alias = _module(program, "publicModule.ts").exports["NewClass"]
    export = resolve_export(program.get_type_checker(), alias)
    assert export.name == "NewClass"
    assert export.symbol.name == "SomeClass"
    assert export.is_alias is True
    assert export.export_symbol is alias
    assert export.is_resolved is True


def test_broken_alias_is_unresolved(program):
    alias = _module(program, "brokenReexport.ts").exports["Missing"]
    export = resolve_export(program.get_type_checker(), alias)
    assert export.is_alias is True
    assert export.is_resolved is False


def test_module_exports_in_table_order(program):
    exports = resolve_module_exports(program.get_type_checker(), _module(program, "ignoreExportsMatching.ts"))
    assert [export.name for export in exports] == ["___esModule", "OKToExport", "_thisIsPrivate", "thisIsOK"]


def test_module_exports_include_star_exports(program):
    exports = resolve_module_exports(program.get_type_checker(), _module(program, "wildcardModule.ts"))
    assert [export.name for export in exports] == ["SomeClass", "SimpleEnum", "TypesClass"]
    assert not any(export.is_alias for export in exports)


def test_resolved_export_equality():
    symbol = Symbol("Thing")
    assert ResolvedExport("Thing", symbol) == ResolvedExport("Thing", symbol)
    assert ResolvedExport("Thing", symbol) != ResolvedExport("Thing", Symbol("Thing"))
