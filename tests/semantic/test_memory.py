"""Tests for the in-memory semantic program."""

from tests.support.programs import BASE_DIR, DETERMINE_TYPES, PRIVATE_MODULE, PUBLIC_MODULE
from tsdoc_extractor.semantic import (
    CALL_SIGNATURE_NAME,
    CONSTRUCT_SIGNATURE_NAME,
    CONSTRUCTOR_NAME,
    MemoryProgram,
    MemoryProgramFactory,
    SemanticProgram,
    SymbolFlags,
    TypeChecker,
)
from tsdoc_extractor.semantic import builder as ts


def _module(program, file_name):
    source_file = program.get_source_file(file_name)
    assert source_file is not None
    assert source_file.symbol is not None
    return source_file.symbol


class TestBinding:
    """Binding of files, declarations and members."""

    def test_external_module_gets_quoted_file_symbol(self, program):
        symbol = _module(program, "privateModule.ts")
        assert symbol.name == f'"{BASE_DIR}/privateModule"'
        assert symbol.has(SymbolFlags.VALUE_MODULE)
        assert list(symbol.exports) == ["SomeClass"]

    def test_script_file_has_no_file_symbol(self, program):
        source_file = program.get_source_file("uniteNamespaces1.ts")
        assert source_file is not None
        assert source_file.symbol is None

    def test_lookup_by_absolute_name(self, program):
        assert program.get_source_file(f"{BASE_DIR}/publicModule.ts") is program.get_source_file("publicModule.ts")

    def test_unknown_file(self, program):
        assert program.get_source_file("nothing.ts") is None

    def test_split_namespaces_merge(self, program):
        first = program.get_source_file("uniteNamespaces1.ts").statements[0].symbol
        second = program.get_source_file("uniteNamespaces2.ts").statements[0].symbol
        assert first is second
        assert len(first.declarations) == 2
        inner = first.exports["test"]
        assert inner.parent is first
        assert list(inner.exports) == ["InnerClassOne", "InnerClass"]

    def test_class_member_tables(self, program):
        counter = _module(program, "staticMembers.ts").exports["Counter"]
        assert list(counter.members) == ["count", CONSTRUCTOR_NAME, "start", "step", "increment"]
        assert list(counter.exports) == ["create"]
        assert counter.members[CONSTRUCTOR_NAME].has(SymbolFlags.CONSTRUCTOR)
        assert counter.members["start"].has(SymbolFlags.PROPERTY)

    def test_interface_signature_names(self, program):
        interface = _module(program, "interfaces.ts").exports["MyInterface"]
        assert list(interface.members) == ["optionalProperty", CALL_SIGNATURE_NAME, CONSTRUCT_SIGNATURE_NAME]

    def test_accessor_pair_is_one_symbol(self):
        source = ts.source_file(
            "accessors.ts",
            ts.class_decl(
                "Box",
                ts.getter("size", "number"),
                ts.setter("size", ts.parameter("value", "number")),
                export=True,
            ),
        )
        program = MemoryProgram([source], BASE_DIR)
        size = _module(program, "accessors.ts").exports["Box"].members["size"]
        assert size.has(SymbolFlags.GET_ACCESSOR)
        assert size.has(SymbolFlags.SET_ACCESSOR)
        assert len(size.declarations) == 2

    def test_unexported_declarations_stay_local(self):
        source = ts.source_file("local.ts", ts.class_decl("Hidden"), ts.class_decl("Shown", export=True))
        program = MemoryProgram([source], BASE_DIR)
        assert list(_module(program, "local.ts").exports) == ["Shown"]

    def test_positions_follow_source_order(self, program):
        typesclass = _module(program, "determineTypes.ts").exports["TypesClass"]
        positions = [member.value_declaration.pos for member in typesclass.members.values()]
        assert positions == sorted(positions)

    def test_programs_do_not_share_trees(self):
        first = MemoryProgram([PRIVATE_MODULE], BASE_DIR)
        second = MemoryProgram([PRIVATE_MODULE], BASE_DIR)
        assert _module(first, "privateModule.ts") is not _module(second, "privateModule.ts")
        assert PRIVATE_MODULE.symbol is None
        assert PRIVATE_MODULE.statements[0].symbol is None


class TestTypeChecker:
    """Alias resolution, export flattening and type inference."""

    def test_protocol_conformance(self, program):
        assert isinstance(program, SemanticProgram)
        assert isinstance(program.get_type_checker(), TypeChecker)

    def test_aliased_symbol_follows_reexport(self, program):
        checker = program.get_type_checker()
        alias = _module(program, "publicModule.ts").exports["NewClass"]
        target = checker.get_aliased_symbol(alias)
        assert target is _module(program, "privateModule.ts").exports["SomeClass"]

    def test_non_alias_resolves_to_itself(self, program):
        checker = program.get_type_checker()
        symbol = _module(program, "privateModule.ts").exports["SomeClass"]
        assert checker.get_aliased_symbol(symbol) is symbol

    def test_broken_alias_resolves_to_symbol_without_declarations(self, program):
        checker = program.get_type_checker()
        alias = _module(program, "brokenReexport.ts").exports["Missing"]
        assert checker.get_aliased_symbol(alias).declarations == []

    def test_alias_chain_through_local_import(self):
        source = ts.source_file(
            "facade.ts",
            ts.import_from("./privateModule", ("SomeClass", "Imported")),
            ts.export_names(("Imported", "Facade")),
        )
        program = MemoryProgram([PRIVATE_MODULE, source], BASE_DIR)
        checker = program.get_type_checker()
        target = checker.get_aliased_symbol(_module(program, "facade.ts").exports["Facade"])
        assert target is _module(program, "privateModule.ts").exports["SomeClass"]

    def test_cyclic_alias_chain_resolves_to_unknown(self):
        first = ts.source_file("a.ts", ts.export_from("./b", "Loop"))
        second = ts.source_file("b.ts", ts.export_from("./a", "Loop"))
        program = MemoryProgram([first, second], BASE_DIR)
        checker = program.get_type_checker()
        resolved = checker.get_aliased_symbol(_module(program, "a.ts").exports["Loop"])
        assert resolved.declarations == []

    def test_star_exports_are_flattened(self, program):
        checker = program.get_type_checker()
        exports = checker.get_exports_of_module(_module(program, "wildcardModule.ts"))
        assert [symbol.name for symbol in exports] == ["SomeClass", "SimpleEnum", "TypesClass"]

    def test_local_export_shadows_star_export(self):
        source = ts.source_file(
            "shadow.ts",
            ts.export_star("./privateModule"),
            ts.class_decl("SomeClass", export=True),
        )
        program = MemoryProgram([PRIVATE_MODULE, source], BASE_DIR)
        module = _module(program, "shadow.ts")
        exports = program.get_type_checker().get_exports_of_module(module)
        assert exports == [module.exports["SomeClass"]]

    def test_exports_of_non_module_is_empty(self, program):
        checker = program.get_type_checker()
        some_class = _module(program, "privateModule.ts").exports["SomeClass"]
        assert checker.get_exports_of_module(some_class) == []

    def test_type_inference(self, program):
        checker = program.get_type_checker()
        types_class = _module(program, "determineTypes.ts").exports["TypesClass"]
        members = types_class.members

        assert checker.get_type_at_location(members["simpleType"].value_declaration) == "string"
        assert checker.get_type_at_location(members["inferredBool"].value_declaration) == "boolean"
        assert checker.get_type_at_location(members["inferredEnum"].value_declaration) == "SimpleEnum"
        assert checker.get_return_type_of_signature(members["methodInferredString"].value_declaration) == "string"
        assert checker.get_return_type_of_signature(members["methodInferredVoid"].value_declaration) == "void"

    def test_literal_initializers(self):
        source = ts.source_file(
            "literals.ts",
            ts.variable_decl("count", initializer="-1.5e3", export=True),
            ts.variable_decl("label", initializer="`tpl`", export=True),
            ts.variable_decl("other", initializer="compute()", export=True),
            ts.variable_decl("untyped", export=True),
        )
        program = MemoryProgram([source], BASE_DIR)
        checker = program.get_type_checker()
        exports = _module(program, "literals.ts").exports
        assert [checker.get_type_at_location(symbol.value_declaration) for symbol in exports.values()] == [
            "number",
            "string",
            "any",
            "any",
        ]


def test_factory_builds_fresh_programs():
    factory = MemoryProgramFactory([PUBLIC_MODULE, PRIVATE_MODULE, DETERMINE_TYPES])
    first = factory(["publicModule.ts"], BASE_DIR)
    second = factory(["publicModule.ts"], BASE_DIR)
    assert first is not second
    assert first.get_source_file("publicModule.ts") is not second.get_source_file("publicModule.ts")
