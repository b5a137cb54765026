from tsdoc_extractor.semantic import Modifier, SyntaxKind
from tsdoc_extractor.semantic import builder as ts


def test_dotted_namespace_nests():
    node = ts.namespace_decl("a.b.c", ts.class_decl("Inner", export=True), export=True)
    assert node.name == "a"
    assert node.has_modifier(Modifier.EXPORT)
    assert node.body.kind is SyntaxKind.MODULE_DECLARATION
    assert node.body.name == "b"
    assert node.body.body.name == "c"
    assert node.body.body.body.kind is SyntaxKind.MODULE_BLOCK
    assert node.body.body.body.statements[0].name == "Inner"


def test_type_parameter_text():
    assert ts.type_parameter("T").text == "T"
    assert ts.type_parameter("U", "Findable<T>").text == "U extends Findable<T>"
    assert ts.type_parameter("V", "object", "{}").text == "V extends object = {}"


def test_type_parameters_accept_names():
    node = ts.function_decl("identity", type_parameters=["T", ts.type_parameter("U", "T")])
    assert [parameter.text for parameter in node.type_parameters] == ["T", "U extends T"]


def test_modifiers_accept_strings():
    node = ts.property_decl("value", "number", modifiers=["private", Modifier.READONLY])
    assert node.modifiers == frozenset({Modifier.PRIVATE, Modifier.READONLY})


def test_const_variable():
    node = ts.variable_decl("VERSION", initializer="'1'", const=True, export=True)
    assert node.modifiers == frozenset({Modifier.CONST, Modifier.EXPORT})


def test_renamed_export_specifier():
    node = ts.export_from("./other", "Plain", ("Original", "Alias"))
    assert node.module_specifier == "./other"
    assert [(element.name, element.property_name) for element in node.elements] == [("Plain", None), ("Alias", "Original")]
    assert all(element.kind is SyntaxKind.EXPORT_SPECIFIER for element in node.elements)


def test_star_export_has_no_elements():
    node = ts.export_star("./other")
    assert node.kind is SyntaxKind.EXPORT_DECLARATION
    assert node.elements == []


def test_rest_and_default_parameters():
    rest = ts.parameter("values", "number[]", rest=True)
    defaulted = ts.parameter("count", "number", default="1")
    assert rest.dot_dot_dot_token is True
    assert defaulted.initializer == "1"


def test_children_in_source_order():
    method = ts.method_decl("run", ts.parameter("a"), ts.parameter("b"), type_parameters=["T"])
    assert [child.name for child in method.children()] == ["T", "a", "b"]
