"""
Tests for per-language field extraction and static detection.
"""

from codeschema.ast import LanguageVariant, create_extractor, get_variant, register_variant
from codeschema.ast.extractors import (
    CSHARP_VARIANT,
    DEFAULT_VARIANT,
    JAVA_VARIANT,
    JAVASCRIPT_VARIANT,
    PYTHON_VARIANT,
)
from codeschema.ast.extractors import base
from codeschema.ast.models import FieldRecord, Location


class TestVariantTable:
    """Test variant lookup and registration."""

    def test_registered_variants(self):
        assert get_variant("java") is JAVA_VARIANT
        assert get_variant("python") is PYTHON_VARIANT
        assert get_variant("csharp") is CSHARP_VARIANT
        assert get_variant("javascript") is JAVASCRIPT_VARIANT

    def test_aliases_resolve(self):
        assert get_variant("JS") is JAVASCRIPT_VARIANT
        assert get_variant("c#") is CSHARP_VARIANT
        assert get_variant("py") is PYTHON_VARIANT

    def test_unregistered_falls_back_to_default(self):
        assert get_variant("typescript") is DEFAULT_VARIANT
        assert get_variant("go") is DEFAULT_VARIANT

    def test_register_custom_variant(self, monkeypatch):
        monkeypatch.setattr(base, "_variants", dict(base._variants))

        def one_field(extractor, node, index):
            return [FieldRecord(
                index=index + 1,
                name="fixed",
                type="any",
                node_type=node.type,
                location=Location.from_node(node),
            )]

        custom = LanguageVariant(
            name="custom",
            extract_field_info=one_field,
            is_static_method=lambda extractor, node, modifiers: True,
        )
        register_variant(custom, "typescript", "ts")
        extractor = create_extractor("typescript")
        assert extractor.variant is custom

        source = "class A {\n  x = 1;\n  m() {}\n}\n"
        assert [f.name for f in extractor.extract_fields(source)] == ["fixed"]
        assert extractor.extract_methods(source)[0].is_static


class TestJavaFields:
    """Test Java field declarations."""

    def test_field_type_and_modifiers(self, java_extractor):
        source = "class A {\n    private static final String NAME = \"a\";\n}\n"
        field = java_extractor.extract_fields(source)[0]
        assert field.name == "NAME"
        assert field.type == "String"
        assert field.modifiers == ("private", "static", "final")

    def test_multi_declarator_uses_first_name(self, java_extractor):
        fields = java_extractor.extract_fields("class A {\n    int a, b, c;\n}\n")
        assert [(f.index, f.name, f.type) for f in fields] == [(1, "a", "int")]

    def test_instance_method_not_static(self, java_extractor, calculator_java):
        methods = java_extractor.extract_methods(calculator_java)
        assert [m.is_static for m in methods] == [False, True, False]


class TestPythonFields:
    """Test Python self-attribute fields."""

    def test_self_attributes_only(self, python_extractor, greeter_python):
        fields = python_extractor.extract_fields(greeter_python)
        assert [f.name for f in fields] == ["self.name", "self.punctuation"]
        assert [f.index for f in fields] == [1, 2]
        assert all(f.parent_class == "Greeter" for f in fields)
        assert all(f.type == "identifier" for f in fields)
        assert all(f.modifiers == () for f in fields)

    def test_annotated_attribute(self, python_extractor):
        source = "class Box:\n    def __init__(self):\n        self.size: int = 0\n"
        field = python_extractor.extract_fields(source)[0]
        assert field.name == "self.size"
        assert field.type == "int"

    def test_class_and_module_assignments_ignored(self, python_extractor):
        source = "self.x = 1\n\nclass Box:\n    limit = 10\n"
        assert python_extractor.extract_fields(source) == []

    def test_staticmethod_decorator(self, python_extractor, greeter_python):
        methods = {m.name: m for m in python_extractor.extract_methods(greeter_python)}
        assert methods["shout"].is_static
        assert [d.name for d in methods["shout"].decorators] == ["staticmethod"]
        assert not methods["__init__"].is_static
        assert not methods["fetch"].is_static

    def test_other_decorator_not_static(self, python_extractor):
        source = "class A:\n    @classmethod\n    def make(cls):\n        pass\n"
        make = python_extractor.extract_methods(source)[0]
        assert not make.is_static
        assert make.decorators[0].name == "classmethod"


class TestCSharpFields:
    """Test C# declarators and properties."""

    def test_one_record_per_declarator(self, csharp_extractor, account_csharp):
        fields = csharp_extractor.extract_fields(account_csharp)
        declared = [f for f in fields if not f.is_property]
        assert [f.name for f in declared] == ["x", "y", "z"]
        assert [f.index for f in declared] == [1, 2, 3]
        assert all(f.type == "int" for f in declared)
        assert all(f.modifiers == ("private",) for f in declared)
        assert all(f.parent_class == "Account" for f in declared)

    def test_property(self, csharp_extractor, account_csharp):
        owner = csharp_extractor.extract_fields(account_csharp)[-1]
        assert owner.name == "Owner"
        assert owner.is_property
        assert owner.index == 4
        assert owner.type == "string"
        assert owner.modifiers == ("public",)

    def test_methods(self, csharp_extractor, account_csharp):
        methods = {m.name: m for m in csharp_extractor.extract_methods(account_csharp)}
        assert methods["ToString"].is_override
        assert methods["ToString"].return_type == "string"
        assert not methods["ToString"].is_static
        assert methods["Create"].is_static
        assert methods["Create"].return_type == "Account"


class TestJavaScriptFields:
    """Test JavaScript class fields and declarations."""

    def test_fields_and_class_scoped_declarations(self, js_extractor, counter_js):
        fields = js_extractor.extract_fields(counter_js)
        assert [(f.index, f.name) for f in fields] == [(1, "count"), (2, "next")]

        count, nxt = fields
        assert count.type == "number"
        assert count.parent_class == "Counter"
        assert nxt.modifiers == ("let",)
        assert nxt.type == "binary_expression"

    def test_top_level_declarations_ignored(self, js_extractor):
        source = "const limit = 10;\nfunction f() { let y = 2; }\n"
        assert js_extractor.extract_fields(source) == []

    def test_multiple_declarators(self, js_extractor):
        source = "class A {\n  m() {\n    const a = 1, b = 'x';\n  }\n}\n"
        fields = js_extractor.extract_fields(source)
        assert [(f.index, f.name, f.type) for f in fields] == [
            (1, "a", "number"),
            (2, "b", "string"),
        ]
        assert all(f.modifiers == ("const",) for f in fields)
