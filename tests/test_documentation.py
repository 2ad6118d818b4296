"""
Tests for comment and docstring attachment.
"""

from codeschema.ast import DocumentationRecord, DocumentationResolver
from codeschema.ast.parser import ASTParser
from codeschema.ast.walker import find_nodes_by_type


def _method_docs(extractor, source):
    return {m.name: m.documentation for m in extractor.extract_methods(source)}


class TestPrecedingComments:
    """Test comments directly before an entity."""

    def test_python_line_comments(self, python_extractor):
        source = "# Entry point.\n# Runs the tool.\ndef main():\n    pass\n"
        doc = _method_docs(python_extractor, source)["main"]
        assert doc.has_doc
        assert doc.docstring == "# Entry point.\n# Runs the tool."

    def test_blank_lines_do_not_detach(self, python_extractor):
        source = "# Detached comment.\n\n\ndef main():\n    pass\n"
        doc = _method_docs(python_extractor, source)["main"]
        assert doc.docstring == "# Detached comment."

    def test_code_between_detaches(self, python_extractor):
        source = "# About x.\nx = 1\n\ndef main():\n    pass\n"
        assert not _method_docs(python_extractor, source)["main"].has_doc

    def test_java_block_comment_on_class(self, java_extractor):
        source = "/** A point. */\nclass Point {}\n"
        point = java_extractor.extract_classes(source)[0]
        assert point.documentation.docstring == "/** A point. */"


class TestWrapperComments:
    """Test comments attached through a decorator wrapper."""

    def test_comment_before_decorator(self, python_extractor):
        source = "# Cached lookup.\n@cache\ndef lookup(key):\n    return key\n"
        doc = _method_docs(python_extractor, source)["lookup"]
        assert doc.docstring == "# Cached lookup."


class TestDocstrings:
    """Test docstring fallback."""

    def test_docstring_when_no_comments(self, python_extractor):
        source = 'def area(r):\n    """Area of a circle."""\n    return 3.14 * r * r\n'
        doc = _method_docs(python_extractor, source)["area"]
        assert doc.docstring == '"""Area of a circle."""'

    def test_comments_take_priority(self, python_extractor):
        source = '# Circle helper.\ndef area(r):\n    """Area of a circle."""\n    return r\n'
        doc = _method_docs(python_extractor, source)["area"]
        assert doc.docstring == "# Circle helper."

    def test_string_after_code_is_not_docstring(self, python_extractor):
        source = 'def area(r):\n    x = r\n    "not a docstring"\n    return x\n'
        assert not _method_docs(python_extractor, source)["area"].has_doc

    def test_brace_bodies_have_no_docstring(self):
        root = ASTParser().parse("function f() { 'use strict'; }\n", "javascript").root_node
        function = find_nodes_by_type(root, "function_declaration")[0]
        assert DocumentationResolver().body_docstring(function) is None


class TestDocumentationRecord:
    """Test DocumentationRecord construction."""

    def test_whitespace_only_is_empty(self):
        doc = DocumentationRecord.from_texts(["  ", ""])
        assert not doc.has_doc
        assert doc.docstring is None

    def test_trimmed(self):
        doc = DocumentationRecord.from_texts(["  // note  "])
        assert doc.has_doc
        assert doc.docstring == "// note"

    def test_no_texts(self):
        assert DocumentationRecord.from_texts([]) == DocumentationRecord()
