"""
JavaScript Variant

Class field definitions map one-to-one to FieldRecords. ``let``/``const``/
``var`` declarations count as fields only when they sit lexically inside a
class; each declarator of such a statement becomes its own FieldRecord,
with the declaration keyword as its modifier. Values are untyped, so the
value's node type stands in for the field type.
"""

from tree_sitter import Node

from codeschema.ast.extractors.base import EntityExtractor, LanguageVariant, register_variant
from codeschema.ast.models import FieldRecord, Location
from codeschema.ast.walker import child_by_fields, find_nodes_by_type, node_text

FIELD_DEFINITION_TYPES = ("field_definition", "public_field_definition")
DECLARATION_TYPES = ("lexical_declaration", "variable_declaration")


def _value_type(node: Node) -> str:
    value = node.child_by_field_name("value")
    return value.type if value is not None else "undefined"


def extract_field_info(extractor: EntityExtractor, node: Node, index: int) -> list[FieldRecord]:
    parent_class = extractor.get_parent_class_name(node)

    if node.type in FIELD_DEFINITION_TYPES:
        name_node = child_by_fields(node, "name", "property")
        return [FieldRecord(
            index=index + 1,
            name=node_text(name_node) if name_node is not None else "unknown",
            type=_value_type(node),
            node_type=node.type,
            location=Location.from_node(node),
            parent_class=parent_class,
            modifiers=(),
            text=node_text(node).strip(),
        )]

    if node.type in DECLARATION_TYPES:
        if parent_class is None:
            return []

        kind = node.children[0] if node.children else None
        modifiers = (node_text(kind),) if kind is not None else ()
        location = Location.from_node(node)

        records = []
        for offset, declarator in enumerate(find_nodes_by_type(node, "variable_declarator")):
            name_node = declarator.child_by_field_name("name")
            records.append(FieldRecord(
                index=index + offset + 1,
                name=node_text(name_node) if name_node is not None else "unknown",
                type=_value_type(declarator),
                node_type=node.type,
                location=location,
                parent_class=parent_class,
                modifiers=modifiers,
                text=node_text(declarator).strip(),
            ))
        return records

    return []


def is_static_method(extractor: EntityExtractor, node: Node, modifiers: tuple[str, ...]) -> bool:
    """``static`` is a bare keyword token on the method definition."""
    if "static" in modifiers:
        return True
    return any(child.type == "static" for child in node.children)


JAVASCRIPT_VARIANT = LanguageVariant(
    name="javascript",
    extract_field_info=extract_field_info,
    is_static_method=is_static_method,
)

# Register the variant
register_variant(JAVASCRIPT_VARIANT, "javascript")
