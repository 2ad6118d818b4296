"""
C# Variant

A field_declaration may declare several variables (``int a, b, c;``); each
declarator becomes its own FieldRecord. Property declarations become a
FieldRecord flagged ``is_property``.
"""

from tree_sitter import Node

from codeschema.ast.extractors.base import (
    EntityExtractor,
    LanguageVariant,
    default_is_static_method,
    register_variant,
)
from codeschema.ast.models import FieldRecord, Location
from codeschema.ast.walker import find_child, find_nodes_by_type, node_text


def _declarator_name(declarator: Node) -> str:
    name_node = declarator.child_by_field_name("name")
    if name_node is None:
        name_node = find_child(declarator, "identifier")
    return node_text(name_node) if name_node is not None else "unknown"


def _field_declarations(extractor: EntityExtractor, node: Node, index: int) -> list[FieldRecord]:
    declaration = node.child_by_field_name("declaration")
    if declaration is None:
        declaration = find_child(node, "variable_declaration")
    if declaration is None:
        return []

    type_node = node.child_by_field_name("type")
    if type_node is None:
        type_node = declaration.child_by_field_name("type")
    field_type = node_text(type_node) if type_node is not None else "unknown"

    modifiers = extractor.get_modifiers(node)
    parent_class = extractor.get_parent_class_name(node)
    location = Location.from_node(node)

    return [
        FieldRecord(
            index=index + offset + 1,
            name=_declarator_name(declarator),
            type=field_type,
            node_type=node.type,
            location=location,
            parent_class=parent_class,
            modifiers=modifiers,
            text=node_text(declarator).strip(),
        )
        for offset, declarator in enumerate(
            find_nodes_by_type(declaration, "variable_declarator")
        )
    ]


def _property_declaration(extractor: EntityExtractor, node: Node, index: int) -> list[FieldRecord]:
    name_node = node.child_by_field_name("name")
    type_node = node.child_by_field_name("type")
    return [FieldRecord(
        index=index + 1,
        name=node_text(name_node) if name_node is not None else "unknown",
        type=node_text(type_node) if type_node is not None else "unknown",
        node_type=node.type,
        location=Location.from_node(node),
        parent_class=extractor.get_parent_class_name(node),
        modifiers=extractor.get_modifiers(node),
        text=node_text(node).strip(),
        is_property=True,
    )]


def extract_field_info(extractor: EntityExtractor, node: Node, index: int) -> list[FieldRecord]:
    if node.type == "field_declaration":
        return _field_declarations(extractor, node, index)
    if node.type == "property_declaration":
        return _property_declaration(extractor, node, index)
    return []


CSHARP_VARIANT = LanguageVariant(
    name="csharp",
    extract_field_info=extract_field_info,
    is_static_method=default_is_static_method,
)

# Register the variant
register_variant(CSHARP_VARIANT, "csharp")
