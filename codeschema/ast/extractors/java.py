"""
Java Variant

Nominally typed OOP: a field_declaration names its field through a
variable_declarator sub-node. Static detection uses the default
modifier check.
"""

from tree_sitter import Node

from codeschema.ast.extractors.base import (
    EntityExtractor,
    LanguageVariant,
    default_is_static_method,
    register_variant,
)
from codeschema.ast.models import FieldRecord, Location
from codeschema.ast.walker import node_text


def extract_field_info(extractor: EntityExtractor, node: Node, index: int) -> list[FieldRecord]:
    """One FieldRecord per field_declaration, named by its first declarator."""
    declarator = node.child_by_field_name("declarator")
    if declarator is None:
        return []

    name_node = declarator.child_by_field_name("name")
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
    )]


JAVA_VARIANT = LanguageVariant(
    name="java",
    extract_field_info=extract_field_info,
    is_static_method=default_is_static_method,
)

# Register the variant
register_variant(JAVA_VARIANT, "java")
