"""
Python Variant

Fields are assignments inside a class whose target references ``self``
(``self.name = name``). Static methods are recognized by a
``@staticmethod`` decorator on the enclosing decorated_definition.
"""

from typing import Optional

from tree_sitter import Node

from codeschema.ast.extractors.base import EntityExtractor, LanguageVariant, register_variant
from codeschema.ast.models import FieldRecord, Location
from codeschema.ast.walker import node_text

INSTANCE_RECEIVER = "self."


def _assignment_of(node: Node) -> Optional[Node]:
    if node.type == "assignment":
        return node
    if node.type == "expression_statement" and node.children:
        first = node.children[0]
        if first.type == "assignment":
            return first
    return None


def extract_field_info(extractor: EntityExtractor, node: Node, index: int) -> list[FieldRecord]:
    """
    A FieldRecord for ``self.<attr> = value`` inside a class, else nothing.

    The type is the annotation when present (``self.x: int = 0``), otherwise
    the node type of the assigned value.
    """
    parent_class = extractor.get_parent_class_name(node)
    if parent_class is None:
        return []

    assignment = _assignment_of(node)
    if assignment is None:
        return []

    left = assignment.child_by_field_name("left")
    name = node_text(left)
    if INSTANCE_RECEIVER not in name:
        return []

    type_node = assignment.child_by_field_name("type")
    right = assignment.child_by_field_name("right")
    if type_node is not None:
        field_type = node_text(type_node)
    elif right is not None:
        field_type = right.type
    else:
        field_type = "unknown"

    return [FieldRecord(
        index=index + 1,
        name=name,
        type=field_type,
        node_type=node.type,
        location=Location.from_node(node),
        parent_class=parent_class,
        modifiers=(),
        text=node_text(node).strip(),
    )]


def is_static_method(extractor: EntityExtractor, node: Node, modifiers: tuple[str, ...]) -> bool:
    """True when a decorator wrapping the function names ``staticmethod``."""
    wrapper = node.parent
    if wrapper is None or wrapper.type not in extractor.config.decorator_wrapper_types:
        return False
    return any(
        "staticmethod" in d.name
        for d in extractor.get_decorators(node)
    )


PYTHON_VARIANT = LanguageVariant(
    name="python",
    extract_field_info=extract_field_info,
    is_static_method=is_static_method,
)

# Register the variant
register_variant(PYTHON_VARIANT, "python")
