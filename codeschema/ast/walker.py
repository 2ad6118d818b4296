"""
Syntax Tree Walker

Type-driven searches over tree-sitter nodes. All walks use an explicit
stack so that deeply nested or generated source cannot exhaust the
interpreter's recursion limit.
"""

from typing import Iterable, Iterator, Optional, Union

from tree_sitter import Node

TypeNames = Union[str, Iterable[str]]


def _as_type_set(types: TypeNames) -> frozenset[str]:
    if isinstance(types, str):
        return frozenset((types,))
    return frozenset(types)


def iter_nodes(root: Node) -> Iterator[Node]:
    """Yield ``root`` and all its descendants in pre-order, left to right."""
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        # Reversed so the leftmost child is popped first
        stack.extend(reversed(node.children))


def find_nodes_by_type(root: Node, types: TypeNames) -> list[Node]:
    """
    Find all nodes whose type is in ``types``.

    The root itself is included when it matches. Results are in pre-order:
    a parent precedes its children and siblings appear left to right.

    Args:
        root: Starting node
        types: A type name or collection of type names

    Returns:
        List of matching nodes
    """
    wanted = _as_type_set(types)
    if not wanted:
        return []
    return [node for node in iter_nodes(root) if node.type in wanted]


def find_child(node: Node, types: TypeNames) -> Optional[Node]:
    """Find the first direct child whose type is in ``types``."""
    wanted = _as_type_set(types)
    for child in node.children:
        if child.type in wanted:
            return child
    return None


def find_ancestor(node: Node, types: TypeNames) -> Optional[Node]:
    """Find the nearest strict ancestor whose type is in ``types``."""
    wanted = _as_type_set(types)
    parent = node.parent
    while parent is not None:
        if parent.type in wanted:
            return parent
        parent = parent.parent
    return None


def child_by_fields(node: Node, *field_names: str) -> Optional[Node]:
    """Return the child for the first of ``field_names`` that is present."""
    for name in field_names:
        child = node.child_by_field_name(name)
        if child is not None:
            return child
    return None


def node_text(node: Optional[Node]) -> str:
    """Decode the source text covered by a node."""
    if node is None or node.text is None:
        return ""
    return node.text.decode("utf-8", errors="replace")


def line_span(node: Node) -> int:
    """Number of source lines a node covers."""
    return node.end_point[0] - node.start_point[0] + 1
