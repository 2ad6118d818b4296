"""
Documentation Resolver

Attaches nearby comments or a leading docstring to an entity. This is a
layered heuristic rather than grammar-aware comment attachment: it looks at
preceding siblings, then at the siblings preceding the parent (decorator or
annotation wrappers), then at the first statement of the entity's body.

No blank-line cutoff is applied: a comment separated from its target by
blank lines is still attached.
"""

from typing import Optional

from tree_sitter import Node

from codeschema.ast.models import DocumentationRecord
from codeschema.ast.walker import node_text

DEFAULT_COMMENT_TYPES = ("comment", "line_comment", "block_comment")

# Preceding siblings of these types never end a comment run
TRANSPARENT_TYPES = frozenset({"ERROR"})


class DocumentationResolver:
    """Resolves a DocumentationRecord for a class, method or function node."""

    def __init__(self, comment_types: tuple[str, ...] = DEFAULT_COMMENT_TYPES):
        self.comment_types = frozenset(comment_types)

    def resolve(self, node: Node) -> DocumentationRecord:
        """Collect comments/docstring for ``node``; empty text means no docs."""
        comments = self._preceding_comments(node)

        # Comment nodes reachable only through the named-sibling chain
        seen = {(c.start_byte, c.end_byte) for c in comments}
        sibling = node.prev_named_sibling
        while sibling is not None and sibling.type in self.comment_types:
            if (sibling.start_byte, sibling.end_byte) not in seen:
                comments.insert(0, sibling)
            sibling = sibling.prev_named_sibling

        if not comments and node.parent is not None:
            comments = self._preceding_comments(node.parent)

        texts = [node_text(c) for c in comments]
        if not texts:
            docstring = self.body_docstring(node)
            if docstring is not None:
                texts.append(docstring)

        return DocumentationRecord.from_texts(texts)

    def _preceding_comments(self, node: Node) -> list[Node]:
        """Contiguous comment nodes directly before ``node``, in source order."""
        comments: list[Node] = []
        sibling = node.prev_sibling
        while sibling is not None:
            if sibling.type in self.comment_types:
                comments.insert(0, sibling)
            elif sibling.type not in TRANSPARENT_TYPES and node_text(sibling).strip():
                break
            sibling = sibling.prev_sibling
        return comments

    def body_docstring(self, node: Node) -> Optional[str]:
        """
        Text of a bare string literal opening the entity's body, if any.

        The literal's source text is returned as written, quotes included.
        """
        body = node.child_by_field_name("body")
        if body is None:
            return None

        for child in body.children:
            if child.type == "expression_statement":
                first = child.children[0] if child.children else None
                if first is not None and first.type == "string":
                    return node_text(first)
                return None
            if child.type not in TRANSPARENT_TYPES and node_text(child).strip():
                return None
        return None
