"""
Metrics Calculator

Size, branching and nesting metrics for methods, classes and files,
computed by counting configured node types under an entity's subtree.

Cyclomatic complexity is the simplified McCabe number
``1 + branch_count + loop_count``: short-circuit boolean operators and
exception handlers are not counted.
"""

from dataclasses import dataclass, replace

from tree_sitter import Node

from codeschema.ast.models import ClassMetrics, FileMetrics, MetricsRecord
from codeschema.ast.walker import find_nodes_by_type, line_span


@dataclass(frozen=True)
class MetricsConfig:
    """Node types counted by the metrics calculator."""

    statement_types: tuple[str, ...] = (
        "expression_statement",
        "return_statement",
        "if_statement",
        "for_statement",
        "while_statement",
    )
    branch_types: tuple[str, ...] = ("if_statement", "switch_statement", "case_clause")
    loop_types: tuple[str, ...] = ("for_statement", "while_statement", "do_statement")
    return_types: tuple[str, ...] = ("return_statement", "yield")
    nesting_types: tuple[str, ...] = (
        "if_statement",
        "for_statement",
        "while_statement",
        "switch_statement",
        "try_statement",
    )

    def extend(self, **extra: tuple[str, ...]) -> "MetricsConfig":
        """Return a copy with extra node types appended to the named sets."""
        values = {}
        for name, types in extra.items():
            values[name] = getattr(self, name) + tuple(types)
        return replace(self, **values)


DEFAULT_METRICS = MetricsConfig()


class MetricsCalculator:
    """Computes MetricsRecord/ClassMetrics/FileMetrics for parsed entities."""

    def __init__(self, config: MetricsConfig = DEFAULT_METRICS, comment_types: tuple[str, ...] = ()):
        self.config = config
        self.comment_types = comment_types

    def method_metrics(self, node: Node, param_count: int = 0) -> MetricsRecord:
        """Metrics for a method or function node."""
        cfg = self.config
        branch_count = len(find_nodes_by_type(node, cfg.branch_types))
        loop_count = len(find_nodes_by_type(node, cfg.loop_types))

        return MetricsRecord(
            line_count=line_span(node),
            statement_count=len(find_nodes_by_type(node, cfg.statement_types)),
            branch_count=branch_count,
            loop_count=loop_count,
            nesting_depth=self.nesting_depth(node),
            cyclomatic_complexity=1 + branch_count + loop_count,
            return_count=len(find_nodes_by_type(node, cfg.return_types)),
            param_count=param_count,
        )

    def nesting_depth(self, node: Node) -> int:
        """
        Deepest chain of nesting constructs below ``node``.

        Depth increases by one on entry into each nesting-type child; the
        node itself is not counted.
        """
        nesting = frozenset(self.config.nesting_types)
        max_depth = 0
        stack = [(child, 0) for child in node.children]
        while stack:
            current, depth = stack.pop()
            if current.type in nesting:
                depth += 1
            if depth > max_depth:
                max_depth = depth
            stack.extend((child, depth) for child in current.children)
        return max_depth

    def comment_lines(self, node: Node) -> int:
        """Total lines covered by comment nodes anywhere under ``node``."""
        if not self.comment_types:
            return 0
        return sum(line_span(c) for c in find_nodes_by_type(node, self.comment_types))

    def class_metrics(self, node: Node, method_count: int, field_count: int) -> ClassMetrics:
        """Metrics for a class node; comments inside its methods are included."""
        return ClassMetrics(
            line_count=line_span(node),
            comment_lines=self.comment_lines(node),
            method_count=method_count,
            field_count=field_count,
        )

    def file_metrics(
        self, root: Node, source: str, class_count: int, function_count: int
    ) -> FileMetrics:
        """Metrics for a whole file; ``line_count`` counts raw text lines."""
        return FileMetrics(
            line_count=len(source.split("\n")),
            comment_lines=self.comment_lines(root),
            class_count=class_count,
            function_count=function_count,
        )
