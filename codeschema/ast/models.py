"""
Data Models for AST Extraction

Normalized, language-independent records produced from a parsed source file.
Records are immutable and hold only strings and numbers, never tree nodes.
"""

from dataclasses import dataclass, field
from typing import Optional

from tree_sitter import Node


@dataclass(frozen=True)
class Location:
    """1-based source span of an entity."""

    start_line: int
    start_col: int
    end_line: int
    end_col: int
    file: Optional[str] = None

    @classmethod
    def from_node(cls, node: Node, file: Optional[str] = None) -> "Location":
        """Convert tree-sitter's 0-based points to a 1-based location."""
        return cls(
            start_line=node.start_point[0] + 1,
            start_col=node.start_point[1] + 1,
            end_line=node.end_point[0] + 1,
            end_col=node.end_point[1] + 1,
            file=file,
        )


@dataclass(frozen=True)
class ParameterRecord:
    """Represents a function or method parameter."""

    name: str
    type: Optional[str] = None
    default_value: Optional[str] = None
    text: str = ""

    @property
    def has_default(self) -> bool:
        return self.default_value is not None


@dataclass(frozen=True)
class DecoratorRecord:
    """A decorator (Python/TypeScript) or annotation/attribute (Java/C#)."""

    name: str
    text: str


@dataclass(frozen=True)
class DocumentationRecord:
    """Comment or docstring text attached to an entity."""

    docstring: Optional[str] = None
    has_doc: bool = False

    @classmethod
    def from_texts(cls, texts: list[str]) -> "DocumentationRecord":
        joined = "\n".join(texts).strip()
        if not joined:
            return cls()
        return cls(docstring=joined, has_doc=True)


@dataclass(frozen=True)
class MetricsRecord:
    """Size and complexity facts about a method or function body."""

    line_count: int
    statement_count: int
    branch_count: int
    loop_count: int
    nesting_depth: int
    cyclomatic_complexity: int
    return_count: int
    param_count: int = 0


@dataclass(frozen=True)
class ClassMetrics:
    """Size facts about a class."""

    line_count: int
    comment_lines: int
    method_count: int
    field_count: int


@dataclass(frozen=True)
class FileMetrics:
    """Size facts about a whole source file."""

    line_count: int
    comment_lines: int
    class_count: int
    function_count: int


@dataclass(frozen=True)
class ParentInfo:
    """Enclosing class, interface and module of an entity."""

    class_name: Optional[str] = None
    interface_name: Optional[str] = None
    module_name: Optional[str] = None
    kind: Optional[str] = None  # class, interface, module
    extends: Optional[str] = None
    implements: Optional[str] = None


@dataclass(frozen=True)
class MethodBody:
    """Truncated body text plus a hash of the full text."""

    text: str
    hash: str


@dataclass(frozen=True)
class MethodRecord:
    """Represents a method, constructor, or top-level function."""

    index: int
    name: str
    node_type: str
    location: Location
    signature: str
    return_type: str = "void"
    parameters_text: str = "()"
    parameters: tuple[ParameterRecord, ...] = ()
    modifiers: tuple[str, ...] = ()
    access_control: str = "default"
    is_static: bool = False
    is_async: bool = False
    is_override: bool = False
    parent_class: Optional[str] = None  # None for top-level functions
    parent_info: ParentInfo = field(default_factory=ParentInfo)
    decorators: tuple[DecoratorRecord, ...] = ()
    documentation: DocumentationRecord = field(default_factory=DocumentationRecord)
    metrics: Optional[MetricsRecord] = None
    body: Optional[MethodBody] = None

    @property
    def is_instance(self) -> bool:
        return not self.is_static

    @property
    def is_top_level(self) -> bool:
        return self.parent_class is None

    @property
    def qualified_name(self) -> str:
        if self.parent_class:
            return f"{self.parent_class}.{self.name}"
        return self.name

    @property
    def method_id(self) -> str:
        """Overload-safe identifier, e.g. ``Calculator.add(int,int)->int``."""
        param_types = ",".join(p.type or "any" for p in self.parameters)
        return f"{self.qualified_name}({param_types})->{self.return_type}"


@dataclass(frozen=True)
class FieldRecord:
    """Represents a field, attribute, or property of a class."""

    index: int
    name: str
    type: str
    node_type: str
    location: Location
    parent_class: Optional[str] = None
    modifiers: tuple[str, ...] = ()
    text: str = ""
    is_property: bool = False


@dataclass(frozen=True)
class ClassRecord:
    """Represents a class definition."""

    index: int
    name: str
    node_type: str
    location: Location
    modifiers: tuple[str, ...] = ()
    method_count: int = 0
    field_count: int = 0
    superclass: Optional[str] = None
    interfaces: tuple[str, ...] = ()
    methods: tuple[MethodRecord, ...] = ()
    fields: tuple[FieldRecord, ...] = ()
    documentation: DocumentationRecord = field(default_factory=DocumentationRecord)
    metrics: Optional[ClassMetrics] = None


@dataclass(frozen=True)
class ExtractionResult:
    """Classes, methods and fields extracted from one source text."""

    classes: tuple[ClassRecord, ...] = ()
    methods: tuple[MethodRecord, ...] = ()
    fields: tuple[FieldRecord, ...] = ()


@dataclass(frozen=True)
class FileAnalysis:
    """Complete analysis of a source file."""

    file: Optional[str]
    language: str
    imports: tuple[str, ...] = ()
    classes: tuple[ClassRecord, ...] = ()
    functions: tuple[MethodRecord, ...] = ()  # top-level only
    metrics: Optional[FileMetrics] = None

    def get_symbol_names(self) -> list[str]:
        """Class names followed by top-level function names, in source order."""
        names = [c.name for c in self.classes]
        names.extend(f.name for f in self.functions)
        return names
