"""
Entity Extractor

Language-independent extraction of classes, methods and fields from a
tree-sitter syntax tree. Which node types play which role comes from a
LanguageConfig; the few behaviors that differ per language (field
extraction, static detection) come from a LanguageVariant looked up in a
variant table.
"""

import hashlib
import re
from dataclasses import dataclass, replace
from typing import Callable, Optional

from tree_sitter import Node

from codeschema.ast.documentation import DocumentationResolver
from codeschema.ast.languages import LanguageConfig, normalize_language
from codeschema.ast.metrics import MetricsCalculator
from codeschema.ast.models import (
    ClassRecord,
    DecoratorRecord,
    ExtractionResult,
    FieldRecord,
    FileAnalysis,
    Location,
    MethodBody,
    MethodRecord,
    ParameterRecord,
    ParentInfo,
)
from codeschema.ast.parser import ASTParser
from codeschema.ast.walker import (
    child_by_fields,
    find_ancestor,
    find_child,
    find_nodes_by_type,
    node_text,
)
from codeschema.configs.logging import get_logger
from codeschema.exceptions import ParseError

logger = get_logger("ast.extractor")

ACCESS_MODIFIERS = ("public", "private", "protected", "internal")

PUNCTUATION = frozenset({",", "(", ")"})

# Parameter node shapes across grammars; any type containing "parameter"
# is accepted as well
PARAMETER_TYPES = frozenset({
    "identifier",
    "formal_parameter",          # Java
    "spread_parameter",          # Java varargs
    "parameter",                 # C#
    "typed_parameter",           # Python
    "default_parameter",         # Python
    "typed_default_parameter",   # Python
    "list_splat_pattern",        # Python *args
    "dictionary_splat_pattern",  # Python **kwargs
    "required_parameter",        # TypeScript
    "optional_parameter",        # TypeScript
    "assignment_pattern",        # JavaScript default value
    "rest_pattern",              # JavaScript ...rest
})

IMPORT_PATTERN = re.compile(
    r"import\s+(?:static\s+)?([^\s;]+)|from\s+([^\s]+)|using\s+(?:static\s+)?([^\s;]+)"
)

BODY_PREVIEW_CHARS = 200


@dataclass(frozen=True)
class LanguageVariant:
    """
    Per-language overrides of field extraction and static detection.

    Both functions receive the active EntityExtractor as their first
    argument so they can reuse its helpers.
    """

    name: str
    extract_field_info: Callable[["EntityExtractor", Node, int], list[FieldRecord]]
    is_static_method: Callable[["EntityExtractor", Node, tuple[str, ...]], bool]


class EntityExtractor:
    """
    Extracts normalized class/method/field records from source code.

    Every public ``extract_*`` call parses its own tree and returns fresh
    immutable records; nothing is retained between calls. An instance owns
    its parser, so use one instance per thread.
    """

    def __init__(
        self,
        language: str,
        config: LanguageConfig,
        variant: "LanguageVariant",
        parser: Optional[ASTParser] = None,
    ):
        self.language = normalize_language(language)
        self.config = config
        self.variant = variant
        self.parser = parser or ASTParser()
        self.docs = DocumentationResolver(config.comment_types)
        self.metrics = MetricsCalculator(config.metrics, config.comment_types)

    # -------------------------------------------------------------------------
    # Public API
    # -------------------------------------------------------------------------

    def parse(self, code: str) -> Node:
        """
        Parse source code and return the root node.

        Raises:
            ParseError: If the parser produced no tree
        """
        tree = self.parser.parse(code, self.language)
        if tree is None:
            raise ParseError(
                f"Could not parse {self.language} source",
                {"language": self.language, "length": len(code)},
            )
        return tree.root_node

    def extract_classes(self, code: str, file_path: Optional[str] = None) -> list[ClassRecord]:
        """Extract one ClassRecord per class-type node, in source order."""
        return self.classes_from_root(self.parse(code), file_path)

    def extract_methods(
        self,
        code: str,
        include_class_methods: bool = True,
        file_path: Optional[str] = None,
    ) -> list[MethodRecord]:
        """
        Extract methods and functions.

        Args:
            code: Source code
            include_class_methods: When False, only top-level functions
                (records without a parent class) are returned
            file_path: Recorded in each record's location

        Returns:
            List of MethodRecord in source order
        """
        return self.methods_from_root(self.parse(code), include_class_methods, file_path)

    def extract_fields(self, code: str, file_path: Optional[str] = None) -> list[FieldRecord]:
        """Extract fields through the active language variant."""
        return self.fields_from_root(self.parse(code), file_path)

    def extract_all(self, code: str, file_path: Optional[str] = None) -> ExtractionResult:
        """Extract classes, methods and fields from one parse of ``code``."""
        root = self.parse(code)
        result = ExtractionResult(
            classes=tuple(self.classes_from_root(root, file_path)),
            methods=tuple(self.methods_from_root(root, True, file_path)),
            fields=tuple(self.fields_from_root(root, file_path)),
        )
        logger.debug(
            f"Extracted {len(result.classes)} classes, {len(result.methods)} methods, "
            f"{len(result.fields)} fields from {file_path or '<source>'}"
        )
        return result

    def extract_file(self, code: str, file_path: Optional[str] = None) -> FileAnalysis:
        """
        Complete analysis of a file: imports, classes with their members,
        top-level functions and file metrics.
        """
        root = self.parse(code)
        classes = self.classes_from_root(root, file_path)
        functions = self.methods_from_root(root, False, file_path)

        return FileAnalysis(
            file=file_path,
            language=self.language,
            imports=tuple(self.imports_from_root(root)),
            classes=tuple(classes),
            functions=tuple(functions),
            metrics=self.metrics.file_metrics(root, code, len(classes), len(functions)),
        )

    # -------------------------------------------------------------------------
    # Tree-level extraction
    # -------------------------------------------------------------------------

    def classes_from_root(self, root: Node, file_path: Optional[str] = None) -> list[ClassRecord]:
        class_nodes = find_nodes_by_type(root, self.config.class_types)
        return [
            self._build_class(node, i + 1, file_path)
            for i, node in enumerate(class_nodes)
        ]

    def methods_from_root(
        self,
        root: Node,
        include_class_methods: bool = True,
        file_path: Optional[str] = None,
    ) -> list[MethodRecord]:
        method_nodes = find_nodes_by_type(root, self.config.method_types)
        methods = []
        for i, node in enumerate(method_nodes):
            # Index reflects position among all methods, before filtering
            if not include_class_methods and self.get_parent_class_name(node) is not None:
                continue
            methods.append(self._build_method(node, i + 1, file_path))
        return methods

    def fields_from_root(self, root: Node, file_path: Optional[str] = None) -> list[FieldRecord]:
        return self._fields_from_nodes(
            find_nodes_by_type(root, self.config.field_types), file_path
        )

    def imports_from_root(self, root: Node) -> list[str]:
        """Module names imported by the file, in source order."""
        imports = []
        for node in find_nodes_by_type(root, self.config.import_types):
            source = node.child_by_field_name("source")
            if source is not None:
                # ES module: import x from 'module'
                imports.append(node_text(source).strip("'\""))
                continue
            match = IMPORT_PATTERN.search(node_text(node).strip())
            if match:
                imports.append(next(g for g in match.groups() if g))
        return imports

    def _fields_from_nodes(self, nodes: list[Node], file_path: Optional[str]) -> list[FieldRecord]:
        fields: list[FieldRecord] = []
        for node in nodes:
            records = self.variant.extract_field_info(self, node, len(fields))
            if file_path is not None:
                records = [_with_file(r, file_path) for r in records]
            fields.extend(records)
        return fields

    # -------------------------------------------------------------------------
    # Record builders
    # -------------------------------------------------------------------------

    def _build_class(self, node: Node, index: int, file_path: Optional[str]) -> ClassRecord:
        body = node.child_by_field_name("body")
        method_nodes = find_nodes_by_type(body, self.config.method_types) if body else []
        field_nodes = find_nodes_by_type(body, self.config.field_types) if body else []

        methods = [
            self._build_method(m, j + 1, file_path) for j, m in enumerate(method_nodes)
        ]
        fields = self._fields_from_nodes(field_nodes, file_path)
        superclass, interfaces = self.get_bases(node)

        return ClassRecord(
            index=index,
            name=self.get_node_name(node, self.config.class_name_field),
            node_type=node.type,
            location=Location.from_node(node, file_path),
            modifiers=self.get_modifiers(node),
            method_count=len(method_nodes),
            field_count=len(field_nodes),
            superclass=superclass,
            interfaces=interfaces,
            methods=tuple(methods),
            fields=tuple(fields),
            documentation=self.docs.resolve(node),
            metrics=self.metrics.class_metrics(node, len(method_nodes), len(field_nodes)),
        )

    def _build_method(self, node: Node, index: int, file_path: Optional[str]) -> MethodRecord:
        name = self.get_node_name(node, self.config.method_name_field)
        parameters_text = self.get_parameters_text(node)
        parameters = self.get_parameters(node)
        return_type = self.get_return_type(node)
        modifiers = self.get_modifiers(node)
        decorators = self.get_decorators(node)

        return MethodRecord(
            index=index,
            name=name,
            node_type=node.type,
            location=Location.from_node(node, file_path),
            signature=f"{return_type} {name}{parameters_text}",
            return_type=return_type,
            parameters_text=parameters_text,
            parameters=parameters,
            modifiers=modifiers,
            access_control=self.get_access_control(modifiers),
            is_static=self.variant.is_static_method(self, node, modifiers),
            is_async=self.is_async(node, modifiers),
            is_override=self.is_override(modifiers, decorators),
            parent_class=self.get_parent_class_name(node),
            parent_info=self.get_parent_info(node),
            decorators=decorators,
            documentation=self.docs.resolve(node),
            metrics=self.metrics.method_metrics(node, len(parameters)),
            body=self.get_body(node),
        )

    # -------------------------------------------------------------------------
    # Helpers shared with language variants
    # -------------------------------------------------------------------------

    def get_node_name(self, node: Node, field_name: Optional[str] = None) -> str:
        """Text of the configured name field, or "anonymous" when absent."""
        name_node = node.child_by_field_name(field_name or "name")
        return node_text(name_node) if name_node is not None else "anonymous"

    def get_modifiers(self, node: Node) -> tuple[str, ...]:
        """
        All modifier texts found anywhere under ``node``.

        The search is not scoped to the node's own declaration, so modifiers
        of nested members are included.
        """
        cfg = self.config
        list_types = frozenset(cfg.modifier_list_types)
        modifiers: list[str] = []
        for found in find_nodes_by_type(node, cfg.modifier_types + cfg.modifier_list_types):
            if found.type in list_types:
                # Keyword tokens only; annotations are named children
                modifiers.extend(node_text(c) for c in found.children if not c.is_named)
            else:
                modifiers.append(node_text(found))
        return tuple(modifiers)

    def get_access_control(self, modifiers: tuple[str, ...]) -> str:
        for modifier in modifiers:
            if modifier in ACCESS_MODIFIERS:
                return modifier
        return "default"

    def get_parameters_text(self, node: Node) -> str:
        params = node.child_by_field_name("parameters")
        if params is not None:
            return node_text(params)
        # Arrow function with a single bare parameter: x => ...
        single = node.child_by_field_name("parameter")
        if single is not None:
            return f"({node_text(single)})"
        return "()"

    def get_parameters(self, node: Node) -> tuple[ParameterRecord, ...]:
        """Detailed parameters in declaration order; unknown shapes are skipped."""
        params_node = node.child_by_field_name("parameters")
        if params_node is None:
            single = node.child_by_field_name("parameter")
            if single is None:
                return ()
            return (ParameterRecord(name=node_text(single), text=node_text(single)),)

        parameters = []
        for child in params_node.children:
            if child.type in PUNCTUATION:
                continue
            param = self.get_parameter_info(child)
            if param is not None:
                parameters.append(param)
        return tuple(parameters)

    def get_parameter_info(self, node: Node) -> Optional[ParameterRecord]:
        if node.type not in PARAMETER_TYPES and "parameter" not in node.type:
            if node.is_named:
                logger.debug(f"Skipping unrecognized parameter shape: {node.type}")
            return None

        name_node = child_by_fields(node, "name", "pattern", "left")
        if name_node is None:
            # Splats nest the identifier: typed_parameter > list_splat_pattern
            idents = find_nodes_by_type(node, "identifier")
            name_node = idents[0] if idents else None
        name = node_text(name_node) if name_node is not None else node_text(node)

        type_node = node.child_by_field_name("type")
        value_node = child_by_fields(node, "value", "default_value", "right")
        if value_node is None:
            value_node = _default_value_clause(node)

        return ParameterRecord(
            name=name,
            type=_clean_type(node_text(type_node)) if type_node is not None else None,
            default_value=node_text(value_node) if value_node is not None else None,
            text=node_text(node),
        )

    def get_return_type(self, node: Node) -> str:
        type_node = child_by_fields(node, "type", "return_type", "returns")
        if type_node is None:
            return "void"
        return _clean_type(node_text(type_node)) or "void"

    def is_async(self, node: Node, modifiers: tuple[str, ...]) -> bool:
        return node_text(node).lstrip().startswith("async") or "async" in modifiers

    def is_override(
        self, modifiers: tuple[str, ...], decorators: tuple[DecoratorRecord, ...]
    ) -> bool:
        if "override" in modifiers:
            return True
        return any("override" in d.text.lower() for d in decorators)

    def get_parent_class_name(self, node: Node) -> Optional[str]:
        """Name of the nearest enclosing class, or None for top-level entities."""
        parent = find_ancestor(node, self.config.class_types)
        if parent is None:
            return None
        return self.get_node_name(parent, self.config.class_name_field)

    def get_parent_info(self, node: Node) -> ParentInfo:
        class_types = frozenset(self.config.class_types)
        module_name = None
        parent = node.parent
        while parent is not None:
            if parent.type in class_types:
                superclass = parent.child_by_field_name("superclass")
                interfaces = parent.child_by_field_name("interfaces")
                return ParentInfo(
                    class_name=self.get_node_name(parent, self.config.class_name_field),
                    module_name=module_name,
                    kind="class",
                    extends=node_text(superclass) if superclass is not None else None,
                    implements=node_text(interfaces) if interfaces is not None else None,
                )
            if parent.type == "interface_declaration":
                return ParentInfo(
                    interface_name=self.get_node_name(parent),
                    module_name=module_name,
                    kind="interface",
                )
            if parent.type in ("module", "namespace_declaration") and module_name is None:
                name_node = parent.child_by_field_name("name")
                if name_node is not None:
                    module_name = node_text(name_node)
            parent = parent.parent

        if module_name is not None:
            return ParentInfo(module_name=module_name, kind="module")
        return ParentInfo()

    def get_decorators(self, node: Node) -> tuple[DecoratorRecord, ...]:
        """
        Decorators and annotations attached to ``node``.

        Looks in a decorator wrapper parent (Python), annotation siblings
        immediately before the node, annotation children of the node, and
        annotations inside its modifier list (Java).
        """
        cfg = self.config
        annotation_types = frozenset(cfg.annotation_types)
        found: list[Node] = []

        if annotation_types:
            preceding = []
            sibling = node.prev_named_sibling
            while sibling is not None and sibling.type in annotation_types:
                preceding.insert(0, sibling)
                sibling = sibling.prev_named_sibling
            found.extend(preceding)

        parent = node.parent
        if parent is not None and parent.type in cfg.decorator_wrapper_types:
            found.extend(c for c in parent.children if c.type in cfg.decorator_types)

        for child in node.children:
            if child.type in annotation_types:
                found.append(child)
            elif child.type in cfg.modifier_list_types:
                found.extend(c for c in child.children if c.type in annotation_types)

        return tuple(
            DecoratorRecord(name=self._decorator_name(d), text=node_text(d)) for d in found
        )

    def _decorator_name(self, node: Node) -> str:
        name_node = node.child_by_field_name("name")
        if name_node is not None:
            return node_text(name_node)
        text = node_text(node).strip().lstrip("@").strip("[]").strip()
        return text.split("(")[0].strip()

    def get_bases(self, node: Node) -> tuple[Optional[str], tuple[str, ...]]:
        """Superclass and implemented interfaces of a class node."""
        superclass = None
        interfaces: list[str] = []

        superclass_node = node.child_by_field_name("superclass")
        bases_node = node.child_by_field_name("superclasses")
        if bases_node is None:
            bases_node = find_child(node, ("class_heritage", "base_list"))

        if superclass_node is not None:
            superclass = _strip_heritage(node_text(superclass_node))
        elif bases_node is not None:
            if bases_node.type == "class_heritage":
                extends = find_child(bases_node, "extends_clause")
                implements = find_child(bases_node, "implements_clause")
                if extends is None and implements is None:
                    # JavaScript: class_heritage is "extends <expression>"
                    superclass = _strip_heritage(node_text(bases_node)) or None
                if extends is not None:
                    superclass = _strip_heritage(node_text(extends)) or None
                if implements is not None:
                    text = _strip_heritage(node_text(implements))
                    interfaces.extend(i.strip() for i in text.split(",") if i.strip())
            else:
                bases = [
                    node_text(c) for c in bases_node.named_children
                    if c.type not in ("keyword_argument", "comment")
                ]
                if bases:
                    superclass, interfaces = bases[0], bases[1:]

        interfaces_node = node.child_by_field_name("interfaces")
        if interfaces_node is not None:
            text = _strip_heritage(node_text(interfaces_node))
            interfaces.extend(i.strip() for i in text.split(",") if i.strip())

        return superclass, tuple(interfaces)

    def get_body(self, node: Node) -> MethodBody:
        text = node_text(node)
        preview = text[:BODY_PREVIEW_CHARS] + "..." if len(text) > BODY_PREVIEW_CHARS else text
        return MethodBody(text=preview, hash=hashlib.md5(text.encode("utf-8")).hexdigest())


# =============================================================================
# Default variant
# =============================================================================


def default_extract_field_info(
    extractor: EntityExtractor, node: Node, index: int
) -> list[FieldRecord]:
    """One FieldRecord named by the configured name field."""
    type_node = node.child_by_field_name("type")
    return [FieldRecord(
        index=index + 1,
        name=extractor.get_node_name(node, extractor.config.field_name_field),
        type=_clean_type(node_text(type_node)) if type_node is not None else "unknown",
        node_type=node.type,
        location=Location.from_node(node),
        parent_class=extractor.get_parent_class_name(node),
        modifiers=extractor.get_modifiers(node),
        text=node_text(node).strip(),
    )]


def default_is_static_method(
    extractor: EntityExtractor, node: Node, modifiers: tuple[str, ...]
) -> bool:
    return "static" in modifiers


DEFAULT_VARIANT = LanguageVariant(
    name="default",
    extract_field_info=default_extract_field_info,
    is_static_method=default_is_static_method,
)


# Variant table by language id
_variants: dict[str, LanguageVariant] = {}


def register_variant(variant: LanguageVariant, *languages: str) -> None:
    """Register a variant for one or more language ids."""
    for language in languages:
        _variants[normalize_language(language)] = variant


def get_variant(language: str) -> LanguageVariant:
    """
    Get the variant for a language.

    Args:
        language: Language id or alias

    Returns:
        Registered LanguageVariant, or DEFAULT_VARIANT if none is registered
    """
    return _variants.get(normalize_language(language), DEFAULT_VARIANT)


# =============================================================================
# Module helpers
# =============================================================================


def _clean_type(text: str) -> str:
    """Drop the leading colon of a type annotation (``: number``)."""
    return text.strip().lstrip(":").strip()


def _strip_heritage(text: str) -> str:
    return re.sub(r"^\s*(extends|implements|:)\s+", "", text.strip()).strip()


def _with_file(record: FieldRecord, file_path: str) -> FieldRecord:
    return replace(record, location=replace(record.location, file=file_path))


def _default_value_clause(node: Node) -> Optional[Node]:
    """Default value held outside a field (C# ``int x = 3``)."""
    clause = find_child(node, "equals_value_clause")
    if clause is not None:
        return clause.named_children[0] if clause.named_children else None
    seen_equals = False
    for child in node.children:
        if seen_equals and child.is_named:
            return child
        if child.type == "=":
            seen_equals = True
    return None
