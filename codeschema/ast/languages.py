"""
Language Configuration

Declarative mapping from tree-sitter node type names to the class, method
and field roles of each supported language. Adding a language means adding
a LanguageConfig here (and a grammar in parser.py); language-specific
behavior beyond the mapping lives in the extractor variants.
"""

from dataclasses import dataclass, field, fields, replace
from typing import Any, Optional

from codeschema.ast.metrics import DEFAULT_METRICS, MetricsConfig
from codeschema.exceptions import ConfigurationError, UnsupportedLanguageError


@dataclass(frozen=True)
class LanguageConfig:
    """Node-type configuration for one language."""

    class_types: tuple[str, ...]
    class_name_field: str
    method_types: tuple[str, ...]
    method_name_field: str
    field_types: tuple[str, ...]
    field_name_field: str

    # Nodes whose text is a single modifier (C# `modifier`)
    modifier_types: tuple[str, ...] = ("modifier",)
    # Wrapper nodes whose keyword children are modifiers (Java `modifiers`)
    modifier_list_types: tuple[str, ...] = ()
    comment_types: tuple[str, ...] = ("comment", "line_comment", "block_comment")
    import_types: tuple[str, ...] = (
        "import_statement",
        "import_from_statement",
        "import_declaration",
        "using_directive",
    )

    # Decorator lookup table: a wrapper node holding decorator children
    # (Python), or annotation nodes inside/preceding the method (Java, C#, TS)
    decorator_wrapper_types: tuple[str, ...] = ()
    decorator_types: tuple[str, ...] = ("decorator",)
    annotation_types: tuple[str, ...] = ()

    metrics: MetricsConfig = field(default=DEFAULT_METRICS)

    def with_overrides(self, overrides: Optional[dict[str, Any]]) -> "LanguageConfig":
        """
        Return a copy with the given fields replaced.

        List values are converted to tuples. ``metrics`` may be given as a
        mapping of MetricsConfig field names.

        Raises:
            ConfigurationError: On unknown keys or wrongly typed values
        """
        if not overrides:
            return self

        known = {f.name for f in fields(self)}
        values: dict[str, Any] = {}
        for key, value in overrides.items():
            if key not in known:
                raise ConfigurationError(
                    f"Unknown language config key: {key}",
                    {"known": ", ".join(sorted(known))},
                )
            if key == "metrics":
                values[key] = _metrics_with_overrides(self.metrics, value)
            elif key.endswith("_field"):
                if not isinstance(value, str):
                    raise ConfigurationError(f"'{key}' must be a string", {"found": repr(value)})
                values[key] = value
            else:
                values[key] = _as_type_tuple(key, value)
        return replace(self, **values)


def _as_type_tuple(key: str, value: Any) -> tuple[str, ...]:
    if isinstance(value, str):
        return (value,)
    if isinstance(value, (list, tuple)) and all(isinstance(v, str) for v in value):
        return tuple(value)
    raise ConfigurationError(f"'{key}' must be a list of node type names", {"found": repr(value)})


def _metrics_with_overrides(metrics: MetricsConfig, value: Any) -> MetricsConfig:
    if not isinstance(value, dict):
        raise ConfigurationError("'metrics' must be a mapping", {"found": repr(value)})
    known = {f.name for f in fields(metrics)}
    unknown = set(value) - known
    if unknown:
        raise ConfigurationError(
            f"Unknown metrics config key: {', '.join(sorted(unknown))}",
            {"known": ", ".join(sorted(known))},
        )
    return replace(metrics, **{k: _as_type_tuple(k, v) for k, v in value.items()})


# =============================================================================
# Built-in configurations
# =============================================================================

JAVA_CONFIG = LanguageConfig(
    class_types=("class_declaration",),
    class_name_field="name",
    method_types=("method_declaration", "constructor_declaration"),
    method_name_field="name",
    field_types=("field_declaration",),
    field_name_field="declarator",
    modifier_list_types=("modifiers",),
    annotation_types=("marker_annotation", "annotation"),
    metrics=DEFAULT_METRICS.extend(
        statement_types=("local_variable_declaration", "throw_statement"),
        branch_types=("switch_expression", "switch_label"),
        loop_types=("enhanced_for_statement",),
        nesting_types=("enhanced_for_statement", "switch_expression"),
    ),
)

PYTHON_CONFIG = LanguageConfig(
    class_types=("class_definition",),
    class_name_field="name",
    method_types=("function_definition",),
    method_name_field="name",
    field_types=("assignment",),
    field_name_field="left",
    modifier_types=(),
    decorator_wrapper_types=("decorated_definition",),
    decorator_types=("decorator",),
    metrics=DEFAULT_METRICS.extend(
        statement_types=("raise_statement", "pass_statement"),
        branch_types=("elif_clause", "match_statement"),
        nesting_types=("match_statement",),
    ),
)

CSHARP_CONFIG = LanguageConfig(
    class_types=("class_declaration",),
    class_name_field="name",
    method_types=("method_declaration", "constructor_declaration"),
    method_name_field="name",
    field_types=("field_declaration", "property_declaration"),
    field_name_field="name",
    annotation_types=("attribute_list",),
    metrics=DEFAULT_METRICS.extend(
        statement_types=("local_declaration_statement", "throw_statement"),
        branch_types=("switch_section",),
        loop_types=("foreach_statement",),
        nesting_types=("foreach_statement",),
    ),
)

JAVASCRIPT_CONFIG = LanguageConfig(
    class_types=("class_declaration",),
    class_name_field="name",
    method_types=("method_definition", "function_declaration", "arrow_function"),
    method_name_field="name",
    field_types=(
        "field_definition",
        "public_field_definition",
        "lexical_declaration",
        "variable_declaration",
    ),
    field_name_field="name",
    modifier_types=(),
    annotation_types=("decorator",),
    metrics=DEFAULT_METRICS.extend(
        statement_types=("lexical_declaration", "variable_declaration", "throw_statement"),
        branch_types=("switch_case", "switch_default"),
        loop_types=("for_in_statement",),
        nesting_types=("for_in_statement",),
    ),
)

TYPESCRIPT_CONFIG = LanguageConfig(
    class_types=("class_declaration",),
    class_name_field="name",
    method_types=("method_definition", "function_declaration", "arrow_function"),
    method_name_field="name",
    field_types=("public_field_definition", "property_signature", "lexical_declaration"),
    field_name_field="name",
    modifier_types=("accessibility_modifier", "override_modifier"),
    annotation_types=("decorator",),
    metrics=JAVASCRIPT_CONFIG.metrics,
)

LANGUAGE_CONFIGS: dict[str, LanguageConfig] = {
    "java": JAVA_CONFIG,
    "python": PYTHON_CONFIG,
    "csharp": CSHARP_CONFIG,
    "javascript": JAVASCRIPT_CONFIG,
    "typescript": TYPESCRIPT_CONFIG,
}

LANGUAGE_ALIASES = {
    "js": "javascript",
    "ts": "typescript",
    "py": "python",
    "cs": "csharp",
    "c#": "csharp",
}


def normalize_language(language: str) -> str:
    """Map a language id or alias to its canonical lower-case id."""
    name = language.strip().lower()
    return LANGUAGE_ALIASES.get(name, name)


def get_language_config(language: str) -> LanguageConfig:
    """
    Get the configuration for a language.

    Args:
        language: Language id or alias, case-insensitive

    Returns:
        LanguageConfig for the language

    Raises:
        UnsupportedLanguageError: If the language has no configuration
    """
    config = LANGUAGE_CONFIGS.get(normalize_language(language))
    if config is None:
        raise UnsupportedLanguageError(language, get_supported_languages())
    return config


def get_supported_languages() -> list[str]:
    """Canonical ids of all configured languages."""
    return list(LANGUAGE_CONFIGS)
