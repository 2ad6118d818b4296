"""
AST-Based Code Extraction

Normalizes tree-sitter syntax trees of several languages into one schema of
classes, methods/functions, fields, parameters, documentation and metrics.

Usage:
    from codeschema.ast import create_extractor

    extractor = create_extractor("java")
    result = extractor.extract_all(source, file_path="Calculator.java")
"""

from codeschema.ast.documentation import DocumentationResolver
from codeschema.ast.extractors import (
    DEFAULT_VARIANT,
    EntityExtractor,
    LanguageVariant,
    get_variant,
    register_variant,
)
from codeschema.ast.factory import (
    create_extractor,
    get_language_support,
    get_supported_languages,
)
from codeschema.ast.languages import LanguageConfig, get_language_config
from codeschema.ast.metrics import MetricsCalculator, MetricsConfig
from codeschema.ast.models import (
    ClassMetrics,
    ClassRecord,
    DecoratorRecord,
    DocumentationRecord,
    ExtractionResult,
    FieldRecord,
    FileAnalysis,
    FileMetrics,
    Location,
    MethodBody,
    MethodRecord,
    MetricsRecord,
    ParameterRecord,
    ParentInfo,
)
from codeschema.ast.parser import ASTParser
from codeschema.ast.walker import find_nodes_by_type

__all__ = [
    # Models
    "Location",
    "ParameterRecord",
    "DecoratorRecord",
    "DocumentationRecord",
    "MetricsRecord",
    "ClassMetrics",
    "FileMetrics",
    "ParentInfo",
    "MethodBody",
    "MethodRecord",
    "FieldRecord",
    "ClassRecord",
    "ExtractionResult",
    "FileAnalysis",
    # Configuration
    "LanguageConfig",
    "MetricsConfig",
    "get_language_config",
    # Parsing and traversal
    "ASTParser",
    "find_nodes_by_type",
    # Extraction
    "EntityExtractor",
    "LanguageVariant",
    "DEFAULT_VARIANT",
    "get_variant",
    "register_variant",
    "DocumentationResolver",
    "MetricsCalculator",
    # Factory
    "create_extractor",
    "get_language_support",
    "get_supported_languages",
]
