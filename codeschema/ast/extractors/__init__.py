"""
Entity Extractors

EntityExtractor plus the per-language variants registered in its variant table.
"""

from codeschema.ast.extractors.base import (
    DEFAULT_VARIANT,
    EntityExtractor,
    LanguageVariant,
    get_variant,
    register_variant,
)

# Import variants to trigger registration
from codeschema.ast.extractors.csharp import CSHARP_VARIANT
from codeschema.ast.extractors.java import JAVA_VARIANT
from codeschema.ast.extractors.javascript import JAVASCRIPT_VARIANT
from codeschema.ast.extractors.python import PYTHON_VARIANT

__all__ = [
    "EntityExtractor",
    "LanguageVariant",
    "DEFAULT_VARIANT",
    "get_variant",
    "register_variant",
    "JAVA_VARIANT",
    "PYTHON_VARIANT",
    "CSHARP_VARIANT",
    "JAVASCRIPT_VARIANT",
]
