"""
Extractor Factory

Maps a language id to its LanguageConfig and LanguageVariant and builds an
EntityExtractor from them. Unknown languages fail before anything is built.
"""

from typing import Any, Optional

from codeschema.ast.extractors import EntityExtractor, LanguageVariant, get_variant
from codeschema.ast.languages import (
    LanguageConfig,
    get_language_config,
    get_supported_languages,
    normalize_language,
)
from codeschema.ast.parser import ASTParser
from codeschema.configs.logging import get_logger

logger = get_logger("ast.factory")


def get_language_support(
    language: str,
    overrides: Optional[dict[str, dict[str, Any]]] = None,
) -> tuple[LanguageConfig, LanguageVariant]:
    """
    Resolve the configuration and variant for a language.

    Args:
        language: Language id or alias, case-insensitive
        overrides: Optional mapping of language id to LanguageConfig field
            overrides, as returned by ``load_language_overrides()``

    Returns:
        Tuple of (LanguageConfig, LanguageVariant)

    Raises:
        UnsupportedLanguageError: If the language has no configuration
        ConfigurationError: If the overrides are invalid
    """
    name = normalize_language(language)
    config = get_language_config(name)
    if overrides:
        # Override keys may use aliases (js, ts, c#)
        by_language = {normalize_language(k): v for k, v in overrides.items()}
        config = config.with_overrides(by_language.get(name))
    return config, get_variant(name)


def create_extractor(
    language: str,
    overrides: Optional[dict[str, dict[str, Any]]] = None,
    parser: Optional[ASTParser] = None,
) -> EntityExtractor:
    """
    Create an EntityExtractor for a language.

    Args:
        language: Language id or alias (java, python, csharp, javascript/js,
            typescript/ts)
        overrides: Optional per-language LanguageConfig overrides
        parser: Optional parser to use instead of a fresh ASTParser

    Returns:
        EntityExtractor ready to extract from source text

    Raises:
        UnsupportedLanguageError: If the language has no configuration
    """
    config, variant = get_language_support(language, overrides)
    name = normalize_language(language)
    logger.debug(f"Creating extractor for {name} (variant: {variant.name})")
    return EntityExtractor(name, config, variant, parser=parser)


__all__ = [
    "create_extractor",
    "get_language_support",
    "get_supported_languages",
]
