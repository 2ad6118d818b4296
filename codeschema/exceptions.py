"""
codeschema Exception Hierarchy

Centralized exception classes for structured error handling across the codebase.
All codeschema-specific exceptions inherit from CodeSchemaError.

Usage:
    from codeschema.exceptions import CodeSchemaError, ConfigurationError

    try:
        extractor = create_extractor(language)
    except ConfigurationError as e:
        logger.error(f"Cannot analyze {path}: {e}")
"""


class CodeSchemaError(Exception):
    """Base exception for all codeschema errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} ({self.details})"
        return self.message


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(CodeSchemaError):
    """Error in codeschema configuration."""

    pass


class UnsupportedLanguageError(ConfigurationError):
    """Requested language has no configuration."""

    def __init__(self, language: str, supported: list[str] | None = None):
        details = {"language": language}
        if supported:
            details["supported"] = ", ".join(supported)
        super().__init__(f"Unsupported language: {language}", details)
        self.language = language
        self.supported = supported or []


# =============================================================================
# Extraction Errors
# =============================================================================


class ExtractionError(CodeSchemaError):
    """Base class for extraction errors."""

    pass


class ParseError(ExtractionError):
    """Parser produced no syntax tree for the given source."""

    pass
