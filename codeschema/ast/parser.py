"""
Tree-sitter Parser Wrapper

Handles language detection and tree-sitter parsing for multiple languages.
"""

from pathlib import Path
from typing import Optional

import tree_sitter_c_sharp
import tree_sitter_java
import tree_sitter_javascript
import tree_sitter_python
import tree_sitter_typescript
from tree_sitter import Language, Parser, Tree

from codeschema.configs.logging import get_logger

logger = get_logger("ast.parser")


# Supported languages and their tree-sitter modules
LANGUAGE_MODULES = {
    "java": tree_sitter_java,
    "python": tree_sitter_python,
    "csharp": tree_sitter_c_sharp,
    "javascript": tree_sitter_javascript,
    "typescript": tree_sitter_typescript.language_typescript,
}

# File extension to language mapping
EXTENSION_TO_LANGUAGE = {
    ".java": "java",
    ".py": "python",
    ".pyw": "python",
    ".cs": "csharp",
    ".js": "javascript",
    ".jsx": "javascript",
    ".mjs": "javascript",
    ".cjs": "javascript",
    ".ts": "typescript",
    ".mts": "typescript",
    ".cts": "typescript",
}


class ASTParser:
    """
    Tree-sitter based parser for multiple languages.

    Lazily initializes parsers for each language on first use. A tree-sitter
    Parser is not safe to share between threads, so use one ASTParser per
    thread.
    """

    def __init__(self):
        self._parsers: dict[str, Parser] = {}
        self._languages: dict[str, Language] = {}

    def _get_language(self, lang_name: str) -> Optional[Language]:
        """Get or create Language object for a language."""
        if lang_name in self._languages:
            return self._languages[lang_name]

        module = LANGUAGE_MODULES.get(lang_name)
        if module is None:
            logger.warning(f"No grammar for language: {lang_name}")
            return None

        try:
            # Handle both module and function-style language getters
            if callable(module):
                language = Language(module())
            else:
                language = Language(module.language())
            self._languages[lang_name] = language
            return language
        except Exception as e:
            logger.error(f"Failed to load language {lang_name}: {e}")
            return None

    def _get_parser(self, lang_name: str) -> Optional[Parser]:
        """Get or create Parser for a language."""
        if lang_name in self._parsers:
            return self._parsers[lang_name]

        language = self._get_language(lang_name)
        if language is None:
            return None

        parser = Parser(language)
        self._parsers[lang_name] = parser
        return parser

    def detect_language(self, file_path: str) -> Optional[str]:
        """
        Detect language from file extension.

        Args:
            file_path: Path to the source file

        Returns:
            Language name or None if unsupported
        """
        ext = Path(file_path).suffix.lower()
        return EXTENSION_TO_LANGUAGE.get(ext)

    def parse(self, source: str, language: str) -> Optional[Tree]:
        """
        Parse source code into an AST.

        Args:
            source: Source code as string
            language: Language name (java, python, csharp, javascript, typescript)

        Returns:
            Tree-sitter Tree or None if parsing failed
        """
        parser = self._get_parser(language)
        if parser is None:
            return None

        try:
            return parser.parse(source.encode("utf-8"))
        except Exception as e:
            logger.error(f"Failed to parse {language} code: {e}")
            return None

    def is_supported(self, file_path: str) -> bool:
        """Check if a file's language is supported."""
        return self.detect_language(file_path) is not None
