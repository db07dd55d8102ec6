"""
Tree-sitter Parser Module

Provides Tree-sitter parsing for JavaScript and TypeScript sources.
``.ts`` files use the TypeScript grammar; everything else uses the TSX
grammar, which accepts plain JavaScript and JSX as well.
"""

import logging
from pathlib import Path
from typing import Any, Dict

import tree_sitter_typescript
from tree_sitter import Language, Parser

logger = logging.getLogger(__name__)

# Type aliases
TreeSitterNode = Any  # tree_sitter.Node

TYPESCRIPT = "typescript"
TSX = "tsx"

_parsers: Dict[str, Parser] = {}


class ParserInitializationError(Exception):
    """Raised when Tree-sitter parser initialization fails."""

    pass


class ParseError(Exception):
    """Raised when parsing fails."""

    pass


def grammar_for(file_path: str | Path) -> str:
    """
    Pick the grammar for a file based on its extension.

    Args:
        file_path: Source file path

    Returns:
        "typescript" for .ts files, "tsx" otherwise
    """
    return TYPESCRIPT if Path(file_path).suffix.lower() == ".ts" else TSX


def get_parser(file_path: str | Path = "unknown.tsx") -> Parser:
    """
    Initialize (once per grammar) and return a Tree-sitter parser.

    Args:
        file_path: Path used to choose the grammar

    Returns:
        Parser: Configured Tree-sitter parser

    Raises:
        ParserInitializationError: If parser initialization fails

    Examples:
        >>> parser = get_parser("Button.tsx")
        >>> tree = parser.parse(b"const a = <div />;")
    """
    grammar = grammar_for(file_path)
    parser = _parsers.get(grammar)
    if parser is not None:
        return parser

    try:
        if grammar == TYPESCRIPT:
            language = Language(tree_sitter_typescript.language_typescript())
        else:
            language = Language(tree_sitter_typescript.language_tsx())

        parser = Parser()
        parser.language = language

        logger.debug(f"Tree-sitter {grammar} parser initialized successfully")
    except Exception as e:
        logger.error(f"Failed to initialize Tree-sitter parser: {e}")
        raise ParserInitializationError(f"Cannot initialize {grammar} parser: {e}") from e

    _parsers[grammar] = parser
    return parser


def parse_source(source_code: str, file_path: str | Path = "unknown.tsx") -> TreeSitterNode:
    """
    Parse JavaScript/TypeScript source code using Tree-sitter.

    Args:
        source_code: Source code to parse
        file_path: Filename for grammar selection and error reporting

    Returns:
        Tree-sitter root ``program`` node

    Raises:
        ParseError: If parsing fails
    """
    parser = get_parser(file_path)
    try:
        tree = parser.parse(bytes(source_code, "utf-8"))
    except Exception as e:
        logger.error(f"Tree-sitter parsing failed: {e}")
        raise ParseError(f"Failed to parse {file_path}: {e}") from e

    root = tree.root_node
    if root.has_error:
        logger.warning(f"Syntax errors in {file_path}; analysis may be incomplete")
    return root


def parse_file(file_path: str | Path) -> TreeSitterNode:
    """
    Parse a JavaScript/TypeScript file.

    Args:
        file_path: Path to the source file

    Returns:
        Tree-sitter root node

    Raises:
        ParseError: If the file is missing, unreadable or cannot be parsed
    """
    file_path = Path(file_path).resolve()

    if not file_path.exists():
        raise ParseError(f"File not found: {file_path}")

    try:
        with open(file_path, "r", encoding="utf-8") as f:
            source_code = f.read()
    except UnicodeDecodeError as e:
        raise ParseError(f"Encoding error reading {file_path}: {e}") from e
    except IOError as e:
        raise ParseError(f"Error reading {file_path}: {e}") from e

    return parse_source(source_code, file_path)
