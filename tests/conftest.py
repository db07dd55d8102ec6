"""
Pytest configuration and shared fixtures for testgen-explorer tests.
"""

import shutil
import tempfile
from pathlib import Path
from typing import Callable, Generator, Optional

import pytest

from testgen_explorer.analyzer import FileAnalysisResult, FileAnalyzer, parse_source
from testgen_explorer.analyzer.tree_sitter_adapter import TreeSitterNode, walk_tree

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def find_node(root: TreeSitterNode, node_type: str) -> Optional[TreeSitterNode]:
    """Find the first node of a kind in pre-order.

    Args:
        root: Node to search from
        node_type: Tree-sitter node kind

    Returns:
        Matching node or None
    """
    for node in walk_tree(root):
        if node.type == node_type and node.is_named:
            return node
    return None


def find_function(source: str, file_path: str = "test.tsx") -> TreeSitterNode:
    """Parse source and return its first function-like node."""
    root = parse_source(source, file_path)
    for node in walk_tree(root):
        if node.is_named and node.type in (
            "function_declaration",
            "arrow_function",
            "function_expression",
            "function",
        ):
            return node
    raise AssertionError(f"No function in: {source}")


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Provide a temporary directory that is cleaned up after test.

    Yields:
        Path to temporary directory
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def fixtures_dir() -> Path:
    """Directory holding the sample JS/TS sources."""
    return FIXTURES_DIR


@pytest.fixture
def analyzer() -> FileAnalyzer:
    """Provide a fresh FileAnalyzer."""
    return FileAnalyzer()


@pytest.fixture
def analyze(analyzer: FileAnalyzer) -> Callable[..., FileAnalysisResult]:
    """Analyze a source string.

    Returns:
        Function taking (source, file_path="test.tsx")
    """

    def _analyze(source: str, file_path: str = "test.tsx") -> FileAnalysisResult:
        return analyzer.analyze_source(source, file_path)

    return _analyze


@pytest.fixture
def sample_project(temp_dir: Path) -> Path:
    """Create a small project tree for directory scanning.

    Layout:
        src/Button.tsx, src/Card.tsx, src/utils.ts (copied fixtures)
        src/Button.test.tsx              (excluded by default)
        src/__tests__/helper.ts          (excluded by default)
        node_modules/lib/index.js        (excluded by default)
        src/legacy/old.js                (plain function file)

    Args:
        temp_dir: Temporary directory fixture

    Returns:
        Path to the project root
    """
    src = temp_dir / "src"
    (src / "__tests__").mkdir(parents=True)
    (src / "legacy").mkdir()
    (temp_dir / "node_modules" / "lib").mkdir(parents=True)

    for name in ("Button.tsx", "Card.tsx", "utils.ts"):
        shutil.copy(FIXTURES_DIR / name, src / name)

    (src / "Button.test.tsx").write_text(
        "import { render } from '@testing-library/react-native';\n"
        "export const renderButton = () => render(<Button title='x' />);\n",
        encoding="utf-8",
    )
    (src / "__tests__" / "helper.ts").write_text(
        "export function helper(): void {}\n", encoding="utf-8"
    )
    (temp_dir / "node_modules" / "lib" / "index.js").write_text(
        "export function vendored() { return 1; }\n", encoding="utf-8"
    )
    (src / "legacy" / "old.js").write_text(
        "export function legacy(a, b = 2) { return a + b; }\n", encoding="utf-8"
    )
    return temp_dir
