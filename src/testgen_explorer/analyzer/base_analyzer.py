"""
Main FileAnalyzer orchestrator.

Runs the extractors over a parsed tree and assembles one
FileAnalysisResult per source file. The tree-level entry point
(``analyze_tree``) performs no I/O; file and directory helpers wrap it
with parsing and scanning.
"""

import logging
from concurrent.futures import ProcessPoolExecutor, as_completed
from fnmatch import fnmatch
from pathlib import Path
from typing import List, Optional, Sequence

from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TextColumn,
    TimeElapsedColumn,
)

from testgen_explorer.analyzer.extractors.declarations import DeclarationExtractor
from testgen_explorer.analyzer.extractors.imports import ImportExtractor
from testgen_explorer.analyzer.models import (
    ComponentRecord,
    FileAnalysisResult,
    FunctionRecord,
    ImportRecord,
)
from testgen_explorer.analyzer.parser import ParseError, parse_file, parse_source
from testgen_explorer.analyzer.tree_sitter_adapter import TreeSitterNode

logger = logging.getLogger(__name__)

REACT_NATIVE = "react-native"
REACT = "react"
VANILLA = "vanilla"

DEFAULT_PATTERNS = ("**/*.ts", "**/*.tsx", "**/*.js", "**/*.jsx")

DEFAULT_EXCLUDE_PATTERNS = [
    "node_modules",
    "dist",
    "build",
    "coverage",
    "__tests__",
    "__mocks__",
    "*.test.*",
    "*.spec.*",
    "*.d.ts",
]


def detect_framework(imports: Sequence[ImportRecord]) -> str:
    """
    Infer the UI framework of a file from its imports.

    Imports are visited in source order and the first match decides.
    Within one import the react-native prefix is checked before the
    react prefix.

    Args:
        imports: Imports in source order

    Returns:
        "react-native", "react" or "vanilla"
    """
    for record in imports:
        if record.source.startswith(REACT_NATIVE):
            return REACT_NATIVE
        if record.source.startswith(REACT):
            return REACT
    return VANILLA


def determine_file_type(components: Sequence[ComponentRecord], functions: Sequence[FunctionRecord]) -> str:
    """Classify a file as "component", "function" or "unknown"."""
    if components:
        return "component"
    if functions:
        return "function"
    return "unknown"


def is_excluded(relative_path: Path, exclude_patterns: Sequence[str]) -> bool:
    """
    Check a path against exclusion globs.

    A pattern matches either the whole relative path or any single
    component of it, so "node_modules" excludes the directory at any depth.

    Args:
        relative_path: Path relative to the scanned root
        exclude_patterns: Glob patterns

    Returns:
        True if the path should be skipped
    """
    posix = relative_path.as_posix()
    for pattern in exclude_patterns:
        if fnmatch(posix, pattern):
            return True
        if any(fnmatch(part, pattern) for part in relative_path.parts):
            return True
    return False


class FileAnalyzer:
    """
    Orchestrates file analysis using specialized extractors.

    Imports are extracted first, since every component and function
    record carries a copy of the file's imports.
    """

    def __init__(self):
        """Initialize analyzer with all extractors."""
        self.import_extractor = ImportExtractor()
        self.declaration_extractor = DeclarationExtractor()

    def analyze_tree(self, tree: TreeSitterNode, file_path: str = "") -> FileAnalysisResult:
        """Analyze a parsed syntax tree.

        Args:
            tree: Tree-sitter root node
            file_path: Label copied into the result and its records

        Returns:
            FileAnalysisResult for the tree
        """
        result = FileAnalysisResult(file_path=str(file_path))

        self.import_extractor.extract(tree, result)
        self.declaration_extractor.extract(tree, result)

        result.framework = detect_framework(result.imports)
        result.file_type = determine_file_type(result.components, result.functions)

        logger.debug(
            f"{file_path}: {len(result.components)} components, "
            f"{len(result.functions)} functions, {len(result.imports)} imports"
        )
        return result

    def analyze_source(self, source_code: str, file_path: str = "unknown.tsx") -> FileAnalysisResult:
        """Parse and analyze source text.

        Args:
            source_code: JavaScript/TypeScript source
            file_path: Label, also used to pick the grammar

        Returns:
            FileAnalysisResult for the source

        Raises:
            ParseError: If parsing fails
        """
        tree = parse_source(source_code, file_path)
        return self.analyze_tree(tree, str(file_path))

    def analyze_file(self, file_path: str | Path) -> FileAnalysisResult:
        """Analyze a single source file.

        Args:
            file_path: Path to the source file

        Returns:
            FileAnalysisResult labelled with the absolute path

        Raises:
            ParseError: If the file is missing, unreadable or unparseable
        """
        file_path = Path(file_path).resolve()
        tree = parse_file(file_path)
        return self.analyze_tree(tree, str(file_path))

    def find_source_files(
        self,
        root_path: Path,
        pattern: Optional[str] = None,
        exclude_patterns: Optional[List[str]] = None,
    ) -> List[Path]:
        """List the files a directory scan would analyze, sorted.

        Args:
            root_path: Root directory
            pattern: Glob relative to the root (default: all JS/TS sources)
            exclude_patterns: Exclusion globs (default: DEFAULT_EXCLUDE_PATTERNS)

        Returns:
            Sorted list of file paths
        """
        if exclude_patterns is None:
            exclude_patterns = DEFAULT_EXCLUDE_PATTERNS

        patterns = [pattern] if pattern else list(DEFAULT_PATTERNS)
        found = set()
        for glob_pattern in patterns:
            for path in root_path.glob(glob_pattern):
                if not path.is_file():
                    continue
                if is_excluded(path.relative_to(root_path), exclude_patterns):
                    continue
                found.add(path)
        return sorted(found)

    def analyze_directory(
        self,
        root_path: str | Path,
        pattern: Optional[str] = None,
        exclude_patterns: Optional[List[str]] = None,
        parallel: bool = False,
        show_progress: bool = False,
        max_workers: Optional[int] = None,
    ) -> List[FileAnalysisResult]:
        """Analyze all matching source files in a directory recursively.

        Args:
            root_path: Root directory to analyze
            pattern: Glob relative to the root (default: all JS/TS sources)
            exclude_patterns: Patterns to exclude (e.g., 'node_modules', '*.test.*')
            parallel: Whether to use a process pool
            show_progress: Display a Rich progress bar
            max_workers: Number of worker processes (default: os.cpu_count())

        Returns:
            List of FileAnalysisResult, sorted by file path. Files that fail
            to parse are logged and left out.

        Raises:
            FileNotFoundError: If the directory does not exist
            NotADirectoryError: If the path is not a directory
        """
        root_path = Path(root_path).resolve()
        if not root_path.exists():
            raise FileNotFoundError(f"Directory not found: {root_path}")
        if not root_path.is_dir():
            raise NotADirectoryError(f"Path is not a directory: {root_path}")

        source_files = self.find_source_files(root_path, pattern, exclude_patterns)
        if not source_files:
            logger.warning(f"No source files found in {root_path}")
            return []

        results = []

        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            MofNCompleteColumn(),
            TimeElapsedColumn(),
            disable=not show_progress,
        ) as progress:
            task = progress.add_task(f"Analyzing {len(source_files)} files...", total=len(source_files))

            if parallel:
                # Each file is analyzed independently, so a process pool is safe
                with ProcessPoolExecutor(max_workers=max_workers) as executor:
                    future_to_file = {
                        executor.submit(self.analyze_file, source_file): source_file
                        for source_file in source_files
                    }

                    for future in as_completed(future_to_file):
                        source_file = future_to_file[future]
                        try:
                            results.append(future.result())
                        except ParseError as e:
                            logger.error(f"Failed to analyze {source_file}: {e}")
                        finally:
                            progress.update(task, advance=1)
            else:
                for source_file in source_files:
                    try:
                        results.append(self.analyze_file(source_file))
                    except ParseError as e:
                        logger.error(f"Failed to analyze {source_file}: {e}")
                    finally:
                        progress.update(task, advance=1)

        results.sort(key=lambda result: result.file_path)
        return results
