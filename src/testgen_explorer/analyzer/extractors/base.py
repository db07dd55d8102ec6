"""
Base extractor interface.

Extractors that populate a FileAnalysisResult inherit from BaseExtractor
and implement the extract method. Uses Tree-sitter exclusively for parsing.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any

from testgen_explorer.analyzer.models import FileAnalysisResult
from testgen_explorer.analyzer.tree_sitter_adapter import (
    TreeSitterNode,
    get_line,
    node_text,
    walk_tree,
)

logger = logging.getLogger(__name__)


class BaseExtractor(ABC):
    """Base class for all extractors.

    Extractors analyze Tree-sitter trees and populate FileAnalysisResult
    instances. Each extractor is responsible for one aspect of the analysis.
    """

    def walk_tree(self, tree: TreeSitterNode):
        """
        Walk a Tree-sitter tree.

        Args:
            tree: Tree-sitter root node

        Returns:
            Iterator over nodes in pre-order traversal
        """
        return walk_tree(tree)

    @abstractmethod
    def extract(self, tree: TreeSitterNode, result: FileAnalysisResult) -> None:
        """Extract information from Tree-sitter tree and populate result.

        Args:
            tree: Tree-sitter root node
            result: FileAnalysisResult object to populate
        """
        pass

    def get_node_text(self, node: Any) -> str:
        """Get the decoded source text of a node."""
        return node_text(node)

    def get_node_line(self, node: Any) -> int:
        """Get the 1-based start line of a node."""
        return get_line(node)
