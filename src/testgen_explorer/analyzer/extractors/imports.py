"""
Import extraction from Tree-sitter.

One ImportRecord per top-level import statement, in source order:

- import React from 'react'                -> specifiers ["React"], default
- import { View, Text as T } from 'x'      -> specifiers ["View", "Text"]
- import * as utils from './utils'         -> specifiers ["* as utils"]
- import './styles.css'                    -> no specifiers
"""

import logging
from typing import List, Optional

from testgen_explorer.analyzer.extractors.base import BaseExtractor
from testgen_explorer.analyzer.extractors.types import string_value
from testgen_explorer.analyzer.models import FileAnalysisResult, ImportRecord
from testgen_explorer.analyzer.tree_sitter_adapter import TreeSitterNode

logger = logging.getLogger(__name__)

NAMESPACE_PREFIX = "* as "


class ImportExtractor(BaseExtractor):
    """Extracts import statements from a Tree-sitter program."""

    def extract(self, tree: TreeSitterNode, result: FileAnalysisResult) -> None:
        """Extract imports and append them to the result.

        Args:
            tree: Tree-sitter root node
            result: FileAnalysisResult to populate
        """
        for node in tree.named_children:
            if node.type != "import_statement":
                continue
            record = self._extract_import(node)
            if record is not None:
                result.imports.append(record)

    def _extract_import(self, node: TreeSitterNode) -> Optional[ImportRecord]:
        source_node = node.child_by_field_name("source")
        if source_node is None:
            # import x = require('y') in the TypeScript grammar
            return self._extract_require_import(node)

        record = ImportRecord(source=string_value(source_node))
        for child in node.named_children:
            if child.type == "import_clause":
                self._extract_clause(child, record)
        return record

    def _extract_clause(self, clause: TreeSitterNode, record: ImportRecord) -> None:
        """Collect the specifiers of an import clause into the record.

        Args:
            clause: ``import_clause`` node
            record: ImportRecord to populate
        """
        for child in clause.named_children:
            if child.type == "identifier":
                record.specifiers.append(self.get_node_text(child))
                record.is_default = True
            elif child.type == "namespace_import":
                alias = next((c for c in child.named_children if c.type == "identifier"), None)
                if alias is not None:
                    record.specifiers.append(f"{NAMESPACE_PREFIX}{self.get_node_text(alias)}")
            elif child.type == "named_imports":
                record.specifiers.extend(self._named_specifiers(child))

    def _named_specifiers(self, named_imports: TreeSitterNode) -> List[str]:
        # The imported name is recorded, not the local alias
        names = []
        for specifier in named_imports.named_children:
            if specifier.type != "import_specifier":
                continue
            name_node = specifier.child_by_field_name("name")
            if name_node is not None:
                names.append(self.get_node_text(name_node))
        return names

    def _extract_require_import(self, node: TreeSitterNode) -> Optional[ImportRecord]:
        for child in node.named_children:
            if child.type != "import_require_clause":
                continue
            source_node = child.child_by_field_name("source")
            alias = next((c for c in child.named_children if c.type == "identifier"), None)
            if source_node is None:
                break
            return ImportRecord(
                source=string_value(source_node),
                specifiers=[self.get_node_text(alias)] if alias is not None else [],
                is_default=alias is not None,
            )

        logger.debug(f"Skipping import without a source at line {self.get_node_line(node)}")
        return None
