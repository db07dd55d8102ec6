"""
Function analysis from Tree-sitter.

Builds FunctionRecord values for plain (non-component) functions: their
signature, async flag and export status.
"""

import logging
from typing import Optional, Sequence

from testgen_explorer.analyzer.extractors.signatures import (
    extract_params,
    extract_return_type,
    is_async,
)
from testgen_explorer.analyzer.models import FunctionRecord, ImportRecord
from testgen_explorer.analyzer.tree_sitter_adapter import (
    TreeSitterNode,
    get_line,
    infer_binding_name,
)

logger = logging.getLogger(__name__)

_VARIABLE_DECLARATION_TYPES = ("lexical_declaration", "variable_declaration")


def is_exported(function_node: TreeSitterNode) -> bool:
    """
    Check whether a function is exported by its declaration.

    A declaration is exported when its parent is an export statement; a
    variable-bound function is exported when the enclosing variable
    declaration is.

    Args:
        function_node: Function-like node

    Returns:
        True for named and default exports
    """
    parent = function_node.parent
    while parent is not None and parent.type == "parenthesized_expression":
        parent = parent.parent
    if parent is None:
        return False
    if parent.type == "export_statement":
        return True
    if parent.type == "variable_declarator":
        declaration = parent.parent
        if declaration is not None and declaration.type in _VARIABLE_DECLARATION_TYPES:
            outer = declaration.parent
            return outer is not None and outer.type == "export_statement"
    return False


def analyze_function(
    function_node: TreeSitterNode,
    name: Optional[str] = None,
    file_path: str = "",
    imports: Optional[Sequence[ImportRecord]] = None,
) -> Optional[FunctionRecord]:
    """
    Build the record for a plain function.

    Args:
        function_node: Function declaration, expression or arrow
        name: Bound name; inferred from the node when omitted
        file_path: Source file label
        imports: Imports of the enclosing file

    Returns:
        FunctionRecord, or None if no name can be determined
    """
    if name is None:
        name = infer_binding_name(function_node)
    if name is None:
        logger.debug(f"Skipping unnamed function at line {get_line(function_node)}")
        return None

    return FunctionRecord(
        name=name,
        params=extract_params(function_node),
        return_type=extract_return_type(function_node),
        is_async=is_async(function_node),
        is_exported=is_exported(function_node),
        imports=list(imports or []),
        file_path=file_path,
    )
