"""
Higher-order wrapper resolution.

Recognizes memoization, ref-forwarding and lazy-loading wrapper calls,
including nested chains such as ``memo(forwardRef((props, ref) => ...))``,
and analyzes the innermost inline function under the outer binding's name.
"""

import logging
from typing import List, Optional, Sequence

from testgen_explorer.analyzer.extractors.components import analyze_component
from testgen_explorer.analyzer.models import ComponentRecord, ImportRecord
from testgen_explorer.analyzer.tree_sitter_adapter import (
    FUNCTION_EXPRESSION_TYPES,
    TreeSitterNode,
    first_named_child,
    get_line,
    node_text,
    unwrap_parentheses,
)

logger = logging.getLogger(__name__)

WRAPPER_NAMES = frozenset({
    "memo",
    "React.memo",
    "forwardRef",
    "React.forwardRef",
    "lazy",
    "React.lazy",
})


def wrapper_name(node: Optional[TreeSitterNode]) -> Optional[str]:
    """
    Get the wrapper name of a call expression.

    Args:
        node: Any node

    Returns:
        "memo", "React.forwardRef", ... if the node calls a known wrapper,
        otherwise None
    """
    if node is None or node.type != "call_expression":
        return None
    callee = node.child_by_field_name("function")
    if callee is None or callee.type not in ("identifier", "member_expression"):
        return None
    name = "".join(node_text(callee).split())
    return name if name in WRAPPER_NAMES else None


def first_argument(call: TreeSitterNode) -> Optional[TreeSitterNode]:
    """Get the first argument of a call, without enclosing parentheses."""
    return unwrap_parentheses(first_named_child(call.child_by_field_name("arguments")))


def unwrap(call: TreeSitterNode) -> tuple[Optional[TreeSitterNode], List[str]]:
    """
    Follow a chain of wrapper calls down to the wrapped function.

    Args:
        call: Outermost call expression

    Returns:
        Tuple of (inline function node or None, wrapper names outer to inner)
    """
    chain: List[str] = []
    node = call
    while True:
        name = wrapper_name(node)
        if name is None:
            # Non-wrapper call in the chain (or not a wrapper at all)
            return None, chain
        chain.append(name)

        argument = first_argument(node)
        if argument is None:
            return None, chain
        if argument.is_named and argument.type in FUNCTION_EXPRESSION_TYPES:
            return argument, chain
        if argument.type == "call_expression":
            node = argument
            continue

        if argument.type == "identifier":
            logger.debug(
                f"{name} at line {get_line(call)} wraps {node_text(argument)} by reference; "
                "its declaration is analyzed on its own"
            )
        return None, chain


def resolve_wrapped(
    call: TreeSitterNode,
    fallback_name: str,
    file_path: str = "",
    imports: Optional[Sequence[ImportRecord]] = None,
) -> Optional[ComponentRecord]:
    """
    Resolve a wrapper call into the record of the component it wraps.

    Args:
        call: Call expression bound to a name or default-exported
        fallback_name: Outer binding name (variable name or "default")
        file_path: Source file label
        imports: Imports of the enclosing file

    Returns:
        ComponentRecord named after the outer binding, or None when the call
        is not a wrapper or wraps something other than an inline function
    """
    target, chain = unwrap(call)
    if target is None:
        return None
    return analyze_component(
        target,
        name=fallback_name,
        file_path=file_path,
        imports=imports,
        wrappers=chain,
    )
