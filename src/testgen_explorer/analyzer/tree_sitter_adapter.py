"""
Tree-sitter helpers for testgen-explorer.

Provides the generic traversal and node inspection utilities shared by all
extractors. Every Tree-sitter node exposes the same ordered ``children``
list regardless of its kind, so one recursive descent works for any
fragment of the tree, including function bodies detached from the program.
"""

import logging
from typing import Any, Callable, Iterable, Iterator, Optional

from testgen_explorer.analyzer.models import DEFAULT_EXPORT_NAME

logger = logging.getLogger(__name__)

# Type aliases for better readability
TreeSitterNode = Any  # tree_sitter.Node

# Function-like node kinds across the TypeScript and TSX grammars.
# "function" is the pre-0.21 spelling of "function_expression".
FUNCTION_DECLARATION_TYPES = frozenset({
    "function_declaration",
    "generator_function_declaration",
})
FUNCTION_EXPRESSION_TYPES = frozenset({
    "arrow_function",
    "function_expression",
    "function",
    "generator_function",
})
FUNCTION_NODE_TYPES = FUNCTION_DECLARATION_TYPES | FUNCTION_EXPRESSION_TYPES | frozenset({
    "method_definition",
})

# Markup constructs (JSX)
MARKUP_NODE_TYPES = frozenset({
    "jsx_element",
    "jsx_self_closing_element",
    "jsx_fragment",
})


def node_text(node: Optional[TreeSitterNode]) -> str:
    """
    Get the source text of a Tree-sitter node.

    Args:
        node: Tree-sitter node (may be None)

    Returns:
        Decoded node text, or an empty string for a missing node
    """
    if node is None:
        return ""
    text = node.text
    if text is None:
        return ""
    return text.decode("utf-8") if isinstance(text, bytes) else text


def walk_tree(tree: TreeSitterNode) -> Iterator[TreeSitterNode]:
    """
    Walk a Tree-sitter tree in pre-order.

    Args:
        tree: Root node of the walk

    Returns:
        Iterator over nodes in source order
    """
    stack = [tree]
    while stack:
        node = stack.pop()
        yield node
        # Add children in reverse order for correct traversal
        stack.extend(reversed(node.children))


def visit(node: Optional[TreeSitterNode], visitor: Callable[[TreeSitterNode], bool]) -> None:
    """
    Generic pre-order descent over every child slot of every node.

    The visitor is called for each node before its children; returning
    False prunes the subtree below that node. Uses an explicit stack, so
    deeply nested expressions do not hit the recursion limit.

    Args:
        node: Node to start from (may be None)
        visitor: Callback invoked per node
    """
    if node is None:
        return
    stack = [node]
    while stack:
        current = stack.pop()
        if visitor(current) is False:
            continue
        stack.extend(reversed(current.children))


def contains_node_type(node: Optional[TreeSitterNode], node_types: Iterable[str]) -> bool:
    """
    Check whether a node is, or contains anywhere below it, one of the given kinds.

    Args:
        node: Node to search (may be None)
        node_types: Node kinds to look for

    Returns:
        True if a matching node was found
    """
    if node is None:
        return False
    wanted = frozenset(node_types)
    return any(n.type in wanted for n in walk_tree(node))


def has_token(node: Optional[TreeSitterNode], token: str) -> bool:
    """
    Check whether a node has an anonymous token child (``async``, ``default``, ``?``).

    Args:
        node: Node to inspect

    Returns:
        True if the token is a direct child
    """
    if node is None:
        return False
    return any(not child.is_named and child.type == token for child in node.children)


def first_named_child(node: Optional[TreeSitterNode]) -> Optional[TreeSitterNode]:
    """Return the first named child of a node, skipping comments."""
    if node is None:
        return None
    for child in node.named_children:
        if child.type != "comment":
            return child
    return None


def unwrap_parentheses(node: Optional[TreeSitterNode]) -> Optional[TreeSitterNode]:
    """Strip any number of enclosing parenthesized expressions."""
    while node is not None and node.type == "parenthesized_expression":
        node = first_named_child(node)
    return node


def is_function_node(node: Optional[TreeSitterNode]) -> bool:
    """
    Check if a node represents a function-like construct.

    Args:
        node: Node to check

    Returns:
        True for declarations, function/arrow expressions and methods
    """
    return node is not None and node.is_named and node.type in FUNCTION_NODE_TYPES


def is_call_node(node: Optional[TreeSitterNode]) -> bool:
    """Check if a node represents a call expression."""
    return node is not None and node.type == "call_expression"


def get_node_name(node: Optional[TreeSitterNode]) -> Optional[str]:
    """
    Get the bound name of a node (function name, declarator name, identifier).

    Args:
        node: Node to get name from

    Returns:
        Node name or None if the node is anonymous or not a binding
    """
    if node is None:
        return None
    if node.type in ("identifier", "property_identifier", "type_identifier"):
        return node_text(node)
    name_node = node.child_by_field_name("name")
    if name_node is not None and name_node.type in ("identifier", "property_identifier"):
        return node_text(name_node)
    return None


def infer_binding_name(function_node: TreeSitterNode) -> Optional[str]:
    """
    Work out the name a function-like node is bound to.

    The enclosing variable declarator wins over the function's own name
    (``const a = function b() {}`` binds ``a``). Anonymous functions in
    default-export position are bound to "default".

    Args:
        function_node: Function-like node

    Returns:
        Bound name, or None for an anonymous function with no binding
    """
    parent = function_node.parent
    while parent is not None and parent.type == "parenthesized_expression":
        parent = parent.parent

    if parent is not None and parent.type == "variable_declarator":
        name_node = parent.child_by_field_name("name")
        if name_node is not None and name_node.type == "identifier":
            return node_text(name_node)

    own_name = get_node_name(function_node)
    if own_name is not None:
        return own_name

    if parent is not None and parent.type == "export_statement" and has_token(parent, "default"):
        return DEFAULT_EXPORT_NAME
    return None


def get_line(node: TreeSitterNode) -> int:
    """Get the 1-based start line of a node."""
    return node.start_point[0] + 1
