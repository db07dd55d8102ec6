"""
Type descriptor resolution.

Converts a TypeScript type-annotation node into a normalized descriptor
string. Resolution is purely syntactic and never raises: anything it does
not recognize becomes "any".
"""

from typing import Optional

from testgen_explorer.analyzer.models import ANY_TYPE
from testgen_explorer.analyzer.tree_sitter_adapter import (
    TreeSitterNode,
    first_named_child,
    node_text,
)

PRIMITIVE_TYPES = frozenset({
    "string",
    "number",
    "boolean",
    "any",
    "void",
    "null",
    "undefined",
    "never",
    "unknown",
    "object",
})

FUNCTION_TYPE = "Function"
OBJECT_TYPE = "object"

# Wrappers that carry exactly one inner type
_TRANSPARENT_TYPES = frozenset({"type_annotation", "parenthesized_type", "opting_type_annotation"})


def resolve_type(node: Optional[TreeSitterNode]) -> str:
    """
    Resolve a type node into a type descriptor.

    Args:
        node: Type node, ``type_annotation`` wrapper, or None

    Returns:
        Normalized descriptor such as "string", "User[]" or "'a' | 'b'"
    """
    if node is None:
        return ANY_TYPE

    kind = node.type

    if kind in _TRANSPARENT_TYPES:
        return resolve_type(first_named_child(node))

    if kind == "predefined_type":
        name = node_text(node)
        return name if name in PRIMITIVE_TYPES else ANY_TYPE

    if kind in ("type_identifier", "nested_type_identifier"):
        return _qualified_name(node)

    if kind == "generic_type":
        # Type arguments are dropped: Promise<User> -> Promise
        return _qualified_name(node.child_by_field_name("name"))

    if kind == "array_type":
        return f"{resolve_type(first_named_child(node))}[]"

    if kind == "union_type":
        return " | ".join(resolve_type(child) for child in _members(node))

    if kind == "intersection_type":
        return " & ".join(resolve_type(child) for child in _members(node))

    if kind == "literal_type":
        return _literal_descriptor(first_named_child(node))

    if kind == "tuple_type":
        return f"[{', '.join(resolve_type(child) for child in _members(node))}]"

    if kind == "named_tuple_member":
        return resolve_type(node.child_by_field_name("type"))

    if kind == "function_type":
        return FUNCTION_TYPE

    if kind == "object_type":
        return OBJECT_TYPE

    return ANY_TYPE


def _members(node: TreeSitterNode):
    return [child for child in node.named_children if child.type != "comment"]


def _qualified_name(node: Optional[TreeSitterNode]) -> str:
    """Join the segments of a (possibly nested) type name with dots."""
    if node is None:
        return "unknown"
    return "".join(node_text(node).split())


def _literal_descriptor(literal: Optional[TreeSitterNode]) -> str:
    if literal is None:
        return "literal"
    kind = literal.type
    if kind == "string":
        return f"'{string_value(literal)}'"
    if kind in ("number", "true", "false", "null", "undefined"):
        return node_text(literal)
    return "literal"


def string_value(node: TreeSitterNode) -> str:
    """
    Get the unquoted contents of a string literal node.

    Args:
        node: Tree-sitter ``string`` node

    Returns:
        Text between the quotes
    """
    text = node_text(node)
    if len(text) >= 2 and text[0] == text[-1] and text[0] in "'\"`":
        return text[1:-1]
    return text
