"""
Signature extraction from Tree-sitter.

Extracts ordered parameter descriptors and the return-type descriptor of
any function-like node: declarations, function and arrow expressions, and
methods all expose the same ``parameters``/``return_type`` fields.
"""

import logging
from typing import List, Optional, Tuple

from testgen_explorer.analyzer.extractors.types import resolve_type, string_value
from testgen_explorer.analyzer.models import ANY_TYPE, ParamDescriptor
from testgen_explorer.analyzer.tree_sitter_adapter import (
    TreeSitterNode,
    has_token,
    node_text,
)

logger = logging.getLogger(__name__)

ASYNC_RETURN_TYPE = "Promise<any>"
REST_FALLBACK_TYPE = "any[]"
ARRAY_PATTERN_NAME = "[...]"

_PARAMETER_WRAPPERS = ("required_parameter", "optional_parameter")


def is_async(function_node: TreeSitterNode) -> bool:
    """Check whether a function-like node carries the ``async`` keyword."""
    return has_token(function_node, "async")


def parameter_nodes(function_node: TreeSitterNode) -> List[TreeSitterNode]:
    """
    Get the raw parameter nodes of a function-like node in declared order.

    Args:
        function_node: Function declaration, expression, arrow or method

    Returns:
        Parameter nodes (empty if the function takes none)
    """
    # Arrow functions with a single bare parameter: x => x * 2
    single = function_node.child_by_field_name("parameter")
    if single is not None:
        return [single]

    params = function_node.child_by_field_name("parameters")
    if params is None:
        return []
    return [child for child in params.named_children if child.type != "comment"]


def unpack_parameter(
    param: TreeSitterNode,
) -> Tuple[Optional[TreeSitterNode], Optional[TreeSitterNode], Optional[TreeSitterNode], bool]:
    """
    Split a parameter node into its binding pattern, annotation and default.

    Handles the TypeScript wrappers (``required_parameter``,
    ``optional_parameter``) as well as bare JavaScript patterns.

    Args:
        param: Parameter node

    Returns:
        Tuple of (pattern, type annotation, default value, has ``?`` marker)
    """
    if param.type in _PARAMETER_WRAPPERS:
        return (
            param.child_by_field_name("pattern"),
            param.child_by_field_name("type"),
            param.child_by_field_name("value"),
            param.type == "optional_parameter",
        )
    if param.type == "assignment_pattern":
        return param.child_by_field_name("left"), None, param.child_by_field_name("right"), False
    return param, None, None, False


def render_default_value(node: Optional[TreeSitterNode]) -> str:
    """
    Render a default-value expression as test-friendly literal text.

    Only literal node kinds are recognized; the expression is never
    evaluated. Anything else renders as "undefined".

    Args:
        node: Default-value expression node

    Returns:
        Literal text such as "'World'", "0", "true", "[]" or "{}"
    """
    if node is None:
        return "undefined"
    kind = node.type
    if kind == "string":
        return f"'{string_value(node)}'"
    if kind in ("number", "true", "false", "null"):
        return node_text(node)
    if kind == "array":
        return "[]"
    if kind == "object":
        return "{}"
    return "undefined"


def pattern_property_names(pattern: TreeSitterNode) -> List[str]:
    """
    List the property names bound by an object destructuring pattern.

    Rest elements and computed keys are not properties and are skipped.

    Args:
        pattern: ``object_pattern`` node

    Returns:
        Property names in declared order
    """
    names = []
    for prop in pattern.named_children:
        key = property_key(prop)
        if key is not None:
            names.append(key)
    return names


def property_key(prop: TreeSitterNode) -> Optional[str]:
    """Get the key name of one object-pattern entry, or None."""
    if prop.type == "shorthand_property_identifier_pattern":
        return node_text(prop)
    if prop.type == "object_assignment_pattern":
        left = prop.child_by_field_name("left")
        if left is not None and left.type == "shorthand_property_identifier_pattern":
            return node_text(left)
        return None
    if prop.type == "pair_pattern":
        key = prop.child_by_field_name("key")
        if key is not None and key.type == "property_identifier":
            return node_text(key)
    return None


def extract_param(param: TreeSitterNode) -> Optional[ParamDescriptor]:
    """
    Build the descriptor for a single parameter node.

    Args:
        param: Parameter node

    Returns:
        ParamDescriptor, or None for parameters that bind nothing (``this``)
    """
    pattern, annotation, default, marked_optional = unpack_parameter(param)
    if pattern is None:
        return None

    type_descriptor = resolve_type(annotation)
    optional = marked_optional or default is not None
    default_value = render_default_value(default) if default is not None else None

    if pattern.type == "identifier":
        name = node_text(pattern)
    elif pattern.type == "rest_pattern":
        argument = pattern.named_children[0] if pattern.named_children else None
        name = f"...{node_text(argument)}"
        if type_descriptor == ANY_TYPE:
            type_descriptor = REST_FALLBACK_TYPE
        optional = True
    elif pattern.type == "object_pattern":
        name = f"{{ {', '.join(pattern_property_names(pattern))} }}"
    elif pattern.type == "array_pattern":
        name = ARRAY_PATTERN_NAME
    else:
        logger.debug(f"Skipping parameter of kind {pattern.type}")
        return None

    return ParamDescriptor(
        name=name,
        type=type_descriptor,
        optional=optional,
        default_value=default_value,
    )


def extract_params(function_node: TreeSitterNode) -> List[ParamDescriptor]:
    """
    Extract ordered parameter descriptors from a function-like node.

    Args:
        function_node: Function declaration, expression, arrow or method

    Returns:
        One ParamDescriptor per binding parameter
    """
    params = []
    for param in parameter_nodes(function_node):
        descriptor = extract_param(param)
        if descriptor is not None:
            params.append(descriptor)
    return params


def extract_return_type(function_node: TreeSitterNode) -> str:
    """
    Resolve the return-type descriptor of a function-like node.

    Args:
        function_node: Function declaration, expression, arrow or method

    Returns:
        The annotated return type, "Promise<any>" for unannotated async
        functions, or "any"
    """
    annotation = function_node.child_by_field_name("return_type")
    if annotation is not None:
        return resolve_type(annotation)
    if is_async(function_node):
        return ASYNC_RETURN_TYPE
    return ANY_TYPE
