"""
Component classification and analysis.

A function-like node is a UI component when its body contains a JSX
element or fragment anywhere, however deeply nested. Component analysis
reads props from the first parameter only, collects ``use*`` hook calls
from the whole body, and derives event handlers from the prop names.
"""

import logging
from typing import List, Optional, Sequence

from testgen_explorer.analyzer.extractors.signatures import (
    parameter_nodes,
    property_key,
    render_default_value,
    unpack_parameter,
)
from testgen_explorer.analyzer.extractors.types import resolve_type
from testgen_explorer.analyzer.models import ComponentRecord, ImportRecord, PropDescriptor
from testgen_explorer.analyzer.tree_sitter_adapter import (
    FUNCTION_DECLARATION_TYPES,
    MARKUP_NODE_TYPES,
    TreeSitterNode,
    contains_node_type,
    first_named_child,
    has_token,
    infer_binding_name,
    node_text,
    visit,
)

logger = logging.getLogger(__name__)

HOOK_PREFIX = "use"
EVENT_PREFIX = "on"
CHILDREN_PROP = "children"

DECLARATION_KIND = "declaration"
EXPRESSION_KIND = "expression"


def is_component(function_node: TreeSitterNode) -> bool:
    """
    Decide whether a function-like node renders markup.

    Args:
        function_node: Function declaration, expression or arrow

    Returns:
        True if the body is, or contains anywhere, a JSX element or fragment
    """
    return contains_node_type(function_node.child_by_field_name("body"), MARKUP_NODE_TYPES)


def _default_of(prop: TreeSitterNode) -> Optional[TreeSitterNode]:
    """Get the default-value expression of an object-pattern entry, if any."""
    if prop.type == "object_assignment_pattern":
        return prop.child_by_field_name("right")
    if prop.type == "pair_pattern":
        value = prop.child_by_field_name("value")
        if value is not None and value.type == "assignment_pattern":
            return value.child_by_field_name("right")
    return None


def _type_literal_members(annotation: Optional[TreeSitterNode]) -> List[TreeSitterNode]:
    """Get the property signatures of an inline object type annotation."""
    type_node = first_named_child(annotation)
    if type_node is None or type_node.type != "object_type":
        return []
    return [m for m in type_node.named_children if m.type == "property_signature"]


def _member_name(member: TreeSitterNode) -> Optional[str]:
    name_node = member.child_by_field_name("name")
    if name_node is None or name_node.type != "property_identifier":
        return None
    return node_text(name_node)


def extract_props(function_node: TreeSitterNode) -> List[PropDescriptor]:
    """
    Extract the props of a component from its first parameter.

    Destructured entries become props; a default value makes a prop
    optional. An inline type literal on the parameter then refines the
    type of matching props, or declares the props outright when the
    parameter is a plain identifier.

    Args:
        function_node: Component function node

    Returns:
        Props in declared order, unique by name
    """
    params = parameter_nodes(function_node)
    if not params:
        return []

    # The props parameter is always first; forwardRef's ref comes second
    pattern, annotation, _, _ = unpack_parameter(params[0])
    if pattern is None:
        return []

    props: List[PropDescriptor] = []

    if pattern.type == "object_pattern":
        for entry in pattern.named_children:
            name = property_key(entry)
            if name is None:
                continue
            prop = PropDescriptor(name=name)
            default = _default_of(entry)
            if default is not None:
                prop.required = False
                prop.default_value = render_default_value(default)
            props.append(prop)

        by_name = {prop.name: prop for prop in props}
        for member in _type_literal_members(annotation):
            existing = by_name.get(_member_name(member))
            member_type = member.child_by_field_name("type")
            if existing is None or member_type is None:
                continue
            existing.type = resolve_type(member_type)
            # A runtime default keeps the prop optional whatever the annotation says
            existing.required = not has_token(member, "?") and existing.default_value is None

    elif pattern.type == "identifier":
        for member in _type_literal_members(annotation):
            name = _member_name(member)
            if name is None:
                continue
            props.append(PropDescriptor(
                name=name,
                type=resolve_type(member.child_by_field_name("type")),
                required=not has_token(member, "?"),
            ))

    return props


def extract_hooks(function_node: TreeSitterNode) -> List[str]:
    """
    Collect the hooks called anywhere in a function body.

    Args:
        function_node: Component function node

    Returns:
        Hook names, deduplicated, in order of first appearance
    """
    hooks: List[str] = []

    def collect(node: TreeSitterNode) -> bool:
        if node.type == "call_expression":
            callee = node.child_by_field_name("function")
            if callee is not None and callee.type == "identifier":
                name = node_text(callee)
                if name.startswith(HOOK_PREFIX) and name not in hooks:
                    hooks.append(name)
        return True

    visit(function_node.child_by_field_name("body"), collect)
    return hooks


def is_event_prop(name: str) -> bool:
    """Check whether a prop name follows the ``onXxx`` handler convention."""
    return name.startswith(EVENT_PREFIX) and len(name) > 2 and name[2].isupper()


def extract_events(props: Sequence[PropDescriptor]) -> List[str]:
    """Get the event-handler prop names, in prop order."""
    events: List[str] = []
    for prop in props:
        if is_event_prop(prop.name) and prop.name not in events:
            events.append(prop.name)
    return events


def analyze_component(
    function_node: TreeSitterNode,
    name: Optional[str] = None,
    file_path: str = "",
    imports: Optional[Sequence[ImportRecord]] = None,
    wrappers: Optional[Sequence[str]] = None,
) -> Optional[ComponentRecord]:
    """
    Build the full record for a component function.

    Args:
        function_node: Component function node
        name: Bound name; inferred from the node when omitted
        file_path: Source file label
        imports: Imports of the enclosing file
        wrappers: Wrapper names the node was unwrapped from, outer to inner

    Returns:
        ComponentRecord, or None if no name can be determined
    """
    if name is None:
        name = infer_binding_name(function_node)
    if name is None:
        logger.debug(f"Skipping unnamed component at line {function_node.start_point[0] + 1}")
        return None

    props = extract_props(function_node)

    return ComponentRecord(
        name=name,
        kind=DECLARATION_KIND if function_node.type in FUNCTION_DECLARATION_TYPES else EXPRESSION_KIND,
        props=props,
        hooks=extract_hooks(function_node),
        events=extract_events(props),
        accepts_children=any(prop.name == CHILDREN_PROP for prop in props),
        imports=list(imports or []),
        file_path=file_path,
        wrappers=list(wrappers or []),
    )
