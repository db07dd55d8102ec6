"""
Binding shapes and per-file analysis state.

Every place a name gets bound to a function-like value is mapped onto one
of a small closed set of shapes, each carrying the bound name and the node
to analyze. Consumers dispatch on the shape instead of re-checking node
kinds themselves.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Set

from testgen_explorer.analyzer.extractors.wrappers import wrapper_name
from testgen_explorer.analyzer.models import (
    DEFAULT_EXPORT_NAME,
    ComponentRecord,
    FunctionRecord,
    ImportRecord,
)
from testgen_explorer.analyzer.tree_sitter_adapter import (
    FUNCTION_DECLARATION_TYPES,
    FUNCTION_EXPRESSION_TYPES,
    TreeSitterNode,
    get_node_name,
    has_token,
    is_call_node,
    is_function_node,
    node_text,
    unwrap_parentheses,
)


class BindingShape(Enum):
    """Syntactic shapes that bind a name to a function-like value."""

    DECLARATION = "declaration"  # function Name() {}
    VARIABLE = "variable"  # const Name = () => {}
    WRAPPED = "wrapped"  # const Name = memo(...)
    DEFAULT_EXPORT = "default_export"  # export default memo(...) / () => {}


@dataclass(frozen=True)
class Binding:
    """A bound name and the node that should be analyzed for it.

    For WRAPPED bindings, and DEFAULT_EXPORT bindings of a wrapper call,
    ``node`` is the outermost call expression; otherwise it is the
    function-like node itself. ``top_level`` is False for bindings nested
    inside a function or block body.
    """

    shape: BindingShape
    name: str
    node: TreeSitterNode
    top_level: bool = True

    @property
    def is_wrapper_call(self) -> bool:
        return is_call_node(self.node)


@dataclass
class AnalysisContext:
    """Mutable state of a single file analysis.

    Created per file and never shared, so independent files can be
    analyzed concurrently.
    """

    file_path: str
    imports: List[ImportRecord] = field(default_factory=list)
    components: List[ComponentRecord] = field(default_factory=list)
    functions: List[FunctionRecord] = field(default_factory=list)
    seen_names: Set[str] = field(default_factory=set)

    def claim(self, name: str) -> bool:
        """
        Reserve a bound name for this file.

        Args:
            name: Bound name

        Returns:
            True if the name was free, False if a record already owns it
        """
        if name in self.seen_names:
            return False
        self.seen_names.add(name)
        return True


# Statements that may sit between a module-scope binding and the program root
_MODULE_SCOPE_WRAPPERS = frozenset({"export_statement", "lexical_declaration", "variable_declaration"})


def is_top_level(anchor: TreeSitterNode) -> bool:
    """Check whether a declaration or export binds its name at module scope."""
    parent = anchor.parent
    while parent is not None and parent.type in _MODULE_SCOPE_WRAPPERS:
        parent = parent.parent
    return parent is None or parent.type == "program"


def _is_function_expression(node: Optional[TreeSitterNode]) -> bool:
    return is_function_node(node) and node.type in FUNCTION_EXPRESSION_TYPES


def _declaration_binding(node: TreeSitterNode) -> Optional[Binding]:
    name = get_node_name(node)
    if name is None:
        return None
    return Binding(BindingShape.DECLARATION, name, node, is_top_level(node))


def _variable_binding(node: TreeSitterNode) -> Optional[Binding]:
    name_node = node.child_by_field_name("name")
    if name_node is None or name_node.type != "identifier":
        # Destructuring declarators bind no single name
        return None
    name = node_text(name_node)
    value = unwrap_parentheses(node.child_by_field_name("value"))

    if _is_function_expression(value):
        return Binding(BindingShape.VARIABLE, name, value, is_top_level(node))
    if wrapper_name(value) is not None:
        return Binding(BindingShape.WRAPPED, name, value, is_top_level(node))
    return None


def _default_export_binding(node: TreeSitterNode) -> Optional[Binding]:
    if not has_token(node, "default"):
        return None
    value = unwrap_parentheses(node.child_by_field_name("value"))
    if _is_function_expression(value) or wrapper_name(value) is not None:
        return Binding(BindingShape.DEFAULT_EXPORT, DEFAULT_EXPORT_NAME, value, is_top_level(node))
    return None


def binding_from_node(node: TreeSitterNode) -> Optional[Binding]:
    """
    Map a node onto a binding shape.

    Args:
        node: Any node of the tree

    Returns:
        Binding, or None if the node binds no function-like value
    """
    if node.type in FUNCTION_DECLARATION_TYPES:
        return _declaration_binding(node)
    if node.type == "variable_declarator":
        return _variable_binding(node)
    if node.type == "export_statement":
        return _default_export_binding(node)
    return None
