"""
Tests for type descriptor resolution.
"""

import pytest

from conftest import find_node
from testgen_explorer.analyzer.extractors.types import resolve_type
from testgen_explorer.analyzer.parser import parse_source


def resolve(annotation: str) -> str:
    """Resolve the type of ``let value: <annotation>;``."""
    root = parse_source(f"let value: {annotation};", "types.ts")
    return resolve_type(find_node(root, "type_annotation"))


@pytest.mark.parametrize(
    "primitive",
    ["string", "number", "boolean", "any", "void", "null", "undefined", "never", "unknown", "object"],
)
def test_primitive_types(primitive: str) -> None:
    """Primitive keywords resolve to their own lowercase name."""
    assert resolve(primitive) == primitive


def test_absent_node_is_any() -> None:
    """A missing annotation resolves to any."""
    assert resolve_type(None) == "any"


def test_array_type() -> None:
    assert resolve("string[]") == "string[]"
    assert resolve("User[][]") == "User[][]"


def test_type_reference() -> None:
    assert resolve("User") == "User"
    assert resolve("React.ReactNode") == "React.ReactNode"


def test_generic_reference_drops_arguments() -> None:
    assert resolve("Promise<User>") == "Promise"


def test_union_keeps_declared_order() -> None:
    """Members of an N-way union are joined by N-1 separators in source order."""
    descriptor = resolve("number | string | User | null")

    assert descriptor == "number | string | User | null"
    assert descriptor.count(" | ") == 3


def test_intersection_type() -> None:
    assert resolve("A & B") == "A & B"


def test_literal_types() -> None:
    assert resolve("'primary' | 'secondary'") == "'primary' | 'secondary'"
    assert resolve('"double"') == "'double'"
    assert resolve("42") == "42"
    assert resolve("true") == "true"


def test_tuple_type() -> None:
    assert resolve("[string, number]") == "[string, number]"


def test_function_type() -> None:
    assert resolve("(id: string) => void") == "Function"


def test_object_literal_type() -> None:
    assert resolve("{ id: string; name: string }") == "object"


def test_parenthesized_type() -> None:
    assert resolve("(string | number)[]") == "string | number[]"


def test_unrecognized_type_is_any() -> None:
    """Type operators the resolver does not model fall back to any."""
    assert resolve("keyof User") == "any"
