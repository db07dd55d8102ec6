"""
Tests for parameter and return-type extraction.
"""

import pytest

from conftest import find_function
from testgen_explorer.analyzer.extractors.signatures import (
    extract_params,
    extract_return_type,
    is_async,
)


def params_of(source: str, file_path: str = "signatures.ts"):
    return extract_params(find_function(source, file_path))


def test_simple_typed_parameters() -> None:
    params = params_of("function add(a: number, b: number): number { return a + b; }")

    assert [(p.name, p.type, p.optional, p.default_value) for p in params] == [
        ("a", "number", False, None),
        ("b", "number", False, None),
    ]


def test_untyped_parameter_is_any() -> None:
    params = params_of("function greet(name) { return name; }", "signatures.js")

    assert params[0].name == "name"
    assert params[0].type == "any"
    assert params[0].optional is False


def test_optional_marker() -> None:
    params = params_of("function greet(name?: string) {}")

    assert params[0].optional is True
    assert params[0].type == "string"


@pytest.mark.parametrize(
    "default, rendered",
    [
        ("'x'", "'x'"),
        ('"x"', "'x'"),
        ("5", "5"),
        ("true", "true"),
        ("false", "false"),
        ("null", "null"),
        ("[]", "[]"),
        ("[1, 2, 3]", "[]"),
        ("{}", "{}"),
        ("{ retries: 3 }", "{}"),
        ("computeDefault()", "undefined"),
        ("undefined", "undefined"),
    ],
)
def test_literal_defaults(default: str, rendered: str) -> None:
    """Defaults are rendered from literal node kinds, never evaluated."""
    params = params_of(f"function init(value = {default}) {{}}", "signatures.js")

    assert params[0].optional is True
    assert params[0].default_value == rendered


def test_typed_default() -> None:
    params = params_of("function formatCurrency(amount: number, currency: string = 'USD'): string { return ''; }")

    assert params[1].name == "currency"
    assert params[1].type == "string"
    assert params[1].optional is True
    assert params[1].default_value == "'USD'"


@pytest.mark.parametrize(
    "source, name, param_type",
    [
        ("function f(...args: string[]) {}", "...args", "string[]"),
        ("function f(...args) {}", "...args", "any[]"),
        ("function f(first: number, ...rest: number[]) {}", "...rest", "number[]"),
    ],
)
def test_rest_parameters(source: str, name: str, param_type: str) -> None:
    """Rest parameters are always optional and prefixed with '...'."""
    rest = params_of(source)[-1]

    assert rest.name.startswith("...")
    assert rest.name == name
    assert rest.type == param_type
    assert rest.optional is True


def test_object_destructuring() -> None:
    params = params_of("function f({ a, b = 1, c: renamed }: Options) {}")

    assert params[0].name == "{ a, b, c }"
    assert params[0].type == "Options"
    assert params[0].optional is False


def test_array_destructuring() -> None:
    params = params_of("function f([first, second]: [string, number]) {}")

    assert params[0].name == "[...]"
    assert params[0].type == "[string, number]"


def test_single_bare_arrow_parameter() -> None:
    params = params_of("const double = x => x * 2;", "signatures.js")

    assert len(params) == 1
    assert params[0].name == "x"


def test_no_parameters() -> None:
    assert params_of("function noop() {}") == []


def test_explicit_return_type() -> None:
    function = find_function("function f(): string | null { return null; }", "signatures.ts")

    assert extract_return_type(function) == "string | null"


def test_async_without_return_type() -> None:
    function = find_function("async function load() { return 1; }", "signatures.ts")

    assert is_async(function) is True
    assert extract_return_type(function) == "Promise<any>"


def test_async_arrow_with_return_type() -> None:
    function = find_function("const load = async (id: string): Promise<User> => fetch(id);", "signatures.ts")

    assert is_async(function) is True
    assert extract_return_type(function) == "Promise"


def test_sync_without_return_type() -> None:
    function = find_function("function f() {}", "signatures.ts")

    assert is_async(function) is False
    assert extract_return_type(function) == "any"
