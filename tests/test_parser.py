"""
Tests for Tree-sitter parsing glue and tree helpers.
"""

import logging
from pathlib import Path

import pytest

from conftest import find_function, find_node
from testgen_explorer.analyzer.parser import (
    ParseError,
    get_parser,
    grammar_for,
    parse_file,
    parse_source,
)
from testgen_explorer.analyzer.tree_sitter_adapter import (
    contains_node_type,
    has_token,
    infer_binding_name,
    node_text,
    visit,
    walk_tree,
)


@pytest.mark.parametrize(
    "file_name, grammar",
    [
        ("utils.ts", "typescript"),
        ("Button.tsx", "tsx"),
        ("index.js", "tsx"),
        ("App.jsx", "tsx"),
        ("README", "tsx"),
    ],
)
def test_grammar_selection(file_name: str, grammar: str) -> None:
    assert grammar_for(file_name) == grammar


def test_parsers_are_cached() -> None:
    assert get_parser("a.tsx") is get_parser("b.jsx")
    assert get_parser("a.ts") is get_parser("b.ts")
    assert get_parser("a.ts") is not get_parser("a.tsx")


def test_parse_source_returns_program() -> None:
    root = parse_source("const a = <div />;", "a.tsx")

    assert root.type == "program"
    assert not root.has_error


def test_syntax_errors_are_tolerated(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING):
        root = parse_source("function broken( {", "broken.ts")

    assert root.type == "program"
    assert root.has_error
    assert "Syntax errors" in caplog.text


def test_parse_file(fixtures_dir: Path) -> None:
    root = parse_file(fixtures_dir / "utils.ts")

    assert root.type == "program"
    assert find_node(root, "function_declaration") is not None


def test_parse_missing_file(temp_dir: Path) -> None:
    with pytest.raises(ParseError, match="File not found"):
        parse_file(temp_dir / "missing.ts")


def test_parse_undecodable_file(temp_dir: Path) -> None:
    path = temp_dir / "latin1.ts"
    path.write_bytes(b"const s = '\xe9\xff';")

    with pytest.raises(ParseError, match="Encoding error"):
        parse_file(path)


def test_walk_tree_is_pre_order() -> None:
    root = parse_source("a(b(c));", "walk.js")

    called = [node_text(n.child_by_field_name("function")) for n in walk_tree(root) if n.type == "call_expression"]

    assert called == ["a", "b"]


def test_visit_prunes_subtrees() -> None:
    root = parse_source("outer(() => inner());", "visit.js")
    seen = []

    def visitor(node):
        if node.type == "call_expression":
            seen.append(node_text(node.child_by_field_name("function")))
        return node.type != "arrow_function"

    visit(root, visitor)

    assert seen == ["outer"]


def test_visit_handles_deep_nesting() -> None:
    root = parse_source(" + ".join(["a"] * 2000) + ";", "deep.js")
    count = 0

    def visitor(node):
        nonlocal count
        count += node.type == "identifier"
        return True

    visit(root, visitor)

    assert count == 2000


def test_contains_node_type() -> None:
    root = parse_source("const x = cond ? <A /> : null;", "contains.tsx")

    assert contains_node_type(root, {"jsx_self_closing_element"})
    assert not contains_node_type(root, {"jsx_fragment"})
    assert not contains_node_type(None, {"jsx_fragment"})


def test_has_token() -> None:
    function = find_function("async function f() {}", "token.ts")

    assert has_token(function, "async")
    assert not has_token(function, "default")


def test_infer_binding_name() -> None:
    assert infer_binding_name(find_function("const a = function b() {};")) == "a"
    assert infer_binding_name(find_function("function named() {}")) == "named"
    assert infer_binding_name(find_function("export default () => 1;")) == "default"
    assert infer_binding_name(find_function("call(() => 1);")) is None
