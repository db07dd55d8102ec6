"""
Tests for mock generation.
"""

import pytest

from testgen_explorer.analyzer.models import ImportRecord, PropDescriptor
from testgen_explorer.generator import (
    generate_hook_mock,
    generate_mock_value,
    generate_mocks,
    generate_prop_value,
    get_testing_library,
)


def imp(source: str, *specifiers: str, is_default: bool = False) -> ImportRecord:
    return ImportRecord(source=source, specifiers=list(specifiers), is_default=is_default)


@pytest.mark.parametrize(
    "type_descriptor, value",
    [
        ("string", "'test-string'"),
        ("number", "42"),
        ("boolean", "true"),
        ("any", "undefined"),
        ("void", "undefined"),
        ("null", "null"),
        ("object", "{}"),
        ("Function", "jest.fn()"),
        ("string[]", "[]"),
        ("(string | number)[]", "[]"),
        ("() => void", "jest.fn()"),
        ("User", "{}"),
        ("'a' | 'b'", "{}"),
    ],
)
def test_generate_mock_value(type_descriptor: str, value: str) -> None:
    assert generate_mock_value(type_descriptor) == value


@pytest.mark.parametrize(
    "name, prop_type, value",
    [
        ("onPress", "any", "jest.fn()"),
        ("children", "any", "'Test Children'"),
        ("className", "string", "{}"),
        ("testID", "string", "'test-id'"),
        ("userId", "string", "'test-id'"),
        ("displayName", "any", "'Test Name'"),
        ("title", "any", "'Test Title'"),
        ("disabled", "boolean", "false"),
        ("isVisible", "boolean", "true"),
        ("count", "number", "42"),
        ("tags", "string[]", "[]"),
    ],
)
def test_generate_prop_value(name: str, prop_type: str, value: str) -> None:
    assert generate_prop_value(PropDescriptor(name=name, type=prop_type)) == value


def test_react_and_testing_imports_are_not_mocked() -> None:
    imports = [
        imp("react", "useState"),
        imp("react-native", "View", "Animated"),
        imp("@testing-library/react", "render"),
        imp("@testing-library/react-native", "fireEvent"),
        imp("react-native/Libraries/Animated/NativeAnimatedHelper"),
    ]

    assert generate_mocks(imports) == []


def test_canned_mocks() -> None:
    mocks = generate_mocks([
        imp("@react-navigation/native", "useNavigation"),
        imp("react-redux", "useSelector", "useDispatch"),
        imp("@react-native-async-storage/async-storage", "AsyncStorage", is_default=True),
        imp("@react-navigation/stack", "createStackNavigator"),
    ])

    assert len(mocks) == 4
    assert mocks[0].startswith("jest.mock('@react-navigation/native'")
    assert "navigate: jest.fn()" in mocks[0]
    assert "useSelector: jest.fn()" in mocks[1]
    assert "getItem: jest.fn(() => Promise.resolve(null))" in mocks[2]
    assert "createStackNavigator" in mocks[3]


@pytest.mark.parametrize("source", ["./utils/helpers", "@/services/api", "~/components/Button"])
def test_local_imports_are_mocked(source: str) -> None:
    mocks = generate_mocks([imp(source, "first", "second")])

    assert mocks == [f"jest.mock('{source}', () => ({{\n  first: jest.fn(),\n  second: jest.fn(),\n}}));"]


def test_namespace_specifiers_are_skipped() -> None:
    assert generate_mocks([imp("./utils", "* as utils")]) == []

    mocks = generate_mocks([imp("./helpers", "helper1", "* as allHelpers", "helper2")])
    assert len(mocks) == 1
    assert "helper1: jest.fn()" in mocks[0]
    assert "helper2: jest.fn()" in mocks[0]
    assert "allHelpers" not in mocks[0]


def test_external_packages_are_not_mocked() -> None:
    assert generate_mocks([imp("lodash", "debounce"), imp("axios", "axios", is_default=True)]) == []


def test_mocks_follow_import_order() -> None:
    mocks = generate_mocks([
        imp("react", "useState"),
        imp("react-redux", "useSelector"),
        imp("@react-navigation/native", "useNavigation"),
        imp("./utils", "helper"),
    ])

    assert len(mocks) == 3
    assert "react-redux" in mocks[0]
    assert "@react-navigation/native" in mocks[1]
    assert "./utils" in mocks[2]


def test_hook_mocks() -> None:
    assert generate_hook_mock("useState") == (
        "jest.spyOn(React, 'useState').mockImplementation((init) => [init, jest.fn()]);"
    )
    assert "useRef" in generate_hook_mock("useRef")
    assert generate_hook_mock("useTheme") == "// TODO: Mock useTheme"


def test_testing_library_by_framework() -> None:
    assert get_testing_library("react-native").package == "@testing-library/react-native"
    assert get_testing_library("react").package == "@testing-library/react"
    assert get_testing_library("vanilla").package == "@testing-library/react"
    assert get_testing_library("react").imports == ["render", "fireEvent", "screen", "waitFor"]
