"""
Mock generation for test scaffolding.

Turns analysis records into the Jest snippets a generated test needs:
mock values for props and parameters, ``jest.mock`` statements for
imports, and spies for common React hooks. Pure functions, no I/O.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from testgen_explorer.analyzer.models import ImportRecord, PropDescriptor

logger = logging.getLogger(__name__)

JEST_FN = "jest.fn()"

MOCK_VALUES: Dict[str, str] = {
    "string": "'test-string'",
    "number": "42",
    "boolean": "true",
    "any": "undefined",
    "unknown": "undefined",
    "void": "undefined",
    "null": "null",
    "undefined": "undefined",
    "object": "{}",
    "Function": JEST_FN,
    "array": "[]",
}

# Checked in order against the lowercased prop name
PROP_NAME_HINTS = [
    ("id", "'test-id'"),
    ("name", "'Test Name'"),
    ("title", "'Test Title'"),
    ("label", "'Test Label'"),
    ("text", "'Test Text'"),
    ("disabled", "false"),
    ("loading", "false"),
    ("visible", "true"),
    ("active", "true"),
]

SKIPPED_MOCK_SOURCES = [
    "react",
    "react-native",
    "@testing-library/react",
    "@testing-library/react-native",
    "@testing-library/jest-native",
    "jest",
    "@jest",
]

LOCAL_SOURCE_PREFIXES = (".", "@/", "~/")

CANNED_MOCKS: Dict[str, str] = {
    "@react-navigation/native": """jest.mock('@react-navigation/native', () => ({
  useNavigation: () => ({
    navigate: jest.fn(),
    goBack: jest.fn(),
    reset: jest.fn(),
  }),
  useRoute: () => ({
    params: {},
  }),
  useFocusEffect: jest.fn(),
}));""",
    "@react-navigation/stack": """jest.mock('@react-navigation/stack', () => ({
  createStackNavigator: jest.fn(() => ({
    Navigator: ({ children }: any) => children,
    Screen: ({ children }: any) => children,
  })),
}));""",
    "react-redux": """jest.mock('react-redux', () => ({
  useSelector: jest.fn(),
  useDispatch: () => jest.fn(),
  Provider: ({ children }: any) => children,
}));""",
    "@react-native-async-storage/async-storage": """jest.mock('@react-native-async-storage/async-storage', () => ({
  setItem: jest.fn(() => Promise.resolve()),
  getItem: jest.fn(() => Promise.resolve(null)),
  removeItem: jest.fn(() => Promise.resolve()),
  clear: jest.fn(() => Promise.resolve()),
}));""",
}

HOOK_MOCKS: Dict[str, str] = {
    "useState": "jest.spyOn(React, 'useState').mockImplementation((init) => [init, jest.fn()]);",
    "useEffect": "jest.spyOn(React, 'useEffect').mockImplementation((f) => f());",
    "useContext": "jest.spyOn(React, 'useContext').mockReturnValue({});",
    "useRef": "jest.spyOn(React, 'useRef').mockReturnValue({ current: null });",
    "useMemo": "jest.spyOn(React, 'useMemo').mockImplementation((f) => f());",
    "useCallback": "jest.spyOn(React, 'useCallback').mockImplementation((f) => f);",
}


@dataclass
class TestingLibrary:
    """Testing library package and the helpers imported from it."""

    package: str
    imports: List[str] = field(default_factory=lambda: ["render", "fireEvent", "screen", "waitFor"])


def generate_mock_value(type_descriptor: str) -> str:
    """
    Generate a JavaScript mock value for a type descriptor.

    Args:
        type_descriptor: Descriptor such as "string", "User[]" or "Function"

    Returns:
        JavaScript expression text
    """
    if type_descriptor.endswith("[]"):
        return "[]"
    if "=>" in type_descriptor or type_descriptor == "Function":
        return JEST_FN
    return MOCK_VALUES.get(type_descriptor, "{}")


def generate_prop_value(prop: PropDescriptor) -> str:
    """
    Generate a test value for a component prop.

    Conventional prop names win over the declared type: handlers get a
    mock function, ids a test id, and so on.

    Args:
        prop: Prop descriptor

    Returns:
        JavaScript expression text
    """
    name = prop.name
    if name.startswith("on") and len(name) > 2:
        return JEST_FN
    if name == "children":
        return "'Test Children'"
    if name in ("className", "style"):
        return "{}"
    if name in ("testID", "data-testid"):
        return "'test-id'"

    lowered = name.lower()
    for hint, value in PROP_NAME_HINTS:
        if hint in lowered:
            return value

    return generate_mock_value(prop.type)


def should_skip_mock(source: str) -> bool:
    """Check whether an import source is never mocked (React, test tooling)."""
    return any(source == skip or source.startswith(f"{skip}/") for skip in SKIPPED_MOCK_SOURCES)


def is_local_source(source: str) -> bool:
    """Check whether an import source points into the project itself."""
    return source.startswith(LOCAL_SOURCE_PREFIXES)


def generate_mock_for_import(record: ImportRecord) -> Optional[str]:
    """
    Generate the ``jest.mock`` statement for one import.

    Args:
        record: Import record

    Returns:
        Statement text, or None if the import needs no mock
    """
    if should_skip_mock(record.source):
        return None

    canned = CANNED_MOCKS.get(record.source)
    if canned is not None:
        return canned

    if not is_local_source(record.source):
        return None

    # Namespace imports have no single export to stub
    entries = [f"  {spec}: jest.fn()" for spec in record.specifiers if not spec.startswith("* as")]
    if not entries:
        return None

    body = ",\n".join(entries)
    return f"jest.mock('{record.source}', () => ({{\n{body},\n}}));"


def generate_mocks(imports: Sequence[ImportRecord]) -> List[str]:
    """
    Generate mock statements for a file's imports.

    Args:
        imports: Imports in source order

    Returns:
        One statement per import that needs a mock, in import order
    """
    mocks = []
    for record in imports:
        mock = generate_mock_for_import(record)
        if mock is not None:
            mocks.append(mock)
        else:
            logger.debug(f"No mock needed for {record.source}")
    return mocks


def generate_hook_mock(hook_name: str) -> str:
    """Generate a spy for a common React hook, or a TODO line for others."""
    return HOOK_MOCKS.get(hook_name, f"// TODO: Mock {hook_name}")


def get_testing_library(framework: str) -> TestingLibrary:
    """
    Pick the testing library for a framework.

    Args:
        framework: "react-native", "react" or "vanilla"

    Returns:
        TestingLibrary with the package name and helper imports
    """
    if framework == "react-native":
        return TestingLibrary(package="@testing-library/react-native")
    return TestingLibrary(package="@testing-library/react")
