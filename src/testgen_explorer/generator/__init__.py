"""Mock generation helpers for test scaffolding."""

from testgen_explorer.generator.mocks import (
    TestingLibrary,
    generate_hook_mock,
    generate_mock_value,
    generate_mocks,
    generate_prop_value,
    get_testing_library,
)

__all__ = [
    "TestingLibrary",
    "generate_hook_mock",
    "generate_mock_value",
    "generate_mocks",
    "generate_prop_value",
    "get_testing_library",
]
