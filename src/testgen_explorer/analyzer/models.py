"""
Data models for JavaScript/TypeScript analysis results.

All records are plain value objects owned by the FileAnalysisResult that
contains them. Type descriptors are normalized strings such as "string",
"string | number" or "[string, number]".
"""

from dataclasses import dataclass, field
from typing import List, Optional

# Descriptor used whenever a type cannot be resolved
ANY_TYPE = "any"

# Bound name for anonymous default exports
DEFAULT_EXPORT_NAME = "default"


@dataclass
class ImportRecord:
    """Information about an import statement."""

    source: str
    specifiers: List[str] = field(default_factory=list)
    is_default: bool = False


@dataclass
class ParamDescriptor:
    """Information about a function parameter."""

    name: str  # "{ a, b }", "[...]" or "...rest" for patterns
    type: str = ANY_TYPE
    optional: bool = False
    default_value: Optional[str] = None


@dataclass
class PropDescriptor:
    """Information about a component prop."""

    name: str
    type: str = ANY_TYPE
    required: bool = True
    default_value: Optional[str] = None


@dataclass
class ComponentRecord:
    """Analyzed component information."""

    name: str
    kind: str  # "declaration" or "expression"
    props: List[PropDescriptor] = field(default_factory=list)
    hooks: List[str] = field(default_factory=list)
    events: List[str] = field(default_factory=list)
    accepts_children: bool = False
    imports: List[ImportRecord] = field(default_factory=list)
    file_path: str = ""
    wrappers: List[str] = field(default_factory=list)  # Outer to inner


@dataclass
class FunctionRecord:
    """Analyzed function information."""

    name: str
    params: List[ParamDescriptor] = field(default_factory=list)
    return_type: str = ANY_TYPE
    is_async: bool = False
    is_exported: bool = False
    imports: List[ImportRecord] = field(default_factory=list)
    file_path: str = ""


@dataclass
class FileAnalysisResult:
    """Complete analysis result for a single file."""

    file_path: str
    file_type: str = "unknown"  # "component", "function" or "unknown"
    framework: str = "vanilla"  # "react", "react-native" or "vanilla"
    components: List[ComponentRecord] = field(default_factory=list)
    functions: List[FunctionRecord] = field(default_factory=list)
    imports: List[ImportRecord] = field(default_factory=list)
