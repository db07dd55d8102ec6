"""
Analyzer module for JavaScript/TypeScript source analysis.

This module provides:
- models: Data classes for analysis results
- parser: Tree-sitter parsing glue
- base_analyzer: Main FileAnalyzer orchestrator
- extractors: Specialized extraction classes and analyzers
"""

from testgen_explorer.analyzer.base_analyzer import (
    FileAnalyzer,
    detect_framework,
    determine_file_type,
)
from testgen_explorer.analyzer.models import (
    ComponentRecord,
    FileAnalysisResult,
    FunctionRecord,
    ImportRecord,
    ParamDescriptor,
    PropDescriptor,
)
from testgen_explorer.analyzer.parser import ParseError, parse_file, parse_source

__all__ = [
    "FileAnalyzer",
    "detect_framework",
    "determine_file_type",
    "parse_file",
    "parse_source",
    "ParseError",
    "FileAnalysisResult",
    "ComponentRecord",
    "FunctionRecord",
    "ImportRecord",
    "ParamDescriptor",
    "PropDescriptor",
]
