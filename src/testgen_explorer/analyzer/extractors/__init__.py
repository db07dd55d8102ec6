"""Extractors for JavaScript/TypeScript analysis."""

from testgen_explorer.analyzer.extractors.base import BaseExtractor
from testgen_explorer.analyzer.extractors.declarations import DeclarationExtractor
from testgen_explorer.analyzer.extractors.imports import ImportExtractor

__all__ = [
    "BaseExtractor",
    "DeclarationExtractor",
    "ImportExtractor",
]
