#!/usr/bin/env python3
"""
Command-line interface for TestGen Explorer.

Provides commands for analyzing JavaScript/TypeScript sources and
previewing the mocks a generated test would need.
"""

import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path
from typing import List, Optional

import click
from rich.console import Console

from .analyzer import FileAnalysisResult, FileAnalyzer, ParseError
from .analyzer.base_analyzer import DEFAULT_EXCLUDE_PATTERNS
from .console_styles import (
    StyleGuide,
    create_data_table,
    create_header_panel,
    create_summary_table,
    format_count,
    format_prop,
    format_signature,
    get_status_icon,
)
from .generator import generate_hook_mock, generate_mocks, get_testing_library

console = Console()

NOTHING_FOUND_MESSAGE = "No components or functions found"


def configure_logging(verbose: bool) -> None:
    """Configure root logging: INFO by default, DEBUG when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )


@click.group()
@click.version_option(version="0.1.0")
def cli() -> None:
    """TestGen Explorer - React/TypeScript test scaffolding analysis.

    Analyze JavaScript and TypeScript sources to find components, functions,
    props, hooks and event handlers, the testable surface a generated test
    file is built from.

    Examples:
        testgen-explorer analyze src/components/Button.tsx
        testgen-explorer analyze ./src --exclude legacy --json
        testgen-explorer mocks src/screens/Home.tsx
    """
    pass


@cli.command()
@click.argument("path", type=click.Path(exists=True, file_okay=True, dir_okay=True))
@click.option("--json", "as_json", is_flag=True, help="Print results as JSON")
@click.option(
    "--exclude",
    multiple=True,
    help="Glob patterns to exclude, in addition to the defaults (can be specified multiple times)",
)
@click.option(
    "--pattern",
    default=None,
    help="Glob selecting files inside a directory (default: all .ts/.tsx/.js/.jsx files)",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def analyze(
    path: str,
    as_json: bool,
    exclude: tuple[str, ...],
    pattern: Optional[str],
    verbose: bool,
) -> None:
    """Analyze a source file or a directory of source files.

    PATH: File or directory to analyze

    Examples:
        testgen-explorer analyze src/utils.ts
        testgen-explorer analyze ./src --pattern "components/**/*.tsx"
    """
    configure_logging(verbose)

    target_path = Path(path).resolve()
    analyzer = FileAnalyzer()

    try:
        if target_path.is_dir():
            exclusions = DEFAULT_EXCLUDE_PATTERNS + list(exclude)
            if not as_json:
                console.print(f"[cyan]Analyzing directory:[/cyan] {target_path}")
                console.print(f"[dim]Excluding:[/dim] {', '.join(exclusions)}")
            results = analyzer.analyze_directory(
                target_path,
                pattern=pattern,
                exclude_patterns=exclusions,
                show_progress=not as_json,
            )
        else:
            results = [analyzer.analyze_file(target_path)]
    except ParseError as e:
        console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)

    if not any(result.components or result.functions for result in results):
        console.print(f"[yellow]{NOTHING_FOUND_MESSAGE}[/yellow]")
        sys.exit(1)

    if as_json:
        click.echo(json.dumps([asdict(result) for result in results], indent=2))
        return

    for result in results:
        print_result(result)

    if len(results) > 1:
        print_summary(results)


@cli.command()
@click.argument("file", type=click.Path(exists=True, file_okay=True, dir_okay=False))
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def mocks(file: str, verbose: bool) -> None:
    """Print the Jest mocks a test for FILE would need.

    FILE: Source file to analyze

    Examples:
        testgen-explorer mocks src/screens/Home.tsx
    """
    configure_logging(verbose)

    try:
        result = FileAnalyzer().analyze_file(file)
    except ParseError as e:
        console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)

    library = get_testing_library(result.framework)
    console.print(f"[cyan]Testing library:[/cyan] {library.package} ({', '.join(library.imports)})")

    module_mocks = generate_mocks(result.imports)
    hook_mocks = [generate_hook_mock(hook) for hook in collect_hooks(result)]

    if not module_mocks and not hook_mocks:
        console.print("[dim]No mocks needed[/dim]")
        return

    # Statements are printed verbatim so they can be pasted into a test file
    for statement in module_mocks + hook_mocks:
        console.print(statement, markup=False, highlight=False, soft_wrap=True)
        console.print()


def collect_hooks(result: FileAnalysisResult) -> List[str]:
    """Get the hooks used across all components of a file, first-seen order."""
    hooks: List[str] = []
    for component in result.components:
        for hook in component.hooks:
            if hook not in hooks:
                hooks.append(hook)
    return hooks


def print_result(result: FileAnalysisResult) -> None:
    """Print the analysis of one file.

    Args:
        result: FileAnalysisResult to display
    """
    console.print()
    console.print(
        create_header_panel(
            result.file_path,
            f"type: {result.file_type}  framework: {result.framework}  imports: {len(result.imports)}",
        )
    )

    if result.components:
        table = create_data_table(
            "Components",
            [
                ("Name", "left", StyleGuide.label),
                ("Kind", "left", StyleGuide.dim),
                ("Props", "left", StyleGuide.success),
                ("Hooks", "left", StyleGuide.accent),
                ("Events", "left", StyleGuide.warning),
            ],
        )
        for component in result.components:
            name = component.name
            if component.wrappers:
                name += f" ({' > '.join(component.wrappers)})"
            table.add_row(
                name,
                component.kind,
                "\n".join(format_prop(prop) for prop in component.props) or "-",
                ", ".join(component.hooks) or "-",
                ", ".join(component.events) or "-",
            )
        console.print(table)

    if result.functions:
        table = create_data_table(
            "Functions",
            [
                ("Name", "left", StyleGuide.label),
                ("Signature", "left", StyleGuide.success),
                ("Exported", "center", StyleGuide.label),
            ],
        )
        for function in result.functions:
            table.add_row(
                function.name,
                format_signature(function.params, function.return_type, function.is_async),
                get_status_icon(function.is_exported),
            )
        console.print(table)


def print_summary(results: List[FileAnalysisResult]) -> None:
    """Print totals across all analyzed files."""
    table = create_summary_table("Analysis Results")
    table.add_row("Files analyzed", format_count(len(results)))
    table.add_row("Component files", format_count(sum(1 for r in results if r.file_type == "component")))
    table.add_row("Function files", format_count(sum(1 for r in results if r.file_type == "function")))
    table.add_row("Total components", format_count(sum(len(r.components) for r in results)))
    table.add_row("Total functions", format_count(sum(len(r.functions) for r in results)))

    console.print()
    console.print(table)


if __name__ == "__main__":
    cli()
