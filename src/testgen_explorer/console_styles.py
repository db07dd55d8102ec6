"""Console styling utilities for consistent Rich output formatting.

This module provides reusable functions for rendering analysis results:
table builders, status indicators, and formatting helpers.

Example:
    >>> from testgen_explorer.console_styles import create_summary_table, format_count
    >>> table = create_summary_table("Analysis Results")
    >>> table.add_row("Files analyzed", format_count(150))
    >>> console.print(table)
"""

from typing import Sequence, Tuple

from rich.box import ROUNDED
from rich.panel import Panel
from rich.table import Table

from testgen_explorer.analyzer.models import ParamDescriptor, PropDescriptor


def get_status_icon(success: bool) -> str:
    """Get colored status icon.

    Args:
        success: Whether operation was successful

    Returns:
        str: Colored status icon (✓ or ✗)
    """
    return StyleGuide.success_icon if success else StyleGuide.error_icon


def format_count(count: int) -> str:
    """Format a count with thousands separator.

    Args:
        count: Number to format

    Returns:
        str: Formatted count string
    """
    return f"{count:,}"


def format_param(param: ParamDescriptor) -> str:
    """Render a parameter the way it would read in a signature.

    Args:
        param: Parameter descriptor

    Returns:
        str: e.g. "a: number", "name?: string = 'World'"
    """
    marker = "?" if param.optional and not param.name.startswith("...") else ""
    text = f"{param.name}{marker}: {param.type}"
    if param.default_value is not None:
        text += f" = {param.default_value}"
    return text


def format_signature(params: Sequence[ParamDescriptor], return_type: str, is_async: bool = False) -> str:
    """Render a full function signature.

    Args:
        params: Parameter descriptors
        return_type: Return type descriptor
        is_async: Prefix with "async"

    Returns:
        str: e.g. "async (id: string) => Promise"
    """
    prefix = "async " if is_async else ""
    return f"{prefix}({', '.join(format_param(p) for p in params)}) => {return_type}"


def format_prop(prop: PropDescriptor) -> str:
    """Render a prop with its required marker and default.

    Args:
        prop: Prop descriptor

    Returns:
        str: e.g. "label: string", "size?: string = 'medium'"
    """
    marker = "" if prop.required else "?"
    text = f"{prop.name}{marker}: {prop.type}"
    if prop.default_value is not None:
        text += f" = {prop.default_value}"
    return text


def create_summary_table(title: str, header_style: str = "bold cyan") -> Table:
    """Create a styled summary table.

    Args:
        title: Table title
        header_style: Rich style for header (default: "bold cyan")

    Returns:
        Table: Configured Rich Table
    """
    table = Table(
        title=title,
        show_header=True,
        header_style=header_style,
        box=ROUNDED,
    )
    table.add_column("Metric", style="cyan")
    table.add_column("Count", justify="right", style="green")
    return table


def create_data_table(title: str, columns: list[Tuple[str, str, str]]) -> Table:
    """Create a configurable data display table.

    Args:
        title: Table title
        columns: List of (column_name, justify, style) tuples

    Returns:
        Table: Configured Rich Table
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="bold cyan",
        box=ROUNDED,
    )

    for col_name, justify, style in columns:
        table.add_column(col_name, justify=justify, style=style)

    return table


def create_header_panel(
    title: str,
    subtitle: str = "",
    border_style: str = "cyan"
) -> Panel:
    """Create a styled header panel.

    Args:
        title: Panel title
        subtitle: Optional subtitle
        border_style: Rich style for border

    Returns:
        Panel: Configured Rich Panel
    """
    if subtitle:
        content = f"[bold cyan]{title}[/bold cyan]\n{subtitle}"
    else:
        content = f"[bold cyan]{title}[/bold cyan]"

    return Panel.fit(
        content,
        border_style=border_style,
        padding=(0, 1),
    )


class StyleGuide:
    """Color and styling guide for consistency.

    Attributes:
        success: Style for values that passed or were found
        warning: Style for warnings
        label: Style for labels/headings
        dim: Style for less important info
        accent: Style for secondary highlighted values
    """

    # Styles
    success = "green"
    warning = "yellow"
    label = "cyan"
    dim = "dim"
    accent = "magenta"

    # Formatting
    success_icon = "[green]✓[/green]"
    error_icon = "[red]✗[/red]"
