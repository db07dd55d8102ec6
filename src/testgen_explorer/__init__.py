"""TestGen Explorer - static analysis of React/TypeScript sources for test scaffolding."""

from .cli import cli


def main() -> None:
    """Entry point for the CLI application."""
    cli()
