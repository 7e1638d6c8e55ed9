"""Shared console helpers for the probrange CLI."""

from __future__ import annotations

from decimal import Decimal

from rich.console import Console
from rich.markup import escape

console = Console()


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(f"[red]✗[/red] {escape(message)}")


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"[yellow]⚠[/yellow] {escape(message)}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]✓[/green] {escape(message)}")


def print_info(message: str) -> None:
    """Print an informational message."""
    console.print(f"[blue]ℹ[/blue] {escape(message)}")


def format_percent(probability: Decimal) -> str:
    """Format a probability as a percentage (e.g., Decimal("0.36") -> "36%")."""
    return f"{(probability * 100).normalize():f}%"
