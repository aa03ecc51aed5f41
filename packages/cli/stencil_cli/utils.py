"""Console output helpers shared by CLI commands."""

import typer
from rich.console import Console

from stencil_common.errors import StencilError

console = Console()
err_console = Console(stderr=True)


def success(message: str) -> None:
    err_console.print(f"[green]✔[/green] {message}")


def error(message: str) -> None:
    err_console.print(f"[red]✘[/red] {message}")


def warning(message: str) -> None:
    err_console.print(f"[yellow]![/yellow] {message}")


def info(message: str) -> None:
    err_console.print(f"[blue]ℹ[/blue] {message}")


def handle_error(e: Exception, verbose: bool = False) -> None:
    """Report ``e`` and exit with status 1."""
    if isinstance(e, StencilError):
        error(f"{e.code}: {e.message}")
        path = e.details.get("path")
        if path:
            err_console.print(f"  template: {path}")
    else:
        error(f"Unexpected error: {e}")
    if verbose:
        err_console.print_exception()
    raise typer.Exit(1)
