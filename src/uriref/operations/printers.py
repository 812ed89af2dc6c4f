"""
Human-readable and JSON output formatting.

Centralizes all CLI output so commands only decide what to print.
"""
from __future__ import annotations

import typer
from pydantic import BaseModel
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..models import PathReport, ReferenceReport, SplitReport

_console = Console(highlight=False)


def _show(value) -> str:
    if value is None:
        return "[dim](absent)[/]"
    if value == "":
        return "[dim](empty)[/]"
    return escape(value)


def print_json(report: BaseModel) -> None:
    """Print any report model as indented JSON."""
    typer.echo(report.model_dump_json(indent=2))


def print_path_report(report: PathReport, verbose: bool = False) -> None:
    """
    Print a path validation outcome.

    Args:
        report: Report to display
        verbose: Also show the context flags and charset
    """
    if report.valid:
        _console.print(f"[green]valid[/] {_show(report.path)} ({report.grammar.value})")
    else:
        _console.print(f"[red]invalid[/] {_show(report.path)}: {report.error}")

    if verbose:
        _console.print(f"[bold]Charset:[/] {report.charset}")
        _console.print(f"[bold]Relative reference:[/] {'yes' if report.relative_reference else 'no'}")
        _console.print(f"[bold]Authority:[/] {'yes' if report.has_authority else 'no'}")


def _components_table(components) -> Table:
    table = Table(title="Components")
    table.add_column("Component", style="cyan")
    table.add_column("Value", style="yellow")
    for name in ("scheme", "authority", "path", "query", "fragment"):
        table.add_row(name, _show(getattr(components, name)))
    return table


def print_reference_report(report: ReferenceReport, verbose: bool = False) -> None:
    """Print a reference validation outcome, with its components when verbose."""
    if report.valid:
        _console.print(f"[green]valid[/] {escape(report.reference)}")
        if report.path_grammar is not None:
            _console.print(f"[bold]Path:[/] {report.path_grammar.value}")
    else:
        _console.print(f"[red]invalid[/] {escape(report.reference)}: {report.error}")

    if verbose:
        _console.print(f"[bold]Charset:[/] {report.charset}")
        _console.print(_components_table(report.components))


def print_split_report(report: SplitReport) -> None:
    """Print the components of a reference and its recomposed form."""
    _console.print(_components_table(report.components))
    _console.print(f"[bold]Recomposed:[/] {escape(report.recomposed)}")
    _console.print(f"[bold]Relative reference:[/] {'yes' if report.relative_reference else 'no'}")
