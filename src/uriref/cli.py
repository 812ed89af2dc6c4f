"""
uriref CLI

Implements 3 CLI verbs with Operations facade integration:
- path: Validate a bare path under explicit context flags
- check: Split and validate a whole URI reference
- split: Show the components of a URI reference without validating
"""
from __future__ import annotations

import logging
import typer
from typing import Optional

from .operations import Operations, OpsConfig, exit_code_for_name, run_and_exit
from .operations.printers import (
    print_json, print_path_report, print_reference_report, print_split_report
)
from .settings import create_settings_from_env

app = typer.Typer(name="uriref", help="RFC 3986 URI reference validator")


def _create_ops(json_output: bool, verbose: bool) -> Operations:
    """
    Load settings, configure logging and build the Operations facade.

    --verbose lowers the root level to DEBUG regardless of URIREF_LOG_LEVEL.
    """
    settings = create_settings_from_env()
    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.log_level_value,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return Operations(config=OpsConfig(json=json_output, verbose=verbose), settings=settings)


@app.command()
def path(
    value: str = typer.Argument("", help="Path to validate (empty by default)"),
    relative: bool = typer.Option(False, "--relative", help="Validate as part of a relative reference"),
    authority: bool = typer.Option(False, "--authority", help="Validate as following an authority"),
    charset: Optional[str] = typer.Option(None, "--charset", help="Charset of percent-encoded octets"),
    json_output: bool = typer.Option(False, "--json", help="Emit a JSON report"),
    verbose: bool = typer.Option(False, "--verbose", help="Show detailed output")
) -> None:
    """Validate a path component."""

    def _path() -> None:
        ops = _create_ops(json_output, verbose)
        report = ops.check_path(value, relative_reference=relative, has_authority=authority, charset=charset)
        if ops.cfg.json:
            print_json(report)
        else:
            print_path_report(report, verbose=verbose)
        if not report.valid:
            raise typer.Exit(code=exit_code_for_name("InvalidPathError"))

    run_and_exit(_path)


@app.command()
def check(
    reference: str = typer.Argument(..., help="URI reference to validate"),
    charset: Optional[str] = typer.Option(None, "--charset", help="Charset of percent-encoded octets"),
    json_output: bool = typer.Option(False, "--json", help="Emit a JSON report"),
    verbose: bool = typer.Option(False, "--verbose", help="Show detailed output")
) -> None:
    """Validate a URI reference."""

    def _check() -> None:
        ops = _create_ops(json_output, verbose)
        report = ops.check_reference(reference, charset=charset)
        if ops.cfg.json:
            print_json(report)
        else:
            print_reference_report(report, verbose=verbose)
        if not report.valid:
            raise typer.Exit(code=exit_code_for_name(report.error_type))

    run_and_exit(_check)


@app.command()
def split(
    reference: str = typer.Argument(..., help="URI reference to decompose"),
    json_output: bool = typer.Option(False, "--json", help="Emit a JSON report"),
) -> None:
    """Show the components of a URI reference."""

    def _split() -> None:
        ops = _create_ops(json_output, verbose=False)
        report = ops.split(reference)
        if ops.cfg.json:
            print_json(report)
        else:
            print_split_report(report)

    run_and_exit(_split)


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
