"""
Error mapping and CLI utilities.

Provides centralized exception-to-exit-code mapping and CLI command wrappers
to ensure consistent error handling across all Typer commands.
"""
from __future__ import annotations

import typer
from typing import Callable, Optional, TypeVar

T = TypeVar('T')

EXIT_CODES = {
    "UriError": 2,
    "InvalidPathError": 2,
    "InvalidSchemeError": 2,
    "InvalidQueryError": 2,
    "InvalidFragmentError": 2,
    "ValueError": 2,
    "InvalidCharsetError": 4,
}

FALLBACK_EXIT_CODE = 3


def exit_code_for_name(name: Optional[str]) -> int:
    """Map an exception class name to an exit code (3 when unknown)."""
    if name is None:
        return FALLBACK_EXIT_CODE
    return EXIT_CODES.get(name, FALLBACK_EXIT_CODE)


def exit_code_for(exc: BaseException) -> int:
    """
    Map exception to standardized exit code.

    Returns:
    - 2: Invalid URI component (InvalidPathError and friends) or ValueError
    - 4: Unusable charset (InvalidCharsetError)
    - 3: Anything else
    """
    return exit_code_for_name(type(exc).__name__)


def run_and_exit(func: Callable[[], T]) -> T:
    """
    Unified error wrapper for CLI commands.

    Executes the given function and maps any exceptions to appropriate
    exit codes using typer.Exit. typer.Exit raised by the command itself
    passes through unchanged.

    Raises:
        typer.Exit: With appropriate exit code if function raises exception
    """
    try:
        return func()
    except typer.Exit:
        raise
    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=exit_code_for(e)) from e
