"""
CLI Error Handling
==================

Consistent exit codes and error reporting for the command-line tool.
"""

import sys
import traceback
from enum import IntEnum
from typing import NoReturn

import click


class ExitCode(IntEnum):
    """Exit codes for the CLI."""
    SUCCESS = 0
    BUILD_ERROR = 1      # Lexical, parse, or lowering error
    INVALID_ARGS = 2     # Usage error or unreadable input file


def handle_cli_exception(error: Exception, verbose: bool = False) -> NoReturn:
    """
    Report an exception and exit with the matching exit code.

    Args:
        error: The exception that was raised
        verbose: If True, print the traceback of unexpected errors

    Raises:
        SystemExit: Always
    """
    from whalec.frontend.errors import FrontendError

    if isinstance(error, FrontendError):
        click.echo(f"parse error: {error}", err=True)
        sys.exit(ExitCode.BUILD_ERROR)

    # Anything else comes from a downstream stage or is a bug
    click.echo(f"error: {error}", err=True)
    if verbose:
        traceback.print_exc()
    sys.exit(ExitCode.BUILD_ERROR)
