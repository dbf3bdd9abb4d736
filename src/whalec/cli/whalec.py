"""
whalec - Whale-C Front-End Command-Line Interface
=================================================

Reads one source file, runs the tokenizer and parser, and prints the
result to standard output.

Usage Examples
--------------
Print the AST:
    $ whalec add.c

Print the token stream instead:
    $ whalec --tokens add.c

Verbose mode (stage logging on stderr):
    $ whalec -v add.c

Exit Status
-----------
0 on success, 1 on a lexical or parse error, 2 on a usage error or an
unreadable input file.
"""

import logging
import sys
from pathlib import Path

import click

from whalec import __version__
from whalec.frontend import WhaleCompiler
from whalec.frontend.ast import ASTPrinter
from whalec.cli.errors import ExitCode, handle_cli_exception


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.option(
    "--tokens",
    is_flag=True,
    help="Print the token stream, one token per line",
)
@click.option(
    "--ast",
    is_flag=True,
    help="Print the AST after the tokens (the AST alone is the default)",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="whalec")
def main(
    input_file: Path,
    tokens: bool,
    ast: bool,
    verbose: bool,
) -> None:
    """
    Parse a Whale-C source file.

    INPUT_FILE is the source file (.c) to parse.

    \b
    Examples:
        whalec add.c                 # Print the AST
        whalec --tokens add.c        # Print the tokens
        whalec --tokens --ast add.c  # Print the tokens, then the AST
    """
    setup_logging(verbose)

    try:
        source = input_file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        click.echo(f"failed to read {input_file}: {e}", err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    compiler = WhaleCompiler()

    try:
        result = compiler.compile_source(source, str(input_file))
    except Exception as e:
        handle_cli_exception(e, verbose)

    if tokens:
        for token in result.tokens:
            click.echo(repr(token))

    if ast or not tokens:
        click.echo(ASTPrinter().print(result.ast))


if __name__ == "__main__":
    main()
