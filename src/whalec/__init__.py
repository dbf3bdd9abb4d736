"""
Whale-C - Front End for a Small C-like Language
===============================================

This package converts Whale-C source text into an abstract syntax tree
suitable for hand-off to a separate lowering stage that produces an
intermediate representation.

Main Components
---------------
- **frontend**: tokenizer, recursive descent parser, AST model
- **cli**: the ``whalec`` command-line tool

Quick Start
-----------
    >>> from whalec import parse_source
    >>> program = parse_source('int add(int a, int b) { return a + b; }')
    >>> program.functions[0].name
    'add'

Or from the command line:
    $ whalec add.c --ast
"""

__version__ = "0.1.0"

from whalec.errors import WhaleError, SourceLocation
from whalec.frontend import (
    WhaleCompiler,
    CompilerOptions,
    CompilerResult,
    compile_c,
    tokenize,
    parse_source,
    LexicalError,
    ParseError,
)

__all__ = [
    "__version__",
    "WhaleError",
    "SourceLocation",
    "WhaleCompiler",
    "CompilerOptions",
    "CompilerResult",
    "compile_c",
    "tokenize",
    "parse_source",
    "LexicalError",
    "ParseError",
]
