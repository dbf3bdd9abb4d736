"""
Whale-C Front-End Driver
========================

This module provides the main interface to the front end. It
orchestrates:

    Source → Lex → Parse → AST → (optional) Lowering

Usage
-----
Programmatic:
    >>> from whalec.frontend import compile_c
    >>> result = compile_c('int main() { return 0; }')
    >>> result.ast.functions[0].name
    'main'

Lowering Hand-off
-----------------
The intermediate-representation stage is not part of this package.
Any object with a ``lower(program, target_triple, data_layout)``
method can be passed as ``lowering``; the driver gives it the finished
ProgramNode together with the configured target triple and data
layout. Whatever it returns is stored in ``CompilerResult.module`` and
whatever it raises propagates unmodified.

Error Handling
--------------
Compilation stops at the first error. Lexical errors surface as
ParseError, carrying the lexical error's display text.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Protocol

from whalec.frontend.lexer import Token
from whalec.frontend.parser import parse_tokens, tokenize_source
from whalec.frontend.ast import ProgramNode

logger = logging.getLogger(__name__)


DEFAULT_TARGET_TRIPLE = "x86_64-whale-linux"


@dataclass(frozen=True)
class DataLayout:
    """
    Target data layout handed to the lowering stage.

    Attributes:
        pointer_bits: Pointer width in bits
        little_endian: Byte order of the target
    """
    pointer_bits: int = 64
    little_endian: bool = True

    @classmethod
    def default_64bit_le(cls) -> "DataLayout":
        return cls(pointer_bits=64, little_endian=True)


@dataclass
class CompilerOptions:
    """
    Front-end configuration options.

    Attributes:
        target_triple: Opaque target description passed to the lowering stage
        data_layout: Target data layout passed to the lowering stage
    """
    target_triple: str = DEFAULT_TARGET_TRIPLE
    data_layout: DataLayout = field(default_factory=DataLayout.default_64bit_le)


class Lowering(Protocol):
    """Interface of the downstream stage that turns an AST into IR."""

    def lower(self, program: ProgramNode, target_triple: str, data_layout: DataLayout) -> Any:
        ...


@dataclass
class CompilerResult:
    """
    Result of a front-end run.

    Attributes:
        filename: Source filename, if any
        tokens: The token list, ending in EOF
        ast: The parsed program
        module: What the lowering stage returned (None without one)
    """
    filename: Optional[str] = None
    tokens: list[Token] = field(default_factory=list)
    ast: Optional[ProgramNode] = None
    module: Any = None

    @property
    def token_count(self) -> int:
        return len(self.tokens)


class WhaleCompiler:
    """
    Front-end driver for Whale-C.

    Example:
        compiler = WhaleCompiler()
        result = compiler.compile_file("add.c")
        print(result.ast)

    Attributes:
        options: Compiler configuration options
    """

    def __init__(self, options: Optional[CompilerOptions] = None):
        self.options = options or CompilerOptions()

    def compile_source(
        self,
        source: str,
        filename: Optional[str] = None,
        lowering: Optional[Lowering] = None,
    ) -> CompilerResult:
        """
        Tokenize and parse source text, then hand the AST to a lowering stage.

        Args:
            source: Whale-C source text
            filename: Source filename for error locations
            lowering: Downstream stage; skipped when None

        Returns:
            CompilerResult with tokens, AST, and the lowered module if any

        Raises:
            ParseError: If tokenizing or parsing fails
        """
        result = CompilerResult(filename=filename)

        # Stage 1: Lexical analysis
        result.tokens = tokenize_source(source, filename)
        logger.debug(f"Tokenized {result.token_count} tokens")

        # Stage 2: Parsing
        result.ast = parse_tokens(result.tokens, filename)

        # Stage 3: Lowering (external)
        if lowering is not None:
            logger.debug(f"Lowering for target {self.options.target_triple}")
            result.module = lowering.lower(
                result.ast,
                self.options.target_triple,
                self.options.data_layout,
            )

        return result

    def compile_file(self, filepath: str | Path, lowering: Optional[Lowering] = None) -> CompilerResult:
        """
        Compile a source file.

        Raises:
            ParseError: If tokenizing or parsing fails
            FileNotFoundError: If the source file does not exist
        """
        path = Path(filepath)
        if not path.exists():
            raise FileNotFoundError(f"Source file not found: {filepath}")

        source = path.read_text(encoding="utf-8")
        return self.compile_source(source, str(path), lowering)


def compile_c(
    source: str,
    filename: Optional[str] = None,
    options: Optional[CompilerOptions] = None,
    lowering: Optional[Lowering] = None,
) -> CompilerResult:
    """Compile source text with a fresh WhaleCompiler."""
    return WhaleCompiler(options).compile_source(source, filename, lowering)
