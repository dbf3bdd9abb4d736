"""
Whale-C Error Hierarchy
=======================

This module defines the root of the exception hierarchy for the whole
toolchain. All exceptions inherit from WhaleError, allowing callers to
catch every toolchain error with a single except clause if desired.

Exception Hierarchy
-------------------
WhaleError (base)
└── FrontendError (tokenizer and parser, see whalec.frontend.errors)
    ├── LexicalError - unexpected character, unterminated comment
    └── ParseError - grammar expectation mismatch

Design Philosophy
-----------------
Errors capture a source location (line, column) when one is known, so the
command-line tool and library callers can point users at the offending text.
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class WhaleError(Exception):
    """
    Base exception for all Whale-C errors.

    Example:
        try:
            compile_c(source)
        except WhaleError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    A position in source text, used for diagnostics.

    Attributes:
        line: Line number (1-indexed)
        column: Column number (1-indexed, counted per character consumed)
        filename: Name of the source file, if any
    """
    line: int
    column: int
    filename: Optional[str] = None

    def __str__(self) -> str:
        """Format as 'filename:line:column', or 'line:column' without a file."""
        if self.filename:
            return f"{self.filename}:{self.line}:{self.column}"
        return f"{self.line}:{self.column}"
