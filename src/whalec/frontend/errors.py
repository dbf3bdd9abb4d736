"""
Front-End Error Hierarchy
=========================

Exceptions raised by the tokenizer and the parser. Both are fail-fast:
the first error terminates the pass and exactly one error is reported
per call. There is no recovery and no multi-error aggregation.

Exception Hierarchy
-------------------
FrontendError (base for tokenizer/parser errors)
├── LexicalError - unterminated block comment, unexpected character
└── ParseError - wrong token kind, missing delimiter, premature end of input

Message Format
--------------
LexicalError always knows where it happened and renders as:

    unexpected char: '$' (1:3)

ParseError renders as its message only:

    expected ';', got '}'

The position of the offending token is still available on ParseError
through its ``location`` attribute.
"""

from typing import Optional

from whalec.errors import WhaleError, SourceLocation


class FrontendError(WhaleError):
    """
    Base exception for tokenizer and parser errors.

    Attributes:
        message: The error description
        location: Where in the source the error occurred (optional)
    """

    def __init__(self, message: str, location: Optional[SourceLocation] = None):
        self.message = message
        self.location = location
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        return self.message


class LexicalError(FrontendError):
    """
    Error raised while scanning source text into tokens.

    Raised on an unterminated block comment or an unrecognized character.
    The location is the scan position at the moment of failure.
    """

    def __init__(self, message: str, line: int, column: int, filename: Optional[str] = None):
        super().__init__(message, SourceLocation(line, column, filename))

    @property
    def line(self) -> int:
        return self.location.line

    @property
    def column(self) -> int:
        return self.location.column

    def _format_message(self) -> str:
        """Render as 'message (line:column)'."""
        return f"{self.message} ({self.location.line}:{self.location.column})"


class ParseError(FrontendError):
    """
    Grammar expectation mismatch.

    Raised when the parser meets a token that does not fit the grammar,
    including reaching end of input while a construct is still open.
    Lexical errors surfacing through the parser are re-raised as a
    ParseError carrying the lexical error's display text.
    """
    pass
