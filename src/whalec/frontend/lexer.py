"""
Whale-C Lexer (Tokenizer)
=========================

This module converts source text into an ordered, finite sequence of
tokens for the parser. The sequence always ends with exactly one EOF
token, and no EOF token appears before the last element.

Token Categories
----------------
- Keywords: int, unsigned, void, const, return, if, else, while,
  break, continue, true, false
- Identifiers: variable and function names
- Integer literals: decimal digits only
- Punctuation: ( ) { } ; ,
- Operators: = == != < <= > >= + - *

Comments
--------
- Single-line: // comment (the newline is consumed with it)
- Multi-line: /* comment */ (does not nest)

Scanning Rules
--------------
Two-character operators win over their one-character prefixes
(maximal munch), so ``<=`` is always one LE token and never LT
followed by ASSIGN. Integer literals accumulate ``value * 10 + digit``
with no overflow check; the value is a Python int and never wraps.

Example Usage
-------------
>>> from whalec.frontend.lexer import tokenize
>>> for token in tokenize('int main() { return 42; }'):
...     print(token)
Token(INT, 1:1)
Token(IDENTIFIER, 'main', 1:5)
Token(LPAREN, 1:9)
Token(RPAREN, 1:10)
Token(LBRACE, 1:12)
Token(RETURN, 1:14)
Token(INT_LITERAL, 42, 1:21)
Token(SEMICOLON, 1:23)
Token(RBRACE, 1:25)
Token(EOF, 1:26)
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional
import string

from whalec.frontend.errors import LexicalError


# =============================================================================
# Token Type Enumeration
# =============================================================================

class TokenType(Enum):
    """
    Token types for the Whale-C language.

    Each member's value is the description used in diagnostics, so an
    expectation failure can name both what was wanted and what was found.
    """

    # === Keywords ===
    INT = "'int'"
    UNSIGNED = "'unsigned'"
    VOID = "'void'"
    CONST = "'const'"
    RETURN = "'return'"
    IF = "'if'"
    ELSE = "'else'"
    WHILE = "'while'"
    BREAK = "'break'"
    CONTINUE = "'continue'"
    TRUE = "'true'"
    FALSE = "'false'"

    # === Identifiers and Literals ===
    IDENTIFIER = "identifier"
    INT_LITERAL = "integer literal"

    # === Punctuation ===
    LPAREN = "'('"
    RPAREN = "')'"
    LBRACE = "'{'"
    RBRACE = "'}'"
    SEMICOLON = "';'"
    COMMA = "','"

    # === Operators ===
    ASSIGN = "'='"
    EQ = "'=='"
    NE = "'!='"
    LT = "'<'"
    LE = "'<='"
    GT = "'>'"
    GE = "'>='"
    PLUS = "'+'"
    MINUS = "'-'"
    STAR = "'*'"

    # === End of input ===
    EOF = "end of input"

    def __str__(self) -> str:
        return self.value


# =============================================================================
# Keyword and Operator Tables
# =============================================================================

KEYWORDS: dict[str, TokenType] = {
    "int": TokenType.INT,
    "unsigned": TokenType.UNSIGNED,
    "void": TokenType.VOID,
    "const": TokenType.CONST,
    "return": TokenType.RETURN,
    "if": TokenType.IF,
    "else": TokenType.ELSE,
    "while": TokenType.WHILE,
    "break": TokenType.BREAK,
    "continue": TokenType.CONTINUE,
    "true": TokenType.TRUE,
    "false": TokenType.FALSE,
}

# Checked before SINGLE_CHAR_TOKENS so the longer operator always wins
TWO_CHAR_TOKENS: dict[str, TokenType] = {
    "==": TokenType.EQ,
    "!=": TokenType.NE,
    "<=": TokenType.LE,
    ">=": TokenType.GE,
}

SINGLE_CHAR_TOKENS: dict[str, TokenType] = {
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    ";": TokenType.SEMICOLON,
    ",": TokenType.COMMA,
    "=": TokenType.ASSIGN,
    "<": TokenType.LT,
    ">": TokenType.GT,
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.STAR,
}

CHAR_ESCAPES: dict[str, str] = {
    "\0": "\\0",
    "\t": "\\t",
    "\r": "\\r",
    "\n": "\\n",
    "\\": "\\\\",
    "'": "\\'",
}


def char_literal(char: str) -> str:
    """
    Render a character as a single-quoted C-style literal for diagnostics.

    Examples:
        '$'  ->  '$'
        "'"  ->  '\\''
        NUL  ->  '\\0'
        ESC  ->  '\\u{1b}'
    """
    if char in CHAR_ESCAPES:
        return f"'{CHAR_ESCAPES[char]}'"
    if not char.isprintable():
        return f"'\\u{{{ord(char):x}}}'"
    return f"'{char}'"


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single token from Whale-C source text.

    Tokens are immutable. The line and column record where the token
    started; they are excluded from equality so two token sequences
    compare equal regardless of layout and comments.

    Attributes:
        type: The TokenType classification
        value: Identifier text, integer value, or None for everything else
        line: Line number in source (1-indexed)
        column: Column number in source (1-indexed)
    """
    type: TokenType
    value: str | int | None = None
    line: int = field(default=0, compare=False)
    column: int = field(default=0, compare=False)

    def __repr__(self) -> str:
        """Format token for debugging output."""
        if self.value is not None:
            if isinstance(self.value, int):
                return f"Token({self.type.name}, {self.value}, {self.line}:{self.column})"
            return f"Token({self.type.name}, {self.value!r}, {self.line}:{self.column})"
        return f"Token({self.type.name}, {self.line}:{self.column})"

    def describe(self) -> str:
        """
        Describe the token for error messages.

        Examples: "';'", "identifier 'x'", "integer literal 42", "end of input".
        """
        if self.type == TokenType.IDENTIFIER:
            return f"identifier {self.value!r}"
        if self.type == TokenType.INT_LITERAL:
            return f"integer literal {self.value}"
        return str(self.type)

    def is_type_keyword(self) -> bool:
        """Return True if this token can start a type."""
        return self.type in (TokenType.INT, TokenType.UNSIGNED, TokenType.VOID)


# =============================================================================
# Lexer Implementation
# =============================================================================

class Lexer:
    """
    Tokenizes Whale-C source text.

    The lexer scans strictly left to right and stops after emitting the
    first EOF token. Every consumed character advances the column by one;
    a newline additionally advances the line and resets the column to 1.

    Usage:
        lexer = Lexer(source_text)
        tokens = list(lexer.tokenize())

    Attributes:
        source: The source text being tokenized
        filename: Name of the source file (for error reporting)
    """

    # Characters that can start an identifier
    IDENT_START = string.ascii_letters + "_"

    # Characters that can continue an identifier
    IDENT_CHARS = string.ascii_letters + string.digits + "_"

    WHITESPACE = " \t\r\n"

    def __init__(self, source: str, filename: Optional[str] = None):
        """
        Initialize the lexer with source text.

        Args:
            source: The Whale-C source text to tokenize
            filename: Name of the source file (for error messages)
        """
        self.source = source
        self.filename = filename

        # Current position in source
        self._pos = 0
        self._line = 1
        self._column = 1

    def tokenize(self) -> Iterator[Token]:
        """
        Generate tokens from the source text.

        Yields:
            Token objects, ending with exactly one EOF token

        Raises:
            LexicalError: On an unterminated block comment or unexpected character
        """
        while True:
            token = self._next_token()
            yield token
            if token.type == TokenType.EOF:
                return

    # =========================================================================
    # Character Access Methods
    # =========================================================================

    def _at_end(self) -> bool:
        return self._pos >= len(self.source)

    def _peek(self) -> str:
        """Current character, or empty string at end of source."""
        if self._at_end():
            return ""
        return self.source[self._pos]

    def _starts_with(self, text: str) -> bool:
        return self.source.startswith(text, self._pos)

    def _advance(self) -> str:
        """
        Consume and return the current character.

        Updates line and column tracking for error reporting.
        """
        if self._at_end():
            return ""

        char = self.source[self._pos]
        self._pos += 1

        if char == "\n":
            self._line += 1
            self._column = 1
        else:
            self._column += 1

        return char

    def _error(self, message: str) -> LexicalError:
        """Create a lexical error at the current scan position."""
        return LexicalError(message, self._line, self._column, self.filename)

    # =========================================================================
    # Whitespace and Comment Handling
    # =========================================================================

    def _skip_whitespace_and_comments(self) -> None:
        """Skip whitespace and comments until neither applies."""
        while True:
            while self._peek() and self._peek() in self.WHITESPACE:
                self._advance()

            if self._starts_with("//"):
                self._skip_line_comment()
                continue

            if self._starts_with("/*"):
                self._skip_block_comment()
                continue

            break

    def _skip_line_comment(self) -> None:
        """Skip a // comment through the end of the line, newline included."""
        while not self._at_end():
            if self._advance() == "\n":
                break

    def _skip_block_comment(self) -> None:
        """
        Skip a /* ... */ comment. Block comments do not nest.

        Raises:
            LexicalError: If end of input is reached before the closing */
        """
        self._advance()  # consume /
        self._advance()  # consume *

        while not self._at_end() and not self._starts_with("*/"):
            self._advance()

        if not self._starts_with("*/"):
            raise self._error("unterminated block comment")

        self._advance()  # consume *
        self._advance()  # consume /

    # =========================================================================
    # Token Scanning
    # =========================================================================

    def _next_token(self) -> Token:
        self._skip_whitespace_and_comments()

        line = self._line
        column = self._column

        if self._at_end():
            return Token(TokenType.EOF, None, line, column)

        two_chars = self.source[self._pos:self._pos + 2]
        if two_chars in TWO_CHAR_TOKENS:
            self._advance()
            self._advance()
            return Token(TWO_CHAR_TOKENS[two_chars], None, line, column)

        char = self._peek()

        if char in SINGLE_CHAR_TOKENS:
            self._advance()
            return Token(SINGLE_CHAR_TOKENS[char], None, line, column)

        if char in string.digits:
            return self._scan_number(line, column)

        if char in self.IDENT_START:
            return self._scan_identifier(line, column)

        raise self._error(f"unexpected char: {char_literal(char)}")

    def _scan_number(self, line: int, column: int) -> Token:
        """Scan the maximal run of decimal digits."""
        value = 0
        while self._peek() and self._peek() in string.digits:
            value = value * 10 + int(self._advance())
        return Token(TokenType.INT_LITERAL, value, line, column)

    def _scan_identifier(self, line: int, column: int) -> Token:
        """
        Scan an identifier or keyword.

        Keywords are distinguished by checking the text against the
        keyword table; anything else is an identifier carrying its text.
        """
        start = self._pos
        while self._peek() and self._peek() in self.IDENT_CHARS:
            self._advance()

        name = self.source[start:self._pos]

        if name in KEYWORDS:
            return Token(KEYWORDS[name], None, line, column)

        return Token(TokenType.IDENTIFIER, name, line, column)


# =============================================================================
# Convenience Functions
# =============================================================================

def tokenize(source: str, filename: Optional[str] = None) -> list[Token]:
    """
    Tokenize source text into a complete token list.

    Args:
        source: The Whale-C source text
        filename: Source filename for error messages

    Returns:
        All tokens, ending with exactly one EOF token

    Raises:
        LexicalError: If the source cannot be tokenized
    """
    return list(Lexer(source, filename).tokenize())
