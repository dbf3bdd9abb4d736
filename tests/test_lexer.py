# =============================================================================
# test_lexer.py - Lexer Unit Tests
# =============================================================================
# Tests for the Whale-C tokenizer.
#
# Test coverage includes:
#   - Keywords, identifiers, integer literals
#   - Maximal munch for two-character operators
#   - Line and block comments
#   - Position tracking for tokens and errors
#   - Error conditions
# =============================================================================

import pytest
from whalec.frontend.lexer import Lexer, Token, TokenType, KEYWORDS, char_literal, tokenize
from whalec.frontend.errors import LexicalError


# =============================================================================
# Helper Function
# =============================================================================

def types(source: str) -> list:
    """Token types of the source, EOF included."""
    return [t.type for t in tokenize(source)]


# =============================================================================
# Basic Token Recognition Tests
# =============================================================================

class TestBasicTokens:
    """Test basic token recognition for simple inputs."""

    def test_empty_source(self):
        """Empty source produces only the EOF token."""
        assert tokenize("") == [Token(TokenType.EOF)]

    def test_whitespace_only(self):
        """Spaces, tabs, carriage returns and newlines are skipped."""
        assert tokenize("  \t\r\n  \n") == [Token(TokenType.EOF)]

    def test_identifier(self):
        tokens = tokenize("counter")
        assert tokens[0] == Token(TokenType.IDENTIFIER, "counter")

    def test_identifier_with_underscore_and_digits(self):
        tokens = tokenize("_loop_2")
        assert tokens[0].type == TokenType.IDENTIFIER
        assert tokens[0].value == "_loop_2"

    def test_keywords(self):
        """Every keyword maps to its own token type."""
        for text, token_type in KEYWORDS.items():
            tokens = tokenize(text)
            assert tokens == [Token(token_type), Token(TokenType.EOF)], text

    def test_keyword_prefix_is_identifier(self):
        """A keyword followed by identifier characters is an identifier."""
        assert tokenize("integer")[0] == Token(TokenType.IDENTIFIER, "integer")
        assert tokenize("if_")[0] == Token(TokenType.IDENTIFIER, "if_")

    def test_punctuation(self):
        assert types("( ) { } ; ,") == [
            TokenType.LPAREN,
            TokenType.RPAREN,
            TokenType.LBRACE,
            TokenType.RBRACE,
            TokenType.SEMICOLON,
            TokenType.COMMA,
            TokenType.EOF,
        ]

    def test_single_char_operators(self):
        assert types("= < > + - *") == [
            TokenType.ASSIGN,
            TokenType.LT,
            TokenType.GT,
            TokenType.PLUS,
            TokenType.MINUS,
            TokenType.STAR,
            TokenType.EOF,
        ]

    def test_no_whitespace_needed_between_tokens(self):
        assert types("x=a+1;") == [
            TokenType.IDENTIFIER,
            TokenType.ASSIGN,
            TokenType.IDENTIFIER,
            TokenType.PLUS,
            TokenType.INT_LITERAL,
            TokenType.SEMICOLON,
            TokenType.EOF,
        ]


# =============================================================================
# Integer Literal Tests
# =============================================================================

class TestIntegerLiterals:
    """Test decimal literal accumulation."""

    def test_decimal_number(self):
        assert tokenize("123")[0] == Token(TokenType.INT_LITERAL, 123)

    def test_zero(self):
        assert tokenize("0")[0].value == 0

    def test_leading_zeros_are_decimal(self):
        """There are no octal literals; leading zeros are just digits."""
        assert tokenize("0017")[0].value == 17

    def test_wide_literal(self):
        """Literals keep their full value well beyond 64 bits."""
        text = "170141183460469231731687303715884105727"
        tokens = tokenize(text)
        assert len(tokens) == 2
        assert tokens[0].type == TokenType.INT_LITERAL
        assert tokens[0].value == 2**127 - 1

    def test_literal_beyond_128_bits_is_not_rejected(self):
        text = "9" * 50
        assert tokenize(text)[0].value == int(text)

    def test_digits_then_letters(self):
        """A digit run ends at the first non-digit."""
        assert tokenize("12ab") == [
            Token(TokenType.INT_LITERAL, 12),
            Token(TokenType.IDENTIFIER, "ab"),
            Token(TokenType.EOF),
        ]

    def test_minus_is_separate_token(self):
        """Negative numbers are not literals."""
        assert types("-5") == [TokenType.MINUS, TokenType.INT_LITERAL, TokenType.EOF]


# =============================================================================
# Maximal Munch Tests
# =============================================================================

class TestMaximalMunch:
    """Two-character operators win over their one-character prefixes."""

    @pytest.mark.parametrize("text,token_type", [
        ("==", TokenType.EQ),
        ("!=", TokenType.NE),
        ("<=", TokenType.LE),
        (">=", TokenType.GE),
    ])
    def test_two_char_operator(self, text, token_type):
        assert types(text) == [token_type, TokenType.EOF]

    def test_separated_operators_stay_separate(self):
        assert types("< =") == [TokenType.LT, TokenType.ASSIGN, TokenType.EOF]

    def test_triple_equals(self):
        """'===' is '==' followed by '='."""
        assert types("===") == [TokenType.EQ, TokenType.ASSIGN, TokenType.EOF]

    def test_comparison_in_context(self):
        assert types("a<=b") == [
            TokenType.IDENTIFIER,
            TokenType.LE,
            TokenType.IDENTIFIER,
            TokenType.EOF,
        ]


# =============================================================================
# Comment Tests
# =============================================================================

class TestComments:
    """Test that comments are transparent."""

    def test_line_comment(self):
        """'a//c\\nb' tokenizes exactly like 'a\\nb'."""
        expected = [
            Token(TokenType.IDENTIFIER, "a"),
            Token(TokenType.IDENTIFIER, "b"),
            Token(TokenType.EOF),
        ]
        assert tokenize("a//c\nb") == expected
        assert tokenize("a//c\nb") == tokenize("a\nb")

    def test_line_comment_at_end_of_input(self):
        assert tokenize("a // trailing") == [
            Token(TokenType.IDENTIFIER, "a"),
            Token(TokenType.EOF),
        ]

    def test_block_comment(self):
        assert tokenize("a /* x \n y */ b") == tokenize("a b")

    def test_block_comment_does_not_nest(self):
        """The first '*/' closes the comment."""
        assert tokenize("/* /* */ x") == [
            Token(TokenType.IDENTIFIER, "x"),
            Token(TokenType.EOF),
        ]

    def test_consecutive_comments(self):
        assert tokenize("// one\n/* two */ // three\n42") == [
            Token(TokenType.INT_LITERAL, 42),
            Token(TokenType.EOF),
        ]

    def test_comment_markers_inside_block_comment(self):
        assert types("/* // */ x") == [TokenType.IDENTIFIER, TokenType.EOF]

    def test_unterminated_block_comment(self):
        with pytest.raises(LexicalError, match="unterminated block comment"):
            tokenize("/* x")

    def test_unterminated_block_comment_position(self):
        """The error is reported at the end of input."""
        with pytest.raises(LexicalError) as exc_info:
            tokenize("a\n/* x")
        assert exc_info.value.line == 2
        assert exc_info.value.column == 5


# =============================================================================
# Position Tracking Tests
# =============================================================================

class TestPositions:
    """Test line and column tracking."""

    def test_token_positions(self):
        tokens = tokenize("int main() {\n  return 42;\n}")
        assert (tokens[0].line, tokens[0].column) == (1, 1)
        assert (tokens[1].line, tokens[1].column) == (1, 5)
        ret = tokens[5]
        assert ret.type == TokenType.RETURN
        assert (ret.line, ret.column) == (2, 3)
        assert (tokens[-2].line, tokens[-2].column) == (3, 1)

    def test_positions_do_not_affect_equality(self):
        assert Token(TokenType.IDENTIFIER, "x", 1, 1) == Token(TokenType.IDENTIFIER, "x", 9, 4)

    def test_repr(self):
        tokens = tokenize("x 7 ;")
        assert repr(tokens[0]) == "Token(IDENTIFIER, 'x', 1:1)"
        assert repr(tokens[1]) == "Token(INT_LITERAL, 7, 1:3)"
        assert repr(tokens[2]) == "Token(SEMICOLON, 1:5)"


# =============================================================================
# Error Tests
# =============================================================================

class TestErrors:
    """Test lexical error conditions."""

    def test_unexpected_character(self):
        with pytest.raises(LexicalError) as exc_info:
            tokenize("a $ b")
        error = exc_info.value
        assert error.message == "unexpected char: '$'"
        assert error.line == 1
        assert error.column == 3

    def test_error_display_text(self):
        with pytest.raises(LexicalError) as exc_info:
            tokenize("a $ b")
        assert str(exc_info.value) == "unexpected char: '$' (1:3)"

    def test_error_on_later_line(self):
        with pytest.raises(LexicalError) as exc_info:
            tokenize("x;\n  @")
        assert (exc_info.value.line, exc_info.value.column) == (2, 3)

    def test_lone_bang(self):
        """'!' is only valid as part of '!='."""
        with pytest.raises(LexicalError, match="unexpected char: '!'"):
            tokenize("!x")

    def test_lone_slash(self):
        with pytest.raises(LexicalError, match="unexpected char: '/'"):
            tokenize("a / b")

    def test_non_ascii_character(self):
        with pytest.raises(LexicalError, match="unexpected char"):
            tokenize("café")

    def test_quote_is_escaped(self):
        with pytest.raises(LexicalError) as exc_info:
            tokenize("a ' b")
        assert str(exc_info.value) == "unexpected char: '\\'' (1:3)"

    def test_nul_is_escaped(self):
        with pytest.raises(LexicalError) as exc_info:
            tokenize("x\0")
        assert exc_info.value.message == "unexpected char: '\\0'"

    @pytest.mark.parametrize("char,rendered", [
        ("$", "'$'"),
        ("é", "'é'"),
        ('"', "'\"'"),
        ("'", "'\\''"),
        ("\\", "'\\\\'"),
        ("\0", "'\\0'"),
        ("\t", "'\\t'"),
        ("\x1b", "'\\u{1b}'"),
        ("\x7f", "'\\u{7f}'"),
    ])
    def test_char_literal(self, char, rendered):
        assert char_literal(char) == rendered


# =============================================================================
# Stream Shape Tests
# =============================================================================

class TestTokenStream:
    """Test the overall shape of the token stream."""

    def test_exactly_one_eof_at_end(self):
        tokens = tokenize("int f() { return 1; }\n// done\n")
        eofs = [t for t in tokens if t.type == TokenType.EOF]
        assert len(eofs) == 1
        assert tokens[-1].type == TokenType.EOF

    def test_lexer_generator_stops_after_eof(self):
        lexer = Lexer("x")
        assert [t.type for t in lexer.tokenize()] == [TokenType.IDENTIFIER, TokenType.EOF]

    def test_describe(self):
        assert Token(TokenType.IDENTIFIER, "x").describe() == "identifier 'x'"
        assert Token(TokenType.INT_LITERAL, 42).describe() == "integer literal 42"
        assert Token(TokenType.SEMICOLON).describe() == "';'"
        assert Token(TokenType.EOF).describe() == "end of input"

    def test_type_keywords(self):
        assert Token(TokenType.INT).is_type_keyword()
        assert Token(TokenType.UNSIGNED).is_type_keyword()
        assert Token(TokenType.VOID).is_type_keyword()
        assert not Token(TokenType.CONST).is_type_keyword()
