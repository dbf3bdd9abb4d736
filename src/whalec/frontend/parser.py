"""
Whale-C Recursive Descent Parser
================================

This module implements a recursive descent parser for Whale-C. It
takes the complete token list from the lexer and builds an Abstract
Syntax Tree (AST).

Grammar (EBNF)
--------------
program       ::= (global_const | function)*
global_const  ::= 'const' type IDENTIFIER '=' expr ';'
function      ::= type IDENTIFIER '(' params? ')' block
params        ::= param (',' param)*
param         ::= type IDENTIFIER
type          ::= 'unsigned'? ('int' | 'void')
block         ::= '{' statement* '}'
statement     ::= block
                | 'return' expr? ';'
                | 'const' type IDENTIFIER '=' expr ';'
                | type IDENTIFIER ('=' expr)? ';'
                | 'if' '(' expr ')' stmt_or_block ('else' stmt_or_block)?
                | 'while' '(' expr ')' stmt_or_block
                | 'break' ';'
                | 'continue' ';'
                | IDENTIFIER '=' expr ';'      (only when the 2nd token is '=')
                | expr ';'
stmt_or_block ::= block | statement

Expression Precedence (lowest to highest)
-----------------------------------------
1. comparison      == != < <= > >=   (at most one per expression)
2. additive        + -               (left-associative)
3. multiplicative  *                 (left-associative)
4. primary         INT_LITERAL, IDENTIFIER, true, false, '(' expr ')'

Statement Lists
---------------
Every statement parser returns a list. A nested block contributes its
statements straight into the enclosing list, so no block node exists
in the tree. Branches of if/while own their own lists.

Conditions
----------
The controlling expression of if/while is passed through
``coerce_condition``: comparisons and boolean literals are kept,
anything else becomes ``expr != 0``.

Errors
------
The first expectation failure raises ParseError; there is no
resynchronization and no partial tree escapes.

Example Usage
-------------
>>> from whalec.frontend.parser import parse_source
>>> program = parse_source('int add(int a, int b) { return a + b; }')
>>> program.functions[0].name
'add'
"""

import logging
from typing import Callable, Optional

from whalec.errors import SourceLocation
from whalec.frontend.lexer import Token, TokenType, tokenize
from whalec.frontend.types import BaseType, TypeRef, make_type
from whalec.frontend.ast import (
    ProgramNode,
    GlobalConstant,
    FunctionNode,
    ParameterNode,
    Statement,
    VariableDeclaration,
    ConstDeclaration,
    AssignmentStatement,
    ExpressionStatement,
    ReturnStatement,
    IfStatement,
    WhileStatement,
    BreakStatement,
    ContinueStatement,
    Expression,
    IntLiteral,
    BoolLiteral,
    VariableReference,
    BinaryExpression,
    ComparisonExpression,
    BinaryOperator,
    ComparisonOperator,
)
from whalec.frontend.errors import LexicalError, ParseError

logger = logging.getLogger(__name__)


ADDITIVE_OPERATORS = {
    TokenType.PLUS: BinaryOperator.ADD,
    TokenType.MINUS: BinaryOperator.SUBTRACT,
}

MULTIPLICATIVE_OPERATORS = {
    TokenType.STAR: BinaryOperator.MULTIPLY,
}

COMPARISON_OPERATORS = {
    TokenType.EQ: ComparisonOperator.EQUAL,
    TokenType.NE: ComparisonOperator.NOT_EQUAL,
    TokenType.LT: ComparisonOperator.LESS,
    TokenType.LE: ComparisonOperator.LESS_EQ,
    TokenType.GT: ComparisonOperator.GREATER,
    TokenType.GE: ComparisonOperator.GREATER_EQ,
}


def coerce_condition(expr: Expression) -> Expression:
    """
    Normalize the controlling expression of an if or while.

    Comparisons and boolean literals are already two-valued and are
    returned unchanged. Any other expression is rewritten to
    ``expr != 0`` (C-style truthiness).
    """
    if isinstance(expr, (ComparisonExpression, BoolLiteral)):
        return expr
    return ComparisonExpression(
        operator=ComparisonOperator.NOT_EQUAL,
        left=expr,
        right=IntLiteral(0),
    )


class Parser:
    """
    Recursive descent parser for Whale-C.

    Walks a fully materialized token list with a cursor. General
    dispatch uses one token of lookahead; the assignment versus
    expression-statement decision looks at the second token too.

    Attributes:
        tokens: List of tokens to parse (normally ending in EOF)
        filename: Source filename for error locations
    """

    def __init__(self, tokens: list[Token], filename: Optional[str] = None):
        """
        Initialize the parser.

        Args:
            tokens: List of tokens from the lexer
            filename: Source filename for error locations
        """
        self.tokens = tokens
        self.filename = filename

        # Current position in token stream
        self._pos = 0

        # Reads past the end of the list see this token
        if tokens and tokens[-1].type == TokenType.EOF:
            self._eof = tokens[-1]
        else:
            self._eof = Token(TokenType.EOF)

    def parse(self) -> ProgramNode:
        """
        Parse the token list into an AST.

        Returns:
            ProgramNode with globals and functions in source order

        Raises:
            ParseError: On the first grammar mismatch, or when blocks or
                parentheses nest deeper than the interpreter stack allows
        """
        program = ProgramNode()

        try:
            while not self._at_end():
                if self._check(TokenType.CONST):
                    program.globals.append(self._parse_global_constant())
                else:
                    program.functions.append(self._parse_function())
        except RecursionError as e:
            # Nesting deeper than the interpreter stack allows
            raise self._error("nesting too deep", self._peek()) from e

        logger.debug(
            f"Parsed {len(program.globals)} globals, {len(program.functions)} functions"
        )
        return program

    # =========================================================================
    # Token Access Methods
    # =========================================================================

    def _at_end(self) -> bool:
        return self._peek().type == TokenType.EOF

    def _peek(self, offset: int = 0) -> Token:
        """Look at the token at current position + offset."""
        pos = self._pos + offset
        if pos < len(self.tokens):
            return self.tokens[pos]
        return self._eof

    def _advance(self) -> Token:
        """Consume and return the current token."""
        token = self._peek()
        if self._pos < len(self.tokens):
            self._pos += 1
        return token

    def _check(self, *types: TokenType) -> bool:
        return self._peek().type in types

    def _match(self, *types: TokenType) -> Optional[Token]:
        """Consume the current token if it is one of the given types."""
        if self._check(*types):
            return self._advance()
        return None

    def _expect(self, token_type: TokenType) -> Token:
        """
        Expect and consume a specific token type.

        Raises:
            ParseError: Naming the expected and the actual token
        """
        if self._check(token_type):
            return self._advance()
        raise self._error(f"expected {token_type}", self._peek())

    def _expect_identifier(self) -> str:
        """Expect an identifier and return its name."""
        return self._expect(TokenType.IDENTIFIER).value

    def _error(self, expectation: str, found: Token) -> ParseError:
        """Build the error for an unmet expectation at token 'found'."""
        location = None
        if found.line > 0:
            location = SourceLocation(found.line, found.column, self.filename)
        return ParseError(f"{expectation}, got {found.describe()}", location)

    # =========================================================================
    # Top-Level Declarations
    # =========================================================================

    def _parse_type(self) -> TypeRef:
        """Parse 'unsigned'? ('int' | 'void')."""
        is_unsigned = self._match(TokenType.UNSIGNED) is not None

        if self._match(TokenType.INT):
            return make_type(BaseType.INT, is_unsigned)
        if self._match(TokenType.VOID):
            return make_type(BaseType.VOID, is_unsigned)

        raise self._error("expected type", self._peek())

    def _parse_global_constant(self) -> GlobalConstant:
        self._expect(TokenType.CONST)
        const_type = self._parse_type()
        name = self._expect_identifier()
        self._expect(TokenType.ASSIGN)
        initializer = self._parse_expression()
        self._expect(TokenType.SEMICOLON)

        logger.debug(f"Parsed global constant '{name}'")
        return GlobalConstant(name=name, const_type=const_type, initializer=initializer)

    def _parse_function(self) -> FunctionNode:
        """Parse a function definition. Functions always have a body."""
        return_type = self._parse_type()
        name = self._expect_identifier()

        self._expect(TokenType.LPAREN)
        parameters = self._parse_parameter_list()
        self._expect(TokenType.RPAREN)

        body = self._parse_block()

        logger.debug(
            f"Parsed function '{name}' ({len(parameters)} parameters, {len(body)} statements)"
        )
        return FunctionNode(
            name=name,
            parameters=parameters,
            return_type=return_type,
            body=body,
        )

    def _parse_parameter_list(self) -> list[ParameterNode]:
        parameters = []

        if self._check(TokenType.RPAREN):
            return parameters

        while True:
            param_type = self._parse_type()
            name = self._expect_identifier()
            parameters.append(ParameterNode(name=name, param_type=param_type))

            if not self._match(TokenType.COMMA):
                break

        return parameters

    # =========================================================================
    # Statements
    # =========================================================================

    def _parse_block(self) -> list[Statement]:
        """Parse '{' statement* '}' into a flat statement list."""
        self._expect(TokenType.LBRACE)

        statements: list[Statement] = []
        while not self._check(TokenType.RBRACE):
            statements.extend(self._parse_statement())

        self._expect(TokenType.RBRACE)
        return statements

    def _parse_statement_or_block(self) -> list[Statement]:
        """Parse a branch body; a bare statement becomes a one-element list."""
        if self._check(TokenType.LBRACE):
            return self._parse_block()
        return self._parse_statement()

    def _parse_statement(self) -> list[Statement]:
        """Parse any statement, returning the statements it contributes."""
        token = self._peek()

        if token.type == TokenType.LBRACE:
            return self._parse_block()
        if token.type == TokenType.RETURN:
            return [self._parse_return_statement()]
        if token.type == TokenType.CONST:
            return [self._parse_const_declaration()]
        if token.is_type_keyword():
            return [self._parse_variable_declaration()]
        if token.type == TokenType.IF:
            return [self._parse_if_statement()]
        if token.type == TokenType.WHILE:
            return [self._parse_while_statement()]
        if token.type == TokenType.BREAK:
            self._advance()
            self._expect(TokenType.SEMICOLON)
            return [BreakStatement()]
        if token.type == TokenType.CONTINUE:
            self._advance()
            self._expect(TokenType.SEMICOLON)
            return [ContinueStatement()]

        # Assignment only when the second token is '='
        if token.type == TokenType.IDENTIFIER and self._peek(1).type == TokenType.ASSIGN:
            return [self._parse_assignment()]

        return [self._parse_expression_statement()]

    def _parse_return_statement(self) -> ReturnStatement:
        self._expect(TokenType.RETURN)

        value = None
        if not self._check(TokenType.SEMICOLON):
            value = self._parse_expression()

        self._expect(TokenType.SEMICOLON)
        return ReturnStatement(value=value)

    def _parse_const_declaration(self) -> ConstDeclaration:
        self._expect(TokenType.CONST)
        const_type = self._parse_type()
        name = self._expect_identifier()
        self._expect(TokenType.ASSIGN)
        initializer = self._parse_expression()
        self._expect(TokenType.SEMICOLON)
        return ConstDeclaration(name=name, const_type=const_type, initializer=initializer)

    def _parse_variable_declaration(self) -> VariableDeclaration:
        """Parse 'type name;' or 'type name = expr;'."""
        var_type = self._parse_type()
        name = self._expect_identifier()

        # No initializer means "no value yet", not zero
        initializer = None
        if self._match(TokenType.ASSIGN):
            initializer = self._parse_expression()

        self._expect(TokenType.SEMICOLON)
        return VariableDeclaration(name=name, var_type=var_type, initializer=initializer)

    def _parse_if_statement(self) -> IfStatement:
        self._expect(TokenType.IF)
        condition = self._parse_condition()

        then_body = self._parse_statement_or_block()

        else_body: list[Statement] = []
        if self._match(TokenType.ELSE):
            else_body = self._parse_statement_or_block()

        return IfStatement(condition=condition, then_body=then_body, else_body=else_body)

    def _parse_while_statement(self) -> WhileStatement:
        self._expect(TokenType.WHILE)
        condition = self._parse_condition()
        body = self._parse_statement_or_block()
        return WhileStatement(condition=condition, body=body)

    def _parse_condition(self) -> Expression:
        """Parse '(' expr ')' and coerce the expression to a condition."""
        self._expect(TokenType.LPAREN)
        condition = coerce_condition(self._parse_expression())
        self._expect(TokenType.RPAREN)
        return condition

    def _parse_assignment(self) -> AssignmentStatement:
        name = self._expect_identifier()
        self._expect(TokenType.ASSIGN)
        value = self._parse_expression()
        self._expect(TokenType.SEMICOLON)
        return AssignmentStatement(name=name, value=value)

    def _parse_expression_statement(self) -> ExpressionStatement:
        expression = self._parse_expression()
        self._expect(TokenType.SEMICOLON)
        return ExpressionStatement(expression=expression)

    # =========================================================================
    # Expressions (Operator Precedence)
    # =========================================================================

    def _parse_expression(self) -> Expression:
        return self._parse_comparison()

    def _parse_comparison(self) -> Expression:
        """Parse additive (cmp_op additive)?; comparisons do not chain."""
        left = self._parse_additive()

        op_token = self._match(*COMPARISON_OPERATORS)
        if op_token is None:
            return left

        right = self._parse_additive()
        return ComparisonExpression(
            operator=COMPARISON_OPERATORS[op_token.type],
            left=left,
            right=right,
        )

    def _parse_additive(self) -> Expression:
        return self._parse_binary(self._parse_multiplicative, ADDITIVE_OPERATORS)

    def _parse_multiplicative(self) -> Expression:
        return self._parse_binary(self._parse_primary, MULTIPLICATIVE_OPERATORS)

    def _parse_binary(
        self,
        operand_parser: Callable[[], Expression],
        operators: dict[TokenType, BinaryOperator],
    ) -> Expression:
        """
        Generic left-associative binary expression parser.

        Args:
            operand_parser: Function to parse operands
            operators: Map of token types to binary operators
        """
        expr = operand_parser()

        while self._peek().type in operators:
            op_token = self._advance()
            right = operand_parser()
            expr = BinaryExpression(
                operator=operators[op_token.type],
                left=expr,
                right=right,
            )

        return expr

    def _parse_primary(self) -> Expression:
        """Parse literals, variable references, and parenthesized expressions."""
        token = self._peek()

        if token.type == TokenType.INT_LITERAL:
            self._advance()
            return IntLiteral(token.value)

        if token.type == TokenType.IDENTIFIER:
            self._advance()
            return VariableReference(token.value)

        if token.type == TokenType.TRUE:
            self._advance()
            return BoolLiteral(True)

        if token.type == TokenType.FALSE:
            self._advance()
            return BoolLiteral(False)

        if token.type == TokenType.LPAREN:
            self._advance()
            expr = self._parse_expression()
            self._expect(TokenType.RPAREN)
            return expr

        raise self._error("expected expression", token)


# =============================================================================
# Convenience Functions
# =============================================================================

def tokenize_source(source: str, filename: Optional[str] = None) -> list[Token]:
    """
    Tokenize source text for the parser.

    Raises:
        ParseError: Carrying the display text and location of the
            LexicalError, which is chained as its cause
    """
    try:
        return tokenize(source, filename)
    except LexicalError as e:
        raise ParseError(str(e), e.location) from e


def parse_tokens(tokens: list[Token], filename: Optional[str] = None) -> ProgramNode:
    """Parse an already tokenized source into a ProgramNode."""
    return Parser(tokens, filename).parse()


def parse_source(source: str, filename: Optional[str] = None) -> ProgramNode:
    """
    Parse source text into an AST.

    Combines lexing and parsing. A lexical error is re-raised as a
    ParseError carrying the lexical error's display text.

    Args:
        source: The Whale-C source text
        filename: Source filename for error locations

    Returns:
        The root ProgramNode of the AST

    Raises:
        ParseError: If tokenizing or parsing fails
    """
    return parse_tokens(tokenize_source(source, filename), filename)
