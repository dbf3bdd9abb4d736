"""
Whale-C Front End
=================

Tokenizer and recursive descent parser for Whale-C, a small C-like
language. The front end turns source text into an AST ready for a
separate lowering stage.

Pipeline
--------
    Source → Lexer → tokens → Parser → ProgramNode → (external) lowering

Usage
-----
>>> from whalec.frontend import parse_source
>>> program = parse_source('const int LIMIT = 10; int main() { return LIMIT; }')
>>> [g.name for g in program.globals]
['LIMIT']

Language Subset
---------------
- Types: int, unsigned int, void (32-bit integers only)
- Operators: + - * and one comparison (== != < <= > >=) per expression
- Control flow: if/else, while, break, continue, return
- Declarations: global and local constants, local variables, functions

Not supported: function calls, pointers, arrays, unary operators.
"""

from whalec.frontend.compiler import (
    WhaleCompiler,
    CompilerOptions,
    CompilerResult,
    DataLayout,
    Lowering,
    compile_c,
)
from whalec.frontend.errors import FrontendError, LexicalError, ParseError
from whalec.frontend.lexer import Lexer, Token, TokenType, tokenize
from whalec.frontend.parser import (
    Parser,
    parse_source,
    parse_tokens,
    tokenize_source,
    coerce_condition,
)
from whalec.frontend.types import BaseType, TypeRef, TYPE_INT, TYPE_UINT, TYPE_VOID
from whalec.frontend.ast import (
    ASTNode,
    ASTPrinter,
    ASTVisitor,
    ProgramNode,
    GlobalConstant,
    FunctionNode,
    ParameterNode,
    VariableDeclaration,
    ConstDeclaration,
    AssignmentStatement,
    ExpressionStatement,
    ReturnStatement,
    IfStatement,
    WhileStatement,
    BreakStatement,
    ContinueStatement,
    IntLiteral,
    BoolLiteral,
    VariableReference,
    BinaryExpression,
    ComparisonExpression,
    BinaryOperator,
    ComparisonOperator,
)

__all__ = [
    # Driver
    "WhaleCompiler",
    "CompilerOptions",
    "CompilerResult",
    "DataLayout",
    "Lowering",
    "compile_c",
    # Errors
    "FrontendError",
    "LexicalError",
    "ParseError",
    # Lexer
    "Lexer",
    "Token",
    "TokenType",
    "tokenize",
    # Parser
    "Parser",
    "parse_source",
    "parse_tokens",
    "tokenize_source",
    "coerce_condition",
    # Types
    "BaseType",
    "TypeRef",
    "TYPE_INT",
    "TYPE_UINT",
    "TYPE_VOID",
    # AST
    "ASTNode",
    "ASTPrinter",
    "ASTVisitor",
    "ProgramNode",
    "GlobalConstant",
    "FunctionNode",
    "ParameterNode",
    "VariableDeclaration",
    "ConstDeclaration",
    "AssignmentStatement",
    "ExpressionStatement",
    "ReturnStatement",
    "IfStatement",
    "WhileStatement",
    "BreakStatement",
    "ContinueStatement",
    "IntLiteral",
    "BoolLiteral",
    "VariableReference",
    "BinaryExpression",
    "ComparisonExpression",
    "BinaryOperator",
    "ComparisonOperator",
]
