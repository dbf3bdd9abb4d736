"""
Whale-C Abstract Syntax Tree (AST) Definitions
===============================================

This module defines the AST node types produced by the parser and
handed to the lowering stage.

Node Hierarchy
--------------
ASTNode (base)
├── ProgramNode - root: global constants and functions, in source order
├── Declarations
│   ├── GlobalConstant - top-level 'const' declaration
│   ├── FunctionNode - function definition
│   └── ParameterNode - function parameter
├── Statements
│   ├── VariableDeclaration - 'int x;' or 'int x = e;'
│   ├── ConstDeclaration - local 'const int x = e;'
│   ├── AssignmentStatement - 'x = e;'
│   ├── ExpressionStatement - expression as statement
│   ├── ReturnStatement - return with optional value
│   ├── IfStatement - if/else with statement-list branches
│   ├── WhileStatement - while loop with statement-list body
│   ├── BreakStatement
│   └── ContinueStatement
└── Expressions
    ├── IntLiteral - integer constant (32-bit signed by default)
    ├── BoolLiteral - true / false
    ├── VariableReference - use of a name
    ├── BinaryExpression - + - *
    └── ComparisonExpression - == != < <= > >=

Design Notes
------------
- There is no block node. A brace-delimited block contributes its
  statements directly to the enclosing statement list; only if/while
  own nested lists.
- A VariableDeclaration without initializer means "no value yet", not
  zero. The lowering stage decides how to materialize it.
- The tree is strict: no node is shared and there are no cycles.
"""

from dataclasses import dataclass, field, fields
from enum import Enum, auto
from typing import Optional

from whalec.frontend.types import TypeRef


# =============================================================================
# AST Node Base Classes
# =============================================================================

@dataclass
class ASTNode:
    """Base class for all AST nodes."""
    pass


@dataclass
class Expression(ASTNode):
    """Base class for nodes that evaluate to a value."""
    pass


@dataclass
class Statement(ASTNode):
    """Base class for nodes that appear in a statement list."""
    pass


@dataclass
class Declaration(ASTNode):
    """Base class for top-level and parameter declarations."""
    pass


# =============================================================================
# Expression Nodes
# =============================================================================

class BinaryOperator(Enum):
    """Arithmetic operators."""
    ADD = auto()        # +
    SUBTRACT = auto()   # -
    MULTIPLY = auto()   # *

    @property
    def symbol(self) -> str:
        return _BINARY_SYMBOLS[self]


class ComparisonOperator(Enum):
    """Comparison operators. Each comparison yields a two-valued result."""
    EQUAL = auto()      # ==
    NOT_EQUAL = auto()  # !=
    LESS = auto()       # <
    LESS_EQ = auto()    # <=
    GREATER = auto()    # >
    GREATER_EQ = auto() # >=

    @property
    def symbol(self) -> str:
        return _COMPARISON_SYMBOLS[self]


_BINARY_SYMBOLS = {
    BinaryOperator.ADD: "+",
    BinaryOperator.SUBTRACT: "-",
    BinaryOperator.MULTIPLY: "*",
}

_COMPARISON_SYMBOLS = {
    ComparisonOperator.EQUAL: "==",
    ComparisonOperator.NOT_EQUAL: "!=",
    ComparisonOperator.LESS: "<",
    ComparisonOperator.LESS_EQ: "<=",
    ComparisonOperator.GREATER: ">",
    ComparisonOperator.GREATER_EQ: ">=",
}


@dataclass
class IntLiteral(Expression):
    """
    Integer constant.

    The value is whatever the lexer accumulated and may exceed the
    declared width; range checking belongs to the lowering stage.

    Attributes:
        value: The integer value
        bits: Declared width of the literal
        is_signed: Signedness of the literal
    """
    value: int
    bits: int = 32
    is_signed: bool = True


@dataclass
class BoolLiteral(Expression):
    """Boolean constant ('true' or 'false')."""
    value: bool


@dataclass
class VariableReference(Expression):
    """Reference to a variable, parameter, or constant by name."""
    name: str


@dataclass
class BinaryExpression(Expression):
    """
    Arithmetic operation (left op right).

    Attributes:
        operator: The binary operator
        left: Left operand expression
        right: Right operand expression
    """
    operator: BinaryOperator
    left: Expression
    right: Expression


@dataclass
class ComparisonExpression(Expression):
    """
    Comparison (left op right).

    Attributes:
        operator: The comparison operator
        left: Left operand expression
        right: Right operand expression
    """
    operator: ComparisonOperator
    left: Expression
    right: Expression


# =============================================================================
# Statement Nodes
# =============================================================================

@dataclass
class VariableDeclaration(Statement):
    """
    Local variable declaration.

    Represents:
        int x;
        unsigned int y = 10;

    Attributes:
        name: Variable name
        var_type: The declared type
        initializer: Initial value, or None for "no value yet"
    """
    name: str
    var_type: TypeRef
    initializer: Optional[Expression] = None


@dataclass
class ConstDeclaration(Statement):
    """Local constant declaration ('const int x = e;')."""
    name: str
    const_type: TypeRef
    initializer: Expression


@dataclass
class AssignmentStatement(Statement):
    """Assignment of a value to a named variable ('x = e;')."""
    name: str
    value: Expression


@dataclass
class ExpressionStatement(Statement):
    """Expression evaluated for its own sake ('x;', 'a + b;')."""
    expression: Expression


@dataclass
class ReturnStatement(Statement):
    """Return statement with an optional value."""
    value: Optional[Expression] = None


@dataclass
class IfStatement(Statement):
    """
    If statement with optional else branch.

    The condition is always a ComparisonExpression or a BoolLiteral.

    Attributes:
        condition: The condition expression
        then_body: Statements executed if the condition holds
        else_body: Statements executed otherwise (empty when there is no else)
    """
    condition: Expression
    then_body: list[Statement] = field(default_factory=list)
    else_body: list[Statement] = field(default_factory=list)


@dataclass
class WhileStatement(Statement):
    """
    While loop.

    Attributes:
        condition: Loop condition (a comparison or boolean literal)
        body: Loop body statements
    """
    condition: Expression
    body: list[Statement] = field(default_factory=list)


@dataclass
class BreakStatement(Statement):
    pass


@dataclass
class ContinueStatement(Statement):
    pass


# =============================================================================
# Declaration Nodes
# =============================================================================

@dataclass
class ParameterNode(Declaration):
    """
    Function parameter.

    Attributes:
        name: Parameter name
        param_type: The declared type
    """
    name: str
    param_type: TypeRef


@dataclass
class GlobalConstant(Declaration):
    """Top-level constant ('const int LIMIT = 10;')."""
    name: str
    const_type: TypeRef
    initializer: Expression


@dataclass
class FunctionNode(Declaration):
    """
    Function definition.

    Attributes:
        name: Function name
        parameters: Parameters in declaration order
        return_type: The return type
        body: The flattened statement list of the function body
    """
    name: str
    parameters: list[ParameterNode] = field(default_factory=list)
    return_type: Optional[TypeRef] = None
    body: list[Statement] = field(default_factory=list)


# =============================================================================
# Program Root Node
# =============================================================================

@dataclass
class ProgramNode(ASTNode):
    """
    Root node of the AST.

    Both lists keep source order. Duplicate names are syntactically legal
    and are not checked here.

    Attributes:
        globals: Top-level constants
        functions: Function definitions
    """
    globals: list[GlobalConstant] = field(default_factory=list)
    functions: list[FunctionNode] = field(default_factory=list)


# =============================================================================
# AST Visitor Pattern
# =============================================================================

class ASTVisitor:
    """
    Base class for AST visitors.

    Dispatches on the node's class name. Subclasses override visit_*
    methods for the node types they care about; everything else walks
    its children.

    Usage:
        class FunctionCounter(ASTVisitor):
            def __init__(self):
                self.count = 0

            def visit_FunctionNode(self, node):
                self.count += 1

        counter = FunctionCounter()
        counter.visit(program)
    """

    def visit(self, node: ASTNode):
        method_name = f"visit_{node.__class__.__name__}"
        visitor = getattr(self, method_name, self.generic_visit)
        return visitor(node)

    def generic_visit(self, node: ASTNode) -> None:
        """Visit all child nodes, including nodes held in lists."""
        for node_field in fields(node):
            value = getattr(node, node_field.name)
            if isinstance(value, ASTNode):
                self.visit(value)
            elif isinstance(value, list):
                for item in value:
                    if isinstance(item, ASTNode):
                        self.visit(item)


# =============================================================================
# AST Pretty Printer
# =============================================================================

class ASTPrinter(ASTVisitor):
    """
    Pretty printer for AST debugging.

    Usage:
        printer = ASTPrinter()
        print(printer.print(program))

    Example output:
        Program
          Const: int LIMIT = 10
          Function: int add(int a, int b)
            Return (a + b)
    """

    def __init__(self):
        self.output: list[str] = []
        self.indent_level = 0

    def print(self, node: ASTNode) -> str:
        """Print the AST and return it as a string."""
        self.output = []
        self.indent_level = 0
        self.visit(node)
        return "\n".join(self.output)

    def _emit(self, text: str) -> None:
        indent = "  " * self.indent_level
        self.output.append(f"{indent}{text}")

    def _indent(self) -> None:
        self.indent_level += 1

    def _dedent(self) -> None:
        self.indent_level = max(0, self.indent_level - 1)

    def _body(self, statements: list[Statement]) -> None:
        self._indent()
        for stmt in statements:
            self.visit(stmt)
        self._dedent()

    def visit_ProgramNode(self, node: ProgramNode):
        self._emit("Program")
        self._indent()
        for const in node.globals:
            self.visit(const)
        for function in node.functions:
            self.visit(function)
        self._dedent()

    def visit_GlobalConstant(self, node: GlobalConstant):
        self._emit(f"Const: {node.const_type} {node.name} = {self._expr_str(node.initializer)}")

    def visit_FunctionNode(self, node: FunctionNode):
        params = ", ".join(f"{p.param_type} {p.name}" for p in node.parameters)
        self._emit(f"Function: {node.return_type} {node.name}({params})")
        self._body(node.body)

    def visit_VariableDeclaration(self, node: VariableDeclaration):
        init = f" = {self._expr_str(node.initializer)}" if node.initializer is not None else ""
        self._emit(f"Variable: {node.var_type} {node.name}{init}")

    def visit_ConstDeclaration(self, node: ConstDeclaration):
        self._emit(f"Const: {node.const_type} {node.name} = {self._expr_str(node.initializer)}")

    def visit_AssignmentStatement(self, node: AssignmentStatement):
        self._emit(f"Assign: {node.name} = {self._expr_str(node.value)}")

    def visit_ExpressionStatement(self, node: ExpressionStatement):
        self._emit(f"Expr: {self._expr_str(node.expression)}")

    def visit_ReturnStatement(self, node: ReturnStatement):
        if node.value is not None:
            self._emit(f"Return {self._expr_str(node.value)}")
        else:
            self._emit("Return")

    def visit_IfStatement(self, node: IfStatement):
        self._emit(f"If {self._expr_str(node.condition)}")
        self._indent()
        self._emit("Then:")
        self._body(node.then_body)
        if node.else_body:
            self._emit("Else:")
            self._body(node.else_body)
        self._dedent()

    def visit_WhileStatement(self, node: WhileStatement):
        self._emit(f"While {self._expr_str(node.condition)}")
        self._body(node.body)

    def visit_BreakStatement(self, node: BreakStatement):
        self._emit("Break")

    def visit_ContinueStatement(self, node: ContinueStatement):
        self._emit("Continue")

    def _expr_str(self, expr: Expression) -> str:
        """Convert an expression to a fully parenthesized string."""
        if isinstance(expr, IntLiteral):
            return str(expr.value)
        if isinstance(expr, BoolLiteral):
            return "true" if expr.value else "false"
        if isinstance(expr, VariableReference):
            return expr.name
        if isinstance(expr, (BinaryExpression, ComparisonExpression)):
            return f"({self._expr_str(expr.left)} {expr.operator.symbol} {self._expr_str(expr.right)})"
        return f"<{type(expr).__name__}>"
