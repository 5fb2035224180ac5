"""
Lumen Parser Package

Implements a recursive descent parser for the Lumen language. Binary
operators are parsed by iterative precedence tiers, producing left-leaning
trees.

Key Features:
- ``let`` statements over arithmetic expressions
- Immutable, strictly owned AST nodes with structural equality
- Visitor pattern and S-expression printer
- Fail-fast errors carrying token position and source location

Author: xwest
"""

from .ast_nodes import *
from .parser import Parser, parse, parse_string
from .errors import ParseError

__all__ = [
    # Core parser
    "Parser", "parse", "parse_string",

    # AST nodes
    "ASTNode", "ASTNodeType", "ASTVisitor", "ASTPrinter",
    "UnaryOperation", "BinaryOperation", "UnaryNode", "BinaryNode",
    "Identifier", "IntegerLiteral", "FloatLiteral",
    "UnaryAddition", "UnarySubtraction", "LogicalNot",
    "BinaryAddition", "BinarySubtraction", "BinaryMultiplication", "BinaryDivision",
    "LogicalAnd", "LogicalOr", "LogicalXor", "Assign",

    # Error handling
    "ParseError",
]
