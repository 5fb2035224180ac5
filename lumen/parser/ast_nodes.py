"""
Abstract Syntax Tree node definitions for Lumen.

One concrete class per node kind. Literal and identifier nodes wrap the
token payload directly; operator nodes own a UnaryOperation or a
BinaryOperation record. Trees are strictly owned top-down: nodes are
immutable, hold no parent pointers and never share children.

Author: xwest
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from itertools import zip_longest
from typing import Any, ClassVar, Iterator, List

from ..lexer.tokens import IntegerRepresentation, FloatRepresentation


class ASTNodeType(Enum):
    """Enumeration of all AST node types."""

    # Leaves
    IDENTIFIER = "Identifier"
    INTEGER_LITERAL = "IntegerLiteral"
    FLOAT_LITERAL = "FloatLiteral"

    # Unary operations
    UNARY_ADDITION = "UnaryAddition"
    UNARY_SUBTRACTION = "UnarySubtraction"
    LOGICAL_NOT = "LogicalNot"

    # Binary operations
    BINARY_ADDITION = "BinaryAddition"
    BINARY_SUBTRACTION = "BinarySubtraction"
    BINARY_MULTIPLICATION = "BinaryMultiplication"
    BINARY_DIVISION = "BinaryDivision"
    LOGICAL_AND = "LogicalAnd"
    LOGICAL_OR = "LogicalOr"
    LOGICAL_XOR = "LogicalXor"
    ASSIGN = "Assign"


class ASTVisitor:
    """
    Visitor for traversing AST nodes.

    ``visit`` dispatches to ``visit_<ClassName>`` when the subclass defines
    one and falls back to ``generic_visit`` otherwise.
    """

    def visit(self, node: 'ASTNode') -> Any:
        method = getattr(self, f"visit_{type(node).__name__}", self.generic_visit)
        return method(node)

    def generic_visit(self, node: 'ASTNode') -> Any:
        for child in node.children():
            self.visit(child)
        return None


class ASTNode(ABC):
    """
    Base class for all AST nodes.

    Only classes that set ``node_type`` can be instantiated. Operator nodes
    compare and hash by walking the tree with an explicit stack, so long
    left-leaning chains do not hit the recursion limit.
    """

    node_type: ClassVar[ASTNodeType]

    def __post_init__(self):
        if not hasattr(type(self), "node_type"):
            raise TypeError(f"{type(self).__name__} is a base class; use a concrete node")

    def accept(self, visitor: ASTVisitor) -> Any:
        """Accept a visitor (visitor pattern)."""
        return visitor.visit(self)

    @abstractmethod
    def children(self) -> List['ASTNode']:
        """Get all direct child nodes, in source order."""

    def __str__(self) -> str:
        return ASTPrinter().visit(self)

    def _preorder(self) -> Iterator[Any]:
        """Yield leaves as themselves and operator nodes as their class."""
        stack: List[ASTNode] = [self]
        while stack:
            node = stack.pop()
            children = node.children()
            if children:
                yield type(node)
                stack.extend(reversed(children))
            else:
                yield node

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ASTNode):
            return NotImplemented
        sentinel = object()
        return all(a == b for a, b in zip_longest(self._preorder(), other._preorder(),
                                                  fillvalue=sentinel))

    def __hash__(self) -> int:
        return hash(tuple(self._preorder()))

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self}>"


@dataclass(frozen=True)
class UnaryOperation:
    """Payload of a unary operator node."""
    operand: ASTNode


@dataclass(frozen=True)
class BinaryOperation:
    """Payload of a binary operator node."""
    left_operand: ASTNode
    right_operand: ASTNode


# ============================================================================
# Leaves
# ============================================================================

@dataclass(frozen=True)
class Identifier(ASTNode):
    """Identifier reference; ``name`` is the raw byte spelling."""
    name: bytes

    node_type: ClassVar[ASTNodeType] = ASTNodeType.IDENTIFIER

    def children(self) -> List[ASTNode]:
        return []


@dataclass(frozen=True)
class IntegerLiteral(ASTNode):
    """Integer literal carrying the lexer's digit representation."""
    value: IntegerRepresentation

    node_type: ClassVar[ASTNodeType] = ASTNodeType.INTEGER_LITERAL

    def children(self) -> List[ASTNode]:
        return []


@dataclass(frozen=True)
class FloatLiteral(ASTNode):
    """Float literal carrying the lexer's digit representation."""
    value: FloatRepresentation

    node_type: ClassVar[ASTNodeType] = ASTNodeType.FLOAT_LITERAL

    def children(self) -> List[ASTNode]:
        return []


# ============================================================================
# Operators
# ============================================================================

@dataclass(frozen=True, eq=False, repr=False)
class UnaryNode(ASTNode):
    """Base class for nodes owning a single operand; not instantiable itself."""
    operation: UnaryOperation

    @classmethod
    def of(cls, operand: ASTNode) -> 'UnaryNode':
        return cls(UnaryOperation(operand))

    @property
    def operand(self) -> ASTNode:
        return self.operation.operand

    def children(self) -> List[ASTNode]:
        return [self.operation.operand]


@dataclass(frozen=True, eq=False, repr=False)
class BinaryNode(ASTNode):
    """Base class for nodes owning a left and a right operand; not instantiable itself."""
    operation: BinaryOperation

    @classmethod
    def of(cls, left: ASTNode, right: ASTNode) -> 'BinaryNode':
        return cls(BinaryOperation(left, right))

    @property
    def left(self) -> ASTNode:
        return self.operation.left_operand

    @property
    def right(self) -> ASTNode:
        return self.operation.right_operand

    def children(self) -> List[ASTNode]:
        return [self.operation.left_operand, self.operation.right_operand]


@dataclass(frozen=True, eq=False, repr=False)
class UnaryAddition(UnaryNode):
    node_type: ClassVar[ASTNodeType] = ASTNodeType.UNARY_ADDITION


@dataclass(frozen=True, eq=False, repr=False)
class UnarySubtraction(UnaryNode):
    node_type: ClassVar[ASTNodeType] = ASTNodeType.UNARY_SUBTRACTION


@dataclass(frozen=True, eq=False, repr=False)
class LogicalNot(UnaryNode):
    node_type: ClassVar[ASTNodeType] = ASTNodeType.LOGICAL_NOT


@dataclass(frozen=True, eq=False, repr=False)
class BinaryAddition(BinaryNode):
    node_type: ClassVar[ASTNodeType] = ASTNodeType.BINARY_ADDITION


@dataclass(frozen=True, eq=False, repr=False)
class BinarySubtraction(BinaryNode):
    node_type: ClassVar[ASTNodeType] = ASTNodeType.BINARY_SUBTRACTION


@dataclass(frozen=True, eq=False, repr=False)
class BinaryMultiplication(BinaryNode):
    node_type: ClassVar[ASTNodeType] = ASTNodeType.BINARY_MULTIPLICATION


@dataclass(frozen=True, eq=False, repr=False)
class BinaryDivision(BinaryNode):
    node_type: ClassVar[ASTNodeType] = ASTNodeType.BINARY_DIVISION


# Logical operators have no grammar production yet
@dataclass(frozen=True, eq=False, repr=False)
class LogicalAnd(BinaryNode):
    node_type: ClassVar[ASTNodeType] = ASTNodeType.LOGICAL_AND


@dataclass(frozen=True, eq=False, repr=False)
class LogicalOr(BinaryNode):
    node_type: ClassVar[ASTNodeType] = ASTNodeType.LOGICAL_OR


@dataclass(frozen=True, eq=False, repr=False)
class LogicalXor(BinaryNode):
    node_type: ClassVar[ASTNodeType] = ASTNodeType.LOGICAL_XOR


@dataclass(frozen=True, eq=False, repr=False)
class Assign(BinaryNode):
    """``let`` binding: left operand is always an Identifier."""
    node_type: ClassVar[ASTNodeType] = ASTNodeType.ASSIGN


class ASTPrinter(ASTVisitor):
    """Renders a tree as an S-expression, e.g. ``(Assign x (BinaryAddition 1 2))``."""

    def visit_Identifier(self, node: Identifier) -> str:
        return node.name.decode("ascii", "replace")

    def visit_IntegerLiteral(self, node: IntegerLiteral) -> str:
        return str(node.value)

    def visit_FloatLiteral(self, node: FloatLiteral) -> str:
        return str(node.value)

    def visit(self, node: ASTNode) -> str:
        # Post-order over an explicit stack; finished subtrees collect in results
        results: List[str] = []
        stack = [(node, False)]
        while stack:
            current, expanded = stack.pop()
            children = current.children()
            if not children:
                results.append(super().visit(current))
            elif expanded:
                parts = results[-len(children):]
                del results[-len(children):]
                results.append("(" + " ".join([current.node_type.value, *parts]) + ")")
            else:
                stack.append((current, True))
                stack.extend((child, False) for child in reversed(children))
        return results[0]
