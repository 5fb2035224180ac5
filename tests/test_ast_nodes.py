"""
Tests for AST node structure, visitors and printing.

Author: xwest
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from lumen.lexer.tokens import Decimal, Octal, Binary, DecimalFloat, ScientificFloat
from lumen.parser.ast_nodes import (
    ASTNodeType, ASTVisitor, ASTPrinter, UnaryOperation, BinaryOperation,
    Identifier, IntegerLiteral, FloatLiteral,
    UnaryAddition, UnarySubtraction, LogicalNot,
    BinaryAddition, BinarySubtraction, LogicalAnd, LogicalOr, LogicalXor, Assign,
    UnaryNode, BinaryNode,
)


class IdentifierCollector(ASTVisitor):
    """Collects identifier names in visiting order."""

    def __init__(self):
        self.names = []

    def visit_Identifier(self, node):
        self.names.append(node.name)


class TestASTNodes(unittest.TestCase):
    """Node construction and equality."""

    def test_structural_equality(self):
        first = BinaryAddition.of(Identifier(b"a"), IntegerLiteral(Decimal([1])))
        second = BinaryAddition(BinaryOperation(Identifier(b"a"), IntegerLiteral(Decimal([1]))))
        self.assertEqual(first, second)
        self.assertEqual(hash(first), hash(second))

    def test_kind_matters_for_equality(self):
        operands = (Identifier(b"a"), Identifier(b"b"))
        self.assertNotEqual(BinaryAddition.of(*operands), BinarySubtraction.of(*operands))
        self.assertNotEqual(LogicalAnd.of(*operands), LogicalOr.of(*operands))

    def test_node_types(self):
        self.assertEqual(Identifier(b"a").node_type, ASTNodeType.IDENTIFIER)
        self.assertEqual(LogicalXor.of(Identifier(b"a"), Identifier(b"b")).node_type,
                         ASTNodeType.LOGICAL_XOR)
        self.assertEqual(LogicalNot.of(Identifier(b"a")).node_type, ASTNodeType.LOGICAL_NOT)

    def test_children(self):
        left, right = Identifier(b"a"), IntegerLiteral(Decimal([2]))
        node = Assign.of(left, right)
        self.assertEqual(node.children(), [left, right])
        self.assertIs(node.left, left)
        self.assertIs(node.right, right)

        unary = UnarySubtraction(UnaryOperation(left))
        self.assertEqual(unary.children(), [left])
        self.assertIs(unary.operand, left)
        self.assertEqual(Identifier(b"a").children(), [])

    def test_base_classes_cannot_be_instantiated(self):
        with self.assertRaises(TypeError):
            BinaryNode.of(Identifier(b"a"), Identifier(b"b"))
        with self.assertRaises(TypeError):
            UnaryNode.of(Identifier(b"a"))

    def test_leaf_and_operator_are_unequal(self):
        node = UnaryAddition.of(Identifier(b"a"))
        self.assertNotEqual(node, Identifier(b"a"))
        self.assertNotEqual(node, UnarySubtraction.of(Identifier(b"a")))
        self.assertIn("UnaryAddition", repr(node))

    def test_nodes_are_immutable(self):
        node = Identifier(b"a")
        with self.assertRaises(AttributeError):
            node.name = b"b"


class TestVisitors(unittest.TestCase):
    """Visitor dispatch and the S-expression printer."""

    def test_generic_visit_walks_children_in_order(self):
        tree = Assign.of(
            Identifier(b"x"),
            BinaryAddition.of(Identifier(b"a"), UnaryAddition.of(Identifier(b"b"))),
        )
        collector = IdentifierCollector()
        tree.accept(collector)
        self.assertEqual(collector.names, [b"x", b"a", b"b"])

    def test_printer_literals(self):
        printer = ASTPrinter()
        self.assertEqual(printer.visit(IntegerLiteral(Octal([7, 7]))), "0o77")
        self.assertEqual(printer.visit(IntegerLiteral(Binary([1, 0]))), "0b10")
        self.assertEqual(printer.visit(FloatLiteral(DecimalFloat([3], []))), "3.")
        self.assertEqual(printer.visit(FloatLiteral(DecimalFloat([], [1, 4]))), ".14")
        self.assertEqual(printer.visit(FloatLiteral(ScientificFloat([3], [1, 4], [1, 0]))), "3.14e10")

    def test_printer_reserved_nodes(self):
        tree = LogicalNot.of(LogicalOr.of(Identifier(b"p"), Identifier(b"q")))
        self.assertEqual(str(tree), "(LogicalNot (LogicalOr p q))")


if __name__ == '__main__':
    unittest.main()
