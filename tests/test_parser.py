"""
Test suite for the Lumen parser.

Tests cover:
- let statements and the cursor left after them
- Operator precedence and left associativity
- Parenthesized expressions
- UnexpectedToken errors with token positions
- Optional statement terminator enforcement

Author: xwest
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from lumen.config import FrontendConfig
from lumen.lexer.lexer import tokenize
from lumen.lexer.tokens import Token, TokenType, Decimal, Hexadecimal, DecimalFloat, ScientificFloat
from lumen.lexer.errors import LexerError
from lumen.parser.parser import Parser, parse, parse_string
from lumen.parser.errors import ParseError
from lumen.parser.ast_nodes import (
    Identifier, IntegerLiteral, FloatLiteral, Assign, BinaryOperation,
    BinaryAddition, BinarySubtraction, BinaryMultiplication, BinaryDivision,
)


def ident(name: str) -> Identifier:
    return Identifier(name.encode("ascii"))


def num(*digits: int) -> IntegerLiteral:
    return IntegerLiteral(Decimal(digits))


class TestLetStatement(unittest.TestCase):
    """The let statement form."""

    def test_end_to_end(self):
        tokens = tokenize(b"let x = 123;")
        parser = Parser(tokens)
        tree = parser.parse()

        self.assertEqual(tree, Assign(BinaryOperation(ident("x"), num(1, 2, 3))))
        # The terminator is left for the caller
        self.assertEqual(parser.current, 4)
        self.assertEqual(tokens[parser.current], Token(TokenType.SEMICOLON))

    def test_without_terminator(self):
        tree = parse(tokenize(b"let y = z"))
        self.assertEqual(tree, Assign.of(ident("y"), ident("z")))

    def test_literal_payloads_are_kept(self):
        self.assertEqual(parse_string("let h = 0x64").right,
                         IntegerLiteral(Hexadecimal([6, 4])))
        self.assertEqual(parse_string("let f = 3.14").right,
                         FloatLiteral(DecimalFloat([3], [1, 4])))
        self.assertEqual(parse_string("let e = .5e3").right,
                         FloatLiteral(ScientificFloat([], [5], [3])))

    def test_identifier_payload(self):
        tree = parse_string("let counter_2 = 1")
        self.assertEqual(tree.left, Identifier(b"counter_2"))

    def test_trailing_tokens_are_not_consumed(self):
        tokens = tokenize(b"let x = 1 2")
        parser = Parser(tokens)
        parser.parse()
        self.assertEqual(parser.current, 4)


class TestExpressions(unittest.TestCase):
    """Precedence tiers and associativity."""

    def test_multiplication_binds_tighter(self):
        tree = parse_string("let x = 1 + 2 * 3")
        self.assertEqual(tree, Assign.of(
            ident("x"),
            BinaryAddition.of(num(1), BinaryMultiplication.of(num(2), num(3))),
        ))

    def test_parentheses_override_precedence(self):
        tree = parse_string("let x = (1 + 2) * 3")
        self.assertEqual(tree, Assign.of(
            ident("x"),
            BinaryMultiplication.of(BinaryAddition.of(num(1), num(2)), num(3)),
        ))

    def test_subtraction_is_left_associative(self):
        tree = parse_string("let x = a - b - c")
        self.assertEqual(tree.right, BinarySubtraction.of(
            BinarySubtraction.of(ident("a"), ident("b")),
            ident("c"),
        ))

    def test_division_is_left_associative(self):
        tree = parse_string("let x = a / b * c")
        self.assertEqual(tree.right, BinaryMultiplication.of(
            BinaryDivision.of(ident("a"), ident("b")),
            ident("c"),
        ))

    def test_nested_parentheses(self):
        tree = parse_string("let x = ((a))")
        self.assertEqual(tree.right, ident("a"))

    def test_printer_output(self):
        tree = parse_string("let x = 1 + 2 * 3")
        self.assertEqual(str(tree), "(Assign x (BinaryAddition 1 (BinaryMultiplication 2 3)))")


class TestParseErrors(unittest.TestCase):
    """UnexpectedToken reporting."""

    def assertParseError(self, source: bytes, position: int, found: TokenType):
        with self.assertRaises(ParseError) as ctx:
            parse(tokenize(source))
        self.assertEqual(ctx.exception.position, position)
        self.assertEqual(ctx.exception.token.type, found)
        self.assertEqual(ctx.exception.diagnostic.code, "P001")
        return ctx.exception

    def test_leading_token_must_be_let(self):
        self.assertParseError(b"x = 1", 0, TokenType.IDENTIFIER)
        self.assertParseError(b"return 1", 0, TokenType.RETURN)

    def test_empty_input(self):
        self.assertParseError(b"", 0, TokenType.EOF)

    def test_missing_identifier(self):
        self.assertParseError(b"let = 1", 1, TokenType.ASSIGN)
        self.assertParseError(b"let let = 1", 1, TokenType.LET)

    def test_missing_assign(self):
        self.assertParseError(b"let x 1", 2, TokenType.INTEGER)
        self.assertParseError(b"let x == 1", 2, TokenType.EQUALS)

    def test_missing_expression(self):
        self.assertParseError(b"let x =", 3, TokenType.EOF)
        self.assertParseError(b"let x = ;", 3, TokenType.SEMICOLON)

    def test_missing_operand(self):
        self.assertParseError(b"let x = 1 +", 5, TokenType.EOF)
        self.assertParseError(b"let x = 1 * * 2", 5, TokenType.ASTERISK)

    def test_unclosed_parenthesis(self):
        error = self.assertParseError(b"let x = (1 + 2", 7, TokenType.EOF)
        self.assertIn("RIGHT_PARENTHESIS", str(error))

    def test_unwired_operators_are_rejected(self):
        self.assertParseError(b"let x = -1", 3, TokenType.MINUS)
        self.assertParseError(b"let x = not a", 3, TokenType.NOT)

    def test_logical_operator_ends_expression(self):
        tokens = tokenize(b"let x = a and b")
        parser = Parser(tokens)
        self.assertEqual(parser.parse(), Assign.of(ident("x"), ident("a")))
        self.assertEqual(tokens[parser.current], Token(TokenType.AND))

    def test_error_location(self):
        error = self.assertParseError(b"let x =\n  )", 3, TokenType.RIGHT_PARENTHESIS)
        self.assertEqual(error.location.line, 2)
        self.assertEqual(error.location.column, 3)
        self.assertIn("<string>:2:3", str(error))

    def test_lex_errors_surface_from_parse_string(self):
        with self.assertRaises(LexerError):
            parse_string("let x = 01")


class TestDeepInput(unittest.TestCase):
    """Long operator chains and deep parenthesis nesting."""

    def test_long_chain_parses_prints_and_hashes(self):
        source = "let x = " + " + ".join(["1"] * 1000)
        tree = parse_string(source)
        text = str(tree)
        self.assertTrue(text.startswith("(Assign x (BinaryAddition (BinaryAddition"))
        self.assertEqual(text.count("BinaryAddition"), 999)
        self.assertEqual(tree, parse_string(source))
        self.assertEqual(hash(tree), hash(parse_string(source)))
        self.assertNotEqual(tree, parse_string(source + " + 1"))

    def test_nesting_up_to_the_limit(self):
        source = b"let x = " + b"(" * 100 + b"1" + b")" * 100
        self.assertEqual(parse(tokenize(source)), Assign.of(ident("x"), num(1)))

    def test_nesting_past_the_limit(self):
        source = b"let x = " + b"(" * 200 + b"1" + b")" * 200
        with self.assertRaises(ParseError) as ctx:
            parse(tokenize(source))
        self.assertEqual(ctx.exception.position, 103)
        self.assertEqual(ctx.exception.token.type, TokenType.LEFT_PARENTHESIS)

    def test_deep_unclosed_nesting(self):
        with self.assertRaises(ParseError) as ctx:
            parse_string("let x = " + "(" * 300)
        self.assertEqual(ctx.exception.position, 103)

    def test_configured_limit(self):
        config = FrontendConfig(max_nesting_depth=2)
        self.assertEqual(parse(tokenize(b"let x = ((1))"), config), Assign.of(ident("x"), num(1)))
        with self.assertRaises(ParseError) as ctx:
            parse(tokenize(b"let x = (((1)))"), config)
        self.assertEqual(ctx.exception.position, 5)
        self.assertIn("nested at most 2 deep", str(ctx.exception))


class TestStatementTerminator(unittest.TestCase):
    """require_statement_terminator configuration."""

    def setUp(self):
        self.config = FrontendConfig(require_statement_terminator=True)

    def test_terminator_is_consumed(self):
        tokens = tokenize(b"let x = 1; let")
        parser = Parser(tokens, self.config)
        parser.parse()
        self.assertEqual(parser.current, 5)
        self.assertEqual(tokens[parser.current], Token(TokenType.LET))

    def test_missing_terminator(self):
        with self.assertRaises(ParseError) as ctx:
            parse_string("let x = 1", config=self.config)
        self.assertEqual(ctx.exception.token.type, TokenType.EOF)
        self.assertEqual(ctx.exception.expected, "SEMICOLON")


if __name__ == '__main__':
    unittest.main()
