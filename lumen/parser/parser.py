"""
Lumen Recursive Descent Parser

Turns the lexer's token list into a single AST. One forward cursor, one
token of lookahead. Reading past the end yields an EOF sentinel instead of
failing, so grammar rules can peek and consume without bounds checks.

Grammar (lowest precedence first, binary operators left-associative):

    statement  := 'let' IDENTIFIER '=' expression
    expression := term
    term       := factor (('+' | '-') factor)*
    factor     := primary (('*' | '/') primary)*
    primary    := IDENTIFIER | INTEGER | FLOAT | '(' expression ')'

Logical operators and unary signs have tokens and node classes but no
production yet. New precedence levels slot in as further
_parse_left_associative tiers.

Author: xwest
"""

from typing import Callable, Dict, Optional, Sequence, Type, Union

from ..config import FrontendConfig, resolve_config
from ..utils.logger import get_logger
from ..lexer.lexer import tokenize
from ..lexer.tokens import Token, TokenType
from .ast_nodes import (
    ASTNode, BinaryNode, Identifier, IntegerLiteral, FloatLiteral, Assign,
    BinaryAddition, BinarySubtraction, BinaryMultiplication, BinaryDivision,
)
from .errors import ParseError, create_unexpected_token_error

logger = get_logger(__name__)


# Operator tables for each binary precedence tier
TERM_OPERATORS: Dict[TokenType, Type[BinaryNode]] = {
    TokenType.PLUS: BinaryAddition,
    TokenType.MINUS: BinarySubtraction,
}

FACTOR_OPERATORS: Dict[TokenType, Type[BinaryNode]] = {
    TokenType.ASTERISK: BinaryMultiplication,
    TokenType.FORWARD_SLASH: BinaryDivision,
}


class Parser:
    """
    Lumen recursive descent parser.

    ``current`` is the index of the next unconsumed token; after a
    successful ``parse`` it points just past the statement.
    """

    def __init__(self, tokens: Sequence[Token], config: Optional[FrontendConfig] = None):
        """
        Initialize parser with a list of tokens.

        Args:
            tokens: Tokens from the lexer (no EOF marker needed)
            config: Front end configuration
        """
        self.tokens = tokens
        self.current = 0
        self.config = resolve_config(config)
        self._eof = Token(TokenType.EOF)
        self._depth = 0

    def parse(self) -> ASTNode:
        """
        Parse one statement from the token list.

        Returns:
            The statement's AST

        Raises:
            ParseError: On the first unexpected token
        """
        self._depth = 0
        try:
            node = self._parse_statement()
        except ParseError as e:
            logger.debug("parse failed at token %d: %s", e.position, e.diagnostic.message)
            raise

        logger.debug("parsed %d of %d tokens", self.current, len(self.tokens))
        return node

    # Statements

    def _parse_statement(self) -> ASTNode:
        if self._check(TokenType.LET):
            return self._parse_let_statement()

        raise create_unexpected_token_error("statement ('let')", self._peek(), self.current)

    def _parse_let_statement(self) -> Assign:
        """Parse ``let IDENTIFIER = expression``."""
        self._consume(TokenType.LET)
        name_token = self._consume(TokenType.IDENTIFIER)
        self._consume(TokenType.ASSIGN)

        value = self._parse_expression()

        if self.config.require_statement_terminator:
            self._consume(TokenType.SEMICOLON)

        return Assign.of(Identifier(name_token.value), value)

    # Expressions

    def _parse_expression(self) -> ASTNode:
        return self._parse_term()

    def _parse_term(self) -> ASTNode:
        return self._parse_left_associative(self._parse_factor, TERM_OPERATORS)

    def _parse_factor(self) -> ASTNode:
        return self._parse_left_associative(self._parse_primary, FACTOR_OPERATORS)

    def _parse_left_associative(self, parse_operand: Callable[[], ASTNode],
                                operators: Dict[TokenType, Type[BinaryNode]]) -> ASTNode:
        """Parse ``operand (op operand)*`` into a left-leaning tree."""
        left = parse_operand()

        while True:
            node_class = operators.get(self._peek().type)
            if node_class is None:
                return left
            self._advance()
            right = parse_operand()
            left = node_class.of(left, right)

    def _parse_primary(self) -> ASTNode:
        token = self._peek()

        if token.type == TokenType.IDENTIFIER:
            self._advance()
            return Identifier(token.value)
        if token.type == TokenType.INTEGER:
            self._advance()
            return IntegerLiteral(token.value)
        if token.type == TokenType.FLOAT:
            self._advance()
            return FloatLiteral(token.value)
        if token.type == TokenType.LEFT_PARENTHESIS:
            # Each nesting level costs several Python frames
            if self._depth >= self.config.max_nesting_depth:
                raise create_unexpected_token_error(
                    f"expression nested at most {self.config.max_nesting_depth} deep",
                    token, self.current)
            self._advance()
            self._depth += 1
            node = self._parse_expression()
            self._consume(TokenType.RIGHT_PARENTHESIS)
            self._depth -= 1
            return node

        raise create_unexpected_token_error("expression", token, self.current)

    # Utility methods

    def _peek(self) -> Token:
        """Return current token without consuming; EOF sentinel past the end."""
        if self.current < len(self.tokens):
            return self.tokens[self.current]
        return self._eof

    def _advance(self) -> Token:
        """Consume and return current token."""
        token = self._peek()
        if not self._is_at_end():
            self.current += 1
        return token

    def _is_at_end(self) -> bool:
        return self.current >= len(self.tokens)

    def _check(self, token_type: TokenType) -> bool:
        """Check if current token matches type without consuming."""
        return self._peek().type == token_type

    def _consume(self, token_type: TokenType) -> Token:
        """Consume token of expected type or raise error."""
        if self._check(token_type):
            return self._advance()

        raise create_unexpected_token_error(token_type, self._peek(), self.current)


def parse(tokens: Sequence[Token], config: Optional[FrontendConfig] = None) -> ASTNode:
    """
    Parse a token list into an AST.

    Raises:
        ParseError: If parsing fails
    """
    return Parser(tokens, config).parse()


def parse_string(source: Union[str, bytes], filename: str = "<string>",
                 config: Optional[FrontendConfig] = None) -> ASTNode:
    """
    Convenience function to tokenize and parse a source string.

    Args:
        source: Source code as text or raw bytes
        filename: Filename for error reporting (ignored when config is given)
        config: Front end configuration

    Returns:
        Statement AST

    Raises:
        LexerError: If lexing fails
        ParseError: If parsing fails
    """
    if config is None:
        config = FrontendConfig(filename=filename)
    if isinstance(source, str):
        source = source.encode("utf-8")

    tokens = tokenize(source, config)
    return Parser(tokens, config).parse()
