"""
Error handling for the Lumen parser.

The parser is fail-fast: the first grammar violation raises a ParseError
and no partial tree is returned. Every error records the offending token,
its index in the token list and, when known, its source location.

Author: xwest
"""

from typing import Optional, Union

from ..lexer.tokens import Token, TokenType
from ..lexer.errors import Diagnostic, LumenError


# Common parser error codes for categorization
PARSER_ERROR_CODES = {
    "P001": "Unexpected token",
}


class ParseError(LumenError):
    """
    Exception raised when the parser meets a token the grammar does not
    allow at that point.

    Attributes:
        token: The offending token (the EOF sentinel at end of input)
        position: Index of the offending token in the token list
        expected: Human readable description of what was expected
    """

    code = "P001"

    def __init__(
        self,
        message: str,
        token: Token,
        position: int,
        expected: Optional[str] = None,
        help_text: Optional[str] = None,
    ):
        super().__init__(message)
        self.token = token
        self.position = position
        self.expected = expected
        self.diagnostic = Diagnostic(
            message=message,
            location=token.location,
            severity="error",
            code=self.code,
            help_text=help_text,
        )

    @property
    def location(self):
        return self.token.location

    def __repr__(self) -> str:
        return f"ParseError(UnexpectedToken, {self.token!r}, position={self.position})"


def _describe(token: Token) -> str:
    if token.type == TokenType.EOF:
        return "end of input"
    if token.lexeme:
        return f"{token.type.name} {token.lexeme.decode('ascii', 'replace')!r}"
    return token.type.name


def create_unexpected_token_error(expected: Union[TokenType, str], found: Token,
                                  position: int) -> ParseError:
    """Create an error for an unexpected token."""
    expected_str = expected.name if isinstance(expected, TokenType) else expected
    found_str = _describe(found)

    return ParseError(
        message=f"Expected {expected_str}, found {found_str}",
        token=found,
        position=position,
        expected=expected_str,
        help_text=f"The parser expected to see {expected_str} at this position, "
                  f"but found {found_str} instead.",
    )
