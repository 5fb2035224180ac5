"""
Token definitions for the Lumen lexer.

This module defines all token types supported by Lumen, including:
- Punctuation and operators (+, -, ->, ==, brackets, ...)
- Keywords (and, else, false, function, if, lambda, let, ...)
- Identifiers (raw byte spelling)
- Integer and float literals, stored as digit values rather than text

Author: xwest
"""

from enum import Enum, auto
from dataclasses import dataclass, field
from typing import ClassVar, Optional, Tuple, Union


class TokenType(Enum):
    """
    Enumeration of all token types in Lumen.

    Organized by category for clarity and maintainability.
    """

    # ========================================================================
    # Special Tokens
    # ========================================================================
    EOF = auto()                    # End of input (parser sentinel only)

    # ========================================================================
    # Literals and Identifiers
    # ========================================================================
    IDENTIFIER = auto()             # x, _tmp, letx
    INTEGER = auto()                # 42, 0x2A, 0o52, 0b101010
    FLOAT = auto()                  # 3.14, 3., .14, 1.5e10

    # ========================================================================
    # Keywords
    # ========================================================================
    AND = auto()                    # and
    ELSE = auto()                   # else
    FALSE = auto()                  # false
    FUNCTION = auto()               # function
    IF = auto()                     # if
    LAMBDA = auto()                 # lambda
    LET = auto()                    # let
    NOT = auto()                    # not
    OR = auto()                     # or
    RETURN = auto()                 # return
    TRUE = auto()                   # true
    XOR = auto()                    # xor

    # ========================================================================
    # Operators
    # ========================================================================
    PLUS = auto()                   # +
    MINUS = auto()                  # -
    ASTERISK = auto()               # *
    FORWARD_SLASH = auto()          # /
    ASSIGN = auto()                 # =
    EQUALS = auto()                 # ==
    RIGHT_ARROW = auto()            # ->

    # ========================================================================
    # Punctuation and Delimiters
    # ========================================================================
    DOT = auto()                    # .
    COMMA = auto()                  # ,
    COLON = auto()                  # :
    SEMICOLON = auto()              # ;
    LEFT_PARENTHESIS = auto()       # (
    RIGHT_PARENTHESIS = auto()      # )
    LEFT_BRACKET = auto()           # [
    RIGHT_BRACKET = auto()          # ]
    LEFT_BRACE = auto()             # {
    RIGHT_BRACE = auto()            # }


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source buffer.

    Used for error reporting and debugging information.
    """
    filename: str
    line: int
    column: int
    offset: int  # Byte offset from start of buffer

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


# ============================================================================
# Numeric literal representations
# ============================================================================

def _check_digits(digits: Tuple[int, ...], radix: int, kind: str) -> None:
    for digit in digits:
        if not 0 <= digit < radix:
            raise ValueError(f"{kind} digit {digit} out of range for radix {radix}")


@dataclass(frozen=True)
class IntegerRepresentation:
    """
    Base class for integer literal digit sequences.

    Digits are stored as values (0-15), most significant first. Turning them
    into a machine number is left to later compilation stages.
    """
    digits: Tuple[int, ...]

    radix: ClassVar[int] = 10
    prefix: ClassVar[str] = ""

    def __post_init__(self):
        # Accept any iterable of ints but always store a tuple
        object.__setattr__(self, "digits", tuple(self.digits))
        _check_digits(self.digits, self.radix, type(self).__name__)

    def __str__(self) -> str:
        return self.prefix + "".join("0123456789abcdef"[d] for d in self.digits)


@dataclass(frozen=True)
class Decimal(IntegerRepresentation):
    """Base 10 integer, e.g. ``47``."""
    radix: ClassVar[int] = 10
    prefix: ClassVar[str] = ""


@dataclass(frozen=True)
class Hexadecimal(IntegerRepresentation):
    """Base 16 integer, e.g. ``0x64``."""
    radix: ClassVar[int] = 16
    prefix: ClassVar[str] = "0x"


@dataclass(frozen=True)
class Octal(IntegerRepresentation):
    """Base 8 integer, e.g. ``0o77``."""
    radix: ClassVar[int] = 8
    prefix: ClassVar[str] = "0o"


@dataclass(frozen=True)
class Binary(IntegerRepresentation):
    """Base 2 integer, e.g. ``0b1010``."""
    radix: ClassVar[int] = 2
    prefix: ClassVar[str] = "0b"


@dataclass(frozen=True)
class FloatRepresentation:
    """
    Base class for float literal digit sequences (always base 10).

    Either part may be empty: ``3.`` has no fractional digits and ``.14``
    has no integer digits.
    """
    integer: Tuple[int, ...]
    fractional: Tuple[int, ...]

    def __post_init__(self):
        object.__setattr__(self, "integer", tuple(self.integer))
        object.__setattr__(self, "fractional", tuple(self.fractional))
        _check_digits(self.integer, 10, "integer")
        _check_digits(self.fractional, 10, "fractional")

    def __str__(self) -> str:
        return _join_digits(self.integer) + "." + _join_digits(self.fractional)


@dataclass(frozen=True)
class DecimalFloat(FloatRepresentation):
    """Plain float, e.g. ``3.14``."""


@dataclass(frozen=True)
class ScientificFloat(FloatRepresentation):
    """Float with an exponent part, e.g. ``3.14e10`` or ``3e10``."""
    exponent: Tuple[int, ...] = ()

    def __post_init__(self):
        super().__post_init__()
        object.__setattr__(self, "exponent", tuple(self.exponent))
        _check_digits(self.exponent, 10, "exponent")

    def __str__(self) -> str:
        mantissa = _join_digits(self.integer)
        if self.fractional or not self.integer:
            mantissa += "." + _join_digits(self.fractional)
        return f"{mantissa}e{_join_digits(self.exponent)}"


def _join_digits(digits: Tuple[int, ...]) -> str:
    return "".join(str(d) for d in digits)


TokenValue = Union[bytes, IntegerRepresentation, FloatRepresentation, None]


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token in the Lumen language.

    Only ``type`` and ``value`` take part in equality, so a token found at
    any position compares equal to ``Token(TokenType.LET)``. ``lexeme`` and
    ``location`` are kept for diagnostics.
    """
    type: TokenType
    value: TokenValue = None                # bytes, digit representation or None
    lexeme: bytes = field(default=b"", compare=False)
    location: Optional[SourceLocation] = field(default=None, compare=False)

    def __str__(self) -> str:
        if self.type == TokenType.IDENTIFIER:
            return f"IDENTIFIER({self.value.decode('ascii', 'replace')!r})"
        if self.value is not None:
            return f"{self.type.name}({self.value})"
        return self.type.name

    def __repr__(self) -> str:
        if self.value is None:
            return f"Token({self.type.name})"
        return f"Token({self.type.name}, {self.value!r})"

    @property
    def is_literal(self) -> bool:
        """Check if this token is a numeric literal."""
        return self.type in {TokenType.INTEGER, TokenType.FLOAT}

    @property
    def is_keyword(self) -> bool:
        """Check if this token is a keyword."""
        return self.type in KEYWORD_TYPES

    @property
    def is_identifier(self) -> bool:
        """Check if this token is an identifier."""
        return self.type == TokenType.IDENTIFIER


# Lookup tables used by the lexer for keyword and punctuation recognition

KEYWORDS = {
    b"and": TokenType.AND,
    b"else": TokenType.ELSE,
    b"false": TokenType.FALSE,
    b"function": TokenType.FUNCTION,
    b"if": TokenType.IF,
    b"lambda": TokenType.LAMBDA,
    b"let": TokenType.LET,
    b"not": TokenType.NOT,
    b"or": TokenType.OR,
    b"return": TokenType.RETURN,
    b"true": TokenType.TRUE,
    b"xor": TokenType.XOR,
}

KEYWORD_TYPES = frozenset(KEYWORDS.values())

# Single-byte punctuation emitted straight from the start state
PUNCTUATION = {
    ord("+"): TokenType.PLUS,
    ord("*"): TokenType.ASTERISK,
    ord("/"): TokenType.FORWARD_SLASH,
    ord(","): TokenType.COMMA,
    ord(":"): TokenType.COLON,
    ord(";"): TokenType.SEMICOLON,
    ord("("): TokenType.LEFT_PARENTHESIS,
    ord(")"): TokenType.RIGHT_PARENTHESIS,
    ord("["): TokenType.LEFT_BRACKET,
    ord("]"): TokenType.RIGHT_BRACKET,
    ord("{"): TokenType.LEFT_BRACE,
    ord("}"): TokenType.RIGHT_BRACE,
}
