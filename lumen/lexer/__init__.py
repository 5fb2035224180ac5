"""
Lumen Lexer Package

Implements a byte-driven finite state lexer for the Lumen language.

Key Features:
- Single pass, one byte of lookahead via the reconsume action
- Decimal, hexadecimal, octal and binary integer literals
- Decimal and scientific float literals ("3.", ".14", "3e10")
- Literals keep digit values; evaluation happens in later stages
- Fail-fast errors carrying the byte offset and source location

Author: xwest
"""

from .tokens import (
    Token, TokenType, SourceLocation,
    IntegerRepresentation, Decimal, Hexadecimal, Octal, Binary,
    FloatRepresentation, DecimalFloat, ScientificFloat,
    KEYWORDS,
)
from .lexer import Lexer, tokenize, tokenize_string
from .errors import Diagnostic, LumenError, LexerError, LexErrorKind

__all__ = [
    "Lexer",
    "tokenize",
    "tokenize_string",
    "Token",
    "TokenType",
    "SourceLocation",
    "IntegerRepresentation",
    "Decimal",
    "Hexadecimal",
    "Octal",
    "Binary",
    "FloatRepresentation",
    "DecimalFloat",
    "ScientificFloat",
    "KEYWORDS",
    "Diagnostic",
    "LumenError",
    "LexerError",
    "LexErrorKind",
]
