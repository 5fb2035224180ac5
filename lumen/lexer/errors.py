"""
Error handling for the Lumen lexer.

Provides error reporting with source location information and stable
error codes. The lexer is fail-fast: the first invalid byte aborts
tokenization and no partial token list is returned.

Author: xwest
"""

from enum import Enum
from typing import Optional
from dataclasses import dataclass

from .tokens import SourceLocation


@dataclass
class Diagnostic:
    """Diagnostic record shared by lexer and parser errors."""
    message: str
    location: Optional[SourceLocation]
    severity: str  # "error", "warning"
    code: Optional[str] = None
    help_text: Optional[str] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        if self.code:
            severity_prefix += f"[{self.code}]"
        result = f"{severity_prefix}: {self.message}\n"
        if self.location is not None:
            result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        return result


class LumenError(Exception):
    """Base class for every error raised by the Lumen front end."""

    diagnostic: Diagnostic

    def __str__(self) -> str:
        return str(self.diagnostic)


class LexErrorKind(Enum):
    """The ways tokenization can fail."""
    UNEXPECTED_BYTE = "L001"
    INVALID_NUMBER_DIGIT = "L002"
    LEADING_ZERO_WITHOUT_BASE = "L003"
    INVALID_HEXADECIMAL_DIGIT = "L004"
    INVALID_OCTAL_DIGIT = "L005"
    INVALID_BINARY_DIGIT = "L006"
    MISSING_DIGITS_AFTER_BASE_PREFIX = "L007"
    MISSING_DIGITS_AFTER_EXPONENT_MARK = "L008"

    @property
    def code(self) -> str:
        return self.value


# Common error codes for categorization
ERROR_CODES = {
    "L001": "Unexpected byte",
    "L002": "Invalid digit in number literal",
    "L003": "Leading zero without base prefix",
    "L004": "Invalid hexadecimal digit",
    "L005": "Invalid octal digit",
    "L006": "Invalid binary digit",
    "L007": "Missing digits after base prefix",
    "L008": "Missing digits after exponent mark",
}

_HELP_TEXT = {
    LexErrorKind.UNEXPECTED_BYTE:
        "Only ASCII letters, digits, whitespace and the operators "
        "+ - * / . , : ; = ( ) [ ] { } may appear in Lumen source.",
    LexErrorKind.INVALID_NUMBER_DIGIT:
        "Only 'x', 'o' or 'b' may follow a leading zero.",
    LexErrorKind.LEADING_ZERO_WITHOUT_BASE:
        "Decimal literals cannot start with 0; use 0o for octal.",
    LexErrorKind.INVALID_HEXADECIMAL_DIGIT:
        "Hexadecimal digits are 0-9, a-f and A-F.",
    LexErrorKind.INVALID_OCTAL_DIGIT:
        "Octal digits are 0-7.",
    LexErrorKind.INVALID_BINARY_DIGIT:
        "Binary digits are 0 and 1.",
    LexErrorKind.MISSING_DIGITS_AFTER_BASE_PREFIX:
        "A base prefix must be followed by at least one digit.",
    LexErrorKind.MISSING_DIGITS_AFTER_EXPONENT_MARK:
        "An exponent mark 'e' must be followed by at least one digit.",
}


class LexerError(LumenError):
    """
    Exception raised when the lexer encounters an invalid byte or an
    invalid end of input.

    ``offset`` is the offset of the triggering byte, or the buffer length
    when the failure is only detected at end of input.
    """

    def __init__(
        self,
        kind: LexErrorKind,
        offset: int,
        location: Optional[SourceLocation] = None,
        message: Optional[str] = None,
    ):
        message = message or f"{ERROR_CODES[kind.code]} at offset {offset}"
        super().__init__(message)
        self.kind = kind
        self.offset = offset
        self.location = location
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=kind.code,
            help_text=_HELP_TEXT[kind],
        )

    def __repr__(self) -> str:
        return f"LexerError({self.kind.name}, {self.offset})"


# Helper functions for creating common errors

def create_unexpected_byte_error(byte: int, offset: int,
                                 location: Optional[SourceLocation] = None) -> LexerError:
    """Create an error for a byte that cannot start any token."""
    if 0x20 < byte < 0x7F:
        shown = repr(chr(byte))
    else:
        shown = f"0x{byte:02X}"
    return LexerError(
        LexErrorKind.UNEXPECTED_BYTE,
        offset,
        location,
        message=f"Unexpected byte {shown} at offset {offset}",
    )


def create_number_error(kind: LexErrorKind, offset: int,
                        location: Optional[SourceLocation] = None) -> LexerError:
    """Create an error for a malformed numeric literal."""
    return LexerError(kind, offset, location)
