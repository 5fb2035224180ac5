"""
Lumen Lexer - turns a byte buffer into tokens

A single-pass finite state machine. Each state looks at exactly one byte
and either keeps it, emits a token and keeps it, or emits a token and hands
the byte back to the start state ("reconsume"). That last action is what
gives maximal munch without a lookahead buffer.

Numbers are never converted to Python ints or floats here. Literals keep
their digit values (see IntegerRepresentation / FloatRepresentation).

xwest
"""

from enum import Enum, auto
from typing import Callable, Dict, List, Optional

from ..config import FrontendConfig, resolve_config
from ..utils.logger import get_logger
from .tokens import (
    Token, TokenType, SourceLocation, KEYWORDS, PUNCTUATION,
    Decimal, Hexadecimal, Octal, Binary, DecimalFloat, ScientificFloat,
)
from .errors import (
    LexerError, LexErrorKind, create_unexpected_byte_error, create_number_error
)

logger = get_logger(__name__)


# Byte classes
_DIGITS = frozenset(b"0123456789")
_LETTERS = frozenset(b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz")
_IDENTIFIER_START = _LETTERS | {ord("_")}
_IDENTIFIER_CONTINUE = _IDENTIFIER_START | _DIGITS
_ALPHANUMERIC = _LETTERS | _DIGITS
_WHITESPACE = frozenset(b" \t\r\n")
_OCTAL_DIGITS = frozenset(b"01234567")
_BINARY_DIGITS = frozenset(b"01")

_ZERO = ord("0")
_LOWER_A = ord("a")
_UPPER_A = ord("A")
_NEWLINE = ord("\n")


class State(Enum):
    """Lexer FSM states."""
    START = auto()
    IDENTIFIER = auto()
    ZERO = auto()
    DOT = auto()
    INTEGER = auto()
    HEXADECIMAL = auto()
    OCTAL = auto()
    BINARY = auto()
    FRACTIONAL = auto()
    EXPONENT = auto()
    EQUALS = auto()
    MINUS = auto()


class Action(Enum):
    """What the driver does with the byte after a state handler ran."""
    CONTINUE = auto()   # byte consumed, move to the next one
    AGAIN = auto()      # token emitted, offer the same byte to START


def _hex_value(byte: int) -> Optional[int]:
    if byte in _DIGITS:
        return byte - _ZERO
    if _LOWER_A <= byte <= ord("f"):
        return 10 + (byte - _LOWER_A)
    if _UPPER_A <= byte <= ord("F"):
        return 10 + (byte - _UPPER_A)
    return None


class Lexer:
    """
    Lumen lexical analyzer.

    Converts a byte buffer into a list of tokens. The instance can be reused;
    every call to ``tokenize`` starts from a clean state.
    """

    def __init__(self, config: Optional[FrontendConfig] = None):
        """
        Initialize the lexer.

        Args:
            config: Front end configuration (filename used in locations)
        """
        self.config = resolve_config(config)
        self._handlers: Dict[State, Callable[[int], Action]] = {
            State.START: self._run_start,
            State.IDENTIFIER: self._run_identifier,
            State.ZERO: self._run_zero,
            State.DOT: self._run_dot,
            State.INTEGER: self._run_integer,
            State.HEXADECIMAL: self._run_hexadecimal,
            State.OCTAL: self._run_octal,
            State.BINARY: self._run_binary,
            State.FRACTIONAL: self._run_fractional,
            State.EXPONENT: self._run_exponent,
            State.EQUALS: self._run_equals,
            State.MINUS: self._run_minus,
        }
        self._reset(b"")

    def _reset(self, source: bytes):
        self.source = source
        self.state = State.START
        self.pos = 0
        self.line = 1
        self.column = 1

        # Scratch buffers, cleared after every emitted token
        self.identifier = bytearray()
        self.integer: List[int] = []
        self.fractional: List[int] = []
        self.exponent: List[int] = []

        self.tokens: List[Token] = []
        self._start = 0
        self._start_location: Optional[SourceLocation] = None

    def tokenize(self, source: bytes) -> List[Token]:
        """
        Tokenize an entire byte buffer.

        Args:
            source: Raw source bytes

        Returns:
            Tokens in source order (no EOF marker)

        Raises:
            LexerError: On the first invalid byte or invalid end of input
        """
        if isinstance(source, str):
            raise TypeError("tokenize() expects bytes; use tokenize_string() for text")
        if not isinstance(source, (bytes, bytearray, memoryview)):
            raise TypeError(f"tokenize() expects bytes, not {type(source).__name__}")

        self._reset(bytes(source))

        try:
            for byte in self.source:
                self._feed_byte(byte)
                self._advance(byte)

            self._feed_eof()
        except LexerError as e:
            logger.debug("tokenize failed: %s", e.diagnostic.message)
            raise

        tokens = self.tokens
        self.tokens = []
        logger.debug("tokenized %d bytes into %d tokens", len(self.source), len(tokens))
        return tokens

    # Driver

    def _feed_byte(self, byte: int):
        handlers = self._handlers
        while handlers[self.state](byte) is Action.AGAIN:
            pass

    def _feed_eof(self):
        """Flush whatever token is pending once the buffer is exhausted."""
        state = self.state
        end = len(self.source)

        if state is State.START:
            return
        elif state is State.IDENTIFIER:
            self._classify_identifier(end)
        elif state is State.ZERO:
            self._emit(TokenType.INTEGER, Decimal((0,)), end)
        elif state is State.DOT:
            self._emit(TokenType.DOT, None, end)
        elif state is State.INTEGER:
            self._emit_integer(Decimal, end)
        elif state is State.HEXADECIMAL:
            self._finish_radix(Hexadecimal, end)
        elif state is State.OCTAL:
            self._finish_radix(Octal, end)
        elif state is State.BINARY:
            self._finish_radix(Binary, end)
        elif state is State.FRACTIONAL:
            self._emit_decimal_float(end)
        elif state is State.EXPONENT:
            if not self.exponent:
                raise self._error(LexErrorKind.MISSING_DIGITS_AFTER_EXPONENT_MARK)
            self._emit_scientific_float(end)
        elif state is State.EQUALS:
            self._emit(TokenType.ASSIGN, None, end)
        elif state is State.MINUS:
            self._emit(TokenType.MINUS, None, end)

        self.state = State.START

    # State handlers

    def _run_start(self, byte: int) -> Action:
        if byte in _WHITESPACE:
            return Action.CONTINUE

        self._mark_start()

        if byte in _IDENTIFIER_START:
            self.identifier.append(byte)
            self.state = State.IDENTIFIER
        elif byte == _ZERO:
            self.state = State.ZERO
        elif byte in _DIGITS:
            self.integer.append(byte - _ZERO)
            self.state = State.INTEGER
        elif byte in PUNCTUATION:
            self._emit(PUNCTUATION[byte], None, self.pos + 1)
        elif byte == ord("."):
            self.state = State.DOT
        elif byte == ord("="):
            self.state = State.EQUALS
        elif byte == ord("-"):
            self.state = State.MINUS
        else:
            raise create_unexpected_byte_error(byte, self.pos, self._location())

        return Action.CONTINUE

    def _run_identifier(self, byte: int) -> Action:
        if byte in _IDENTIFIER_CONTINUE:
            self.identifier.append(byte)
            return Action.CONTINUE

        self._classify_identifier(self.pos)
        return self._restart()

    def _run_zero(self, byte: int) -> Action:
        if byte == ord("x"):
            self.state = State.HEXADECIMAL
        elif byte == ord("o"):
            self.state = State.OCTAL
        elif byte == ord("b"):
            self.state = State.BINARY
        elif byte == ord("."):
            self.integer.append(0)
            self.state = State.FRACTIONAL
        elif byte in _DIGITS:
            raise self._error(LexErrorKind.LEADING_ZERO_WITHOUT_BASE)
        elif byte in _LETTERS:
            raise self._error(LexErrorKind.INVALID_NUMBER_DIGIT)
        else:
            self._emit(TokenType.INTEGER, Decimal((0,)), self.pos)
            return self._restart()

        return Action.CONTINUE

    def _run_dot(self, byte: int) -> Action:
        if byte in _DIGITS:
            self.fractional.append(byte - _ZERO)
            self.state = State.FRACTIONAL
            return Action.CONTINUE

        self._emit(TokenType.DOT, None, self.pos)
        return self._restart()

    def _run_integer(self, byte: int) -> Action:
        if byte in _DIGITS:
            self.integer.append(byte - _ZERO)
        elif byte == ord("."):
            self.state = State.FRACTIONAL
        elif byte == ord("e"):
            self.state = State.EXPONENT
        else:
            self._emit_integer(Decimal, self.pos)
            return self._restart()

        return Action.CONTINUE

    def _run_hexadecimal(self, byte: int) -> Action:
        value = _hex_value(byte)
        if value is not None:
            self.integer.append(value)
            return Action.CONTINUE
        if byte in _LETTERS:
            raise self._error(LexErrorKind.INVALID_HEXADECIMAL_DIGIT)

        return self._end_radix(Hexadecimal)

    def _run_octal(self, byte: int) -> Action:
        if byte in _OCTAL_DIGITS:
            self.integer.append(byte - _ZERO)
            return Action.CONTINUE
        if byte in _ALPHANUMERIC:
            raise self._error(LexErrorKind.INVALID_OCTAL_DIGIT)

        return self._end_radix(Octal)

    def _run_binary(self, byte: int) -> Action:
        if byte in _BINARY_DIGITS:
            self.integer.append(byte - _ZERO)
            return Action.CONTINUE
        if byte in _ALPHANUMERIC:
            raise self._error(LexErrorKind.INVALID_BINARY_DIGIT)

        return self._end_radix(Binary)

    def _run_fractional(self, byte: int) -> Action:
        if byte in _DIGITS:
            self.fractional.append(byte - _ZERO)
        elif byte == ord("e"):
            self.state = State.EXPONENT
        else:
            self._emit_decimal_float(self.pos)
            return self._restart()

        return Action.CONTINUE

    def _run_exponent(self, byte: int) -> Action:
        if byte in _DIGITS:
            self.exponent.append(byte - _ZERO)
            return Action.CONTINUE

        # An empty exponent is accepted here ("3e,"); only _feed_eof rejects it
        self._emit_scientific_float(self.pos)
        return self._restart()

    def _run_equals(self, byte: int) -> Action:
        if byte == ord("="):
            self._emit(TokenType.EQUALS, None, self.pos + 1)
            self.state = State.START
            return Action.CONTINUE

        self._emit(TokenType.ASSIGN, None, self.pos)
        return self._restart()

    def _run_minus(self, byte: int) -> Action:
        if byte == ord(">"):
            self._emit(TokenType.RIGHT_ARROW, None, self.pos + 1)
            self.state = State.START
            return Action.CONTINUE

        self._emit(TokenType.MINUS, None, self.pos)
        return self._restart()

    # Emission helpers

    def _restart(self) -> Action:
        self.state = State.START
        return Action.AGAIN

    def _emit(self, token_type: TokenType, value, end: int):
        self.tokens.append(Token(
            token_type,
            value,
            self.source[self._start:end],
            self._start_location,
        ))

    def _classify_identifier(self, end: int):
        spelling = bytes(self.identifier)
        self.identifier.clear()

        keyword = KEYWORDS.get(spelling)
        if keyword is not None:
            self._emit(keyword, None, end)
        else:
            self._emit(TokenType.IDENTIFIER, spelling, end)

    def _emit_integer(self, representation, end: int):
        self._emit(TokenType.INTEGER, representation(tuple(self.integer)), end)
        self.integer.clear()

    def _end_radix(self, representation) -> Action:
        if not self.integer:
            raise self._error(LexErrorKind.MISSING_DIGITS_AFTER_BASE_PREFIX)
        self._emit_integer(representation, self.pos)
        return self._restart()

    def _finish_radix(self, representation, end: int):
        if not self.integer:
            raise self._error(LexErrorKind.MISSING_DIGITS_AFTER_BASE_PREFIX)
        self._emit_integer(representation, end)

    def _emit_decimal_float(self, end: int):
        value = DecimalFloat(tuple(self.integer), tuple(self.fractional))
        self.integer.clear()
        self.fractional.clear()
        self._emit(TokenType.FLOAT, value, end)

    def _emit_scientific_float(self, end: int):
        value = ScientificFloat(tuple(self.integer), tuple(self.fractional), tuple(self.exponent))
        self.integer.clear()
        self.fractional.clear()
        self.exponent.clear()
        self._emit(TokenType.FLOAT, value, end)

    # Position tracking

    def _mark_start(self):
        self._start = self.pos
        self._start_location = self._location()

    def _location(self) -> SourceLocation:
        return SourceLocation(self.config.filename, self.line, self.column, self.pos)

    def _advance(self, byte: int):
        self.pos += 1
        if byte == _NEWLINE:
            self.line += 1
            self.column = 1
        else:
            self.column += 1

    def _error(self, kind: LexErrorKind) -> LexerError:
        # At end of input self.pos == len(self.source)
        return create_number_error(kind, self.pos, self._location())


def tokenize(source: bytes, config: Optional[FrontendConfig] = None) -> List[Token]:
    """
    Tokenize a byte buffer.

    Args:
        source: Raw source bytes
        config: Optional front end configuration

    Returns:
        List of tokens

    Raises:
        LexerError: If lexing fails
    """
    return Lexer(config).tokenize(source)


def tokenize_string(source: str, filename: str = "<string>",
                    config: Optional[FrontendConfig] = None) -> List[Token]:
    """
    Convenience function to tokenize a source string.

    The text is encoded as UTF-8; anything outside ASCII then fails as an
    unexpected byte.
    """
    if config is None:
        config = FrontendConfig(filename=filename)
    return tokenize(source.encode("utf-8"), config)
