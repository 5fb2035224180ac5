"""
Lumen Front End Package

Lexer and parser for the Lumen expression language: raw source bytes in,
abstract syntax tree out.

Architecture:
    lumen/
    ├── lexer/           # Byte-driven FSM tokenizer
    ├── parser/          # Recursive descent parser and AST
    ├── config.py        # FrontendConfig
    └── utils/           # Logging helpers

Typical use:
    tokens = tokenize(b"let x = 1 + 2 * 3;")
    tree = parse(tokens)

Author: xwest
License: MIT
"""

__version__ = "0.1.0-alpha"
__author__ = "xwest"
__email__ = "dev@lumen-lang.org"
__license__ = "MIT"

from .config import FrontendConfig
from .lexer import Lexer, Token, TokenType, tokenize, tokenize_string, LexerError, LumenError
from .parser import Parser, ASTNode, parse, parse_string, ParseError

__all__ = [
    # Core API
    "tokenize",
    "tokenize_string",
    "parse",
    "parse_string",
    "Lexer",
    "Parser",
    "Token",
    "TokenType",
    "ASTNode",
    "FrontendConfig",

    # Errors
    "LumenError",
    "LexerError",
    "ParseError",

    # Version info
    "__version__",
    "__author__",
    "__email__",
    "__license__",
]
