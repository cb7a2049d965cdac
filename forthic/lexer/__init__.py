"""
Forthic Lexer Package

Implements the tokenizer for Forthic, a stack-based concatenative language.
Source text is scanned into a flat stream of structural tokens that a parser
consumes one at a time.

Key Features:
- Definitions (`: NAME`), memos (`@: NAME`), arrays and modules
- Triple-quoted strings with either quote character
- Parentheses treated as whitespace so stack-effect notes are skipped
- Configurable whitespace and quote character sets
- Source location tracking for error reporting

Author: xwest
"""

from .tokens import Token, TokenType, SourceLocation, DEFAULT_WHITESPACE, DEFAULT_QUOTE_CHARS
from .lexer import (
    Tokenizer, TokenizerConfig, is_triple_quote, is_start_memo, tokenize_string, tokenize_file
)
from .errors import Diagnostic, TokenizerError, UnterminatedStringError

__all__ = [
    "Tokenizer",
    "TokenizerConfig",
    "Token",
    "TokenType",
    "SourceLocation",
    "DEFAULT_WHITESPACE",
    "DEFAULT_QUOTE_CHARS",
    "Diagnostic",
    "TokenizerError",
    "UnterminatedStringError",
    "is_triple_quote",
    "is_start_memo",
    "tokenize_string",
    "tokenize_file",
]
