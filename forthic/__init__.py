"""
Forthic Package

Front end for the Forthic stack-based language. Currently provides the
tokenizer; parsing and evaluation live in the interpreter that consumes it.

Architecture:
    forthic/
    ├── lexer/           # Tokenization and lexical analysis
    └── logger.py        # Namespaced logging helpers

Author: xwest
License: MIT
"""

__version__ = "0.1.0"
__author__ = "xwest"
__license__ = "MIT"

from .lexer import Tokenizer, Token, TokenType, UnterminatedStringError

__all__ = [
    # Core classes
    "Tokenizer",
    "Token",
    "TokenType",
    "UnterminatedStringError",

    # Version info
    "__version__",
    "__author__",
    "__license__",
]
