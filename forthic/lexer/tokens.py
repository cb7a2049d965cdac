"""
Token definitions for the Forthic tokenizer.

Forthic source is a flat sequence of whitespace-separated words, so the
tokenizer only needs to recognise the structural tokens a parser dispatches on:
- Comments
- Definition and memo starts (`: NAME`, `@: NAME`) and ends (`;`)
- Array delimiters (`[`, `]`)
- Module delimiters (`{name`, `}`)
- Triple-quoted strings

Author: xwest
"""

from enum import Enum
from dataclasses import dataclass, field
from typing import Optional


# Characters skipped between tokens. Parentheses are included so that
# stack-effect annotations like `( a b -- c )` disappear.
DEFAULT_WHITESPACE = " \t\n\r()"

# Characters that open/close a string when repeated three times
DEFAULT_QUOTE_CHARS = "\"'"


class TokenType(Enum):
    """
    Enumeration of all token types produced by the tokenizer.

    Values are stable names a parser can dispatch on.
    """

    COMMENT = "comment"                     # # to end of line
    START_DEFINITION = "start_definition"   # : NAME
    START_MEMO = "start_memo"               # @: NAME
    END_DEFINITION = "end_definition"       # ;
    START_ARRAY = "start_array"             # [
    END_ARRAY = "end_array"                 # ]
    START_MODULE = "start_module"           # {name
    END_MODULE = "end_module"               # }
    STRING = "string"                       # """text""" or '''text'''
    END_OF_STREAM = "end_of_stream"         # Input exhausted


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source code.

    Used for error reporting and debugging information.
    """
    filename: str
    line: int
    column: int
    offset: int  # Character offset from start of source

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token in Forthic source.

    Tokens compare by type and text; the location is informational.
    """
    type: TokenType
    text: str
    location: Optional[SourceLocation] = field(default=None, compare=False)

    def __str__(self) -> str:
        return f"{self.type.name}({self.text!r})"

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.text!r}, {self.location!r})"

    @property
    def kind(self) -> TokenType:
        return self.type

    @property
    def is_eos(self) -> bool:
        """Check if this token marks the end of the input."""
        return self.type == TokenType.END_OF_STREAM


# Tokens whose text is fixed by their type
PUNCTUATION = {
    ";": TokenType.END_DEFINITION,
    "[": TokenType.START_ARRAY,
    "]": TokenType.END_ARRAY,
    "}": TokenType.END_MODULE,
}
