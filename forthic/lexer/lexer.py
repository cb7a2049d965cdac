"""
Forthic Tokenizer - turns source text into a stream of tokens

Forthic barely has syntax: words are separated by whitespace and the only
structure is definitions, memos, arrays, modules and triple-quoted strings.
Everything else is dropped here and left to the parser to make sense of.

The scanner is a small state machine. Each `_transition_from_*` method is one
state; START is re-entered at the beginning of every `next_token()` call.

xwest
"""

from dataclasses import dataclass
from typing import Iterator, List

from ..logger import get_logger
from .tokens import (
    Token, TokenType, SourceLocation, PUNCTUATION, DEFAULT_WHITESPACE, DEFAULT_QUOTE_CHARS
)
from .errors import create_unterminated_string_error

logger = get_logger(__name__)


@dataclass(frozen=True)
class TokenizerConfig:
    """
    Character classes recognised by the tokenizer.

    Attributes:
        whitespace: Characters skipped between tokens and ending names
        quote_chars: Characters that delimit a string when tripled
    """
    whitespace: str = DEFAULT_WHITESPACE
    quote_chars: str = DEFAULT_QUOTE_CHARS


def is_triple_quote(source: str, position: int, quote_chars: str) -> bool:
    """Check if a quote character is repeated three times starting at position."""
    if position < 0 or position + 2 >= len(source):
        return False
    char = source[position]
    return char in quote_chars and source.startswith(char * 3, position)


def is_start_memo(source: str, position: int) -> bool:
    """Check if `@:` starts at position."""
    return position >= 0 and source.startswith("@:", position)


class Tokenizer:
    """
    Forthic lexical analyzer.

    Call `next_token()` repeatedly; once the input is exhausted every call
    returns an END_OF_STREAM token. Not thread-safe: the cursor and the
    accumulation buffer are mutated in place.
    """

    def __init__(
        self,
        source: str,
        whitespace: str = DEFAULT_WHITESPACE,
        quote_chars: str = DEFAULT_QUOTE_CHARS,
        filename: str = "<string>"
    ):
        """
        Initialize the tokenizer with source code.

        Args:
            source: Forthic source text
            whitespace: Characters treated as separators
            quote_chars: Characters that form triple-quoted strings
            filename: Name of source file for error reporting
        """
        self.config = TokenizerConfig(whitespace, quote_chars)
        self.source = source
        self.filename = filename
        self.position = 0
        self.line = 1
        self.column = 1

        # Text of the token being scanned, cleared on every call
        self._token_string: List[str] = []

        logger.debug("Tokenizer created for %s (%d characters)", filename, len(source))

    @classmethod
    def from_config(cls, source: str, config: TokenizerConfig, filename: str = "<string>") -> "Tokenizer":
        return cls(source, config.whitespace, config.quote_chars, filename)

    @property
    def whitespace(self) -> str:
        return self.config.whitespace

    @property
    def quote_chars(self) -> str:
        return self.config.quote_chars

    @property
    def at_end(self) -> bool:
        return self.position >= len(self.source)

    def next_token(self) -> Token:
        """
        Scan and return the next token.

        Raises:
            UnterminatedStringError: If a triple-quoted string is never closed
        """
        self._token_string.clear()
        return self._transition_from_start()

    def tokenize(self) -> List[Token]:
        """
        Tokenize the rest of the source.

        Returns:
            List of tokens ending with the END_OF_STREAM token
        """
        tokens = list(self)
        logger.debug("Tokenized %s into %d tokens", self.filename, len(tokens))
        return tokens

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next_token()
            yield token
            if token.is_eos:
                return

    def location(self) -> SourceLocation:
        """Location of the character under the cursor."""
        return SourceLocation(self.filename, self.line, self.column, self.position)

    # ------------------------------------------------------------------
    # States
    # ------------------------------------------------------------------

    def _transition_from_start(self) -> Token:
        # Order matters: whitespace wins over everything, `:` is tested before
        # `@:` and the single-character tokens before triple quotes.
        while not self.at_end:
            location = self.location()
            char = self._read()

            if self._is_whitespace(char):
                continue
            elif char == '#':
                return self._transition_from_comment(location)
            elif char == ':':
                return self._transition_from_start_definition(location)
            elif is_start_memo(self.source, self.position - 1):
                self._read()  # ":" of "@:"
                return self._transition_from_start_memo(location)
            elif char in PUNCTUATION:
                return Token(PUNCTUATION[char], char, location)
            elif char == '{':
                return self._transition_from_gather_module(location)
            elif is_triple_quote(self.source, self.position - 1, self.quote_chars):
                self._advance_by(2)
                return self._transition_from_gather_triple_quote_string(char, location)

            # Anything else is not part of a token at this level

        return Token(TokenType.END_OF_STREAM, "", self.location())

    def _transition_from_comment(self, location: SourceLocation) -> Token:
        # Comment text is not kept
        while not self.at_end:
            if self._read() == '\n':
                break
        return Token(TokenType.COMMENT, self._take_token_string(), location)

    def _transition_from_start_definition(self, location: SourceLocation) -> Token:
        self._skip_whitespace()
        self._gather_name()
        return Token(TokenType.START_DEFINITION, self._take_token_string(), location)

    def _transition_from_start_memo(self, location: SourceLocation) -> Token:
        self._skip_whitespace()
        self._gather_name()
        return Token(TokenType.START_MEMO, self._take_token_string(), location)

    def _transition_from_gather_module(self, location: SourceLocation) -> Token:
        while not self.at_end:
            char = self._read()
            if self._is_whitespace(char):
                break
            elif char == '}':
                # Leave the brace for the END_MODULE token
                self._unread()
                break
            self._token_string.append(char)
        return Token(TokenType.START_MODULE, self._take_token_string(), location)

    def _transition_from_gather_triple_quote_string(self, quote_char: str, location: SourceLocation) -> Token:
        delimiter = quote_char * 3
        while not self.at_end:
            if self.source.startswith(delimiter, self.position):
                self._advance_by(3)
                return Token(TokenType.STRING, self._take_token_string(), location)
            self._token_string.append(self._read())

        logger.debug("Unterminated %s string starting at %s", delimiter, location)
        raise create_unterminated_string_error(quote_char, location)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _is_whitespace(self, char: str) -> bool:
        return char in self.config.whitespace

    def _skip_whitespace(self):
        while not self.at_end and self._is_whitespace(self.source[self.position]):
            self._read()

    def _gather_name(self):
        """Accumulate characters up to the next whitespace, consuming it."""
        while not self.at_end:
            char = self._read()
            if self._is_whitespace(char):
                break
            self._token_string.append(char)

    def _take_token_string(self) -> str:
        text = ''.join(self._token_string)
        self._token_string.clear()
        return text

    def _read(self) -> str:
        """Consume one character, updating line/column."""
        char = self.source[self.position]
        self.position += 1
        if char == '\n':
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        return char

    def _unread(self):
        """Step back over the last character read."""
        if self.position == 0:
            raise IndexError("Cannot unread before the start of the source")
        self.position -= 1
        if self.source[self.position] == '\n':
            self.line -= 1
            self.column = self.position - self.source.rfind('\n', 0, self.position)
        else:
            self.column -= 1

    def _advance_by(self, count: int):
        """Advance position by multiple characters."""
        for _ in range(count):
            if not self.at_end:
                self._read()


def tokenize_string(source: str, filename: str = "<string>", **options) -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Forthic source string
        filename: Filename for error reporting
        **options: `whitespace` / `quote_chars` overrides

    Returns:
        List of tokens ending with END_OF_STREAM

    Raises:
        UnterminatedStringError: If a triple-quoted string is never closed
    """
    return Tokenizer(source, filename=filename, **options).tokenize()


def tokenize_file(filepath: str, **options) -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Raises:
        UnterminatedStringError: If a triple-quoted string is never closed
        IOError: If file cannot be read
    """
    logger.debug("Reading %s", filepath)
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return tokenize_string(source, str(filepath), **options)
