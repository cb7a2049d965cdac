"""
Error handling for the Forthic tokenizer.

The tokenizer has exactly one fatal condition, an unterminated triple-quoted
string. Errors carry a diagnostic with the source location so a parser or CLI
can report where the problem started.

Author: xwest
"""

from typing import Optional, List
from dataclasses import dataclass
from .tokens import SourceLocation


@dataclass
class Diagnostic:
    """Diagnostic report attached to tokenizer errors."""
    message: str
    location: SourceLocation
    severity: str  # "error"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        result = f"{severity_prefix}: {self.message}\n"
        result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class TokenizerError(Exception):
    """
    Base exception for fatal tokenizer errors.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def location(self) -> SourceLocation:
        return self.diagnostic.location

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    def __str__(self) -> str:
        return str(self.diagnostic)


class UnterminatedStringError(TokenizerError):
    """Raised when a triple-quoted string is still open at end of input."""

    def __init__(
        self,
        quote_char: str,
        location: SourceLocation,
        message: str = "Unterminated string literal",
        **kwargs
    ):
        super().__init__(message, location, **kwargs)
        self.quote_char = quote_char


ERROR_CODES = {
    "T001": "Unterminated string literal",
}


def create_unterminated_string_error(quote_char: str, location: SourceLocation) -> UnterminatedStringError:
    """Create an error for a triple-quoted string with no closing delimiter."""
    delimiter = quote_char * 3
    return UnterminatedStringError(
        quote_char,
        location,
        message=ERROR_CODES["T001"],
        code="T001",
        help_text=f"String literals opened with {delimiter} must be closed with {delimiter}.",
        suggestions=[
            f"Add a closing {delimiter}",
            "Check that the closing delimiter uses the same quote character",
        ]
    )
