"""
Test suite for token definitions, tokenizer errors and logging helpers.

Author: xwest
"""

import unittest
import os
import sys

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

import forthic
from forthic.logger import get_logger
from forthic.lexer.tokens import Token, TokenType, SourceLocation, PUNCTUATION
from forthic.lexer.errors import (
    Diagnostic, TokenizerError, UnterminatedStringError, ERROR_CODES, create_unterminated_string_error
)


class TestTokens(unittest.TestCase):
    """Test cases for Token and TokenType."""

    def test_token_type_names(self):
        self.assertEqual({t.value for t in TokenType}, {
            "comment", "start_definition", "start_memo", "end_definition",
            "start_array", "end_array", "start_module", "end_module",
            "string", "end_of_stream",
        })
        self.assertIs(TokenType("start_memo"), TokenType.START_MEMO)

    def test_equality_ignores_location(self):
        location = SourceLocation("a.forthic", 3, 7, 42)
        self.assertEqual(Token(TokenType.STRING, "x", location), Token(TokenType.STRING, "x"))
        self.assertNotEqual(Token(TokenType.STRING, "x"), Token(TokenType.STRING, "y"))
        self.assertNotEqual(Token(TokenType.STRING, "x"), Token(TokenType.START_MODULE, "x"))

    def test_token_is_immutable(self):
        token = Token(TokenType.END_ARRAY, "]")
        with self.assertRaises(AttributeError):
            token.text = "["

    def test_kind_alias(self):
        self.assertIs(Token(TokenType.START_MEMO, "X").kind, TokenType.START_MEMO)

    def test_is_eos(self):
        self.assertTrue(Token(TokenType.END_OF_STREAM, "").is_eos)
        self.assertFalse(Token(TokenType.COMMENT, "").is_eos)

    def test_str(self):
        self.assertEqual(str(Token(TokenType.START_DEFINITION, "FOO")), "START_DEFINITION('FOO')")
        self.assertEqual(str(SourceLocation("a.forthic", 3, 7, 42)), "a.forthic:3:7")

    def test_punctuation_table(self):
        self.assertEqual(PUNCTUATION, {
            ";": TokenType.END_DEFINITION,
            "[": TokenType.START_ARRAY,
            "]": TokenType.END_ARRAY,
            "}": TokenType.END_MODULE,
        })

    def test_package_exports(self):
        self.assertIs(forthic.TokenType, TokenType)
        self.assertTrue(forthic.__version__)


class TestErrors(unittest.TestCase):
    """Test cases for tokenizer errors and diagnostics."""

    def setUp(self):
        self.location = SourceLocation("example.forthic", 2, 5, 14)

    def test_unterminated_string_error(self):
        error = create_unterminated_string_error("'", self.location)

        self.assertIsInstance(error, TokenizerError)
        self.assertEqual(error.quote_char, "'")
        self.assertEqual(error.code, "T001")
        self.assertEqual(error.location, self.location)
        self.assertEqual(error.diagnostic.severity, "error")
        self.assertEqual(error.args[0], ERROR_CODES["T001"])

    def test_error_report(self):
        report = str(create_unterminated_string_error('"', self.location))

        self.assertIn("ERROR: Unterminated string literal", report)
        self.assertIn("--> example.forthic:2:5", report)
        self.assertIn('help: String literals opened with """ must be closed with """.', report)
        self.assertIn('- Add a closing """', report)

    def test_default_message(self):
        error = UnterminatedStringError('"', self.location)
        self.assertEqual(error.diagnostic.message, "Unterminated string literal")
        self.assertIsNone(error.code)

    def test_diagnostic_without_help(self):
        diagnostic = Diagnostic("Something odd", self.location, "error")
        self.assertEqual(str(diagnostic), "ERROR: Something odd\n  --> example.forthic:2:5\n")


class TestLogger(unittest.TestCase):
    """Test cases for logger namespacing."""

    def test_prefix_added(self):
        self.assertEqual(get_logger("tools").name, "forthic.tools")

    def test_prefix_kept(self):
        self.assertEqual(get_logger("forthic").name, "forthic")
        self.assertEqual(get_logger("forthic.lexer.lexer").name, "forthic.lexer.lexer")


if __name__ == '__main__':
    unittest.main()
