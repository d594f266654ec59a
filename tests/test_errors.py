"""Tests for the error hierarchy and messages."""

import unittest

from minihtml import (
    MiniHTML,
    NestingDepthError,
    ParseError,
    Position,
    StrayEndTagError,
    TagMismatchError,
    Token,
    TokenKind,
    UnclosedTagError,
    UnexpectedEOFError,
    UnexpectedTextError,
    UnexpectedTokenError,
    UnterminatedStringError,
)
from minihtml.errors import generate_error_message


class TestParseError(unittest.TestCase):
    """Test ParseError class behavior."""

    def test_parse_error_str(self):
        """ParseError has readable string representation."""
        error = ParseError(Position(1, 5, 5))
        assert str(error) == "(1,5): parse-error"

    def test_parse_error_repr(self):
        """ParseError has useful repr."""
        error = ParseError(Position(1, 5, 5))
        assert "parse-error" in repr(error)
        assert "line=1" in repr(error)
        assert "column=5" in repr(error)

    def test_parse_error_no_location(self):
        """ParseError works without location info."""
        error = ParseError()
        assert str(error) == "parse-error"
        assert "line=" not in repr(error)
        assert error.line is None
        assert error.column is None

    def test_parse_error_no_location_with_message(self):
        """ParseError with message but no location."""
        error = ParseError(message="This is a test error")
        assert str(error) == "parse-error - This is a test error"

    def test_every_error_is_a_parse_error(self):
        for cls in (
            TagMismatchError,
            UnexpectedTokenError,
            UnexpectedEOFError,
            UnexpectedTextError,
            UnterminatedStringError,
            UnclosedTagError,
            StrayEndTagError,
            NestingDepthError,
        ):
            assert issubclass(cls, ParseError), cls

    def test_codes_are_distinct(self):
        """Every error kind has its own code."""
        codes = {
            TagMismatchError.code,
            UnexpectedTokenError.code,
            UnexpectedEOFError.code,
            UnexpectedTextError.code,
            UnterminatedStringError.code,
            UnclosedTagError.code,
            StrayEndTagError.code,
            NestingDepthError.code,
        }
        assert len(codes) == 8


class TestErrorMessages(unittest.TestCase):
    def test_tag_mismatch_message(self):
        """The message names both tags."""
        error = TagMismatchError("a", "b")
        assert error.message == "Open tag <a> closed by </b>"
        assert str(error) == "tag-mismatch - Open tag <a> closed by </b>"

    def test_unexpected_token_takes_position_from_found_token(self):
        """Without an explicit position the offending token's position is used."""
        found = Token(TokenKind.TEXT, Position(1, 3, 3), "x")
        error = UnexpectedTokenError(TokenKind.ASSIGN, found)
        assert (error.line, error.column) == (1, 3)
        assert error.message == "Expected assign but found text 'x'"

    def test_unexpected_eof_message(self):
        """EOF errors name what was expected."""
        found = Token(TokenKind.EOF, Position(2, 0, 9))
        error = UnexpectedEOFError(TokenKind.TAG_END, found)
        assert error.message == "Unexpected end of input while expecting tag-end"
        assert error.line == 2

    def test_unexpected_text_message(self):
        found = Token(TokenKind.TEXT, Position(1, 2, 2), "element")
        error = UnexpectedTextError("doctype", found)
        assert error.message == "Expected 'doctype' but found text 'element'"

    def test_unexpected_text_without_token(self):
        """A missing token is described as nothing."""
        error = UnexpectedTextError("doctype", None)
        assert error.found is None
        assert error.position is None
        assert "nothing" in error.message

    def test_unknown_code_falls_back_to_code(self):
        """Unknown codes are used as their own message."""
        assert generate_error_message("not-a-code") == "not-a-code"

    def test_errors_are_exceptions(self):
        """Parse failures are raised as ParseError subclasses."""
        with self.assertRaises(ParseError) as ctx:
            MiniHTML("<a></b>")
        assert isinstance(ctx.exception, TagMismatchError)
        assert ctx.exception.code == "tag-mismatch"


class TestErrorPositions(unittest.TestCase):
    def test_multiline_error_positions(self):
        """Errors on later lines report the right line number."""
        html = "<html>\n<body>\n<p></b>"
        with self.assertRaises(TagMismatchError) as ctx:
            MiniHTML(html)
        assert ctx.exception.line == 3

    def test_error_column_after_newline(self):
        """Column is relative to the last newline."""
        with self.assertRaises(UnterminatedStringError) as ctx:
            MiniHTML('line1\n<a x="')
        assert ctx.exception.line == 2
        assert ctx.exception.column == 5

    def test_unclosed_error_points_at_end_of_input(self):
        """An unclosed tag is reported where the input ends."""
        with self.assertRaises(UnclosedTagError) as ctx:
            MiniHTML("<p>abc")
        assert ctx.exception.position.absolute_offset == 6

    def test_only_first_error_is_reported(self):
        """The first failure wins and no partial forest is returned."""
        # Two problems; the earlier one wins and nothing partial is returned
        with self.assertRaises(TagMismatchError) as ctx:
            MiniHTML('<a></b><p x=y></p>')
        assert ctx.exception.close == "b"
