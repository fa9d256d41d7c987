"""
Unit Tests for ParseError and ErrorKind
"""

import pytest

from ternary_calc.core.errors import ErrorKind, ParseError


class TestParseError:
    """Tests for ParseError message and attributes."""

    def test_str_when_character_and_position_then_includes_both(self):
        """Message names the character and the position."""
        err = ParseError(ErrorKind.INVALID_DIGIT, position=3, character="3")
        assert str(err) == "invalid digit '3' at position 3"
        assert err.kind is ErrorKind.INVALID_DIGIT
        assert err.position == 3
        assert err.character == "3"

    def test_str_when_no_details_then_kind_description_only(self):
        """Without details the message is the kind description."""
        err = ParseError(ErrorKind.EMPTY_INPUT)
        assert str(err) == "empty input"
        assert err.position is None
        assert err.character is None

    def test_str_when_position_only_then_omits_character(self):
        """Character is omitted when not known."""
        err = ParseError(ErrorKind.DIVISION_BY_ZERO, position=1)
        assert str(err) == "division by zero at position 1"

    def test_raise_when_caught_as_exception_then_is_parse_error(self):
        """ParseError is a normal exception."""
        with pytest.raises(ParseError, match="trailing content"):
            raise ParseError(ErrorKind.TRAILING_CONTENT, position=4, character="x")

    def test_repr_when_called_then_names_kind(self):
        """repr() shows the kind name and details."""
        err = ParseError(ErrorKind.OVERFLOW, position=0)
        assert repr(err) == "ParseError(OVERFLOW, position=0, character=None)"


class TestErrorKindExitCode:
    """Tests for ErrorKind.exit_code mapping."""

    @pytest.mark.parametrize("kind", list(ErrorKind))
    def test_exit_code_when_any_kind_then_not_success_or_usage(self, kind):
        """0 and 2 are reserved for success and usage errors."""
        assert kind.exit_code not in (0, 2)

    def test_exit_code_when_grammar_error_then_one(self):
        """Grammar errors share status 1."""
        assert ErrorKind.UNEXPECTED_CHARACTER.exit_code == 1
        assert ErrorKind.NESTING_TOO_DEEP.exit_code == 1
        assert ErrorKind.EMPTY_INPUT.exit_code == 1

    def test_exit_code_when_arithmetic_error_then_distinct(self):
        """Arithmetic errors have their own statuses."""
        assert ErrorKind.DIVISION_BY_ZERO.exit_code == 3
        assert ErrorKind.OVERFLOW.exit_code == 4
