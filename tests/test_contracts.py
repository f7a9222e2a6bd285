"""Tests for the error payload contracts."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from fallible.core.contracts.errors import FieldError, ParseError


def test_parse_error_str_with_and_without_position() -> None:
    """The position is appended only when the decoder reported one."""
    assert str(ParseError(message="Expecting value", line=1, column=3)) == (
        "Expecting value at line 1 column 3"
    )
    assert str(ParseError(message="recursion limit exceeded")) == "recursion limit exceeded"


def test_parse_error_is_frozen_and_compares_by_value() -> None:
    """Errors are values: equal content means equal errors."""
    a = ParseError(message="m", line=1, column=1)
    assert a == ParseError(message="m", line=1, column=1)
    with pytest.raises(ValidationError):
        a.message = "changed"  # type: ignore[misc]


def test_parse_error_rejects_zero_based_positions() -> None:
    """Lines and columns are 1-based."""
    with pytest.raises(ValidationError):
        ParseError(message="m", line=0, column=1)


def test_field_error_reasons() -> None:
    """Both reasons render; anything else fails validation."""
    assert str(FieldError(field="x", reason="missing")) == "field 'x' is missing"
    assert str(FieldError(field="x", reason="not_integer")) == "field 'x' is not an integer"
    with pytest.raises(ValidationError):
        FieldError(field="x", reason="wrong")  # type: ignore[arg-type]
