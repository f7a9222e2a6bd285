"""Extract ``meaningOfLife`` from a JSON document.

Two entry points share one composition, ``parse -> and_then -> field lookup``:

- :func:`get_meaning_of_life` trusts the document shape. A document that
  parses but lacks an integer ``meaningOfLife`` panics, because the field
  lookup is unwrapped. Only malformed JSON comes back as ``Err``.
- :func:`try_get_meaning_of_life` reports the same shape problem as
  ``Err(FieldError)`` and never panics.

Callers that accept arbitrary input should use the second one.
"""

from __future__ import annotations

from typing import cast

from fallible.core.contracts.errors import FieldError, ParseError
from fallible.core.json_value import JsonValue, as_integer, get_field, parse
from fallible.core.option import Option
from fallible.core.result import Result, failure, success
from fallible.core.settings import get_logger

MEANING_FIELD = "meaningOfLife"

logger = get_logger(__name__)


def parse_input_to_json_value(input_text: str) -> Result[JsonValue, ParseError]:
    """Parse ``input_text`` as JSON; ``Err(ParseError)`` on malformed input."""
    return parse(input_text)


def _meaning_field(doc: JsonValue) -> Option[int]:
    return get_field(doc, MEANING_FIELD).and_then(as_integer)


def get_meaning_of_life(input_text: str) -> Result[int, ParseError]:
    """Return the integer at ``meaningOfLife``.

    Panics if the document parses but the field is missing or not an integer.
    """
    return parse_input_to_json_value(input_text).and_then(
        lambda doc: success(
            _meaning_field(doc).expect(f"{MEANING_FIELD!r} missing or not an integer")
        )
    )


def _checked_meaning(doc: JsonValue) -> Result[int, ParseError | FieldError]:
    field = get_field(doc, MEANING_FIELD)
    if field.is_absent():
        logger.info("document has no %r field", MEANING_FIELD)
        return failure(FieldError(field=MEANING_FIELD, reason="missing"))
    meaning = field.and_then(as_integer)
    if meaning.is_absent():
        logger.info("field %r is not an integer", MEANING_FIELD)
    return meaning.ok_or(FieldError(field=MEANING_FIELD, reason="not_integer"))


def try_get_meaning_of_life(input_text: str) -> Result[int, ParseError | FieldError]:
    """Like :func:`get_meaning_of_life`, but shape problems are ``Err(FieldError)``."""
    # Widen the error type so the chain can carry FieldError too.
    parsed = cast(
        Result[JsonValue, ParseError | FieldError], parse_input_to_json_value(input_text)
    )
    return parsed.and_then(_checked_meaning)


__all__ = [
    "MEANING_FIELD",
    "parse_input_to_json_value",
    "get_meaning_of_life",
    "try_get_meaning_of_life",
]
