"""JSON collaborator: parse text and read typed fields as Option/Result values.

The grammar itself is the standard library's :mod:`json`. This module only
narrows it to the contract the rest of the package expects:

- ``parse(text)``             -> ``Result[JsonValue, ParseError]``
- ``get_field(value, name)``  -> ``Option[JsonValue]``
- ``as_integer(value)``       -> ``Option[int]``

``parse`` rejects the non-standard ``NaN``/``Infinity`` literals that
``json.loads`` accepts by default, and reports overly deep nesting as a
``ParseError`` instead of letting ``RecursionError`` escape. Integer literals
too long for ``int()`` decode as floats.
"""

from __future__ import annotations

import json
from typing import Any, TypeAlias

from .contracts.errors import ParseError
from .option import Option, absent, present
from .result import Result, failure, success
from .settings import get_logger

JsonValue: TypeAlias = None | bool | int | float | str | list[Any] | dict[str, Any]

I64_MIN = -(2**63)
I64_MAX = 2**63 - 1

logger = get_logger(__name__)


class _NonStandardConstant(ValueError):
    pass


def _reject_constant(name: str) -> Any:
    raise _NonStandardConstant(f"non-standard constant {name!r}")


def _parse_int(digits: str) -> int | float:
    # Past the interpreter's int-conversion digit limit the literal is read as a
    # float, so `as_integer` reports it absent.
    try:
        return int(digits)
    except ValueError:
        return float(digits)


def parse(text: str) -> Result[JsonValue, ParseError]:
    """Decode ``text`` as a single JSON document."""
    try:
        value: JsonValue = json.loads(
            text, parse_int=_parse_int, parse_constant=_reject_constant
        )
    except json.JSONDecodeError as exc:
        logger.debug("JSON decode failed: %s", exc)
        return failure(ParseError(message=exc.msg, line=exc.lineno, column=exc.colno))
    except _NonStandardConstant as exc:
        logger.debug("JSON decode failed: %s", exc)
        return failure(ParseError(message=str(exc)))
    except RecursionError:
        logger.debug("JSON decode failed: nesting too deep")
        return failure(ParseError(message="recursion limit exceeded"))
    return success(value)


def get_field(value: JsonValue, name: str) -> Option[JsonValue]:
    """Return ``value[name]`` if ``value`` is an object holding ``name``."""
    if isinstance(value, dict) and name in value:
        return present(value[name])
    return absent()


def as_integer(value: JsonValue) -> Option[int]:
    """Return ``value`` if it is a JSON integer in the signed 64-bit range.

    ``bool`` is an ``int`` subclass in Python but not a JSON number, so
    ``true``/``false`` are absent, as are floats such as ``42.0``.
    """
    if isinstance(value, int) and not isinstance(value, bool):
        if I64_MIN <= value <= I64_MAX:
            return present(value)
    return absent()


__all__ = ["JsonValue", "parse", "get_field", "as_integer"]
