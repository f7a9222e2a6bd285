"""Worked examples built on the Option/Result algebra.

Currently exposed:

- :func:`divide_safely` / :func:`divide_with_no_remorse` (``division.py``)
- :func:`parse_input_to_json_value`, :func:`get_meaning_of_life` and
  :func:`try_get_meaning_of_life` (``meaning.py``)
"""

from __future__ import annotations

from .division import divide_safely, divide_with_no_remorse
from .meaning import (
    MEANING_FIELD,
    get_meaning_of_life,
    parse_input_to_json_value,
    try_get_meaning_of_life,
)

__all__ = [
    "divide_safely",
    "divide_with_no_remorse",
    "parse_input_to_json_value",
    "get_meaning_of_life",
    "try_get_meaning_of_life",
    "MEANING_FIELD",
]
