"""Error payload contracts carried inside `Err` values."""

from __future__ import annotations

from .errors import FieldError, FieldErrorReason, ParseError

__all__ = ["ParseError", "FieldError", "FieldErrorReason"]
