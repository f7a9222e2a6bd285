"""Error payloads carried by `Err` values.

This module defines two frozen Pydantic v2 models:

- `ParseError`: the input text is not a JSON document.
- `FieldError`: the text parsed, but a required field is missing or has the
  wrong type.

Both are plain values: they compare by content and are never raised.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

FieldErrorReason = Literal["missing", "not_integer"]


class ParseError(BaseModel):
    """Malformed JSON input, with the decoder's position when it reports one."""

    model_config = ConfigDict(frozen=True)

    message: str = Field(description="Decoder message, e.g. 'Expecting value'")
    line: int | None = Field(default=None, ge=1, description="1-based line")
    column: int | None = Field(default=None, ge=1, description="1-based column")

    def __str__(self) -> str:
        if self.line is None or self.column is None:
            return self.message
        return f"{self.message} at line {self.line} column {self.column}"


class FieldError(BaseModel):
    """A required field in a parsed document is missing or mistyped."""

    model_config = ConfigDict(frozen=True)

    field: str
    reason: FieldErrorReason

    def __str__(self) -> str:
        if self.reason == "missing":
            return f"field {self.field!r} is missing"
        return f"field {self.field!r} is not an integer"


__all__ = ["ParseError", "FieldError", "FieldErrorReason"]
