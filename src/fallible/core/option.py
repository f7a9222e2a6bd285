"""Typed Option container for values that may be absent.

Motivation
----------
``X | None`` conflates "no value" with a legitimate ``None`` and gives no
combinators. This module provides a minimal `Option[T]` with:
- `Some(value)` / `Nothing()` variants,
- combinators: `map`, `and_then`, `or_else`, `filter`,
- extraction: `unwrap`, `expect` (fatal on `Nothing`), `unwrap_or`,
  `unwrap_or_else`, `fold`,
- conversion: `ok_or` into a :class:`~fallible.core.result.Result`.

Absence is always the `Nothing` variant. `Some(None)` is a present value.

Example
-------
>>> from fallible.core.option import absent, present
>>> present(3).map(lambda x: x * 2).unwrap_or(0)
6
>>> absent().map(lambda x: x * 2).unwrap_or(0)
0
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, TypeVar, cast

from .panic import panic

if TYPE_CHECKING:
    from .result import Result

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")


class Option(Generic[T]):
    """Sum type representing either presence (`Some[T]`) or absence (`Nothing`)."""

    # ----- Introspection -----------------------------------------------------
    def is_present(self) -> bool:
        """Return ``True`` if this is a :class:`Some` value."""
        return isinstance(self, Some)

    def is_absent(self) -> bool:
        """Return ``True`` if this is :class:`Nothing`."""
        return isinstance(self, Nothing)

    # ----- Unwraps -----------------------------------------------------------
    def unwrap(self) -> T:
        """Return the inner value, or panic if this is ``Nothing``."""
        if isinstance(self, Some):
            return cast(Some[T], self).value
        panic("called unwrap() on Nothing")

    def expect(self, msg: str) -> T:
        """Return the inner value, or panic with ``msg`` if this is ``Nothing``."""
        if isinstance(self, Some):
            return cast(Some[T], self).value
        panic(msg)

    def unwrap_or(self, default: T) -> T:
        """Return the inner value or ``default``."""
        if isinstance(self, Some):
            return cast(Some[T], self).value
        return default

    def unwrap_or_else(self, fn: Callable[[], T]) -> T:
        """Return the inner value or the result of ``fn()``."""
        if isinstance(self, Some):
            return cast(Some[T], self).value
        return fn()

    def fold(self, on_present: Callable[[T], U], on_absent: Callable[[], U]) -> U:
        """Collapse both variants into one value; exactly one callback runs."""
        if isinstance(self, Some):
            return on_present(cast(Some[T], self).value)
        return on_absent()

    # ----- Combinators -------------------------------------------------------
    def map(self, fn: Callable[[T], U]) -> Option[U]:
        """Apply ``fn`` to the present value; propagate absence unchanged."""
        if isinstance(self, Some):
            return Some(fn(cast(Some[T], self).value))
        return cast(Option[U], self)

    def and_then(self, fn: Callable[[T], Option[U]]) -> Option[U]:
        """Chain computations that already return an :class:`Option`."""
        if isinstance(self, Some):
            return fn(cast(Some[T], self).value)
        return cast(Option[U], self)

    def or_else(self, fallback: Callable[[], Option[T]]) -> Option[T]:
        """If ``Nothing``, call ``fallback()``; otherwise return ``self``."""
        if isinstance(self, Nothing):
            return fallback()
        return self

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        """Keep the value only if ``predicate`` accepts it."""
        if isinstance(self, Some) and predicate(cast(Some[T], self).value):
            return self
        return Nothing()

    # ----- Conversions -------------------------------------------------------
    def ok_or(self, error: E) -> Result[T, E]:
        """Convert to a Result, using ``error`` for the absent case."""
        from .result import Err, Ok

        if isinstance(self, Some):
            return Ok(cast(Some[T], self).value)
        return Err(error)

    # ----- Dunder helpers ----------------------------------------------------
    def __repr__(self) -> str:
        if isinstance(self, Some):
            return f"Some({cast(Some[T], self).value!r})"
        return "Nothing"


@dataclass(frozen=True, repr=False)
class Some(Option[T]):
    """Present option wrapping a value of type ``T``."""

    value: T


@dataclass(frozen=True, repr=False)
class Nothing(Option[T]):
    """Absent option; all instances compare equal."""


# ----- Convenience constructors ----------------------------------------------
def present(value: T) -> Option[T]:
    """Construct :class:`Some` with better type inference at call sites."""
    return Some(value)


def absent() -> Option[T]:
    """Construct :class:`Nothing`."""
    return Nothing()


def from_nullable(value: T | None) -> Option[T]:
    """Bridge from ``X | None``: ``None`` becomes ``Nothing``."""
    return Nothing() if value is None else Some(value)


__all__ = ["Option", "Some", "Nothing", "present", "absent", "from_nullable"]
