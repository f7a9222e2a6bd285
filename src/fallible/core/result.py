"""Lightweight, typed Result container for explicit success/failure returns.

Motivation
----------
We prefer explicit error values over exceptions for expected failures such as
malformed input. This module provides a minimal `Result[T, E]` with:
- `Ok(value)` / `Err(error)` variants,
- combinators: `map`, `map_err`, `and_then`, `or_else`,
- extraction: `unwrap`, `expect`, `unwrap_err` (fatal on the wrong variant),
  `unwrap_or`, `unwrap_or_else`, `fold`,
- conversion: `to_option`, which drops the error detail.

Design goals
------------
- Tiny and dependency-free; friendly to `mypy --strict`.
- Side-effect free methods with straightforward semantics.
- Errors travel through `map`/`and_then` untouched (same object, not a copy).

Example
-------
>>> from fallible.core.result import failure, success, Result
>>> def parse_int(x: str) -> Result[int, str]:
...     return success(int(x)) if x.isdigit() else failure("not a digit")
>>> success("42").and_then(parse_int).unwrap()
42
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar, cast

from .option import Nothing, Option, Some
from .panic import panic

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
F = TypeVar("F")


class Result(Generic[T, E]):
    """Sum type representing either success (`Ok[T]`) or failure (`Err[E]`)."""

    # ----- Introspection -----------------------------------------------------
    def is_success(self) -> bool:
        """Return ``True`` if this is an :class:`Ok` value."""
        return isinstance(self, Ok)

    def is_failure(self) -> bool:
        """Return ``True`` if this is an :class:`Err` value."""
        return isinstance(self, Err)

    # ----- Unwraps -----------------------------------------------------------
    def unwrap(self) -> T:
        """Return the inner value if ``Ok``, else panic.

        The panic message carries the error's ``repr`` so the fault points at
        the failure that was ignored.
        """
        if isinstance(self, Ok):
            # Cast to narrow `self` so mypy knows `.value` is `T`
            return cast(Ok[T, E], self).value
        panic(f"called unwrap() on {self!r}")

    def expect(self, msg: str) -> T:
        """Return the inner value if ``Ok``, else panic with ``msg``."""
        if isinstance(self, Ok):
            return cast(Ok[T, E], self).value
        panic(f"{msg}: {cast(Err[T, E], self).error!r}")

    def unwrap_err(self) -> E:
        """Return the error value if ``Err``, else panic."""
        if isinstance(self, Err):
            return cast(Err[T, E], self).error
        panic(f"called unwrap_err() on {self!r}")

    def unwrap_or(self, default: T) -> T:
        """Return the success value or ``default`` if ``Err``."""
        if isinstance(self, Ok):
            return cast(Ok[T, E], self).value
        return default

    def unwrap_or_else(self, fn: Callable[[E], T]) -> T:
        """Return the success value or ``fn(error)`` if ``Err``."""
        if isinstance(self, Ok):
            return cast(Ok[T, E], self).value
        return fn(cast(Err[T, E], self).error)

    def fold(self, on_success: Callable[[T], U], on_failure: Callable[[E], U]) -> U:
        """Collapse both variants into one value; exactly one callback runs."""
        if isinstance(self, Ok):
            return on_success(cast(Ok[T, E], self).value)
        return on_failure(cast(Err[T, E], self).error)

    # ----- Combinators -------------------------------------------------------
    def map(self, fn: Callable[[T], U]) -> Result[U, E]:
        """Apply ``fn`` to the success value; propagate error unchanged."""
        if isinstance(self, Ok):
            return Ok(fn(cast(Ok[T, E], self).value))
        # mypy: safe cast from Result[T,E] to Result[U,E] when self is Err
        return cast(Result[U, E], self)

    def map_err(self, fn: Callable[[E], F]) -> Result[T, F]:
        """Apply ``fn`` to the error value; propagate success unchanged."""
        if isinstance(self, Err):
            return Err(fn(cast(Err[T, E], self).error))
        return cast(Result[T, F], self)

    def and_then(self, fn: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Chain computations that already return a :class:`Result`."""
        if isinstance(self, Ok):
            return fn(cast(Ok[T, E], self).value)
        return cast(Result[U, E], self)

    def or_else(self, fallback: Callable[[E], Result[T, E]]) -> Result[T, E]:
        """If ``Err``, call ``fallback(err)``; otherwise return ``self``."""
        if isinstance(self, Err):
            return fallback(cast(Err[T, E], self).error)
        return self

    # ----- Conversions -------------------------------------------------------
    def to_option(self) -> Option[T]:
        """Drop the error detail: ``Ok`` becomes ``Some``, ``Err`` becomes ``Nothing``."""
        if isinstance(self, Ok):
            return Some(cast(Ok[T, E], self).value)
        return Nothing()

    # ----- Dunder helpers ----------------------------------------------------
    def __repr__(self) -> str:
        if isinstance(self, Ok):
            return f"Ok({cast(Ok[T, E], self).value!r})"
        return f"Err({cast(Err[T, E], self).error!r})"


@dataclass(frozen=True, repr=False)
class Ok(Result[T, E]):
    """Successful result wrapping a value of type ``T``."""

    value: T


@dataclass(frozen=True, repr=False)
class Err(Result[T, E]):
    """Failed result wrapping an error payload of type ``E``."""

    error: E


# ----- Convenience constructors ----------------------------------------------
def success(value: T) -> Result[T, E]:
    """Construct :class:`Ok` with better type inference at call sites."""
    return Ok(value)


def failure(error: E) -> Result[T, E]:
    """Construct :class:`Err` with better type inference at call sites."""
    return Err(error)


__all__ = ["Result", "Ok", "Err", "success", "failure"]
