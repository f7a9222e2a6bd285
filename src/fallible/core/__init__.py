"""Core value containers for fallible.

Re-exports the Option/Result algebra so downstream code can do:
    from fallible.core import Option, Result, present, success, Panic
"""

from __future__ import annotations

from .option import Nothing, Option, Some, absent, from_nullable, present
from .panic import Panic, panic
from .result import Err, Ok, Result, failure, success

__all__ = [
    "Option",
    "Some",
    "Nothing",
    "present",
    "absent",
    "from_nullable",
    "Result",
    "Ok",
    "Err",
    "success",
    "failure",
    "Panic",
    "panic",
]
