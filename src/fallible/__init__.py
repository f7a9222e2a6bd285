"""fallible: optional values and fallible results as plain Python values.

The core algebra lives in :mod:`fallible.core`; the worked examples built on
top of it live in :mod:`fallible.chapters`.
"""

from __future__ import annotations

__all__ = ["__version__"]
__version__ = "0.1.0"
