"""Fatal faults for unwrap-style extraction.

`Panic` is the one way a value container gives up: it is raised only by
`panic()`, which in turn is called only by `unwrap`, `expect` and
`unwrap_err` on the wrong variant.

`Panic` derives from :class:`BaseException`, next to `SystemExit` and
`KeyboardInterrupt`, so a broad ``except Exception`` handler lets it through.
Left alone it ends the process with a traceback; tests observe it with
``pytest.raises(Panic)``.
"""

from __future__ import annotations

from typing import NoReturn

from .settings import get_logger

logger = get_logger(__name__)


class Panic(BaseException):
    """Raised when a caller asserted a value was present and it was not."""


def panic(msg: str) -> NoReturn:
    """Log ``msg`` at CRITICAL and raise :class:`Panic`."""
    logger.critical("panic: %s", msg)
    raise Panic(msg)


__all__ = ["Panic", "panic"]
