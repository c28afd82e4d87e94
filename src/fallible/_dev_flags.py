"""Opt-in debugging toggles for fallible.

Both toggles default to off. They are looked up on each call rather than
cached at import, so a test or a REPL session can switch them at runtime.
"""

from __future__ import annotations

import os

__all__ = ["dev_trace_enabled", "dev_validate_enabled"]


def dev_validate_enabled(*, override: bool | None = None) -> bool:
    """Whether chaining combinators check their operands and callbacks.

    ``override`` wins when given; otherwise ``FALLIBLE_VALIDATE=1`` turns it on.
    """
    if override is not None:
        return bool(override)
    return os.getenv("FALLIBLE_VALIDATE") == "1"


def dev_trace_enabled(*, override: bool | None = None) -> bool:
    """Whether ``expect()`` logs each failure it turns into ``WrappedFailure``.

    ``override`` wins when given; otherwise ``FALLIBLE_TRACE=1`` turns it on.
    Records go to the ``fallible.result`` logger at DEBUG level.
    """
    if override is not None:
        return bool(override)
    return os.getenv("FALLIBLE_TRACE") == "1"
