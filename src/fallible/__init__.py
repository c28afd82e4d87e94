"""fallible: explicit success/failure values for Python.

Public API:
    - Result, Success, Failure: the result value and its two variants
    - Error, ErrorPayload: a minimal failure payload and the capability it meets
    - WrappedFailure: raised by ``expect()``/``unwrap()`` on a failure
    - attempt(), from_optional(): build results from plain Python
"""

from __future__ import annotations

import logging

from fallible.errors import (
    Error,
    ErrorPayload,
    FallibleError,
    InvariantViolationError,
    WrappedFailure,
)
from fallible.interop import attempt, from_optional
from fallible.result import Failure, Result, Success

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("fallible")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("fallible").addHandler(logging.NullHandler())

__all__ = [
    "Error",
    "ErrorPayload",
    "FallibleError",
    "Failure",
    "InvariantViolationError",
    "Result",
    "Success",
    "WrappedFailure",
    "attempt",
    "from_optional",
]
