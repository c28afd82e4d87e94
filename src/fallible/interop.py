"""Bridges from plain Python into ``Result`` values.

``unwrap()`` turns a failure into an exception; ``attempt()`` goes the other
way, capturing an exception as a failure so it can be composed like any other.
"""

from __future__ import annotations

from collections.abc import Callable
import logging
import typing

from fallible.errors import Error, ErrorPayload
from fallible.result import Failure, Result, Success

log = logging.getLogger(__name__)

__all__ = ["attempt", "from_optional"]


def attempt[T](
    fn: Callable[..., T],
    *args: typing.Any,
    catch: type[BaseException] | tuple[type[BaseException], ...] = (Exception,),
    **kwargs: typing.Any,
) -> Result[T, Error]:
    """Call ``fn(*args, **kwargs)`` and capture the outcome as a ``Result``.

    Args:
        fn: The callable to run.
        *args: Positional arguments forwarded to ``fn``.
        catch: Exception type(s) to capture. Anything else propagates.
        **kwargs: Keyword arguments forwarded to ``fn``.

    Returns:
        ``Success`` with the return value, or ``Failure`` holding an ``Error``
        whose ``cause`` is the captured exception.

    Example:
        attempt(int, "42")    # Success(value=42)
        attempt(int, "nope")  # Failure(error=Error(message="invalid literal ..."))
    """
    try:
        value = fn(*args, **kwargs)
    except catch as exc:
        log.debug("attempt(%s) captured %s", _name_of(fn), type(exc).__name__)
        return Failure(Error(str(exc) or type(exc).__name__, cause=exc))
    return Success(value)


def from_optional[T, E: ErrorPayload](value: T | None, error: E) -> Result[T, E]:
    """Return ``Success(value)``, or ``Failure(error)`` when ``value`` is None."""
    if value is None:
        return Failure(error)
    return Success(value)


def _name_of(fn: Callable[..., typing.Any]) -> str:
    return getattr(fn, "__qualname__", None) or type(fn).__name__
