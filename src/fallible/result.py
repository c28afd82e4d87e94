"""Result type for explicit, composable error handling.

A ``Result`` is exactly one of ``Success(value)`` or ``Failure(error)``. Callers
thread it through combinators (``map``, ``and_then``, ``or_else``...) and decide
at a boundary how to handle a failure: supply a default, fold both cases into a
single value, or give up with ``unwrap()``, which raises ``WrappedFailure``.

Only ``expect()`` and ``unwrap()`` raise. Every other combinator is total;
exceptions raised by caller-supplied functions propagate unchanged.

Example:
    >>> from fallible import Error, Result
    >>> Result.from_value(1).map(lambda v: v + 1).unwrap()
    2
    >>> Result.from_error(Error("boom")).map_or_else(lambda e: e.message, str)
    'boom'
"""

from __future__ import annotations

import abc
from collections.abc import Callable
import dataclasses
import logging
import typing

from fallible._dev_flags import dev_trace_enabled, dev_validate_enabled
from fallible._validation import (
    _require_callable,
    _require_payload,
    _require_result,
)
from fallible.errors import ErrorPayload, WrappedFailure

log = logging.getLogger(__name__)

__all__ = ["Failure", "Result", "Success"]


class Result[T, E: ErrorPayload](abc.ABC):
    """A value that is either a ``Success`` or a ``Failure``.

    Never instantiated directly; use ``Result.from_value``/``Result.from_error``
    or the ``Success``/``Failure`` variants. Instances are immutable.
    """

    __slots__ = ()

    # --- Construction ---

    @staticmethod
    def from_value[V](value: V) -> Result[V, typing.Any]:
        """Wrap ``value`` as a success. ``None`` is a valid success value."""
        return Success(value)

    @staticmethod
    def from_error[F: ErrorPayload](error: F) -> Result[typing.Any, F]:
        """Wrap ``error`` as a failure.

        Raises:
            TypeError: If ``error`` does not expose a ``message``.
        """
        return Failure(error)

    # --- Querying the variant ---

    @abc.abstractmethod
    def is_success(self, predicate: Callable[[T], bool] | None = None) -> bool:
        """Return True for a success whose value satisfies ``predicate``.

        Without a predicate this is a plain variant check. The predicate is
        only evaluated on a success; a failure yields False.
        """

    @abc.abstractmethod
    def is_failure(self, predicate: Callable[[E], bool] | None = None) -> bool:
        """Return True for a failure whose error satisfies ``predicate``."""

    # --- Extracting the value ---

    @abc.abstractmethod
    def expect(self) -> None:
        """Raise ``WrappedFailure`` if this is a failure; no-op otherwise."""

    def unwrap(self) -> T:
        """Return the success value.

        Raises:
            WrappedFailure: If this is a failure. The exception carries the
                original error payload and its message unmodified.
        """
        self.expect()
        return typing.cast("Success[T, E]", self).value

    @abc.abstractmethod
    def unwrap_or(self, default: T) -> T:
        """Return the success value, or the eagerly supplied ``default``."""

    @abc.abstractmethod
    def unwrap_or_else(self, f: Callable[[E], T]) -> T:
        """Return the success value, or ``f(error)`` computed only on failure."""

    # --- Adapters ---

    @abc.abstractmethod
    def ok(self) -> T | None:
        """Return the success value, or None for a failure.

        ``Success(None).ok()`` is also None; use ``is_success()`` when that
        distinction matters.
        """

    @abc.abstractmethod
    def err(self) -> E | None:
        """Return the error payload, or None for a success."""

    # --- Transforming contained values ---

    @abc.abstractmethod
    def map[U](self, f: Callable[[T], U]) -> Result[U, E]:
        """Transform the success value; a failure passes through untouched."""

    @abc.abstractmethod
    def map_or[U](self, default: U, f: Callable[[T], U]) -> U:
        """Return ``f(value)`` on success, else ``default``."""

    @abc.abstractmethod
    def map_or_else[U](
        self, on_error: Callable[[E], U], on_success: Callable[[T], U]
    ) -> U:
        """Fold both variants into a single value."""

    @abc.abstractmethod
    def map_err[F: ErrorPayload](self, f: Callable[[E], F]) -> Result[T, F]:
        """Transform the error payload; a success passes through untouched."""

    def match[U](self, on_success: Callable[[T], U], on_error: Callable[[E], U]) -> U:
        """Same as ``map_or_else`` with the success handler first."""
        return self.map_or_else(on_error, on_success)

    @abc.abstractmethod
    def inspect(self, f: Callable[[T], object]) -> typing.Self:
        """Call ``f(value)`` for its side effect on success; return ``self``."""

    @abc.abstractmethod
    def inspect_err(self, f: Callable[[E], object]) -> typing.Self:
        """Call ``f(error)`` for its side effect on failure; return ``self``."""

    # --- Boolean operations, eager and lazy ---

    @abc.abstractmethod
    def and_[U](self, other: Result[U, E]) -> Result[U, E]:
        """Return ``other`` on success, else this failure."""

    @abc.abstractmethod
    def and_then[U](self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Return ``f(value)`` on success, else this failure without calling ``f``."""

    @abc.abstractmethod
    def or_[F: ErrorPayload](self, other: Result[T, F]) -> Result[T, F]:
        """Return this success, else ``other``."""

    @abc.abstractmethod
    def or_else[F: ErrorPayload](
        self, f: Callable[[E], Result[T, F]]
    ) -> Result[T, F]:
        """Return this success, else ``f(error)`` without calling ``f`` on success."""


@dataclasses.dataclass(frozen=True, slots=True)
class Success[T, E: ErrorPayload](Result[T, E]):
    """A successful result."""

    value: T

    def is_success(self, predicate: Callable[[T], bool] | None = None) -> bool:
        return True if predicate is None else bool(predicate(self.value))

    def is_failure(self, predicate: Callable[[E], bool] | None = None) -> bool:
        return False

    def expect(self) -> None:
        return None

    def unwrap_or(self, default: T) -> T:
        return self.value

    def unwrap_or_else(self, f: Callable[[E], T]) -> T:
        return self.value

    def ok(self) -> T | None:
        return self.value

    def err(self) -> E | None:
        return None

    def map[U](self, f: Callable[[T], U]) -> Result[U, E]:
        return Success(f(self.value))

    def map_or[U](self, default: U, f: Callable[[T], U]) -> U:
        return f(self.value)

    def map_or_else[U](
        self, on_error: Callable[[E], U], on_success: Callable[[T], U]
    ) -> U:
        return on_success(self.value)

    def map_err[F: ErrorPayload](self, f: Callable[[E], F]) -> Result[T, F]:
        return self  # type: ignore[return-value]

    def inspect(self, f: Callable[[T], object]) -> typing.Self:
        f(self.value)
        return self

    def inspect_err(self, f: Callable[[E], object]) -> typing.Self:
        return self

    def and_[U](self, other: Result[U, E]) -> Result[U, E]:
        _check_operand(other, "and_")
        return other

    def and_then[U](self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        return _chain(f, self.value, "and_then")

    def or_[F: ErrorPayload](self, other: Result[T, F]) -> Result[T, F]:
        _check_operand(other, "or_")
        return self  # type: ignore[return-value]

    def or_else[F: ErrorPayload](
        self, f: Callable[[E], Result[T, F]]
    ) -> Result[T, F]:
        _check_callback(f, "or_else")
        return self  # type: ignore[return-value]


@dataclasses.dataclass(frozen=True, slots=True)
class Failure[T, E: ErrorPayload](Result[T, E]):
    """A failed result, containing the error payload."""

    error: E

    def __post_init__(self) -> None:
        _require_payload(self.error)

    def is_success(self, predicate: Callable[[T], bool] | None = None) -> bool:
        return False

    def is_failure(self, predicate: Callable[[E], bool] | None = None) -> bool:
        return True if predicate is None else bool(predicate(self.error))

    def expect(self) -> None:
        if dev_trace_enabled():
            log.debug(
                "Raising WrappedFailure for %s: %s",
                type(self.error).__name__,
                self.error.message,
            )
        raise WrappedFailure(self.error)

    def unwrap_or(self, default: T) -> T:
        return default

    def unwrap_or_else(self, f: Callable[[E], T]) -> T:
        return f(self.error)

    def ok(self) -> T | None:
        return None

    def err(self) -> E | None:
        return self.error

    def map[U](self, f: Callable[[T], U]) -> Result[U, E]:
        return self  # type: ignore[return-value]

    def map_or[U](self, default: U, f: Callable[[T], U]) -> U:
        return default

    def map_or_else[U](
        self, on_error: Callable[[E], U], on_success: Callable[[T], U]
    ) -> U:
        return on_error(self.error)

    def map_err[F: ErrorPayload](self, f: Callable[[E], F]) -> Result[T, F]:
        return Failure(f(self.error))

    def inspect(self, f: Callable[[T], object]) -> typing.Self:
        return self

    def inspect_err(self, f: Callable[[E], object]) -> typing.Self:
        f(self.error)
        return self

    def and_[U](self, other: Result[U, E]) -> Result[U, E]:
        _check_operand(other, "and_")
        return self  # type: ignore[return-value]

    def and_then[U](self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        _check_callback(f, "and_then")
        return self  # type: ignore[return-value]

    def or_[F: ErrorPayload](self, other: Result[T, F]) -> Result[T, F]:
        _check_operand(other, "or_")
        return other

    def or_else[F: ErrorPayload](
        self, f: Callable[[E], Result[T, F]]
    ) -> Result[T, F]:
        return _chain(f, self.error, "or_else")


# --- Dev-time contract checks (no-ops unless FALLIBLE_VALIDATE=1) ---


def _check_operand(other: object, combinator: str) -> None:
    if dev_validate_enabled():
        _require_result(other, combinator)


def _check_callback(f: object, combinator: str) -> None:
    if dev_validate_enabled():
        _require_callable(f, f"{combinator}(f)")


def _chain[A, R](f: Callable[[A], R], arg: A, combinator: str) -> R:
    """Invoke a chaining callback, validating its output when enabled."""
    if not dev_validate_enabled():
        return f(arg)
    _require_callable(f, f"{combinator}(f)")
    out = f(arg)
    _require_result(out, combinator)
    return out
