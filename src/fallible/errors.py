"""Error payloads and the exception hierarchy for fallible.

Two distinct things live here:

- The ``ErrorPayload`` capability, which is all a ``Result`` requires of its
  failure value, plus ``Error``, a minimal concrete payload.
- The exceptions the library itself raises. ``WrappedFailure`` is the only one
  ordinary code should expect to see: it is what ``expect()``/``unwrap()``
  raise when called on a failure.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@runtime_checkable
class ErrorPayload(Protocol):
    """Anything exposing a human-readable ``message``."""

    @property
    def message(self) -> str: ...  # noqa: D102


@dataclass(frozen=True, slots=True)
class Error:
    """A plain failure payload.

    Domain code is free to use its own payload types; this one covers the
    common case of "a message, maybe a hint, maybe the exception behind it".
    """

    message: str
    hint: str | None = None
    #: Exception this payload was captured from, if any.
    cause: BaseException | None = None

    def __str__(self) -> str:
        return f"{self.message}. {self.hint}" if self.hint else self.message


class FallibleError(Exception):
    """Base exception for all fallible errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint

    @property
    def message(self) -> str:
        """The message this exception was raised with."""
        return str(self.args[0])


class WrappedFailure(FallibleError):
    """A failure payload converted into abrupt control flow.

    Raised only by ``Result.expect()`` and ``Result.unwrap()``. Holds the
    original payload object and nothing else.
    """

    def __init__(self, error: ErrorPayload) -> None:
        super().__init__(error.message)
        self.error = error

    def __reduce__(self) -> tuple[type[WrappedFailure], tuple[ErrorPayload]]:
        return (type(self), (self.error,))

    @property
    def message(self) -> str:
        """The wrapped payload's message, unmodified."""
        return self.error.message


class InvariantViolationError(FallibleError):
    """Raised when a caller breaks a combinator contract.

    Only raised while dev validation is enabled (``FALLIBLE_VALIDATE=1``),
    e.g. when the function passed to ``and_then`` returns something that is
    not a ``Result``.
    """

    def __init__(
        self, message: str, combinator: str | None = None, hint: str | None = None
    ) -> None:
        """Create an invariant violation error.

        Args:
            message: Human-readable description of the violated invariant.
            combinator: Optional name of the combinator that detected it.
            hint: Optional actionable hint for resolution.
        """
        self.combinator = combinator
        msg = message if combinator is None else f"[{combinator}] {message}"
        super().__init__(msg, hint=hint)
