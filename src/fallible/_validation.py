"""Contract checks shared by ``Failure`` and the chaining combinators.

``_require_payload`` always runs, when a ``Failure`` is built. The other
checks run only while ``FALLIBLE_VALIDATE=1`` and report misuse of
``and_``/``and_then``/``or_``/``or_else`` as ``InvariantViolationError``.
"""

from __future__ import annotations

import typing

from fallible.errors import ErrorPayload, InvariantViolationError


def _require(
    *,
    condition: bool,
    message: str,
    exc: type[Exception] = InvariantViolationError,
    field_name: str | None = None,
) -> None:
    if not condition:
        if field_name:
            raise exc(f"{field_name}: {message}")
        raise exc(message)


def _require_payload(error: object) -> None:
    """Ensure ``error`` exposes ``message`` as text, not as a method."""
    # The runtime Protocol check only tests hasattr().
    _require(
        condition=isinstance(error, ErrorPayload)
        and isinstance(getattr(error, "message", None), str),
        message=(
            "Failure requires an error payload whose 'message' is a str, "
            f"got {type(error).__name__}"
        ),
        exc=TypeError,
    )


def _require_callable(func: typing.Any, field_name: str) -> None:
    _require(
        condition=callable(func),
        message=f"must be callable, got {type(func).__name__}",
        field_name=field_name,
        exc=TypeError,
    )


def _require_result(value: object, combinator: str) -> None:
    """Ensure a combinator operand or callback output is a ``Result``."""
    from fallible.result import Result

    if not isinstance(value, Result):
        raise InvariantViolationError(
            f"expected a Result, got {type(value).__name__}",
            combinator=combinator,
            hint="Wrap plain values with Result.from_value() or Result.from_error().",
        )
