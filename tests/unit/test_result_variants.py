"""Unit tests for Result construction, querying and extraction."""

from __future__ import annotations

from dataclasses import dataclass
import pickle

import pytest

from fallible import Error, Failure, Result, Success, WrappedFailure

pytestmark = pytest.mark.unit


@dataclass(frozen=True)
class LookupMiss:
    """A domain payload that is not an ``Error`` but meets the capability."""

    key: str

    @property
    def message(self) -> str:
        return f"missing key {self.key!r}"


# --- Construction ---


def test_from_value_builds_success() -> None:
    result = Result.from_value(1)

    assert isinstance(result, Success)
    assert result == Success(1)


def test_from_error_builds_failure() -> None:
    error = Error("boom")
    result = Result.from_error(error)

    assert isinstance(result, Failure)
    assert result.error is error


def test_result_base_is_abstract() -> None:
    with pytest.raises(TypeError):
        Result()  # type: ignore[abstract]


def test_variants_are_immutable() -> None:
    result = Success(1)
    with pytest.raises(AttributeError):
        result.value = 2  # type: ignore[misc]


def test_custom_payload_satisfies_capability() -> None:
    result = Result.from_error(LookupMiss("id"))

    assert result.err() == LookupMiss("id")
    with pytest.raises(WrappedFailure) as exc:
        result.unwrap()
    assert exc.value.message == "missing key 'id'"


# --- Null policy ---


def test_none_is_a_valid_success_value() -> None:
    result = Result.from_value(None)

    assert result.is_success()
    assert result.unwrap() is None
    # ok() cannot tell Success(None) apart from a failure; is_success() can.
    assert result.ok() is None


def test_none_error_is_rejected() -> None:
    with pytest.raises(TypeError, match="message"):
        Result.from_error(None)  # type: ignore[arg-type]


@pytest.mark.parametrize("bad", ["plain string", 42, ValueError("no message attr")])
def test_payload_without_message_is_rejected(bad: object) -> None:
    with pytest.raises(TypeError):
        Failure(bad)  # type: ignore[type-var]


class MethodMessage:
    def message(self) -> str:
        return "getter style"


class NonTextMessage:
    message = 404


@pytest.mark.parametrize("bad", [MethodMessage(), NonTextMessage()])
def test_payload_message_must_be_text(bad: object) -> None:
    with pytest.raises(TypeError, match="'message' is a str"):
        Result.from_error(bad)  # type: ignore[arg-type]


# --- Querying ---


def test_success_queries(make_error) -> None:
    result = Success(1)

    assert result.is_success()
    assert not result.is_failure()
    assert result.is_success(lambda v: v == 1)
    assert not result.is_success(lambda v: v == 2)
    assert not result.is_failure(lambda e: True)


def test_failure_queries(make_error) -> None:
    result = Failure(make_error("bad input"))

    assert result.is_failure()
    assert not result.is_success()
    assert result.is_failure(lambda e: e.message == "bad input")
    assert not result.is_failure(lambda e: e.message == "other")


def test_predicate_not_evaluated_on_other_variant(make_error) -> None:
    def explode(_):
        raise AssertionError("predicate must not run")

    assert Success(1).is_failure(explode) is False
    assert Failure(make_error()).is_success(explode) is False


# --- Extraction ---


def test_unwrap_returns_value_on_success() -> None:
    assert Success("v").unwrap() == "v"
    assert Success("v").expect() is None


def test_unwrap_raises_wrapped_failure_with_original_payload(make_error) -> None:
    error = make_error("payload message", hint="ignored by the wrapper")
    result = Failure(error)

    with pytest.raises(WrappedFailure) as exc:
        result.unwrap()

    assert exc.value.error is error
    assert exc.value.message == "payload message"
    assert str(exc.value) == "payload message"


def test_expect_raises_on_failure(make_error) -> None:
    with pytest.raises(WrappedFailure, match="^boom$"):
        Failure(make_error()).expect()


def test_ok_and_err_adapters(make_error) -> None:
    error = make_error()

    assert Success(3).ok() == 3
    assert Success(3).err() is None
    assert Failure(error).ok() is None
    assert Failure(error).err() is error


# --- Value semantics ---


def test_equality_is_by_variant_and_payload(make_error) -> None:
    assert Success(1) == Success(1)
    assert Success(1) != Success(2)
    assert Failure(make_error("a")) == Failure(make_error("a"))
    assert Success("boom") != Failure(make_error("boom"))


def test_hashable_when_payload_is() -> None:
    assert len({Success(1), Success(1), Failure(Error("x"))}) == 2


def test_pickle_preserves_variant_and_payload(make_error) -> None:
    for result in (Success({"k": [1, 2]}), Failure(make_error("lost", hint="retry"))):
        restored = pickle.loads(pickle.dumps(result))
        assert restored == result
        assert type(restored) is type(result)


def test_structural_pattern_matching(make_error) -> None:
    def describe(result: Result[int, Error]) -> str:
        match result:
            case Success(value):
                return f"ok:{value}"
            case Failure(error):
                return f"err:{error.message}"
        return "unreachable"

    assert describe(Success(1)) == "ok:1"
    assert describe(Failure(make_error("x"))) == "err:x"
