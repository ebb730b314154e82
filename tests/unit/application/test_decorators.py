import pytest
from sqlalchemy.exc import OperationalError

from vocab_practice.application.common import Err, Ok, Result, use_case_operation
from vocab_practice.domain.common.errors import ErrorCode, ValidationError
from vocab_practice.exceptions import PersistenceError


class Sample:
    def __init__(self) -> None:
        self.calls = 0

    @use_case_operation("sample")
    def succeed(self) -> Result[str]:
        return Ok("done")

    @use_case_operation("sample")
    def reject(self) -> Result[str]:
        raise ValidationError("bad input", field="limit")

    @use_case_operation("sample")
    def store_down(self) -> Result[str]:
        self.calls += 1
        raise PersistenceError("words.find_all", "OperationalError") from OperationalError(
            "SELECT 1", {}, Exception("connection lost")
        )

    @use_case_operation("sample")
    def crash(self) -> Result[str]:
        raise RuntimeError("bug")


def test_ok_passes_through() -> None:
    assert Sample().succeed() == Ok("done")


def test_domain_error_becomes_err() -> None:
    result = Sample().reject()

    assert isinstance(result, Err)
    assert result.error.code is ErrorCode.VALIDATION_ERROR


def test_persistence_error_becomes_internal_error_without_retry() -> None:
    sample = Sample()

    result = sample.store_down()

    assert isinstance(result, Err)
    assert result.error.code is ErrorCode.INTERNAL_ERROR
    assert result.error.details == {"operation": "sample"}
    assert sample.calls == 1


def test_unexpected_exception_propagates() -> None:
    with pytest.raises(RuntimeError, match="bug"):
        Sample().crash()


def test_wraps_preserves_name() -> None:
    assert Sample.succeed.__name__ == "succeed"
