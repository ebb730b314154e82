import pytest

from vocab_practice.application.common import Err, Ok, Result
from vocab_practice.domain.common.errors import NotFoundError, ValidationError


def describe(result: Result[int]) -> str:
    match result:
        case Ok(value):
            return f"ok:{value}"
        case Err(error):
            return f"err:{error.code}"


def test_ok() -> None:
    result = Ok(3)

    assert result.is_ok()
    assert not result.is_err()
    assert result.unwrap() == 3
    assert result.map(lambda v: v * 2) == Ok(6)


def test_err_unwrap_raises_carried_error() -> None:
    error = NotFoundError.word(1)
    result = Err(error)

    assert result.is_err()
    assert result.unwrap_err() is error
    assert result.value_or(0) == 0
    with pytest.raises(NotFoundError):
        result.unwrap()


def test_ok_has_no_error() -> None:
    with pytest.raises(ValueError, match="Cannot get error from Ok result"):
        Ok(1).unwrap_err()


def test_pattern_matching() -> None:
    assert describe(Ok(5)) == "ok:5"
    assert describe(Err(ValidationError("bad"))) == "err:VALIDATION_ERROR"
